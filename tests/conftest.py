from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from admission.config.config import Settings
from admission.domain.models import Applicant
from admission.infrastructure.db.models import Base


def _make_applicant(
        name: str,
        options,
        *,
        physics: float = 0,
        chemistry: float = 0,
        math: float = 0,
        cs: float = 0,
        special: float = 0,
) -> Applicant:
    return Applicant.from_scores(name, [physics, chemistry, math, cs, special], options)


@pytest.fixture
def make_applicant():
    return _make_applicant


@pytest.fixture
def admission_settings(tmp_path) -> Settings:
    return Settings(
        DATA_DIR=tmp_path,
        SAVE_RESULT_FILES=True,
        RESULTS_DB_ENABLED=False,
        ADMISSION_ROUNDS=3,
    )


@pytest.fixture
def session():
    engine = create_engine("sqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, future=True)
    s = Session()
    yield s
    s.close()
    engine.dispose()
