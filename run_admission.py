#!/usr/bin/env python3
import sys

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from admission.application.use_cases.run_admission import RunAdmissionUseCase
from admission.config.config import settings
from admission.config.logger import logger
from admission.domain.errors import AdmissionError
from admission.infrastructure.db.models import Base
from admission.infrastructure.db.repositories.admission_repository import AdmissionRepository
from admission.infrastructure.export.results_writer import print_results
from admission.infrastructure.parser.applicants_parser import parse_capacity_limit


def main() -> None:
    logger.info("=== Распределение абитуриентов ===")

    session = None
    try:
        if settings.capacity_limit is not None:
            limit = settings.capacity_limit
        else:
            limit = parse_capacity_limit(sys.stdin.readline())

        repo = None
        if settings.results_db_enabled:
            settings.data_dir.mkdir(parents=True, exist_ok=True)
            engine = create_engine(settings.database_url, echo=settings.db_echo, future=True)
            Base.metadata.create_all(engine)
            Session = sessionmaker(bind=engine, future=True)
            session = Session()
            repo = AdmissionRepository(session)

        results = RunAdmissionUseCase(repo=repo).execute(capacity_limit=limit)
        print_results(results)
    except (AdmissionError, OSError, SQLAlchemyError) as exc:
        logger.exception("❌ Ошибка распределения: %s", exc)
        sys.exit(1)
    finally:
        if session is not None:
            session.close()
            logger.info("Сессия БД закрыта.")


if __name__ == "__main__":
    main()
