from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from admission.config.config import Settings, settings as default_settings
from admission.config.departments import DEFAULT_CATALOG, DepartmentConfig, build_catalog
from admission.config.logger import logger
from admission.domain.models import Applicant, DepartmentResult
from admission.infrastructure.db.repositories.admission_repository import AdmissionRepository
from admission.infrastructure.export.results_writer import save_results
from admission.infrastructure.parser.applicants_parser import load_applicants
from admission.services.admission_statistics import department_summaries, summary_frame
from admission.services.allocation_engine import AllocationEngine


class RunAdmissionUseCase:
    """
    Один прогон распределения:
        1. читаем абитуриентов (или берём готовый список)
        2. строим каталог департаментов с общим лимитом
        3. AllocationEngine.run()
        4. пишем <department>.txt и результаты в БД (если включено)

    Ошибки чтения/сегментации прерывают прогон до любой записи.
    """

    def __init__(
            self,
            repo: Optional[AdmissionRepository] = None,
            config: Settings | None = None,
            catalog: Sequence[DepartmentConfig] = DEFAULT_CATALOG,
    ):
        self._repo = repo
        self._settings = config or default_settings
        self._catalog = catalog
        self.engine: AllocationEngine | None = None

    def execute(
            self,
            capacity_limit: int,
            applicants: Sequence[Applicant] | None = None,
            applicants_path: str | Path | None = None,
    ) -> List[DepartmentResult]:
        if applicants is None:
            applicants = load_applicants(applicants_path or self._settings.applicants_path)

        departments = build_catalog(capacity_limit, self._catalog)
        self.engine = AllocationEngine(departments, applicants, rounds=self._settings.admission_rounds)
        results = self.engine.run()

        frame = summary_frame(self.engine)
        logger.info("Сводка по департаментам:\n%s", frame.to_string(index=False))

        if self._settings.save_result_files:
            save_results(results, self._settings.results_dir)
        if self._repo is not None:
            self._store(results, frame)
        return results

    def _store(self, results: List[DepartmentResult], frame) -> None:
        logger.info("→ Очистка старых результатов…")
        try:
            self._repo.clear_results()
            self._repo.add_results_bulk(results, self.engine.decisions)
            self._repo.add_summaries_bulk(department_summaries(frame))
            self._repo.commit()
        except SQLAlchemyError as db_err:
            logger.exception("Ошибка транзакции, выполняем rollback: %s", db_err)
            self._repo.rollback()
            raise
        logger.info("Результаты сохранены в БД: %d департаментов", len(results))
