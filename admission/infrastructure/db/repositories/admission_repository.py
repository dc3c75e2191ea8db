# repositories/admission_repository.py
from typing import Dict, Iterable, List, Tuple

from sqlalchemy import delete
from sqlalchemy.orm import Session

from admission.domain.models import (
    AdmissionDecision, AdmittedApplicant, DepartmentResult, DepartmentSummary,
)
from admission.infrastructure.db.models import AdmissionResultModel, DepartmentSummaryModel


class AdmissionRepository:
    def __init__(self, session: Session):
        self._session = session

    # ——— МАППЕРЫ ——————————————————————————————————————————————
    @staticmethod
    def _to_result_models(result: DepartmentResult, rounds: Dict[Tuple[str, str], int]) -> List[AdmissionResultModel]:
        return [
            AdmissionResultModel(
                department=result.name,
                position=pos,
                applicant_name=a.name,
                score=a.score,
                round_index=rounds[(result.name, a.name)],
            )
            for pos, a in enumerate(result.admitted)
        ]

    @staticmethod
    def _to_admitted_domain(m: AdmissionResultModel) -> AdmittedApplicant:
        return AdmittedApplicant(name=m.applicant_name, score=m.score)

    @staticmethod
    def _to_summary_model(s: DepartmentSummary) -> DepartmentSummaryModel:
        return DepartmentSummaryModel(
            department=s.department,
            capacity=s.capacity,
            pool_size=s.pool_size,
            admitted_count=s.admitted_count,
            passing_score=s.passing_score,
        )

    @staticmethod
    def _to_summary_domain(m: DepartmentSummaryModel) -> DepartmentSummary:
        return DepartmentSummary(
            department=m.department,
            capacity=m.capacity,
            pool_size=m.pool_size,
            admitted_count=m.admitted_count,
            passing_score=m.passing_score,
        )

    # ——— ЗАПИСЬ ——————————————————————————————————————————————
    def clear_results(self) -> None:
        self._session.execute(delete(AdmissionResultModel))
        self._session.execute(delete(DepartmentSummaryModel))

    def add_results_bulk(
            self,
            results: Iterable[DepartmentResult],
            decisions: Iterable[AdmissionDecision],
    ) -> None:
        """decisions нужны, чтобы сохранить раунд зачисления каждого абитуриента."""
        rounds = {(d.department, d.applicant): d.round_index for d in decisions}
        models: List[AdmissionResultModel] = []
        for result in results:
            models.extend(self._to_result_models(result, rounds))
        self._session.add_all(models)

    def add_summaries_bulk(self, summaries: Iterable[DepartmentSummary]) -> None:
        self._session.add_all([self._to_summary_model(s) for s in summaries])

    def commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()

    # ——— ЧТЕНИЕ ——————————————————————————————————————————————
    def get_results_by_department(self, department: str) -> List[AdmittedApplicant]:
        rows = (
            self._session.query(AdmissionResultModel)
            .filter(AdmissionResultModel.department == department)
            .order_by(AdmissionResultModel.position)
            .all()
        )
        return [self._to_admitted_domain(r) for r in rows]

    def get_all_results(self) -> List[DepartmentResult]:
        """
        Все департаменты (по имени), включая тех, где никого не зачислили:
        список департаментов берём из department_summaries.
        """
        names = [
            row.department
            for row in self._session.query(DepartmentSummaryModel.department)
            .order_by(DepartmentSummaryModel.department)
            .all()
        ]
        rows = (
            self._session.query(AdmissionResultModel)
            .order_by(AdmissionResultModel.department, AdmissionResultModel.position)
            .all()
        )
        grouped: Dict[str, List[AdmittedApplicant]] = {}
        for r in rows:
            grouped.setdefault(r.department, []).append(self._to_admitted_domain(r))
        return [
            DepartmentResult(name=name, admitted=tuple(grouped.get(name, [])))
            for name in sorted(set(names) | set(grouped))
        ]

    def get_all_summaries(self) -> List[DepartmentSummary]:
        rows = self._session.query(DepartmentSummaryModel).order_by(DepartmentSummaryModel.department).all()
        return [self._to_summary_domain(r) for r in rows]
