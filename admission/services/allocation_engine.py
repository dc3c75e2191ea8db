# admission/services/allocation_engine.py
from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Sequence

from admission.config.departments import DepartmentConfig, validate_catalog
from admission.config.logger import logger
from admission.domain.errors import UnknownDepartmentError
from admission.domain.models import (
    AdmissionDecision,
    AdmittedApplicant,
    Applicant,
    Department,
    DepartmentResult,
)

DEFAULT_ROUNDS = 3


def rank_applicants(registry: Sequence[Applicant], indices: Sequence[int], subjects: Sequence[str]) -> List[int]:
    """
    Сортировка индексов: конкурсный балл по убыванию, при равенстве — имя по возрастанию.
    """
    return sorted(indices, key=lambda i: (-registry[i].score(subjects), registry[i].name))


class AllocationEngine:
    """
    Многораундовое распределение абитуриентов по департаментам:
      • сегментация: каждый абитуриент попадает в пул каждого выбранного департамента;
      • пулы ранжируются (балл ↓, имя ↑);
      • раунд r: департаменты по порядку объявления просматривают свой пул сверху
        и зачисляют ещё свободных абитуриентов, у которых r-й приоритет — этот департамент,
        пока не кончатся места;
      • в конце списки зачисленных переранжируются, департаменты сортируются по имени.

    Абитуриенты хранятся в одном реестре (self.applicants); пулы держат индексы.
    """

    def __init__(
            self,
            departments: Sequence[DepartmentConfig],
            applicants: Sequence[Applicant],
            rounds: int = DEFAULT_ROUNDS,
    ):
        if rounds < 0:
            raise ValueError(f"число раундов не может быть отрицательным: {rounds}")
        validate_catalog(departments)

        self.departments: List[Department] = [
            Department(name=d.name, subjects=tuple(d.subjects), limit=d.capacity) for d in departments
        ]
        self._dept_index: Dict[str, int] = {d.name: i for i, d in enumerate(self.departments)}
        # собственные копии: флаг accepted у объектов вызывающего не трогаем
        self.applicants: List[Applicant] = [
            replace(a, department_options=list(a.department_options), accepted=False) for a in applicants
        ]
        self.rounds = rounds
        self.decisions: List[AdmissionDecision] = []
        self._completed = False

        self._check_preferences()

    def _check_preferences(self) -> None:
        for applicant in self.applicants:
            for option in applicant.department_options:
                if option not in self._dept_index:
                    raise UnknownDepartmentError(applicant.name, option)

    def department(self, name: str) -> Department:
        return self.departments[self._dept_index[name]]

    # --------------------------------------------------------------------- #
    def segment_applicants(self) -> None:
        for idx, applicant in enumerate(self.applicants):
            for option in applicant.department_options:
                self.department(option).add_applicant(idx)
        logger.debug(
            "Пулы: %s",
            ", ".join(f"{d.name}={len(d.applicants)}" for d in self.departments),
        )

    def sort_applicants(self) -> None:
        for dept in self.departments:
            dept.applicants = rank_applicants(self.applicants, dept.applicants, dept.subjects)

    def select_candidates(self) -> None:
        for round_index in range(self.rounds):
            admitted_before = len(self.decisions)
            for dept in self.departments:
                for idx in dept.applicants:
                    if dept.is_full:
                        break
                    applicant = self.applicants[idx]
                    if not applicant.accepted and applicant.option(round_index) == dept.name:
                        self._admit(dept, idx, round_index)
            logger.info("Раунд %d: зачислено %d", round_index + 1, len(self.decisions) - admitted_before)

    def _admit(self, dept: Department, idx: int, round_index: int) -> None:
        applicant = self.applicants[idx]
        dept.accepted.append(idx)
        applicant.accepted = True
        score = applicant.score(dept.subjects)
        self.decisions.append(AdmissionDecision(applicant.name, dept.name, round_index, score))
        logger.debug("  %s → %s (%.1f, раунд %d)", applicant.name, dept.name, score, round_index + 1)

    def sort_departments(self) -> None:
        for dept in self.departments:
            dept.accepted = rank_applicants(self.applicants, dept.accepted, dept.subjects)
        self.departments.sort(key=lambda d: d.name)
        self._dept_index = {d.name: i for i, d in enumerate(self.departments)}

    # --------------------------------------------------------------------- #
    def run(self) -> List[DepartmentResult]:
        if self._completed:
            raise RuntimeError("распределение уже выполнено; создайте новый AllocationEngine")

        logger.info(
            "→ Распределение: %d абитуриентов, %d департаментов, раундов=%d",
            len(self.applicants), len(self.departments), self.rounds,
        )
        self.segment_applicants()
        self.sort_applicants()
        self.select_candidates()
        self.sort_departments()
        self._completed = True

        logger.info(
            "Распределение завершено: зачислено %d, без места %d",
            len(self.decisions), len(self.unassigned()),
        )
        return self.results()

    def results(self) -> List[DepartmentResult]:
        return [
            DepartmentResult(
                name=dept.name,
                admitted=tuple(
                    AdmittedApplicant(self.applicants[i].name, self.applicants[i].score(dept.subjects))
                    for i in dept.accepted
                ),
            )
            for dept in self.departments
        ]

    def unassigned(self) -> List[Applicant]:
        return [a for a in self.applicants if not a.accepted]
