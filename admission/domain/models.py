from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

PHYSICS = "physics"
CHEMISTRY = "chemistry"
MATH = "math"
COMPUTER_SCIENCE = "computer science"
SPECIAL = "special"

# порядок совпадает с порядком баллов во входной записи
SUBJECTS = (PHYSICS, CHEMISTRY, MATH, COMPUTER_SCIENCE, SPECIAL)


@dataclass
class Applicant:
    """
    Абитуриент:
    - name: полное имя («Имя Фамилия»), вторичный ключ сортировки
    - grades: subject -> балл (все пять предметов из SUBJECTS)
    - department_options: департаменты по приоритету (0 — первый выбор)
    - accepted: выставляется один раз, при зачислении
    """
    name: str
    grades: Dict[str, float]
    department_options: List[str]
    accepted: bool = False

    @classmethod
    def from_scores(cls, name: str, scores: Sequence[float], department_options: Sequence[str]) -> "Applicant":
        if len(scores) != len(SUBJECTS):
            raise ValueError(f"ожидалось {len(SUBJECTS)} баллов, получено {len(scores)}")
        return cls(
            name=name,
            grades=dict(zip(SUBJECTS, (float(s) for s in scores))),
            department_options=list(department_options),
        )

    def score(self, subjects: Sequence[str]) -> float:
        """
        Конкурсный балл для набора предметов: среднее по subjects,
        но не ниже балла за special.
        """
        mean = sum(self.grades[s] for s in subjects) / len(subjects)
        special = self.grades[SPECIAL]
        if special > mean:
            return special
        return mean

    def option(self, round_index: int) -> str | None:
        """Департамент на позиции round_index или None, если приоритетов меньше."""
        if 0 <= round_index < len(self.department_options):
            return self.department_options[round_index]
        return None


@dataclass
class Department:
    """
    Департамент. applicants / accepted хранят индексы в общем реестре
    абитуриентов движка, а не сами объекты.
    """
    name: str
    subjects: tuple[str, ...]
    limit: int
    applicants: List[int] = field(default_factory=list)
    accepted: List[int] = field(default_factory=list)

    def add_applicant(self, index: int) -> None:
        self.applicants.append(index)

    @property
    def is_full(self) -> bool:
        return len(self.accepted) >= self.limit


@dataclass(frozen=True)
class AdmittedApplicant:
    name: str
    score: float


@dataclass(frozen=True)
class DepartmentResult:
    """Департамент с зачисленными в порядке ранжирования."""
    name: str
    admitted: tuple[AdmittedApplicant, ...]


@dataclass(frozen=True)
class AdmissionDecision:
    """Запись журнала зачислений: кто, куда, в каком раунде."""
    applicant: str
    department: str
    round_index: int
    score: float


@dataclass(frozen=True)
class DepartmentSummary:
    """
    Сводка по департаменту после прогона.
    passing_score — минимальный балл среди зачисленных (None, если никого).
    """
    department: str
    capacity: int
    pool_size: int
    admitted_count: int
    passing_score: float | None
