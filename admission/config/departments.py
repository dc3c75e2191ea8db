# admission/config/departments.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from admission.domain.errors import CapacityLimitError, CatalogError
from admission.domain.models import CHEMISTRY, COMPUTER_SCIENCE, MATH, PHYSICS, SUBJECTS


@dataclass(frozen=True)
class DepartmentConfig:
    """
    Описание департамента для движка:
    - name: уникальное имя (совпадает с токеном приоритета во входных данных)
    - subjects: предметы, по которым считается конкурсный балл
    - capacity: лимит мест (общий для всех департаментов прогона)
    """
    name: str
    subjects: tuple[str, ...]
    capacity: int = 0


# Каталог фиксирован; лимит подставляется на каждый прогон через build_catalog().
DEFAULT_CATALOG: tuple[DepartmentConfig, ...] = (
    DepartmentConfig("Physics", (PHYSICS, MATH)),
    DepartmentConfig("Chemistry", (CHEMISTRY,)),
    DepartmentConfig("Mathematics", (MATH,)),
    DepartmentConfig("Engineering", (COMPUTER_SCIENCE, MATH)),
    DepartmentConfig("Biotech", (CHEMISTRY, PHYSICS)),
)


def validate_catalog(catalog: Iterable[DepartmentConfig]) -> None:
    seen: set[str] = set()
    for dept in catalog:
        if dept.name in seen:
            raise CatalogError(f"департамент {dept.name!r} указан дважды")
        seen.add(dept.name)
        if not dept.subjects:
            raise CatalogError(f"у департамента {dept.name!r} нет предметов")
        unknown = [s for s in dept.subjects if s not in SUBJECTS]
        if unknown:
            raise CatalogError(f"у департамента {dept.name!r} неизвестные предметы: {unknown}")
        if dept.capacity < 0:
            raise CapacityLimitError(f"отрицательный лимит у {dept.name!r}: {dept.capacity}")


def build_catalog(limit: int, catalog: Sequence[DepartmentConfig] = DEFAULT_CATALOG) -> List[DepartmentConfig]:
    """Каталог с общим лимитом мест `limit` для каждого департамента."""
    if limit < 0:
        raise CapacityLimitError(f"лимит мест не может быть отрицательным: {limit}")
    configured = [DepartmentConfig(d.name, tuple(d.subjects), limit) for d in catalog]
    validate_catalog(configured)
    return configured
