# admission/infrastructure/db/queries/statistics.py

from typing import List, Optional, Tuple

from sqlalchemy import desc
from sqlalchemy.orm import Session

from admission.infrastructure.db.models import DepartmentSummaryModel


def passing_scores(session: Session) -> List[Tuple[str, Optional[float]]]:
    """
    Проходной балл (минимальный среди зачисленных) по каждому департаменту.
    None — никого не зачислили.
    """
    q = (
        session.query(DepartmentSummaryModel.department, DepartmentSummaryModel.passing_score)
        .order_by(DepartmentSummaryModel.department)
    )
    return [(row.department, row.passing_score) for row in q.all()]


def departments_with_free_seats(session: Session) -> List[str]:
    """Департаменты, где admitted_count < capacity."""
    q = (
        session.query(DepartmentSummaryModel.department)
        .filter(DepartmentSummaryModel.admitted_count < DepartmentSummaryModel.capacity)
        .order_by(DepartmentSummaryModel.department)
    )
    return [row.department for row in q.all()]


def top_n_competition(session: Session, limit: int = 5) -> List[Tuple[str, float]]:
    """
    Топ N департаментов по конкуренции (заявок в пуле на место).
    Департаменты с нулевым лимитом пропускаем.
    """
    competition = (DepartmentSummaryModel.pool_size * 1.0 / DepartmentSummaryModel.capacity).label("competition")
    q = (
        session.query(DepartmentSummaryModel.department, competition)
        .filter(DepartmentSummaryModel.capacity > 0)
        .order_by(desc("competition"), DepartmentSummaryModel.department)
        .limit(limit)
    )
    return [(row.department, float(row.competition)) for row in q.all()]
