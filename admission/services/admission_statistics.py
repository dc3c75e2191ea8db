# admission/services/admission_statistics.py
from __future__ import annotations

from typing import List

import pandas as pd

from admission.domain.models import DepartmentSummary
from admission.services.allocation_engine import AllocationEngine

SUMMARY_COLUMNS = [
    "department", "capacity", "pool_size", "admitted_count",
    "free_seats", "passing_score", "mean_score",
]


def summary_frame(engine: AllocationEngine) -> pd.DataFrame:
    """
    Сводка по департаментам после прогона (по строке на департамент, в порядке engine.departments):
      • pool_size — сколько раз департамент указан в приоритетах;
      • passing_score / mean_score — минимум и среднее конкурсного балла зачисленных
        (NaN, если никого не зачислили).
    """
    depts = pd.DataFrame(
        [
            {"department": d.name, "capacity": d.limit, "pool_size": len(d.applicants)}
            for d in engine.departments
        ],
        columns=["department", "capacity", "pool_size"],
    )
    if engine.decisions:
        decisions = pd.DataFrame(
            [{"department": d.department, "score": float(d.score)} for d in engine.decisions]
        )
        agg = (
            decisions.groupby("department")["score"]
            .agg(admitted_count="size", passing_score="min", mean_score="mean")
            .reset_index()
        )
    else:
        # никого не зачислили — groupby по пустой таблице не нужен
        agg = pd.DataFrame({
            "department": pd.Series(dtype=str),
            "admitted_count": pd.Series(dtype=int),
            "passing_score": pd.Series(dtype=float),
            "mean_score": pd.Series(dtype=float),
        })

    df = depts.merge(agg, on="department", how="left")
    df["admitted_count"] = df["admitted_count"].fillna(0).astype(int)
    df["free_seats"] = df["capacity"] - df["admitted_count"]
    return df[SUMMARY_COLUMNS]


def department_summaries(frame: pd.DataFrame) -> List[DepartmentSummary]:
    return [
        DepartmentSummary(
            department=row.department,
            capacity=int(row.capacity),
            pool_size=int(row.pool_size),
            admitted_count=int(row.admitted_count),
            passing_score=None if pd.isna(row.passing_score) else float(row.passing_score),
        )
        for row in frame.itertuples(index=False)
    ]
