from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, List

from admission.config.logger import logger
from admission.domain.errors import ApplicantRecordError, CapacityLimitError
from admission.domain.models import Applicant, SUBJECTS

# имя + фамилия + 5 баллов + хотя бы один приоритет
_NAME_TOKENS = 2
_MIN_TOKENS = _NAME_TOKENS + len(SUBJECTS) + 1


def _parse_score(text: str, *, subject: str, line_no: int | None) -> float:
    normalized = text.strip().replace(",", ".")
    try:
        value = float(normalized)
    except ValueError as exc:
        raise ApplicantRecordError(
            f"балл по {subject!r} не число: {text!r}",
            line_no=line_no,
            details={"field": subject, "value": text},
        ) from exc
    if not math.isfinite(value):
        raise ApplicantRecordError(
            f"балл по {subject!r} не число: {text!r}",
            line_no=line_no,
            details={"field": subject, "value": text},
        )
    return value


def parse_applicant_line(line: str, line_no: int | None = None) -> Applicant:
    """
    Строка вида: `Имя Фамилия physics chemistry math cs special Dep1 [Dep2 ...]`.
    Баллы допускают десятичную запятую.
    """
    tokens = line.split()
    if len(tokens) < _MIN_TOKENS:
        raise ApplicantRecordError(
            f"ожидалось не менее {_MIN_TOKENS} полей, получено {len(tokens)}",
            line_no=line_no,
            details={"line": line.rstrip("\n")},
        )

    name = " ".join(tokens[:_NAME_TOKENS])
    raw_scores = tokens[_NAME_TOKENS:_NAME_TOKENS + len(SUBJECTS)]
    scores = [
        _parse_score(raw, subject=subject, line_no=line_no)
        for subject, raw in zip(SUBJECTS, raw_scores)
    ]
    options = tokens[_NAME_TOKENS + len(SUBJECTS):]
    return Applicant.from_scores(name, scores, options)


def parse_applicants(lines: Iterable[str]) -> List[Applicant]:
    applicants: List[Applicant] = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        applicants.append(parse_applicant_line(line, line_no))
    return applicants


def load_applicants(path: str | Path) -> List[Applicant]:
    path = Path(path)
    logger.info("Читаем абитуриентов из %s", path)
    with open(path, encoding="utf-8") as f:
        applicants = parse_applicants(f)
    logger.info("   прочитано %d абитуриентов.", len(applicants))
    return applicants


def parse_capacity_limit(text: str) -> int:
    """Первый токен text — неотрицательное целое."""
    tokens = (text or "").split()
    if not tokens:
        raise CapacityLimitError("лимит мест не задан")
    try:
        limit = int(tokens[0])
    except ValueError as exc:
        raise CapacityLimitError(f"лимит мест не целое число: {tokens[0]!r}") from exc
    if limit < 0:
        raise CapacityLimitError(f"лимит мест не может быть отрицательным: {limit}")
    return limit
