from __future__ import annotations


class AdmissionError(Exception):
    """Базовая ошибка прогона распределения."""


class ApplicantRecordError(AdmissionError, ValueError):
    """
    Некорректная запись абитуриента (не хватает полей, балл не число).
    line_no — номер строки во входном файле (с 1), если известен.
    """

    def __init__(self, message: str, *, line_no: int | None = None, details: dict[str, object] | None = None):
        if line_no is not None:
            message = f"строка {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
        self.details = details or {}


class UnknownDepartmentError(AdmissionError, ValueError):
    """Абитуриент указал департамент, которого нет в каталоге."""

    def __init__(self, applicant: str, department: str):
        super().__init__(f"{applicant}: неизвестный департамент {department!r}")
        self.applicant = applicant
        self.department = department


class CapacityLimitError(AdmissionError, ValueError):
    """Лимит мест не задан, отрицательный или не целое число."""


class CatalogError(AdmissionError, ValueError):
    """Некорректный каталог департаментов."""
