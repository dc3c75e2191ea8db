from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Sequence, TextIO

from admission.config.logger import logger
from admission.domain.models import DepartmentResult


def format_department(result: DepartmentResult) -> List[str]:
    return [f"{a.name} {a.score:.1f}" for a in result.admitted]


def print_results(results: Sequence[DepartmentResult], stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    for result in results:
        print(result.name, file=stream)
        for line in format_department(result):
            print(line, file=stream)
        print(file=stream)


def result_filename(result: DepartmentResult) -> str:
    return f"{result.name.lower()}.txt"


def save_results(results: Sequence[DepartmentResult], output_dir: str | Path) -> List[Path]:
    """
    По файлу на департамент: <name в нижнем регистре>.txt,
    строки «Имя Фамилия балл», в конце пустая строка.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for result in results:
        path = output_dir / result_filename(result)
        with open(path, "w", encoding="utf-8") as f:
            for line in format_department(result):
                f.write(line + "\n")
            f.write("\n")
        written.append(path)

    logger.info("Результаты записаны в %s (%d файлов)", output_dir, len(written))
    return written
