# admission/config/config.py
from pathlib import Path
from typing import Any

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_DEFAULT_DATA_DIR = _PROJECT_ROOT / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    # окружение
    env: str = Field("dev", alias="ENV")
    data_dir: Path = Field(_DEFAULT_DATA_DIR, alias="DATA_DIR")

    # входной список абитуриентов (относительно data_dir, если путь не абсолютный)
    applicants_file: str = Field("applicants.txt", alias="APPLICANTS_FILE")
    # куда писать <department>.txt; по умолчанию — data_dir
    output_dir: Path | None = Field(None, alias="OUTPUT_DIR")

    # ───────────────── Распределение ──────────────────────────────────
    # Общий лимит мест на каждый департамент. None → читаем из stdin.
    capacity_limit: int | None = Field(None, ge=0, alias="CAPACITY_LIMIT")
    # Сколько приоритетов (раундов) рассматриваем.
    admission_rounds: int = Field(3, ge=1, alias="ADMISSION_ROUNDS")

    save_result_files: bool = Field(True, alias="SAVE_RESULT_FILES")
    results_db_enabled: bool = Field(True, alias="RESULTS_DB_ENABLED")

    # БД
    db_url: str | None = Field(None, alias="DATABASE_URL")
    db_filename: str = Field("admission.db", alias="DB_FILENAME")
    db_echo: bool = Field(False, alias="DB_ECHO")

    @model_validator(mode="before")
    def _preprocess(cls, values: dict[str, Any]) -> dict[str, Any]:
        raw = values.get("data_dir", values.get("DATA_DIR", _DEFAULT_DATA_DIR))
        values["data_dir"] = Path(raw).expanduser().resolve()
        values.pop("DATA_DIR", None)
        return values

    @property
    def applicants_path(self) -> Path:
        path = Path(self.applicants_file).expanduser()
        return path if path.is_absolute() else self.data_dir / path

    @property
    def results_dir(self) -> Path:
        return self.output_dir or self.data_dir

    @property
    def database_url(self) -> str:
        return self.db_url or f"sqlite:///{self.data_dir / self.db_filename}"


settings = Settings()
