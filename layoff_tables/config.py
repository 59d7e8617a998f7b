"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global pipeline settings."""

    source: Optional[str] = Field(
        default=None, description="Default PDF path or URL when none is given."
    )
    output_dir: str = "data/processed"
    csv_encoding: str = "utf-8"

    date_format: str = "%m/%d/%Y"
    date_columns: List[str] = Field(
        default_factory=lambda: ["notice_date", "effective_date", "received_date"]
    )
    numeric_columns: List[str] = Field(default_factory=lambda: ["no_of_employees"])

    table_strategy: str = "lines"
    pages: Optional[List[int]] = None
    download_timeout: float = 30.0
    user_agent: str = "layoff-tables/0.1"
    drop_repeated_headers: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def output_dir_path(self) -> Path:
        return Path(self.output_dir)


settings = Settings()
