"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    template_dir: Path | None = None
    page_suffix: str = ".txt"
    front_page: str = "FrontPage"
    host: str = "0.0.0.0"
    port: int = 9090
    debug: bool = False
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"
    app_title: str = "FlatWiki"

    model_config = SettingsConfigDict(
        env_prefix="FLATWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

