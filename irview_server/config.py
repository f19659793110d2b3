"""Server configuration."""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables with IRVIEW_ prefix.
    Example: IRVIEW_TOOLCHAIN=nightly-2025-01-01 IRVIEW_COMPILE_TIMEOUT=30 uv run irview-server
    """

    model_config = SettingsConfigDict(env_prefix="IRVIEW_")

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "info"

    # Frontend assets, served for every path outside /api
    static_dir: Path = Path("static")

    # Toolchain
    rustup_bin: str = "rustup"
    toolchain: str = "nightly"
    edition: str = "2021"
    crate_name: str = "input"

    # Seconds before a rustc run is killed. None waits forever.
    compile_timeout: Optional[float] = None


settings = Settings()
