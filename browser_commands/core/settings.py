"""
集中式配置（环境变量/ .env），保障可测性与可控性。
"""
# @file purpose: Centralized settings using Pydantic Settings.

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BC_", env_file=".env", extra="ignore")

    headless: bool = True
    default_timeout_ms: int = 30_000
    script_timeout_ms: int = 5_000
    log_level: str = "INFO"
    artifacts_dir: Path = Path("artifacts")


settings = Settings()
