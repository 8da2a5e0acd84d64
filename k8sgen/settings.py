"""Environment-driven defaults for the CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults read from K8SGEN_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="K8SGEN_", case_sensitive=False)

    out_root: Path = Path("gen")
    template_suffix: str = ".tmpl"
    file_mode: str = "0644"
