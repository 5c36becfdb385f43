"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    vectornodes_env: str = "development"
    vectornodes_log_level: str = "info"

    # Upper bound on footprints evaluated at once by Executor.evaluate_many
    vectornodes_max_concurrent: int = 8

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("vectornodes_log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Root logging setup for scripts and hosts embedding the node graph."""
    name = (level or settings.vectornodes_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
