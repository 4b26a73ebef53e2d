"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    longshadow_env: str = "development"
    longshadow_log_level: str = "info"

    # Width of rendered frames in user units (viewBox is fitted to the scene)
    svg_print_width: float = 512.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(config: Settings | None = None) -> None:
    """Set up root logging from settings. Safe to call more than once."""
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.longshadow_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.debug("Logging configured for %s", config.longshadow_env)
