"""Service settings read from the environment; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Does not override variables already set in the environment
load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    cors_origin_regex: Optional[str] = None
    api_title: str = "Carton Optimizer API"


def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("CARTON_LOG_LEVEL", "INFO").strip().upper(),
        cors_origin_regex=os.getenv("CARTON_CORS_ORIGIN_REGEX") or None,
        api_title=os.getenv("CARTON_API_TITLE", "Carton Optimizer API"),
    )


def configure_logging(settings: Settings) -> int:
    """Set up root logging for the service; returns the level actually used."""
    level = getattr(logging, settings.log_level, None)
    unknown = not isinstance(level, int)
    if unknown:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if unknown:
        logger.warning(f"Unknown CARTON_LOG_LEVEL '{settings.log_level}', using INFO")
    return level
