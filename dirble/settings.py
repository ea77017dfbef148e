"""Runtime settings read from the environment (and a local .env file).

These only shape how dirble reports; the scan Configuration is built from
the command line alone.
"""
import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel):
    log_level: str = "WARNING"
    show_banner: bool = True

    @field_validator("log_level")
    @classmethod
    def check_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        log_level=os.getenv("DIRBLE_LOG_LEVEL", "WARNING"),
        show_banner=os.getenv("DIRBLE_BANNER", "1").strip().lower() not in FALSE_VALUES,
    )
