"""
Configuration and logging setup for the document service client.
"""

import logging

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

DEFAULT_TIMEOUT_MS = 120000


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_prefix="DOCSERVICE_", frozen=True)

    converter_url: str = "http://localhost/ConvertService.ashx"
    storage_url: str = "http://localhost/FileUploader.ashx"
    # milliseconds
    timeout: int = DEFAULT_TIMEOUT_MS
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("timeout", mode="before")
    @classmethod
    def _positive_timeout(cls, value):
        try:
            timeout = int(value)
        except (TypeError, ValueError):
            return DEFAULT_TIMEOUT_MS
        return timeout if timeout > 0 else DEFAULT_TIMEOUT_MS

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the client."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("docservice_client")
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"docservice_client.{name}")
