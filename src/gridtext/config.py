"""Configuration model for GridText."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Configuration for GridText."""

    # File I/O
    encoding: str = Field("utf-8", description="Text encoding for reading and writing CSV files")
    null_value: str = Field("", description="Text written in place of None cell values")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")
    enable_debug: bool = Field(False, description="Enable debug mode")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from environment variables.
        """
        import os

        from dotenv import load_dotenv

        # Load .env file if it exists (will not override existing env vars)
        load_dotenv()

        log_file = os.getenv("GRIDTEXT_LOG_FILE")

        return cls(
            encoding=os.getenv("GRIDTEXT_ENCODING", "utf-8"),
            null_value=os.getenv("GRIDTEXT_NULL_VALUE", ""),
            log_level=os.getenv("GRIDTEXT_LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
            enable_debug=os.getenv("GRIDTEXT_ENABLE_DEBUG", "false").lower() == "true",
        )
