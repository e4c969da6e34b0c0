"""
Configuration models for testfinder.

Pydantic models provide validation and documentation for every setting;
``TestFinderSettings`` collects the environment overrides.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...constants import (
    DEFAULT_BACKEND_EXTENSION,
    DEFAULT_CHECK_TIMEOUT_SECONDS,
    DEFAULT_FRONTEND_EXTENSION,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    MAX_CHECK_TIMEOUT_SECONDS,
    MIN_LOG_FILE_SIZE_BYTES,
    OPENER_PATH_PLACEHOLDER,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class MappingConfig(BaseModel):
    """File extensions used by the convention rules."""

    backend_extension: str = Field(
        DEFAULT_BACKEND_EXTENSION, description="Extension of server-side source and test files"
    )
    frontend_extension: str = Field(
        DEFAULT_FRONTEND_EXTENSION, description="Extension of web component files"
    )

    @field_validator("backend_extension", "frontend_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        v = v.strip()
        if v.startswith("."):
            v = v[1:]
        if not v:
            raise ValueError("extension must not be empty")
        if "/" in v:
            raise ValueError("extension must not contain '/'")
        return v


class ResolverConfig(BaseModel):
    """Existence check settings."""

    check_timeout: float = Field(
        DEFAULT_CHECK_TIMEOUT_SECONDS,
        gt=0,
        le=MAX_CHECK_TIMEOUT_SECONDS,
        description="Seconds allowed for a single existence check",
    )


class OpenerConfig(BaseModel):
    """Commands used to open a test file."""

    command: Optional[str] = Field(
        None, description="Command template for opening a file, e.g. 'code --reuse-window {path}'"
    )
    beside_command: Optional[str] = Field(
        None, description="Command template for opening a file next to the current one"
    )

    @field_validator("command", "beside_command")
    @classmethod
    def validate_template(cls, v: Optional[str]) -> Optional[str]:
        if v is None or len(v.strip()) == 0:
            return None
        if OPENER_PATH_PLACEHOLDER not in v:
            raise ValueError(f"command template must contain {OPENER_PATH_PLACEHOLDER}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class TestFinderConfig(BaseModel):
    """Main testfinder configuration model."""

    __test__ = False

    mapping: MappingConfig = Field(default_factory=MappingConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    opener: OpenerConfig = Field(default_factory=OpenerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class TestFinderSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    __test__ = False

    testfinder_backend_extension: Optional[str] = Field(
        None, alias="TESTFINDER_BACKEND_EXTENSION"
    )
    testfinder_frontend_extension: Optional[str] = Field(
        None, alias="TESTFINDER_FRONTEND_EXTENSION"
    )
    testfinder_check_timeout: Optional[float] = Field(
        None, alias="TESTFINDER_CHECK_TIMEOUT"
    )
    testfinder_open_command: Optional[str] = Field(None, alias="TESTFINDER_OPEN_COMMAND")
    testfinder_open_beside_command: Optional[str] = Field(
        None, alias="TESTFINDER_OPEN_BESIDE_COMMAND"
    )

    # Logging settings
    testfinder_logging_level: Optional[str] = Field(None, alias="TESTFINDER_LOGGING_LEVEL")
    testfinder_logging_format: Optional[str] = Field(None, alias="TESTFINDER_LOGGING_FORMAT")
    testfinder_logging_output: Optional[str] = Field(None, alias="TESTFINDER_LOGGING_OUTPUT")
    testfinder_logging_file_path: Optional[str] = Field(
        None, alias="TESTFINDER_LOGGING_FILE_PATH"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
