"""Settings for locating and reading configuration files."""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="INFO", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_logs: bool = Field(default=False, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, ge=1, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, ge=0, description="Number of rotated log files to keep")


class ReaderSettings(BaseSettings):
    """Reader settings loaded from env or optional TOML."""

    # Environment keys use INIREADER_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="INIREADER_", env_nested_delimiter="__", extra="ignore")

    # Directory joined with relative file names (roboRIO user home).
    base_dir: str = Field(default="/home/lvuser", description="Directory for relative config file names")
    # Text encoding of configuration files.
    encoding: str = Field(default="utf-8", description="Configuration file encoding")
    # Raise instead of returning skipped lines when a file has malformed lines.
    strict: bool = Field(default=False, description="Fail on malformed lines")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding {value!r}") from exc
        return value

    @classmethod
    def from_toml(cls, path: str | Path) -> "ReaderSettings":
        data = tomllib.loads(Path(path).read_text())
        return cls.model_validate(data)
