"""
Configuration models.

Provides Pydantic models for vbuilder configuration with validation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(BaseModel):
    """A config section: values are coerced from TOML and env strings, unknown keys dropped."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")


class BuildConfig(ConfigBaseModel):
    """Go build configuration section."""

    go_executable: str | None = None
    extra_args: list[str] = Field(default_factory=list)

    @field_validator("go_executable", mode="before")
    @classmethod
    def empty_as_none(cls, v: str | None) -> str | None:
        if v is None or v == "":
            return None
        return v


class InstallConfig(ConfigBaseModel):
    """systemd installation configuration section."""

    unit_dir: str = "/etc/systemd/system"
    sudo: str = "sudo"
    systemctl: str = "systemctl"

    @field_validator("unit_dir")
    @classmethod
    def validate_unit_dir(cls, v: str) -> str:
        """Unit directory must be absolute; sudo cp runs from the project dir."""
        if not v.startswith("/"):
            raise ValueError("install.unit_dir must be an absolute path")
        return v.rstrip("/") or "/"


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True

