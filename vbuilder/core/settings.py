"""
Pydantic Settings for vbuilder configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError
from .models.config import BuildConfig, InstallConfig, LoggingConfig

PROJECT_CONFIG_NAME = ".vbuilder.toml"
USER_CONFIG_PATH = Path.home() / ".vbuilder" / "config.toml"


def find_config_file(project_dir: str | Path | None = None) -> Path | None:
    """
    Find the config file for a project.

    Looks for `.vbuilder.toml` in the project directory first, then falls
    back to `~/.vbuilder/config.toml`.

    Returns:
        Path to config file, or None if not found.
    """
    if project_dir is not None:
        candidate = Path(project_dir) / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate

    if USER_CONFIG_PATH.is_file():
        return USER_CONFIG_PATH

    return None


class TomlConfigSource:
    """Loads the TOML config file for a project, once.

    A read or parse failure is kept on `error` instead of being raised, so a
    broken config file never stops a build.
    """

    def __init__(
        self,
        config_path: Path | None = None,
        project_dir: str | Path | None = None,
    ):
        self.path = config_path if config_path is not None else find_config_file(project_dir)
        self.error: ConfigFileError | None = None
        self._data: dict[str, Any] | None = None

    def __call__(self) -> dict[str, Any]:
        """Return the TOML data, reading the file on first use."""
        if self._data is not None:
            return self._data

        self._data = {}
        if self.path is None:
            return self._data

        try:
            with open(self.path, "rb") as f:
                self._data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            self.error = ConfigFileError(
                f"Failed to parse config file: {e}", file_path=str(self.path), cause=e
            )
        except OSError as e:
            self.error = ConfigFileError(
                f"Failed to read config file: {e.strerror or e}", file_path=str(self.path), cause=e
            )

        return self._data


class VBuilderSettings(BaseSettings):
    """vbuilder configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Environment variables (VBUILDER_<section>__<field>)
    2. TOML config file (<project>/.vbuilder.toml or ~/.vbuilder/config.toml),
       passed in as init values by load_settings()
    3. Model defaults
    """

    model_config = {
        "env_prefix": "VBUILDER_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    build: BuildConfig = BuildConfig()
    install: InstallConfig = InstallConfig()
    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: ConfigFileError | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Rank the environment above init values, which carry the TOML data."""
        return (
            env_settings,
            init_settings,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were loaded from, if any."""
        return self._config_file

    @property
    def config_error(self) -> ConfigFileError | None:
        """Read or parse error for the TOML file, if one occurred."""
        return self._config_error


def load_settings(
    config_path: Path | None = None,
    project_dir: str | Path | None = None,
) -> VBuilderSettings:
    """Load vbuilder settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        project_dir: Project directory searched for `.vbuilder.toml`

    Returns:
        VBuilderSettings instance with all sources merged
    """
    toml_source = TomlConfigSource(config_path, project_dir)
    sections = {k: v for k, v in toml_source().items() if k in VBuilderSettings.model_fields}
    settings = VBuilderSettings(**sections)

    if toml_source.error is not None:
        settings._config_error = toml_source.error
    elif toml_source.path is not None:
        settings._config_file = str(toml_source.path)

    return settings
