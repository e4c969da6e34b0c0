"""
Configuration manager for testfinder.

Loads the TOML configuration file, applies environment overrides and
validates the result against the pydantic models.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .models import TestFinderConfig, TestFinderSettings


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""

    config_section: Dict[str, Any]
    settings: TestFinderSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply setting if it's set in environment."""
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply string setting if it's set and non-empty."""
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


def default_config_file() -> Path:
    """Location of the per-user configuration file."""
    return Path.home() / ".config" / "testfinder" / "config.toml"


class ConfigManager:
    """Configuration manager with TOML persistence and environment overrides."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses default location.
        """
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[TestFinderConfig] = None

    @property
    def config_directory(self) -> Path:
        return self.config_file.parent

    def load_config(self) -> TestFinderConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file(self.config_file)

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = TestFinderConfig(**config_data)
        except (ValueError, TypeError) as e:
            raise ConfigurationValidationError([str(e)]) from e

        return self._config

    def _load_toml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load configuration data from a TOML file."""
        try:
            with open(file_path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(file_path), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except PermissionError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {file_path}: {e}",
                help_text=f"Check file permissions for {file_path}",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = TestFinderSettings()

        for section in ("mapping", "resolver", "opener", "logging"):
            config_data.setdefault(section, {})

        mapping = EnvironmentOverride(config_data["mapping"], settings)
        mapping.apply_string_if_set("testfinder_backend_extension", "backend_extension")
        mapping.apply_string_if_set("testfinder_frontend_extension", "frontend_extension")

        resolver = EnvironmentOverride(config_data["resolver"], settings)
        resolver.apply_if_set("testfinder_check_timeout", "check_timeout")

        opener = EnvironmentOverride(config_data["opener"], settings)
        opener.apply_string_if_set("testfinder_open_command", "command")
        opener.apply_string_if_set("testfinder_open_beside_command", "beside_command")

        self._apply_logging_env_overrides(config_data["logging"], settings)
        return config_data

    def _apply_logging_env_overrides(
        self, logging_config: Dict[str, Any], settings: TestFinderSettings
    ) -> None:
        override = EnvironmentOverride(logging_config, settings)
        if settings.testfinder_logging_level:
            logging_config["level"] = settings.testfinder_logging_level.upper()
        override.apply_string_if_set("testfinder_logging_format", "format")
        override.apply_string_if_set("testfinder_logging_file_path", "file_path")
        if settings.testfinder_logging_output:
            # Comma-separated outputs
            logging_config["output"] = [
                o.strip() for o in settings.testfinder_logging_output.split(",") if o.strip()
            ]

    def _filter_none_values(self, data: Any) -> Any:
        """Recursively drop None values, which TOML cannot represent."""
        if isinstance(data, dict):
            return {k: self._filter_none_values(v) for k, v in data.items() if v is not None}
        elif isinstance(data, list):
            return [self._filter_none_values(item) for item in data if item is not None]
        else:
            return data

    def _write_toml(self, config: TestFinderConfig, file_path: Path) -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        config_dict = self._filter_none_values(config.model_dump(mode="json"))
        try:
            with open(file_path, "wb") as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file {file_path}: {e}",
                help_text=f"Check that you have write permissions for {file_path.parent}",
            ) from e

    def save_config(self, config: Optional[TestFinderConfig] = None) -> None:
        """Save configuration to the TOML file."""
        if config is None:
            config = self.load_config()
        self._write_toml(config, self.config_file)
        self._config = config

    def export_config(self, file_path: Path) -> None:
        """Export current configuration to a TOML file."""
        self._write_toml(self.load_config(), Path(file_path))

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        self.save_config(TestFinderConfig())
