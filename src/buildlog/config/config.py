"""Configuration management for buildlog."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from buildlog.config.paths import default_config_path
from buildlog.features.transform.options import DEFAULT_PREFIX, LoggerOptions
from buildlog.platform.logging import logger

CONFIG_TABLE = "logger"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be parsed or validated."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Defaults for logging transforms created by the CLI."""

    # Line decoration
    prefix: str = DEFAULT_PREFIX
    suffix: str = ""

    # Display switches
    show_loader: bool = True
    minimal: bool = True
    show_files: bool = True
    verbose: bool = False

    # Log file path
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    def to_options(self, **overrides: Any) -> LoggerOptions:
        """Build transform options from this configuration.

        Args:
            **overrides: ``LoggerOptions`` fields that take precedence.

        Returns:
            LoggerOptions: Options ready for a ``LoggingTransform``.
        """
        values: dict[str, Any] = {
            "prefix": self.prefix,
            "suffix": self.suffix,
            "show_loader": self.show_loader,
            "minimal": self.minimal,
            "show_files": self.show_files,
            "verbose": self.verbose,
        }
        values.update(overrides)
        return LoggerOptions(**values)

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from a TOML file.

        Settings live under a ``[logger]`` table. A missing file yields the
        defaults. Results are cached per file.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or a value has the wrong type.
        """
        config_file = Path(path).expanduser().resolve() if path is not None else default_config_path()
        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            instance = cls()
        else:
            instance = cls(**cls._read_table(config_file))
            logger.debug("Configuration loaded from %s", config_file)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def _read_table(cls, config_file: Path) -> dict[str, Any]:
        try:
            with open(config_file, "rb") as f:
                document = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{config_file}: invalid TOML ({e})") from e

        table = document.get(CONFIG_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"{config_file}: [{CONFIG_TABLE}] must be a table")

        known = {f.name: f for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in table.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, config_file)
                continue
            expected = str if known[key].metadata.get("path", False) else type(known[key].default)
            if not isinstance(value, expected):
                raise ConfigError(
                    f"{config_file}: '{key}' must be of type {expected.__name__}"
                )
            values[key] = value
        return values


__all__ = ["CONFIG_TABLE", "Config", "ConfigError"]
