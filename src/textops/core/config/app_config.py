from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ValidationError, field_validator

from textops.constants import DEFAULT_FILENAME_REPLACEMENT, FilenamePlatform
from textops.core.common.exceptions import ConfigurationError
from textops.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)


def _get_env_value(
    env: Mapping[str, str],
    name: str,
    default: Any,
    *,
    transform: Callable[[str], Any] | None = None,
) -> Any:
    """Return an environment variable value, transformed when requested."""
    if name in env:
        raw_value = env[name]
        return transform(raw_value) if transform is not None else raw_value
    return default


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class ConsoleConfig(DomainModel):
    """Console output configuration."""

    color: bool = True


class FilenameConfig(DomainModel):
    """Defaults for file name sanitization."""

    replacement: str = DEFAULT_FILENAME_REPLACEMENT
    # None means "use the running operating system"
    platform: FilenamePlatform | None = None


class AppConfig(DomainModel):
    """Top-level textops configuration."""

    logging: LoggingConfig = LoggingConfig()
    console: ConsoleConfig = ConsoleConfig()
    filename: FilenameConfig = FilenameConfig()

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from environment variables.

        Returns:
            AppConfig instance
        """
        return cls.model_validate(_env_overrides(environ))


def _env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect only the settings that are present in the environment."""
    env: Mapping[str, str] = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    level = _get_env_value(env, "TEXTOPS_LOG_LEVEL", None)
    log_file = _get_env_value(env, "TEXTOPS_LOG_FILE", None)
    if level is not None or log_file is not None:
        overrides["logging"] = {}
        if level is not None:
            overrides["logging"]["level"] = level
        if log_file is not None:
            overrides["logging"]["log_file"] = log_file

    # Any non-empty NO_COLOR disables color, whatever its value
    if env.get("NO_COLOR"):
        overrides["console"] = {"color": False}

    replacement = _get_env_value(env, "TEXTOPS_FILENAME_REPLACEMENT", None)
    platform = _get_env_value(
        env,
        "TEXTOPS_FILENAME_PLATFORM",
        None,
        transform=lambda value: value.strip().lower() or None,
    )
    if replacement is not None or platform is not None:
        overrides["filename"] = {}
        if replacement is not None:
            overrides["filename"]["replacement"] = replacement
        if platform is not None:
            overrides["filename"]["platform"] = platform

    return overrides


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    for k, v in d2.items():
        if k in d1 and isinstance(d1[k], dict) and isinstance(v, dict):
            _merge_dicts(d1[k], v)
        else:
            d1[k] = v
    return d1


def _read_config_file(path: Path) -> dict[str, Any]:
    import yaml

    if path.suffix.lower() not in [".yaml", ".yml"]:
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )

    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {exc}",
            details={"path": str(path)},
        ) from exc

    if not isinstance(file_config, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level.",
            details={"path": str(path)},
        )
    return file_config


def _format_validation_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from defaults, an optional YAML file and the environment.

    Later sources win: environment variables override file values, which
    override the built-in defaults.

    Args:
        config_path: Optional path to configuration file

    Returns:
        AppConfig instance
    """
    config_data: dict[str, Any] = AppConfig().model_dump()

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            _merge_dicts(config_data, _read_config_file(path))

    try:
        # Only values actually present in the environment override the file
        env_config = AppConfig.from_env(environ=environ)
        _merge_dicts(config_data, env_config.model_dump(exclude_unset=True))
        return AppConfig.model_validate(config_data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration: {_format_validation_errors(exc)}",
            details={"errors": exc.errors(include_url=False)},
        ) from exc
