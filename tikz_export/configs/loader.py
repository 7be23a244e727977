"""Configuration loader for TikZ export.

Loads and validates ``export.yaml`` into typed, frozen pydantic models.
Output precision, default picture options and logging settings all come
from the config; drawing calls never read the file themselves.

Usage::

    from tikz_export.configs.loader import configure_logging, load_config
    cfg = load_config()                      # packaged defaults
    cfg = load_config("/custom/export.yaml") # explicit path
    configure_logging(cfg, context={"document": "figure1"})
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tikz_export.utils.fs import load_yaml
from tikz_export.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class LoggingConfig(BaseModel):
    """Arguments forwarded to ``setup_logging``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = Field("INFO", description="Root log level")
    file: Optional[str] = Field(None, description="Log file path, None for console only")
    json_format: bool = Field(False, description="JSON lines in the log file")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {_LOG_LEVELS}, got '{v}'")
        return v


class ExportConfig(BaseModel):
    """Top-level export settings (export.yaml)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    precision: int = Field(2, ge=0, le=12, description="Fractional digits per number")
    picture_options: str = Field("", description="Options for \\begin{tikzpicture}")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> ExportConfig:
    """Load and validate export configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to ``export.yaml``.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    ExportConfig
        Validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If the file is empty or any field fails validation.
    FileNotFoundError
        If *path* does not exist.
    """
    if path is None:
        path = Path(__file__).parent / "export.yaml"
    else:
        path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.info("Loading configuration from %s", path)

    data: dict[str, Any] | None = load_yaml(path)
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at top level of {path}")

    try:
        return ExportConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e


def configure_logging(
    config: ExportConfig,
    context: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Apply ``config.logging`` through ``setup_logging``.

    Parameters
    ----------
    config : ExportConfig
        Loaded configuration.
    context : dict, optional
        Initial contextual fields for every log line.

    Returns
    -------
    dict
        Whatever ``setup_logging`` returns (installed handlers).
    """
    log_cfg = config.logging
    return setup_logging(
        log_level=log_cfg.level,
        log_file=log_cfg.file,
        json=log_cfg.json_format,
        context=context,
    )
