"""Export configuration loading and validation."""

from tikz_export.configs.loader import (
    ConfigError,
    ExportConfig,
    LoggingConfig,
    configure_logging,
    load_config,
)

__all__ = [
    "ConfigError",
    "ExportConfig",
    "LoggingConfig",
    "configure_logging",
    "load_config",
]
