"""Tests for export config loading and validation."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tikz_export.configs.loader import (
    ConfigError,
    ExportConfig,
    LoggingConfig,
    configure_logging,
    load_config,
)
from tikz_export.utils import logging_config


class TestDefaultConfig:
    def test_packaged_defaults_load(self) -> None:
        cfg = load_config()
        assert cfg.precision == 2
        assert cfg.picture_options == ""
        assert cfg.logging.level == "INFO"
        assert cfg.logging.file is None

    def test_frozen(self) -> None:
        cfg = load_config()
        with pytest.raises(Exception):
            cfg.precision = 5  # type: ignore[misc]


class TestCustomConfig:
    def test_explicit_path(self, tmp_path: Path) -> None:
        p = tmp_path / "export.yaml"
        p.write_text(
            "precision: 4\npicture_options: 'scale=0.5'\nlogging:\n  level: debug\n",
            encoding="utf-8",
        )
        cfg = load_config(p)
        assert cfg.precision == 4
        assert cfg.picture_options == "scale=0.5"
        assert cfg.logging.level == "DEBUG"

    def test_partial_file_uses_defaults(self, tmp_path: Path) -> None:
        p = tmp_path / "export.yaml"
        p.write_text("precision: 1\n", encoding="utf-8")
        assert load_config(p) == ExportConfig(precision=1)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        p = tmp_path / "export.yaml"
        p.write_text("", encoding="utf-8")
        with pytest.raises(ConfigError, match="Empty configuration"):
            load_config(p)

    def test_negative_precision_rejected(self, tmp_path: Path) -> None:
        p = tmp_path / "export.yaml"
        p.write_text("precision: -1\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(p)

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        p = tmp_path / "export.yaml"
        p.write_text("precison: 3\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(p)

    def test_bad_log_level(self, tmp_path: Path) -> None:
        p = tmp_path / "export.yaml"
        p.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(p)


# ---------------------------------------------------------------------------
# Logging from config
# ---------------------------------------------------------------------------


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    logging_config.pop_context()
    logging.captureWarnings(False)


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_logging_section_drives_setup(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "export.log"
        cfg = ExportConfig(
            logging=LoggingConfig(level="warning", file=str(log_file), json_format=True),
        )
        result = configure_logging(cfg, context={"document": "fig1"})

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(result["handlers"]) == 2

        logging.getLogger("tikz_export.test").info("dropped")
        logging.getLogger("tikz_export.test").warning("kept")
        for handler in result["handlers"]:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["msg"] == "kept"
        assert record["document"] == "fig1"

    def test_loaded_yaml_logging_applied(self, tmp_path: Path) -> None:
        p = tmp_path / "export.yaml"
        p.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
        configure_logging(load_config(p))
        assert logging.getLogger().level == logging.DEBUG
