"""Logging setup for applications embedding the exporter.

The library itself only ever calls ``logging.getLogger(__name__)`` and
never configures handlers.  Applications that want readable diagnostics
(malformed element streams, unsupported primitives, config loading)
call ``setup_logging`` once at startup.

Public API:
    setup_logging(log_level="INFO", log_file=None, json=False)
    get_logger(name)
    push_context(document="figure1")
    pop_context(keys=["document"])

Format examples:
    Human: 2026-10-18T13:45:12.345Z | WARNING  | document=fig1 | Message
    JSON:  {"t":"2026-10-18T13:45:12.345+00:00","lvl":"WARNING","msg":"..."}

Idempotent: repeated setup_logging() calls don't duplicate handlers.
"""

import contextvars
import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


_context_var = contextvars.ContextVar('logging_context', default={})

_configured = False

# Handlers installed by setup_logging (replaced on reconfiguration)
_handlers: List[logging.Handler] = []


class ContextFormatter(logging.Formatter):
    """Formatter that appends contextual fields from push_context().

    Supports a human-readable mode (optionally colored) and a JSON-lines
    mode for machine ingestion.
    """

    def __init__(
        self,
        fmt_mode: str = "human",
        use_color: bool = True,
        tz: str = "UTC"
    ):
        super().__init__()
        self.fmt_mode = fmt_mode
        self.use_color = use_color and sys.stderr.isatty()
        self.tz = tz

        self.colors = {
            'DEBUG': '\033[36m',
            'INFO': '\033[32m',
            'WARNING': '\033[33m',
            'ERROR': '\033[31m',
            'CRITICAL': '\033[35m',
            'RESET': '\033[0m'
        }

    def format(self, record: logging.LogRecord) -> str:
        context = _context_var.get({})

        if self.tz == "UTC":
            ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        else:
            ts = datetime.fromtimestamp(record.created)

        if self.fmt_mode == "json":
            return self._format_json(record, ts, context)
        return self._format_human(record, ts, context)

    def _format_json(
        self,
        record: logging.LogRecord,
        ts: datetime,
        context: dict
    ) -> str:
        log_dict = {
            't': ts.isoformat(),
            'lvl': record.levelname,
            'name': record.name,
            'pid': os.getpid(),
            'msg': record.getMessage()
        }
        log_dict.update(context)

        if record.exc_info:
            log_dict['exc'] = self.formatException(record.exc_info)

        return json.dumps(log_dict)

    def _format_human(
        self,
        record: logging.LogRecord,
        ts: datetime,
        context: dict
    ) -> str:
        ts_str = ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'

        level = record.levelname
        if self.use_color:
            level = f"{self.colors.get(level, '')}{level:8s}{self.colors['RESET']}"
        else:
            level = f"{level:8s}"

        parts = [ts_str, '|', level, '|']
        context_str = ' '.join(f"{k}={v}" for k, v in context.items())
        if context_str:
            parts.append(f"{context_str} |")
        parts.append(record.getMessage())

        line = ' '.join(parts)
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    json: bool = False,
    color: bool = True,
    to_stderr: bool = True,
    tz: str = "UTC",
    quiet_libs: Optional[List[str]] = None,
    context: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Configure the root logger (idempotent).

    Parameters
    ----------
    log_level : str
        "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
    log_file : str, optional
        Log file path; None for no file logging
    json : bool
        Use JSON lines in the log file, default False
    color : bool
        ANSI colors on the console, default True
    to_stderr : bool
        Log to stderr, default True
    tz : str
        "UTC" (default) or "local"
    quiet_libs : list[str], optional
        Logger names to raise to WARNING
    context : dict, optional
        Initial contextual fields (e.g., {"document": "figure1"})

    Returns
    -------
    dict
        {"handlers": [...]}
    """
    global _configured

    root = logging.getLogger()
    if _configured:
        for handler in _handlers:
            root.removeHandler(handler)
            handler.close()
        _handlers.clear()

    root.setLevel(getattr(logging, log_level.upper()))

    handlers = []
    if to_stderr:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ContextFormatter("human", color, tz))
        root.addHandler(console_handler)
        handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        fmt_mode = "json" if json else "human"
        file_handler.setFormatter(ContextFormatter(fmt_mode, use_color=False, tz=tz))
        root.addHandler(file_handler)
        handlers.append(file_handler)

    if context:
        push_context(**context)

    if quiet_libs:
        for lib in quiet_libs:
            logging.getLogger(lib).setLevel(logging.WARNING)

    logging.captureWarnings(True)

    _handlers.extend(handlers)
    _configured = True

    return {'handlers': handlers}


def get_logger(name: str) -> logging.Logger:
    """Get logger by name (typically __name__)."""
    return logging.getLogger(name)


def push_context(**kwargs) -> None:
    """Add contextual fields to all subsequent log records.

    Examples
    --------
    >>> push_context(document="figure1")
    >>> logger.warning("Skipped")  # → "... | document=figure1 | Skipped"
    """
    current = _context_var.get({})
    _context_var.set({**current, **kwargs})


def pop_context(keys: Optional[List[str]] = None) -> None:
    """Remove contextual fields; all of them if ``keys`` is None."""
    if keys is None:
        _context_var.set({})
    else:
        current = dict(_context_var.get({}))
        for key in keys:
            current.pop(key, None)
        _context_var.set(current)
