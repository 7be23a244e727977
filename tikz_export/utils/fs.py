"""Atomic filesystem operations and YAML loading.

Provides:
    - Atomic writes: tmp file → fsync → rename (no half-written .tikz files)
    - YAML loading for export configs
    - Directory creation with exist_ok semantics

Usage:
    from tikz_export.utils import fs
    fs.atomic_write_text("figures/plot.tikz", picture_text)
    cfg = fs.load_yaml("export.yaml")
"""

import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml


def ensure_dir(p: Union[str, Path]) -> Path:
    """Create directory (and parents) if missing, return it as a Path."""
    p = Path(p)
    p.mkdir(parents=True, exist_ok=True)
    return p


def atomic_write_bytes(
    path: Union[str, Path],
    data: bytes,
    tmp_suffix: str = ".tmp"
) -> None:
    """Write bytes to file atomically (tmp → fsync → rename).

    Parameters
    ----------
    path : Union[str, Path]
        Target file path
    data : bytes
        Data to write
    tmp_suffix : str
        Temporary file suffix, default ".tmp"

    Raises
    ------
    RuntimeError
        If writing or renaming fails; the tmp file is removed.
    """
    path = Path(path)
    ensure_dir(path.parent)

    tmp_path = path.with_suffix(path.suffix + tmp_suffix)

    try:
        with open(tmp_path, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        tmp_path.replace(path)
    except OSError as e:
        if tmp_path.exists():
            tmp_path.unlink()
        raise RuntimeError(f"Failed to write {path} atomically: {e}") from e


def atomic_write_text(
    path: Union[str, Path],
    text: str,
    encoding: str = "utf-8"
) -> None:
    """Write text to file atomically (wrapper around atomic_write_bytes)."""
    atomic_write_bytes(path, text.encode(encoding))


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML file safely.

    Raises
    ------
    FileNotFoundError
        If file doesn't exist
    yaml.YAMLError
        If YAML parsing fails
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e
