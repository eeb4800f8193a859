"""File loading with an optional assets folder prefix."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

__all__ = ["FileError", "set_pc_assets_folder", "load_file", "load_string"]

_assets_folder: Optional[str] = None


class FileError(Exception):
    """A file could not be loaded."""

    def __init__(self, kind: OSError, path: str) -> None:
        super().__init__(kind, path)
        self.kind = kind
        self.path = path

    def __str__(self) -> str:
        return f"Couldn't load file {self.path}: {self.kind}"


def set_pc_assets_folder(path: Optional[str]) -> None:
    """Resolve later loads relative to path; None removes the prefix."""
    global _assets_folder
    _assets_folder = path


def _resolve(path: str) -> str:
    if _assets_folder is None:
        return path
    return str(Path(_assets_folder) / path)


def load_file(path: str) -> bytes:
    """Read the whole file at path, raising FileError on failure."""
    resolved = _resolve(path)
    try:
        return Path(resolved).read_bytes()
    except OSError as exc:
        raise FileError(exc, resolved) from exc


def load_string(path: str) -> str:
    """Read the file at path as UTF-8, replacing invalid sequences."""
    return load_file(path).decode("utf-8", errors="replace")