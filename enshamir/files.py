"""File helpers that never overwrite existing files."""

from __future__ import annotations

import os
from pathlib import Path


def is_file_path_existed(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` exists; other stat errors propagate."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def write_if_not_existed(path: str | os.PathLike[str], data: bytes, mode: int = 0o600) -> None:
    """Write ``data`` to a new file at ``path``; raise ``FileExistsError`` if it exists."""
    if is_file_path_existed(path):
        raise FileExistsError(f"file {path} is existed")
    fd = os.open(Path(path), os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)