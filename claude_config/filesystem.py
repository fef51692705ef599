"""Explicit-failure file operations used by the presentation layer.

Unlike discovery, every function here raises ``FileOperationError`` with a
readable detail when the underlying operation fails.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from loguru import logger

from claude_config.errors import FileOperationError, PathIsDirectoryError
from claude_config.models import DirectoryEntry


def read_file(path: str | os.PathLike[str]) -> str:
    target = Path(path)
    if target.is_dir():
        raise PathIsDirectoryError(target)
    try:
        return target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOperationError(target, _describe(exc)) from exc


def write_file(path: str | os.PathLike[str], content: str) -> None:
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileOperationError(target, _describe(exc)) from exc
    logger.info("Wrote {} ({} chars)", target, len(content))


def list_directory(path: str | os.PathLike[str]) -> list[DirectoryEntry]:
    """Immediate children, directories first, each group by case-insensitive name."""
    root = Path(path)
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(root) as iterator:
            for item in iterator:
                entries.append(
                    DirectoryEntry(
                        name=item.name,
                        path=str(root / item.name),
                        is_directory=_entry_is_dir(item),
                    )
                )
    except OSError as exc:
        raise FileOperationError(root, _describe(exc)) from exc

    entries.sort(key=lambda entry: (not entry.is_directory, entry.name.lower()))
    return entries


def delete_path(path: str | os.PathLike[str]) -> None:
    target = Path(path)
    try:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError as exc:
        raise FileOperationError(target, _describe(exc)) from exc
    logger.info("Deleted {}", target)


def create_directory_tree(path: str | os.PathLike[str]) -> None:
    target = Path(path)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileOperationError(target, _describe(exc)) from exc
    logger.info("Created directory {}", target)


def _entry_is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)
