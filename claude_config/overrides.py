"""Nested ``CLAUDE.md`` discovery below a project root."""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from claude_config.constants import (
    CLAUDE_FILENAME,
    CLAUDE_LOCAL_FILENAME,
    DEFAULT_MAX_DEPTH,
    HIDDEN_PREFIX,
    LOCAL_OVERRIDE_SUFFIX,
    OVERRIDE_IGNORED_DIRS,
)
from claude_config.models import OverrideScan, SubdirectoryOverride
from claude_config.paths import file_exists


class OverrideScanner:
    """Depth-first walk that reports subdirectory instruction overrides.

    The project's own root files and its ``.claude`` directory are not
    reported here; hidden children are skipped entirely.
    """

    def __init__(self, ignored_dirs: frozenset[str] = OVERRIDE_IGNORED_DIRS) -> None:
        self.ignored_dirs = ignored_dirs

    def is_skipped(self, name: str) -> bool:
        return name.startswith(HIDDEN_PREFIX) or name in self.ignored_dirs

    def scan(
        self, project_path: str | os.PathLike[str], max_depth: int = DEFAULT_MAX_DEPTH
    ) -> OverrideScan:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")

        root = Path(project_path).absolute()
        result = OverrideScan(project_path=str(root), max_depth=max_depth)
        self._walk(root, root, 0, max_depth, result)
        return result

    def _walk(
        self,
        root: Path,
        current: Path,
        depth: int,
        max_depth: int,
        result: OverrideScan,
    ) -> None:
        if depth > max_depth:
            return

        try:
            entries = list(os.scandir(current))
        except OSError as exc:
            logger.debug("Skipping unreadable directory {}: {}", current, exc)
            result.skipped.append(str(current))
            return

        for entry in entries:
            if self.is_skipped(entry.name):
                continue

            child = current / entry.name
            try:
                is_dir = entry.is_dir()
            except OSError as exc:
                logger.debug("Skipping unreadable entry {}: {}", child, exc)
                result.skipped.append(str(child))
                continue
            if not is_dir:
                continue

            relative = _relative_label(child, root)

            claude_md = child / CLAUDE_FILENAME
            if file_exists(claude_md):
                result.overrides.append(
                    SubdirectoryOverride(relative_path=relative, full_path=str(claude_md))
                )

            claude_local = child / CLAUDE_LOCAL_FILENAME
            if file_exists(claude_local):
                result.overrides.append(
                    SubdirectoryOverride(
                        relative_path=f"{relative}{LOCAL_OVERRIDE_SUFFIX}",
                        full_path=str(claude_local),
                    )
                )

            self._walk(root, child, depth + 1, max_depth, result)


def _relative_label(child: Path, root: Path) -> str:
    try:
        return str(child.relative_to(root))
    except ValueError:
        return str(child)


def discover_subdirectory_overrides(
    project_path: str | os.PathLike[str], max_depth: int = DEFAULT_MAX_DEPTH
) -> list[SubdirectoryOverride]:
    return OverrideScanner().scan(project_path, max_depth).overrides
