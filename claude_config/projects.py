from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from claude_config.constants import (
    CLAUDE_DIRNAME,
    CLAUDE_FILENAME,
    GIT_DIRNAME,
    PROJECT_MARKER_FILES,
)
from claude_config.models import ProjectInfo, ProjectScan
from claude_config.paths import build_project_config_files, file_exists


class ProjectService:
    """Finds projects among the immediate children of a base directory."""

    def has_instructions_file(self, project_path: Path) -> bool:
        return file_exists(project_path / CLAUDE_FILENAME) or file_exists(
            project_path / CLAUDE_DIRNAME / CLAUDE_FILENAME
        )

    def is_project(self, path: Path) -> bool:
        if self.has_instructions_file(path):
            return True
        if file_exists(path / GIT_DIRNAME):
            return True
        return any(file_exists(path / marker) for marker in PROJECT_MARKER_FILES)

    def build_project_info(self, project_path: Path) -> ProjectInfo:
        name = project_path.name
        return ProjectInfo(
            id=name,
            path=str(project_path),
            name=name,
            has_instructions_file=self.has_instructions_file(project_path),
            config_files=build_project_config_files(project_path),
        )

    def scan(self, base_dir: str | os.PathLike[str]) -> ProjectScan:
        base = Path(base_dir).absolute()
        result = ProjectScan(base_dir=str(base))

        try:
            entries = list(os.scandir(base))
        except OSError as exc:
            logger.debug("Cannot list base directory {}: {}", base, exc)
            result.skipped.append(str(base))
            return result

        for entry in entries:
            child = base / entry.name
            try:
                is_dir = entry.is_dir()
            except OSError as exc:
                logger.debug("Skipping unreadable entry {}: {}", child, exc)
                result.skipped.append(str(child))
                continue
            if not is_dir or not self.is_project(child):
                continue
            result.projects.append(self.build_project_info(child))

        logger.debug("Found {} project(s) under {}", len(result.projects), base)
        return result


def list_projects(base_dir: str | os.PathLike[str]) -> list[ProjectInfo]:
    return ProjectService().scan(base_dir).projects
