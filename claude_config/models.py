from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from claude_config.constants import DEFAULT_MAX_DEPTH


class Platform(str, Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


@dataclass(frozen=True)
class PathInfo:
    path: str
    exists: bool
    is_directory: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "exists": self.exists,
            "is_directory": self.is_directory,
        }


class _PathSlots:
    """Closed record of named PathInfo slots."""

    def slots(self) -> list[tuple[str, PathInfo]]:
        return [(item.name, getattr(self, item.name)) for item in fields(self)]  # type: ignore[arg-type]

    def as_dict(self) -> dict[str, Any]:
        return {name: info.as_dict() for name, info in self.slots()}


@dataclass(frozen=True)
class EnterprisePaths(_PathSlots):
    claude_md: PathInfo
    managed_mcp: PathInfo
    managed_settings: PathInfo


@dataclass(frozen=True)
class UserPaths(_PathSlots):
    claude_md: PathInfo
    claude_local_md: PathInfo
    settings: PathInfo
    settings_local: PathInfo
    agents: PathInfo
    commands: PathInfo
    skills: PathInfo
    mcp: PathInfo


@dataclass(frozen=True)
class WellKnownPaths:
    enterprise: EnterprisePaths
    user: UserPaths

    def as_dict(self) -> dict[str, Any]:
        return {
            "enterprise": self.enterprise.as_dict(),
            "user": self.user.as_dict(),
        }


@dataclass(frozen=True)
class ProjectConfigFiles(_PathSlots):
    claude_md_root: PathInfo
    claude_md_dotclaude: PathInfo
    claude_local_md: PathInfo
    settings: PathInfo
    settings_local: PathInfo
    rules: PathInfo
    commands: PathInfo
    agents: PathInfo
    skills: PathInfo
    mcp: PathInfo


@dataclass(frozen=True)
class ProjectInfo:
    id: str
    path: str
    name: str
    has_instructions_file: bool
    config_files: ProjectConfigFiles

    @property
    def has_claude_md(self) -> bool:
        return self.has_instructions_file

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "path": self.path,
            "name": self.name,
            "has_instructions_file": self.has_instructions_file,
            "has_claude_md": self.has_instructions_file,
            "config_files": self.config_files.as_dict(),
        }


@dataclass(frozen=True)
class SubdirectoryOverride:
    relative_path: str
    full_path: str
    exists: bool = True

    def as_dict(self) -> dict[str, Any]:
        return {
            "relative_path": self.relative_path,
            "full_path": self.full_path,
            "exists": self.exists,
        }


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    path: str
    is_directory: bool

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "is_directory": self.is_directory,
        }


@dataclass
class ProjectScan:
    base_dir: str
    projects: list[ProjectInfo] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "base_dir": self.base_dir,
            "projects": [project.as_dict() for project in self.projects],
            "skipped": list(self.skipped),
        }


@dataclass
class OverrideScan:
    project_path: str
    max_depth: int
    overrides: list[SubdirectoryOverride] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "project_path": self.project_path,
            "max_depth": self.max_depth,
            "overrides": [item.as_dict() for item in self.overrides],
            "skipped": list(self.skipped),
        }


@dataclass(frozen=True)
class AppSettings:
    scan_base_dir: str | None = None
    max_depth: int = DEFAULT_MAX_DEPTH

    def as_dict(self) -> dict[str, Any]:
        return {
            "scan_base_dir": self.scan_base_dir,
            "max_depth": self.max_depth,
        }
