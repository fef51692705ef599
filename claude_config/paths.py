"""Well-known configuration locations for the enterprise, user and project scopes."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from loguru import logger

from claude_config.constants import (
    AGENTS_DIRNAME,
    CLAUDE_DIRNAME,
    CLAUDE_FILENAME,
    CLAUDE_LOCAL_FILENAME,
    COMMANDS_DIRNAME,
    ENTERPRISE_DIR_LINUX,
    ENTERPRISE_DIR_MACOS,
    ENTERPRISE_DIR_WINDOWS,
    HOME_ENV_VARS,
    HOME_FALLBACK,
    MANAGED_MCP_FILENAME,
    MANAGED_SETTINGS_FILENAME,
    PROJECT_MCP_FILENAME,
    RULES_DIRNAME,
    SETTINGS_FILENAME,
    SETTINGS_LOCAL_FILENAME,
    SKILLS_DIRNAME,
    USER_MCP_FILENAME,
)
from claude_config.models import (
    EnterprisePaths,
    PathInfo,
    Platform,
    ProjectConfigFiles,
    UserPaths,
    WellKnownPaths,
)


_ENTERPRISE_DIRS: dict[Platform, str] = {
    Platform.WINDOWS: ENTERPRISE_DIR_WINDOWS,
    Platform.MACOS: ENTERPRISE_DIR_MACOS,
    Platform.LINUX: ENTERPRISE_DIR_LINUX,
}


def get_path_info(path: str | os.PathLike[str]) -> PathInfo:
    """Observe ``path`` as-is. Never raises; unreadable paths report ``exists=False``."""
    text = os.fspath(path)
    exists = _safe_exists(text)
    return PathInfo(path=text, exists=exists, is_directory=exists and _safe_is_dir(text))


def file_exists(path: str | os.PathLike[str]) -> bool:
    return get_path_info(path).exists


def current_platform(identifier: str | None = None) -> Platform:
    value = sys.platform if identifier is None else identifier
    if value.startswith(("win", "cygwin", "msys")):
        return Platform.WINDOWS
    if value == "darwin":
        return Platform.MACOS
    return Platform.LINUX


def enterprise_base_dir(platform: Platform) -> str:
    return _ENTERPRISE_DIRS.get(platform, ENTERPRISE_DIR_LINUX)


def resolve_home_dir(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    for name in HOME_ENV_VARS:
        value = env.get(name)
        if value:
            return value
    logger.debug("No home directory variable set, falling back to {}", HOME_FALLBACK)
    return HOME_FALLBACK


def get_config_paths(
    platform: Platform | None = None,
    environ: Mapping[str, str] | None = None,
) -> WellKnownPaths:
    resolved_platform = platform or current_platform()
    flavour = _path_flavour(resolved_platform)

    enterprise = flavour(enterprise_base_dir(resolved_platform))
    home = flavour(resolve_home_dir(environ))
    user_dir = home / CLAUDE_DIRNAME

    return WellKnownPaths(
        enterprise=EnterprisePaths(
            claude_md=get_path_info(enterprise / CLAUDE_FILENAME),
            managed_mcp=get_path_info(enterprise / MANAGED_MCP_FILENAME),
            managed_settings=get_path_info(enterprise / MANAGED_SETTINGS_FILENAME),
        ),
        user=UserPaths(
            claude_md=get_path_info(user_dir / CLAUDE_FILENAME),
            claude_local_md=get_path_info(user_dir / CLAUDE_LOCAL_FILENAME),
            settings=get_path_info(user_dir / SETTINGS_FILENAME),
            settings_local=get_path_info(user_dir / SETTINGS_LOCAL_FILENAME),
            agents=get_path_info(user_dir / AGENTS_DIRNAME),
            commands=get_path_info(user_dir / COMMANDS_DIRNAME),
            skills=get_path_info(user_dir / SKILLS_DIRNAME),
            mcp=get_path_info(home / USER_MCP_FILENAME),
        ),
    )


def build_project_config_files(project_path: str | os.PathLike[str]) -> ProjectConfigFiles:
    root = Path(project_path)
    dot_claude = root / CLAUDE_DIRNAME
    return ProjectConfigFiles(
        claude_md_root=get_path_info(root / CLAUDE_FILENAME),
        claude_md_dotclaude=get_path_info(dot_claude / CLAUDE_FILENAME),
        claude_local_md=get_path_info(root / CLAUDE_LOCAL_FILENAME),
        settings=get_path_info(dot_claude / SETTINGS_FILENAME),
        settings_local=get_path_info(dot_claude / SETTINGS_LOCAL_FILENAME),
        rules=get_path_info(dot_claude / RULES_DIRNAME),
        commands=get_path_info(dot_claude / COMMANDS_DIRNAME),
        agents=get_path_info(dot_claude / AGENTS_DIRNAME),
        skills=get_path_info(dot_claude / SKILLS_DIRNAME),
        mcp=get_path_info(root / PROJECT_MCP_FILENAME),
    )


def _path_flavour(platform: Platform) -> type[PurePath]:
    if platform == Platform.WINDOWS:
        return PureWindowsPath
    return PurePosixPath


def _safe_exists(path: str) -> bool:
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        return False


def _safe_is_dir(path: str) -> bool:
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False
