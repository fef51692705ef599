from pathlib import Path

import pytest

from claude_config.constants import (
    ENTERPRISE_DIR_LINUX,
    ENTERPRISE_DIR_MACOS,
    ENTERPRISE_DIR_WINDOWS,
)
from claude_config.models import Platform
from claude_config.paths import (
    build_project_config_files,
    current_platform,
    enterprise_base_dir,
    file_exists,
    get_config_paths,
    get_path_info,
    resolve_home_dir,
)


# --- get_path_info / file_exists ---


def test_path_info_for_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "CLAUDE.md"
    target.write_text("rules", encoding="utf-8")

    info = get_path_info(target)

    assert info.path == str(target)
    assert info.exists is True
    assert info.is_directory is False


def test_path_info_for_directory(tmp_path: Path) -> None:
    info = get_path_info(tmp_path)

    assert info.exists is True
    assert info.is_directory is True


def test_path_info_for_missing_path(tmp_path: Path) -> None:
    info = get_path_info(tmp_path / "missing")

    assert info.exists is False
    assert info.is_directory is False


def test_path_info_keeps_path_text_unnormalized(tmp_path: Path) -> None:
    raw = f"{tmp_path}//sub/../CLAUDE.md"

    assert get_path_info(raw).path == raw


def test_path_info_never_raises_for_invalid_path() -> None:
    info = get_path_info("bad\0path")

    assert info.exists is False
    assert info.is_directory is False


@pytest.mark.parametrize("relative", ["present.md", "folder", "missing.md"])
def test_file_exists_matches_path_info(tmp_path: Path, relative: str) -> None:
    (tmp_path / "present.md").write_text("", encoding="utf-8")
    (tmp_path / "folder").mkdir()
    target = tmp_path / relative

    assert file_exists(target) == get_path_info(target).exists


# --- platform and home resolution ---


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("win32", Platform.WINDOWS),
        ("cygwin", Platform.WINDOWS),
        ("darwin", Platform.MACOS),
        ("linux", Platform.LINUX),
        ("freebsd14", Platform.LINUX),
    ],
)
def test_current_platform_maps_identifiers(identifier: str, expected: Platform) -> None:
    assert current_platform(identifier) == expected


def test_enterprise_base_dir_per_platform() -> None:
    assert enterprise_base_dir(Platform.WINDOWS) == ENTERPRISE_DIR_WINDOWS
    assert enterprise_base_dir(Platform.MACOS) == ENTERPRISE_DIR_MACOS
    assert enterprise_base_dir(Platform.LINUX) == ENTERPRISE_DIR_LINUX
    assert ENTERPRISE_DIR_WINDOWS == "C:\\Program Files\\ClaudeCode"
    assert ENTERPRISE_DIR_MACOS == "/Library/Application Support/ClaudeCode"
    assert ENTERPRISE_DIR_LINUX == "/etc/claude-code"


def test_resolve_home_prefers_home_over_userprofile() -> None:
    assert resolve_home_dir({"HOME": "/home/dev", "USERPROFILE": "C:\\Users\\dev"}) == "/home/dev"


def test_resolve_home_uses_userprofile_when_home_missing() -> None:
    assert resolve_home_dir({"USERPROFILE": "C:\\Users\\dev"}) == "C:\\Users\\dev"


def test_resolve_home_falls_back_to_current_directory() -> None:
    assert resolve_home_dir({}) == "."


# --- get_config_paths ---


def test_config_paths_linux_layout(tmp_path: Path) -> None:
    claude_dir = tmp_path / ".claude"
    (claude_dir / "agents").mkdir(parents=True)
    (claude_dir / "CLAUDE.md").write_text("user rules", encoding="utf-8")
    (tmp_path / ".claude.json").write_text("{}", encoding="utf-8")

    paths = get_config_paths(platform=Platform.LINUX, environ={"HOME": str(tmp_path)})

    assert paths.enterprise.claude_md.path == "/etc/claude-code/CLAUDE.md"
    assert paths.enterprise.managed_mcp.path == "/etc/claude-code/managed-mcp.json"
    assert paths.enterprise.managed_settings.path == "/etc/claude-code/managed-settings.json"

    assert paths.user.claude_md.path == str(claude_dir / "CLAUDE.md")
    assert paths.user.claude_md.exists is True
    assert paths.user.claude_local_md.path == str(claude_dir / "CLAUDE.local.md")
    assert paths.user.claude_local_md.exists is False
    assert paths.user.settings.path == str(claude_dir / "settings.json")
    assert paths.user.settings_local.path == str(claude_dir / "settings.local.json")
    assert paths.user.agents.is_directory is True
    assert paths.user.commands.path == str(claude_dir / "commands")
    assert paths.user.skills.path == str(claude_dir / "skills")
    assert paths.user.mcp.path == str(tmp_path / ".claude.json")
    assert paths.user.mcp.exists is True


def test_config_paths_macos_enterprise_base() -> None:
    paths = get_config_paths(platform=Platform.MACOS, environ={"HOME": "/Users/dev"})

    assert paths.enterprise.claude_md.path == "/Library/Application Support/ClaudeCode/CLAUDE.md"
    assert paths.user.settings.path == "/Users/dev/.claude/settings.json"


def test_config_paths_windows_uses_windows_separators() -> None:
    paths = get_config_paths(
        platform=Platform.WINDOWS, environ={"USERPROFILE": "C:\\Users\\dev"}
    )

    assert paths.enterprise.managed_settings.path == (
        "C:\\Program Files\\ClaudeCode\\managed-settings.json"
    )
    assert paths.user.claude_md.path == "C:\\Users\\dev\\.claude\\CLAUDE.md"
    assert paths.user.mcp.path == "C:\\Users\\dev\\.claude.json"


def test_config_paths_without_home_still_populated() -> None:
    paths = get_config_paths(platform=Platform.LINUX, environ={})

    assert paths.user.mcp.path.endswith(".claude.json")
    assert len(paths.user.slots()) == 8
    assert len(paths.enterprise.slots()) == 3


def test_config_paths_serialize_with_fixed_slot_names(tmp_path: Path) -> None:
    payload = get_config_paths(
        platform=Platform.LINUX, environ={"HOME": str(tmp_path)}
    ).as_dict()

    assert list(payload) == ["enterprise", "user"]
    assert list(payload["enterprise"]) == ["claude_md", "managed_mcp", "managed_settings"]
    assert list(payload["user"]) == [
        "claude_md",
        "claude_local_md",
        "settings",
        "settings_local",
        "agents",
        "commands",
        "skills",
        "mcp",
    ]
    assert set(payload["user"]["mcp"]) == {"path", "exists", "is_directory"}


# --- build_project_config_files ---


def test_project_config_files_layout(tmp_path: Path) -> None:
    project = tmp_path / "app"
    (project / ".claude" / "rules").mkdir(parents=True)
    (project / "CLAUDE.md").write_text("", encoding="utf-8")
    (project / ".mcp.json").write_text("{}", encoding="utf-8")

    files = build_project_config_files(project)

    assert files.claude_md_root.path == str(project / "CLAUDE.md")
    assert files.claude_md_root.exists is True
    assert files.claude_md_dotclaude.path == str(project / ".claude" / "CLAUDE.md")
    assert files.claude_md_dotclaude.exists is False
    assert files.claude_local_md.path == str(project / "CLAUDE.local.md")
    assert files.settings.path == str(project / ".claude" / "settings.json")
    assert files.settings_local.path == str(project / ".claude" / "settings.local.json")
    assert files.rules.is_directory is True
    assert files.commands.path == str(project / ".claude" / "commands")
    assert files.agents.path == str(project / ".claude" / "agents")
    assert files.skills.path == str(project / ".claude" / "skills")
    assert files.mcp.exists is True


def test_project_config_files_for_missing_project(tmp_path: Path) -> None:
    files = build_project_config_files(tmp_path / "ghost")

    assert all(not info.exists for _, info in files.slots())


def test_is_directory_implies_exists(tmp_path: Path) -> None:
    project = tmp_path / "app"
    (project / ".claude" / "skills").mkdir(parents=True)

    for _, info in build_project_config_files(project).slots():
        assert not info.is_directory or info.exists
