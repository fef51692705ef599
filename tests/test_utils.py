import json
from pathlib import Path

from claude_config.utils import (
    compact_home_path,
    compact_home_paths_in_text,
    read_json_safe,
    write_json,
    xdg_config_home,
)


# --- read_json_safe ---


def test_read_json_safe_file_missing(tmp_path: Path) -> None:
    result, error = read_json_safe(tmp_path / "missing.json")

    assert result is None
    assert error is None


def test_read_json_safe_file_empty(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("", encoding="utf-8")

    result, error = read_json_safe(path)

    assert result is None
    assert error is None


def test_read_json_safe_valid_json(tmp_path: Path) -> None:
    path = tmp_path / "valid.json"
    path.write_text(json.dumps({"max_depth": 3}), encoding="utf-8")

    result, error = read_json_safe(path)

    assert result == {"max_depth": 3}
    assert error is None


def test_read_json_safe_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "invalid.json"
    path.write_text("{bad json", encoding="utf-8")

    result, error = read_json_safe(path)

    assert result is None
    assert isinstance(error, str)


# --- write_json ---


def test_write_json_creates_parents_and_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "settings.json"

    write_json(path, {"scan_base_dir": None})

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert json.loads(text) == {"scan_base_dir": None}


# --- xdg_config_home ---


def test_xdg_config_home_uses_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    assert xdg_config_home() == tmp_path / "xdg"


def test_xdg_config_home_falls_back_to_dot_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    assert xdg_config_home() == tmp_path / ".config"


# --- compact_home_path ---


def test_compact_home_path_for_home_itself(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path) == "~"


def test_compact_home_path_for_absolute_home_path(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path / ".claude" / "CLAUDE.md") == "~/.claude/CLAUDE.md"


def test_compact_home_path_leaves_other_paths(tmp_path: Path) -> None:
    assert compact_home_path("/etc/claude-code/CLAUDE.md") == "/etc/claude-code/CLAUDE.md"


def test_compact_home_paths_in_text_rewrites_embedded_paths(tmp_path: Path) -> None:
    message = (
        f"Skipped {tmp_path / 'work' / 'locked'} "
        f"and {tmp_path / '.claude' / 'agents'}"
    )

    result = compact_home_paths_in_text(message)

    assert "~/work/locked" in result
    assert "~/.claude/agents" in result
