import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
from loguru import logger
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("USERPROFILE", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def settings_root(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "claude-config-manager"


@pytest.fixture
def make_project():
    def _make(root: Path, *files: str, dirs: tuple[str, ...] = ()) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for relative in files:
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("", encoding="utf-8")
        for relative in dirs:
            (root / relative).mkdir(parents=True, exist_ok=True)
        return root

    return _make


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
