from typing import Final


CLAUDE_FILENAME: Final[str] = "CLAUDE.md"
CLAUDE_LOCAL_FILENAME: Final[str] = "CLAUDE.local.md"
CLAUDE_DIRNAME: Final[str] = ".claude"
GIT_DIRNAME: Final[str] = ".git"

SETTINGS_FILENAME: Final[str] = "settings.json"
SETTINGS_LOCAL_FILENAME: Final[str] = "settings.local.json"

USER_MCP_FILENAME: Final[str] = ".claude.json"
PROJECT_MCP_FILENAME: Final[str] = ".mcp.json"
MANAGED_MCP_FILENAME: Final[str] = "managed-mcp.json"
MANAGED_SETTINGS_FILENAME: Final[str] = "managed-settings.json"

AGENTS_DIRNAME: Final[str] = "agents"
COMMANDS_DIRNAME: Final[str] = "commands"
RULES_DIRNAME: Final[str] = "rules"
SKILLS_DIRNAME: Final[str] = "skills"

ENTERPRISE_DIR_WINDOWS: Final[str] = "C:\\Program Files\\ClaudeCode"
ENTERPRISE_DIR_MACOS: Final[str] = "/Library/Application Support/ClaudeCode"
ENTERPRISE_DIR_LINUX: Final[str] = "/etc/claude-code"

HOME_ENV_VARS: Final[tuple[str, ...]] = ("HOME", "USERPROFILE")
HOME_FALLBACK: Final[str] = "."

PROJECT_MARKER_FILES: Final[tuple[str, ...]] = (
    "package.json",
    "tsconfig.json",
    "pyproject.toml",
    "go.mod",
    "Cargo.toml",
)

OVERRIDE_IGNORED_DIRS: Final[frozenset[str]] = frozenset(
    {
        "node_modules",
        "target",
        "dist",
        "build",
        "__pycache__",
        "vendor",
        ".git",
    }
)

HIDDEN_PREFIX: Final[str] = "."
LOCAL_OVERRIDE_SUFFIX: Final[str] = " (local)"
DEFAULT_MAX_DEPTH: Final[int] = 5

APP_DIRNAME: Final[str] = "claude-config-manager"
