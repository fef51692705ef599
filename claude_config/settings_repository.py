from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from claude_config.constants import APP_DIRNAME, DEFAULT_MAX_DEPTH
from claude_config.errors import InvalidConfigSchemaError, InvalidJsonFormatError
from claude_config.models import AppSettings
from claude_config.utils import read_json_safe, write_json, xdg_config_home


SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "scan_base_dir": {"type": ["string", "null"]},
        "max_depth": {"type": "integer", "minimum": 0},
    },
    "additionalProperties": True,
}


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class SettingsRepository:
    """Persisted app settings under the XDG config directory."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root or (xdg_config_home() / APP_DIRNAME)
        self._validator = Draft202012Validator(SETTINGS_SCHEMA)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def settings_path(self) -> Path:
        return self.root / "settings.json"

    def load_raw(self) -> dict[str, Any]:
        payload, error = read_json_safe(self.settings_path)
        if error is not None:
            raise InvalidJsonFormatError(self.settings_path, error)
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise InvalidConfigSchemaError(self.settings_path, "must be a JSON object")
        error_item = next(iter(self._validator.iter_errors(payload)), None)
        if error_item is not None:
            raise InvalidConfigSchemaError(
                self.settings_path, format_schema_error(error_item)
            )
        return payload

    def load(self) -> AppSettings:
        payload = self.load_raw()
        return AppSettings(
            scan_base_dir=payload.get("scan_base_dir"),
            max_depth=int(payload.get("max_depth", DEFAULT_MAX_DEPTH)),
        )

    def save(self, settings: AppSettings) -> None:
        payload = self.load_raw()
        payload.update(settings.as_dict())
        write_json(self.settings_path, payload)

    def set_scan_base_dir(self, path: Path) -> AppSettings:
        normalized = path.expanduser().resolve()
        if not normalized.exists() or not normalized.is_dir():
            raise ValueError(
                f"Base directory does not exist or is not a directory: {normalized}"
            )
        current = self.load()
        updated = AppSettings(scan_base_dir=str(normalized), max_depth=current.max_depth)
        self.save(updated)
        return updated

    def set_max_depth(self, max_depth: int) -> AppSettings:
        if max_depth < 0:
            raise ValueError(f"Max depth must be >= 0, got {max_depth}")
        current = self.load()
        updated = AppSettings(scan_base_dir=current.scan_base_dir, max_depth=max_depth)
        self.save(updated)
        return updated

    def reset(self) -> bool:
        if not self.settings_path.exists():
            return False
        self.settings_path.unlink()
        return True
