"""JSON settings loading for the browser.

The config file is mandatory: the browser refuses to start without a page
size and an editor command. Optional keys fall back to documented defaults.
"""

from __future__ import annotations

import json
import os
import shlex
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

from ..errors import ConfigError
from ..pagination import MAX_PAGE_SIZE, MIN_PAGE_SIZE, is_valid_page_size


APP_NAME = "lazyfm"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "lazyfm.log"
CONFIG_ENV_VAR = "LAZYFM_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
STARTER_PAGE_SIZE = 20


@dataclass(frozen=True)
class Settings:
    page_size: int
    editor: tuple[str, ...]
    elevate_command: tuple[str, ...] = ()
    show_hidden: bool = False
    color: bool = True
    syntax_style: str | None = None
    log_level: str = "WARNING"
    log_file: Path = DEFAULT_LOG_PATH
    source: Path | None = None

    @property
    def elevation_available(self) -> bool:
        return bool(self.elevate_command)


def resolve_config_path(explicit: Path | None = None) -> Path:
    """Return ``--config`` path, else ``$LAZYFM_CONFIG``, else the platform default."""
    if explicit is not None:
        return explicit
    from_env = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Path) -> dict[str, object]:
    """Load the top-level JSON object from ``path``.

    Raises ``ConfigError`` when the file is missing, unreadable, malformed, or
    does not decode to a JSON object.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"configuration file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"cannot read configuration file {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"malformed configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"configuration file {path} must contain a JSON object")
    return data


def _required_page_size(data: dict[str, object]) -> int:
    if "page_size" not in data:
        raise ConfigError("configuration is missing 'page_size'")
    value = data["page_size"]
    if not is_valid_page_size(value):
        raise ConfigError(f"'page_size' must be an integer between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}")
    return int(value)


def _command(data: dict[str, object], key: str, required: bool) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        if required:
            raise ConfigError(f"configuration is missing '{key}'")
        return ()
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string")
    try:
        parts = tuple(shlex.split(value))
    except ValueError as exc:
        raise ConfigError(f"'{key}' is not a valid command line: {exc}") from exc
    if not parts and required:
        raise ConfigError(f"'{key}' is empty")
    return parts


def _optional_bool(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key, default)
    return value if isinstance(value, bool) else default


def _optional_style(data: dict[str, object]) -> str | None:
    value = data.get("syntax_style")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _optional_log_level(data: dict[str, object]) -> str:
    value = data.get("log_level")
    if isinstance(value, str) and value.strip().upper() in LOG_LEVELS:
        return value.strip().upper()
    return "WARNING"


def _optional_log_file(data: dict[str, object]) -> Path:
    value = data.get("log_file")
    if isinstance(value, str) and value.strip():
        return Path(value.strip()).expanduser()
    return DEFAULT_LOG_PATH


def parse_settings(data: dict[str, object], source: Path | None = None) -> Settings:
    return Settings(
        page_size=_required_page_size(data),
        editor=_command(data, "editor", required=True),
        elevate_command=_command(data, "elevate_command", required=False),
        show_hidden=_optional_bool(data, "show_hidden", False),
        color=_optional_bool(data, "color", True),
        syntax_style=_optional_style(data),
        log_level=_optional_log_level(data),
        log_file=_optional_log_file(data),
        source=source,
    )


def load_settings(explicit: Path | None = None) -> Settings:
    path = resolve_config_path(explicit)
    return parse_settings(load_config(path), source=path)


def starter_config() -> dict[str, object]:
    editor = os.environ.get("EDITOR", "").strip() or "vi"
    return {
        "page_size": STARTER_PAGE_SIZE,
        "editor": editor,
        "elevate_command": "sudo",
        "show_hidden": False,
        "color": True,
        "syntax_style": None,
        "log_level": "WARNING",
    }


def write_starter_config(path: Path) -> bool:
    """Create a starter config at ``path``; ``False`` when one already exists."""
    if path.exists():
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(starter_config(), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot write configuration file {path}: {exc}") from exc
    return True


__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_LOG_PATH",
    "Settings",
    "resolve_config_path",
    "load_config",
    "parse_settings",
    "load_settings",
    "starter_config",
    "write_starter_config",
]
