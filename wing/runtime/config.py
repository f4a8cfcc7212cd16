"""Persistent JSON config and startup option resolution.

Stores the refresh period, theme, highlight style, and tree-view preference.
Malformed or missing config falls back to defaults; command-line values win
over the file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "wing"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_REFRESH_SECONDS = 2.0
DEFAULT_THEME = "default"
DEFAULT_STYLE = "monokai"


@dataclass(frozen=True)
class AppConfig:
    repo_path: Path
    refresh_seconds: float = DEFAULT_REFRESH_SECONDS
    theme: str = DEFAULT_THEME
    style: str = DEFAULT_STYLE
    no_color: bool = False
    tree_view: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON object; ``{}`` when missing or malformed."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config as pretty-printed JSON; write failures are logged, not raised."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)


def _load_refresh_seconds(data: dict[str, object]) -> float | None:
    value = data.get("refresh_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if value >= 0 else None


def _load_name(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_tree_view(enabled: bool) -> None:
    config = load_config()
    config["tree_view"] = bool(enabled)
    save_config(config)


def resolve_app_config(
    repo_path: Path,
    *,
    refresh_seconds: float | None = None,
    theme: str | None = None,
    style: str | None = None,
    no_color: bool = False,
) -> AppConfig:
    """Merge command-line values over the config file over defaults."""
    data = load_config()
    if refresh_seconds is None:
        refresh_seconds = _load_refresh_seconds(data)
    tree_view = data.get("tree_view")
    return AppConfig(
        repo_path=repo_path,
        refresh_seconds=DEFAULT_REFRESH_SECONDS if refresh_seconds is None else max(0.0, refresh_seconds),
        theme=theme or _load_name(data, "theme") or DEFAULT_THEME,
        style=style or _load_name(data, "style") or DEFAULT_STYLE,
        no_color=no_color,
        tree_view=tree_view if isinstance(tree_view, bool) else False,
    )


__all__ = [
    "APP_NAME",
    "AppConfig",
    "CONFIG_PATH",
    "DEFAULT_REFRESH_SECONDS",
    "DEFAULT_STYLE",
    "DEFAULT_THEME",
    "load_config",
    "resolve_app_config",
    "save_config",
    "save_tree_view",
]
