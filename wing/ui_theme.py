"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome, status badges, and modals. Syntax
highlighting of file contents is a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    border: str
    border_focused: str
    title: str
    title_focused: str
    selected: str
    selected_unfocused: str
    tree_dir: str
    tree_ignored: str
    status_untracked: str
    status_deleted: str
    status_added: str
    status_modified: str
    status_renamed: str
    status_other: str
    status_bar: str
    error: str
    hint: str
    modal_border: str
    modal_title: str
    help_heading: str
    help_key: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    border="\033[38;5;240m",
    border_focused="\033[38;5;62m",
    title="\033[1m",
    title_focused="\033[1;38;5;62m",
    selected="\033[48;5;62m",
    selected_unfocused="\033[48;5;238m",
    tree_dir="\033[1;34m",
    tree_ignored="\033[2;38;5;244m",
    status_untracked="\033[38;5;178m",
    status_deleted="\033[38;5;160m",
    status_added="\033[38;5;71m",
    status_modified="\033[38;5;214m",
    status_renamed="\033[38;5;69m",
    status_other="\033[38;5;111m",
    status_bar="\033[48;5;236;38;5;250m",
    error="\033[38;5;160m",
    hint="\033[2;38;5;250m",
    modal_border="\033[38;5;62m",
    modal_title="\033[1;38;5;62m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    border="\033[2;38;5;31m",
    border_focused="\033[38;5;39m",
    title="\033[1;38;5;110m",
    title_focused="\033[1;38;5;45m",
    selected="\033[48;5;24m",
    selected_unfocused="\033[48;5;237m",
    tree_dir="\033[1;38;5;45m",
    tree_ignored="\033[2;38;5;67m",
    status_untracked="\033[38;5;222m",
    status_deleted="\033[38;5;203m",
    status_added="\033[38;5;84m",
    status_modified="\033[38;5;215m",
    status_renamed="\033[38;5;117m",
    status_other="\033[38;5;153m",
    status_bar="\033[48;5;23;38;5;153m",
    error="\033[38;5;203m",
    hint="\033[2;38;5;110m",
    modal_border="\033[38;5;39m",
    modal_title="\033[1;38;5;39m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    border="",
    border_focused="",
    title="",
    title_focused="",
    selected="\033[7m",
    selected_unfocused="\033[7m",
    tree_dir="",
    tree_ignored="",
    status_untracked="",
    status_deleted="",
    status_added="",
    status_modified="",
    status_renamed="",
    status_other="",
    status_bar="\033[7m",
    error="",
    hint="",
    modal_border="",
    modal_title="",
    help_heading="",
    help_key="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    candidate = str(name or "").strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def status_color(theme: UITheme, status: str) -> str:
    """Pick the badge color for a status code; empty for clean files."""
    status = status.strip()
    if not status:
        return ""
    if status.startswith("??"):
        return theme.status_untracked
    if "D" in status:
        return theme.status_deleted
    if "A" in status:
        return theme.status_added
    if "M" in status:
        return theme.status_modified
    if "R" in status:
        return theme.status_renamed
    return theme.status_other


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "status_color",
]
