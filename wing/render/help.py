"""Modal overlay bodies: key help, commit message entry, and push confirmation.

Helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..controller.state import ExplorerState, Modal
from ..ui_theme import UITheme

HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "NAVIGATION",
        (
            ("Up/k Down/j", "move selection or scroll"),
            ("PgUp PgDn", "page"),
            ("Tab Shift+Tab", "switch pane focus"),
        ),
    ),
    (
        "VIEW",
        (
            ("m", "toggle Explorer / Diff"),
            ("t", "toggle tree view"),
            ("Space", "expand or collapse directory"),
            ("r", "refresh now"),
        ),
    ),
    (
        "ACTIONS",
        (
            ("Enter", "commit all changes"),
            ("h ?", "help"),
            ("q Esc Ctrl+C", "quit"),
        ),
    ),
)

MODAL_TITLES = {
    Modal.COMMIT: "Commit",
    Modal.PUSH: "Push",
    Modal.HELP: "Help",
}


def help_lines(theme: UITheme) -> list[str]:
    key_width = max(len(key) for _, bindings in HELP_SECTIONS for key, _ in bindings)
    lines: list[str] = []
    for heading, bindings in HELP_SECTIONS:
        if lines:
            lines.append("")
        lines.append(f"{theme.help_heading}{heading}{theme.reset}")
        for key, description in bindings:
            lines.append(f"{theme.help_key}{key.ljust(key_width)}{theme.reset}  {description}")
    lines.append("")
    lines.append(f"{theme.hint}enter/esc: close{theme.reset}")
    return lines


def commit_lines(state: ExplorerState, theme: UITheme) -> list[str]:
    lines = [
        "Message for all working tree changes:",
        "",
        state.commit_input.render(hint_style=theme.hint),
        "",
    ]
    if state.modal_pending:
        lines.append(f"{theme.hint}Committing...{theme.reset}")
    elif state.modal_error:
        lines.append(f"{theme.error}{state.modal_error}{theme.reset}")
    lines.append(f"{theme.hint}enter: commit  esc: cancel{theme.reset}")
    return lines


def push_lines(state: ExplorerState, theme: UITheme) -> list[str]:
    lines = ["Commit created. Push to the remote?", ""]
    if state.modal_pending:
        lines.append(f"{theme.hint}Pushing...{theme.reset}")
    elif state.modal_error:
        lines.append(f"{theme.error}{state.modal_error}{theme.reset}")
    lines.append(f"{theme.hint}enter: push  esc: skip{theme.reset}")
    return lines


def modal_body_lines(state: ExplorerState, theme: UITheme) -> list[str]:
    if state.modal is Modal.COMMIT:
        return commit_lines(state, theme)
    if state.modal is Modal.PUSH:
        return push_lines(state, theme)
    if state.modal is Modal.HELP:
        return help_lines(theme)
    return []


__all__ = ["HELP_SECTIONS", "MODAL_TITLES", "help_lines", "modal_body_lines"]
