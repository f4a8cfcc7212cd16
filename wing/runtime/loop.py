"""Main interactive event loop.

Each iteration syncs the terminal size, folds finished command results into
the controller, renders when dirty, then waits briefly for one key. Feature
logic lives in the controller; this loop only wires messages to commands.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..controller.explorer import ExplorerController
from ..controller.messages import KeyPressed, Message, Resized
from ..input import read_key
from ..render import render_frame, write_frame
from ..ui_theme import UITheme
from .dispatcher import CommandDispatcher
from .terminal import TerminalController

logger = logging.getLogger(__name__)

KEY_POLL_MS = 50


def deliver(controller: ExplorerController, dispatcher: CommandDispatcher, messages: Iterable[Message]) -> None:
    """Apply ``messages`` in order, dispatching whatever commands they produce."""
    for message in messages:
        dispatcher.dispatch(controller.update(message))


def sync_terminal_size(
    controller: ExplorerController,
    dispatcher: CommandDispatcher,
    terminal: TerminalController,
) -> None:
    width, height = terminal.size()
    state = controller.state
    if (width, height) != (state.width, state.height):
        deliver(controller, dispatcher, [Resized(width=width, height=height)])


def run_main_loop(
    controller: ExplorerController,
    dispatcher: CommandDispatcher,
    terminal: TerminalController,
    theme: UITheme,
    *,
    key_poll_ms: int = KEY_POLL_MS,
) -> None:
    """Run until the controller sets ``should_quit``."""
    state = controller.state
    with terminal.raw_mode():
        sync_terminal_size(controller, dispatcher, terminal)
        dispatcher.dispatch(controller.init())
        while not state.should_quit:
            sync_terminal_size(controller, dispatcher, terminal)
            deliver(controller, dispatcher, dispatcher.drain())
            if state.dirty:
                write_frame(terminal.stdout_fd, render_frame(state, theme))
                state.dirty = False
            key = read_key(terminal.stdin_fd, timeout_ms=key_poll_ms)
            if key:
                deliver(controller, dispatcher, [KeyPressed(key)])
    logger.info("main loop finished")


__all__ = ["KEY_POLL_MS", "deliver", "run_main_loop", "sync_terminal_size"]
