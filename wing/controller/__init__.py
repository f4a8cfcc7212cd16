"""Interactive controller: explorer state, messages, commands, and reducers."""

from .commands import Command, Commit, FetchContent, Push, Refresh, ScheduleTick
from .explorer import ExplorerController
from .messages import (
    CommitResult,
    ContentResult,
    KeyPressed,
    Message,
    PushResult,
    RefreshResult,
    Resized,
    Tick,
)
from .modal import ModalController
from .state import ErrorInfo, ExplorerState, Focus, Modal, Mode
from .text_input import TextInput

__all__ = [
    "Command",
    "Commit",
    "CommitResult",
    "ContentResult",
    "ErrorInfo",
    "ExplorerController",
    "ExplorerState",
    "FetchContent",
    "Focus",
    "KeyPressed",
    "Message",
    "Modal",
    "ModalController",
    "Mode",
    "Push",
    "PushResult",
    "Refresh",
    "RefreshResult",
    "Resized",
    "ScheduleTick",
    "TextInput",
    "Tick",
]
