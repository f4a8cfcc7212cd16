"""Commands: one-shot effects requested by the controller.

Each command captures everything it needs at issue time. The dispatcher runs
it off the update path and posts exactly one result message back (ticks post a
``Tick`` after their delay).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .state import Mode


@dataclass(frozen=True)
class Refresh:
    generation: int
    content_generation: int
    mode: Mode
    keep_path: str = ""


@dataclass(frozen=True)
class FetchContent:
    generation: int
    path: str
    status: str
    mode: Mode


@dataclass(frozen=True)
class Commit:
    session: int
    message: str


@dataclass(frozen=True)
class Push:
    session: int


@dataclass(frozen=True)
class ScheduleTick:
    delay_seconds: float


Command = Union[Refresh, FetchContent, Commit, Push, ScheduleTick]

__all__ = ["Command", "Commit", "FetchContent", "Push", "Refresh", "ScheduleTick"]
