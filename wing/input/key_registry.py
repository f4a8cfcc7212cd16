"""Key-combo dispatch table used by the explorer controller."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class KeyComboBinding(Generic[R]):
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], R]


class KeyComboRegistry(Generic[R]):
    """Exact-match key table; later registrations win for repeated combos."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], R]] = {}

    def register(self, *bindings: KeyComboBinding[R]) -> KeyComboRegistry[R]:
        for binding in bindings:
            for combo in binding.combos:
                self._handlers[combo] = binding.handler
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._handlers

    def dispatch(self, key: str) -> R | None:
        """Invoke the handler bound to ``key``; ``None`` when unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


__all__ = ["KeyComboBinding", "KeyComboRegistry"]
