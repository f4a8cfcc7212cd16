"""Single-line text field used for the commit message.

Instances are immutable: ``handle_key`` returns the next field value and the
modal controller swaps it into state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_PLACEHOLDER = "Commit message"
DEFAULT_CHAR_LIMIT = 120


@dataclass(frozen=True)
class TextInput:
    text: str = ""
    cursor: int = 0
    placeholder: str = DEFAULT_PLACEHOLDER
    char_limit: int = DEFAULT_CHAR_LIMIT

    def value(self) -> str:
        return self.text

    def cleared(self) -> TextInput:
        return replace(self, text="", cursor=0)

    def handle_key(self, key: str) -> TextInput:
        """Apply an editing key; unknown keys leave the field unchanged."""
        text, cursor = self.text, self.cursor
        if key == "BACKSPACE":
            if cursor == 0:
                return self
            return replace(self, text=text[: cursor - 1] + text[cursor:], cursor=cursor - 1)
        if key == "DELETE":
            if cursor >= len(text):
                return self
            return replace(self, text=text[:cursor] + text[cursor + 1 :])
        if key == "LEFT":
            return replace(self, cursor=max(0, cursor - 1))
        if key == "RIGHT":
            return replace(self, cursor=min(len(text), cursor + 1))
        if key == "HOME":
            return replace(self, cursor=0)
        if key == "END":
            return replace(self, cursor=len(text))
        if key == "CTRL_U":
            return replace(self, text=text[cursor:], cursor=0)
        if len(key) == 1 and key.isprintable():
            if len(text) >= self.char_limit:
                return self
            return replace(self, text=text[:cursor] + key + text[cursor:], cursor=cursor + 1)
        return self

    def render(self, *, cursor_style: str = "\033[7m", reset: str = "\033[0m", hint_style: str = "") -> str:
        """``> text`` with the cursor cell in reverse video, or the placeholder."""
        if not self.text:
            placeholder = f"{hint_style}{self.placeholder}{reset if hint_style else ''}"
            return f"> {cursor_style} {reset}{placeholder}"
        before = self.text[: self.cursor]
        at = self.text[self.cursor] if self.cursor < len(self.text) else " "
        after = self.text[self.cursor + 1 :]
        return f"> {before}{cursor_style}{at}{reset}{after}"


__all__ = ["DEFAULT_CHAR_LIMIT", "DEFAULT_PLACEHOLDER", "TextInput"]
