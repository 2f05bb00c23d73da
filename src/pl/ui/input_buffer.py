"""Single-line text buffer with a cursor, driven by raw key strings."""

from . import keys


class QueryBuffer:
    """Editable query text for the filter box.

    ``handle_key`` applies one edit or cursor key. Unknown keys are ignored.
    """

    def __init__(self, value: str = ""):
        self.value = value
        self.cursor = len(value)

    def __repr__(self) -> str:
        return f"QueryBuffer(value={self.value!r}, cursor={self.cursor})"

    def handle_key(self, key: str) -> None:
        if keys.is_printable(key):
            self.insert(key)
        elif key in keys.BACKSPACE_KEYS:
            self.backspace()
        elif key in (keys.DELETE, keys.CTRL_D):
            self.delete()
        elif key in (keys.LEFT, keys.CTRL_B):
            self.cursor = max(0, self.cursor - 1)
        elif key in (keys.RIGHT, keys.CTRL_F):
            self.cursor = min(len(self.value), self.cursor + 1)
        elif key in keys.HOME_KEYS or key == keys.CTRL_A:
            self.cursor = 0
        elif key in keys.END_KEYS or key == keys.CTRL_E:
            self.cursor = len(self.value)
        elif key == keys.CTRL_U:
            self.value = self.value[self.cursor :]
            self.cursor = 0
        elif key == keys.CTRL_K:
            self.value = self.value[: self.cursor]
        elif key == keys.CTRL_W:
            self.delete_word()

    def insert(self, text: str) -> None:
        self.value = self.value[: self.cursor] + text + self.value[self.cursor :]
        self.cursor += len(text)

    def backspace(self) -> None:
        if self.cursor == 0:
            return
        self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
        self.cursor -= 1

    def delete(self) -> None:
        self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]

    def delete_word(self) -> None:
        """Delete the word before the cursor, plus any spaces after it."""
        head = self.value[: self.cursor].rstrip(" ")
        cut = head.rfind(" ") + 1
        self.value = self.value[:cut] + self.value[self.cursor :]
        self.cursor = cut
