"""Key strings as returned by ``readchar.readkey()``."""

from collections.abc import Callable

import readchar

UP = readchar.key.UP
DOWN = readchar.key.DOWN
LEFT = readchar.key.LEFT
RIGHT = readchar.key.RIGHT
ESC = "\x1b"
# readkey() waits for a second byte after ESC, so a double tap arrives as one key
ESC_KEYS = (ESC, ESC + ESC)
ENTER_KEYS = ("\r", "\n")
BACKSPACE_KEYS = ("\x7f", "\x08", readchar.key.BACKSPACE)  # Ctrl-H sends \x08
DELETE = "\x1b[3~"
# readkey() stops after "\x1b[" plus a digit other than 1, 2, 3, 5 or 6, so these
# arrive without their "~", which follows as a key of its own
TILDE_SPLIT_KEYS = ("\x1b[4", "\x1b[7", "\x1b[8")
HOME_KEYS = ("\x1b[H", "\x1b[1~", "\x1bOH", "\x1b[7")
END_KEYS = ("\x1b[F", "\x1b[4~", "\x1bOF", "\x1b[4", "\x1b[8")

CTRL_A = "\x01"
CTRL_B = "\x02"
CTRL_D = "\x04"
CTRL_E = "\x05"
CTRL_F = "\x06"
CTRL_K = "\x0b"
CTRL_N = "\x0e"
CTRL_P = "\x10"
CTRL_U = "\x15"
CTRL_W = "\x17"


def is_printable(key: str) -> bool:
    """True for a single printable character (not an escape sequence)."""
    return len(key) == 1 and key.isprintable()


def read_keys(read_key: Callable[[], str]) -> list[str]:
    """Read one keypress, rejoining sequences that readkey() splits in two.

    The stray "~" of a split Home/End sequence is dropped. Any other key
    read while checking for it is returned after the sequence.
    """
    key = read_key()
    if key not in TILDE_SPLIT_KEYS:
        return [key]
    trailing = read_key()
    if trailing == "~":
        return [key]
    return [key, trailing]
