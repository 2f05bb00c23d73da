"""Selection index arithmetic for the filtered project list.

Every function takes the current selection (``None`` when nothing is
selected) and the list length, and returns the new selection. A non-empty
list always yields an index in ``range(length)``; an empty list yields
``None``.
"""


def select_next(selected: int | None, length: int) -> int | None:
    """Move down one row, wrapping to the top."""
    if length == 0:
        return None
    if selected is None:
        return 0
    return (selected + 1) % length


def select_previous(selected: int | None, length: int) -> int | None:
    """Move up one row, wrapping to the bottom."""
    if length == 0:
        return None
    if selected is None:
        return length - 1
    return (selected - 1 + length) % length


def select_first(length: int) -> int | None:
    return 0 if length else None


def select_last(length: int) -> int | None:
    return length - 1 if length else None
