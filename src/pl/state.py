"""Launcher state and the two-mode key dispatch."""

from collections.abc import Callable, Sequence

from pl.filtering import filter_projects
from pl.models import InputMode, Project
from pl.selection import select_first, select_last, select_next, select_previous
from pl.ui import keys
from pl.ui.input_buffer import QueryBuffer

QUIT_KEY = "q"
EDIT_KEY = "/"
FIRST_CHORD_KEY = "g"
LAST_KEY = "G"


class LauncherState:
    """Everything the interaction loop mutates: list, selection, mode, query, exit flags.

    One instance is owned by the loop and passed to render and dispatch on
    every iteration.
    """

    def __init__(
        self,
        projects: Sequence[Project],
        mode: InputMode = InputMode.EDITING,
    ):
        self.projects: tuple[Project, ...] = tuple(projects)
        self.filtered: list[Project] = list(self.projects)
        self.selected: int | None = select_first(len(self.filtered))
        self.mode = mode
        self.query = QueryBuffer()
        self.exit = False
        self.pending_open = False
        self._pending_g = False
        self._handlers: dict[InputMode, Callable[[str], None]] = {
            InputMode.NAVIGATION: self._handle_navigation_key,
            InputMode.EDITING: self._handle_editing_key,
        }

    @property
    def selected_project(self) -> Project | None:
        if self.selected is None:
            return None
        return self.filtered[self.selected]

    @property
    def pending_project(self) -> Project | None:
        """The project to hand to the editor, once the loop has exited with Enter."""
        if not self.pending_open:
            return None
        return self.selected_project

    # Navigation

    def select_next(self) -> None:
        self.selected = select_next(self.selected, len(self.filtered))

    def select_previous(self) -> None:
        self.selected = select_previous(self.selected, len(self.filtered))

    def select_first(self) -> None:
        self.selected = select_first(len(self.filtered))

    def select_last(self) -> None:
        self.selected = select_last(len(self.filtered))

    def refilter(self) -> None:
        """Recompute the filtered list from the query and reset the selection."""
        self.filtered = filter_projects(self.projects, self.query.value)
        self.select_first()

    # Lifecycle

    def quit(self) -> None:
        self.exit = True

    def open_project(self) -> None:
        self.pending_open = self.selected is not None
        self.exit = True

    def start_editing(self) -> None:
        self.mode = InputMode.EDITING

    def stop_editing(self) -> None:
        self.mode = InputMode.NAVIGATION

    # Dispatch

    def handle_key(self, key: str) -> None:
        """Route one key to the handler for the current mode."""
        self._handlers[self.mode](key)

    def _handle_navigation_key(self, key: str) -> None:
        if self._pending_g:
            self._pending_g = False
            if key == FIRST_CHORD_KEY:
                self.select_first()
                return

        if key == QUIT_KEY or key in keys.ESC_KEYS:
            self.quit()
        elif key in ("j", keys.DOWN):
            self.select_next()
        elif key in ("k", keys.UP):
            self.select_previous()
        elif key == LAST_KEY:
            self.select_last()
        elif key == FIRST_CHORD_KEY:
            self._pending_g = True
        elif key == EDIT_KEY:
            self.start_editing()
        elif key in keys.ENTER_KEYS:
            self.open_project()

    def _handle_editing_key(self, key: str) -> None:
        if key in keys.ESC_KEYS or key in keys.ENTER_KEYS:
            self.stop_editing()
        elif key in (keys.CTRL_N, keys.DOWN):
            self.select_next()
        elif key in (keys.CTRL_P, keys.UP):
            self.select_previous()
        else:
            self.query.handle_key(key)
            self.refilter()
