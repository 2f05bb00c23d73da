"""Interactive launcher: draw, read one key, dispatch, repeat."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import readchar
from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel

from pl.config import Config
from pl.discovery import discover
from pl.launcher import open_in_editor
from pl.models import Project
from pl.preview import read_readme
from pl.state import LauncherState

from . import keys
from .panel_builder import (
    INPUT_HEIGHT,
    build_input_panel,
    build_project_panel,
    build_readme_panel,
    calculate_visible_range,
    format_footer,
)

logger = logging.getLogger("pl.ui")

# UI Constants
DEFAULT_TERMINAL_HEIGHT = 24
# Interior rows of the list panel not used by items: footer(1) + scroll indicators(2)
LIST_RESERVED_ROWS = 3

default_console = Console()


class LauncherView:
    """Builds the full-screen layout for a LauncherState.

    Holds only presentation state (the list scroll offset and the README
    panel of the last selection), so the same state object can be rendered
    by any view.
    """

    def __init__(self, console: Console):
        self.console = console
        self.scroll_offset = 0
        self._readme_path: Path | None = None
        self._readme_panel: Panel | None = None

    def readme_panel(self, project: Project | None) -> Panel:
        """README panel for ``project``, re-read only when the selection changes."""
        path = project.path if project else None
        if self._readme_panel is None or path != self._readme_path:
            self._readme_path = path
            self._readme_panel = build_readme_panel(read_readme(path))
        return self._readme_panel

    def render(self, state: LauncherState) -> Layout:
        height = self.console.height or DEFAULT_TERMINAL_HEIGHT
        list_rows = max(1, height - INPUT_HEIGHT - 2)  # minus list borders
        max_items = max(1, list_rows - LIST_RESERVED_ROWS)

        self.scroll_offset, visible_start, visible_end = calculate_visible_range(
            selected=state.selected,
            total_items=len(state.filtered),
            max_visible=max_items,
            scroll_offset=self.scroll_offset,
        )

        layout = Layout()
        layout.split_row(Layout(name="left", ratio=1), Layout(name="right", ratio=1))
        layout["left"].split_column(
            Layout(name="input", size=INPUT_HEIGHT),
            Layout(name="projects", ratio=1),
        )
        layout["input"].update(build_input_panel(state.query, state.mode))
        layout["projects"].update(
            build_project_panel(
                state.filtered,
                state.selected,
                visible_start,
                visible_end,
                footer=format_footer(state.mode, len(state.filtered), len(state.projects)),
                rows=list_rows,
            )
        )
        layout["right"].update(self.readme_panel(state.selected_project))
        return layout


def run_launcher(
    state: LauncherState,
    console: Console | None = None,
    read_key: Callable[[], str] | None = None,
) -> Project | None:
    """Run the interaction loop until the user quits or opens a project.

    Returns:
        The project to open, or None if the user quit.
    """
    console = console or default_console
    read_key = read_key or readchar.readkey
    view = LauncherView(console)

    with Live(
        view.render(state),
        console=console,
        screen=console.is_terminal,
        auto_refresh=False,
    ) as live:
        live.refresh()
        while not state.exit:
            try:
                pressed = keys.read_keys(read_key)
            except KeyboardInterrupt:
                state.quit()
                break
            for key in pressed:
                state.handle_key(key)
            live.update(view.render(state), refresh=True)

    return state.pending_project


def restore_terminal() -> None:
    """Ensure terminal is in clean state on exit."""
    sys.stdout.write("\033[?25h")  # Show cursor
    sys.stdout.flush()


def launch(cfg: Config) -> Project | None:
    """Discover projects, run the picker, and open the chosen one in the editor.

    Returns:
        The project that was opened, or None if the user quit.
    """
    projects = discover(cfg.project_dirs)
    logger.debug("Discovered %d project(s)", len(projects))

    state = LauncherState(projects)
    try:
        project = run_launcher(state)
    finally:
        restore_terminal()

    if project is not None:
        logger.info("Opening %s with %s", project.path, cfg.editor_command)
        open_in_editor(cfg.editor_command, project.path)
    return project
