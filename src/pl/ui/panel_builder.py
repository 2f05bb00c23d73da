"""Rich panels for the launcher: query box, project list, README preview."""

from rich.align import Align
from rich.console import RenderableType
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from pl.models import InputMode, Project
from pl.preview import NO_README

from .input_buffer import QueryBuffer

EDITING_STYLE = "on grey15"
HIGHLIGHT_STYLE = "bold on grey15"
HIGHLIGHT_SYMBOL = ">"
INPUT_HEIGHT = 3


def calculate_visible_range(
    selected: int | None,
    total_items: int,
    max_visible: int,
    scroll_offset: int,
) -> tuple[int, int, int]:
    """Calculate visible range for the project list.

    Args:
        selected: Selected index, or None when nothing is selected
        total_items: Number of filtered projects
        max_visible: Rows available for items
        scroll_offset: Scroll offset from the previous frame

    Returns:
        Tuple of (new_scroll_offset, visible_start, visible_end)
    """
    if total_items == 0 or max_visible <= 0:
        return 0, 0, 0

    if selected is not None:
        selected = max(0, min(selected, total_items - 1))
        if selected < scroll_offset:
            scroll_offset = selected
        elif selected >= scroll_offset + max_visible:
            scroll_offset = selected - max_visible + 1

    # Never leave blank rows at the bottom when the list got shorter
    scroll_offset = max(0, min(scroll_offset, total_items - max_visible))
    visible_end = min(scroll_offset + max_visible, total_items)

    return scroll_offset, scroll_offset, visible_end


def format_scroll_indicator(hidden_above: int, hidden_below: int) -> tuple[str | None, str | None]:
    """Format scroll indicators.

    Returns:
        Tuple of (above_indicator, below_indicator) - None if no items hidden
    """
    above = f"[dim]  ↑ {hidden_above} more[/dim]" if hidden_above > 0 else None
    below = f"[dim]  ↓ {hidden_below} more[/dim]" if hidden_below > 0 else None
    return above, below


def build_input_panel(query: QueryBuffer, mode: InputMode) -> Panel:
    """Query box. The cursor is drawn as a reversed cell while editing."""
    editing = mode == InputMode.EDITING
    text = Text(no_wrap=True, overflow="crop")
    if editing:
        text.append(query.value[: query.cursor])
        under_cursor = query.value[query.cursor : query.cursor + 1] or " "
        text.append(under_cursor, style="reverse")
        text.append(query.value[query.cursor + 1 :])
    else:
        text.append(query.value)
    return Panel(
        text,
        title="Input",
        title_align="left",
        style=EDITING_STYLE if editing else "",
        height=INPUT_HEIGHT,
    )


def build_project_panel(
    projects: list[Project],
    selected: int | None,
    visible_start: int,
    visible_end: int,
    footer: str,
    rows: int = 0,
) -> Panel:
    """Project list with the selected row highlighted and scroll indicators.

    ``rows`` is the panel's interior height; the footer is pinned to its last row.
    """
    lines: list[Text] = []

    if not projects:
        lines.append(Text("No projects", style="dim"))
    else:
        above, below = format_scroll_indicator(
            hidden_above=visible_start,
            hidden_below=len(projects) - visible_end,
        )
        if above:
            lines.append(Text.from_markup(above))
        for i in range(visible_start, visible_end):
            if i == selected:
                lines.append(Text(f"{HIGHLIGHT_SYMBOL} {projects[i].name}", style=HIGHLIGHT_STYLE))
            else:
                lines.append(Text(f"  {projects[i].name}"))
        if below:
            lines.append(Text.from_markup(below))

    while len(lines) < rows - 1:
        lines.append(Text(""))
    lines.append(Text.from_markup(footer))

    return Panel(Text("\n").join(lines), title="Projects", title_align="left")


def build_readme_panel(readme: str | None) -> Panel:
    """README preview; a centered placeholder when there is nothing to show."""
    content: RenderableType
    if readme is None:
        content = Align.center(Text(NO_README, style="dim"), vertical="middle")
    else:
        content = Markdown(readme)
    return Panel(content)


def format_footer(mode: InputMode, shown: int, total: int) -> str:
    """Count and key hints under the project list."""
    if mode == InputMode.EDITING:
        hints = "enter/esc done · ^n/^p move"
    else:
        hints = "↑↓/jk · / filter · enter open · q quit"
    return f"[dim]  {shown}/{total} · {escape(hints)}[/dim]"
