"""Rich Console factory and theme for coursectl output.

Consoles render into a StringIO buffer so renderers return strings and
the CLI decides where to write them. Outside a terminal (tests, pipes)
Rich drops the color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

COURSE_THEME = Theme(
    {
        "course.ok": "bold green",
        "course.error": "bold red",
        "course.warning": "bold yellow",
        "course.op": "bold cyan",
        "course.key": "dim",
        "course.id": "bold blue",
        "course.name": "bold",
        "course.category": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=COURSE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
