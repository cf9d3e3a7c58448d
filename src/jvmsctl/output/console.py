"""Rich Console factory and theme for jvmsctl output.

Consoles render into a StringIO buffer so renderers keep a
``render_result() -> str`` contract; Click does the actual writing. In
non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

JVMS_THEME = Theme(
    {
        "jvms.ok": "bold green",
        "jvms.error": "bold red",
        "jvms.op": "bold cyan",
        "jvms.key": "dim",
        "jvms.name": "bold blue",
        "jvms.path": "dim",
        "jvms.default": "bold green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=JVMS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
