"""Rich Console factory and theme for tierctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.color import ColorParseError
from rich.console import Console
from rich.style import Style
from rich.theme import Theme

TIER_THEME = Theme(
    {
        "tier.ok": "bold green",
        "tier.error": "bold red",
        "tier.warning": "bold yellow",
        "tier.op": "bold cyan",
        "tier.key": "dim",
        "tier.id": "bold blue",
        "tier.path": "dim",
        "tier.label": "bold",
        "tier.bank": "bold white on grey23",
        "tier.empty": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TIER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_color(color: str) -> Style:
    """Label style for a tier: dark bold text on the tier's colour."""
    try:
        return Style(color="#1a1a1a", bgcolor=color, bold=True)
    except ColorParseError:
        return Style(bold=True)
