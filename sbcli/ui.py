"""Console output helpers.

The semantic helpers take plain text and escape it, so messages such as
``Parameter [name] is required`` print literally. Use ``print`` with
``styled`` when markup is wanted.
"""

from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

THEME = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "cyan",
    "dim": "dim",
}

console = Console()
# Silent unless --debug is passed
verbose_console = Console(quiet=True, stderr=True)


def styled(text: str, style_key: str) -> str:
    """Get styled markup without printing. Text is not escaped."""
    color = THEME.get(style_key, THEME["dim"])
    return f"[{color}]{text}[/{color}]"


def print(message: Any = "", style: Optional[str] = None) -> None:
    console.print(message, style=style)


def info(message: str) -> None:
    console.print(styled(escape(message), "info"))


def success(message: str) -> None:
    console.print(styled(escape(message), "success"))


def warning(message: str) -> None:
    console.print(styled(escape(message), "warning"))


def error(message: str) -> None:
    console.print(styled(escape(message), "error"))


def dim(message: str) -> None:
    console.print(styled(escape(message), "dim"))


def debug(message: str) -> None:
    verbose_console.print(f"[dim]DEBUG[/dim] {escape(message)}", highlight=False)


def set_debug(enabled: bool) -> None:
    verbose_console.quiet = not enabled

