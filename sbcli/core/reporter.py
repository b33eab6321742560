"""Reporter classes for controlling command output."""

from contextlib import contextmanager
from typing import Generator, List, Optional, Tuple

from rich.markup import escape

from .. import ui


class Reporter:
    """Default reporter that prints to the rich console."""

    @contextmanager
    def step(self, title: str) -> Generator[None, None, None]:
        """Show a spinner while the step runs."""
        with ui.console.status(f"[cyan]{escape(title)}...[/cyan]"):
            yield

    def summary_block(self, title: str, items: List[Tuple[str, str]], separator: str = "─" * 50) -> None:
        """Display a summary block with separators.

        Args:
            title: Main title line (e.g., "Plan: dev")
            items: List of (label, value) tuples to display
            separator: Line separator character/string
        """
        ui.print(f"\n{separator}")
        ui.success(title)
        for label, value in items:
            ui.print(f"   {escape(label)}: {escape(str(value))}")
        ui.print(f"{separator}\n")

    def info(self, message: str) -> None:
        """Display an info message."""
        ui.info(message)

    def success(self, message: str) -> None:
        """Display a success message."""
        ui.success(message)

    def error(self, message: str) -> None:
        """Display an error message."""
        ui.error(message)

    def warning(self, message: str) -> None:
        """Display a warning message."""
        ui.warning(message)

    def dim(self, message: str) -> None:
        """Display a dimmed/secondary message."""
        ui.dim(message)

    def debug(self, message: str) -> None:
        """Display a message only when --debug is on."""
        ui.debug(message)

    def print(self, message: Optional[str] = "") -> None:
        """Print a plain message."""
        ui.print(escape(message or ""))


class NullReporter:
    """No-op reporter for testing or library use."""

    @contextmanager
    def step(self, title: str) -> Generator[None, None, None]:
        """No-op context manager."""
        yield

    def summary_block(self, title: str, items: List[Tuple[str, str]], separator: str = "─" * 50) -> None:
        """No-op."""
        pass

    def info(self, message: str) -> None:
        """No-op."""
        pass

    def success(self, message: str) -> None:
        """No-op."""
        pass

    def error(self, message: str) -> None:
        """No-op."""
        pass

    def warning(self, message: str) -> None:
        """No-op."""
        pass

    def dim(self, message: str) -> None:
        """No-op."""
        pass

    def debug(self, message: str) -> None:
        """No-op."""
        pass

    def print(self, message: Optional[str] = "") -> None:
        """No-op."""
        pass


class RecordingReporter(NullReporter):
    """Keeps (level, message) pairs instead of printing them."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def print(self, message: Optional[str] = "") -> None:
        self.messages.append(("print", message or ""))

    def text(self, level: Optional[str] = None) -> str:
        return "\n".join(m for lvl, m in self.messages if level is None or lvl == level)
