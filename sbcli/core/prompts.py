"""Line-oriented operator input providers."""

from typing import Iterable, List

from rich.markup import escape

from ..ui import console


class ConsolePrompt:
    """Reads one line per prompt from the interactive console."""

    def ask(self, message: str) -> str:
        return console.input(escape(message)).strip()


class ScriptedPrompt:
    """Answers prompts from a fixed list of lines.

    Raises EOFError once the lines run out, the same way a closed stdin does.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self.asked: List[str] = []

    def ask(self, message: str) -> str:
        self.asked.append(message)
        if not self._lines:
            raise EOFError("No more scripted input")
        return self._lines.pop(0).strip()

    @property
    def remaining(self) -> int:
        return len(self._lines)
