"""
    Line readers — the source of folder names for commands.

    Design Pattern: Strategy
    ────────────────────────
    Commands never touch ``sys.stdin`` directly; they ask a ``LineReader``
    for the next line.  ``ConsoleReader`` talks to the terminal,
    ``ScriptedReader`` replays a fixed list of answers (CLI ``--answer``
    flags and tests).
"""
import logging
import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Optional, TextIO

from .exceptions import InputReadError

logger = logging.getLogger(__name__)


class LineReader(ABC):
    """
        Abstract base class for line-oriented input.
    """

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Show ``prompt`` and return the next line without its terminator.

        Raises:
            InputReadError: If no line can be read.
        """
        pass


class ConsoleReader(LineReader):
    """Reads lines from a text stream (standard input by default)."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin
        self._stdout = stdout

    def read_line(self, prompt: str) -> str:
        stdin = self._stdin or sys.stdin
        stdout = self._stdout or sys.stdout

        if prompt:
            stdout.write(prompt)
            stdout.flush()

        try:
            line = stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"Failed to read input: {e}") from e

        # readline() returns '' only at end of input
        if not line:
            raise InputReadError("End of input reached.")

        return line.rstrip("\r\n")


class ScriptedReader(LineReader):
    """
    Replays pre-supplied answers in order.

    The prompt is echoed to ``stdout`` when one is given, so a scripted
    run prints the same transcript as an interactive one.
    """

    def __init__(self, lines: Iterable[str], stdout: Optional[TextIO] = None):
        self._lines = deque(lines)
        self._stdout = stdout

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def read_line(self, prompt: str) -> str:
        if not self._lines:
            raise InputReadError("No scripted input left.")

        line = self._lines.popleft()
        if self._stdout is not None:
            self._stdout.write(f"{prompt}{line}\n")
        logger.debug("Scripted answer %r for prompt %r", line, prompt)
        return line
