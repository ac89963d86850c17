"""
    CommandHistory — last-in-first-out record of executed commands.

    Design Pattern: Command (invoker side)
    ──────────────────────────────────────
    Reversible commands push themselves here right after a successful
    ``execute``.  Undoing asks the most recent command to reverse itself
    and drops it once that succeeds, so commands are undone in exact reverse order of
    execution.  A command undone directly drops itself from the history
    it was recorded on.

    One history is owned by whoever drives the commands (the demo driver
    or the command processor) and passed to each ``execute`` call.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from .exceptions import EmptyHistoryError

if TYPE_CHECKING:
    from .cli.commands import Command, CommandResult

logger = logging.getLogger(__name__)


class CommandHistory:
    """
    Stack of executed, not yet undone commands.

    Usage:
        history = CommandHistory()
        AddChildCommand(root, reader).execute(history)
        history.undo()          # removes the child again
    """

    def __init__(self, max_depth: Optional[int] = None):
        """
        Args:
            max_depth: Optional bound on the number of recorded commands.
                       ``None`` means unbounded.
        """
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        self._stack: List[Command] = []
        self._max_depth = max_depth

    # ── Properties ───────────────────────────────────────────────

    @property
    def depth(self) -> int:
        """Number of commands that can be undone."""
        return len(self._stack)

    @property
    def max_depth(self) -> Optional[int]:
        return self._max_depth

    def is_empty(self) -> bool:
        return not self._stack

    # ── Stack operations ─────────────────────────────────────────

    def push(self, command: Command) -> None:
        """Record an executed command."""
        if self._max_depth is not None and len(self._stack) >= self._max_depth:
            dropped = self._stack.pop(0)
            logger.warning("History full (%d): dropping oldest %r",
                           self._max_depth, dropped)
        self._stack.append(command)
        logger.debug("History push %r (depth %d)", command, len(self._stack))

    def pop(self) -> Command:
        """
        Remove and return the most recent command.

        Raises:
            EmptyHistoryError: If nothing has been recorded.
        """
        if not self._stack:
            raise EmptyHistoryError("Nothing to undo.")
        command = self._stack.pop()
        logger.debug("History pop %r (depth %d)", command, len(self._stack))
        return command

    def peek(self) -> Optional[Command]:
        """The most recent command, or ``None`` if the history is empty."""
        return self._stack[-1] if self._stack else None

    def undo(self) -> CommandResult:
        """
        Reverse the most recent command and remove it.

        The command is only removed once its reversal succeeds; if it
        raises, the history is left unchanged.

        Raises:
            EmptyHistoryError: If nothing has been recorded.
        """
        command = self.peek()
        if command is None:
            raise EmptyHistoryError("Nothing to undo.")
        result = command.undo()
        self.discard(command)
        return result

    def discard(self, command: Command) -> bool:
        """
        Remove ``command`` (matched by identity, newest first).

        Returns:
            Whether the command was recorded here.
        """
        for index in range(len(self._stack) - 1, -1, -1):
            if self._stack[index] is command:
                del self._stack[index]
                logger.debug("History discard %r (depth %d)", command, len(self._stack))
                return True
        return False

    def commands(self) -> List[Command]:
        """Recorded commands, oldest first."""
        return list(self._stack)

    def clear(self) -> None:
        """Forget every recorded command without undoing it."""
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)

    def __repr__(self) -> str:
        return f"CommandHistory(depth={len(self._stack)}, max_depth={self._max_depth})"
