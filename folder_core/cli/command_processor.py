"""
    CommandProcessor — parses raw shell strings and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – parses the shell text into ``Command`` objects.
    • Invoker       – owns the ``CommandHistory`` that reversible
                      commands record themselves on.
    • Facade        – single ``process(text)`` entry-point hides all parsing.

    The processor works on one current folder (the root it was created
    with).  Every add / rename is recorded so the user can step back
    with ``undo`` or ``undo all``.
"""
from __future__ import annotations

import logging
import shlex
from typing import List, Optional

from folder_api.models.folder import Folder

from ..config import AppConfig
from ..exceptions import EmptyHistoryError, InvalidNameError
from ..history import CommandHistory
from ..input_reader import LineReader
from .commands import (
    Command,
    CommandResult,
    AddChildCommand,
    RenameCommand,
    UndoLastCommand,
    UndoAllCommand,
    ListCommand,
    TreeCommand,
    InfoCommand,
    HelpCommand,
)

logger = logging.getLogger(__name__)


class CommandProcessor:
    """
    Parses raw shell input, creates ``Command`` objects, executes them
    on the current folder, and maintains the undo history.

    Usage:
        processor = CommandProcessor(Folder("tmp"), reader)
        result = processor.process("add pics")
    """

    def __init__(self, root: Folder, reader: LineReader,
                 history: Optional[CommandHistory] = None,
                 config: Optional[AppConfig] = None):
        """
        Args:
            root:    Folder the commands act on.
            reader:  Source of names for ``add`` / ``rename`` without arguments.
            history: Shared history; a new one is created when omitted.
            config:  Prompts and history bound.
        """
        self._config = config or AppConfig()
        self._root = root
        self._reader = reader
        if history is None:
            history = CommandHistory(self._config.max_history_depth)
        self._history = history

    # ── Public API ───────────────────────────────────────────────

    @property
    def root(self) -> Folder:
        return self._root

    @property
    def history(self) -> CommandHistory:
        return self._history

    def process(self, text: str) -> CommandResult:
        """
        Parse and execute a single shell command.

        Args:
            text: Raw command string from the user.

        Returns:
            ``CommandResult`` with success status and message.

        Raises:
            InputReadError: If a name prompt cannot be answered.
        """
        text = self._strip_comments(text).strip()
        if not text:
            return CommandResult(False, "Empty command. Type 'help' for usage.", self._root)

        try:
            command = self._parse(text)
        except ValueError as e:
            return CommandResult(False, f"Parse error: {e}", self._root)

        return self._execute(command)

    def get_undo_depth(self) -> int:
        """Number of commands that can be undone."""
        return self._history.depth

    # ── Execution engine ─────────────────────────────────────────

    def _execute(self, command: Command) -> CommandResult:
        """Execute a parsed command, reporting recoverable errors as results."""
        try:
            return command.execute(self._history)
        except EmptyHistoryError as e:
            return CommandResult(False, str(e), self._root)
        except InvalidNameError as e:
            logger.warning("Rejected %r: %s", command, e)
            return CommandResult(False, str(e), self._root)

    # ── Comment handling ────────────────────────────────────────

    @staticmethod
    def _strip_comments(text: str) -> str:
        """
        Strip inline comments — everything after an unquoted ``#``.

        Example:
            >>> CommandProcessor._strip_comments("add pics   # holiday")
            'add pics'
        """
        in_single = False
        in_double = False
        for i, ch in enumerate(text):
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == '#' and not in_single and not in_double:
                return text[:i].rstrip()
        return text

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, text: str) -> Command:
        """
        Parse raw shell text into a ``Command`` object.

        Raises:
            ValueError: If the text cannot be parsed.
        """
        try:
            tokens = shlex.split(text)
        except ValueError:
            # Fallback: simple split if quotes are malformed
            tokens = text.split()

        if not tokens:
            raise ValueError("Empty command.")

        verb = tokens[0].lower()
        args = tokens[1:]

        if verb == "add":
            return AddChildCommand(
                self._root, self._reader,
                name=self._optional_name(verb, args),
                prompt=self._config.prompts.child_name,
            )
        if verb == "rename":
            return RenameCommand(
                self._root, self._reader,
                name=self._optional_name(verb, args),
                prompt=self._config.prompts.new_name,
            )

        if verb == "undoall":
            self._expect_no_args(verb, args)
            return UndoAllCommand(self._root)
        if verb == "undo":
            if not args:
                return UndoLastCommand(self._root)
            if len(args) == 1 and args[0].lower() == "all":
                return UndoAllCommand(self._root)
            raise ValueError("Usage: undo [all]")

        if verb in ("list", "ls"):
            self._expect_no_args(verb, args)
            return ListCommand(self._root)
        if verb == "tree":
            self._expect_no_args(verb, args)
            return TreeCommand(self._root)
        if verb == "info":
            self._expect_no_args(verb, args)
            return InfoCommand(self._root)
        if verb == "help":
            return HelpCommand(self._root)

        raise ValueError(f"Unknown command: '{verb}'. Type 'help' for usage.")

    # ── Token helpers ────────────────────────────────────────────

    @staticmethod
    def _optional_name(verb: str, args: List[str]) -> Optional[str]:
        """Single optional name argument; ``None`` means prompt for it."""
        if not args:
            return None
        if len(args) > 1:
            raise ValueError(
                f"Usage: {verb} [<name>] (quote names that contain spaces)"
            )
        return args[0]

    @staticmethod
    def _expect_no_args(verb: str, args: List[str]) -> None:
        if args:
            raise ValueError(f"'{verb}' takes no arguments.")
