"""
    Folder commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command encapsulates a folder-manipulation action as an object.
    Every command has:
        • ``execute(history) → CommandResult``  — perform the action and,
                                                  when reversible, record
                                                  itself on ``history``
        • ``undo() → CommandResult``            — reverse the action

    Lifecycle of one command instance:

        PENDING ──execute──▶ EXECUTED ──undo──▶ UNDONE

    Executing twice, or undoing a command that is not EXECUTED, raises
    ``CommandStateError``.  Commands that do not support undo raise
    ``UnsupportedOperationError`` from ``undo()`` whatever their state.

    Supported shell verbs (see ``CommandProcessor``):
    ─────────────────────────────────────────────────
        add    [<name>]
        rename [<name>]
        undo
        undo all
        list
        tree
        info
        help
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from folder_api.models.folder import Folder

from ..exceptions import (
    CommandStateError,
    InvalidNameError,
    UnsupportedOperationError,
)
from ..history import CommandHistory
from ..input_reader import ConsoleReader, LineReader

logger = logging.getLogger(__name__)


DEFAULT_CHILD_PROMPT = "Enter folder name: "
DEFAULT_RENAME_PROMPT = "Enter new name: "


class CommandState(Enum):
    PENDING = "pending"
    EXECUTED = "executed"
    UNDONE = "undone"


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution or undo.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output.
        folder:   The folder the command acted on.
        data:     Optional structured data for programmatic consumers.
    """
    success: bool
    message: str
    folder: Optional[Folder] = None
    data: Optional[Dict[str, Any]] = field(default_factory=dict)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all folder commands.

    Design Pattern: Command + Template Method
    ``execute`` and ``undo`` enforce the lifecycle and recording;
    subclasses supply ``_do_execute`` and, if reversible, ``_do_undo``.
    """

    def __init__(self, target: Folder):
        self._target = target
        self._state = CommandState.PENDING
        self._history: Optional[CommandHistory] = None

    @property
    def target(self) -> Folder:
        return self._target

    @property
    def state(self) -> CommandState:
        return self._state

    @property
    def supports_undo(self) -> bool:
        """Whether this command can be undone."""
        return False

    def execute(self, history: CommandHistory) -> CommandResult:
        """
        Run the command once and record it on ``history`` if reversible.

        Raises:
            CommandStateError: If the command has already been executed.
        """
        if self._state is not CommandState.PENDING:
            raise CommandStateError(
                f"{type(self).__name__} already {self._state.value}; "
                f"create a new command instead."
            )

        result = self._do_execute(history)
        self._state = CommandState.EXECUTED

        if self.supports_undo:
            history.push(self)
            self._history = history
        logger.info("Executed %r: %s", self, result.message)
        return result

    def undo(self) -> CommandResult:
        """
        Reverse a previously executed command and drop it from the
        history it was recorded on.  If the reversal raises, the command
        stays EXECUTED and stays recorded.

        Raises:
            UnsupportedOperationError: If the command is not reversible.
            CommandStateError: If the command is not in the EXECUTED state.
        """
        if not self.supports_undo:
            raise UnsupportedOperationError(
                f"Undo is not supported for {type(self).__name__}."
            )
        if self._state is not CommandState.EXECUTED:
            raise CommandStateError(
                f"Cannot undo {type(self).__name__} in state '{self._state.value}'."
            )

        result = self._do_undo()
        self._state = CommandState.UNDONE
        if self._history is not None:
            self._history.discard(self)
            self._history = None
        logger.info("Undid %r: %s", self, result.message)
        return result

    @abstractmethod
    def _do_execute(self, history: CommandHistory) -> CommandResult:
        ...

    def _do_undo(self) -> CommandResult:
        raise UnsupportedOperationError(
            f"Undo is not supported for {type(self).__name__}."
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(target='{self._target.name}', state={self._state.value})"


class _NamePromptCommand(Command):
    """
    Base for commands that need a folder name.

    The name is taken from ``name`` when one was given up front,
    otherwise read from ``reader`` after showing ``prompt``.
    """

    def __init__(self, target: Folder, reader: Optional[LineReader] = None,
                 name: Optional[str] = None, prompt: str = ""):
        super().__init__(target)
        self._reader = reader
        self._preset_name = name
        self._prompt = prompt

    def _read_name(self) -> str:
        if self._preset_name is not None:
            raw = self._preset_name
        else:
            reader = self._reader or ConsoleReader()
            raw = reader.read_line(self._prompt)

        name = raw.strip()
        if not name:
            raise InvalidNameError("Folder name must not be blank.")
        return name


# ═════════════════════════════════════════════════════════════════
#  MUTATING COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddChildCommand(_NamePromptCommand):
    """
    Create a new child folder under the target.

    Syntax:
        add
        add pics
    """

    def __init__(self, target: Folder, reader: Optional[LineReader] = None,
                 name: Optional[str] = None, prompt: str = DEFAULT_CHILD_PROMPT):
        super().__init__(target, reader, name, prompt)
        self._child: Optional[Folder] = None

    @property
    def child(self) -> Optional[Folder]:
        """The folder created by ``execute``, or ``None`` before that."""
        return self._child

    @property
    def supports_undo(self) -> bool:
        return True

    def _do_execute(self, history: CommandHistory) -> CommandResult:
        name = self._read_name()
        self._child = Folder(name)
        self._target.add_child(self._child)
        return CommandResult(
            True,
            f"Folder '{name}' added to '{self._target.name}'.",
            self._target,
            data={"child": name},
        )

    def _do_undo(self) -> CommandResult:
        # Raises ChildNotFoundError if the child was removed some other way
        self._target.remove_child(self._child)
        return CommandResult(
            True,
            f"Undo: folder '{self._child.name}' removed from '{self._target.name}'.",
            self._target,
            data={"child": self._child.name},
        )


class RenameCommand(_NamePromptCommand):
    """
    Rename the target folder.

    Syntax:
        rename
        rename docs
    """

    def __init__(self, target: Folder, reader: Optional[LineReader] = None,
                 name: Optional[str] = None, prompt: str = DEFAULT_RENAME_PROMPT):
        super().__init__(target, reader, name, prompt)
        self._previous_name: Optional[str] = None

    @property
    def previous_name(self) -> Optional[str]:
        return self._previous_name

    @property
    def supports_undo(self) -> bool:
        return True

    def _do_execute(self, history: CommandHistory) -> CommandResult:
        new_name = self._read_name()
        self._previous_name = self._target.name
        self._target.rename(new_name)
        return CommandResult(
            True,
            f"Folder '{self._previous_name}' renamed to '{new_name}'.",
            self._target,
            data={"old": self._previous_name, "new": new_name},
        )

    def _do_undo(self) -> CommandResult:
        current = self._target.name
        self._target.rename(self._previous_name)
        return CommandResult(
            True,
            f"Undo: folder '{current}' renamed back to '{self._previous_name}'.",
            self._target,
            data={"old": current, "new": self._previous_name},
        )


# ═════════════════════════════════════════════════════════════════
#  HISTORY COMMANDS (never recorded themselves)
# ═════════════════════════════════════════════════════════════════

class UndoLastCommand(Command):
    """
    Undo the most recent recorded command.

    Syntax:
        undo
    """

    def _do_execute(self, history: CommandHistory) -> CommandResult:
        result = history.undo()
        return CommandResult(
            True,
            f"{result.message} (history depth: {history.depth})",
            result.folder,
            data={"undone": [result.message]},
        )


class UndoAllCommand(Command):
    """
    Undo every recorded command, newest first, until the history is empty.

    Syntax:
        undo all
    """

    def _do_execute(self, history: CommandHistory) -> CommandResult:
        messages: List[str] = []
        while not history.is_empty():
            messages.append(history.undo().message)

        return CommandResult(
            True,
            f"Undid {len(messages)} command(s).",
            self._target,
            data={"undone": messages},
        )


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS (no folder mutation)
# ═════════════════════════════════════════════════════════════════

class ListCommand(Command):
    """
    List the target's children, space-separated.

    Syntax:
        list
    """

    def _do_execute(self, history: CommandHistory) -> CommandResult:
        names = self._target.child_names()
        msg = " ".join(names) if names else f"Folder '{self._target.name}' is empty."
        return CommandResult(True, msg, self._target, data={"children": names})


class TreeCommand(Command):
    """
    Show the whole tree below the target, one folder per line.

    Syntax:
        tree
    """

    def _do_execute(self, history: CommandHistory) -> CommandResult:
        lines = [f"{'  ' * depth}{folder.name}" for depth, folder in self._target.walk()]
        return CommandResult(True, "\n".join(lines), self._target)


class InfoCommand(Command):
    """
    Summarize the target folder and the history.

    Syntax:
        info
    """

    def _do_execute(self, history: CommandHistory) -> CommandResult:
        children = len(self._target.get_children())
        msg = (
            f"Folder '{self._target.name}': "
            f"{children} child(ren), "
            f"history depth={history.depth}"
        )
        return CommandResult(
            True,
            msg,
            self._target,
            data={"children": children, "history_depth": history.depth},
        )


class HelpCommand(Command):
    """
    Display available shell commands.

    Syntax:
        help
    """

    def _do_execute(self, history: CommandHistory) -> CommandResult:
        help_text = """
Available commands:
───────────────────────────────────────────────────────
  add [<name>]
      Add a child folder (prompts for the name if omitted).

  rename [<name>]
      Rename the folder (prompts for the name if omitted).

  undo
      Undo the last add or rename.

  undo all
      Undo every recorded add and rename.

  list
      Show the folder's children.

  tree
      Show the whole folder tree.

  info
      Show the folder name, child count and history depth.

  help
      Show this help text.

  quit
      Leave the shell.
───────────────────────────────────────────────────────
""".strip()
        return CommandResult(True, help_text, self._target)
