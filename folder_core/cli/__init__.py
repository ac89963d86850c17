"""
CLI package — shell commands for folder manipulation.

Design Patterns
───────────────
• Command       – each operation is a ``Command`` object with
                  ``execute()`` and ``undo()`` methods.
• Interpreter   – parsing the shell syntax into command objects.
"""
from .command_processor import CommandProcessor
from .commands import (
    Command,
    CommandResult,
    CommandState,
    AddChildCommand,
    RenameCommand,
    UndoLastCommand,
    UndoAllCommand,
    ListCommand,
    TreeCommand,
    InfoCommand,
    HelpCommand,
)

__all__ = [
    'CommandProcessor',
    'Command',
    'CommandResult',
    'CommandState',
    'AddChildCommand',
    'RenameCommand',
    'UndoLastCommand',
    'UndoAllCommand',
    'ListCommand',
    'TreeCommand',
    'InfoCommand',
    'HelpCommand',
]
