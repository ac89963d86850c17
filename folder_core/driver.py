"""
    Drivers — sequence commands against a root folder and print results.

    • ``DemoDriver``       – the fixed rename / add / undo walkthrough.
    • ``InteractiveShell`` – read-eval-print loop over ``CommandProcessor``.

    Both own the root folder and the ``CommandHistory`` for their run.
"""
import logging
import sys
from typing import Optional, TextIO

from folder_api.models.folder import Folder

from .cli.command_processor import CommandProcessor
from .cli.commands import AddChildCommand, RenameCommand
from .config import AppConfig
from .exceptions import InputReadError
from .history import CommandHistory
from .input_reader import LineReader

logger = logging.getLogger(__name__)

EXIT_WORDS = ("quit", "exit")


class DemoDriver:
    """
    Runs the demonstration script:

        rename root → print name → undo → print name →
        add child → print children → add child → print children →
        undo → print children

    No recovery: any error (including running out of input) propagates.
    """

    def __init__(self, reader: LineReader, out: Optional[TextIO] = None,
                 config: Optional[AppConfig] = None):
        self._reader = reader
        self._out = out
        self._config = config or AppConfig()
        self.root: Optional[Folder] = None
        self.history: Optional[CommandHistory] = None

    def run(self) -> Folder:
        """Execute the script and return the root folder in its final state."""
        prompts = self._config.prompts
        root = Folder(self._config.root_name)
        history = CommandHistory(self._config.max_history_depth)
        self.root, self.history = root, history
        logger.info("Demo started with root '%s'", root.name)

        RenameCommand(root, self._reader, prompt=prompts.new_name).execute(history)
        self._emit(root.name)
        history.undo()
        self._emit(root.name)

        AddChildCommand(root, self._reader, prompt=prompts.child_name).execute(history)
        self._print_children(root)
        AddChildCommand(root, self._reader, prompt=prompts.child_name).execute(history)
        self._print_children(root)
        history.undo()
        self._print_children(root)

        logger.info("Demo finished (history depth %d)", history.depth)
        return root

    def _print_children(self, folder: Folder) -> None:
        self._emit(" ".join(folder.child_names()))

    def _emit(self, line: str) -> None:
        print(line, file=self._out or sys.stdout)


class InteractiveShell:
    """
    Reads shell lines until ``quit`` / ``exit`` or end of input and
    prints each command's message.
    """

    def __init__(self, reader: LineReader, out: Optional[TextIO] = None,
                 config: Optional[AppConfig] = None):
        self._reader = reader
        self._out = out
        self._config = config or AppConfig()
        self.processor = CommandProcessor(
            Folder(self._config.root_name), reader, config=self._config,
        )

    def run(self) -> Folder:
        """Run until the user leaves; return the root folder."""
        self._emit(f"Folder shell on '{self.processor.root.name}'. Type 'help' for usage.")
        while True:
            try:
                line = self._reader.read_line(self._config.prompts.shell)
            except InputReadError:
                logger.debug("Shell input exhausted")
                break

            if line.strip().lower() in EXIT_WORDS:
                break

            result = self.processor.process(line)
            self._emit(result.message)

        return self.processor.root

    def _emit(self, line: str) -> None:
        print(line, file=self._out or sys.stdout)
