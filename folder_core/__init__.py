"""
Folder core — reversible folder commands and their history.

Public API:
    CommandHistory    – LIFO record of executed commands
    DemoDriver        – fixed rename/add/undo walkthrough
    InteractiveShell  – text shell over CommandProcessor
    AppConfig         – top-level configuration
    PromptConfig      – prompt texts
    ConsoleReader     – line reader over stdin
    ScriptedReader    – line reader over a fixed list of answers
"""
from .config import AppConfig, PromptConfig
from .history import CommandHistory
from .input_reader import LineReader, ConsoleReader, ScriptedReader
from .driver import DemoDriver, InteractiveShell

__all__ = [
    'AppConfig',
    'PromptConfig',
    'CommandHistory',
    'LineReader',
    'ConsoleReader',
    'ScriptedReader',
    'DemoDriver',
    'InteractiveShell',
]
