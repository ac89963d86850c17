# folder_core/exceptions.py

class CommandError(Exception):
    """Base class for every error raised by commands and their history."""
    pass

class InputReadError(CommandError):
    """Raised when the line reader cannot supply a line (end of input, I/O failure)."""
    pass

class InvalidNameError(CommandError):
    """Raised when a folder name read from input is blank."""
    pass

class UnsupportedOperationError(CommandError):
    """Raised when undo is requested on a command that cannot be reversed."""
    pass

class CommandStateError(CommandError):
    """Raised when a command is executed more than once, or undone when it is not in the executed state."""
    pass

class EmptyHistoryError(CommandError):
    """Raised when popping or undoing from an empty command history."""
    pass
