from .folder import Folder, ChildNotFoundError

__all__ = [
    'Folder',
    'ChildNotFoundError',
]
