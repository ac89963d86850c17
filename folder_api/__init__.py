"""
Folder API — in-memory folder tree model.
"""
from .models.folder import Folder, ChildNotFoundError

__all__ = [
    'Folder',
    'ChildNotFoundError',
]
