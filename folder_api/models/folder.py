"""
    Folder model - an in-memory tree node with a name and owned children.
"""
from typing import Iterator, List, Optional, Tuple


class ChildNotFoundError(ValueError):
    """Raised when a folder is asked to remove a child it does not own."""
    pass


class Folder:
    """
    A named node in an in-memory folder tree.

    Each folder exclusively owns its children; insertion order is kept.
    Children are matched by identity, never by name, so two siblings may
    share a name.
    """

    def __init__(self, name: str):
        """
        Initialize a folder.

        Args:
            name: Display name of the folder
        """
        self.name = name
        self._children: List['Folder'] = []

    def add_child(self, child: 'Folder') -> None:
        """Append a child folder"""
        self._children.append(child)

    def remove_child(self, child: 'Folder') -> None:
        """
        Remove the first child that *is* ``child``.

        Raises:
            ChildNotFoundError: If ``child`` is not owned by this folder.
        """
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                return
        raise ChildNotFoundError(
            f"Folder '{child.name}' is not a child of '{self.name}'"
        )

    def rename(self, new_name: str) -> None:
        self.name = new_name

    def get_children(self) -> Tuple['Folder', ...]:
        """Current children, oldest first, as a read-only tuple"""
        return tuple(self._children)

    @property
    def children(self) -> Tuple['Folder', ...]:
        return self.get_children()

    def child_names(self) -> List[str]:
        return [child.name for child in self._children]

    def find_child(self, name: str) -> Optional['Folder']:
        """Return the first child with the given name, or None"""
        for child in self._children:
            if child.name == name:
                return child
        return None

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, 'Folder']]:
        """
        Pre-order traversal of this folder and all descendants.

        Yields:
            ``(depth, folder)`` pairs, this folder first at ``depth``.
        """
        yield depth, self
        for child in self._children:
            yield from child.walk(depth + 1)

    def __repr__(self) -> str:
        return f"Folder({self.name}, children={self.child_names()})"
