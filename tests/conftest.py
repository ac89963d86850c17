# tests/conftest.py
"""
Shared test fixtures.
Stub tree:

    tmp
    ├── docs
    │   └── drafts
    └── pics
"""
import pytest

from folder_api.models.folder import Folder
from folder_core.history import CommandHistory
from folder_core.input_reader import ScriptedReader


def _build_tree(root_name: str = "tmp") -> Folder:
    root = Folder(root_name)
    docs = Folder("docs")
    docs.add_child(Folder("drafts"))
    root.add_child(docs)
    root.add_child(Folder("pics"))
    return root


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def root() -> Folder:
    """Empty root folder named 'tmp'."""
    return Folder("tmp")


@pytest.fixture
def stub_tree() -> Folder:
    """Freshly built each time: tmp/{docs/drafts, pics}."""
    return _build_tree()


@pytest.fixture
def history() -> CommandHistory:
    """Unbounded, empty history."""
    return CommandHistory()


@pytest.fixture
def reader_factory():
    """Build a ScriptedReader answering the given names in order."""
    def _make(*answers: str) -> ScriptedReader:
        return ScriptedReader(answers)
    return _make
