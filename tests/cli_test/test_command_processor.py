# tests/cli_test/test_command_processor.py
"""
CommandProcessor tests — parsing, dispatch, undo through the shell syntax.
"""
import pytest

from folder_api.models.folder import Folder
from folder_core.cli.command_processor import CommandProcessor
from folder_core.config import AppConfig, PromptConfig
from folder_core.exceptions import InputReadError
from folder_core.history import CommandHistory
from folder_core.input_reader import ScriptedReader


@pytest.fixture
def proc():
    return CommandProcessor(Folder("tmp"), ScriptedReader([]))


def _proc_with_answers(*answers, **kwargs):
    return CommandProcessor(Folder("tmp"), ScriptedReader(answers), **kwargs)


# ═════════════════════════════════════════════════════════════════
#  PARSING
# ═════════════════════════════════════════════════════════════════

class TestProcessorParsing:

    def test_empty_string(self, proc):
        r = proc.process("")
        assert r.success is False
        assert "Empty" in r.message

    def test_whitespace_only(self, proc):
        assert proc.process("   ").success is False

    def test_comment_only(self, proc):
        assert proc.process("# nothing here").success is False

    def test_unknown_command(self, proc):
        r = proc.process("mkdir pics")
        assert r.success is False
        assert "Unknown command" in r.message

    def test_help(self, proc):
        r = proc.process("help")
        assert r.success is True
        assert "Available commands" in r.message

    def test_help_case_insensitive(self, proc):
        assert proc.process("HELP").success is True

    def test_add_with_name(self, proc):
        r = proc.process("add pics")
        assert r.success is True
        assert proc.root.child_names() == ["pics"]

    def test_add_quoted_name(self, proc):
        proc.process('add "holiday pics"')
        assert proc.root.child_names() == ["holiday pics"]

    def test_add_with_trailing_comment(self, proc):
        proc.process("add pics   # holiday")
        assert proc.root.child_names() == ["pics"]

    def test_hash_inside_quotes_kept(self, proc):
        proc.process("add 'c#'")
        assert proc.root.child_names() == ["c#"]

    def test_add_too_many_args(self, proc):
        r = proc.process("add pics videos")
        assert r.success is False
        assert "Usage" in r.message
        assert proc.root.get_children() == ()

    def test_add_prompts_when_name_omitted(self):
        proc = _proc_with_answers("pics")
        proc.process("add")
        assert proc.root.child_names() == ["pics"]

    def test_rename_with_name(self, proc):
        proc.process("rename docs")
        assert proc.root.name == "docs"

    def test_rename_prompts_when_name_omitted(self):
        proc = _proc_with_answers("docs")
        proc.process("rename")
        assert proc.root.name == "docs"

    def test_list(self, proc):
        proc.process("add pics")
        proc.process("add videos")
        assert proc.process("list").message == "pics videos"
        assert proc.process("ls").message == "pics videos"

    def test_list_rejects_arguments(self, proc):
        assert proc.process("list all").success is False

    def test_tree(self, proc):
        proc.process("add pics")
        assert proc.process("tree").message == "tmp\n  pics"

    def test_info(self, proc):
        proc.process("add pics")
        r = proc.process("info")
        assert "1 child(ren)" in r.message
        assert "history depth=1" in r.message

    def test_undo_bad_argument(self, proc):
        r = proc.process("undo twice")
        assert r.success is False
        assert "Usage: undo [all]" in r.message

    def test_malformed_quotes_fall_back(self, proc):
        r = proc.process("add 'pics")
        assert r.success is True
        assert proc.root.child_names() == ["'pics"]


# ═════════════════════════════════════════════════════════════════
#  UNDO THROUGH THE PROCESSOR
# ═════════════════════════════════════════════════════════════════

class TestProcessorUndo:

    def test_undo_add(self, proc):
        proc.process("add pics")
        assert proc.get_undo_depth() == 1
        r = proc.process("undo")
        assert r.success is True
        assert proc.root.get_children() == ()
        assert proc.get_undo_depth() == 0

    def test_undo_nothing(self, proc):
        r = proc.process("undo")
        assert r.success is False
        assert "Nothing" in r.message

    def test_undo_all(self, proc):
        proc.process("rename docs")
        proc.process("add pics")
        proc.process("add videos")
        r = proc.process("undo all")
        assert r.success is True
        assert "Undid 3 command(s)" in r.message
        assert proc.root.name == "tmp"
        assert proc.root.get_children() == ()
        assert proc.get_undo_depth() == 0

    def test_undoall_alias(self, proc):
        proc.process("add pics")
        proc.process("undoall")
        assert proc.get_undo_depth() == 0

    def test_undo_all_empty_is_ok(self, proc):
        assert proc.process("undo all").success is True

    def test_informational_commands_not_recorded(self, proc):
        for text in ("list", "tree", "info", "help"):
            proc.process(text)
        assert proc.get_undo_depth() == 0

    def test_failed_parse_not_recorded(self, proc):
        proc.process("add a b")
        assert proc.get_undo_depth() == 0


# ═════════════════════════════════════════════════════════════════
#  ERRORS, CONFIG, SHARED HISTORY
# ═════════════════════════════════════════════════════════════════

class TestProcessorErrors:

    def test_blank_prompted_name_reported(self):
        proc = _proc_with_answers("   ")
        r = proc.process("add")
        assert r.success is False
        assert "blank" in r.message
        assert proc.get_undo_depth() == 0

    def test_input_failure_propagates(self, proc):
        with pytest.raises(InputReadError):
            proc.process("add")

    def test_config_prompts_used(self):
        seen = []

        class _RecordingReader(ScriptedReader):
            def read_line(self, prompt):
                seen.append(prompt)
                return super().read_line(prompt)

        config = AppConfig(prompts=PromptConfig(child_name="name? ", new_name="new? "))
        proc = CommandProcessor(Folder("tmp"), _RecordingReader(["a", "b"]), config=config)
        proc.process("add")
        proc.process("rename")
        assert seen == ["name? ", "new? "]

    def test_config_bounds_history(self):
        proc = _proc_with_answers(config=AppConfig(max_history_depth=2))
        for name in ("a", "b", "c"):
            proc.process(f"add {name}")
        assert proc.get_undo_depth() == 2

    def test_explicit_history_is_shared(self):
        history = CommandHistory()
        proc = _proc_with_answers(history=history)
        proc.process("add pics")
        assert proc.history is history
        assert history.depth == 1
