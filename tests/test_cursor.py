"""Tests for pathmatch.matching.cursor — step-wise path traversal."""

import logging

import pytest

from pathmatch.config import MatchOptions
from pathmatch.errors import MalformedTree
from pathmatch.matching.cursor import Cursor, StepResult, Walker
from pathmatch.template.nodes import CompiledTemplate, DoubleStar, Literal
from pathmatch.template.parser import compile_template

USER = compile_template("/users/{id}")
SETTINGS = compile_template("/settings/{section}")
NO_MATCH = compile_template("/does/not/match")


class TestStep:
    def test_single_step(self) -> None:
        cursor = Cursor("/users/alice/settings/profile")
        captures, matched = cursor.step(USER)

        assert matched is True
        assert captures == {"id": "alice"}
        assert cursor.depth() == 1
        assert cursor.variables() == {"id": "alice"}
        assert cursor.remaining() == "/settings/profile"

    def test_multiple_steps(self) -> None:
        cursor = Cursor("/users/alice/settings/profile")
        cursor.step(USER)
        result = cursor.step(SETTINGS)

        assert result == StepResult({"section": "profile"}, True)
        assert cursor.depth() == 2
        assert cursor.variables() == {"id": "alice", "section": "profile"}
        assert cursor.remaining() == ""
        assert cursor.is_complete()

    def test_failed_step_changes_nothing(self) -> None:
        cursor = Cursor("/users/alice")
        captures, matched = cursor.step(NO_MATCH)

        assert matched is False
        assert captures == {}
        assert cursor.depth() == 0
        assert cursor.variables() == {}
        assert cursor.remaining() == "/users/alice"

    def test_failed_step_after_success(self) -> None:
        cursor = Cursor("/users/alice/settings/profile")
        cursor.step(USER)
        assert cursor.step(NO_MATCH).matched is False
        assert cursor.depth() == 1
        assert cursor.remaining() == "/settings/profile"

    def test_double_star_variable(self) -> None:
        cursor = Cursor("/a/b/c/d/e")
        captures, matched = cursor.step(compile_template("/{first}/{rest=**}"))

        assert matched is True
        assert captures == {"first": "a", "rest": "b/c/d/e"}
        assert cursor.is_complete()
        assert cursor.remaining() == ""

    def test_step_on_complete_cursor(self) -> None:
        cursor = Cursor("/a")
        cursor.step(compile_template("/a"))
        assert cursor.step(compile_template("/b")).matched is False
        assert cursor.step(compile_template("/**")).matched is True
        assert cursor.depth() == 2

    def test_returned_captures_are_copies(self) -> None:
        cursor = Cursor("/users/alice")
        captures, _ = cursor.step(USER)
        captures["id"] = "mallory"
        assert cursor.variables() == {"id": "alice"}

    def test_malformed_tree_propagates(self) -> None:
        cursor = Cursor("/a/b")
        with pytest.raises(MalformedTree):
            cursor.step(CompiledTemplate((DoubleStar(), Literal("b"))))
        assert cursor.depth() == 0
        assert cursor.remaining() == "/a/b"

    def test_case_insensitive_option(self) -> None:
        cursor = Cursor("/USERS/Alice", MatchOptions(case_insensitive=True))
        assert cursor.step(USER) == StepResult({"id": "Alice"}, True)


class TestScenario:
    def test_database_walk(self) -> None:
        cursor = Cursor("/databases/mydb/documents/users/alice")

        captures, matched = cursor.step(compile_template("/databases/{dbName}/documents"))
        assert matched is True
        assert captures == {"dbName": "mydb"}
        assert cursor.remaining() == "/users/alice"

        captures, matched = cursor.step(compile_template("/{collection}/{docID}"))
        assert matched is True
        assert captures == {"collection": "users", "docID": "alice"}
        assert cursor.is_complete()

        assert cursor.step_back() is True
        assert cursor.remaining() == "/users/alice"
        assert cursor.depth() == 1


class TestStepBack:
    def test_after_one_step(self) -> None:
        cursor = Cursor("/users/alice/settings/profile")
        cursor.step(USER)

        assert cursor.step_back() is True
        assert cursor.depth() == 0
        assert cursor.variables() == {}
        assert cursor.remaining() == "/users/alice/settings/profile"

    def test_after_multiple_steps(self) -> None:
        cursor = Cursor("/users/alice/settings/profile")
        cursor.step(USER)
        snapshot = (cursor.depth(), cursor.variables(), cursor.remaining())
        cursor.step(SETTINGS)

        assert cursor.step_back() is True
        assert (cursor.depth(), cursor.variables(), cursor.remaining()) == snapshot

        assert cursor.step_back() is True
        assert cursor.depth() == 0
        assert cursor.variables() == {}

    def test_at_depth_zero(self) -> None:
        cursor = Cursor("/users/alice")
        assert cursor.step_back() is False
        assert cursor.depth() == 0
        assert cursor.remaining() == "/users/alice"

    def test_undo_is_exact_inverse(self) -> None:
        cursor = Cursor("/a/b/c/d/e/f")
        templates = [
            compile_template("/{x}"),
            compile_template("/b/*"),
            compile_template("/{y=d/*}"),
            compile_template("/**"),
        ]
        history = []
        for template in templates:
            history.append((cursor.remaining(), cursor.variables(), cursor.depth()))
            assert cursor.step(template).matched is True

        for expected in reversed(history):
            assert cursor.step_back() is True
            assert (cursor.remaining(), cursor.variables(), cursor.depth()) == expected
        assert cursor.step_back() is False

    def test_zero_width_step_is_undoable(self) -> None:
        cursor = Cursor("/a")
        cursor.step(compile_template("/a"))
        cursor.step(compile_template("/**"))
        assert cursor.depth() == 2
        assert cursor.step_back() is True
        assert cursor.depth() == 1
        assert cursor.is_complete()


class TestReset:
    def test_reset(self) -> None:
        path = "/users/alice/settings/profile"
        cursor = Cursor(path)
        cursor.step(USER)
        cursor.step(SETTINGS)
        assert cursor.is_complete()

        cursor.reset()

        assert cursor.depth() == 0
        assert cursor.variables() == {}
        assert cursor.remaining() == path
        assert not cursor.is_complete()
        assert cursor.step_back() is False

    def test_reset_then_step(self) -> None:
        cursor = Cursor("/users/alice")
        cursor.step(USER)
        cursor.reset()
        assert cursor.step(USER).captures == {"id": "alice"}


class TestState:
    def test_is_complete(self) -> None:
        cursor = Cursor("/a/b")
        assert not cursor.is_complete()
        cursor.step(compile_template("/a"))
        assert not cursor.is_complete()
        cursor.step(compile_template("/b"))
        assert cursor.is_complete()
        cursor.step_back()
        assert not cursor.is_complete()

    @pytest.mark.parametrize("path", ["/", "", "///"])
    def test_empty_paths_are_complete(self, path: str) -> None:
        cursor = Cursor(path)
        assert cursor.is_complete()
        assert cursor.remaining() == ""

    def test_depth(self) -> None:
        cursor = Cursor("/a/b/c")
        assert cursor.depth() == 0
        cursor.step(compile_template("/a"))
        assert cursor.depth() == 1
        cursor.step(compile_template("/b"))
        assert cursor.depth() == 2
        cursor.step_back()
        assert cursor.depth() == 1
        cursor.reset()
        assert cursor.depth() == 0

    def test_remaining_normalizes(self) -> None:
        cursor = Cursor("//users//alice/")
        assert cursor.remaining() == "/users/alice"
        assert cursor.path == "/users/alice"
        assert cursor.segments == ("users", "alice")

    def test_consumed(self) -> None:
        cursor = Cursor("/a/b/c")
        cursor.step(compile_template("/a/b"))
        assert cursor.consumed == 2

    def test_repr(self) -> None:
        assert repr(Cursor("/a/b")) == "Cursor(path='/a/b', consumed=0, depth=0)"

    def test_walker_alias(self) -> None:
        assert Walker is Cursor


class TestVariables:
    def test_accumulates(self) -> None:
        cursor = Cursor("/users/alice/settings/profile")
        assert cursor.variables() == {}
        cursor.step(USER)
        assert cursor.variables() == {"id": "alice"}
        cursor.step(SETTINGS)
        assert cursor.variables() == {"id": "alice", "section": "profile"}

    def test_last_layer_wins_by_default(self) -> None:
        cursor = Cursor("/prefix/val1/mid/val2/suffix")
        cursor.step(compile_template("/prefix/{id}/mid"))
        cursor.step(compile_template("/{id}/suffix"))
        assert cursor.variables() == {"id": "val2"}

    def test_keep_first_across_layers(self) -> None:
        cursor = Cursor("/prefix/val1/mid/val2/suffix", MatchOptions(keep_first_variable=True))
        cursor.step(compile_template("/prefix/{id}/mid"))
        cursor.step(compile_template("/{id}/suffix"))
        assert cursor.variables() == {"id": "val1"}

    def test_returns_fresh_dict(self) -> None:
        cursor = Cursor("/users/alice")
        cursor.step(USER)
        cursor.variables()["id"] = "changed"
        assert cursor.variables() == {"id": "alice"}


class TestLogging:
    def test_step_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        cursor = Cursor("/users/alice")
        with caplog.at_level(logging.DEBUG, logger="pathmatch.matching"):
            cursor.step(USER)
            cursor.step_back()
        assert "consumed 2 segment(s)" in caplog.text
        assert "Stepped back to depth 0" in caplog.text
