"""Cursor — step-wise traversal of one concrete path.

A cursor applies templates one at a time to the unconsumed tail of a
fixed path. Each successful step pushes a checkpoint and a capture layer;
``step_back()`` pops them again.
"""

import logging
from typing import NamedTuple

from pathmatch._internal.types import Captures
from pathmatch.config import DEFAULT_OPTIONS, MatchOptions
from pathmatch.matching.matcher import match_segments
from pathmatch.paths import join, split
from pathmatch.template.nodes import CompiledTemplate

logger = logging.getLogger("pathmatch.matching")


class StepResult(NamedTuple):
    """Outcome of ``Cursor.step()``: this step's captures and the verdict."""

    captures: Captures
    matched: bool


class Cursor:
    """Mutable walker over one concrete path.

    Usage::

        cursor = Cursor("/databases/mydb/documents/users/alice")
        cursor.step(compile_template("/databases/{db}/documents"))
        # StepResult(captures={"db": "mydb"}, matched=True)
        cursor.remaining()      # "/users/alice"
        cursor.step_back()      # True
        cursor.remaining()      # "/databases/mydb/documents/users/alice"

    Not thread-safe. Drive one cursor from one traversal at a time.
    """

    __slots__ = ("_checkpoints", "_layers", "_segments", "options")

    def __init__(self, path: str, options: MatchOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS
        self._segments: tuple[str, ...] = tuple(split(path))
        # Consumed offsets; the first entry is the starting point and never pops
        self._checkpoints: list[int] = [0]
        self._layers: list[Captures] = []

    def __repr__(self) -> str:
        return f"Cursor(path={self.path!r}, consumed={self.consumed}, depth={self.depth()})"

    @property
    def path(self) -> str:
        """The full concrete path in normalized form."""
        return join(self._segments)

    @property
    def segments(self) -> tuple[str, ...]:
        """The full concrete path, split into segments."""
        return self._segments

    @property
    def consumed(self) -> int:
        """Number of leading segments consumed by the applied steps."""
        return self._checkpoints[-1]

    def step(self, template: CompiledTemplate) -> StepResult:
        """Match *template* against the unconsumed tail of the path.

        On a match the cursor advances past the consumed segments and the
        step's captures become a new layer. On a mismatch nothing changes
        and the captures are empty. ``MatchError`` from a malformed tree
        propagates with the cursor untouched.
        """
        start = self.consumed
        result = match_segments(
            template, self._segments[start:], self.options, partial=True
        )
        if not result.matched:
            logger.debug("Step %s did not match at segment %d", template, start)
            return StepResult({}, False)

        self._checkpoints.append(start + result.consumed)
        self._layers.append(result.captures)
        logger.debug(
            "Step %s consumed %d segment(s), depth now %d",
            template,
            result.consumed,
            self.depth(),
        )
        return StepResult(dict(result.captures), True)

    def step_back(self) -> bool:
        """Undo the most recent successful step.

        Returns ``False`` and does nothing when no step has been applied.
        """
        if not self._layers:
            return False
        self._checkpoints.pop()
        self._layers.pop()
        logger.debug("Stepped back to depth %d", self.depth())
        return True

    def reset(self) -> None:
        """Drop every applied step, as if freshly constructed."""
        self._checkpoints = [0]
        self._layers = []
        logger.debug("Cursor over %r reset", self.path)

    def is_complete(self) -> bool:
        """True when every segment of the path has been consumed."""
        return self.consumed == len(self._segments)

    def depth(self) -> int:
        """Number of successful steps currently applied."""
        return len(self._checkpoints) - 1

    def remaining(self) -> str:
        """The unconsumed tail as a slash path, or ``""`` when complete."""
        if self.is_complete():
            return ""
        return join(self._segments[self.consumed :])

    def variables(self) -> Captures:
        """Merge the capture layers in step order into a fresh dict.

        Repeated names follow ``options.keep_first_variable``: the
        earliest layer wins when set, the latest otherwise.
        """
        merged: Captures = {}
        for layer in self._layers:
            for name, value in layer.items():
                if self.options.keep_first_variable and name in merged:
                    continue
                merged[name] = value
        return merged


# Name used by callers that think of the cursor as a path walker
Walker = Cursor
