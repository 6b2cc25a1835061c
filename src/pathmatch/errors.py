"""Pathmatch exception hierarchy.

Shared across the template compiler, matcher, and cursor so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class PathmatchError(Exception):
    """Base for all pathmatch-specific errors."""


@dataclass(frozen=True, slots=True)
class GrammarError(PathmatchError):
    """A template string does not conform to the template grammar.

    Raised by ``compile_template()``. Carries the offending template and
    the offset of the token that triggered the rejection.
    """

    template: str
    position: int = 0
    detail: str = "invalid template"

    def __str__(self) -> str:
        return f"{self.detail} at position {self.position} in {self.template!r}"


class MissingLeadingSlash(GrammarError):  # noqa: N818 — grammar rule name
    """The template does not begin with ``/``."""

    def __init__(self, template: str, position: int = 0, detail: str = "") -> None:
        super().__init__(
            template=template,
            position=position,
            detail=detail or "template must start with '/'",
        )


class UnexpectedEndOfInput(GrammarError):  # noqa: N818 — grammar rule name
    """Input ended inside a variable or its sub-pattern."""

    def __init__(self, template: str, position: int = 0, detail: str = "") -> None:
        super().__init__(
            template=template,
            position=position,
            detail=detail or "unexpected end of input",
        )


class IllegalDoubleStarPlacement(GrammarError):  # noqa: N818 — grammar rule name
    """A ``**`` is followed by another segment."""

    def __init__(self, template: str, position: int = 0, detail: str = "") -> None:
        super().__init__(
            template=template,
            position=position,
            detail=detail or "'**' must be the last segment",
        )


class NestedVariableNotAllowed(GrammarError):  # noqa: N818 — grammar rule name
    """A ``{...}`` appears inside a variable's sub-pattern."""

    def __init__(self, template: str, position: int = 0, detail: str = "") -> None:
        super().__init__(
            template=template,
            position=position,
            detail=detail or "variables cannot be nested inside a sub-pattern",
        )


class UnexpectedToken(GrammarError):  # noqa: N818 — grammar rule name
    """A token appears where the grammar does not allow it.

    Covers stray ``}`` or ``=``, a ``{`` without a variable name, and a
    variable name followed by anything other than ``}`` or ``=``.
    """

    def __init__(self, template: str, position: int = 0, detail: str = "") -> None:
        super().__init__(
            template=template,
            position=position,
            detail=detail or "unexpected token",
        )


@dataclass(frozen=True, slots=True)
class MatchError(PathmatchError):
    """The matcher was handed something it cannot walk.

    Ordinary mismatches are never errors; they come back as an
    unmatched ``MatchResult``.
    """

    detail: str = "cannot match"

    def __str__(self) -> str:
        return self.detail


class MalformedTree(MatchError):  # noqa: N818 — conventional name
    """A hand-built or decoded tree violates the structural invariants."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail=detail or "malformed template tree")


class NilTemplate(MatchError):  # noqa: N818 — conventional name
    """Matching was attempted without a compiled template."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail=detail or "template cannot be None")
