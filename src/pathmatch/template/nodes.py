"""Compiled template tree — frozen dataclasses.

A template compiles to a flat tuple of segments. Only ``Variable`` nests,
and only one level deep::

    "/files/{path=docs/**}" -> CompiledTemplate((
        Literal("files"),
        Variable("path", (Literal("docs"), DoubleStar())),
    ))

``str()`` on any node gives back its canonical template text.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Literal:
    """Exact-text segment: ``/users``."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Star:
    """Single-segment wildcard: ``/*``. Matches one segment, captures nothing."""

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True, slots=True)
class DoubleStar:
    """Trailing wildcard: ``/**``. Matches zero or more segments.

    Only legal as the last element of a template or of a sub-pattern.
    """

    def __str__(self) -> str:
        return "**"


@dataclass(frozen=True, slots=True)
class Variable:
    """Named capture.

    Bare:      ``{id}``          (pattern=None, captures one segment)
    Patterned: ``{rest=a/*/**}`` (pattern=(Literal("a"), Star(), DoubleStar()))
    """

    name: str
    pattern: tuple[Literal | Star | DoubleStar, ...] | None = None

    def __str__(self) -> str:
        if self.pattern is None:
            return f"{{{self.name}}}"
        inner = "/".join(str(seg) for seg in self.pattern)
        return f"{{{self.name}={inner}}}"


Segment: TypeAlias = Literal | Star | DoubleStar | Variable
PatternSegment: TypeAlias = Literal | Star | DoubleStar


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """An immutable, reusable compiled template.

    Produced by ``compile_template()``. Holds no reference to its source
    string; ``str(template)`` renders the canonical form instead.
    """

    segments: tuple[Segment, ...] = ()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __str__(self) -> str:
        return "/" + "/".join(str(seg) for seg in self.segments)

    @property
    def variable_names(self) -> tuple[str, ...]:
        """Names of the template's variables in declaration order."""
        return tuple(seg.name for seg in self.segments if isinstance(seg, Variable))
