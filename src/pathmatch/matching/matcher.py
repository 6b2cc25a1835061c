"""Single-pass matcher for compiled templates.

Walks the template tree and the concrete segments side by side. There is
no backtracking: each node either consumes what it needs or the match
fails on the spot, so matching is linear in path length plus tree size.
"""

import string
from collections.abc import Sequence
from functools import lru_cache
from typing import NamedTuple

from pathmatch._internal.types import Captures
from pathmatch.config import DEFAULT_OPTIONS, MatchOptions
from pathmatch.errors import MalformedTree, NilTemplate
from pathmatch.paths import split
from pathmatch.template.nodes import (
    CompiledTemplate,
    DoubleStar,
    Literal,
    PatternSegment,
    Star,
    Variable,
)
from pathmatch.template.parser import compile_template
from pathmatch.template.tokens import is_literal_text

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class MatchResult(NamedTuple):
    """Outcome of ``match_segments()``.

    ``consumed`` counts the concrete segments the template used up.
    ``captures`` is always empty when ``matched`` is false.
    """

    matched: bool
    consumed: int
    captures: Captures


def _no_match() -> MatchResult:
    return MatchResult(False, 0, {})


def match_segments(
    template: CompiledTemplate | None,
    segments: Sequence[str],
    options: MatchOptions | None = None,
    *,
    partial: bool = False,
) -> MatchResult:
    """Match *template* against already-split concrete *segments*.

    By default every segment must be consumed. With ``partial=True`` the
    template only has to be exhausted, and ``consumed`` says how far into
    *segments* it reached (the cursor steps this way).

    Raises ``NilTemplate`` for ``None`` and ``MalformedTree`` for a tree
    the compiler would never produce. A mismatch is not an error.
    """
    if template is None:
        raise NilTemplate()
    if not isinstance(template, CompiledTemplate):
        msg = f"expected a CompiledTemplate, got {type(template).__name__}"
        raise MalformedTree(msg)
    _check_structure(template)

    opts = options or DEFAULT_OPTIONS
    total = len(segments)
    captures: Captures = {}
    pos = 0

    for node in template.segments:
        match node:
            case DoubleStar():
                return MatchResult(True, total, captures)

            case Literal(value=value):
                if pos >= total or not _equal(value, segments[pos], opts.case_insensitive):
                    return _no_match()
                pos += 1

            case Star():
                if pos >= total:
                    return _no_match()
                pos += 1

            case Variable(name=name, pattern=None):
                if pos >= total:
                    return _no_match()
                _capture(captures, name, segments[pos], opts)
                pos += 1

            case Variable(name=name, pattern=pattern):
                found = _match_pattern(pattern, segments, pos, opts)
                if found is None:
                    return _no_match()
                taken, pos, tail = found
                _capture(captures, name, "/".join(taken), opts)
                if tail:
                    return MatchResult(True, total, captures)

    if not partial and pos != total:
        return _no_match()
    return MatchResult(True, pos, captures)


def match_path(
    template: str | CompiledTemplate,
    path: str,
    options: MatchOptions | None = None,
) -> tuple[bool, Captures]:
    """Compile-then-match convenience for one-off checks.

    Usage::

        matched, captures = match_path("/users/{id}", "/users/42")
        # True, {"id": "42"}

    Template strings are compiled through a small cache. Raises
    ``GrammarError`` for an invalid template string.
    """
    if isinstance(template, str):
        template = _compile_cached(template)
    result = match_segments(template, split(path), options)
    return result.matched, result.captures


@lru_cache(maxsize=256)
def _compile_cached(source: str) -> CompiledTemplate:
    return compile_template(source)


def _match_pattern(
    pattern: tuple[PatternSegment, ...],
    segments: Sequence[str],
    pos: int,
    opts: MatchOptions,
) -> tuple[list[str], int, bool] | None:
    """Match a variable's sub-pattern starting at *pos*.

    Returns ``(taken, new_pos, hit_tail)`` or ``None`` on mismatch.
    A trailing ``**`` takes every remaining segment, possibly none.
    """
    total = len(segments)
    taken: list[str] = []
    for node in pattern:
        match node:
            case DoubleStar():
                taken.extend(segments[pos:])
                return taken, total, True
            case Literal(value=value):
                if pos >= total or not _equal(value, segments[pos], opts.case_insensitive):
                    return None
            case _:
                if pos >= total:
                    return None
        taken.append(segments[pos])
        pos += 1
    return taken, pos, False


def _check_structure(template: CompiledTemplate) -> None:
    """Reject trees the compiler could not produce: bad ``**`` placement, nesting or text."""
    last = len(template.segments) - 1
    for index, node in enumerate(template.segments):
        match node:
            case DoubleStar() if index != last:
                msg = f"'**' must be the last segment, found at index {index}"
                raise MalformedTree(msg)
            case Literal(value=value) if not is_literal_text(value):
                msg = f"literal {value!r} at index {index} is not valid segment text"
                raise MalformedTree(msg)
            case Variable(name=name) if not is_literal_text(name):
                msg = f"variable name {name!r} at index {index} is not valid segment text"
                raise MalformedTree(msg)
            case Variable(name=name, pattern=pattern) if pattern is not None:
                if not pattern:
                    msg = f"variable {name!r} has an empty sub-pattern"
                    raise MalformedTree(msg)
                for sub_index, sub in enumerate(pattern):
                    if isinstance(sub, Variable):
                        msg = f"variable {sub.name!r} is nested inside {name!r}"
                        raise MalformedTree(msg)
                    if not isinstance(sub, (Literal, Star, DoubleStar)):
                        msg = f"unexpected node {sub!r} in variable {name!r}"
                        raise MalformedTree(msg)
                    if isinstance(sub, Literal) and not is_literal_text(sub.value):
                        msg = f"literal {sub.value!r} in variable {name!r} is not segment text"
                        raise MalformedTree(msg)
                    if isinstance(sub, DoubleStar) and sub_index != len(pattern) - 1:
                        msg = f"'**' must end the sub-pattern of variable {name!r}"
                        raise MalformedTree(msg)
                if isinstance(pattern[-1], DoubleStar) and index != last:
                    msg = f"variable {name!r} ends in '**' but is not the last segment"
                    raise MalformedTree(msg)
            case Literal() | Star() | DoubleStar() | Variable():
                pass
            case _:
                msg = f"unexpected node {node!r} at index {index}"
                raise MalformedTree(msg)


def _equal(expected: str, actual: str, case_insensitive: bool) -> bool:
    if case_insensitive:
        return expected.translate(_ASCII_LOWER) == actual.translate(_ASCII_LOWER)
    return expected == actual


def _capture(captures: Captures, name: str, value: str, opts: MatchOptions) -> None:
    if opts.keep_first_variable and name in captures:
        return
    captures[name] = value
