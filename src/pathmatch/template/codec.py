"""Plain-data form of compiled templates.

Converts a ``CompiledTemplate`` to and from JSON-compatible dicts so
compiled trees can be stored or shipped between processes::

    {"segments": [
        {"literal": {"value": "files"}},
        {"variable": {"name": "path", "segments": [{"double_star": {}}]}},
    ]}

Decoding checks node shapes and rejects literal text or variable names the
lexer could never have produced. It does not re-check ``**`` placement;
the matcher reports a misplaced ``**`` as ``MalformedTree`` when it walks
the tree.
"""

from typing import Any

from pathmatch.errors import MalformedTree
from pathmatch.template.nodes import (
    CompiledTemplate,
    DoubleStar,
    Literal,
    PatternSegment,
    Segment,
    Star,
    Variable,
)
from pathmatch.template.tokens import is_literal_text


def render(template: CompiledTemplate) -> str:
    """Return the canonical template string for *template*.

    ``compile_template(render(t)) == t`` for every compiled ``t``.
    """
    return str(template)


def to_data(template: CompiledTemplate) -> dict[str, Any]:
    """Encode *template* as a JSON-compatible dict."""
    return {"segments": [_encode_segment(seg) for seg in template.segments]}


def from_data(data: dict[str, Any]) -> CompiledTemplate:
    """Decode a dict produced by ``to_data()``.

    Raises ``MalformedTree`` if the shape is not a template tree.
    """
    if not isinstance(data, dict):
        msg = f"expected a dict, got {type(data).__name__}"
        raise MalformedTree(msg)
    raw = data.get("segments", [])
    if not isinstance(raw, list):
        msg = "'segments' must be a list"
        raise MalformedTree(msg)
    return CompiledTemplate(tuple(_decode_segment(item, nested=False) for item in raw))


def _encode_segment(segment: Segment) -> dict[str, Any]:
    match segment:
        case Literal(value=value):
            return {"literal": {"value": value}}
        case Star():
            return {"star": {}}
        case DoubleStar():
            return {"double_star": {}}
        case Variable(name=name, pattern=None):
            return {"variable": {"name": name}}
        case Variable(name=name, pattern=pattern):
            return {
                "variable": {
                    "name": name,
                    "segments": [_encode_segment(seg) for seg in pattern],
                }
            }
    msg = f"cannot encode {segment!r}"
    raise MalformedTree(msg)


def _decode_segment(item: Any, *, nested: bool) -> Segment:
    if not isinstance(item, dict) or len(item) != 1:
        msg = f"segment must be a single-key dict, got {item!r}"
        raise MalformedTree(msg)
    ((kind, body),) = item.items()
    if not isinstance(body, dict):
        msg = f"{kind!r} body must be a dict, got {body!r}"
        raise MalformedTree(msg)

    if kind == "literal":
        value = body.get("value")
        if not is_literal_text(value):
            msg = f"literal value must be non-empty text without / * {{ }} =, got {value!r}"
            raise MalformedTree(msg)
        return Literal(value)
    if kind == "star":
        return Star()
    if kind == "double_star":
        return DoubleStar()
    if kind == "variable":
        if nested:
            msg = "variables cannot be nested inside a sub-pattern"
            raise MalformedTree(msg)
        return _decode_variable(body)

    msg = f"unknown segment kind {kind!r}"
    raise MalformedTree(msg)


def _decode_variable(body: dict[str, Any]) -> Variable:
    name = body.get("name")
    if not is_literal_text(name):
        msg = f"variable name must be non-empty text without / * {{ }} =, got {name!r}"
        raise MalformedTree(msg)
    raw = body.get("segments")
    # Missing or empty list means a bare variable, as in the wire schema
    if not raw:
        return Variable(name)
    if not isinstance(raw, list):
        msg = f"variable {name!r} segments must be a list"
        raise MalformedTree(msg)
    pattern: tuple[PatternSegment, ...] = tuple(
        _decode_segment(item, nested=True)  # type: ignore[misc]
        for item in raw
    )
    return Variable(name, pattern)
