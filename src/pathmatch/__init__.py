"""Pathmatch — match slash-delimited paths against declarative templates.

Templates mix literals, ``{named}`` variables, ``*`` and ``**`` wildcards,
and patterned variables such as ``{rest=docs/**}``.

Basic usage::

    from pathmatch import compile_template, match_segments, split

    template = compile_template("/users/{user_id}/posts/{post_id}")
    result = match_segments(template, split("/users/alice/posts/123"))
    result.captures  # {"user_id": "alice", "post_id": "123"}

Step-wise traversal::

    from pathmatch import Cursor

    cursor = Cursor("/databases/mydb/documents/users/alice")
    cursor.step(compile_template("/databases/{db}/documents"))
    cursor.step(compile_template("/{collection}/{doc_id}"))
    cursor.variables()  # {"db": "mydb", "collection": "users", "doc_id": "alice"}
"""

__version__ = "0.1.0"
__all__ = [
    "CompiledTemplate",
    "Cursor",
    "DoubleStar",
    "GrammarError",
    "IllegalDoubleStarPlacement",
    "Literal",
    "MalformedTree",
    "MatchError",
    "MatchOptions",
    "MatchResult",
    "MissingLeadingSlash",
    "NestedVariableNotAllowed",
    "NilTemplate",
    "PathmatchError",
    "Star",
    "StepResult",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "Variable",
    "Walker",
    "compile_template",
    "from_data",
    "join",
    "match_path",
    "match_segments",
    "normalize",
    "render",
    "split",
    "to_data",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "CompiledTemplate": "pathmatch.template.nodes",
    "DoubleStar": "pathmatch.template.nodes",
    "Literal": "pathmatch.template.nodes",
    "Star": "pathmatch.template.nodes",
    "Variable": "pathmatch.template.nodes",
    "compile_template": "pathmatch.template.parser",
    "from_data": "pathmatch.template.codec",
    "render": "pathmatch.template.codec",
    "to_data": "pathmatch.template.codec",
    "MatchResult": "pathmatch.matching.matcher",
    "match_path": "pathmatch.matching.matcher",
    "match_segments": "pathmatch.matching.matcher",
    "Cursor": "pathmatch.matching.cursor",
    "StepResult": "pathmatch.matching.cursor",
    "Walker": "pathmatch.matching.cursor",
    "MatchOptions": "pathmatch.config",
    "join": "pathmatch.paths",
    "normalize": "pathmatch.paths",
    "split": "pathmatch.paths",
    "GrammarError": "pathmatch.errors",
    "IllegalDoubleStarPlacement": "pathmatch.errors",
    "MalformedTree": "pathmatch.errors",
    "MatchError": "pathmatch.errors",
    "MissingLeadingSlash": "pathmatch.errors",
    "NestedVariableNotAllowed": "pathmatch.errors",
    "NilTemplate": "pathmatch.errors",
    "PathmatchError": "pathmatch.errors",
    "UnexpectedEndOfInput": "pathmatch.errors",
    "UnexpectedToken": "pathmatch.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathmatch`` fast while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
