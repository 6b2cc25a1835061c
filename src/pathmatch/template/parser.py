"""Recursive-descent template compiler.

Grammar::

    Template = "/" [ Segments ] ;
    Segments = Segment { "/" Segment } ;
    Segment  = "**" | "*" | LITERAL | Variable ;
    Variable = "{" LITERAL [ "=" Pattern ] "}" ;
    Pattern  = PatternSegment { "/" PatternSegment } ;   (no Variable)

Repeated slashes are plain delimiters. Once a ``**`` has been parsed,
anywhere in the template, no further segment may follow it.
"""

import logging

from pathmatch.errors import (
    GrammarError,
    IllegalDoubleStarPlacement,
    MissingLeadingSlash,
    NestedVariableNotAllowed,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from pathmatch.template.lexer import Lexer
from pathmatch.template.nodes import (
    CompiledTemplate,
    DoubleStar,
    Literal,
    PatternSegment,
    Segment,
    Star,
    Variable,
)
from pathmatch.template.tokens import TokenType

logger = logging.getLogger("pathmatch.template")


class Parser:
    """Single-use parser over one template string.

    ``seen_double_star`` is parser state, not lexer state: it spans the
    top-level sequence and every sub-pattern, so a template holds at most
    one ``**``.
    """

    __slots__ = ("_lex", "seen_double_star", "source")

    def __init__(self, source: str) -> None:
        self.source = source
        self._lex = Lexer(source)
        self.seen_double_star = False

    def parse(self) -> CompiledTemplate:
        """Parse the whole template. Raises a ``GrammarError`` subclass."""
        if not self._lex.accept(TokenType.SLASH):
            msg = f"expected leading '/', got {self._lex.peek()}"
            raise MissingLeadingSlash(self.source, self._lex.position, msg)

        segments: list[Segment] = []
        while not self._lex.accept(TokenType.EOF):
            if self._lex.accept(TokenType.SLASH):
                continue
            segments.append(self._parse_segment(allow_variable=True))
        return CompiledTemplate(tuple(segments))

    def _parse_segment(self, *, allow_variable: bool) -> Segment:
        lex = self._lex
        token = lex.peek()

        if self.seen_double_star:
            msg = f"'**' must be the last segment, found {token} after it"
            raise IllegalDoubleStarPlacement(self.source, token.position, msg)

        if lex.accept(TokenType.DOUBLE_STAR):
            self.seen_double_star = True
            return DoubleStar()
        if lex.accept(TokenType.STAR):
            return Star()
        if lex.accept(TokenType.LITERAL):
            return Literal(token.value)

        if token.type is TokenType.LEFT_BRACE:
            if not allow_variable:
                raise NestedVariableNotAllowed(self.source, token.position)
            return self._parse_variable()

        raise UnexpectedToken(self.source, token.position, f"unexpected token {token}")

    def _parse_variable(self) -> Variable:
        lex = self._lex
        open_position = lex.position
        lex.accept(TokenType.LEFT_BRACE)

        if not lex.accept(TokenType.LITERAL):
            self._expect_not_eof("variable must be closed with '}'")
            msg = f"expected variable name after '{{', got {lex.peek()}"
            raise UnexpectedToken(self.source, lex.position, msg)
        name = lex.previous.value  # type: ignore[union-attr]

        if lex.accept(TokenType.RIGHT_BRACE):
            return Variable(name)

        self._expect_not_eof(f"variable {name!r} must be closed with '}}'")
        if not lex.accept(TokenType.EQUALS):
            msg = f"expected '=' or '}}' after variable name {name!r}, got {lex.peek()}"
            raise UnexpectedToken(self.source, lex.position, msg)

        pattern: list[PatternSegment] = []
        while not lex.accept(TokenType.RIGHT_BRACE):
            self._expect_not_eof(f"variable {name!r} must be closed with '}}'")
            if lex.accept(TokenType.SLASH):
                continue
            pattern.append(self._parse_segment(allow_variable=False))  # type: ignore[arg-type]

        if not pattern:
            msg = f"variable {name!r} must have at least one segment after '='"
            raise UnexpectedEndOfInput(self.source, open_position, msg)
        return Variable(name, tuple(pattern))

    def _expect_not_eof(self, detail: str) -> None:
        if self._lex.peek().type is TokenType.EOF:
            raise UnexpectedEndOfInput(self.source, self._lex.position, detail)


def compile_template(source: str) -> CompiledTemplate:
    """Compile a template string into an immutable ``CompiledTemplate``.

    Examples::

        compile_template("/users/{id}")
        compile_template("/files/{path=docs/**}")

    Raises ``GrammarError`` (one of its subclasses) when *source* is not a
    valid template. Never returns a partial tree.
    """
    try:
        template = Parser(source).parse()
    except GrammarError as exc:
        logger.debug("Rejected template %r: %s", source, exc.detail)
        raise
    logger.debug("Compiled template %r into %d segment(s)", source, len(template))
    return template
