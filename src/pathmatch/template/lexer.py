"""Template lexer — one token of lookahead, no backtracking.

Splits a template string into ``/``, ``*``, ``**``, ``{``, ``}``, ``=``
and literal runs. A literal is the longest run of characters that are
none of ``/ * { } =``.
"""

from pathmatch.template.tokens import DELIMITERS, Token, TokenType

_SINGLE_CHAR = {
    "/": TokenType.SLASH,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "=": TokenType.EQUALS,
}


class Lexer:
    """Streaming tokenizer over a template string.

    Usage::

        lex = Lexer("/users/{id}")
        lex.accept(TokenType.SLASH)     # True
        lex.peek()                      # Token(LITERAL, "users")
        lex.accept(TokenType.LITERAL)   # True
        lex.previous.value              # "users"
    """

    __slots__ = ("_current", "_pos", "_previous", "source")

    def __init__(self, source: str) -> None:
        self.source = source
        self._pos = 0
        self._previous: Token | None = None
        self._current = self._scan()

    @property
    def previous(self) -> Token | None:
        """The most recently accepted token, or ``None`` before the first."""
        return self._previous

    @property
    def position(self) -> int:
        """Offset of the current (not yet accepted) token."""
        return self._current.position

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        return self._current

    def rest(self) -> str:
        """Return the input that has not been scanned yet."""
        return self.source[self._pos :]

    def accept(self, kind: TokenType) -> bool:
        """Consume the current token if it is of *kind*.

        Returns ``True`` and advances on a hit; leaves the stream untouched
        and returns ``False`` otherwise. ``EOF`` can be accepted repeatedly.
        """
        if self._current.type is not kind:
            return False
        self._previous = self._current
        self._current = self._scan()
        return True

    def _scan(self) -> Token:
        source = self.source
        start = self._pos
        if start >= len(source):
            return Token(TokenType.EOF, position=len(source))

        ch = source[start]
        if ch == "*":
            if source.startswith("**", start):
                self._pos = start + 2
                return Token(TokenType.DOUBLE_STAR, position=start)
            self._pos = start + 1
            return Token(TokenType.STAR, position=start)

        kind = _SINGLE_CHAR.get(ch)
        if kind is not None:
            self._pos = start + 1
            return Token(kind, position=start)

        end = start
        while end < len(source) and source[end] not in DELIMITERS:
            end += 1
        self._pos = end
        return Token(TokenType.LITERAL, source[start:end], position=start)
