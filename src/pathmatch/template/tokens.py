"""Token kinds produced by the template lexer."""

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of template tokens."""

    SLASH = "/"
    STAR = "*"
    DOUBLE_STAR = "**"
    LITERAL = "LITERAL"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    EQUALS = "="
    EOF = "EOF"


# Characters that end a literal run
DELIMITERS = frozenset("/*{}=")


def is_literal_text(text: object) -> bool:
    """True if *text* could have been lexed as a single ``LITERAL`` token."""
    return isinstance(text, str) and bool(text) and DELIMITERS.isdisjoint(text)


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    ``value`` is only set for ``LITERAL`` tokens. ``position`` is the offset
    of the token's first character in the template string.
    """

    type: TokenType
    value: str = ""
    position: int = 0

    def __str__(self) -> str:
        if self.value:
            return f"{self.type.value}({self.value})"
        return self.type.value
