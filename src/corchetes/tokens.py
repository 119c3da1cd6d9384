"""Token and TokenType definitions for the Corchetes lexer.

The lexer produces a flat stream of Token objects that the parser consumes.
Each Token is either a literal text run or the raw content of one bracket pair.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer."""

    TEXT = auto()  # Literal run, including an unterminated "[..." tail
    TAG = auto()  # Content between "[" and the next "]"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Literal text for TEXT, bracket content (exclusive) for TAG
        start_offset: Absolute start position in source
        end_offset: Absolute end position in source (exclusive)

    The span ``source[start_offset:end_offset]`` always equals ``token.source``.

    """

    type: TokenType
    value: str
    start_offset: int
    end_offset: int

    @property
    def source(self) -> str:
        """Reconstruct the exact source span this token was scanned from."""
        if self.type is TokenType.TAG:
            return f"[{self.value}]"
        return self.value

    @property
    def is_closing(self) -> bool:
        """True for a TAG token whose content starts with '/'."""
        return self.type is TokenType.TAG and self.value.startswith("/")

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.start_offset}:{self.end_offset})"
