"""Bracket lexer with O(n) guaranteed performance.

Splits source into literal text runs and bracketed tag tokens. Tags are not
validated here: a token may be a closing marker, carry a parameter, or be
empty. An unterminated "[" turns the rest of the input into text.

No regex in the hot path: two str.find() calls per tag.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from corchetes.tokens import Token, TokenType


class Lexer:
    """Single-pass bracket lexer.

    Usage:
            >>> lexer = Lexer("a[b]c[/b]")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(TEXT, 'a', 0:1)
        Token(TAG, 'b', 1:4)
        Token(TEXT, 'c', 4:5)
        Token(TAG, '/b', 5:9)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until the source is exhausted.

        Every yielded token consumes at least one character, so the
        number of tokens never exceeds len(source).
        """
        source = self._source
        end = self._source_len

        while self._pos < end:
            pos = self._pos
            open_idx = source.find("[", pos)

            if open_idx == -1:
                self._pos = end
                yield Token(TokenType.TEXT, source[pos:], pos, end)
                return

            if open_idx > pos:
                yield Token(TokenType.TEXT, source[pos:open_idx], pos, open_idx)

            close_idx = source.find("]", open_idx)
            if close_idx == -1:
                # Unterminated bracket: not a tag, keep it verbatim
                self._pos = end
                yield Token(TokenType.TEXT, source[open_idx:], open_idx, end)
                return

            self._pos = close_idx + 1
            yield Token(TokenType.TAG, source[open_idx + 1 : close_idx], open_idx, self._pos)


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize source into an immutable token sequence.

    Args:
        source: Raw BBCode text

    Returns:
        Tuple of tokens whose ``source`` spans concatenate back to ``source``.
    """
    return tuple(Lexer(source).tokenize())
