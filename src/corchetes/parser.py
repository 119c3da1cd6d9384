"""Recursive descent matcher and renderer.

Consumes the token sequence from the Lexer, pairs each opening tag with its
closing tag and renders the enclosed range recursively.

Matching Rule:
An opening tag closes at the *first* later TAG token equal to "/" + name
(case-insensitive), at any depth. Intermediate reopenings of the same name are
not counted, so "[b][b]x[/b][/b]" pairs the outer [b] with the first [/b].
This nearest-textual-match rule is deliberate and kept as-is.

Inner Walk:
A nested walk stops at the first closing marker of any name. The outer walk
always resumes after the matched closing tag, so tokens between an early stop
and the matched close are not rendered. A stray closing marker at the top
level ends the walk the same way, dropping the rest of the input.

Thread Safety:
Parser instances are single-use. Configuration is read from ContextVar once
at construction; all other state is call-local.

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from corchetes.config import get_translate_config
from corchetes.renderers.html import html_escape, render_tag
from corchetes.stringbuilder import StringBuilder
from corchetes.tags import parse_tag
from corchetes.tokens import Token, TokenType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Rendered output for a contiguous token range.

    Attributes:
        output: HTML rendered for the range
        next_index: Index of the first unconsumed token: len(tokens), or the
            closing marker that halted the walk
    """

    output: str
    next_index: int


class Parser:
    """Matcher over an immutable token sequence.

    Usage:
            >>> from corchetes.lexer import tokenize
            >>> Parser(tokenize("[b][i]x[/i][/b]")).render()
            '<strong><em>x</em></strong>'

    """

    __slots__ = ("_tokens", "_token_count", "_max_depth")

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._token_count = len(tokens)
        self._max_depth = get_translate_config().max_depth

    def render(self) -> str:
        """Render the whole sequence.

        A closing marker the top-level walk stops at ends the translation:
        it and every token after it produce no output.
        """
        return self.render_range(0).output

    def render_range(self, start: int, depth: int = 0) -> RenderResult:
        """Render tokens from start until the end or the first closing marker.

        Args:
            start: Index of the first token to render
            depth: Nesting depth of this walk (0 at the top level)

        Returns:
            RenderResult with the HTML and the halting index.
        """
        tokens = self._tokens
        sb = StringBuilder()
        i = start

        while i < self._token_count:
            token = tokens[i]

            if token.type is TokenType.TEXT:
                sb.append(html_escape(token.value))
                i += 1
                continue

            if token.is_closing:
                return RenderResult(sb.build(), i)

            tag = parse_tag(token.value)
            close_idx = self._find_close(i + 1, tag.closing_marker)

            if close_idx == -1:
                logger.debug("No closing tag for %r at offset %d", token.value, token.start_offset)
                sb.append(html_escape(token.source))
                i += 1
                continue

            if depth >= self._max_depth:
                logger.debug(
                    "Nesting depth %d exceeded at offset %d; keeping %r as text",
                    self._max_depth,
                    token.start_offset,
                    token.value,
                )
                sb.append(html_escape(token.source))
                i += 1
                continue

            inner = self.render_range(i + 1, depth + 1)
            sb.append(render_tag(tag.name, tag.parameter, inner.output))
            i = close_idx + 1

        return RenderResult(sb.build(), i)

    def _find_close(self, start: int, marker: str) -> int:
        """Flat forward scan for the first TAG equal to marker, ignoring case."""
        tokens = self._tokens
        for j in range(start, self._token_count):
            token = tokens[j]
            if token.type is TokenType.TAG and token.value.lower() == marker:
                return j
        return -1
