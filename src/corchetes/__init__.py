"""
Corchetes — BBCode to HTML translator

Translates bracket-delimited BBCode into safe HTML in a single pass.
Malformed markup never raises: unmatched or unknown tags degrade to literal
text, and every literal and parameter value is HTML-escaped.

Quick Start:
    >>> from corchetes import translate
    >>> translate("[b]Hello[/b], [i]World[/i]!")
    '<strong>Hello</strong>, <em>World</em>!'

    >>> # Or use the reusable Translator
    >>> from corchetes import Translator
    >>> bb = Translator(max_depth=32)
    >>> bb("[color=red]x[/color]")
    '<span style="color: red">x</span>'

Supported tags: b, i, u, color, size, left, center, right, url, img, list.
"""

import dataclasses
from collections.abc import Iterable

from corchetes.config import (
    TranslateConfig,
    get_translate_config,
    reset_translate_config,
    set_translate_config,
    translate_config_context,
)
from corchetes.errors import ConfigError, CorchetesError
from corchetes.lexer import Lexer, tokenize
from corchetes.parser import Parser, RenderResult
from corchetes.profiling import (
    TranslateAccumulator,
    get_translate_accumulator,
    profiled_translate,
)
from corchetes.renderers.html import html_escape, render_tag
from corchetes.tags import ParsedTag, parse_tag
from corchetes.tokens import Token, TokenType

__version__ = "0.1.0"


def _translate(source: str) -> str:
    """Tokenize and render under the active config."""
    tokens = tokenize(source)
    html = Parser(tokens).render()

    acc = get_translate_accumulator()
    if acc is not None:
        acc.record_translate(source_length=len(source), token_count=len(tokens))

    return html


def translate(source: str, *, config: TranslateConfig | None = None) -> str:
    """Translate BBCode source into HTML.

    Args:
        source: BBCode text
        config: Optional config for this call (uses the active context
            config if None)

    Returns:
        HTML string; empty for empty input.

    Example:
        >>> translate("[size=10]x[/size]")
        '<span style="font-size: 14px">x</span>'
    """
    if config is None:
        return _translate(source)
    with translate_config_context(config):
        return _translate(source)


class Translator:
    """Reusable BBCode translator bound to one configuration.

    Usage:
        >>> bb = Translator()
        >>> bb("[u]x[/u]")
        '<u>x</u>'
        >>> bb.translate_many(["[b]a[/b]", "[i]b[/i]"])
        ['<strong>a</strong>', '<em>b</em>']

    Thread Safety:
        Config is immutable and applied via ContextVar per call. Safe to share
        one instance across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, max_depth: int | None = None, config: TranslateConfig | None = None) -> None:
        """Initialize translator.

        Args:
            max_depth: Maximum tag nesting depth (overrides config.max_depth)
            config: Base configuration (defaults to TranslateConfig())
        """
        base = config or TranslateConfig()
        if max_depth is not None:
            base = dataclasses.replace(base, max_depth=max_depth)
        self._config = base

    @property
    def config(self) -> TranslateConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Translate one BBCode string to HTML."""
        with translate_config_context(self._config):
            return _translate(source)

    def translate_many(self, sources: Iterable[str]) -> list[str]:
        """Translate several sources, setting the config once for the batch."""
        with translate_config_context(self._config):
            return [_translate(source) for source in sources]


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "translate",
    "Translator",
    # Pipeline components
    "Lexer",
    "tokenize",
    "Parser",
    "RenderResult",
    "parse_tag",
    "ParsedTag",
    "render_tag",
    "html_escape",
    # Tokens
    "Token",
    "TokenType",
    # Configuration (ContextVar-based)
    "TranslateConfig",
    "get_translate_config",
    "set_translate_config",
    "reset_translate_config",
    "translate_config_context",
    # Profiling
    "TranslateAccumulator",
    "profiled_translate",
    "get_translate_accumulator",
    # Errors
    "CorchetesError",
    "ConfigError",
]
