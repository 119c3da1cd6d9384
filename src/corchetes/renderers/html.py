"""HTML tag renderer.

Maps a resolved tag (name, parameter, already-rendered inner HTML) to output
HTML. The set of tags is closed; anything unrecognized passes through as
bracketed text.

Escaping happens once, at the point of insertion: inner HTML arrives escaped
from the parser and is never escaped again here, while parameters are raw and
always go through html_escape().

Thread Safety:
All functions are pure. Safe for concurrent use from multiple threads.

"""

import html
import logging
import math
import re
from decimal import Decimal

logger = logging.getLogger(__name__)

# Leading numeric prefix, as accepted by JavaScript's parseFloat()
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

SIZE_OFFSET = 4  # maps the documented 1-20 input range to 5-24px
LIST_ITEM_MARKER = "[*]"

LINK_STYLE = "color: #667eea; text-decoration: underline;"
IMAGE_STYLE = "max-width: 100%; max-height: 400px; border-radius: 5px; margin: 10px 0;"
LIST_STYLE = "margin: 10px 0; padding-left: 20px;"


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    Escapes &, <, >, " and ' (the latter as &#039;).
    Python's html.escape() uses &#x27; for the single quote.
    """
    return html.escape(s, quote=False).replace('"', "&quot;").replace("'", "&#039;")


def parse_float(text: str) -> float:
    """Parse the leading number of text, NaN if there is none.

    Trailing garbage is ignored, so "12px" parses as 12.0.
    """
    match = _FLOAT_PREFIX.match(text.strip())
    if match is None:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def format_number(value: float) -> str:
    """Format a float the way it prints in a browser (14, 14.5, NaN, Infinity)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, _, exp_text = text.partition("e")
    exponent = int(exp_text)
    if -7 < exponent < 21:
        return format(Decimal(text), "f")
    sign = "+" if exponent > 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def _render_list(inner: str) -> str:
    # Split happens on rendered HTML, so markers inside nested tags split too
    items = [item.strip() for item in inner.split(LIST_ITEM_MARKER) if item.strip()]
    body = "\n".join(f"<li>{item}</li>" for item in items)
    return f'<ul style="{LIST_STYLE}">{body}</ul>'


def render_tag(name: str, parameter: str, inner: str) -> str:
    """Render one matched tag pair to HTML.

    Args:
        name: Lowercased tag name
        parameter: Raw (unescaped) parameter, empty if absent
        inner: HTML already rendered for the enclosed tokens

    Returns:
        HTML string for the element.
    """
    match name:
        case "b":
            return f"<strong>{inner}</strong>"
        case "i":
            return f"<em>{inner}</em>"
        case "u":
            return f"<u>{inner}</u>"
        case "color":
            return f'<span style="color: {html_escape(parameter)}">{inner}</span>'
        case "size":
            px = format_number(parse_float(parameter) + SIZE_OFFSET)
            return f'<span style="font-size: {px}px">{inner}</span>'
        case "left" | "center" | "right":
            return f'<div style="text-align: {name}">{inner}</div>'
        case "url":
            return (
                f'<a href="{html_escape(parameter)}" target="_blank" '
                f'style="{LINK_STYLE}">{inner}</a>'
            )
        case "img":
            src = parameter or inner.strip()
            return (
                f'<img src="{html_escape(src)}" style="{IMAGE_STYLE}" '
                f"alt=\"Image\" onerror=\"this.style.display='none'\">"
            )
        case "list":
            return _render_list(inner)
        case _:
            logger.debug("Passing through unknown tag %r", name)
            escaped = html_escape(name)
            return f"[{escaped}]{inner}[/{escaped}]"
