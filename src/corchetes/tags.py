"""Tag content parsing.

Splits the raw content of a TAG token into a lowercase name and a parameter.

Example:
    >>> parse_tag(" COLOR = red ")
    ParsedTag(name='color', parameter='red')
    >>> parse_tag("url=http://x/?a=b")
    ParsedTag(name='url', parameter='http://x/?a=b')
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParsedTag:
    """Name and parameter of an opening tag.

    Attributes:
        name: Trimmed, lowercased tag name
        parameter: Trimmed text after the first '=' (empty if absent)
    """

    name: str
    parameter: str = ""

    @property
    def closing_marker(self) -> str:
        """Raw content of the closing tag that matches this one."""
        return f"/{self.name}"


def parse_tag(raw: str) -> ParsedTag:
    """Split raw tag content at the first '='.

    The parameter is not unescaped; later '=' characters stay in it.
    """
    name, sep, param = raw.partition("=")
    if not sep:
        return ParsedTag(name=raw.lower().strip())
    return ParsedTag(name=name.lower().strip(), parameter=param.strip())
