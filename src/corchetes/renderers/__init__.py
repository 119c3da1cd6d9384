"""Corchetes renderers.

Renderers turn a resolved tag and its rendered content into output markup.

Available Renderers:
- html.render_tag: Renders BBCode tags to HTML

Thread Safety:
Renderers are pure functions. Safe for concurrent use from multiple threads.

"""

from corchetes.renderers.html import html_escape, render_tag

__all__ = ["html_escape", "render_tag"]
