"""Escaping builder: keeps printed CSS valid inside a template literal."""

from __future__ import annotations

from linaria_css.model.nodes import Node
from linaria_css.stringifier.base import Builder

__all__ = ["escape_builder", "escape_template_text"]


def escape_template_text(text: str) -> str:
    """Escape backslashes, then backticks, for use inside a template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`")


def escape_builder(builder: Builder) -> Builder:
    """Wrap *builder* so every fragment of CSS is escaped before it is sent on.

    Fragments with no node, or belonging to a root, are host-language code
    (``codeBefore``/``codeAfter`` and the like) and pass through untouched.
    """

    def escaping(
        text: str, node: Node | None = None, position: str | None = None
    ) -> None:
        if node is None or node.type == "root":
            builder(text, node, position)
        else:
            builder(escape_template_text(text), node, position)

    return escaping
