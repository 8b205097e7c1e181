"""Printers that turn a syntax tree back into source text."""

from __future__ import annotations

from linaria_css.config import DEFAULT_CONFIG, PlaceholderConfig
from linaria_css.model.nodes import Node
from linaria_css.stringifier.base import Builder, Printer, Stringifier
from linaria_css.stringifier.escape import escape_builder, escape_template_text
from linaria_css.stringifier.linaria import LinariaStringifier

__all__ = [
    "Builder",
    "Printer",
    "Stringifier",
    "LinariaStringifier",
    "escape_builder",
    "escape_template_text",
    "stringify",
    "to_string",
]


def stringify(
    node: Node, builder: Builder, config: PlaceholderConfig = DEFAULT_CONFIG
) -> None:
    """Print *node* and its subtree, sending every fragment to *builder*."""
    LinariaStringifier(builder, config).stringify(node)


def to_string(node: Node, config: PlaceholderConfig = DEFAULT_CONFIG) -> str:
    """Print *node* and return the reconstructed text."""
    parts: list[str] = []

    def collect(text: str, node: Node | None = None, position: str | None = None) -> None:
        parts.append(text)

    stringify(node, collect, config)
    return "".join(parts)
