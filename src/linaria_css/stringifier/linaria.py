"""Printer for style sheets embedded in template literals.

Puts template expressions back where the parser left placeholders, prefers
the ``linaria*`` override raws over generic ones, and escapes everything that
ends up inside the literal.
"""

from __future__ import annotations

import logging
from typing import Any

from linaria_css.config import DEFAULT_CONFIG, PlaceholderConfig
from linaria_css.model.nodes import Comment, Declaration, Document, Node, Root, Rule
from linaria_css.stringifier.base import Builder, Stringifier
from linaria_css.stringifier.escape import escape_builder
from linaria_css.stringifier.placeholders import (
    expressions_for,
    parse_full_placeholder,
    parse_prop_placeholder,
    resolve_expression,
    substitute_placeholders,
)

__all__ = ["LinariaStringifier"]

logger = logging.getLogger(__name__)

# Raw slots whose override only applies when the generic raw is non-empty.
_OVERRIDABLE_RAWS = ("before", "after", "between")


def _text_form(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class LinariaStringifier(Stringifier):
    """Stringifier that restores template expressions and override raws."""

    def __init__(self, builder: Builder, config: PlaceholderConfig = DEFAULT_CONFIG) -> None:
        super().__init__(escape_builder(builder))
        self.config = config

    def _substitute(self, node: Node, value: str) -> str:
        if self.config.short_placeholder_text not in value:
            return value
        return substitute_placeholders(
            value, expressions_for(node, self.config), self.config
        )

    # --- node handlers --------------------------------------------------------

    def comment(self, node: Comment) -> None:
        index = parse_full_placeholder(node.text, self.config)
        if index is not None:
            expression = resolve_expression(expressions_for(node, self.config), index)
            if expression is not None:
                self.builder(expression, node)
                return
            logger.debug("Unresolved placeholder comment %r printed as is", node.text)
        super().comment(node)

    def decl(self, node: Declaration, semicolon: bool = False) -> None:
        between = self.raw(node, "between", "colon")

        prop = node.prop
        if self.config.placeholder_text in prop:
            index = parse_prop_placeholder(prop, self.config)
            expression = resolve_expression(expressions_for(node, self.config), index)
            if expression is not None:
                prop = expression
            else:
                logger.debug("Unresolved placeholder property %r printed as is", prop)

        value = self._substitute(node, self.raw_value(node, "value"))

        string = prop + between + value
        if node.important:
            string += node.raws.get("important") or " !important"
        if semicolon:
            string += ";"
        self.builder(string, node)

    def rule(self, node: Rule) -> None:
        selector = self._substitute(node, self.raw_value(node, "selector"))
        self.block(node, selector)
        if node.raws.get("ownSemicolon"):
            self.builder(node.raws["ownSemicolon"], node, "end")

    def document(self, node: Document) -> None:
        if not node.nodes:
            # Nothing was parsed out of the file, so print it back verbatim.
            css = node.source.input.css if node.source is not None else ""
            self.builder(css or "")
        else:
            super().document(node)

    def root(self, node: Root) -> None:
        self.builder(node.raws.get("codeBefore") or "", node, "start")

        self.body(node)

        # Recover host-code indentation the parser stripped from ``after``.
        after = node.raws.get(self.config.override_slot("after"))
        if after is None:
            after = node.raws.get("after")
        if after:
            self.builder(after)

        self.builder(node.raws.get("codeAfter") or "", node, "end")

    # --- raw resolution -------------------------------------------------------

    def raw(self, node: Node, own: str | None, detect: str | None = None) -> Any:
        if own in _OVERRIDABLE_RAWS and node.raws.get(own):
            override = node.raws.get(self.config.override_slot(own))
            if override:
                return override
        return super().raw(node, own, detect)

    def raw_value(self, node: Node, prop: str) -> str:
        """Return the override slot for *prop* when present, even if it is empty.

        Non-string overrides print the way the host language would interpolate
        them: ``None`` as ``null`` and booleans as ``true``/``false``.
        """
        slot = self.config.override_slot(prop)
        if slot in node.raws:
            return _text_form(node.raws[slot])
        return super().raw_value(node, prop)
