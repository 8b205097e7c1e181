"""Placeholder markers left in the tree where template expressions were.

A full placeholder (``pcss-lin:3``) stands for a whole comment or property
name; short placeholders (``pcss_lin3``) sit among space-separated tokens of a
value or selector. Anything that fails to resolve is left as it is.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from linaria_css.config import DEFAULT_CONFIG, PlaceholderConfig
from linaria_css.model.nodes import Node

__all__ = [
    "expressions_for",
    "resolve_expression",
    "parse_full_placeholder",
    "parse_prop_placeholder",
    "parse_short_placeholder",
    "substitute_placeholders",
]

logger = logging.getLogger(__name__)


def _parse_index(text: str) -> int | None:
    return int(text) if text.isascii() and text.isdigit() else None


def expressions_for(node: Node, config: PlaceholderConfig = DEFAULT_CONFIG) -> Sequence[str] | None:
    """Return the expression table stored on *node*'s root, if any."""
    expressions = node.root().raws.get(config.expressions_key)
    if isinstance(expressions, (list, tuple)):
        return expressions
    return None


def resolve_expression(expressions: Sequence[str] | None, index: int | None) -> str | None:
    """Return the expression at *index*, or None when it cannot be resolved.

    Empty expression text counts as unresolved.
    """
    if expressions is None or index is None:
        return None
    if not 0 <= index < len(expressions):
        return None
    return expressions[index] or None


def parse_full_placeholder(text: str, config: PlaceholderConfig = DEFAULT_CONFIG) -> int | None:
    """Return the index of *text* if it is exactly ``<marker>:<digits>``."""
    match = re.fullmatch(re.escape(config.placeholder_text) + r":([0-9]+)", text)
    return int(match.group(1)) if match else None


def parse_prop_placeholder(prop: str, config: PlaceholderConfig = DEFAULT_CONFIG) -> int | None:
    """Return the index carried by a placeholder property name.

    The index is whatever follows the first marker, minus an optional colon.
    """
    if config.placeholder_text not in prop:
        return None
    rest = prop.split(config.placeholder_text, 1)[1]
    if rest.startswith(":"):
        rest = rest[1:]
    return _parse_index(rest)


def parse_short_placeholder(token: str, config: PlaceholderConfig = DEFAULT_CONFIG) -> int | None:
    """Return the index of *token* if the whole token is ``<short marker><digits>``."""
    marker = config.short_placeholder_text
    if not token.startswith(marker):
        return None
    rest = token[len(marker):]
    return _parse_index(rest)


def substitute_placeholders(
    value: str,
    expressions: Sequence[str] | None,
    config: PlaceholderConfig = DEFAULT_CONFIG,
) -> str:
    """Replace every short placeholder token in *value* by its expression.

    Tokens are split on single spaces and rejoined the same way, so runs of
    spaces survive as empty tokens.
    """
    if config.short_placeholder_text not in value:
        return value

    tokens = []
    for token in value.split(" "):
        index = parse_short_placeholder(token, config)
        expression = resolve_expression(expressions, index)
        if expression is None:
            if index is not None:
                logger.debug("Unresolved placeholder %r left in place", token)
            tokens.append(token)
        else:
            tokens.append(expression)
    return " ".join(tokens)
