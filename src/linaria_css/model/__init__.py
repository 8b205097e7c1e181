"""Style-sheet syntax tree model."""

from linaria_css.model.loader import node_from_dict
from linaria_css.model.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Document,
    Input,
    Node,
    Root,
    Rule,
    Source,
)

__all__ = [
    "Node",
    "Container",
    "Document",
    "Root",
    "Rule",
    "AtRule",
    "Declaration",
    "Comment",
    "Input",
    "Source",
    "node_from_dict",
]
