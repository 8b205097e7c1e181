"""linaria-css: print style sheets embedded in template literals back to source."""

from linaria_css.config import DEFAULT_CONFIG, PlaceholderConfig
from linaria_css.errors import StringifyError, TreeLoadError
from linaria_css.model import (
    AtRule,
    Comment,
    Declaration,
    Document,
    Input,
    Root,
    Rule,
    Source,
    node_from_dict,
)
from linaria_css.stringifier import LinariaStringifier, Stringifier, stringify, to_string

__version__ = "0.1.0"

__all__ = [
    "stringify",
    "to_string",
    "LinariaStringifier",
    "Stringifier",
    "PlaceholderConfig",
    "DEFAULT_CONFIG",
    "StringifyError",
    "TreeLoadError",
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
