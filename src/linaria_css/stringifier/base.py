"""Generic style-sheet printer.

Reproduces a tree from the formatting captured in each node's ``raws``. When
a raw value is missing it is detected from other nodes of the same root (and
cached there), falling back to ``DEFAULT_RAW``.
"""

from __future__ import annotations

import re
from typing import Any, Protocol

from linaria_css.errors import StringifyError
from linaria_css.model.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Document,
    Node,
    Root,
    Rule,
)

__all__ = ["Builder", "Printer", "Stringifier", "DEFAULT_RAW"]

DEFAULT_RAW: dict[str, Any] = {
    "after": "\n",
    "beforeClose": "\n",
    "beforeComment": "\n",
    "beforeDecl": "\n",
    "beforeOpen": " ",
    "beforeRule": "\n",
    "colon": ": ",
    "commentLeft": " ",
    "commentRight": " ",
    "emptyBody": "",
    "indent": "    ",
    "semicolon": False,
}

_HANDLERS = frozenset({"document", "root", "rule", "atrule", "decl", "comment"})

# Detect hints that have a dedicated detection method.
_DETECTORS: dict[str, str] = {
    "beforeClose": "raw_before_close",
    "beforeComment": "raw_before_comment",
    "beforeDecl": "raw_before_decl",
    "beforeOpen": "raw_before_open",
    "beforeRule": "raw_before_rule",
    "colon": "raw_colon",
    "emptyBody": "raw_empty_body",
    "indent": "raw_indent",
    "semicolon": "raw_semicolon",
}

_LAST_LINE_RE = re.compile(r"[^\n]+\Z")
_NON_SPACE_RE = re.compile(r"\S")
_NON_COLON_RE = re.compile(r"[^\s:]")


class Builder(Protocol):
    """Low-level text sink every printed fragment is sent to.

    ``position`` is ``"start"`` or ``"end"`` when the fragment opens or
    closes *node*.
    """

    def __call__(
        self, text: str, node: Node | None = None, position: str | None = None
    ) -> None: ...


class Printer(Protocol):
    """One handler per node type plus raw-text resolution."""

    def stringify(self, node: Node, semicolon: bool = False) -> None: ...

    def document(self, node: Document) -> None: ...

    def root(self, node: Root) -> None: ...

    def rule(self, node: Rule) -> None: ...

    def atrule(self, node: AtRule, semicolon: bool = False) -> None: ...

    def decl(self, node: Declaration, semicolon: bool = False) -> None: ...

    def comment(self, node: Comment) -> None: ...

    def raw(self, node: Node, own: str | None, detect: str | None = None) -> Any: ...

    def raw_value(self, node: Node, prop: str) -> str: ...


def _strip_last_line(value: str) -> str:
    if "\n" in value:
        return _LAST_LINE_RE.sub("", value)
    return value


class Stringifier:
    """Walks a tree depth-first and sends every fragment to ``builder``."""

    def __init__(self, builder: Builder) -> None:
        self.builder = builder

    # --- dispatch -------------------------------------------------------------

    def stringify(self, node: Node, semicolon: bool = False) -> None:
        if node.type not in _HANDLERS:
            raise StringifyError(
                f"Unknown AST node type {node.type}. "
                "Maybe you need to change the stringifier.",
                node_type=node.type,
            )
        handler = getattr(self, node.type)
        if node.type in ("atrule", "decl"):
            handler(node, semicolon)
        else:
            handler(node)

    # --- node handlers --------------------------------------------------------

    def document(self, node: Document) -> None:
        self.body(node)

    def root(self, node: Root) -> None:
        self.body(node)
        if node.raws.get("after"):
            self.builder(node.raws["after"])

    def rule(self, node: Rule) -> None:
        self.block(node, self.raw_value(node, "selector"))
        if node.raws.get("ownSemicolon"):
            self.builder(node.raws["ownSemicolon"], node, "end")

    def atrule(self, node: AtRule, semicolon: bool = False) -> None:
        name = "@" + node.name
        params = self.raw_value(node, "params") if node.params else ""

        if node.raws.get("afterName") is not None:
            name += node.raws["afterName"]
        elif params:
            name += " "

        if node.nodes is not None:
            self.block(node, name + params)
        else:
            end = (node.raws.get("between") or "") + (";" if semicolon else "")
            self.builder(name + params + end, node)

    def decl(self, node: Declaration, semicolon: bool = False) -> None:
        between = self.raw(node, "between", "colon")
        string = node.prop + between + self.raw_value(node, "value")

        if node.important:
            string += node.raws.get("important") or " !important"

        if semicolon:
            string += ";"
        self.builder(string, node)

    def comment(self, node: Comment) -> None:
        left = self.raw(node, "left", "commentLeft")
        right = self.raw(node, "right", "commentRight")
        self.builder("/*" + left + node.text + right + "*/", node)

    # --- structure ------------------------------------------------------------

    def block(self, node: Container, start: str) -> None:
        between = self.raw(node, "between", "beforeOpen")
        self.builder(start + between + "{", node, "start")

        if node.nodes:
            self.body(node)
            after = self.raw(node, "after")
        else:
            after = self.raw(node, "after", "emptyBody")

        if after:
            self.builder(after)
        self.builder("}", node, "end")

    def body(self, node: Container) -> None:
        children = node.nodes or []
        last = len(children) - 1
        while last > 0:
            if children[last].type != "comment":
                break
            last -= 1

        semicolon = self.raw(node, "semicolon")
        for i, child in enumerate(children):
            before = self.raw(child, "before")
            if before:
                self.builder(before)
            self.stringify(child, last != i or bool(semicolon))

    # --- raw resolution -------------------------------------------------------

    def raw(self, node: Node, own: str | None, detect: str | None = None) -> Any:
        """Return the raw formatting *own* of *node*, detecting it when absent."""
        if detect is None:
            detect = own

        if own:
            value = node.raws.get(own)
            if value is not None:
                return value

        parent = node.parent
        if detect == "before":
            # The first node of a root never gets leading whitespace.
            if parent is None or (parent.type == "root" and parent.first is node):
                return ""
            # Roots inside a document only use their own raws.
            if parent.type == "document":
                return ""

        if parent is None:
            return DEFAULT_RAW.get(detect)  # type: ignore[arg-type]

        root = node.root()
        cache: dict[str, Any] = root.raw_cache if isinstance(root, Root) else {}
        if detect in cache:
            return cache[detect]

        if detect in ("before", "after"):
            return self.before_after(node, detect)  # type: ignore[arg-type]

        value: Any = None
        method = _DETECTORS.get(detect)  # type: ignore[arg-type]
        if method is not None:
            value = getattr(self, method)(root, node)
        elif isinstance(root, Container):
            for item in root.walk():
                value = item.raws.get(own)  # type: ignore[arg-type]
                if value is not None:
                    break

        if value is None:
            value = DEFAULT_RAW.get(detect)  # type: ignore[arg-type]
        cache[detect] = value  # type: ignore[index]
        return value

    def before_after(self, node: Node, detect: str) -> str:
        if node.type == "decl":
            value = self.raw(node, None, "beforeDecl")
        elif node.type == "comment":
            value = self.raw(node, None, "beforeComment")
        elif detect == "before":
            value = self.raw(node, None, "beforeRule")
        else:
            value = self.raw(node, None, "beforeClose")

        depth = 0
        parent = node.parent
        while parent is not None and parent.type != "root":
            depth += 1
            parent = parent.parent

        if "\n" in value:
            indent = self.raw(node, None, "indent")
            if indent:
                value += indent * depth
        return value

    def raw_value(self, node: Node, prop: str) -> str:
        """Return the source text of *prop*, unless the value was changed since parsing."""
        value = getattr(node, prop)
        raw = node.raws.get(prop)
        if isinstance(raw, dict) and raw.get("value") == value:
            return raw.get("raw", value)
        return value

    # --- detection ------------------------------------------------------------

    def raw_before_close(self, root: Container, node: Node) -> str | None:
        value = None
        for item in root.walk():
            if isinstance(item, Container) and item.nodes:
                if item.raws.get("after") is not None:
                    value = _strip_last_line(item.raws["after"])
                    break
        if value:
            value = _NON_SPACE_RE.sub("", value)
        return value

    def raw_before_comment(self, root: Container, node: Node) -> str | None:
        value = None
        for item in root.walk_comments():
            if item.raws.get("before") is not None:
                value = _strip_last_line(item.raws["before"])
                break
        if value is None:
            return self.raw(node, None, "beforeDecl")
        return _NON_SPACE_RE.sub("", value)

    def raw_before_decl(self, root: Container, node: Node) -> str | None:
        value = None
        for item in root.walk_decls():
            if item.raws.get("before") is not None:
                value = _strip_last_line(item.raws["before"])
                break
        if value is None:
            return self.raw(node, None, "beforeRule")
        return _NON_SPACE_RE.sub("", value)

    def raw_before_open(self, root: Container, node: Node) -> str | None:
        for item in root.walk():
            if item.type != "decl" and item.raws.get("between") is not None:
                return item.raws["between"]
        return None

    def raw_before_rule(self, root: Container, node: Node) -> str | None:
        value = None
        for item in root.walk():
            if not isinstance(item, Container) or item.nodes is None:
                continue
            if item.parent is not root or root.first is not item:
                if item.raws.get("before") is not None:
                    value = _strip_last_line(item.raws["before"])
                    break
        if value:
            value = _NON_SPACE_RE.sub("", value)
        return value

    def raw_colon(self, root: Container, node: Node) -> str | None:
        for item in root.walk_decls():
            if item.raws.get("between") is not None:
                return _NON_COLON_RE.sub("", item.raws["between"])
        return None

    def raw_empty_body(self, root: Container, node: Node) -> str | None:
        for item in root.walk():
            if isinstance(item, Container) and item.nodes == []:
                if item.raws.get("after") is not None:
                    return item.raws["after"]
        return None

    def raw_indent(self, root: Container, node: Node) -> str | None:
        if root.raws.get("indent"):
            return root.raws["indent"]
        for item in root.walk():
            parent = item.parent
            if parent is not None and parent is not root and parent.parent is root:
                if item.raws.get("before") is not None:
                    last_line = item.raws["before"].split("\n")[-1]
                    return _NON_SPACE_RE.sub("", last_line)
        return None

    def raw_semicolon(self, root: Container, node: Node) -> bool | None:
        for item in root.walk():
            if isinstance(item, Container) and item.nodes and item.last.type == "decl":  # type: ignore[union-attr]
                if item.raws.get("semicolon") is not None:
                    return item.raws["semicolon"]
        return None
