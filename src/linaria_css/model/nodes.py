"""Style-sheet syntax tree: Document, Root, Rule, AtRule, Declaration, Comment.

Every node keeps the formatting captured by the parser in ``raws`` so the
printer can reproduce the source byte for byte. Nodes compare by identity;
``parent`` is a back reference and never takes part in repr.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator


@dataclass
class Input:
    """The source text a tree was parsed from."""

    css: str
    file: str | None = None


@dataclass
class Source:
    """Where a node came from."""

    input: Input
    start: dict[str, int] | None = None
    end: dict[str, int] | None = None


@dataclass(eq=False)
class Node:
    """Base class of all tree nodes."""

    type: ClassVar[str] = "node"

    raws: dict[str, Any] = field(default_factory=dict)
    source: Source | None = field(default=None, repr=False)
    parent: Container | None = field(default=None, repr=False, compare=False)

    def root(self) -> Node:
        """Return the nearest ``root`` ancestor (a ``document`` is never returned
        for nodes below a root)."""
        result: Node = self
        while result.parent is not None and result.parent.type != "document":
            result = result.parent
        return result

    def next(self) -> Node | None:
        """Return the following sibling. Not used by the printers; kept for callers
        editing a tree before printing it."""
        if self.parent is None:
            return None
        index = self.parent.index(self)
        siblings = self.parent.nodes or []
        return siblings[index + 1] if index + 1 < len(siblings) else None

    def prev(self) -> Node | None:
        """Return the preceding sibling, for callers editing a tree."""
        if self.parent is None:
            return None
        index = self.parent.index(self)
        return self.parent.nodes[index - 1] if index > 0 else None  # type: ignore[index]

    def to_string(self) -> str:
        """Print this node with the placeholder-aware printer."""
        from linaria_css.stringifier import to_string

        return to_string(self)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(eq=False)
class Container(Node):
    """A node that owns child nodes."""

    nodes: list[Node] | None = field(default_factory=list)

    def __post_init__(self) -> None:
        children = self.nodes
        if children:
            self.nodes = []
            self.append(*children)

    # --- structure ------------------------------------------------------------

    @property
    def first(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    @property
    def last(self) -> Node | None:
        return self.nodes[-1] if self.nodes else None

    def index(self, child: Node) -> int:
        """Return the position of *child* among this container's nodes."""
        for i, node in enumerate(self.nodes or []):
            if node is child:
                return i
        raise ValueError("node is not a child of this container")

    def append(self, *children: Node) -> Container:
        """Append children, detaching each from its current parent first.

        Appending a node that is already a child of this container moves it
        to the end.
        """
        if self.nodes is None:
            self.nodes = []
        for child in children:
            if child.parent is not None:
                child.parent.remove_child(child)
            child.parent = self
            self.nodes.append(child)
        self._mark_dirty()
        return self

    def remove_child(self, child: Node) -> Container:
        del self.nodes[self.index(child)]  # type: ignore[arg-type]
        child.parent = None
        self._mark_dirty()
        return self

    def _mark_dirty(self) -> None:
        root = self.root()
        if isinstance(root, Root):
            root.raw_cache.clear()

    # --- traversal ------------------------------------------------------------

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first, in document order."""
        for child in self.nodes or []:
            yield child
            if isinstance(child, Container):
                yield from child.walk()

    def walk_decls(self) -> Iterator[Declaration]:
        for node in self.walk():
            if isinstance(node, Declaration):
                yield node

    def walk_comments(self) -> Iterator[Comment]:
        for node in self.walk():
            if isinstance(node, Comment):
                yield node

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every rule; a convenience for callers inspecting selectors."""
        for node in self.walk():
            if isinstance(node, Rule):
                yield node


@dataclass(eq=False)
class Document(Container):
    """A hybrid source file holding one root per embedded style sheet."""

    type: ClassVar[str] = "document"


@dataclass(eq=False)
class Root(Container):
    """A single style sheet; owns the template expression table in its raws."""

    type: ClassVar[str] = "root"

    raw_cache: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(eq=False)
class Rule(Container):
    """A selector followed by a declaration block."""

    type: ClassVar[str] = "rule"

    selector: str = ""


@dataclass(eq=False)
class AtRule(Container):
    """An ``@name params`` statement, with a block when ``nodes`` is not None."""

    type: ClassVar[str] = "atrule"

    nodes: list[Node] | None = None
    name: str = ""
    params: str = ""


@dataclass(eq=False)
class Declaration(Node):
    """A ``prop: value`` pair."""

    type: ClassVar[str] = "decl"

    prop: str = ""
    value: str = ""
    important: bool = False


@dataclass(eq=False)
class Comment(Node):
    """A ``/* text */`` comment."""

    type: ClassVar[str] = "comment"

    text: str = ""
