"""Build a syntax tree from the JSON shape emitted by the upstream parser.

The accepted shape mirrors what the JavaScript tooling produces with
``JSON.stringify(root)``::

    {"type": "root", "raws": {...}, "nodes": [
        {"type": "decl", "prop": "color", "value": "red", "raws": {...}}
    ], "inputs": [{"css": "..."}], "source": {"inputId": 0}}
"""

from __future__ import annotations

from typing import Any

from linaria_css.errors import TreeLoadError
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

__all__ = ["node_from_dict"]

_NODE_TYPES: dict[str, type[Node]] = {
    "document": Document,
    "root": Root,
    "rule": Rule,
    "atrule": AtRule,
    "decl": Declaration,
    "comment": Comment,
}

# Node-specific fields copied verbatim from the serialized form.
_FIELDS: dict[str, tuple[str, ...]] = {
    "rule": ("selector",),
    "atrule": ("name", "params"),
    "decl": ("prop", "value", "important"),
    "comment": ("text",),
}


def _load_source(data: Any, inputs: list[Input], path: str) -> Source | None:
    if not isinstance(data, dict):
        return None
    if "input" in data:
        input_ = _load_input(data["input"], f"{path}.input")
    elif "inputId" in data:
        try:
            input_ = inputs[int(data["inputId"])]
        except (IndexError, TypeError, ValueError):
            raise TreeLoadError(
                f"Unknown inputId {data['inputId']!r}", f"{path}.inputId"
            ) from None
    else:
        return None
    return Source(input=input_, start=data.get("start"), end=data.get("end"))


def _load_input(data: Any, path: str) -> Input:
    if not isinstance(data, dict):
        raise TreeLoadError(f"Expected an object, got {type(data).__name__}", path)
    css = data.get("css")
    if not isinstance(css, str):
        raise TreeLoadError("Input is missing its css text", path)
    return Input(css=css, file=data.get("file"))


def _load_node(data: Any, inputs: list[Input], path: str) -> Node:
    if not isinstance(data, dict):
        raise TreeLoadError(f"Expected an object, got {type(data).__name__}", path)
    node_type = data.get("type")
    cls = _NODE_TYPES.get(node_type)  # type: ignore[arg-type]
    if cls is None:
        raise TreeLoadError(f"Unknown node type {node_type!r}", f"{path}.type")

    raws = data.get("raws")
    if raws is None:
        raws = {}
    elif not isinstance(raws, dict):
        raise TreeLoadError("raws must be an object", f"{path}.raws")

    kwargs: dict[str, Any] = {"raws": dict(raws)}
    for name in _FIELDS.get(node_type, ()):  # type: ignore[arg-type]
        if name in data:
            kwargs[name] = bool(data[name]) if name == "important" else data[name]
    kwargs["source"] = _load_source(data.get("source"), inputs, f"{path}.source")

    node = cls(**kwargs)
    if isinstance(node, Container) and "nodes" in data:
        children = data["nodes"]
        if not isinstance(children, list):
            raise TreeLoadError("nodes must be a list", f"{path}.nodes")
        node.append(
            *(
                _load_node(child, inputs, f"{path}.nodes[{i}]")
                for i, child in enumerate(children)
            )
        )
    return node


def node_from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node (and its subtree) from its serialized form.

    Raises TreeLoadError when the data does not describe a tree.
    """
    if not isinstance(data, dict):
        raise TreeLoadError(f"Expected an object, got {type(data).__name__}")
    inputs = [
        _load_input(item, f"$.inputs[{i}]")
        for i, item in enumerate(data.get("inputs") or [])
    ]
    return _load_node(data, inputs, "$")
