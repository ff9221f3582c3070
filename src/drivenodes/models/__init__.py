"""Public model exports for drivenodes."""

from __future__ import annotations

from .codec import apply_dict, encode_new_node, encode_node
from .node import ContentProperties, NewNode, Node, Nodes

__all__ = [
    "Node",
    "Nodes",
    "NewNode",
    "ContentProperties",
    "encode_node",
    "encode_new_node",
    "apply_dict",
]
