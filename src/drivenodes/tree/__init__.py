"""Public tree exports for drivenodes."""

from __future__ import annotations

from .node_tree import NodeTree

__all__ = ["NodeTree"]
