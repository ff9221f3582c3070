"""NodeTree: ID-indexed arena owning the nodes of a drive."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from loguru import logger

from drivenodes.errors import InvalidStateError, NotFoundError
from drivenodes.models import Node

if TYPE_CHECKING:
    from drivenodes.transport.protocol import DriveClientProtocol


class NodeTree:
    """
    In-memory index of nodes keyed by ID, plus the drive root(s).

    A node may be listed under several parents, so it can appear in several
    ``children`` lists at once; the index holds exactly one object per ID.

    Indexes:
        - nodes_by_id
        - roots (nodes whose ``root`` flag is set)
        - pending children by parent ID (nodes whose parent is not indexed yet)
    """

    def __init__(self, client: Optional[DriveClientProtocol] = None) -> None:
        self.client = client
        self.nodes_by_id: dict[str, Node] = {}
        self.roots: list[Node] = []
        self._pending_by_parent_id: dict[str, list[Node]] = {}

    @classmethod
    def from_nodes(
        cls,
        nodes: Iterable[Node],
        client: Optional[DriveClientProtocol] = None,
    ) -> NodeTree:
        """Build a tree from decoded nodes, in any order."""
        tree = cls(client=client)
        for node in nodes:
            tree.add(node)
        return tree

    # ----------------------------
    # Query helpers
    # ----------------------------
    def __len__(self) -> int:
        return len(self.nodes_by_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes_by_id

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self.nodes_by_id.values()))

    def has(self, node_id: str) -> bool:
        return node_id in self.nodes_by_id

    def get(self, node_id: str) -> Node:
        try:
            return self.nodes_by_id[node_id]
        except KeyError:
            raise NotFoundError(
                f"node does not exist: {node_id}", details={"id": node_id}
            ) from None

    @property
    def root(self) -> Node:
        if not self.roots:
            raise InvalidStateError("tree has no root node")
        return self.roots[0]

    def find(self, path: str) -> Node:
        """
        Resolve a '/'-separated path of names from the root.

        Only the local children cache is searched. Empty segments are
        ignored, so "/", "" and "a//b" are all valid.
        """
        node = self.root
        for segment in path.split("/"):
            if not segment:
                continue
            match = next((c for c in node.children if c.name == segment), None)
            if match is None:
                raise NotFoundError(
                    f"no such node: {path}",
                    details={"path": path, "missing": segment},
                )
            node = match
        return node

    # ----------------------------
    # Mutation helpers (keep links consistent)
    # ----------------------------
    def add(self, node: Node) -> Node:
        """
        Index a node and link it with the indexed nodes around it.

        The node is attached under each of its parents that is already
        indexed, and indexed nodes naming it as a parent are attached under it.
        """
        if node.id in self.nodes_by_id:
            raise InvalidStateError(
                f"node already indexed: {node.id}", details={"id": node.id}
            )

        if self.client is not None:
            node.client = self.client
        self.nodes_by_id[node.id] = node
        if node.root:
            self.roots.append(node)

        for parent_id in dict.fromkeys(node.parents):
            self._link_under(parent_id, node)

        for child in self._pending_by_parent_id.pop(node.id, []):
            if child is not node and self.nodes_by_id.get(child.id) is child:
                node.add_child(child)

        return node

    def upsert(self, fresh: Node) -> Node:
        """
        Insert ``fresh`` or merge it into the indexed node with the same ID.

        Returns:
            The live node (``fresh`` itself when the ID was unknown).
        """
        current = self.nodes_by_id.get(fresh.id)
        if current is None:
            return self.add(fresh)

        old_parents = set(current.parents)
        current.update(fresh)
        new_parents = set(current.parents)

        for parent_id in old_parents - new_parents:
            self._unlink_from(parent_id, current)

        for parent_id in dict.fromkeys(current.parents):
            if parent_id not in old_parents:
                self._link_under(parent_id, current)

        logger.debug("updated {} ({})", current.name, current.id)
        return current

    def remove(self, node_id: str) -> None:
        """Drop a node from the index and its parents' children lists."""
        node = self.nodes_by_id.pop(node_id, None)
        if node is None:
            return

        for parent_id in set(node.parents):
            self._unlink_from(parent_id, node)

        # Indexed children wait for the node to come back.
        for child in node.children:
            if node_id in child.parents and self.nodes_by_id.get(child.id) is child:
                self._link_under(node_id, child)

        self.roots = [r for r in self.roots if r is not node]

    # ----------------------------
    # Internal link maintenance
    # ----------------------------
    def _link_under(self, parent_id: str, node: Node) -> None:
        parent = self.nodes_by_id.get(parent_id)
        if parent is None:
            waiting = self._pending_by_parent_id.setdefault(parent_id, [])
            if not any(w is node for w in waiting):
                waiting.append(node)
        elif parent is not node:
            parent.add_child(node)

    def _unlink_from(self, parent_id: str, node: Node) -> None:
        parent = self.nodes_by_id.get(parent_id)
        if parent is not None:
            parent.remove_child(node)
            return

        waiting = self._pending_by_parent_id.get(parent_id)
        if not waiting:
            return
        waiting[:] = [w for w in waiting if w is not node]
        if not waiting:
            self._pending_by_parent_id.pop(parent_id, None)
