"""Collaborator contract consumed by Node and NodeTree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from drivenodes.tree import NodeTree


@runtime_checkable
class DriveClientProtocol(Protocol):
    """Protocol for drive transport clients."""

    def get_metadata_url(self, path: str) -> str:
        """Map a node-scoped path onto the metadata endpoint."""
        ...

    def get_content_url(self, path: str) -> str:
        """Map a node-scoped path onto the content endpoint."""
        ...

    def do(self, request: Any) -> Any:
        """Execute a prepared request and return the response."""
        ...

    def check_response(self, response: Any) -> None:
        """Raise the mapped error when the response reports a failure."""
        ...

    def get_node_tree(self) -> Optional[NodeTree]:
        """Return the tree owning the nodes of this client, if any."""
        ...

    def get_timeout(self) -> float:
        """Return the request timeout in seconds."""
        ...
