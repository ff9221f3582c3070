"""drivenodes public API."""

from __future__ import annotations

from drivenodes.auth import AuthInfo, OAuthClient
from drivenodes.errors import (
    ApiError,
    AuthError,
    ConflictError,
    DecodingError,
    DriveNodesError,
    EncodingError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestConstructionError,
    RequestExecutionError,
    map_http_error,
)
from drivenodes.logging_config import configure_logging
from drivenodes.models import ContentProperties, NewNode, Node, Nodes
from drivenodes.transport import DriveClient, DriveClientProtocol, Endpoints
from drivenodes.tree import NodeTree

__all__ = [
    # Graph
    "Node",
    "Nodes",
    "NewNode",
    "ContentProperties",
    "NodeTree",
    # Transport
    "DriveClient",
    "DriveClientProtocol",
    "Endpoints",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Logging
    "configure_logging",
    # Errors
    "DriveNodesError",
    "RequestConstructionError",
    "RequestExecutionError",
    "EncodingError",
    "DecodingError",
    "InvalidStateError",
    "AuthError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
