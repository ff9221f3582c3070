"""Public error exports for drivenodes."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
