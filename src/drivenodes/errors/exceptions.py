"""Exception hierarchy and HTTP error mapping for drivenodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class DriveNodesError(Exception):
    """
    Base exception for drivenodes.

    Attributes:
        details: Optional structured information (e.g., node id, HTTP status).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


# ----------------------------
# Node errors
# ----------------------------
class RequestConstructionError(DriveNodesError):
    """Raised when a download request cannot be built (bad URL, no client)."""


class RequestExecutionError(DriveNodesError):
    """Raised when executing a download request fails."""


class EncodingError(DriveNodesError):
    """Raised when a metadata record cannot be encoded for a merge."""


class DecodingError(DriveNodesError):
    """Raised when metadata cannot be decoded (malformed or incompatible data)."""


# ----------------------------
# Tree / transport errors
# ----------------------------
class InvalidStateError(DriveNodesError):
    """Raised when an object is used in an invalid state (e.g., tree has no root)."""


class AuthError(DriveNodesError):
    """Raised when OAuth authentication/refresh fails, or on HTTP 401/403."""


class InvalidArgumentError(DriveNodesError):
    """Raised when arguments or request parameters are invalid (HTTP 400, etc.)."""


class NotFoundError(DriveNodesError):
    """Raised when a node is not found, locally or remotely (HTTP 404)."""


class ConflictError(DriveNodesError):
    """Raised when the server reports a conflict (HTTP 409/412)."""


class RateLimitError(DriveNodesError):
    """Raised when throttled (HTTP 429)."""


class NetworkError(DriveNodesError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(DriveNodesError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to drivenodes exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> DriveNodesError:
    """
    Map an HTTP error to a drivenodes exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401/403 -> AuthError
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - otherwise (5xx included) -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code in (401, 403):
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
