"""Public transport exports for drivenodes."""

from __future__ import annotations

from .client import DriveClient
from .endpoints import Endpoints
from .protocol import DriveClientProtocol

__all__ = ["DriveClient", "DriveClientProtocol", "Endpoints"]
