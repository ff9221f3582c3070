"""Endpoint configuration for DriveClient."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit


@dataclass(slots=True, frozen=True)
class Endpoints:
    """
    Base URLs of the drive API.

    Both URLs must be absolute http(s) URLs. They are stored with a trailing
    slash so relative node paths can be appended directly.
    """

    metadata_url: str
    content_url: str

    def __post_init__(self) -> None:
        for key in ("metadata_url", "content_url"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Endpoints.{key} must be a non-empty string")

            parts = urlsplit(value.strip())
            if parts.scheme not in ("http", "https") or not parts.netloc:
                raise ValueError(f"Endpoints.{key} must be an absolute http(s) URL")

            normalized = value.strip()
            if not normalized.endswith("/"):
                normalized += "/"
            # frozen dataclass
            object.__setattr__(self, key, normalized)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Endpoints:
        """Build from the server payload: {"metadataUrl": ..., "contentUrl": ...}."""
        if not isinstance(data, dict):
            raise TypeError("endpoint payload must be a dict")
        return cls(
            metadata_url=data.get("metadataUrl", ""),
            content_url=data.get("contentUrl", ""),
        )
