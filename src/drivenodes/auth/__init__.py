"""Public auth exports for drivenodes."""

from __future__ import annotations

from .auth_info import DEFAULT_SCOPES, AuthInfo
from .oauth_client import OAuthClient

__all__ = ["AuthInfo", "OAuthClient", "DEFAULT_SCOPES"]
