"""OAuth settings for a drive account."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_SCOPES: tuple[str, ...] = ("clouddrive:read_all", "clouddrive:write")

ENV_PREFIX: str = "DRIVENODES_"


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Where the OAuth client secrets and the cached token live, and which
    scopes the drive session asks for.

    ``scopes`` may be any iterable of strings; it is stored as a tuple.
    """

    client_secrets_file: str
    token_file: str
    scopes: tuple[str, ...] = DEFAULT_SCOPES

    def __post_init__(self) -> None:
        for key in ("client_secrets_file", "token_file"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.{key} must be a non-empty string")

        if isinstance(self.scopes, str):
            raise TypeError("AuthInfo.scopes must be a sequence of strings, not a string")
        scopes = tuple(self.scopes)
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise ValueError("AuthInfo.scopes must be a non-empty sequence of strings")
        object.__setattr__(self, "scopes", scopes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AuthInfo:
        """
        Read settings from the environment.

        Variables:
            - DRIVENODES_CLIENT_SECRETS (required)
            - DRIVENODES_TOKEN_FILE (required)
            - DRIVENODES_SCOPES (optional, comma-separated)
        """
        env = os.environ if environ is None else environ

        def required(name: str) -> str:
            value = env.get(ENV_PREFIX + name, "").strip()
            if not value:
                raise ValueError(f"Missing env var: {ENV_PREFIX + name}")
            return value

        raw_scopes = env.get(ENV_PREFIX + "SCOPES", "").strip()
        scopes = tuple(s.strip() for s in raw_scopes.split(",") if s.strip())

        return cls(
            client_secrets_file=required("CLIENT_SECRETS"),
            token_file=required("TOKEN_FILE"),
            scopes=scopes or DEFAULT_SCOPES,
        )
