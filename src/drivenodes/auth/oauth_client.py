"""OAuth credentials and the authorized session used by DriveClient."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Optional

from loguru import logger

from drivenodes.errors import AuthError

from .auth_info import AuthInfo

if TYPE_CHECKING:
    from google.auth.transport.requests import AuthorizedSession
    from google.oauth2.credentials import Credentials


class OAuthClient:
    """
    Produce credentials for a drive account and wrap them in a session.

    Token lifecycle: a cached token is used while valid, refreshed when it
    has expired and carries a refresh token, and otherwise replaced by running
    the installed-app flow (only when ``interactive`` is allowed). Every new
    or refreshed token is written back to ``AuthInfo.token_file``.
    """

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info

    @property
    def auth_info(self) -> AuthInfo:
        return self._auth_info

    def get_credentials(self, *, interactive: bool = True) -> Credentials:
        """
        Raises:
            AuthError: if no usable token exists and it cannot be obtained.
        """
        creds = self._load_token()
        if creds is not None:
            if creds.valid:
                return creds
            if creds.refresh_token:
                self._refresh(creds)
                return creds

        if not interactive:
            raise AuthError(
                "No usable OAuth token and interactive authorization is disabled",
                details={"token_file": self._auth_info.token_file},
            )
        return self._authorize()

    def build_session(self, *, interactive: bool = True) -> AuthorizedSession:
        """
        Build the session handed to DriveClient.

        The session signs every request it issues and refreshes the token on
        401 responses.
        """
        from google.auth.transport.requests import AuthorizedSession

        return AuthorizedSession(self.get_credentials(interactive=interactive))

    # ----------------------------
    # Internals
    # ----------------------------
    def _load_token(self) -> Optional[Credentials]:
        from google.oauth2.credentials import Credentials

        token_file = self._auth_info.token_file
        if not os.path.exists(token_file):
            return None

        try:
            return Credentials.from_authorized_user_file(
                token_file,
                scopes=list(self._auth_info.scopes),
            )
        except (OSError, ValueError) as exc:
            raise AuthError(
                "Cannot read cached OAuth token",
                details={"token_file": token_file},
                cause=exc,
            ) from exc

    def _refresh(self, creds: Credentials) -> None:
        from google.auth.exceptions import RefreshError, TransportError
        from google.auth.transport.requests import Request

        logger.debug("refreshing OAuth token from {}", self._auth_info.token_file)
        try:
            creds.refresh(Request())
        except (RefreshError, TransportError) as exc:
            raise AuthError(
                "OAuth token refresh failed",
                details={"token_file": self._auth_info.token_file},
                cause=exc,
            ) from exc
        self._store(creds)

    def _authorize(self) -> Credentials:
        from google_auth_oauthlib.flow import InstalledAppFlow

        secrets = self._auth_info.client_secrets_file
        logger.info("authorizing drive access with {}", secrets)
        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                secrets,
                scopes=list(self._auth_info.scopes),
            )
            creds = flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization failed",
                details={"client_secrets_file": secrets},
                cause=exc,
            ) from exc

        self._store(creds)
        return creds

    def _store(self, creds: Credentials) -> None:
        path = self._auth_info.token_file
        directory = os.path.dirname(path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise AuthError(
                "Cannot write OAuth token",
                details={"token_file": path},
                cause=exc,
            ) from exc
