"""Drive HTTP client: the transport collaborator used by nodes."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Optional

import requests
from loguru import logger

from drivenodes.auth import AuthInfo, OAuthClient
from drivenodes.errors import (
    ApiError,
    DecodingError,
    HttpErrorInfo,
    NetworkError,
    map_http_error,
)
from drivenodes.models import NewNode, Node
from drivenodes.tree import NodeTree

from .endpoints import Endpoints


@dataclass(frozen=True)
class _RetryPolicy:
    max_retries: int = 3
    initial_delay_sec: float = 1.0


_RETRY_STATUS: frozenset[int] = frozenset({429, 500, 502, 503, 504})


class DriveClient:
    """
    Drive API client over a ``requests.Session``.

    Notes:
        - Satisfies DriveClientProtocol; nodes keep a non-owning reference.
        - Retries (network errors, 429, 5xx) live here, never in the nodes.
        - Directory listing is not implemented; nodes are fetched one by one.
    """

    def __init__(
        self,
        endpoints: Endpoints,
        session: Optional[requests.Session] = None,
        *,
        timeout: float = 60.0,
        max_retries: int = 3,
        initial_delay_sec: float = 1.0,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")

        self._endpoints = endpoints
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout
        self._retry_policy = _RetryPolicy(
            max_retries=max_retries,
            initial_delay_sec=initial_delay_sec,
        )
        self._tree: Optional[NodeTree] = None

    @classmethod
    def from_auth_info(
        cls,
        auth_info: AuthInfo,
        endpoints: Endpoints,
        *,
        interactive: bool = True,
        **kwargs: Any,
    ) -> "DriveClient":
        """Create a client whose session signs requests with OAuth credentials."""
        session = OAuthClient(auth_info).build_session(interactive=interactive)
        return cls(endpoints, session, **kwargs)

    # ----------------------------
    # Collaborator contract
    # ----------------------------
    def get_metadata_url(self, path: str) -> str:
        return self._endpoints.metadata_url + path.lstrip("/")

    def get_content_url(self, path: str) -> str:
        return self._endpoints.content_url + path.lstrip("/")

    def get_timeout(self) -> float:
        return self._timeout

    def get_node_tree(self) -> Optional[NodeTree]:
        return self._tree

    def attach_tree(self, tree: NodeTree) -> None:
        """Make ``tree`` the owning tree of this client's nodes."""
        tree.client = self
        for node in tree:
            node.client = self
        self._tree = tree

    def do(self, request: requests.PreparedRequest) -> requests.Response:
        """
        Send a prepared request, retrying transient failures.

        The request is re-issued through the session so that session headers
        and credentials (AuthorizedSession) apply. The response is streamed;
        the caller owns it. After the last retry a 429/5xx response is
        returned as-is (see check_response).

        Raises:
            NetworkError: if the request could not be sent after all retries.
        """
        delay = self._retry_policy.initial_delay_sec
        for attempt in range(self._retry_policy.max_retries + 1):
            last_attempt = attempt >= self._retry_policy.max_retries
            logger.debug("{} {} (attempt {})", request.method, request.url, attempt + 1)
            try:
                res = self._session.request(
                    request.method,
                    request.url,
                    data=request.body,
                    headers=_forwarded_headers(request),
                    stream=True,
                    timeout=self._timeout,
                )
            except (requests.ConnectionError, requests.Timeout) as exc:
                if last_attempt:
                    raise NetworkError(
                        "Network error",
                        details={"url": request.url},
                        cause=exc,
                    ) from exc
                logger.warning("network error on {}: {}; retrying", request.url, exc)
            except requests.RequestException as exc:
                raise NetworkError(
                    "Request failed",
                    details={"url": request.url},
                    cause=exc,
                ) from exc
            else:
                if res.status_code not in _RETRY_STATUS or last_attempt:
                    return res
                logger.warning(
                    "HTTP {} on {}; retrying", res.status_code, request.url
                )
                res.close()

            time.sleep(delay)
            delay *= 2

        raise ApiError("Unexpected retry loop termination")

    def check_response(self, response: requests.Response) -> None:
        """Raise the mapped drivenodes error for HTTP status >= 400."""
        if response.status_code < 400:
            return

        info = _response_to_info(response)
        logger.error("HTTP {} from {}: {}", info.status_code, response.url, info.message)
        raise map_http_error(info)

    # ----------------------------
    # Node requests
    # ----------------------------
    def get_node(self, node_id: str) -> Node:
        """Fetch the metadata of one node."""
        req = requests.Request("GET", self.get_metadata_url(f"nodes/{node_id}"))
        data = self._request_json(req.prepare())
        return Node.from_dict(data, client=self)

    def refresh(self, node: Node) -> Node:
        """
        Fetch fresh metadata for ``node`` and merge it in place.

        When ``node`` belongs to the attached tree, the tree relinks it under
        its new parents.
        """
        fresh = self.get_node(node.id)
        tree = self._tree
        if tree is not None and tree.nodes_by_id.get(node.id) is node:
            return tree.upsert(fresh)

        node.update(fresh)
        return node

    def create_node(self, record: NewNode) -> Node:
        """Create a node from a NewNode record and index it when a tree is attached."""
        req = requests.Request(
            "POST",
            self.get_metadata_url("nodes"),
            json=record.to_dict(),
        )
        data = self._request_json(req.prepare())
        node = Node.from_dict(data, client=self)
        if self._tree is not None:
            return self._tree.upsert(node)
        return node

    # ----------------------------
    # Internals
    # ----------------------------
    def _request_json(self, request: requests.PreparedRequest) -> dict[str, Any]:
        res = self.do(request)
        try:
            self.check_response(res)
            try:
                return res.json()
            except ValueError as exc:
                raise DecodingError(
                    "response body is not JSON",
                    details={"url": request.url},
                    cause=exc,
                ) from exc
        finally:
            res.close()


def _forwarded_headers(request: requests.PreparedRequest) -> dict[str, str]:
    # Content-Length is recomputed from the body by the session.
    return {k: v for k, v in request.headers.items() if k.lower() != "content-length"}


def _response_to_info(response: Any) -> HttpErrorInfo:
    message = None
    reason = getattr(response, "reason", None)
    details: dict[str, Any] = {}

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        if isinstance(payload.get("message"), str):
            message = payload["message"]
        if isinstance(payload.get("code"), str):
            details["code"] = payload["code"]
        if isinstance(payload.get("logref"), str):
            details["logref"] = payload["logref"]

    return HttpErrorInfo(
        status_code=response.status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
