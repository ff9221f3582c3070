"""Node model: one file or folder entry of the remote drive."""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, BinaryIO, Optional, Union

import requests
from loguru import logger

from drivenodes.errors import (
    DecodingError,
    EncodingError,
    RequestConstructionError,
    RequestExecutionError,
)
from drivenodes.util.kinds import is_available, is_file, is_folder

from .codec import WIRE_ATTRS, apply_dict, encode_new_node, encode_node

if TYPE_CHECKING:
    from drivenodes.transport.protocol import DriveClientProtocol


@dataclass(slots=True)
class ContentProperties:
    """Content metadata; meaningful only for FILE nodes."""

    version: int = 0
    extension: str = ""
    size: int = 0
    md5: str = ""
    content_type: str = ""
    content_date: Optional[datetime] = None


class Nodes(list):
    """
    Ordered list of nodes.

    Used both as a node's children (insertion order is display order) and for
    bulk results. Lookups here compare by identity, never by value.
    """

    def index_of(self, node: Node) -> int:
        for i, candidate in enumerate(self):
            if candidate is node:
                return i
        return -1

    def remove_node(self, node: Node) -> bool:
        """Remove the first entry that is ``node``. Returns False if absent."""
        i = self.index_of(node)
        if i < 0:
            return False
        del self[i]
        return True


@dataclass(slots=True, eq=False)
class Node:
    """
    A digital asset on the drive (file, folder, ...) in a parent-child graph.

    Notes:
        - ``parents`` may list several IDs: the remote structure is a DAG.
        - ``children``, ``root`` and ``client`` are client-local state. They are
          never serialized and survive ``update``.
        - Equality is identity (``eq=False``).
    """

    id: str = ""
    name: str = ""
    kind: str = ""
    parents: list[str] = field(default_factory=list)
    status: str = ""
    labels: list[str] = field(default_factory=list)
    created_by: str = ""
    creation_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
    version: int = 0
    temp_link: str = ""
    content_properties: ContentProperties = field(default_factory=ContentProperties)

    # Internal
    children: Nodes = field(default_factory=Nodes, repr=False)
    root: bool = False
    client: Optional[DriveClientProtocol] = field(default=None, repr=False)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        client: Optional[DriveClientProtocol] = None,
    ) -> Node:
        """Build a node from wire metadata. Raises DecodingError."""
        node = cls(client=client)
        apply_dict(node, data)
        return node

    def to_dict(self) -> dict[str, Any]:
        return encode_node(self)

    # ----------------------------
    # Classification
    # ----------------------------
    def is_file(self) -> bool:
        return is_file(self.kind)

    def is_folder(self) -> bool:
        return is_folder(self.kind)

    def available(self) -> bool:
        return is_available(self.status)

    # ----------------------------
    # Content
    # ----------------------------
    def download(self) -> BinaryIO:
        """
        Open the node's content as a byte stream.

        The caller is responsible for closing the returned stream. Neither the
        node kind nor the response status is checked here.

        Raises:
            RequestConstructionError: if the request cannot be built.
            RequestExecutionError: if the client fails to execute it.
        """
        if self.client is None:
            raise RequestConstructionError(
                "node has no client", details={"id": self.id}
            )

        url = None
        try:
            url = self.client.get_content_url(f"nodes/{self.id}/content")
            req = requests.Request("GET", url).prepare()
        except Exception as exc:
            logger.error("error creating download request: {}", exc)
            raise RequestConstructionError(
                "error creating download request",
                details={"id": self.id, "url": url},
                cause=exc,
            ) from exc

        try:
            res = self.client.do(req)
        except Exception as exc:
            logger.error("error downloading the file: {}", exc)
            raise RequestExecutionError(
                "error downloading the file",
                details={"id": self.id, "url": url},
                cause=exc,
            ) from exc

        return res.raw

    # ----------------------------
    # Children
    # ----------------------------
    def add_child(self, child: Node) -> None:
        logger.debug("adding {} under {}", child.name, self.name)
        self.children.append(child)
        child.client = self.client

    def remove_child(self, child: Node) -> None:
        # Absent children are ignored; callers retry structural edits.
        found = self.children.remove_node(child)
        logger.debug("removing {} from {}: {}", child.name, self.name, found)

    # ----------------------------
    # Merge
    # ----------------------------
    def update(self, record: Union[Node, NewNode]) -> None:
        """
        Merge fresher metadata into this node in place.

        The record goes through its JSON form and is decoded over a scratch
        copy of this node; fields the record does not carry keep their value.
        Local state (children, root, client) is never touched, and nothing is
        written unless both steps succeed.

        Raises:
            EncodingError: if the record cannot be encoded.
            DecodingError: if the encoded record cannot be decoded.
        """
        try:
            payload = json.dumps(record.to_dict())
        except (AttributeError, TypeError, ValueError) as exc:
            logger.error("error encoding the node to JSON: {}", exc)
            raise EncodingError(
                "error encoding the node to JSON",
                details={"id": self.id},
                cause=exc,
            ) from exc

        scratch = copy.copy(self)
        try:
            apply_dict(scratch, json.loads(payload))
        except (DecodingError, ValueError) as exc:
            logger.error("error decoding the node from JSON: {}", exc)
            raise DecodingError(
                "error decoding the node from JSON",
                details={"id": self.id},
                cause=exc,
            ) from exc

        for attr in WIRE_ATTRS:
            setattr(self, attr, getattr(scratch, attr))


@dataclass(slots=True)
class NewNode:
    """
    Metadata record for a node that is about to be created or merged.

    It carries no identity, status, timestamps or content properties.
    """

    name: str = ""
    kind: str = ""
    labels: list[str] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)
    parents: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return encode_new_node(self)
