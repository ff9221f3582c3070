"""Wire codec for node metadata.

Nodes travel as JSON objects whose keys follow the remote API (camelCase, with
the historical capitalized ``Parents`` key). Every field is optional on the
wire and omitted when empty. Decoding is done *into* an existing object so that
fields absent from the payload keep their current value.
"""

from __future__ import annotations

import copy
from typing import Any

from drivenodes.errors import DecodingError
from drivenodes.util.time import parse_rfc3339, to_rfc3339

# (attribute, wire key, value kind)
NODE_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("id", "id", "str"),
    ("name", "name", "str"),
    ("kind", "kind", "str"),
    ("parents", "Parents", "strlist"),
    ("status", "status", "str"),
    ("labels", "labels", "strlist"),
    ("created_by", "createdBy", "str"),
    ("creation_date", "creationDate", "time"),
    ("modified_date", "modifiedDate", "time"),
    ("version", "version", "uint"),
    ("temp_link", "tempLink", "str"),
)

CONTENT_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("version", "version", "uint"),
    ("extension", "extension", "str"),
    ("size", "size", "uint"),
    ("md5", "md5", "str"),
    ("content_type", "contentType", "str"),
    ("content_date", "contentDate", "time"),
)

CONTENT_KEY: str = "contentProperties"

# Attributes written by a merge. Client-local state (children, root, client)
# is deliberately absent.
WIRE_ATTRS: tuple[str, ...] = tuple(attr for attr, _, _ in NODE_FIELDS) + (
    "content_properties",
)


def encode_node(node: Any) -> dict[str, Any]:
    """Encode a Node into its wire dict, omitting empty fields."""
    data = _encode_fields(node, NODE_FIELDS)
    content = _encode_fields(node.content_properties, CONTENT_FIELDS)
    if content:
        data[CONTENT_KEY] = content
    return data


def encode_new_node(record: Any) -> dict[str, Any]:
    """
    Encode a NewNode.

    ``properties`` and ``parents`` are always present, so merging a record
    without parents clears the target's parents.
    """
    data: dict[str, Any] = {}
    if record.name:
        data["name"] = record.name
    if record.kind:
        data["kind"] = record.kind
    if record.labels:
        data["labels"] = list(record.labels)
    data["properties"] = dict(record.properties)
    data["parents"] = list(record.parents)
    return data


def apply_dict(target: Any, data: Any) -> None:
    """
    Decode a wire dict into ``target`` in place.

    Keys match case-insensitively and unknown keys are ignored. A JSON null
    empties list fields and leaves every other field as it was.

    Raises:
        DecodingError: on type mismatches or malformed timestamps. ``target``
            may be partially written when this is raised; callers that need
            atomicity decode into a scratch copy.
    """
    lowered = _lower_keys(data, "node")
    _apply_fields(target, lowered, NODE_FIELDS)

    if CONTENT_KEY.lower() in lowered:
        raw = lowered[CONTENT_KEY.lower()]
        if raw is not None:
            content = copy.copy(target.content_properties)
            _apply_fields(content, _lower_keys(raw, CONTENT_KEY), CONTENT_FIELDS)
            target.content_properties = content


def _encode_fields(obj: Any, fields: tuple[tuple[str, str, str], ...]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for attr, key, kind in fields:
        value = getattr(obj, attr)
        if not value:
            continue
        if kind == "time":
            data[key] = to_rfc3339(value)
        elif kind == "strlist":
            data[key] = list(value)
        else:
            data[key] = value
    return data


def _lower_keys(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DecodingError(
            f"{what} must be a JSON object",
            details={"type": type(data).__name__},
        )
    return {str(k).lower(): v for k, v in data.items()}


def _apply_fields(
    obj: Any,
    lowered: dict[str, Any],
    fields: tuple[tuple[str, str, str], ...],
) -> None:
    for attr, key, kind in fields:
        if key.lower() not in lowered:
            continue
        raw = lowered[key.lower()]
        if raw is None:
            if kind == "strlist":
                setattr(obj, attr, [])
            continue
        setattr(obj, attr, _decode_value(key, kind, raw))


def _decode_value(key: str, kind: str, raw: Any) -> Any:
    if kind == "str":
        if not isinstance(raw, str):
            raise _type_error(key, "a string", raw)
        return raw

    if kind == "uint":
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
            raise _type_error(key, "a non-negative integer", raw)
        return raw

    if kind == "strlist":
        if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
            raise _type_error(key, "an array of strings", raw)
        return list(raw)

    if kind == "time":
        try:
            return parse_rfc3339(raw)
        except (TypeError, ValueError) as exc:
            raise DecodingError(
                f"invalid timestamp for '{key}'",
                details={"key": key, "value": raw},
                cause=exc,
            ) from exc

    raise ValueError(f"unknown field kind: {kind}")


def _type_error(key: str, expected: str, raw: Any) -> DecodingError:
    return DecodingError(
        f"'{key}' must be {expected}",
        details={"key": key, "type": type(raw).__name__},
    )
