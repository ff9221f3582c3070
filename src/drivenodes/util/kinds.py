from __future__ import annotations

KIND_FILE: str = "FILE"
KIND_FOLDER: str = "FOLDER"
KIND_ASSET: str = "ASSET"

STATUS_AVAILABLE: str = "AVAILABLE"
STATUS_TRASH: str = "TRASH"
STATUS_PURGED: str = "PURGED"


def is_file(kind: str) -> bool:
    return kind == KIND_FILE


def is_folder(kind: str) -> bool:
    return kind == KIND_FOLDER


def is_available(status: str) -> bool:
    """
    Returns True only for the AVAILABLE status.

    Every other status (TRASH, PURGED, empty, unknown) is opaque and counts as
    not available.
    """
    return status == STATUS_AVAILABLE
