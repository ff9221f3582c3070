from .kinds import (
    KIND_ASSET,
    KIND_FILE,
    KIND_FOLDER,
    STATUS_AVAILABLE,
    STATUS_PURGED,
    STATUS_TRASH,
    is_available,
    is_file,
    is_folder,
)
from .time import normalize_dt, parse_rfc3339, to_rfc3339

__all__ = [
    "KIND_FILE",
    "KIND_FOLDER",
    "KIND_ASSET",
    "STATUS_AVAILABLE",
    "STATUS_TRASH",
    "STATUS_PURGED",
    "is_file",
    "is_folder",
    "is_available",
    "parse_rfc3339",
    "to_rfc3339",
    "normalize_dt",
]
