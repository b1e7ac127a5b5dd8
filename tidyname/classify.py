import re
from typing import Callable, Optional, Tuple

NUMERIC_RUN_RX = re.compile(r"[0-9_-]{12,}")
HEX_DIGEST_RX = re.compile(r"[a-f0-9]{20,}", re.I)
OPAQUE_TOKEN_RX = re.compile(r"[a-zA-Z0-9]{25,}")
UUID_LIKE_RX = re.compile(r"[a-z0-9_]{8,}-[a-z0-9_]{4,}-[a-z0-9_]{4,}", re.I)
CAMERA_DEFAULT_RX = re.compile(r"(img|dsc|image|photo)_?\d+", re.I)
SIZE_MARKER_RX = re.compile(r"\d{3,4}x(\d{3,4})?")
HASH_PAIR_RX = re.compile(r"[a-f0-9]{6,}-[a-f0-9]{6,}", re.I)
PREFIXED_ID_RX = re.compile(r"(?:[a-z]{1,6}[_-]){1,2}\d{10,}", re.I)


def is_numeric_run(name: str) -> bool:
    # 12+ digits (Facebook/Instagram timestamps)
    return NUMERIC_RUN_RX.fullmatch(name) is not None

def is_hex_digest(name: str) -> bool:
    # S3 / cloud storage object keys
    return HEX_DIGEST_RX.fullmatch(name) is not None

def is_opaque_token(name: str) -> bool:
    return OPAQUE_TOKEN_RX.fullmatch(name) is not None

def is_uuid_like(name: str) -> bool:
    # prefix match: trailing groups may continue past the third
    return UUID_LIKE_RX.match(name) is not None

def is_camera_default(name: str) -> bool:
    # IMG_001, DSC1234, photo_12
    return CAMERA_DEFAULT_RX.fullmatch(name) is not None

def is_size_marker(name: str) -> bool:
    # Pinterest size strings: "736x", "736x490"
    return SIZE_MARKER_RX.fullmatch(name) is not None

def is_hash_pair(name: str) -> bool:
    return HASH_PAIR_RX.fullmatch(name) is not None

def is_prefixed_id(name: str) -> bool:
    # pin_8372910293, FB_IMG_1693401234567
    return PREFIXED_ID_RX.fullmatch(name) is not None


GARBAGE_SHAPES: Tuple[Tuple[str, Callable[[str], bool]], ...] = (
    ("numeric_run", is_numeric_run),
    ("hex_digest", is_hex_digest),
    ("opaque_token", is_opaque_token),
    ("uuid_like", is_uuid_like),
    ("camera_default", is_camera_default),
    ("size_marker", is_size_marker),
    ("hash_pair", is_hash_pair),
    ("prefixed_id", is_prefixed_id),
)


def garbage_shape(name: Optional[str]) -> Optional[str]:
    """Return the name of the first shape class ``name`` falls into, if any.

    An empty or missing name counts as garbage and reports ``"empty"``.
    """
    if not name:
        return "empty"
    for shape, matches in GARBAGE_SHAPES:
        if matches(name):
            return shape
    return None

def is_garbage(name: Optional[str]) -> bool:
    """True when an extension-stripped base name looks machine-generated."""
    return garbage_shape(name) is not None
