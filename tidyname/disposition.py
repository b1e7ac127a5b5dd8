from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import unquote

from tidyname.classify import is_garbage
from tidyname.signals import extension_from_filename, strip_extension
from tidyname.slug import to_slug

logger = logging.getLogger(__name__)

# RFC 5987: filename*=UTF-8''encoded-name.pdf
EXTENDED_RX = re.compile(
    r"filename\*\s*=\s*(?:([^';]*)'[^';]*'([^;]+)|([^';]+?)\s*(?:;|$))", re.I
)
QUOTED_RX = re.compile(r'filename\s*=\s*"([^"]+)"', re.I)
BARE_RX = re.compile(r"filename\s*=\s*([^;]+)", re.I)

_BAD_ESCAPE_RX = re.compile(r"%(?![0-9a-fA-F]{2})")


def _decode_extended(charset: str, value: str) -> str:
    if _BAD_ESCAPE_RX.search(value):
        return value
    try:
        return unquote(value, encoding=charset or "utf-8", errors="strict")
    except (UnicodeDecodeError, LookupError):
        return value


def parse_content_disposition(header: Optional[str]) -> Optional[str]:
    """Extract the filename from a raw ``Content-Disposition`` value.

    ``filename*`` wins over ``filename="..."`` which wins over a bare
    ``filename=``. Undecodable ``filename*`` values are returned as-is.
    """
    if not header:
        return None

    m = EXTENDED_RX.search(header)
    if m:
        charset = (m.group(1) or "").strip().strip('"')
        value = (m.group(2) or m.group(3)).strip().strip('"')
        name = _decode_extended(charset, value).strip()
        if name:
            return name

    m = QUOTED_RX.search(header)
    if m and m.group(1).strip():
        return m.group(1).strip()

    m = BARE_RX.search(header)
    if m and m.group(1).strip():
        return m.group(1).strip()
    return None


def normalize_filename(name: str, fallback_ext: str) -> Optional[str]:
    own_ext = extension_from_filename(name)
    ext = own_ext or fallback_ext
    base = to_slug(strip_extension(name) if own_ext else name)
    if not base:
        return None
    return f"{base}.{ext}" if ext else base


def resolve_from_header(header: Optional[str], fallback_ext: str = "") -> Optional[str]:
    """Server-suggested filename, normalized, or None when unusable."""
    name = parse_content_disposition(header)
    if not name:
        return None
    if is_garbage(strip_extension(name)):
        logger.debug("Rejecting server filename %r: looks machine-generated", name)
        return None
    normalized = normalize_filename(name, fallback_ext)
    if normalized is None:
        logger.debug("Rejecting server filename %r: nothing left after slugify", name)
    return normalized
