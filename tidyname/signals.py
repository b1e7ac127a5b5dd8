"""Signal extraction: extension, base name and site identity of a download."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from tidyname.naming_rules import MAX_EXTENSION_LENGTH, MIME_EXTENSIONS, cdn_brands

logger = logging.getLogger(__name__)

_PATH_SEP_RX = re.compile(r"[\\/]")
_EXTENSION_RX = re.compile(r"[a-z0-9]{1,%d}" % MAX_EXTENSION_LENGTH)


@dataclass(frozen=True)
class Signals:
    basename: str
    extension: str
    base: str
    site: str


def basename(name: Optional[str]) -> str:
    """Last path component of a suggested filename (``/`` or ``\\`` separated)."""
    if not name:
        return ""
    return _PATH_SEP_RX.split(name)[-1]


def extension_for_mime(mime_type: Optional[str]) -> str:
    if not mime_type:
        return ""
    key = mime_type.split(";", 1)[0].strip().lower()
    return MIME_EXTENSIONS.get(key, "")


def extension_from_filename(name: Optional[str]) -> str:
    # A long or punctuated "suffix" is a sentence fragment or path after a
    # dot, not an extension.
    if not name or "." not in name:
        return ""
    ext = name.rsplit(".", 1)[1].lower()
    return ext if _EXTENSION_RX.fullmatch(ext) else ""


def strip_extension(name: Optional[str]) -> str:
    if not name:
        return ""
    last_dot = name.rfind(".")
    return name[:last_dot] if last_dot > 0 else name


def resolve_extension(mime_type: Optional[str], original_name: Optional[str]) -> str:
    return extension_for_mime(mime_type) or extension_from_filename(original_name)


def resolve_site(url: Optional[str]) -> str:
    """Map a URL to the brand behind its hostname.

    CDN hosts collapse to the platform that serves them (``i.pinimg.com`` ->
    ``pinterest``); storage vendors map to ``""``. Unknown hosts use their
    registrable label (``news.example.org`` -> ``example``) when it is longer
    than two characters. Malformed URLs give ``""``.
    """
    if not url:
        return ""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        logger.debug("Unparseable URL %r", url)
        return ""
    if not hostname:
        return ""

    if hostname.startswith("www."):
        hostname = hostname[4:]

    for cdn, brand in cdn_brands().items():
        if hostname == cdn or hostname.endswith("." + cdn):
            return brand

    parts = hostname.split(".")
    domain = parts[-2] if len(parts) >= 2 else parts[0]
    return domain if len(domain) > 2 else ""


def extract_signals(original_name: Optional[str], url: Optional[str], mime_type: Optional[str]) -> Signals:
    name = basename(original_name)
    return Signals(
        basename=name,
        extension=resolve_extension(mime_type, name),
        base=strip_extension(name),
        site=resolve_site(url),
    )
