from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

MIME_EXTENSIONS: Dict[str, str] = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
    "image/svg+xml": "svg",
    "image/avif": "avif",
    "video/mp4": "mp4",
    "video/webm": "webm",
    "video/quicktime": "mov",
    "audio/mpeg": "mp3",
    "audio/wav": "wav",
    "audio/ogg": "ogg",
    "application/pdf": "pdf",
    "application/zip": "zip",
    "application/gzip": "gz",
    "application/json": "json",
    "application/xml": "xml",
    "text/plain": "txt",
    "text/csv": "csv",
    "text/html": "html",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": "xlsx",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": "pptx",
    "application/msword": "doc",
    "application/vnd.ms-excel": "xls",
}

# Media hosts collapse to the brand serving them. Empty brand = infrastructure
# vendor, never used in a filename.
CDN_BRANDS: Dict[str, str] = {
    "pinimg.com": "pinterest",
    "twimg.com": "twitter",
    "fbcdn.net": "facebook",
    "cdninstagram.com": "instagram",
    "ytimg.com": "youtube",
    "redd.it": "reddit",
    "redditmedia.com": "reddit",
    "reddituploads.com": "reddit",
    "akamaized.net": "",
    "cloudfront.net": "",
    "amazonaws.com": "",
}

# Trailing "| Pinterest" style suffixes that get dropped from page titles.
TITLE_SUFFIXES = (
    "pinterest", "instagram", "youtube", "twitter", "x", "facebook",
    "reddit", "tiktok", "google", "wikipedia", "linkedin", "tumblr",
    "flickr", "unsplash", "pexels", "shutterstock", "getty images",
)

MAX_EXTENSION_LENGTH = 5
MAX_SLUG_LENGTH = 50
MIN_NAME_LENGTH = 15

_SITE_OVERRIDES_CACHE: Optional[Dict[str, str]] = None


def _default_rules_path() -> Path:
    return Path(__file__).resolve().parent.parent / "config" / "site_rules.json"


def load_site_overrides() -> Dict[str, str]:
    """Load extra CDN host -> brand entries from JSON configuration if available."""

    global _SITE_OVERRIDES_CACHE
    if _SITE_OVERRIDES_CACHE is not None:
        return _SITE_OVERRIDES_CACHE

    env_path = os.getenv("SITE_RULES_PATH")
    candidate_paths = []
    if env_path:
        candidate_paths.append(Path(env_path))
    candidate_paths.append(_default_rules_path())

    for path in candidate_paths:
        if not path.is_file():
            continue
        try:
            with open(path, "r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable site rules %s: %s", path, exc)
            continue
        if isinstance(data, dict):
            _SITE_OVERRIDES_CACHE = {
                str(host).lower(): str(brand or "").lower()
                for host, brand in data.items()
            }
            logger.debug("Loaded %d site rules from %s", len(_SITE_OVERRIDES_CACHE), path)
            return _SITE_OVERRIDES_CACHE
        logger.warning("Ignoring site rules %s: expected a JSON object", path)

    _SITE_OVERRIDES_CACHE = {}
    return _SITE_OVERRIDES_CACHE


def cdn_brands() -> Dict[str, str]:
    """Built-in CDN table with configured overrides applied on top."""
    merged = dict(CDN_BRANDS)
    merged.update(load_site_overrides())
    return merged


def reset_site_overrides() -> None:
    global _SITE_OVERRIDES_CACHE
    _SITE_OVERRIDES_CACHE = None
