from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Tuple

from tidyname.classify import garbage_shape
from tidyname.disposition import resolve_from_header
from tidyname.naming_rules import MIN_NAME_LENGTH, TITLE_SUFFIXES
from tidyname.signals import Signals, extract_signals
from tidyname.slug import to_slug

logger = logging.getLogger(__name__)

_SUFFIX_RX = re.compile(r"\s*[|\-–—]\s*([^|\-–—]+)$")
_SIZE_TAG_RX = re.compile(r"\s*\(\d+x\d+\)")
_QUALITY_TAG_RX = re.compile(r"\s*\((HD|4K|1080p|720p|Full HD)\)", re.I)


@dataclass(frozen=True)
class NamingContext:
    original_name: str
    url: str = ""
    page_title: Optional[str] = None
    mime_type: Optional[str] = None
    content_disposition: Optional[str] = None


@dataclass(frozen=True)
class NamingResult:
    filename: str
    changed: bool


def _is_platform_suffix(suffix: str) -> bool:
    suffix = suffix.strip().lower()
    for name in TITLE_SUFFIXES:
        if len(name) <= 2:
            if suffix == name:
                return True
        elif name in suffix:
            return True
    return False


def strip_site_suffix(title: str) -> str:
    """Drop a trailing ``| Pinterest`` / ``- YouTube`` style suffix."""
    m = _SUFFIX_RX.search(title)
    if m and _is_platform_suffix(m.group(1)):
        return title[:m.start()]
    return title


def clean_page_title(title: str, site: str = "") -> str:
    """Page title -> slug, minus platform suffixes and quality tags."""
    cleaned = strip_site_suffix(title)

    if site:
        site_rx = re.compile(r"\s*[|\-–—]?\s*" + re.escape(site) + r"\s*$", re.I)
        cleaned = site_rx.sub("", cleaned)

    cleaned = _SIZE_TAG_RX.sub("", cleaned)
    cleaned = _QUALITY_TAG_RX.sub("", cleaned)
    return to_slug(cleaned.strip())


def synthesize(title: Optional[str], site: str, today: date) -> Optional[str]:
    """Build ``<date>-<site>-<title-slug>`` or None when too weak a signal."""
    date_str = today.isoformat()
    clean_title = clean_page_title(title, site) if title else ""

    candidate = ""
    if len(clean_title) > 5:
        candidate = f"{date_str}-{site + '-' if site else ''}{clean_title}"
    elif len(site) > 2:
        candidate = f"{date_str}-{site}"

    if len(candidate) < MIN_NAME_LENGTH:
        return None
    return candidate


# ---- decision chain ----

Stage = Callable[[NamingContext, Signals, date], Optional[str]]


def _from_content_disposition(ctx: NamingContext, signals: Signals, today: date) -> Optional[str]:
    if not ctx.content_disposition:
        return None
    return resolve_from_header(ctx.content_disposition, signals.extension)


def _from_page_context(ctx: NamingContext, signals: Signals, today: date) -> Optional[str]:
    shape = garbage_shape(signals.base)
    if shape is None:
        return None
    logger.debug("%r looks machine-generated (%s)", signals.basename, shape)

    better = synthesize(ctx.page_title, signals.site, today)
    if better is None:
        return None
    return f"{better}.{signals.extension}" if signals.extension else better


STAGES: Tuple[Stage, ...] = (
    _from_content_disposition,
    _from_page_context,
)


def decide_filename(ctx: NamingContext, today: Optional[date] = None) -> NamingResult:
    """Pick the filename for a download.

    The server's Content-Disposition name wins when usable. Otherwise a
    machine-generated original name is replaced by one built from the page
    title, site and date. Anything else keeps the original name.
    """
    today = today or date.today()
    signals = extract_signals(ctx.original_name, ctx.url, ctx.mime_type)

    for stage in STAGES:
        candidate = stage(ctx, signals, today)
        if candidate:
            logger.debug("%s chose %r for %r", stage.__name__, candidate, ctx.original_name)
            return NamingResult(candidate, candidate != ctx.original_name)

    return NamingResult(ctx.original_name, False)
