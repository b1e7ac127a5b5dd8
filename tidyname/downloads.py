"""Download-event glue around the naming engine.

The handler mirrors what a browser's "determine filename" hook does: look up
the MIME type seen in the response headers, find the title of the page that
started the download, ask the engine for a name and, when it changed, log a
notice and remember the rename.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from tidyname import session
from tidyname.rename import NamingContext, decide_filename
from tidyname.signals import basename

logger = logging.getLogger(__name__)

TitleResolver = Callable[[str], Optional[str]]
Headers = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class HeaderCache:
    """URL -> content-type observed while responses arrive."""

    def __init__(self) -> None:
        self._types: Dict[str, str] = {}
        self._lock = threading.Lock()

    def observe(self, url: str, headers: Headers) -> None:
        pairs = headers.items() if isinstance(headers, Mapping) else headers
        for name, value in pairs:
            if name.lower() == "content-type" and value:
                with self._lock:
                    self._types[url] = value.split(";", 1)[0].strip()

    def get(self, url: str) -> Optional[str]:
        with self._lock:
            return self._types.get(url)

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)


def _resolve_title(resolver: Optional[TitleResolver], referrer: Optional[str]) -> Optional[str]:
    if not resolver or not referrer:
        return None
    try:
        return resolver(referrer) or None
    except Exception as e:
        # a tab that went away must not block the download
        logger.debug("title lookup failed for %s: %s", referrer, e)
        return None


def handle_download(
    item: Mapping[str, Any],
    *,
    header_cache: Optional[HeaderCache] = None,
    title_resolver: Optional[TitleResolver] = None,
    record: bool = True,
) -> Dict[str, Any]:
    """Return the filename suggestion for a download item.

    ``item`` carries ``filename``, ``url`` and optionally ``referrer``,
    ``mime``, ``title`` and ``contentDisposition``. A title given in the item
    is used when no resolver finds one.
    """
    filename = item.get("filename") or ""
    if not session.is_enabled():
        return {"filename": filename}

    url = item.get("url") or ""
    mime = (header_cache.get(url) if header_cache else None) or item.get("mime")
    title = _resolve_title(title_resolver, item.get("referrer")) or item.get("title")

    result = decide_filename(NamingContext(
        original_name=basename(filename),
        url=url,
        page_title=title,
        mime_type=mime,
        content_disposition=item.get("contentDisposition"),
    ))

    if not result.changed or result.filename == filename:
        return {"filename": filename}

    logger.info("Tidied! %s -> %s", filename, result.filename)
    if record:
        session.record_rename(filename, result.filename)
    return {"filename": result.filename, "conflictAction": "uniquify"}
