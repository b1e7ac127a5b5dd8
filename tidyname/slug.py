import re
import unicodedata

from tidyname.naming_rules import MAX_SLUG_LENGTH

_DISALLOWED_RX = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RX = re.compile(r"\s+")
_HYPHENS_RX = re.compile(r"-+")


def slugify(text: str) -> str:
    """Lowercase ASCII slug: ``"Café Déjà Vu!"`` -> ``"cafe-deja-vu"``.

    Accents are decomposed and dropped, anything outside ``[a-z0-9]`` is
    removed, whitespace becomes a single hyphen. ``slugify(slugify(s)) ==
    slugify(s)`` for every ``s``.
    """
    if not text:
        return ""
    s = unicodedata.normalize("NFD", text.lower())
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = _DISALLOWED_RX.sub("", s).strip()
    s = _WHITESPACE_RX.sub("-", s)
    s = _HYPHENS_RX.sub("-", s)
    return s.strip("-")


def truncate_at_word(slug: str, max_len: int = MAX_SLUG_LENGTH) -> str:
    """Cut ``slug`` at the last hyphen at or before ``max_len``."""
    if len(slug) <= max_len:
        return slug
    cut = slug.rfind("-", 0, max_len + 1)
    return slug[:cut] if cut > 0 else slug[:max_len]


def to_slug(text: str, max_len: int = MAX_SLUG_LENGTH) -> str:
    return truncate_at_word(slugify(text), max_len)
