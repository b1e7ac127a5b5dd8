import json

import pytest

from tidyname.signals import (
    basename,
    extension_for_mime,
    extension_from_filename,
    extract_signals,
    resolve_extension,
    resolve_site,
    strip_extension,
)


def test_mime_lookup_wins_over_filename():
    assert resolve_extension("image/jpeg", "photo.png") == "jpg"


def test_mime_parameters_are_ignored():
    assert extension_for_mime("Text/Plain; charset=UTF-8") == "txt"


def test_unmapped_mime_falls_back_to_filename():
    assert resolve_extension("application/x-unknown", "archive.TAR") == "tar"
    assert resolve_extension(None, "clip.webm") == "webm"


def test_suffix_must_be_alphanumeric():
    assert extension_from_filename("Report.../b") == ""
    assert extension_from_filename("notes.v 2") == ""
    assert extension_from_filename("clip.MP4") == "mp4"


def test_long_suffix_is_not_an_extension():
    assert extension_from_filename("Dr. Strangelove or how I learned") == ""
    assert resolve_extension(None, "notes.backup") == ""


def test_no_extension_resolves_empty():
    assert resolve_extension(None, "README") == ""
    assert resolve_extension("", "") == ""


def test_strip_extension():
    assert strip_extension("photo.final.jpg") == "photo.final"
    assert strip_extension(".bashrc") == ".bashrc"
    assert strip_extension("noext") == "noext"
    assert strip_extension("") == ""


def test_basename_drops_directories():
    assert basename("downloads/2024/abc.jpg") == "abc.jpg"
    assert basename(r"C:\Users\me\abc.jpg") == "abc.jpg"


@pytest.mark.parametrize("url, site", [
    ("https://i.pinimg.com/x/abc.jpg", "pinterest"),
    ("https://pbs.twimg.com/media/abc.jpg", "twitter"),
    ("https://scontent.xx.fbcdn.net/v/abc.jpg", "facebook"),
    ("https://i.redd.it/abc.png", "reddit"),
    ("https://i.ytimg.com/vi/abc/hqdefault.jpg", "youtube"),
    ("https://d1234.cloudfront.net/abc.jpg", ""),
    ("https://bucket.s3.amazonaws.com/abc.jpg", ""),
    ("https://www.example.com/page", "example"),
    ("https://news.bbc.co.uk/story", ""),
    ("https://docs.python.org/3/", "python"),
    ("http://localhost:8000/file", "localhost"),
    ("https://x.com/status/1", ""),
])
def test_resolve_site(url, site):
    assert resolve_site(url) == site


@pytest.mark.parametrize("url", ["", None, "not a url", "https://[::1/broken", "/relative/path.jpg"])
def test_malformed_urls_give_empty_site(url):
    assert resolve_site(url) == ""


def test_cdn_suffix_must_match_a_label_boundary():
    assert resolve_site("https://notpinimg.com/abc.jpg") == "notpinimg"


def test_site_overrides_from_config(isolated_state, tmp_path):
    (tmp_path / "site_rules.json").write_text(json.dumps({"media.example.net": "example", "cdn.vendor.io": ""}))
    assert resolve_site("https://img.media.example.net/a.jpg") == "example"
    assert resolve_site("https://cdn.vendor.io/a.jpg") == ""


def test_extract_signals(isolated_state):
    signals = extract_signals("dl/pin_8372910293.jpg", "https://i.pinimg.com/x/abc.jpg", "image/webp")
    assert signals.basename == "pin_8372910293.jpg"
    assert signals.base == "pin_8372910293"
    assert signals.extension == "webp"
    assert signals.site == "pinterest"
