import pytest

from tidyname.classify import (
    garbage_shape,
    is_camera_default,
    is_garbage,
    is_hash_pair,
    is_hex_digest,
    is_numeric_run,
    is_opaque_token,
    is_prefixed_id,
    is_size_marker,
    is_uuid_like,
)


@pytest.mark.parametrize("name, shape", [
    ("123456789012", "numeric_run"),
    ("20240517_123456", "numeric_run"),
    ("1693401234-567-89", "numeric_run"),
    ("d41d8cd98f00b204e9800998ecf8427e", "hex_digest"),
    ("Zx9Qw8Er7Ty6Ui5Op4As3Df2Gh", "opaque_token"),
    ("550e8400-e29b-41d4-a716-446655440000", "uuid_like"),
    ("IMG_1234", "camera_default"),
    ("dsc0042", "camera_default"),
    ("Photo_7", "camera_default"),
    ("736x", "size_marker"),
    ("736x490", "size_marker"),
    ("a1b2c3d4e5f6-f6e5d4c3b2a1", "hash_pair"),
    ("pin_8372910293", "prefixed_id"),
    ("FB_IMG_1693401234567", "prefixed_id"),
])
def test_documented_shapes_are_garbage(name, shape):
    assert is_garbage(name)
    assert garbage_shape(name) == shape


@pytest.mark.parametrize("name", [
    "summer-vacation-photo",
    "vacation_photo",
    "Quarterly Report",
    "cozy-reading-nook-ideas",
    "report-20240501",
    "IMG",
    "holiday_2023",
    "1920x1080 wallpaper",
    "resume",
])
def test_human_names_are_not_garbage(name):
    assert not is_garbage(name)
    assert garbage_shape(name) is None


@pytest.mark.parametrize("name", ["", None])
def test_empty_name_is_garbage(name):
    assert is_garbage(name)
    assert garbage_shape(name) == "empty"


def test_numeric_run_needs_twelve_characters():
    assert not is_numeric_run("12345678901")
    assert is_numeric_run("123456789012")
    assert not is_numeric_run("12345678901a")


def test_hex_digest_is_case_insensitive():
    assert is_hex_digest("D41D8CD98F00B204E980")
    assert not is_hex_digest("d41d8cd98f00b204e98")
    assert not is_hex_digest("g41d8cd98f00b204e9800")


def test_opaque_token_rejects_separators():
    assert is_opaque_token("x" * 25)
    assert not is_opaque_token("x" * 24)
    assert not is_opaque_token("x" * 12 + "_" + "x" * 12)


def test_uuid_like_group_lengths():
    assert is_uuid_like("ABCDEFGH-ijkl-mnop")
    assert is_uuid_like("abcdefgh-ijkl-mnop-and-more")
    assert not is_uuid_like("abcdefg-ijkl-mnop")
    assert not is_uuid_like("abcdefgh-ijk-mnop")


def test_camera_default_is_whole_string():
    assert is_camera_default("image123")
    assert not is_camera_default("my_image123")
    assert not is_camera_default("IMG_1234_edited")


def test_size_marker_digit_groups():
    assert is_size_marker("1080x1920")
    assert not is_size_marker("12x34")
    assert not is_size_marker("12345x")


def test_hash_pair_needs_two_runs():
    assert is_hash_pair("abcdef-123456")
    assert not is_hash_pair("abcde-123456")
    assert not is_hash_pair("abcdef-123456-abcdef")


def test_prefixed_id_needs_timestamp_length_digits():
    assert is_prefixed_id("pin-1234567890")
    assert not is_prefixed_id("pin_123456789")
    assert not is_prefixed_id("pinterest_1234567890")
