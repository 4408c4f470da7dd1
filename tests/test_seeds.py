from __future__ import annotations

import pytest

from slime_finder.seeds import format_seed, java_string_hash, parse_numeric_seed, resolve_seed


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("a", 97),
        ("abc", 96354),
        ("hello", 99162322),
        ("Hello World", -862545276),
    ],
)
def test_java_string_hash_matches_string_hashcode(text: str, expected: int) -> None:
    assert java_string_hash(text) == expected


def test_numeric_seeds_are_used_directly() -> None:
    assert resolve_seed("12345") == 12345
    assert resolve_seed("-42") == -42
    assert resolve_seed(" 8011883210394390920 ") == 8011883210394390920
    assert resolve_seed(str(-(2**63))) == -(2**63)


def test_text_and_out_of_range_seeds_are_hashed() -> None:
    assert resolve_seed("hello") == 99162322
    too_big = str(2**63)
    assert resolve_seed(too_big) == java_string_hash(too_big)
    assert resolve_seed("1_000") == java_string_hash("1_000")


def test_format_seed_shows_raw_text_when_hashed() -> None:
    assert format_seed(12345, "12345") == "12345"
    assert format_seed(99162322, "hello") == "99162322 (hello)"


@pytest.mark.parametrize(("text", "expected"), [("+5", 5), ("007", 7), ("-0", 0), (" 42 ", 42)])
def test_parse_numeric_seed_accepts_plain_integers(text: str, expected: int) -> None:
    assert parse_numeric_seed(text) == expected


@pytest.mark.parametrize("text", ["hello", "1_000", "", str(2**63), "1.5"])
def test_parse_numeric_seed_rejects_other_text(text: str) -> None:
    assert parse_numeric_seed(text) is None
