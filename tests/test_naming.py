"""Tests for skill name sanitization."""

from __future__ import annotations

import pytest

from skillplant.constants.naming import MAX_SKILL_NAME_LENGTH, SKILL_NAME_FALLBACK
from skillplant.utils import sanitize_name


@pytest.mark.parametrize("raw_name", ["", "...", "   ", "..", " . . ", "/", "\\:\x00"])
def test_sanitize_name_falls_back_when_nothing_remains(raw_name: str) -> None:
    assert sanitize_name(raw_name) == SKILL_NAME_FALLBACK


@pytest.mark.parametrize(
    ("raw_name", "expected"),
    [
        ("my-skill", "my-skill"),
        ("../../etc", "etc"),
        ("a/b\\c:d\x00e", "abcde"),
        ("...foo", "foo"),
        ("  .hidden.  ", "hidden"),
        ("C:\\Windows\\System32", "CWindowsSystem32"),
        ("name.with.dots", "name.with.dots"),
    ],
)
def test_sanitize_name_strips_unsafe_parts(raw_name: str, expected: str) -> None:
    assert sanitize_name(raw_name) == expected


def test_sanitize_name_removes_separators_and_nul() -> None:
    result = sanitize_name("x/../y\\..\\z:\x00w")

    for char in ("/", "\\", ":", "\x00"):
        assert char not in result


def test_sanitize_name_strips_dots_exposed_by_separator_removal() -> None:
    result = sanitize_name("/..hidden")

    assert result == "hidden"
    assert not result.startswith(".")


def test_sanitize_name_truncates_long_names() -> None:
    result = sanitize_name("a" * 300)

    assert len(result) == MAX_SKILL_NAME_LENGTH == 255
    assert result == "a" * 255


def test_sanitize_name_keeps_unicode() -> None:
    assert sanitize_name("навык-ü") == "навык-ü"


@pytest.mark.parametrize(
    ("raw_name", "expected"),
    [
        ("\ufefffoo", "foo"),
        ("foo\ufeff", "foo"),
        ("\ufeff.\ufeff..hidden", "hidden"),
        ("\ufeff", "unnamed-skill"),
    ],
    ids=["leading_bom", "trailing_bom", "bom_between_dots", "only_bom"],
)
def test_sanitize_name_trims_byte_order_marks(raw_name: str, expected: str) -> None:
    assert sanitize_name(raw_name) == expected
