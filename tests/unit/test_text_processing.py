"""Unit tests for text and timestamp helpers."""

import re

import pytest

from polycv.utils.text_processing import (
    prepend_without_overlap,
    stringify_scalar,
    truncate_display,
)
from polycv.utils.timestamp import format_elapsed, now


@pytest.mark.unit
def test_prepend_without_overlap():
    assert prepend_without_overlap("https://", "github.com/x") == "https://github.com/x"
    assert prepend_without_overlap("https://", "https://github.com/x") == "https://github.com/x"


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        ("text", "text"),
        (2021, "2021"),
        (2021.0, "2021"),
        (3.5, "3.5"),
        (True, "true"),
    ],
)
def test_stringify_scalar(value, expected):
    assert stringify_scalar(value) == expected


@pytest.mark.unit
def test_truncate_display():
    assert truncate_display("short", 10) == "short"
    assert truncate_display("a" * 20, 10) == "aaaaaaa..."


@pytest.mark.unit
def test_format_elapsed():
    assert format_elapsed(0.42) == "0.42s"
    assert format_elapsed(75.0) == "1m 15s"


@pytest.mark.unit
def test_now_format():
    assert re.fullmatch(r"\d{8}_\d{6}", now())
