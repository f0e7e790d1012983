"""Tests for parsing record ids out of URL paths."""

import pytest

from utils.ids import parse_id


def test_plain_digits():
    assert parse_id("42") == 42


@pytest.mark.parametrize("raw", ["", "abc", "1_0", " 1", "1 ", "+1", "-1", "1.0", "١"])
def test_anything_else_is_rejected(raw):
    assert parse_id(raw) is None
