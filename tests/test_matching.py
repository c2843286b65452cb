"""Tests for description pattern matching."""

import pytest

from ledgerit.domain.errors import ValidationError
from ledgerit.domain.matching import compile_pattern, compile_patterns, matches


def test_matches_anywhere_in_description():
    """Patterns are searched, not anchored."""
    patterns = compile_patterns(["SHOP"])
    assert matches(patterns, "COFFEE SHOP 123")


def test_anchored_pattern():
    """Anchors in the pattern are honored."""
    patterns = compile_patterns(["^COFFEE SHOP"])
    assert matches(patterns, "COFFEE SHOP 123")
    assert not matches(patterns, "THE COFFEE SHOP")


def test_any_pattern_matches():
    """Patterns of one category are OR-combined."""
    patterns = compile_patterns(["^HOTEL", "AIRLINE"])
    assert matches(patterns, "BIG AIRLINE CO")
    assert not matches(patterns, "TRAIN TICKET")


def test_no_patterns_never_match():
    """A category without patterns matches nothing."""
    assert not matches([], "ANYTHING")


def test_invalid_pattern_fails_at_compile_time():
    """Malformed patterns raise a ValidationError when compiled."""
    with pytest.raises(ValidationError) as excinfo:
        compile_pattern("COFFEE (SHOP")
    assert "Invalid pattern" in str(excinfo.value)
