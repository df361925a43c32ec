"""Tests for the package surface."""

import kidtime


def test_docs_are_bundled():
    assert "kidtime" in kidtime.docs["readme"]
    assert "format_duration" in kidtime.docs["api"]


def test_public_names_are_exported():
    for name in kidtime.__all__:
        assert hasattr(kidtime, name), name
