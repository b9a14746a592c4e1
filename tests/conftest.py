"""Shared test fixtures for rljson tests."""

from __future__ import annotations

import pytest

from rljson import Rljson


@pytest.fixture
def db():
    """Two tables, tableA and tableB, with two rows each."""
    return Rljson.example()


@pytest.fixture
def hashes(db):
    """Row hashes of the example database keyed by a short name."""
    return {
        "a0": db.hash("tableA", 0),
        "a1": db.hash("tableA", 1),
        "b0": db.hash("tableB", 0),
        "b1": db.hash("tableB", 1),
    }


@pytest.fixture
def linked_db():
    """tableA plus linkToTableA whose row references the first row of tableA."""
    return Rljson.example_with_link()


@pytest.fixture
def deep_db():
    """Tables a -> b -> c -> d linked by reference fields."""
    return Rljson.example_with_deep_link()
