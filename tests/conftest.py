"""Shared fixtures for the tinystore test suite."""

from __future__ import annotations

import pytest

from tinystore import Store, create_store
from tinystore.examples.bio import BioState, bio_reducer
from tinystore.examples.counter import counter_reducer


@pytest.fixture
def counter_store() -> Store:
    """Counter store starting at 0."""
    return create_store(counter_reducer)


@pytest.fixture
def bio_store() -> Store:
    return create_store(bio_reducer, BioState())


@pytest.fixture
def calls() -> list:
    """Records listener invocations in order."""
    return []
