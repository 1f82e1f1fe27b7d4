"""Pytest configuration and shared fixtures."""

import os
from collections.abc import Callable

import pytest
from hypothesis import settings

from plasma_merkle.merkle.hash import keccak256
from plasma_merkle.types import Bytes32

if "PLASMA_MERKLE_LOG_LEVEL" not in os.environ:
    os.environ["PLASMA_MERKLE_LOG_LEVEL"] = "DEBUG"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")


@pytest.fixture
def make_leaves() -> Callable[[int], list[Bytes32]]:
    """Factory for `n` distinct, deterministic leaves."""

    def _create(n: int) -> list[Bytes32]:
        return [keccak256(i.to_bytes(8, "big")) for i in range(n)]

    return _create
