"""Tests for the layer-building helpers."""

import pytest

from plasma_merkle.merkle.hash import hash_nodes
from plasma_merkle.merkle.utils import (
    build_layers,
    get_power_of_two_ceil,
    next_layer,
    pad_leaves,
    required_depth,
)
from plasma_merkle.types import ZERO_HASH, Bytes32

LEAF_A = Bytes32(b"\xaa" * 32)
LEAF_B = Bytes32(b"\xbb" * 32)
LEAF_C = Bytes32(b"\xcc" * 32)


@pytest.mark.parametrize(
    "x, expected",
    [(0, 1), (1, 1), (2, 2), (3, 4), (4, 4), (5, 8), (1023, 1024), (1025, 2048)],
)
def test_get_power_of_two_ceil(x: int, expected: int) -> None:
    assert get_power_of_two_ceil(x) == expected


@pytest.mark.parametrize(
    "count, expected",
    [(1, 0), (2, 1), (3, 2), (4, 2), (5, 3), (2**20, 20), (2**20 + 1, 21)],
)
def test_required_depth(count: int, expected: int) -> None:
    assert required_depth(count) == expected


def test_pad_leaves_appends_zero_hashes() -> None:
    assert pad_leaves([LEAF_A, LEAF_B, LEAF_C], 2) == [LEAF_A, LEAF_B, LEAF_C, ZERO_HASH]
    assert pad_leaves([LEAF_A], 0) == [LEAF_A]
    assert pad_leaves([LEAF_A], 3) == [LEAF_A] + [ZERO_HASH] * 7


def test_pad_leaves_does_not_mutate_input() -> None:
    leaves = [LEAF_A]
    pad_leaves(leaves, 1)
    assert leaves == [LEAF_A]


def test_next_layer_even() -> None:
    assert next_layer([LEAF_A, LEAF_B]) == [hash_nodes(LEAF_A, LEAF_B)]


def test_next_layer_carries_odd_node_unhashed() -> None:
    """An unpaired node moves up as-is instead of being paired with zeros."""
    layer = next_layer([LEAF_A, LEAF_B, LEAF_C])
    assert layer == [hash_nodes(LEAF_A, LEAF_B), LEAF_C]
    assert layer[1] != hash_nodes(LEAF_C, ZERO_HASH)


def test_build_layers_unpadded_odd_input() -> None:
    layers = build_layers([LEAF_A, LEAF_B, LEAF_C])
    ab = hash_nodes(LEAF_A, LEAF_B)
    assert layers == [
        [LEAF_A, LEAF_B, LEAF_C],
        [ab, LEAF_C],
        [hash_nodes(ab, LEAF_C)],
    ]


def test_build_layers_single_leaf() -> None:
    assert build_layers([LEAF_A]) == [[LEAF_A]]
