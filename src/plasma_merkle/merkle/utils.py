"""Generic helper functions for building checkpoint trees."""

from __future__ import annotations

from typing import List, Sequence

from plasma_merkle.types.byte_arrays import ZERO_HASH, Bytes32

from .hash import hash_nodes


def get_power_of_two_ceil(x: int) -> int:
    """
    Calculates the smallest power of two greater than or equal to x.

    Examples: 0->1, 1->1, 2->2, 3->4, 4->4, 5->8.
    """
    if x <= 1:
        return 1
    return 1 << (x - 1).bit_length()


def required_depth(leaf_count: int) -> int:
    """
    Number of hashing layers needed above `leaf_count` leaves.

    This is ceil(log2(leaf_count)), computed on integers so that large
    counts do not suffer from floating point rounding.

    Examples: 1->0, 2->1, 3->2, 4->2, 5->3.
    """
    return get_power_of_two_ceil(leaf_count).bit_length() - 1


def pad_leaves(leaves: Sequence[Bytes32], depth: int) -> List[Bytes32]:
    """Append zero digests to `leaves` until there are exactly 2**depth of them."""
    return list(leaves) + [ZERO_HASH] * ((1 << depth) - len(leaves))


def next_layer(nodes: Sequence[Bytes32]) -> List[Bytes32]:
    """
    Hash adjacent pairs of `nodes` into the layer above.

    An unpaired trailing node is carried up unchanged rather than hashed
    against a zero sibling. Padded leaf layers never have one.
    """
    layer = [hash_nodes(nodes[i], nodes[i + 1]) for i in range(0, len(nodes) - 1, 2)]

    if len(nodes) % 2 == 1:
        layer.append(nodes[-1])

    return layer


def build_layers(leaves: Sequence[Bytes32]) -> List[List[Bytes32]]:
    """
    Build every layer of a tree, from `leaves` at index 0 up to the root.

    The last layer always holds exactly one node.
    """
    layers = [list(leaves)]
    while len(layers[-1]) > 1:
        layers.append(next_layer(layers[-1]))
    return layers
