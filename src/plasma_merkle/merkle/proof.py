"""Inclusion proofs for checkpoint trees."""

from __future__ import annotations

from typing import List, Sequence

from pydantic import Field, model_validator

from plasma_merkle.types import StrictDocument
from plasma_merkle.types.byte_arrays import Bytes32

from .constants import MAX_TREE_DEPTH
from .hash import hash_nodes

Root = Bytes32
"""The type of a Merkle tree root."""
Proof = List[Bytes32]
"""The type of a Merkle proof: sibling digests, bottom to top."""


def calculate_root(leaf: bytes, index: int, siblings: Sequence[bytes]) -> Bytes32:
    """
    Fold `siblings` into `leaf` to recompute the root it claims to belong to.

    At every layer the running hash is the left input when `index` is even
    and the right input when it is odd.
    """
    root = Bytes32(leaf)
    for node in siblings:
        if index % 2 == 0:
            root = hash_nodes(root, node)
        else:
            root = hash_nodes(node, root)
        index //= 2
    return root


class MerkleProof(StrictDocument):
    """
    A single-leaf inclusion proof together with the position it was issued for.

    This object is immutable; once created, its contents cannot be changed.
    """

    leaf: Bytes32 = Field(..., description="The leaf being proven.")

    index: int = Field(..., ge=0, description="Position of the leaf in the padded leaf layer.")

    siblings: Proof = Field(
        ...,
        max_length=MAX_TREE_DEPTH,
        description="Sibling digests from the leaf layer up to, but excluding, the root.",
    )

    @model_validator(mode="after")
    def check_index_within_tree(self) -> MerkleProof:
        """Ensures the index names one of the 2**len(siblings) leaf positions."""
        if self.index >= 1 << len(self.siblings):
            raise ValueError(
                f"Leaf index {self.index} is outside a tree of depth {len(self.siblings)}."
            )
        return self

    def calculate_root(self) -> Root:
        """Recompute the root this proof commits to."""
        return calculate_root(self.leaf, self.index, self.siblings)

    def verify(self, root: Root) -> bool:
        """Verifies the proof against a known root."""
        # `model_copy(update=...)` skips validation, so the range is checked again.
        if self.index >= 1 << len(self.siblings):
            return False
        return self.calculate_root() == root
