"""
Binary Merkle trees committing a checkpoint's leaves to a single root.

A tree is built once from an ordered, non-empty list of 32-byte leaves. The
leaf layer is padded with zero digests up to the next power of two, then
each layer above it hashes adjacent pairs as `keccak256(left || right)`
until a single root remains.

Proofs are the sibling of the proven node on every layer below the root,
ordered bottom to top. A verifier folds them into the leaf, placing the
running hash on the left when the current index is even and on the right
when it is odd. The on-chain verifier applies the same rule, so any change
to padding, ordering or parity breaks compatibility with it.
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence, Tuple

from plasma_merkle.types.byte_arrays import Bytes32
from plasma_merkle.types.exceptions import InvalidInput, LeafNotFound, TreeTooLarge

from .constants import DIGEST_LENGTH, MAX_TREE_DEPTH
from .proof import MerkleProof, Proof, calculate_root
from .utils import build_layers, pad_leaves, required_depth

logger = logging.getLogger(__name__)


class MerkleTree:
    """
    An immutable Merkle commitment over a fixed set of leaves.

    Leaves are looked up by content when deriving proofs. If the same digest
    appears more than once, the last occurrence is proven; callers holding
    duplicate leaves should use `get_proof_at` with an explicit index.
    """

    __slots__ = ("_layers",)

    _layers: Tuple[Tuple[Bytes32, ...], ...]

    def __init__(self, leaves: Sequence[Any]) -> None:
        """
        Build the tree.

        Args:
            leaves: Ordered leaf digests. Anything `Bytes32` accepts is allowed.

        Raises:
            InvalidInput: If `leaves` is empty or an item is not a 32-byte digest.
            TreeTooLarge: If more than 2**MAX_TREE_DEPTH leaves are supplied.
        """
        if len(leaves) < 1:
            raise InvalidInput("At least 1 leaf is needed")

        depth = required_depth(len(leaves))
        if depth > MAX_TREE_DEPTH:
            raise TreeTooLarge(len(leaves), depth=depth, max_depth=MAX_TREE_DEPTH)

        digests: List[Bytes32] = []
        for position, leaf in enumerate(leaves):
            try:
                digests.append(leaf if isinstance(leaf, Bytes32) else Bytes32(leaf))
            except (TypeError, ValueError) as e:
                raise InvalidInput(str(e), position=position) from e

        layers = build_layers(pad_leaves(digests, depth))
        self._layers = tuple(tuple(layer) for layer in layers)

        logger.debug(
            "Built tree with %d leaves (%d padded), depth %d, root 0x%s",
            len(digests),
            len(self._layers[0]),
            depth,
            self.root.hex(),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_layers"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __len__(self) -> int:
        """Number of leaves, including zero padding."""
        return len(self._layers[0])

    def __repr__(self) -> str:
        return f"MerkleTree(leaves={len(self)}, depth={self.depth}, root=0x{self.root.hex()})"

    @property
    def leaves(self) -> Tuple[Bytes32, ...]:
        """The padded leaf layer."""
        return self._layers[0]

    @property
    def layers(self) -> Tuple[Tuple[Bytes32, ...], ...]:
        """Every layer, from the padded leaves up to the root."""
        return self._layers

    @property
    def depth(self) -> int:
        """Number of layers below the root, which is also the length of every proof."""
        return len(self._layers) - 1

    @property
    def root(self) -> Bytes32:
        """The commitment published for this tree."""
        return self._layers[-1][0]

    def index_of(self, leaf: Any) -> int:
        """
        Position of `leaf` in the padded leaf layer.

        `leaf` may be anything `Bytes32` accepts, such as a hex string. The
        whole layer is scanned and the last match wins.

        Raises:
            LeafNotFound: If `leaf` is not a digest, or no leaf is byte-for-byte
                equal to it.
        """
        try:
            digest = Bytes32(leaf)
        except (TypeError, ValueError) as e:
            raise LeafNotFound(leaf=leaf) from e

        index = -1
        for i, node in enumerate(self._layers[0]):
            if node == digest:
                index = i

        if index < 0:
            raise LeafNotFound(leaf=digest)
        return index

    def get_proof(self, leaf: Any) -> Proof:
        """
        Derive the inclusion proof for `leaf`, located by content.

        Raises:
            LeafNotFound: If `leaf` is not in the tree.
        """
        return self.get_proof_at(self.index_of(leaf))

    def get_proof_at(self, index: int) -> Proof:
        """
        Derive the inclusion proof for the leaf at `index`.

        Returns:
            One sibling per layer below the root, bottom to top.

        Raises:
            LeafNotFound: If `index` is outside the padded leaf layer.
        """
        if not 0 <= index < len(self):
            raise LeafNotFound(index=index)

        proof: List[Bytes32] = []
        for layer in self._layers[:-1]:
            sibling_index = index + 1 if index % 2 == 0 else index - 1
            proof.append(layer[sibling_index])
            index //= 2

        logger.debug("Derived proof of length %d", len(proof))
        return proof

    def prove(self, leaf: Any) -> MerkleProof:
        """Bundle the proof for `leaf` together with its resolved index."""
        index = self.index_of(leaf)
        return MerkleProof(
            leaf=self._layers[0][index],
            index=index,
            siblings=self.get_proof_at(index),
        )

    @staticmethod
    def verify(value: Any, index: Any, root: Any, proof: Any) -> bool:
        """
        Check that `value` sits at `index` under `root`, given `proof`.

        This is a pure predicate meant for untrusted input. Malformed
        arguments (missing value or root, a proof that is not a list of
        32-byte digests, an index outside the 2**len(proof) leaf positions)
        make it return False instead of raising.
        """
        if not _is_digest(value) or not _is_digest(root):
            return False
        if not isinstance(proof, (list, tuple)) or not all(_is_digest(node) for node in proof):
            return False
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        # Only the low len(proof) bits steer the fold; higher bits name no leaf.
        if not 0 <= index < 1 << len(proof):
            return False

        return calculate_root(value, index, proof) == root


def _is_digest(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray)) and len(value) == DIGEST_LENGTH
