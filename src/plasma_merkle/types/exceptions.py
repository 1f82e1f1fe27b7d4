"""Exception hierarchy for checkpoint tree construction and proof derivation."""

from __future__ import annotations

from typing import Any


class MerkleError(Exception):
    """
    Base exception for all Merkle commitment errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidInput(MerkleError):
    """
    Raised when a tree cannot be built from the supplied leaves.

    Attributes:
        position: Position of the offending leaf, if a single leaf was at fault.
    """

    def __init__(self, detail: str, *, position: int | None = None) -> None:
        self.position = position

        msg = detail if position is None else f"Leaf {position}: {detail}"
        super().__init__(msg)


class TreeTooLarge(MerkleError):
    """
    Raised when the leaf count needs a deeper tree than the verifier supports.

    Attributes:
        leaf_count: Number of leaves supplied.
        depth: Depth the leaves would require.
        max_depth: Largest supported depth.
    """

    def __init__(self, leaf_count: int, *, depth: int, max_depth: int) -> None:
        self.leaf_count = leaf_count
        self.depth = depth
        self.max_depth = max_depth

        super().__init__(
            f"{leaf_count} leaves need a tree of depth {depth}, "
            f"depth must be {max_depth} or less"
        )


class LeafNotFound(MerkleError):
    """
    Raised when a proof is requested for a leaf the tree does not hold.

    Attributes:
        leaf: The value that was looked up, for content lookups.
        index: The position that was looked up, for positional lookups.
    """

    def __init__(self, *, leaf: Any = None, index: int | None = None) -> None:
        self.leaf = leaf
        self.index = index

        if isinstance(leaf, (bytes, bytearray)):
            msg = f"Leaf 0x{leaf.hex()} is not in the tree"
        elif leaf is not None:
            msg = f"Leaf {leaf!r} is not in the tree"
        elif index is not None:
            msg = f"No leaf at index {index}"
        else:
            msg = "Leaf is not in the tree"

        super().__init__(msg)
