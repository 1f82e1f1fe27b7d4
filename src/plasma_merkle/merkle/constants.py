"""Constants fixed by the on-chain checkpoint verifier."""

DIGEST_LENGTH: int = 32
"""Number of bytes in a leaf, an intermediate node or a root."""

MAX_TREE_DEPTH: int = 20
"""Deepest tree that can be committed, bounding a checkpoint to 2**20 leaves."""

MAX_LEAVES: int = 1 << MAX_TREE_DEPTH
"""Largest number of leaves a single tree can hold."""
