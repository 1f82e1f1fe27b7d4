"""Reusable type definitions for checkpoint commitments."""

from .base import StrictDocument
from .byte_arrays import ZERO_HASH, BaseBytes, Bytes32
from .exceptions import InvalidInput, LeafNotFound, MerkleError, TreeTooLarge

__all__ = [
    # Core types
    "BaseBytes",
    "Bytes32",
    "ZERO_HASH",
    "StrictDocument",
    # Exceptions
    "MerkleError",
    "InvalidInput",
    "TreeTooLarge",
    "LeafNotFound",
]
