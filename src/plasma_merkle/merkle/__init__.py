"""Merkle commitments over checkpoint leaves."""

from .constants import DIGEST_LENGTH, MAX_TREE_DEPTH
from .hash import hash_nodes, keccak256
from .proof import MerkleProof, Proof, Root, calculate_root
from .tree import MerkleTree

__all__ = [
    "MerkleTree",
    "MerkleProof",
    "Proof",
    "Root",
    "calculate_root",
    "hash_nodes",
    "keccak256",
    "DIGEST_LENGTH",
    "MAX_TREE_DEPTH",
]
