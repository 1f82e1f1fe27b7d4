"""
The hash primitive shared with the on-chain verifier.

Checkpoint trees use Keccak-256, the ledger's native hash. This is the
original Keccak padding, which differs from the NIST `hashlib.sha3_256`
standard and must not be swapped for it.
"""

from Crypto.Hash import keccak

from plasma_merkle.types.byte_arrays import Bytes32


def keccak256(data: bytes) -> Bytes32:
    """Hash arbitrary bytes with Keccak-256."""
    k = keccak.new(digest_bits=256)
    k.update(data)
    return Bytes32(k.digest())


def hash_nodes(left: bytes, right: bytes) -> Bytes32:
    """Hashes two 32-byte nodes together, `left` first."""
    return keccak256(bytes(left) + bytes(right))
