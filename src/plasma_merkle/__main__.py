"""
Checkpoint commitment CLI entry point.

Compute checkpoint roots and derive or check inclusion proofs from the shell.

Usage::

    python -m plasma_merkle root leaves.txt
    python -m plasma_merkle prove leaves.txt 0x5f2e...c1
    python -m plasma_merkle verify proof.json 0x9a41...07

Commands:
    root     Print the root committing to the leaves in LEAVES_FILE
    prove    Print the inclusion proof of LEAF as JSON
    verify   Check a JSON proof against ROOT (exit status 0 if valid, 1 if not)

LEAVES_FILE holds one hex value per line. Blank lines and lines starting
with '#' are skipped. With --hash-leaves each value is hashed with
Keccak-256 to form the leaf; otherwise it must already be a 32-byte digest.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from plasma_merkle import config
from plasma_merkle.merkle import MerkleProof, MerkleTree, keccak256
from plasma_merkle.types import Bytes32, MerkleError

logger = logging.getLogger(__name__)

EXIT_INVALID_PROOF = 1
"""Exit status of `verify` when the proof does not match the root."""

EXIT_ERROR = 2
"""Exit status when the input cannot be processed at all."""


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)

        timestamp = self.formatTime(record, self.datefmt)
        colored_time = f"{self.CYAN}{timestamp}{self.RESET}"

        levelname = f"{color}{record.levelname:8}{self.RESET}"

        name = f"{self.BLUE}{record.name}{self.RESET}"

        message = record.getMessage()

        return f"{colored_time} {levelname} {name}: {message}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the CLI with optional colors."""
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL)

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def read_leaves(path: Path, hash_leaves: bool = False) -> list[Bytes32]:
    """
    Load leaves from a text file of hex values.

    Args:
        path: File with one hex value per line.
        hash_leaves: Hash each decoded value with Keccak-256 instead of
            requiring it to be a 32-byte digest.

    Raises:
        ValueError: If a line is not valid hex, or not 32 bytes without `hash_leaves`.
    """
    leaves: list[Bytes32] = []
    for lineno, line in enumerate(path.read_text().splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        try:
            if hash_leaves:
                leaves.append(keccak256(bytes.fromhex(line.removeprefix("0x"))))
            else:
                leaves.append(Bytes32(line))
        except ValueError as e:
            raise ValueError(f"{path}:{lineno}: {e}") from e

    logger.info("Loaded %d leaves from %s", len(leaves), path)
    return leaves


def cmd_root(args: argparse.Namespace) -> int:
    """Print the root of the tree built from the leaf file."""
    tree = MerkleTree(read_leaves(args.leaves_file, args.hash_leaves))
    logger.info("Tree depth %d over %d padded leaves", tree.depth, len(tree))
    print("0x" + tree.root.hex())
    return 0


def cmd_prove(args: argparse.Namespace) -> int:
    """Print the inclusion proof of `args.leaf` as a JSON document."""
    tree = MerkleTree(read_leaves(args.leaves_file, args.hash_leaves))
    proof = tree.prove(args.leaf)
    logger.info("Leaf found at index %d, root 0x%s", proof.index, tree.root.hex())
    print(proof.to_json())
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """
    Check a JSON proof document against `args.root`.

    Prints `true` or `false`; the exit status is 0 only for a valid proof.
    """
    proof = MerkleProof.from_json(args.proof_file.read_bytes())
    if proof.verify(args.root):
        print("true")
        return 0

    logger.warning(
        "Proof for leaf index %d does not match root 0x%s", proof.index, args.root.hex()
    )
    print("false")
    return EXIT_INVALID_PROOF


def build_parser() -> argparse.ArgumentParser:
    """Assemble the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="plasma-merkle",
        description="Checkpoint Merkle commitments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    root_parser = subparsers.add_parser("root", help="Compute the root of a leaf file")
    root_parser.set_defaults(handler=cmd_root)

    prove_parser = subparsers.add_parser("prove", help="Derive the inclusion proof of a leaf")
    prove_parser.set_defaults(handler=cmd_prove)

    for sub in (root_parser, prove_parser):
        sub.add_argument("leaves_file", type=Path, help="Path to the leaf file")
        sub.add_argument(
            "--hash-leaves",
            action="store_true",
            help="Hash every line with Keccak-256 to form the leaves",
        )

    prove_parser.add_argument("leaf", type=Bytes32, help="Leaf digest to prove (hex)")

    verify_parser = subparsers.add_parser("verify", help="Check a JSON proof against a root")
    verify_parser.add_argument("proof_file", type=Path, help="Path to the proof JSON document")
    verify_parser.add_argument("root", type=Bytes32, help="Expected root (hex)")
    verify_parser.set_defaults(handler=cmd_verify)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        return args.handler(args)
    except (MerkleError, ValueError, OSError) as e:
        logger.error("%s", e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
