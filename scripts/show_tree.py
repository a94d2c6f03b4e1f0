#!/usr/bin/env python3
"""
Print the Merkle tree diagram, root hash and depth for a list of blocks,
then report membership for any values passed with --check.

    python scripts/show_tree.py Block1 Block2 Block3 Block4 --check Block2 Block5
"""
import argparse
import logging

from merkle_trees.config import HashConfig
from merkle_trees.hashing import Hasher
from merkle_trees.logging_config import setup_logging
from merkle_trees.merkle_tree import MerkleTree


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build and display a Merkle tree.")
    parser.add_argument("blocks", nargs="*", default=["Block1", "Block2", "Block3", "Block4"],
                        help="Data blocks, in order (default: Block1..Block4).")
    parser.add_argument("--check", nargs="+", default=[], metavar="VALUE",
                        help="Values to test for membership.")
    parser.add_argument("--algorithm", default=None, help="hashlib algorithm name (default: sha256).")
    parser.add_argument("--digest-chars", type=int, default=None,
                        help="Hex characters kept from each digest (default: 16).")
    parser.add_argument("--full-digest", action="store_true", help="Keep the whole digest.")
    parser.add_argument("--color", action="store_true", help="Colour digests and data.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    setup_logging(level=getattr(logging, args.log_level))
    logging.getLogger("merkle_trees").setLevel(getattr(logging, args.log_level))

    config = HashConfig.from_env()
    if args.algorithm is not None or args.digest_chars is not None or args.full_digest:
        digest_chars = None if args.full_digest else (args.digest_chars or config.digest_chars)
        config = HashConfig(algorithm=args.algorithm or config.algorithm, digest_chars=digest_chars)

    tree = MerkleTree.from_data(args.blocks, hasher=Hasher(config))
    print()
    print(tree.report(color=args.color))

    for value in args.check:
        print(f'Verifying "{value}" in tree: {str(tree.contains(value)).lower()}')


if __name__ == '__main__':
    main()
