"""Dump the accounts in a Hack & Slash USER file as JSON.

Usage:
    python -m scripts.dump_users USER_FILE

Prints a JSON array with one object per account to stdout. Empty slots and
the built-in placeholder account are left out. Exits non-zero, printing
nothing to stdout, if the file can't be read or holds no accounts.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from hns_users.parser.user_reader import load_users


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump Hack & Slash user accounts as JSON")
    parser.add_argument("user_file_path", type=Path, help="The path to the HnS user file")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        users = load_users(args.user_file_path)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps([u.to_dict() for u in users]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
