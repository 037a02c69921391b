"""Command that lists the GraphQL operations x.com declares."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import requests

from xaio.operations import Operation, get_operations


def format_operation(op: Operation) -> str:
    """Render one operation as an aligned line."""
    return (
        f"Name: {op.operation_name:<35} | Type: {op.operation_type:<7} "
        f"| QueryID: {op.query_id}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """List every operation found in x.com's main script."""
    parser = argparse.ArgumentParser(
        prog="xaio", description="List the GraphQL operations used by x.com."
    )
    parser.parse_args(argv)

    try:
        ops = get_operations()
    except (requests.RequestException, ValueError) as error:
        print(error, file=sys.stderr)
        return 1

    for op in ops:
        print(format_operation(op))
    return 0


if __name__ == "__main__":
    sys.exit(main())