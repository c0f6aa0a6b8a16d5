# src/jwt_inspector/cli.py

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from .domain.constants import DecoderBackend
from .domain.entities import DecodeFailure
from .integrations.common.inspector_factory import create_inspector_dependencies
from .logging_setup import configure_logging


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jwt-inspector",
        description="Decode and inspect a JWT without signature verification.",
        epilog="Examples:\n"
               "  %(prog)s                          # interactive prompt\n"
               "  %(prog)s <token>                   # pass token as argument\n"
               "  echo '<token>' | %(prog)s --stdin  # read from stdin\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "token",
        nargs="?",
        default=None,
        help="JWT string (prompts interactively if omitted)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read the token from stdin (for piping).",
    )
    parser.add_argument(
        "--readable",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Add <claim>_readable ISO-8601 renderings of exp/iat/auth_time.",
    )
    parser.add_argument(
        "--complete",
        action="store_true",
        help="Include the raw (unverified) signature segment in the output.",
    )
    parser.add_argument(
        "--backend",
        choices=[b.value for b in DecoderBackend],
        default=DecoderBackend.COMPACT.value,
        help="Decoder implementation to use.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log decoding diagnostics to stderr.",
    )

    return parser.parse_args(args=argv)


def _read_token(args: argparse.Namespace) -> str:
    if args.stdin:
        return sys.stdin.read().strip()
    if args.token is not None:
        return args.token.strip()

    print("JWT Inspector", file=sys.stderr)
    try:
        return input("Please enter your JWT: ").strip()
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    try:
        token = _read_token(args)
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        return 130

    inspector = create_inspector_dependencies(backend=args.backend)
    result = inspector.inspect(token, readable=args.readable, complete=args.complete)

    json.dump(result.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 1 if isinstance(result, DecodeFailure) else 0


if __name__ == "__main__":
    sys.exit(main())
