"""cuidkit command line interface."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from .config import DEFAULT_LENGTH, MAXIMUM_LENGTH
from .errors import CuidError
from .generator import Cuid, is_cuid


def _print_output(payload: dict[str, Any], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, sort_keys=True))
        return

    for value in payload.get("ids", []):
        print(value)
    if "valid" in payload:
        print(f"valid: {payload['valid']}")

    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        print("errors:")
        for item in errors:
            code = item.get("code", "<unknown>")
            message = item.get("message", "")
            print(f"  - {code}: {message}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cuidkit")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate identifiers")
    generate_parser.add_argument(
        "--length", type=int, default=DEFAULT_LENGTH, help="Characters per identifier"
    )
    generate_parser.add_argument(
        "--count", type=int, default=1, help="Number of identifiers to generate"
    )
    generate_parser.add_argument("--json", action="store_true", help="Emit JSON output")

    check_parser = subparsers.add_parser("check", help="Check an identifier's shape")
    check_parser.add_argument("value", help="Identifier to check")
    check_parser.add_argument("--min-length", type=int, default=2)
    check_parser.add_argument("--max-length", type=int, default=MAXIMUM_LENGTH)
    check_parser.add_argument("--json", action="store_true", help="Emit JSON output")

    return parser


def _run(args: argparse.Namespace) -> int:
    if args.command == "generate":
        cuid = Cuid(length=args.length)
        ids = [cuid.generate() for _ in range(max(args.count, 0))]
        _print_output({"ok": True, "ids": ids}, as_json=bool(args.json))
        return 0

    if args.command == "check":
        valid = is_cuid(args.value, min_length=args.min_length, max_length=args.max_length)
        _print_output({"ok": True, "valid": valid}, as_json=bool(args.json))
        return 0 if valid else 1

    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        return _run(args)
    except CuidError as exc:
        payload = {
            "ok": False,
            "errors": [{"code": exc.error_code, "message": str(exc)}],
        }
        _print_output(payload, as_json=bool(getattr(args, "json", False)))
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
