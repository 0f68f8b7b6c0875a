#!/usr/bin/env python3
"""
Shapez Shape Key - Main Entry Point

Parse and validate short-form shapez shape keys from the command line.
"""

import argparse
import logging
import sys


def run_parse(args):
    """Parse and display a shape key."""
    from shapez_key.shapes.parser import ShapeKeyParser
    from shapez_key.shapes.encoder import ShapeKeyEncoder
    from shapez_key.shapes.errors import ShapeKeyError

    try:
        shape = ShapeKeyParser().parse(args.code)
    except ShapeKeyError as e:
        for diagnostic in e.diagnostics:
            print(f"Error: {diagnostic.message}", file=sys.stderr)
        return 1

    encoder = ShapeKeyEncoder()
    print(f"Shape key: {args.code}")
    print(f"Normalized: {encoder.encode(shape)}")
    print(f"Layers: {shape.num_layers}")
    print()
    print(encoder.format_for_display(shape, multiline=True))
    if args.verbose:
        print()
        for line in encoder.describe(shape):
            print(line)
    return 0


def run_check(args):
    """Check one or more shape keys, reporting every problem found."""
    from shapez_key.shapes.parser import ShapeKeyParser

    parser = ShapeKeyParser()
    failures = 0
    for code in args.codes:
        diagnostics = parser.check(code)
        if not diagnostics:
            print(f"OK       {code}")
            continue
        failures += 1
        print(f"INVALID  {code}")
        for diagnostic in diagnostics:
            print(f"  - {diagnostic.message}")

    return 1 if failures else 0


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Shapez Shape Key - parse and validate short-form shape keys"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse shape command
    parse_parser = subparsers.add_parser("parse", help="Parse and display a shape key")
    parse_parser.add_argument("code", help="Shape key to parse (e.g., RuCrSgWw:Rr------)")
    parse_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Also list every quad by name"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Validate one or more shape keys")
    check_parser.add_argument("codes", nargs="+", help="Shape keys to validate")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "parse":
        return run_parse(args)
    elif args.command == "check":
        return run_check(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
