#!/usr/bin/env python3
"""Entry point for the wasm dev server.

Subcommands:
    wasm [BUILD_ROOT]    Serve build output with .wasm as application/wasm
    ui [BUILD_ROOT]      Serve build output with default content types
"""

import argparse
import logging

from devserve.config import DEFAULT_BUILD_ROOT, VARIANTS
from devserve.server import run


def main(argv=None):
    parser = argparse.ArgumentParser(description="Local static server for wasm builds")
    subparsers = parser.add_subparsers(dest="command")

    for name in VARIANTS:
        variant_parser = subparsers.add_parser(name, help=f"Serve the {name} harness")
        variant_parser.add_argument(
            "build_root",
            nargs="?",
            default=None,
            help=f"Build output directory (default: {DEFAULT_BUILD_ROOT} under the harness)",
        )

    args = parser.parse_args(argv)

    if args.command in VARIANTS:
        logging.basicConfig(level=logging.INFO)
        run(args.command, build_root=args.build_root)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
