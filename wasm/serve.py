#!/usr/bin/env python3
"""Serve the wasm harness next to this script plus the release build output."""
import logging
import sys
from pathlib import Path

from devserve.server import run

ROOT = Path(__file__).resolve().parent


def main():
    logging.basicConfig(level=logging.INFO)
    run("wasm", build_root=sys.argv[1] if len(sys.argv) > 1 else None, harness_root=ROOT)


if __name__ == "__main__":
    main()
