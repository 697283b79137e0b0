#!/usr/bin/env python3
"""
Command line entry point for the reactor reboot.

Reads the reboot steps and reports how many cubes are on after the
initialisation procedure (steps clipped to -50..50 on every axis) and after
the full reboot.
"""

import argparse
import logging
import sys
import time

from reactor_reboot.dense import dense_active_volume
from reactor_reboot.exceptions import ReactorError
from reactor_reboot.parsing import read_instructions
from reactor_reboot.reactor import DEFAULT_STORE, Reactor, initialisation_limit
from reactor_reboot.regionstore import REGION_STORE_KINDS

DEFAULT_INPUT_PATH = "res/day-22-input"

logger = logging.getLogger("reactor_reboot")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reactor-reboot",
        description="Count the cubes left on after a sequence of on/off cuboid steps.",
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT_PATH,
                        help=f"instruction file (default: {DEFAULT_INPUT_PATH})")
    parser.add_argument("--part", choices=("1", "2", "both"), default="both",
                        help="1 = initialisation procedure only, 2 = full reactor only")
    parser.add_argument("--store", choices=REGION_STORE_KINDS, default=DEFAULT_STORE,
                        help="region store backend")
    parser.add_argument("--verify", action="store_true",
                        help="cross-check the initialisation answer on a dense grid (not with --part 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verify and args.part == "2":
        parser.error("--verify checks the initialisation procedure and cannot be used with --part 2")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        instructions = read_instructions(args.input)
    except FileNotFoundError:
        print(f"Input file not found: {args.input}", file=sys.stderr)
        return 1
    except ReactorError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    if args.part in ("1", "both"):
        limit = initialisation_limit()
        volume = Reactor(args.store, limit=limit).run_all(instructions)
        print(f"There are {volume} cubes active in the initialisation procedure")
        if args.verify:
            expected = dense_active_volume(instructions, limit)
            if expected != volume:
                print(f"Verification failed: dense grid counts {expected} cubes", file=sys.stderr)
                return 1
            logger.info("Dense grid agrees with the cuboid count")

    if args.part in ("2", "both"):
        volume = Reactor(args.store).run_all(instructions)
        print(f"There are {volume} cubes active in the full reactor")

    logger.info(f"Finished in {time.perf_counter() - start:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
