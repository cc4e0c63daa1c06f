from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..image_job import DEFAULT_HEIGHT, DEFAULT_OUTPUT, DEFAULT_WIDTH, ImageJobBuilder, ImageSettings

GREETING = "Hello world!"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="pixelgen: write a 1-bit grayscale PNG of randomly shuffled pixel rows."
    )
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help=f"Output PNG path (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT, help="Image height in pixels")
    parser.add_argument("--seed", type=int, help="Seed a private random source for reproducible output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    print(GREETING)
    settings = ImageSettings(width=args.width, height=args.height, seed=args.seed)
    try:
        header = ImageJobBuilder(settings).write_file(args.output)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    kind = "grayscale" if header.is_grayscale else f"color type {header.color_type}"
    print(f"Wrote {args.output} ({header.width}x{header.height}, {header.bit_depth}-bit {kind})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
