"""CLI interface for matrix_tones."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .directions import DIRECTION_ORDER
from .exceptions import MatrixTonesError
from .generator import ToneGenerator
from .plans import PLANS
from .sink import describe_output


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate test tones for matrix surround decoders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory to write the WAV files into (default: current directory)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show detailed progress"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args()

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(levelname)s: %(message)s',
            stream=sys.stderr,
        )
    else:
        logging.basicConfig(level=logging.WARNING)

    print("Generating test tones for use with matrix decoders")
    print()
    print("Tones are always in the order:")
    for direction in DIRECTION_ORDER:
        print(f"\t{direction.value}")

    try:
        generator = ToneGenerator()
        for filename, make_plan in PLANS.items():
            path = generator.generate(args.output_dir / filename, make_plan())
            if args.verbose:
                print(describe_output(path), file=sys.stderr)
        return 0

    except MatrixTonesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
