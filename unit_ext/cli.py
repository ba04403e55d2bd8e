import argparse
import logging
import sys
from collections.abc import Sequence

from unit_ext.config import Settings, parse_log_level
from unit_ext.examples import EXAMPLES
from unit_ext.result import Err, Ok


def handle_demo(names: Sequence[str]) -> int:
    """Run the named example chains (all of them when ``names`` is empty)."""
    unknown = [n for n in names if n not in EXAMPLES]
    if unknown:
        print(f"Unknown example(s): {', '.join(unknown)}", file=sys.stderr)
        print(f"Available: {', '.join(EXAMPLES)}", file=sys.stderr)
        return 1

    for name in names or list(EXAMPLES):
        print(f"{name}: {EXAMPLES[name]()!r}")
    return 0


def handle_list() -> int:
    for name in EXAMPLES:
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unit-ext",
        description="Run the unit_ext example chains.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        metavar="LEVEL",
        help="Log level (overrides UNIT_EXT_LOG_LEVEL).",
    )
    subparsers = parser.add_subparsers(dest="command")

    demo_parser = subparsers.add_parser("demo", help="Run example chains and print their values.")
    demo_parser.add_argument("names", nargs="*", help="Example names (default: all).")

    subparsers.add_parser("list", help="List example names.")
    return parser


def configure_logging(log_level: str | None) -> int:
    """Set up logging from --log-level, falling back to the environment."""
    if log_level is not None:
        match parse_log_level(log_level):
            case Ok(level):
                pass
            case Err(e):
                print(f"Error: {e}", file=sys.stderr)
                return 1
    else:
        match Settings.from_env():
            case Ok(settings):
                level = settings.log_level
            case Err(e):
                print(f"Error loading settings: {e}", file=sys.stderr)
                return 1

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return 0


def run(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    status = configure_logging(args.log_level)
    if status != 0:
        return status

    match args.command:
        case "demo":
            return handle_demo(args.names)
        case "list":
            return handle_list()
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


def main() -> int:
    """Entry point for the console script."""
    try:
        return run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
