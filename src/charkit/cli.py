#!/usr/bin/env python3
import argparse
import random
import sys

from charkit import __version__
from charkit.lib import chars
from charkit.lib.char_set import CharSet
from charkit.lib.config import Config
from charkit.lib.errors import CharSetError
from charkit.lib.logger import Logger


def _parse_length(text: str) -> int | tuple[int, int]:
    """
    Parse a length argument of the form 'N' or 'MIN-MAX'.

    Raises:
        ValueError: If the text is not a length or length range.
    """

    low, sep, high = str(text).strip().partition("-")
    try:
        if sep:
            return int(low), int(high)
        return int(low)
    except ValueError:
        raise ValueError(f"Invalid length '{text}'. Use N or MIN-MAX.") from None


def _error_message(e: Exception) -> str:
    """Return an exception's message without KeyError's repr quoting."""

    if isinstance(e, KeyError) and e.args:
        return str(e.args[0])
    return str(e)


def _build_charset(ns: argparse.Namespace) -> CharSet:
    """Combine the named sets and literal characters selected on the command line."""

    names = ns.charset or []
    if not names and not ns.chars:
        default = Config.get("generator", "charset", "alpha_numeric")
        names = [name for name in default.split(",") if name.strip()]

    return CharSet(chars.combine(*names), list(ns.chars or ""))


def _add_charset_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--charset",
        action="append",
        metavar="NAME",
        help="Predefined character set to include (repeatable). See 'charkit charsets'.",
    )
    parser.add_argument("--chars", metavar="STR", help="Literal characters to include")


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level argparse parser with subcommands."""

    parser = argparse.ArgumentParser(prog="charkit", description="charkit CLI")
    parser.add_argument("--config", metavar="PATH", help="Path to a charkit.cfg file")
    sub = parser.add_subparsers(dest="command", required=True)

    p_version = sub.add_parser("version", help="Print the package version")
    p_version.set_defaults(handler=cmd_version)

    p_charsets = sub.add_parser("charsets", help="List the predefined character sets")
    p_charsets.set_defaults(handler=cmd_charsets)

    p_random = sub.add_parser("random", help="Generate random strings from a character set")
    _add_charset_options(p_random)
    p_random.add_argument("-l", "--length", help="String length, as N or MIN-MAX")
    p_random.add_argument("-n", "--count", type=int, help="Number of strings to generate")
    p_random.add_argument("--seed", type=int, help="Seed for reproducible output")
    p_random.set_defaults(handler=cmd_random)

    p_check = sub.add_parser("check", help="Check that text only uses characters from a set")
    _add_charset_options(p_check)
    p_check.add_argument("text", help="The text to check")
    p_check.set_defaults(handler=cmd_check)

    return parser


def cmd_version(_: argparse.Namespace) -> int:
    """
    Print the package version.

    Args:
        _ (argparse.Namespace): Unused argparse namespace.

    Returns:
        int: Process exit code (0 on success).
    """

    print(__version__)
    return 0


def cmd_charsets(_: argparse.Namespace) -> int:
    """Print each predefined character set with its size."""

    for name in chars.names():
        print(f"{name:<24}{len(chars.get(name))}")
    return 0


def cmd_random(ns: argparse.Namespace) -> int:
    """
    Print random strings drawn from the selected character set.

    Args:
        ns (argparse.Namespace): Parsed 'random' arguments.

    Returns:
        int: Process exit code (0 on success, 1 on invalid input).
    """

    try:
        seed = ns.seed if ns.seed is not None else Config.get("random", "seed")
        if seed is not None:
            Logger.debug(f"Seeding random source with {seed}.")

        charset = _build_charset(ns).with_rng(random.Random(seed))
        length = _parse_length(ns.length or Config.get("generator", "length", "8"))
        count = ns.count if ns.count is not None else Config.get("generator", "count", 1)

        Logger.debug(f"Generating {count} string(s) from {len(charset)} characters...")
        for _ in range(count):
            print(charset.random_string(length))
        return 0

    except (CharSetError, KeyError, ValueError) as e:
        if Config.get("dev", "stack_trace_errors", False):
            raise

        Logger.error(_error_message(e))
        return 1


def cmd_check(ns: argparse.Namespace) -> int:
    try:
        charset = _build_charset(ns)
    except (CharSetError, KeyError) as e:
        if Config.get("dev", "stack_trace_errors", False):
            raise

        Logger.error(_error_message(e))
        return 1

    missing = [char for char in dict.fromkeys(ns.text) if char not in charset]
    if missing:
        Logger.error(f"Characters not in the set: {''.join(missing)!r}")
        return 1

    Logger.success("All characters are in the set.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `charkit` CLI.

    Initializes logging, loads configuration, and dispatches subcommands.

    Args:
        argv (list[str] | None): Arguments excluding the executable; if None, uses sys.argv[1:].

    Returns:
        int: Process exit code.
    """

    Logger.setup(Logger.INFO)

    parser = _build_parser()
    ns = parser.parse_args(argv)

    Config.load(ns.config)
    Logger.set_level(Config.get("dev", "log_level", Logger.INFO))

    return ns.handler(ns)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        if Config._data is not None and Config.get("dev", "stack_trace_errors", False):
            raise
        Logger.error(f"Error: {e}")
        sys.exit(1)
