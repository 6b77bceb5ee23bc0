"""
Indian PIN Code Lookup — Interactive CLI
========================================
Thin wrapper around the inpincode library.

Usage:
    inpincode                # interactive mode
    inpincode 744301         # single lookup
    inpincode states         # list states / union territories

The data file is read from the environment:
    INPINCODE_DATA_FILE   Path to a GeoNames IN.txt dump
    INPINCODE_LOG_LEVEL   Diagnostic log level (default WARNING)

If not set, the sample dump bundled with the package is used.
"""

import sys
from typing import Optional, Sequence

import structlog

from inpincode import config
from inpincode.client import InPincode
from inpincode.pincode import validate

_BANNER = """\
╔══════════════════════════════════════╗
║        Indian PIN Code Lookup        ║
║    PIN → State, District, Place      ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


_LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "notset")


def _configure_logging(level: str) -> None:
    """Send structlog output to stderr at *level*."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _print_result(client: InPincode, raw_pincode: str) -> bool:
    result = client.find(raw_pincode)
    if not result.is_valid:
        return False
    for key, val in result.to_dict().items():
        print(f"{key:>14}: {val}")
    return True


def _run_interactive(client: InPincode) -> None:
    print(_BANNER)

    while True:
        try:
            raw_pincode = input("\nPIN code:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw_pincode.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw_pincode:
            print("  ✗ PIN code is required.")
            continue
        if not validate(raw_pincode):
            print(f"  ✗ A PIN code is six digits: '{raw_pincode}'")
            continue

        if not _print_result(client, raw_pincode):
            print(f"  ✗ No record for '{raw_pincode}'")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point — supports both CLI args and interactive mode."""
    args = list(sys.argv[1:] if argv is None else argv)
    level = config.log_level().lower()
    if level not in _LOG_LEVELS:
        print(
            f"Invalid INPINCODE_LOG_LEVEL {level.upper()!r}; "
            f"use one of: {', '.join(name.upper() for name in _LOG_LEVELS)}.",
            file=sys.stderr,
        )
        sys.exit(2)
    _configure_logging(level)

    client = InPincode()
    if not len(client):
        print(
            f"Warning: no postal codes loaded from {config.data_file()}. "
            "Set INPINCODE_DATA_FILE to a GeoNames IN.txt dump.",
            file=sys.stderr,
        )

    if len(args) == 1 and args[0] == "states":
        for state in client.get_states():
            print(f"{state.code:>4}  {state.name}")
    elif len(args) == 1:
        if not _print_result(client, args[0]):
            print(f"No record for '{args[0]}'.", file=sys.stderr)
            sys.exit(1)
    elif not args:
        _run_interactive(client)
    else:
        print(__doc__, file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
