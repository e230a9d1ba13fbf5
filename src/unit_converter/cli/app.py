"""CLI application entry point and command routing for unit-converter.

This module is the **sole error boundary** for the entire application.
It catches :class:`~unit_converter.exceptions.UnitConverterError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core
  service.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from unit_converter.cli import exit_codes
from unit_converter.cli.console import console, err_console, get_rich_console
from unit_converter.core.conversion_service import ConversionService
from unit_converter.exceptions import UnitConverterError
from unit_converter.version import __version__

UNITS_COMMAND = "units"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``unit-converter``              : interactive loop
    * ``unit-converter 10 km to mi``  : one-shot conversion
    * ``unit-converter units``        : list supported units
    * ``unit-converter --version``
    """
    parser = argparse.ArgumentParser(
        prog="unit-converter",
        description="Convert length, weight and temperature units.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing and conversion steps to stderr.",
    )
    parser.add_argument(
        "query",
        nargs="*",
        help="Query such as '10 km to mi', or 'units' to list units. "
        "Omit to start the interactive prompt.",
    )
    return parser


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    """Send debug records to stderr, through Rich when it is installed."""
    if not verbose:
        return
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=get_rich_console(stderr=True),
                show_time=False,
                show_path=False,
            ),
        ],
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_convert(service: ConversionService, words: list[str]) -> int:
    """Convert a query given on the command line.

    Conversion errors propagate to :func:`cli` like any other
    :class:`UnitConverterError`.
    """
    result = service.run_query(" ".join(words))
    console.print(result.describe(), markup=False)
    return exit_codes.SUCCESS


def _handle_interactive(service: ConversionService) -> int:
    """Dispatch the interactive prompt loop."""
    from unit_converter.cli.interactive import run_interactive

    return run_interactive(service)


def _handle_units() -> int:
    """Dispatch the ``units`` listing command."""
    from unit_converter.cli.units_table import run_units
    from unit_converter.core.registry import DEFAULT_REGISTRY

    return run_units(DEFAULT_REGISTRY)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the unit-converter CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    words: list[str] = args.query
    service = ConversionService()

    if not words:
        return _handle_interactive(service)

    if len(words) == 1 and words[0].lower() == UNITS_COMMAND:
        return _handle_units()

    return _handle_convert(service, words)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UnitConverterError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
