"""Interactive read-convert-print loop.

Each line typed by the user is handed to the core service and the
resulting sentence is printed.  The loop ends when the first word of a
line is ``exit`` or when the prompt is cancelled (Ctrl+C / Esc).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from unit_converter.cli import exit_codes
from unit_converter.cli.console import console
from unit_converter.core.conversion_service import ConversionService
from unit_converter.exceptions import MissingDependencyError

PROMPT_TEXT = "Enter what you want to convert (or exit):"
EXIT_COMMAND = "exit"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def prompt_query() -> str | None:
    """Ask for one query line.

    Returns ``None`` when the user cancels the prompt.
    """
    questionary = _import_questionary()
    return questionary.text(PROMPT_TEXT).ask()


def is_exit_command(line: str) -> bool:
    """Return ``True`` when the first word of *line* is exactly ``exit``."""
    words = line.split()
    return bool(words) and words[0] == EXIT_COMMAND


def run_interactive(
    service: ConversionService,
    *,
    ask: Callable[[], str | None] = prompt_query,
) -> int:
    """Run the loop until an exit command or a cancelled prompt.

    Parameters
    ----------
    service:
        Service answering each query.
    ask:
        Callable returning the next input line, or ``None`` to stop.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`; query failures are printed,
        never raised.
    """
    while True:
        line = ask()
        if line is None or is_exit_command(line):
            break
        console.print(service.handle_query(line), markup=False)
        console.print()
    return exit_codes.SUCCESS
