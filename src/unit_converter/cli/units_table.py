"""``unit-converter units``: list every supported unit.

Renders a Rich table of the registry (category, aliases, scale factor)
and falls back to aligned plain text when Rich is not installed.
"""

from __future__ import annotations

from unit_converter.cli import exit_codes
from unit_converter.cli.console import console
from unit_converter.core.models import UnitDescriptor
from unit_converter.core.registry import UnitRegistry


# ---------------------------------------------------------------------------
# Row builders (pure)
# ---------------------------------------------------------------------------

def _format_scale(unit: UnitDescriptor) -> str:
    """Render the base-unit factor, or ``"formula"`` for temperature."""
    if not unit.category.is_linear:
        return "formula"
    return repr(unit.scale_to_base)


def _unit_row(unit: UnitDescriptor) -> tuple[str, str, str, str]:
    """Return (unit, category, aliases, scale) for one table row."""
    return (
        unit.key,
        unit.category.label.strip(),
        ", ".join(unit.aliases),
        _format_scale(unit),
    )


def build_rows(registry: UnitRegistry) -> list[tuple[str, str, str, str]]:
    return [_unit_row(unit) for unit in registry.units()]


def _print_plain_units_table(rows: list[tuple[str, str, str, str]]) -> None:
    """Render the unit list without Rich."""
    print(f"{'Unit':<12} {'Category':<12} {'Scale':<10} Aliases")
    print("-" * 72)
    for key, category, aliases, scale in rows:
        print(f"{key:<12} {category:<12} {scale:<10} {aliases}")
    print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_units(registry: UnitRegistry) -> int:
    """Print the unit table and return :data:`exit_codes.SUCCESS`."""
    rows = build_rows(registry)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_units_table(rows)
        return exit_codes.SUCCESS

    table = Table(
        title="Supported units",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Unit", style="bold", min_width=10, no_wrap=True)
    table.add_column("Category", min_width=11, no_wrap=True)
    table.add_column("Scale", justify="right", min_width=8, no_wrap=True)
    table.add_column("Aliases")

    for key, category, aliases, scale in rows:
        table.add_row(key, category, scale, aliases)

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
