"""Allow ``python -m unit_converter`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m unit_converter`` behaves identically to the
``unit-converter`` console script.
"""

from __future__ import annotations

from unit_converter.cli.app import cli

if __name__ == "__main__":
    cli()
