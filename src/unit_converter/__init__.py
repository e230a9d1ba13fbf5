"""unit-converter: interactive command-line unit conversion.

Parses queries such as ``10 km to mi`` and converts between length,
weight and temperature units.
"""

from unit_converter.version import __version__

__all__: list[str] = ["__version__"]
