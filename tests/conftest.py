"""Shared pytest fixtures and configuration for the unit-converter test suite.

Guidelines
----------
* No terminal interaction: prompts are replaced at the CLI boundary.
* Core tests must be pure: no side effects.
"""

from __future__ import annotations

import pytest

from unit_converter.core.conversion_service import ConversionService
from unit_converter.core.registry import UnitRegistry


@pytest.fixture()
def registry() -> UnitRegistry:
    return UnitRegistry()


@pytest.fixture()
def service(registry: UnitRegistry) -> ConversionService:
    return ConversionService(registry)
