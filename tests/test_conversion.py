"""Tests for the conversion engine (core/conversion.py).

Covers linear scaling, the six temperature formulas, identity
conversions and singular/plural label selection.
"""

from __future__ import annotations

import itertools

import pytest

from unit_converter.core import registry as reg
from unit_converter.core.conversion import (
    TEMPERATURE_FORMULAS,
    convert,
    convert_linear,
    convert_request,
    convert_temperature,
)
from unit_converter.core.models import Category, ConversionRequest, UnitDescriptor
from unit_converter.core.registry import DEFAULT_REGISTRY
from unit_converter.exceptions import UnsupportedConversionError

LENGTH_UNITS = DEFAULT_REGISTRY.by_category()[Category.LENGTH]
WEIGHT_UNITS = DEFAULT_REGISTRY.by_category()[Category.WEIGHT]
LINEAR_PAIRS = [
    *itertools.permutations(LENGTH_UNITS, 2),
    *itertools.permutations(WEIGHT_UNITS, 2),
]


# ---------------------------------------------------------------------------
# Linear
# ---------------------------------------------------------------------------

class TestLinear:
    def test_km_to_mi(self) -> None:
        assert convert_linear(10.0, reg.KILOMETER, reg.MILE) == 10.0 * 1000.0 / 1609.35

    def test_kg_to_g(self) -> None:
        assert convert_linear(2.0, reg.KILOGRAM, reg.GRAM) == 2000.0

    def test_no_rounding(self) -> None:
        result = convert(1.0, reg.FOOT, reg.METER)
        assert result.value == 0.3048

    @pytest.mark.parametrize(
        ("source", "target"),
        LINEAR_PAIRS,
        ids=lambda unit: unit.key,
    )
    def test_round_trip(self, source: UnitDescriptor, target: UnitDescriptor) -> None:
        there = convert(12.5, source, target).value
        back = convert(there, target, source).value
        assert back == pytest.approx(12.5)


# ---------------------------------------------------------------------------
# Temperature
# ---------------------------------------------------------------------------

class TestTemperature:
    @pytest.mark.parametrize(
        ("source", "target", "amount", "expected"),
        [
            (reg.CELSIUS, reg.FAHRENHEIT, 100.0, 212.0),
            (reg.CELSIUS, reg.FAHRENHEIT, -40.0, -40.0),
            (reg.FAHRENHEIT, reg.CELSIUS, 212.0, 100.0),
            (reg.FAHRENHEIT, reg.CELSIUS, 32.0, 0.0),
            (reg.CELSIUS, reg.KELVIN, 0.0, 273.15),
            (reg.KELVIN, reg.CELSIUS, 273.15, 0.0),
            (reg.FAHRENHEIT, reg.KELVIN, 32.0, 273.15),
            (reg.KELVIN, reg.FAHRENHEIT, 0.0, -459.67),
        ],
    )
    def test_formulas(
        self,
        source: UnitDescriptor,
        target: UnitDescriptor,
        amount: float,
        expected: float,
    ) -> None:
        assert convert_temperature(amount, source, target) == pytest.approx(expected)

    def test_six_directional_formulas(self) -> None:
        assert len(TEMPERATURE_FORMULAS) == 6

    def test_unlisted_pair_is_rejected(self) -> None:
        rankine = UnitDescriptor(
            key="rankine",
            aliases=("r", "rankine", "degree Rankine", "degrees Rankine"),
            category=Category.TEMPERATURE,
        )
        with pytest.raises(UnsupportedConversionError, match="degrees Rankine"):
            convert(10.0, rankine, reg.CELSIUS)


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

class TestIdentity:
    @pytest.mark.parametrize("unit", DEFAULT_REGISTRY.units(), ids=lambda unit: unit.key)
    @pytest.mark.parametrize("amount", [0.0, 1.0, 3.3, 1609.35, -17.2])
    def test_same_unit_is_unchanged(self, unit: UnitDescriptor, amount: float) -> None:
        assert convert(amount, unit, unit).value == amount


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

class TestLabels:
    def test_singular_source_plural_target(self) -> None:
        result = convert(1.0, reg.MILE, reg.KILOMETER)
        assert result.source_label == "mile"
        assert result.target_label == "kilometers"

    def test_plural_source_singular_target(self) -> None:
        result = convert(1000.0, reg.METER, reg.KILOMETER)
        assert result.source_label == "meters"
        assert result.target_label == "kilometer"
        assert result.describe() == "1000.0 meters is 1.0 kilometer"

    def test_temperature_long_forms(self) -> None:
        result = convert(100.0, reg.CELSIUS, reg.FAHRENHEIT)
        assert result.describe() == "100.0 degrees Celsius is 212.0 degrees Fahrenheit"

    def test_feet_plural(self) -> None:
        assert convert(2.0, reg.FOOT, reg.FOOT).source_label == "feet"

    def test_convert_request(self) -> None:
        request = ConversionRequest(amount=1.0, source=reg.POUND, target=reg.GRAM)
        result = convert_request(request)
        assert result.value == 453.592
        assert result.source_label == "pound"
        assert result.target_label == "grams"
