"""Smoke tests: verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from unit_converter import __version__
from unit_converter.cli import exit_codes
from unit_converter.cli.app import main
from unit_converter.exceptions import (
    CategoryMismatchError,
    ConversionError,
    MissingDependencyError,
    NegativeAmountError,
    QueryParseError,
    RegistryError,
    UnitConverterError,
    UnknownUnitError,
    UnsupportedConversionError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            QueryParseError,
            UnknownUnitError,
            NegativeAmountError,
            CategoryMismatchError,
            UnsupportedConversionError,
        ],
    )
    def test_query_errors_are_conversion_errors(
        self, exc_class: type[UnitConverterError]
    ) -> None:
        assert issubclass(exc_class, ConversionError)

    @pytest.mark.parametrize(
        "exc_class",
        [ConversionError, RegistryError, MissingDependencyError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[UnitConverterError]
    ) -> None:
        assert issubclass(exc_class, UnitConverterError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(UnitConverterError, Exception)

    def test_hint_is_stored(self) -> None:
        err = UnitConverterError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = UnitConverterError("boom")
        assert err.hint is None

    def test_parse_error_default_message(self) -> None:
        assert str(QueryParseError()) == "Parse Error"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_no_args_starts_interactive(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from unit_converter.cli import app as app_module

        monkeypatch.setattr(
            app_module, "_handle_interactive", lambda service: exit_codes.SUCCESS,
        )
        assert main([]) == exit_codes.SUCCESS

    def test_units_command_routes_to_table(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        from unit_converter.cli import app as app_module

        monkeypatch.setattr(app_module, "_handle_units", lambda: 42)
        assert main(["units"]) == 42
