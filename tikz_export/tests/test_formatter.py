"""Tests for locale-independent coordinate formatting."""

from __future__ import annotations

import locale

import pytest

from tikz_export.geometry.primitives import Point
from tikz_export.markup.formatter import clamp_precision, format_point, format_scalar


class TestFormatScalar:
    def test_default_two_digits(self) -> None:
        assert format_scalar(1) == "1.00"

    def test_precision_three(self) -> None:
        assert format_scalar(2.5, precision=3) == "2.500"

    def test_rounds_to_precision(self) -> None:
        assert format_scalar(0.126) == "0.13"

    def test_negative_precision_clamped(self) -> None:
        assert clamp_precision(-4) == 0
        assert format_scalar(3.7, precision=-1) == "4"

    def test_no_grouping_separator(self) -> None:
        assert format_scalar(1234567.5) == "1234567.50"


class TestFormatPoint:
    def test_point(self) -> None:
        assert format_point(Point(0, 1)) == "(0.00, 1.00)"

    def test_tuple_accepted(self) -> None:
        assert format_point((-1.5, 2), precision=1) == "(-1.5, 2.0)"

    def test_ignores_process_locale(self) -> None:
        saved = locale.setlocale(locale.LC_NUMERIC)
        try:
            try:
                locale.setlocale(locale.LC_NUMERIC, "de_DE.UTF-8")
            except locale.Error:
                pytest.skip("de_DE locale not available")
            assert format_point(Point(1.5, 2.25)) == "(1.50, 2.25)"
        finally:
            locale.setlocale(locale.LC_NUMERIC, saved)

    def test_ignores_locale_conventions(self, monkeypatch: pytest.MonkeyPatch) -> None:
        german = dict(locale.localeconv())
        german.update(decimal_point=",", thousands_sep=".", grouping=[3, 3, 0])
        monkeypatch.setattr(locale, "localeconv", lambda: german)
        assert format_point(Point(1234.5, -2.25)) == "(1234.50, -2.25)"
        assert format_scalar(1234567.125, precision=1) == "1234567.1"
