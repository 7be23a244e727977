"""Tests for color naming and the per-document registry.

Validates:
    - Palette colors short-circuit (no definition)
    - Derived names contain no digits and are injective
    - First registration defines exactly once; later ones are silent
    - Registries are independent per document
"""

from __future__ import annotations

import itertools

import pytest

from tikz_export.markup.colors import (
    PALETTE,
    Color,
    ColorRegistry,
    canonical_name,
)


@pytest.fixture()
def out() -> list[str]:
    return []


@pytest.fixture()
def registry(out: list[str]) -> ColorRegistry:
    return ColorRegistry(out.append)


# ---------------------------------------------------------------------------
# Color value
# ---------------------------------------------------------------------------


class TestColor:
    def test_channel_range_checked(self) -> None:
        with pytest.raises(ValueError, match="red must be an int in"):
            Color(256, 0, 0)

    @pytest.mark.parametrize("channels", [(True, 0, 0), (0, False, 0), (0, 0, 1.0)])
    def test_non_int_channels_rejected(self, channels) -> None:
        with pytest.raises(ValueError, match="must be an int in"):
            Color(*channels)

    def test_from_float(self) -> None:
        assert Color.from_float(1.0, 0.0, 0.5) == Color(255, 0, 128)

    def test_from_float_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color.from_float(1.2, 0.0, 0.0)

    def test_from_hex(self) -> None:
        assert Color.from_hex("#64c800") == Color(100, 200, 0)
        assert Color.from_hex("64C800") == Color(100, 200, 0)

    def test_hex_name(self) -> None:
        assert Color(100, 200, 0).hex_name == "64c800"

    def test_fractional_channels(self) -> None:
        c = Color(255, 0, 51)
        assert c.red_f == 1.0
        assert c.green_f == 0.0
        assert c.blue_f == pytest.approx(0.2)


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TestCanonicalName:
    def test_palette_red(self) -> None:
        assert canonical_name(Color(255, 0, 0)) == "red"

    def test_digit_mapping(self) -> None:
        # 6->w 4->u c 8->y 0->q 0->q
        assert canonical_name(Color(100, 200, 0)) == "cwucyqq"

    def test_hex_letters_pass_through(self) -> None:
        assert canonical_name(Color(0xAB, 0xCD, 0xEF)) == "cabcdef"

    def test_no_digits(self) -> None:
        levels = range(0, 256, 17)
        for r, g, b in itertools.product(levels, repeat=3):
            name = canonical_name(Color(r, g, b))
            assert not any(ch.isdigit() for ch in name), name

    def test_injective(self) -> None:
        levels = range(0, 256, 15)
        colors = [Color(r, g, b) for r, g, b in itertools.product(levels, repeat=3)]
        names = {canonical_name(c) for c in colors}
        assert len(names) == len(colors)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestColorRegistry:
    @pytest.mark.parametrize("color, name", list(PALETTE.items()))
    def test_palette_never_defined(
        self, registry: ColorRegistry, out: list[str], color: Color, name: str,
    ) -> None:
        assert registry.register(color) == name
        assert out == []
        assert len(registry) == 0

    def test_first_use_defines(self, registry: ColorRegistry, out: list[str]) -> None:
        name = registry.register(Color(100, 200, 0))
        assert name == "cwucyqq"
        assert out == ["\\definecolor{cwucyqq}{rgb}{0.39, 0.78, 0.00}\n"]
        assert name in registry

    def test_idempotent(self, registry: ColorRegistry, out: list[str]) -> None:
        first = registry.register(Color(100, 200, 0))
        second = registry.register(Color(100, 200, 0))
        assert first == second
        assert len(out) == 1

    def test_precision_applies_to_definition(self, out: list[str]) -> None:
        reg = ColorRegistry(out.append, precision=3)
        reg.register(Color(0, 0, 51))
        assert out == ["\\definecolor{cqqqqtt}{rgb}{0.000, 0.000, 0.200}\n"]

    def test_names_in_registration_order(self, registry: ColorRegistry) -> None:
        registry.register(Color(1, 2, 3))
        registry.register(Color(255, 0, 0))
        registry.register(Color(10, 20, 30))
        assert registry.names() == ["cqrqsqt", "cqarure"]

    def test_unbound_records_without_writing(self) -> None:
        reg = ColorRegistry()
        assert reg.register(Color(100, 200, 0)) == "cwucyqq"
        assert "cwucyqq" in reg

    def test_documents_are_independent(self) -> None:
        out_a: list[str] = []
        out_b: list[str] = []
        ColorRegistry(out_a.append).register(Color(100, 200, 0))
        ColorRegistry(out_b.append).register(Color(100, 200, 0))
        assert len(out_a) == 1
        assert len(out_b) == 1
