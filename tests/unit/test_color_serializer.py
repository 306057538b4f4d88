"""Unit tests for rgbacolor.color.serializer.to_string()."""

from __future__ import annotations

import math

import numpy as np
import pytest

from rgbacolor.color.parser import parse
from rgbacolor.color.serializer import to_string


class TestToString:
    """to_string() emits rgba(R,G,B,A) without spaces."""

    def test_opaque(self) -> None:
        assert to_string((255, 0, 0, 1.0)) == "rgba(255,0,0,1)"

    def test_half_alpha(self) -> None:
        assert to_string((0, 128, 255, 0.5)) == "rgba(0,128,255,0.5)"

    def test_zero_alpha(self) -> None:
        assert to_string((0, 0, 0, 0.0)) == "rgba(0,0,0,0)"

    def test_missing_alpha_defaults_to_one(self) -> None:
        assert to_string((1, 2, 3)) == "rgba(1,2,3,1)"

    def test_none_alpha_defaults_to_one(self) -> None:
        assert to_string((1, 2, 3, None)) == "rgba(1,2,3,1)"

    def test_fractional_channels_rounded(self) -> None:
        assert to_string((1.4, 2.5, 3.0, 1)) == "rgba(1,3,3,1)"

    def test_alpha_not_rounded(self) -> None:
        assert to_string((0, 0, 0, 128 / 255)) == "rgba(0,0,0,0.5019607843137255)"

    def test_no_clamping(self) -> None:
        assert to_string((300, -5, 0, 2)) == "rgba(300,-5,0,2)"

    def test_list_input(self) -> None:
        assert to_string([10, 20, 30, 0.25]) == "rgba(10,20,30,0.25)"

    def test_numpy_input(self) -> None:
        arr = np.array([255, 128, 0, 0.25])
        assert to_string(arr) == "rgba(255,128,0,0.25)"

    def test_numpy_uint8_rgb(self) -> None:
        assert to_string(np.array([1, 2, 3], dtype=np.uint8)) == "rgba(1,2,3,1)"

    @pytest.mark.parametrize(
        "color,expected",
        [
            ((math.nan, 0, 0, 1), "rgba(0,0,0,1)"),
            ((math.inf, 0, 0, 1), "rgba(0,0,0,1)"),
            ((0, -math.inf, 7, 1), "rgba(0,0,7,1)"),
            (np.array([np.nan, 1, 2, 0.5]), "rgba(0,1,2,0.5)"),
        ],
    )
    def test_non_finite_channels_become_zero(self, color, expected: str) -> None:
        assert to_string(color) == expected


class TestNumberFormatting:
    """Alpha and integral channels print like ECMAScript Number#toString."""

    @pytest.mark.parametrize(
        "alpha,expected",
        [
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (0.000001, "0.000001"),
            (0.1, "0.1"),
            (1e21, "1e+21"),
            (1e20, "100000000000000000000"),
            (123.456, "123.456"),
            (-0.25, "-0.25"),
            (-0.0, "0"),
            (math.nan, "NaN"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
        ],
    )
    def test_alpha(self, alpha: float, expected: str) -> None:
        assert to_string((0, 0, 0, alpha)) == f"rgba(0,0,0,{expected})"

    def test_large_integral_channel(self) -> None:
        assert to_string((1e21, 0, 0)) == "rgba(1e+21,0,0,1)"


class TestRoundTrip:
    """parse(to_string(t)) reproduces t for integral channels."""

    @pytest.mark.parametrize(
        "color",
        [
            (0, 0, 0, 0.0),
            (255, 255, 255, 1.0),
            (12, 34, 56, 128 / 255),
            (1, 2, 3, 0.1),
            (200, 100, 50, 1 / 3),
        ],
    )
    def test_round_trip(self, color: tuple) -> None:
        assert parse(to_string(color)) == color
