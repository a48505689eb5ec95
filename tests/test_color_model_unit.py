"""
Unit tests for the color model.

Covers construction from bytes, hex, floats and HSL, the HSL conversion,
hex formatting and the weighted RGB distance.
"""

import math

import pytest

from palettekit.config import config
from palettekit.colors.model import Color, clamp, color_distance


class TestConstruction:
    """Test byte construction and value semantics"""

    def test_defaults_to_opaque(self):
        assert Color(1, 2, 3).a == 255
        assert Color.from_bytes(1, 2, 3, 4) == Color(1, 2, 3, 4)

    def test_value_semantics(self):
        """Equal channels mean equal, hashable colors"""
        assert Color(10, 20, 30, 40) == Color(10, 20, 30, 40)
        assert len({Color(10, 20, 30), Color(10, 20, 30), Color(10, 20, 31)}) == 2

    def test_immutable(self):
        c = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 5

    def test_out_of_range_channel_rejected(self):
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color(0, -1, 0)

    def test_non_integer_channel_rejected(self):
        with pytest.raises(TypeError):
            Color(1.5, 0, 0)


class TestHexParsing:
    """Test hex string parsing and its permissive fallbacks"""

    def test_six_digit_hex_is_opaque(self):
        assert Color.from_hex("#FF8000") == Color(255, 128, 0, 255)
        assert Color.from_hex("ff8000") == Color(255, 128, 0, 255)

    def test_eight_digit_hex_includes_alpha(self):
        assert Color.from_hex("#1F4E7980") == Color(31, 78, 121, 128)

    def test_case_insensitive(self):
        assert Color.from_hex("#d3b58f") == Color.from_hex("#D3B58F")

    @pytest.mark.parametrize("bad", ["", "#", "#FFF", "#FFFFF", "#FFFFFFF", "#FFFFFFFFF"])
    def test_wrong_length_yields_zero_color(self, bad):
        assert Color.from_hex(bad) == Color(0, 0, 0, 0)

    def test_invalid_digits_parse_as_zero(self):
        """Only the malformed channel falls back to 0"""
        assert Color.from_hex("#GG8000") == Color(0, 128, 0, 255)
        assert Color.from_hex("#+F8000") == Color(0, 128, 0, 255)

    def test_strict_mode_raises(self, monkeypatch):
        monkeypatch.setattr(config, "STRICT_HEX", True)
        with pytest.raises(ValueError):
            Color.from_hex("#FFF")
        with pytest.raises(ValueError):
            Color.from_hex("#GGGGGG")

    def test_hex_roundtrip_recovers_rgb(self):
        for c in [Color(0, 0, 0), Color(255, 255, 255), Color(31, 78, 121, 7), Color(211, 181, 143, 0)]:
            parsed = Color.from_hex(c.to_hex() + "FF")
            assert (parsed.r, parsed.g, parsed.b) == (c.r, c.g, c.b)


class TestFloats:
    """Test normalized float conversion"""

    def test_truncates_not_rounds(self):
        assert Color.from_floats(0.5, 0.5, 0.5, 1.0) == Color(127, 127, 127, 255)

    def test_clamps_out_of_range(self):
        assert Color.from_floats(-1.0, 2.0, 1.0, 5.0) == Color(0, 255, 255, 255)

    def test_nan_clamps_to_zero(self):
        assert clamp(float("nan")) == 0.0

    def test_to_floats(self):
        assert Color(255, 0, 51, 255).to_floats() == pytest.approx((1.0, 0.0, 0.2, 1.0))


class TestHSL:
    """Test RGB <-> HSL conversions"""

    def test_primary_colors(self, red, green, blue):
        assert red.to_hsl() == pytest.approx((0.0, 1.0, 0.5))
        assert green.to_hsl() == pytest.approx((120.0, 1.0, 0.5))
        assert blue.to_hsl() == pytest.approx((240.0, 1.0, 0.5))

    def test_achromatic_has_zero_hue_and_saturation(self):
        h, s, l = Color(128, 128, 128).to_hsl()
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(128 / 255)

    def test_channel_precedence_on_shared_maximum(self):
        """Red wins ties for the maximum, then green"""
        assert Color(255, 255, 0).to_hsl()[0] == pytest.approx(60.0)
        assert Color(255, 0, 255).to_hsl()[0] == pytest.approx(300.0)
        assert Color(0, 255, 255).to_hsl()[0] == pytest.approx(180.0)

    def test_from_hsl_primaries(self, red, green, blue):
        assert Color.from_hsl(0, 1, 0.5) == red
        assert Color.from_hsl(120, 1, 0.5) == green
        assert Color.from_hsl(240, 1, 0.5) == blue

    def test_from_hsl_wraps_hue(self, green, blue):
        assert Color.from_hsl(-120, 1, 0.5) == blue
        assert Color.from_hsl(480, 1, 0.5) == green

    def test_from_hsl_alpha(self):
        assert Color.from_hsl(0, 1, 0.5, 0.0).a == 0
        assert Color.from_hsl(0, 1, 0.5).a == 255

    def test_hsl_roundtrip_within_one(self):
        """from_hsl(to_hsl(c)) reconstructs every channel within ±1"""
        steps = range(0, 256, 17)
        for r in steps:
            for g in steps:
                for b in steps:
                    c = Color(r, g, b, 200)
                    h, s, l = c.to_hsl()
                    back = Color.from_hsl(h, s, l, c.a / 255)
                    for name in ("r", "g", "b", "a"):
                        assert abs(getattr(back, name) - getattr(c, name)) <= 1, (c, back)


class TestHexFormatting:

    def test_uppercase_without_alpha(self):
        assert Color(10, 42, 67, 0).to_hex() == "#0A2A43"
        assert str(Color(255, 255, 255)) == "#FFFFFF"


class TestColorDistance:
    """Test the redness-weighted RGB distance"""

    def test_zero_for_identical(self):
        for c in [Color(0, 0, 0), Color(45, 117, 96), Color(255, 255, 255, 0)]:
            assert color_distance(c, c) == 0

    def test_symmetric(self):
        pairs = [
            (Color(255, 0, 0), Color(0, 0, 255)),
            (Color(31, 78, 121), Color(211, 181, 143)),
            (Color(10, 10, 10), Color(250, 5, 128)),
        ]
        for a, b in pairs:
            assert color_distance(a, b) == color_distance(b, a)

    def test_black_white(self):
        expected = 255 * math.sqrt(8 + 255 / 256)
        assert color_distance(Color(0, 0, 0), Color(255, 255, 255)) == pytest.approx(expected)

    def test_green_weight(self):
        assert color_distance(Color(0, 0, 0), Color(0, 50, 0)) == pytest.approx(100.0)

    def test_red_weight_depends_on_mean_red(self):
        # rMean = 5 -> (2 + 5/256) * 10^2
        assert color_distance(Color(0, 0, 0), Color(10, 0, 0)) == pytest.approx(
            math.sqrt((2 + 5 / 256) * 100)
        )

    def test_alpha_ignored(self):
        assert color_distance(Color(1, 2, 3, 0), Color(1, 2, 3, 255)) == 0
