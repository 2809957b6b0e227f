"""
Test suite for significant-digit rounding and locale-aware number rendering.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from babel import Locale

# Local ----------------------------------------------------------------------------------------------------------------
from humanunit.numbers import (
    LocaleFallbackWarning,
    NumbersConf,
    format_significant,
    resolve_locale,
    round_significant,
    validate_digits,
)


class TestRoundSignificant:
    """Rounding to significant digits in decimal arithmetic."""

    @pytest.mark.parametrize(
        "value, digits, expected",
        [
            pytest.param(12.345, 4, Decimal("12.35"), id="shortest-repr-tie"),
            pytest.param(1.005, 3, Decimal("1.01"), id="tie-away-from-zero"),
            pytest.param(-2.5, 1, Decimal("-3"), id="negative-tie"),
            pytest.param(1234.5, 3, Decimal("1.23E+3"), id="integer-digits"),
            pytest.param(999.6, 3, Decimal("1000"), id="carry"),
            pytest.param(0.00012345, 2, Decimal("0.00012"), id="small"),
            pytest.param(0, 3, Decimal("0"), id="zero"),
        ],
    )
    def test_round(self, value, digits, expected):
        assert round_significant(value, digits) == expected

    def test_invalid_digits(self):
        with pytest.raises(ValueError):
            round_significant(1.5, 0)

    @pytest.mark.parametrize("value", [math.nan, math.inf, Decimal("Infinity")])
    def test_non_finite(self, value):
        with pytest.raises(ValueError, match=r"finite"):
            round_significant(value, 3)


class TestFormatSignificant:
    """Locale-aware rendering of rounded numbers."""

    @pytest.mark.parametrize(
        "number, kwargs, expected",
        [
            pytest.param(1234.5, {}, "1230", id="default-3-digits"),
            pytest.param(1.5, {}, "1.5", id="trailing-zeros-dropped"),
            pytest.param(1.5, {"max_digits": 4, "min_digits": 4}, "1.500", id="min-digits-pad"),
            pytest.param(12, {"min_digits": 3}, "12.0", id="min-digits-int"),
            pytest.param(0, {}, "0", id="zero"),
            pytest.param(0, {"min_digits": 3}, "0.00", id="zero-min-digits"),
            pytest.param(-12.345, {"max_digits": 4}, "-12.35", id="negative"),
            pytest.param(0.000123456, {}, "0.000123", id="small"),
            pytest.param(Decimal("12.5"), {"max_digits": 2}, "13", id="decimal-input"),
        ],
    )
    def test_en_us(self, number, kwargs, expected):
        assert format_significant(number, **kwargs) == expected

    @pytest.mark.parametrize(
        "locale, grouping, expected",
        [
            pytest.param("en-US", True, "1,234.5", id="en-US"),
            pytest.param("en-US", False, "1234.5", id="en-US-no-grouping"),
            pytest.param("de-DE", True, "1.234,5", id="de-DE"),
            pytest.param("de-DE", False, "1234,5", id="de-DE-no-grouping"),
            pytest.param("de_DE", True, "1.234,5", id="posix-separator"),
        ],
    )
    def test_locales(self, locale, grouping, expected):
        assert format_significant(1234.5, locale=locale, max_digits=5, grouping=grouping) == expected

    def test_locale_grouping_sizes(self):
        """Grouping sizes follow the locale pattern."""
        assert format_significant(1234567, locale="en-IN", max_digits=7, grouping=True) == "12,34,567"

    def test_huge_values_positional(self):
        """Huge values keep every integer digit instead of E-notation."""
        assert format_significant(1.5e40) == "15" + "0" * 39
        assert format_significant(1.5e40, grouping=True).startswith("15,000,000")

    def test_tiny_values_positional(self):
        assert format_significant(1.25e-30, max_digits=2) == "0." + "0" * 29 + "13"

    @pytest.mark.parametrize("number", ["1", None, True])
    def test_invalid_number_type(self, number):
        with pytest.raises(TypeError):
            format_significant(number)

    def test_non_finite(self):
        with pytest.raises(ValueError):
            format_significant(math.inf)


class TestResolveLocale:

    def test_bcp47(self):
        locale = resolve_locale("de-DE")
        assert isinstance(locale, Locale)
        assert (locale.language, locale.territory) == ("de", "DE")

    def test_cached(self):
        assert resolve_locale("fr-FR") is resolve_locale("fr-FR")

    def test_unknown_falls_back(self, fresh_locales):
        with pytest.warns(LocaleFallbackWarning, match=r"falling back"):
            locale = resolve_locale("xx-XX")
        assert str(locale) == NumbersConf.LOCALE.replace("-", "_")

    @pytest.mark.parametrize("identifier", ["", "not a locale", "12-34"])
    def test_malformed(self, identifier, fresh_locales):
        with pytest.raises(ValueError, match=r"invalid locale"):
            resolve_locale(identifier)

    def test_type(self):
        with pytest.raises(TypeError):
            resolve_locale(None)


class TestValidateDigits:

    @pytest.mark.parametrize("max_digits, min_digits", [(1, 1), (3, 1), (21, 21)])
    def test_valid(self, max_digits, min_digits):
        validate_digits(max_digits=max_digits, min_digits=min_digits)

    @pytest.mark.parametrize(
        "max_digits, min_digits, error",
        [
            pytest.param(0, 1, ValueError, id="max-zero"),
            pytest.param(22, 1, ValueError, id="max-22"),
            pytest.param(3, 0, ValueError, id="min-zero"),
            pytest.param(2, 3, ValueError, id="min-above-max"),
            pytest.param(3.0, 1, TypeError, id="float"),
            pytest.param(True, 1, TypeError, id="bool"),
        ],
    )
    def test_invalid(self, max_digits, min_digits, error):
        with pytest.raises(error):
            validate_digits(max_digits=max_digits, min_digits=min_digits)

    def test_custom_names(self):
        with pytest.raises(ValueError, match=r"lo must be <= hi"):
            validate_digits(max_digits=1, min_digits=2, max_name="hi", min_name="lo")
