"""
Test suite for std_numeric() and std_float() input coercion.
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

# Local ----------------------------------------------------------------------------------------------------------------

from humanunit.numeric import std_float, std_numeric


class TestStdNumericBasicTypes:
    """Test standard Python numeric types (int, float, None)."""

    @pytest.mark.parametrize(
        "value, expected, expected_type",
        [
            pytest.param(42, 42, int, id="int"),
            pytest.param(3.25, 3.25, float, id="float"),
            pytest.param(None, None, type(None), id="none"),
            pytest.param(10 ** 400, 10 ** 400, int, id="huge-int"),
            pytest.param(-3.5, -3.5, float, id="negative-float"),
        ],
    )
    def test_preserve_value_type(self, value, expected, expected_type):
        res = std_numeric(value)
        assert res == expected
        assert isinstance(res, expected_type)

    def test_special_floats(self):
        assert math.isnan(std_numeric(math.nan))
        assert std_numeric(-math.inf) == -math.inf


class TestStdNumericStdlib:

    @pytest.mark.parametrize(
        "value, expected, expected_type",
        [
            pytest.param(Decimal("42.0"), 42, int, id="decimal-int"),
            pytest.param(Decimal("3.5"), 3.5, float, id="decimal-fraction"),
            pytest.param(Fraction(6, 3), 2, int, id="fraction-int"),
            pytest.param(Fraction(1, 4), 0.25, float, id="fraction"),
        ],
    )
    def test_decimal_fraction(self, value, expected, expected_type):
        res = std_numeric(value)
        assert res == expected
        assert isinstance(res, expected_type)

    def test_decimal_specials(self):
        assert math.isnan(std_numeric(Decimal("NaN")))
        assert std_numeric(Decimal("-Infinity")) == -math.inf


class TestStdNumericErrors:

    @pytest.mark.parametrize("value", ["1", b"1", [1], {"a": 1}, object()])
    def test_unsupported(self, value):
        with pytest.raises(TypeError, match=r"unsupported numeric type"):
            std_numeric(value)

    def test_bool(self):
        with pytest.raises(TypeError, match=r"boolean"):
            std_numeric(True)
        assert std_numeric(True, allow_bool=True) == 1

    def test_int_only_type(self):
        class MyInt:
            def __int__(self):
                return 42

        assert std_numeric(MyInt()) == 42

    def test_broken_float(self):
        class Broken:
            def __float__(self):
                raise ValueError("broken")

        with pytest.raises(TypeError, match=r"cannot convert"):
            std_numeric(Broken())


class TestStdNumericDuckTyping:

    def test_quantity_like(self):
        class Quantity:
            value = 2.5
            unit = "m"

        assert std_numeric(Quantity()) == 2.5

    def test_item(self):
        class Scalar:
            def item(self):
                return 7

        assert std_numeric(Scalar()) == 7


class TestStdFloat:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(3, 3.0, id="int"),
            pytest.param(Decimal("1.5"), 1.5, id="decimal"),
            pytest.param(10 ** 400, math.inf, id="int-overflow"),
            pytest.param(-10 ** 400, -math.inf, id="neg-int-overflow"),
            pytest.param(Decimal("1e400"), math.inf, id="decimal-overflow"),
        ],
    )
    def test_float(self, value, expected):
        res = std_float(value)
        assert res == expected
        assert isinstance(res, float)

    def test_none(self):
        assert std_float(None) is None


# numpy Tests ------------------------------------------------------------------------------------

class TestStdNumericNumpy:

    def test_scalars(self):
        np = pytest.importorskip("numpy")
        assert std_numeric(np.int32(5)) == 5
        assert isinstance(std_numeric(np.int32(5)), int)
        assert std_numeric(np.float32(0.5)) == 0.5
        assert std_numeric(np.array(2.5)) == 2.5

    def test_masked(self):
        np = pytest.importorskip("numpy")
        assert math.isnan(std_numeric(np.ma.masked))


# pandas Tests --------------------------------------------------------------------------------------

class TestStdNumericPandas:

    def test_na(self):
        pd = pytest.importorskip("pandas")
        assert math.isnan(std_numeric(pd.NA))
