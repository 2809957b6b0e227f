"""
Coerce numeric inputs from Python stdlib and third-party libraries to float.

Formatting works on IEEE 754 doubles, so every supported input (int, float, Decimal,
Fraction, NumPy scalars, 0-d arrays, Pandas scalars, Astropy quantities) is normalized
to a Python float or None before unit selection.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type


def std_numeric(value: Any, *, allow_bool: bool = False) -> int | float | None:
    """
    Convert numeric types to standard Python int, float, or None.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float/None, Decimal,
        Fraction, and third-party types via __index__, .item(), .value,
        __int__ or __float__ protocols.

    allow_bool : bool, default False
        If True, convert bool to int (True→1, False→0). If False, booleans
        raise TypeError since bool is a subclass of int in Python.

    Returns
    -------
    int
        For Python int, types implementing __index__ (NumPy integers), and
        integer-valued Decimal/Fraction.

    float
        For float values including inf/-inf/nan, and fractional Decimal/Fraction.
        Missing markers pandas.NA and numpy.ma.masked map to nan.

    None
        For None input.

    Raises
    ------
    TypeError
        When value is an unsupported type (str, list, etc.) or a bool
        while allow_bool=False.

    Examples
    --------
    >>> std_numeric(42)
    42
    >>> from decimal import Decimal
    >>> std_numeric(Decimal('42.0'))
    42
    >>> std_numeric(Decimal('3.5'))
    3.5
    """
    if value is None:
        return None

    if isinstance(value, bool):
        if allow_bool:
            return int(value)
        raise TypeError(
            f"boolean values not supported, got {value}. "
            f"Set allow_bool=True to convert booleans to int (True→1, False→0)"
        )

    # Fast path
    if isinstance(value, (int, float)):
        return value

    # pandas.NA has __float__ but raises TypeError, so detect it by class before duck typing
    cls = type(value)
    cls_name = getattr(cls, "__name__", "")
    cls_module = getattr(cls, "__module__", "") or ""
    if cls_name == "NAType" and "pandas" in cls_module:
        return math.nan
    if cls_name == "MaskedConstant" and cls_module.startswith("numpy.ma"):
        return math.nan

    # NumPy integers; float 0-d arrays also define __index__ but refuse it
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError):
            pass

    # Array scalars and 0-d arrays
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            return std_numeric(result, allow_bool=allow_bool)
        if isinstance(result, (int, float)):
            return result

    # Astropy Quantity and similar magnitude-with-unit objects
    if hasattr(value, 'value') and hasattr(value, 'unit'):
        try:
            magnitude = value.value
        except (TypeError, ValueError, AttributeError):
            magnitude = None
        if magnitude is not None and magnitude is not value:
            return std_numeric(magnitude, allow_bool=allow_bool)

    # Integer-valued Decimal/Fraction are kept exact
    if cls_name in ('Decimal', 'Fraction') and hasattr(value, '__int__'):
        try:
            as_int = int(value)
            if value == cls(as_int):
                return as_int
        except (TypeError, ValueError, OverflowError):
            pass

    if hasattr(value, '__int__') and not hasattr(value, '__float__'):
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __int__: {e}") from e

    if hasattr(value, '__float__'):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, None, or types implementing __index__, __int__, "
        f"__float__, .item(), or having .value attribute (e.g., numpy scalars, "
        f"Decimal, Fraction, pandas scalars, Quantity.value)"
    )


def std_float(value: Any, *, allow_bool: bool = False) -> float | None:
    """
    Convert a numeric value to float or None.

    Integers beyond the float range (e.g. 10**400, Decimal('1e400')) become signed infinity
    instead of raising OverflowError.

    Raises:
        TypeError: If value is not a supported numeric type.

    Examples:
        >>> std_float(3)
        3.0
        >>> std_float(-10**400)
        -inf
    """
    number = std_numeric(value, allow_bool=allow_bool)
    if number is None:
        return None
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf
