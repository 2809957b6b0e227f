"""
Locale-aware rendering of numbers rounded to significant digits.

Numbers are rounded in decimal arithmetic and rendered with Babel from the CLDR decimal
pattern of the requested locale, so decimal and group glyphs and grouping sizes follow
the locale (e.g. "12,345.6" in en-US, "12.345,6" in de-DE, "1,23,456" in hi-IN).
"""

# Standard library -----------------------------------------------------------------------------------------------------
import decimal
import functools
import re
import warnings
from decimal import Decimal, ROUND_HALF_UP

# Third-party ----------------------------------------------------------------------------------------------------------
from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value


class NumbersConf:
    """
    Defaults and limits of significant-digit rendering.

    Attributes:
        LOCALE: Locale used when none is given, or when a requested locale has no CLDR data.
        MAX_SIGNIFICANT_DIGITS: Upper limit for significant digits, as in CLDR/ICU formatters.
        MIN_SIGNIFICANT_DIGITS: Lower limit for significant digits.
    """
    LOCALE = "en-US"
    MAX_SIGNIFICANT_DIGITS = 21
    MIN_SIGNIFICANT_DIGITS = 1


class LocaleFallbackWarning(UserWarning):
    """A requested locale has no CLDR data and the default locale is used instead."""


# Integer part of a CLDR decimal pattern, with the optional fraction part that follows it
_PATTERN_NUMBER = re.compile(r"(?P<integer>[#,0]*0)(?P<fraction>\.[0#]*)?")


# Methods --------------------------------------------------------------------------------------------------------------

def format_significant(
        number: int | float | Decimal,
        *,
        locale: str = NumbersConf.LOCALE,
        max_digits: int = 3,
        min_digits: int = 1,
        grouping: bool = False,
) -> str:
    """
    Format a finite number rounded to significant digits for the given locale.

    Rounding keeps at most `max_digits` significant digits of the shortest decimal
    representation of the number, with ties rounded away from zero. Trailing zeros are
    dropped unless needed to show `min_digits` significant digits. Large and small
    magnitudes are written in full positional notation, never in E-notation.

    Args:
        number: Finite number to format.
        locale: BCP 47 ("en-US") or POSIX ("en_US") locale identifier.
        max_digits: Maximum significant digits, 1..21.
        min_digits: Minimum significant digits, 1..max_digits.
        grouping: Insert the locale group separator into the integer part.

    Returns:
        Formatted number, with a leading minus sign for negative numbers.

    Raises:
        TypeError: If number is not int, float or Decimal.
        ValueError: If number is not finite, digits are out of range, or locale is malformed.

    Examples:
        >>> format_significant(1234.5)
        '1230'
        >>> format_significant(1234.5, max_digits=5, grouping=True)
        '1,234.5'
        >>> format_significant(1234.5, max_digits=5, grouping=True, locale="de-DE")
        '1.234,5'
        >>> format_significant(12, max_digits=3, min_digits=3)
        '12.0'
    """
    validate_digits(max_digits=max_digits, min_digits=min_digits)
    value = _to_decimal(number)

    if value.is_zero():
        min_frac = max_frac = min_digits - 1
        rounded = value
    else:
        rounded = round_significant(value, max_digits)
        leading = rounded.adjusted()
        min_frac = max(0, min_digits - 1 - leading)
        max_frac = max(min_frac, -rounded.as_tuple().exponent)

    babel_locale = resolve_locale(locale)
    pattern = _decimal_pattern(babel_locale, min_frac, max_frac)

    # Babel quantizes in the current decimal context; keep every integer digit of huge values
    with decimal.localcontext() as ctx:
        ctx.prec = max(ctx.prec, rounded.adjusted() + max_frac + 2)
        return format_decimal(rounded, format=pattern, locale=babel_locale, group_separator=grouping)


def round_significant(value: int | float | Decimal, digits: int) -> Decimal:
    """
    Round a number to significant digits, ties away from zero.

    Floats are rounded from their shortest round-trip decimal form, so 12.345 rounds
    to 12.35 although its binary value is slightly below 12.345.

    Examples:
        >>> round_significant(12.345, 4)
        Decimal('12.35')
        >>> round_significant(999.6, 3)
        Decimal('1000')
        >>> round_significant(12345.6, 3)
        Decimal('1.23E+4')
    """
    value = _to_decimal(value)
    if digits < 1:
        raise ValueError(f"digits must be >= 1, got {digits}")
    if value.is_zero():
        return value
    exponent = value.adjusted() - digits + 1
    return value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)


@functools.lru_cache(maxsize=128)
def resolve_locale(identifier: str) -> Locale:
    """
    Resolve a locale identifier to a Babel Locale.

    Both BCP 47 ("de-DE") and POSIX ("de_DE") separators are accepted. A well-formed
    identifier without CLDR data falls back to NumbersConf.LOCALE with a
    LocaleFallbackWarning. Results are cached.

    Raises:
        TypeError: If identifier is not a str.
        ValueError: If identifier is not a well-formed locale identifier.
    """
    if not isinstance(identifier, str):
        raise TypeError(f"locale must be str, got {fmt_type(identifier)}")

    tag = identifier.strip().replace("_", "-")
    try:
        return Locale.parse(tag, sep="-")
    except UnknownLocaleError:
        warnings.warn(
            f"no locale data for {fmt_value(identifier)}, falling back to '{NumbersConf.LOCALE}'",
            LocaleFallbackWarning,
            stacklevel=2,
        )
        return Locale.parse(NumbersConf.LOCALE, sep="-")
    except ValueError as exc:
        raise ValueError(f"invalid locale identifier {fmt_value(identifier)}") from exc


def validate_digits(
        *,
        max_digits: int,
        min_digits: int,
        max_name: str = "max_digits",
        min_name: str = "min_digits",
):
    """
    Check significant digits bounds, named max_name and min_name in error messages.

    Raises:
        TypeError: If a bound is not int.
        ValueError: If a bound is outside 1..21 or min_digits > max_digits.
    """
    lo, hi = NumbersConf.MIN_SIGNIFICANT_DIGITS, NumbersConf.MAX_SIGNIFICANT_DIGITS
    for name, digits in ((max_name, max_digits), (min_name, min_digits)):
        if isinstance(digits, bool) or not isinstance(digits, int):
            raise TypeError(f"{name} must be int, got {fmt_value(digits)}")
        if not lo <= digits <= hi:
            raise ValueError(f"{name} must be in range {lo}..{hi}, got {digits}")
    if min_digits > max_digits:
        raise ValueError(f"{min_name} must be <= {max_name}, got {min_digits} > {max_digits}")


# Private Methods ------------------------------------------------------------------------------------------------------

@functools.lru_cache(maxsize=512)
def _decimal_pattern(locale: Locale, min_frac: int, max_frac: int) -> str:
    """
    Locale decimal pattern with its fraction part replaced by min_frac required and max_frac total digits.

    Example:
        '#,##0.###' -> '#,##0.0#' for min_frac=1, max_frac=2
    """
    base = locale.decimal_formats[None].pattern.split(";")[0]
    fraction = "." + "0" * min_frac + "#" * (max_frac - min_frac) if max_frac else ""
    pattern, count = _PATTERN_NUMBER.subn(lambda m: m.group("integer") + fraction, base, count=1)
    if not count:
        # Locale without a numeric placeholder in its decimal pattern
        pattern = "#,##0" + fraction
    return pattern


def _to_decimal(number: int | float | Decimal) -> Decimal:
    if isinstance(number, bool) or not isinstance(number, (int, float, Decimal)):
        raise TypeError(f"number must be int | float | Decimal, got {fmt_type(number)}")
    # str(float) is the shortest round-trip representation
    value = number if isinstance(number, Decimal) else Decimal(str(number))
    if not value.is_finite():
        raise ValueError(f"number must be finite, got {fmt_value(number)}")
    return value
