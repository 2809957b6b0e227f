"""
Human-readable formatting of numeric values with unit tables, e.g. 8_388_608 → "8.39MB".

A unit table is a set of (threshold, suffix) breakpoints. The value is divided by the
largest threshold not exceeding its magnitude and rendered with locale-aware rounding
to significant digits, followed by the breakpoint suffix.
"""

# ## Scope
#
# One-way formatting only (numeric value → human-readable string); parsing strings
# back to values is not supported. Store the original value if you need it later.

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value
from .numbers import NumbersConf, format_significant, validate_digits
from .numeric import std_float
from .sentinels import UNSET, UnsetType, ifnotunset
from .units import COUNT, Unit, UnitTable


# @formatter:off

class HumanizeConf:
    """
    Library-wide defaults for HumanizeOptions.

    Attributes:
        UNIT_TABLE: Unit table used when none is given, SI count prefixes from 10⁰ to 10¹⁵.
        POSTFIX: Text appended after the unit suffix.
        MAX_SIGNIFICANT_DIGITS: Upper bound of rendered significant digits.
        MIN_SIGNIFICANT_DIGITS: Lower bound of rendered significant digits, pads with trailing zeros.
        LOCALE: BCP 47 locale of the number rendering.
        USE_GROUPING: Insert locale group separators, e.g. "12,345".
        UNIT_SEPARATOR: Text between the number and a non-empty unit.
        EMPTY_VALUE: Output for None and NaN input.
    """
    UNIT_TABLE: UnitTable = COUNT
    POSTFIX = ""
    MAX_SIGNIFICANT_DIGITS = 3
    MIN_SIGNIFICANT_DIGITS = 1
    LOCALE = NumbersConf.LOCALE
    USE_GROUPING = False
    UNIT_SEPARATOR = ""
    EMPTY_VALUE = ""

# @formatter:on


class UnitTableError(ValueError):
    """Base error for malformed unit tables."""


class EmptyTableError(UnitTableError):
    """The unit table has no entries."""


class NonPositiveThresholdError(UnitTableError):
    """A unit threshold is zero, negative or not finite."""


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class HumanizeOptions:
    """
    Formatting options of humanize_unit().

    Every field has a default from HumanizeConf. Derive modified options with merge().
    The unit table is not validated here but on use, so a malformed table raises from
    the humanize_unit() call that formats with it.

    Attributes:
        unit_table: Unit breakpoints, in any order.
        postfix: Text appended after the unit suffix, e.g. "/s" with a BYTES table.
        max_significant_digits: Maximum significant digits, 1..21.
        min_significant_digits: Minimum significant digits, 1..max_significant_digits.
        locale: BCP 47 locale tag of the number rendering.
        use_grouping: Insert locale group separators into the number.
        unit_separator: Text inserted between the number and the unit, only when
            the unit suffix or postfix is non-empty.
        empty_value: Output for None and NaN input.

    Raises:
        TypeError: If a field has a wrong type.
        ValueError: If significant digits are out of range or min > max.

    Examples:
        >>> opts = HumanizeOptions(unit_separator=" ")
        >>> humanize_unit(1_500, opts)
        '1.5 k'
        >>> humanize_unit(1_500, opts.merge(max_significant_digits=1))
        '2 k'
    """
    unit_table: UnitTable = HumanizeConf.UNIT_TABLE
    postfix: str = HumanizeConf.POSTFIX
    max_significant_digits: int = HumanizeConf.MAX_SIGNIFICANT_DIGITS
    min_significant_digits: int = HumanizeConf.MIN_SIGNIFICANT_DIGITS
    locale: str = HumanizeConf.LOCALE
    use_grouping: bool = HumanizeConf.USE_GROUPING
    unit_separator: str = HumanizeConf.UNIT_SEPARATOR
    empty_value: str = HumanizeConf.EMPTY_VALUE

    def __post_init__(self):
        """Validate fields"""
        for name in ("postfix", "locale", "unit_separator", "empty_value"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be str, but got {fmt_type(value)}")

        if not isinstance(self.use_grouping, bool):
            raise TypeError(f"use_grouping must be bool, but got {fmt_type(self.use_grouping)}")

        if isinstance(self.unit_table, (str, bytes)) or not hasattr(self.unit_table, "__len__"):
            raise TypeError(f"unit_table must be a sequence of Unit, but got {fmt_type(self.unit_table)}")

        validate_digits(
            max_digits=self.max_significant_digits,
            min_digits=self.min_significant_digits,
            max_name="max_significant_digits",
            min_name="min_significant_digits",
        )

    def merge(self,
              # Attrs override
              unit_table: UnitTable | UnsetType = UNSET,
              postfix: str | UnsetType = UNSET,
              max_significant_digits: int | UnsetType = UNSET,
              min_significant_digits: int | UnsetType = UNSET,
              locale: str | UnsetType = UNSET,
              use_grouping: bool | UnsetType = UNSET,
              unit_separator: str | UnsetType = UNSET,
              empty_value: str | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new HumanizeOptions instance with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.

        Returns:
            New HumanizeOptions instance with merged configuration.
        """
        return HumanizeOptions(
            unit_table=ifnotunset(unit_table, default=self.unit_table),
            postfix=ifnotunset(postfix, default=self.postfix),
            max_significant_digits=ifnotunset(max_significant_digits, default=self.max_significant_digits),
            min_significant_digits=ifnotunset(min_significant_digits, default=self.min_significant_digits),
            locale=ifnotunset(locale, default=self.locale),
            use_grouping=ifnotunset(use_grouping, default=self.use_grouping),
            unit_separator=ifnotunset(unit_separator, default=self.unit_separator),
            empty_value=ifnotunset(empty_value, default=self.empty_value),
        )


DEFAULT_OPTIONS = HumanizeOptions()


# Methods --------------------------------------------------------------------------------------------------------------

def humanize_unit(value: Any, options: HumanizeOptions | None = None, /, **overrides) -> str:
    """
    Format a numeric value into a human-readable string with the best-fitting unit.

    The unit is the table entry with the largest threshold not exceeding the absolute value,
    or the smallest entry if the value is below every threshold. Zero is formatted with the
    unit selected for a magnitude of 1. The value is divided by the unit threshold and
    rendered with locale-aware rounding to significant digits.

    None, NaN and missing markers (pandas.NA, numpy.ma.masked) return options.empty_value.
    Infinite values return "Infinity" or "-Infinity" regardless of options.

    Args:
        value: int, float, Decimal, Fraction, NumPy/Pandas scalar or None.
        options: Base options, HumanizeOptions() defaults if None.
        **overrides: HumanizeOptions fields overriding `options`.

    Returns:
        Formatted number followed by the unit suffix and postfix.

    Raises:
        EmptyTableError: If the unit table has no entries.
        NonPositiveThresholdError: If a unit threshold is not a positive finite number.
        TypeError: If value is not numeric, or overrides name an unknown option.

    Examples:
        >>> humanize_unit(12_345)
        '12.3k'
        >>> from humanunit.units import BYTES, TIME
        >>> humanize_unit(8_388_608, unit_table=BYTES)
        '8.39MB'
        >>> humanize_unit(86_400, unit_table=TIME)
        '1d'
        >>> humanize_unit(None, empty_value="n/a")
        'n/a'
    """
    if options is None:
        options = DEFAULT_OPTIONS
    elif not isinstance(options, HumanizeOptions):
        raise TypeError(f"options must be HumanizeOptions or None, but got {fmt_type(options)}")
    if overrides:
        options = options.merge(**overrides)

    number = std_float(value)
    if number is None or math.isnan(number):
        return options.empty_value
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"

    units = normalize_units(options.unit_table)
    magnitude = abs(number) if number != 0 else 1
    unit = select_unit(magnitude, units)

    # Unreachable fallback divisor, thresholds are positive after normalization
    divisor = unit.threshold or 1
    formatted_number = format_significant(
        number / divisor,
        locale=options.locale,
        max_digits=options.max_significant_digits,
        min_digits=options.min_significant_digits,
        grouping=options.use_grouping,
    )
    separator = options.unit_separator if (unit.suffix or options.postfix) else ""

    return f"{formatted_number}{separator}{unit.suffix}{options.postfix}"


def normalize_units(units: UnitTable) -> tuple[Unit, ...]:
    """
    Validate a unit table and sort it by descending threshold.

    Entries may be Unit instances or (threshold, suffix) pairs. Entries with equal
    thresholds keep their input order. The input is not modified.

    Returns:
        New tuple of Unit, largest threshold first.

    Raises:
        EmptyTableError: If the table has no entries.
        NonPositiveThresholdError: If a threshold is zero, negative, NaN or infinite.
        TypeError: If an entry is not a Unit or a (threshold, suffix) pair of real number and str.

    Examples:
        >>> normalize_units([(1, "m"), (1_000, "km")])
        (Unit(threshold=1000, suffix='km'), Unit(threshold=1, suffix='m'))
    """
    if isinstance(units, (str, bytes)):
        raise TypeError(f"unit table must be a sequence of Unit, but got {fmt_type(units)}")

    entries = tuple(_std_unit(entry) for entry in units)
    if not entries:
        raise EmptyTableError("unit table requires at least one unit definition")

    for unit in entries:
        if not (math.isfinite(unit.threshold) and unit.threshold > 0):
            raise NonPositiveThresholdError(
                f"unit table supports only units with a positive finite threshold, got {unit}"
            )

    return tuple(sorted(entries, key=lambda unit: unit.threshold, reverse=True))


def select_unit(magnitude: int | float, units: UnitTable) -> Unit:
    """
    Choose the best-fitting unit for a non-negative magnitude from a descending unit table.

    Returns the first unit whose threshold does not exceed the magnitude, or the last
    (smallest) unit if the magnitude is below every threshold.

    Raises:
        EmptyTableError: If the table is empty.

    Examples:
        >>> units = (Unit(1_000, "k"), Unit(1, ""))
        >>> select_unit(1_000, units)
        Unit(threshold=1000, suffix='k')
        >>> select_unit(0.5, units)
        Unit(threshold=1, suffix='')
    """
    if not units:
        raise EmptyTableError("unit table requires at least one unit definition")

    return next((unit for unit in units if magnitude >= unit.threshold), units[-1])


# Private Methods ------------------------------------------------------------------------------------------------------

def _std_unit(entry: Any) -> Unit:
    """Coerce a table entry to Unit and check field types."""
    if isinstance(entry, Unit):
        unit = entry
    elif isinstance(entry, tuple) and len(entry) == 2:
        unit = Unit(*entry)
    else:
        raise TypeError(f"unit table entry must be Unit or (threshold, suffix) pair, but got {fmt_value(entry)}")

    if isinstance(unit.threshold, bool) or not isinstance(unit.threshold, Real):
        raise TypeError(f"unit threshold must be a real number, but got {fmt_value(unit.threshold)}")
    if not isinstance(unit.suffix, str):
        raise TypeError(f"unit suffix must be str, but got {fmt_value(unit.suffix)}")
    return unit
