#
# Humanize Unit - Unit Tables
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Sequence, TypeAlias

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_value


# @formatter:off

class UnitsConf:
    """
    Prefix configuration used to generate unit tables.

    Attributes:
        SI_PREFIXES: SI decimal prefixes with 10^(3N) exponents, exponent → prefix.
            Micro is the ASCII "u" so generated suffixes stay printable in any terminal.
        BIN_PREFIXES: IEC binary prefixes (powers of 2), exponent → prefix.
        SI_MIN_EXPONENT, SI_MAX_EXPONENT: default exponent range of si_units().
        BIN_MAX_EXPONENT: default largest exponent of binary_units().
    """

    SI_PREFIXES = {
        24: "Y",   # yotta
        21: "Z",   # zetta
        18: "E",   # exa
        15: "P",   # peta
        12: "T",   # tera
        9: "G",    # giga
        6: "M",    # mega
        3: "k",    # kilo
        0: "",     # (no prefix)
        -3: "m",   # milli
        -6: "u",   # micro
        -9: "n",   # nano
        -12: "p",  # pico
        -15: "f",  # femto
        -18: "a",  # atto
        -21: "z",  # zepto
        -24: "y",  # yocto
    }

    BIN_PREFIXES = {
        0: "",     # 2⁰ = 1
        10: "Ki",  # kibi = 2¹⁰ = 1,024
        20: "Mi",  # mebi = 2²⁰ = 1,048,576
        30: "Gi",  # gibi = 2³⁰
        40: "Ti",  # tebi = 2⁴⁰
        50: "Pi",  # pebi = 2⁵⁰
        60: "Ei",  # exbi = 2⁶⁰
        70: "Zi",  # zebi = 2⁷⁰
        80: "Yi",  # yobi = 2⁸⁰
    }

    SI_MIN_EXPONENT = -9
    SI_MAX_EXPONENT = 15

    BIN_MAX_EXPONENT = 80

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class Unit:
    """
    A single unit breakpoint.

    Values whose magnitude is greater than or equal to `threshold` are divided by
    `threshold` and rendered with `suffix`.

    The threshold must be a positive finite number. It is checked when a table is
    normalized for formatting rather than here, so a malformed table is reported
    by the formatting call that uses it.

    Attributes:
        threshold: Inclusive lower bound of the breakpoint and its divisor.
        suffix: Text appended to the scaled number, e.g. "MB".

    Examples:
        >>> Unit(1_000, "k")
        Unit(threshold=1000, suffix='k')
    """
    threshold: int | float
    suffix: str = ""

    def __iter__(self):
        # Unpack as a (threshold, suffix) pair
        yield self.threshold
        yield self.suffix


UnitTable: TypeAlias = Sequence[Unit]
"""Sequence of unit breakpoints, conventionally ordered from largest to smallest threshold."""


# Methods --------------------------------------------------------------------------------------------------------------

def si_units(
        postfix: str = "",
        *,
        min_exponent: int = UnitsConf.SI_MIN_EXPONENT,
        max_exponent: int = UnitsConf.SI_MAX_EXPONENT,
) -> tuple[Unit, ...]:
    """
    Create an SI unit table with one breakpoint per 10^(3N) prefix in the exponent range.

    Args:
        postfix: Base unit appended to each SI prefix, e.g. "B" gives "kB", "MB".
        min_exponent: Smallest power of 10 to include (inclusive).
        max_exponent: Largest power of 10 to include (inclusive).

    Returns:
        Unit table sorted largest to smallest.

    Raises:
        TypeError: If postfix is not a str or exponents are not int.
        ValueError: If min_exponent > max_exponent.

    Examples:
        >>> si_units("m", min_exponent=-3, max_exponent=3)
        (Unit(threshold=1000, suffix='km'), Unit(threshold=1, suffix='m'), Unit(threshold=0.001, suffix='mm'))
    """
    _validate_generator_args(postfix, min_exponent, max_exponent)

    units = [
        Unit(10 ** exponent, f"{prefix}{postfix}")
        for exponent, prefix in UnitsConf.SI_PREFIXES.items()
        if min_exponent <= exponent <= max_exponent
    ]
    return tuple(sorted(units, key=lambda unit: unit.threshold, reverse=True))


def binary_units(
        postfix: str = "B",
        *,
        min_exponent: int = 0,
        max_exponent: int = UnitsConf.BIN_MAX_EXPONENT,
) -> tuple[Unit, ...]:
    """
    Create an IEC binary unit table with one breakpoint per 2^(10N) prefix in the exponent range.

    Args:
        postfix: Base unit appended to each binary prefix, e.g. "B" gives "KiB", "MiB".
        min_exponent: Smallest power of 2 to include (inclusive).
        max_exponent: Largest power of 2 to include (inclusive).

    Raises:
        TypeError: If postfix is not a str or exponents are not int.
        ValueError: If min_exponent > max_exponent.

    Examples:
        >>> binary_units("B", max_exponent=20)
        (Unit(threshold=1048576, suffix='MiB'), Unit(threshold=1024, suffix='KiB'), Unit(threshold=1, suffix='B'))
    """
    _validate_generator_args(postfix, min_exponent, max_exponent)

    units = [
        Unit(2 ** exponent, f"{prefix}{postfix}")
        for exponent, prefix in UnitsConf.BIN_PREFIXES.items()
        if min_exponent <= exponent <= max_exponent
    ]
    return tuple(sorted(units, key=lambda unit: unit.threshold, reverse=True))


def _validate_generator_args(postfix: str, min_exponent: int, max_exponent: int):
    if not isinstance(postfix, str):
        raise TypeError(f"postfix must be str, got {fmt_value(postfix)}")
    for name, exponent in (("min_exponent", min_exponent), ("max_exponent", max_exponent)):
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"{name} must be int, got {fmt_value(exponent)}")
    if min_exponent > max_exponent:
        raise ValueError(f"min_exponent must be <= max_exponent, got {min_exponent} > {max_exponent}")


# Unit Tables ----------------------------------------------------------------------------------------------------------

# @formatter:off

# Binary byte units (KiB, MiB, …)
BYTES_BINARY = binary_units("B")
STORAGE_BINARY = BYTES_BINARY

TIME = (
    Unit(31_536_000, "y"),  # 365 days
    Unit(604_800, "w"),
    Unit(86_400, "d"),
    Unit(3_600, "h"),
    Unit(60, "m"),
    Unit(1, "s"),
    Unit(0.001, "ms"),
)

# SI prefixes for general counts
COUNT = si_units("", min_exponent=0, max_exponent=15)

# Decimal byte units (kB, MB, …)
BYTES = si_units("B", min_exponent=0, max_exponent=15)
BYTES_DECIMAL = BYTES
STORAGE = BYTES

DISTANCE                  = si_units("m",       min_exponent=-6, max_exponent=6)
MASS                      = si_units("g",       min_exponent=-3, max_exponent=6)
ACCELERATION              = si_units("m/s^2",   min_exponent=-3, max_exponent=3)
CHARGE                    = si_units("C",       min_exponent=-9, max_exponent=3)
MOMENTUM                  = si_units("N*s",     min_exponent=-6, max_exponent=6)
POWER                     = si_units("W",       min_exponent=-3, max_exponent=12)
VELOCITY                  = si_units("m/s",     min_exponent=-6, max_exponent=6)
VOLUME                    = si_units("m^3",     min_exponent=-6, max_exponent=6)
LIQUID_VOLUME             = si_units("L",       min_exponent=-3, max_exponent=6)
TEMPERATURE               = si_units("°C",      min_exponent=-3, max_exponent=3)
TEMPERATURE_KELVIN        = si_units("°K",      min_exponent=-3, max_exponent=3)
PRESSURE                  = si_units("Pa",      min_exponent=-3, max_exponent=12)
FORCE                     = si_units("N",       min_exponent=-3, max_exponent=12)
TORQUE                    = si_units("N*m",     min_exponent=-3, max_exponent=12)
ENERGY                    = si_units("J",       min_exponent=-3, max_exponent=12)
VOLTAGE                   = si_units("V",       min_exponent=-3, max_exponent=12)
CURRENT                   = si_units("A",       min_exponent=-3, max_exponent=12)
RESISTANCE                = si_units("Ω",       min_exponent=-3, max_exponent=12)
CAPACITANCE               = si_units("F",       min_exponent=-3, max_exponent=12)
INDUCTANCE                = si_units("H",       min_exponent=-3, max_exponent=12)
FREQUENCY                 = si_units("Hz",      min_exponent=-3, max_exponent=12)
ANGLE                     = si_units("°",       min_exponent=-3, max_exponent=12)
LENGTH                    = si_units("m",       min_exponent=-3, max_exponent=12)
AREA                      = si_units("m^2",     min_exponent=-3, max_exponent=12)
VOLUME_FLOW_RATE          = si_units("m^3/s",   min_exponent=-3, max_exponent=12)
MASS_FLOW_RATE            = si_units("kg/s",    min_exponent=-3, max_exponent=12)
DENSITY                   = si_units("kg/m^3",  min_exponent=-3, max_exponent=12)
CONCENTRATION             = si_units("mol/m^3", min_exponent=-3, max_exponent=12)
MOLAR_MASS                = si_units("g/mol",   min_exponent=-3, max_exponent=12)
MOLAR_VOLUME              = si_units("m^3/mol", min_exponent=-3, max_exponent=12)
MOLAR_DENSITY             = si_units("mol/m^3", min_exponent=-3, max_exponent=12)
MOLAR_CONCENTRATION       = CONCENTRATION
MAGNETIC_FLUX             = si_units("Wb",      min_exponent=-3, max_exponent=9)
MAGNETIC_FLUX_DENSITY     = si_units("T",       min_exponent=-9, max_exponent=3)
ILLUMINANCE               = si_units("lx",      min_exponent=-6, max_exponent=6)
LUMINOUS_FLUX             = si_units("lm",      min_exponent=-6, max_exponent=6)
RADIOACTIVITY             = si_units("Bq",      min_exponent=-3, max_exponent=12)
RADIATION_DOSE_EQUIVALENT = si_units("Sv",      min_exponent=-6, max_exponent=6)
RADIATION_DOSE_ABSORBED   = si_units("Gy",      min_exponent=-6, max_exponent=6)
CATALYTIC_ACTIVITY        = si_units("kat",     min_exponent=-3, max_exponent=6)

# @formatter:on

# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Generated tables must come out strictly descending.
for _table in (COUNT, BYTES, BYTES_BINARY, TIME):
    if any(a.threshold <= b.threshold for a, b in zip(_table, _table[1:])):
        raise AssertionError("Configuration Error: unit tables must be sorted by strictly descending threshold.")
del _table
