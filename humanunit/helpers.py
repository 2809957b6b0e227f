"""
Shortcuts of humanize_unit() with a pre-bound unit table, one per table in humanunit.units.

Each shortcut takes the same arguments as humanize_unit() except unit_table:

    >>> humanize_bytes(1_500)
    '1.5kB'
    >>> humanize_time(3_600, unit_separator=" ")
    '1 h'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from . import units
from .humanize import HumanizeOptions, humanize_unit
from .units import UnitTable

Humanizer = Callable[..., str]


def humanizer(unit_table: UnitTable, name: str = "humanize", quantity: str = "values") -> Humanizer:
    """
    Create a humanize_unit() shortcut bound to a unit table.

    A unit_table in the options passed to the shortcut is replaced by the bound table;
    passing unit_table as a keyword raises TypeError.

    Args:
        unit_table: Unit table to bind.
        name: Function name of the shortcut.
        quantity: Quantity name used in the shortcut docstring.

    Examples:
        >>> humanize_km = humanizer([(1_000, "km"), (1, "m")], name="humanize_km")
        >>> humanize_km(1_500)
        '1.5km'
    """

    def humanize(value: Any, options: HumanizeOptions | None = None, /, **overrides) -> str:
        if "unit_table" in overrides:
            raise TypeError(f"{name}() got an unexpected keyword argument 'unit_table'")
        return humanize_unit(value, options, unit_table=unit_table, **overrides)

    humanize.__name__ = humanize.__qualname__ = name
    humanize.__doc__ = f"Format {quantity} with humanize_unit() and a fixed unit table."
    return humanize


# @formatter:off
humanize_count                     = humanizer(units.COUNT,                     "humanize_count",                     "counts")
humanize_bytes                     = humanizer(units.BYTES,                     "humanize_bytes",                     "decimal byte sizes")
humanize_bytes_decimal             = humanizer(units.BYTES_DECIMAL,             "humanize_bytes_decimal",             "decimal byte sizes")
humanize_bytes_binary              = humanizer(units.BYTES_BINARY,              "humanize_bytes_binary",              "binary byte sizes")
humanize_storage                   = humanizer(units.STORAGE,                   "humanize_storage",                   "decimal storage sizes")
humanize_storage_binary            = humanizer(units.STORAGE_BINARY,            "humanize_storage_binary",            "binary storage sizes")
humanize_time                      = humanizer(units.TIME,                      "humanize_time",                      "durations in seconds")
humanize_distance                  = humanizer(units.DISTANCE,                  "humanize_distance",                  "distances in meters")
humanize_mass                      = humanizer(units.MASS,                      "humanize_mass",                      "masses in grams")
humanize_acceleration              = humanizer(units.ACCELERATION,              "humanize_acceleration",              "accelerations")
humanize_charge                    = humanizer(units.CHARGE,                    "humanize_charge",                    "electric charges")
humanize_momentum                  = humanizer(units.MOMENTUM,                  "humanize_momentum",                  "momenta")
humanize_power                     = humanizer(units.POWER,                     "humanize_power",                     "powers")
humanize_velocity                  = humanizer(units.VELOCITY,                  "humanize_velocity",                  "velocities")
humanize_volume                    = humanizer(units.VOLUME,                    "humanize_volume",                    "volumes")
humanize_liquid_volume             = humanizer(units.LIQUID_VOLUME,             "humanize_liquid_volume",             "liquid volumes")
humanize_temperature               = humanizer(units.TEMPERATURE,               "humanize_temperature",               "Celsius temperatures")
humanize_temperature_kelvin        = humanizer(units.TEMPERATURE_KELVIN,        "humanize_temperature_kelvin",        "Kelvin temperatures")
humanize_pressure                  = humanizer(units.PRESSURE,                  "humanize_pressure",                  "pressures")
humanize_force                     = humanizer(units.FORCE,                     "humanize_force",                     "forces")
humanize_torque                    = humanizer(units.TORQUE,                    "humanize_torque",                    "torques")
humanize_energy                    = humanizer(units.ENERGY,                    "humanize_energy",                    "energies")
humanize_voltage                   = humanizer(units.VOLTAGE,                   "humanize_voltage",                   "voltages")
humanize_current                   = humanizer(units.CURRENT,                   "humanize_current",                   "electric currents")
humanize_resistance                = humanizer(units.RESISTANCE,                "humanize_resistance",                "resistances")
humanize_capacitance               = humanizer(units.CAPACITANCE,               "humanize_capacitance",               "capacitances")
humanize_inductance                = humanizer(units.INDUCTANCE,                "humanize_inductance",                "inductances")
humanize_frequency                 = humanizer(units.FREQUENCY,                 "humanize_frequency",                 "frequencies")
humanize_angle                     = humanizer(units.ANGLE,                     "humanize_angle",                     "angles in degrees")
humanize_length                    = humanizer(units.LENGTH,                    "humanize_length",                    "lengths")
humanize_area                      = humanizer(units.AREA,                      "humanize_area",                      "areas")
humanize_volume_flow_rate          = humanizer(units.VOLUME_FLOW_RATE,          "humanize_volume_flow_rate",          "volumetric flow rates")
humanize_mass_flow_rate            = humanizer(units.MASS_FLOW_RATE,            "humanize_mass_flow_rate",            "mass flow rates")
humanize_density                   = humanizer(units.DENSITY,                   "humanize_density",                   "densities")
humanize_concentration             = humanizer(units.CONCENTRATION,             "humanize_concentration",             "concentrations")
humanize_molar_mass                = humanizer(units.MOLAR_MASS,                "humanize_molar_mass",                "molar masses")
humanize_molar_volume              = humanizer(units.MOLAR_VOLUME,              "humanize_molar_volume",              "molar volumes")
humanize_molar_density             = humanizer(units.MOLAR_DENSITY,             "humanize_molar_density",             "molar densities")
humanize_molar_concentration       = humanizer(units.MOLAR_CONCENTRATION,       "humanize_molar_concentration",       "molar concentrations")
humanize_magnetic_flux             = humanizer(units.MAGNETIC_FLUX,             "humanize_magnetic_flux",             "magnetic fluxes")
humanize_magnetic_flux_density     = humanizer(units.MAGNETIC_FLUX_DENSITY,     "humanize_magnetic_flux_density",     "magnetic flux densities")
humanize_illuminance               = humanizer(units.ILLUMINANCE,               "humanize_illuminance",               "illuminances")
humanize_luminous_flux             = humanizer(units.LUMINOUS_FLUX,             "humanize_luminous_flux",             "luminous fluxes")
humanize_radioactivity             = humanizer(units.RADIOACTIVITY,             "humanize_radioactivity",             "radioactivities")
humanize_radiation_dose_equivalent = humanizer(units.RADIATION_DOSE_EQUIVALENT, "humanize_radiation_dose_equivalent", "equivalent radiation doses")
humanize_radiation_dose_absorbed   = humanizer(units.RADIATION_DOSE_ABSORBED,   "humanize_radiation_dose_absorbed",   "absorbed radiation doses")
humanize_catalytic_activity        = humanizer(units.CATALYTIC_ACTIVITY,        "humanize_catalytic_activity",        "catalytic activities")
# @formatter:on
