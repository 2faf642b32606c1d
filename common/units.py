"""
Unit Registry for Distance Reporting.

The geometry core works in kilometers and degrees as plain floats. This
module uses the `pint` library at the reporting boundary, so that a
distance can be handed to a caller in whatever length unit it asks for
without hand-written conversion factors.

Example Usage
-------------
>>> from common.units import Q_, convert_distance
>>> convert_distance(10_000.0, 'nmi')
5399.56...
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

# Length units the CLI and scene layer accept, keyed by their short name
DISTANCE_UNITS = {
    "km": "kilometer",
    "m": "meter",
    "mi": "mile",
    "nmi": "nautical_mile",
}


def ensure_quantity(
    value: Union[float, pint.Quantity],
    default_unit: str = "kilometer"
) -> pint.Quantity:
    """Ensure a value is a pint Quantity, applying the default unit to bare numbers.

    Parameters
    ----------
    value : float or pint.Quantity
        The value to convert. Distances from the geometry core are bare
        floats in kilometers.
    default_unit : str
        The unit to apply if value is a bare number.

    Returns
    -------
    pint.Quantity
        The value with units.
    """
    if isinstance(value, pint.Quantity):
        return value
    return Q_(value, default_unit)


def convert_distance(distance_km: Union[float, pint.Quantity], unit: str) -> float:
    """Convert a distance into another length unit.

    Parameters
    ----------
    distance_km : float or pint.Quantity
        Distance; bare numbers are taken as kilometers.
    unit : str
        Short unit name, one of ``DISTANCE_UNITS``.

    Returns
    -------
    float
        The magnitude in the requested unit.

    Raises
    ------
    ValueError
        If the unit is not a supported length unit.
    """
    if unit not in DISTANCE_UNITS:
        raise ValueError(
            f"Unsupported distance unit '{unit}'. "
            f"Expected one of {sorted(DISTANCE_UNITS)}"
        )
    return float(ensure_quantity(distance_km).to(DISTANCE_UNITS[unit]).magnitude)

