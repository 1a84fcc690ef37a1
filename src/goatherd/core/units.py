"""Unit conversion utilities using pint.

All records are stored in the units the farm logs them in:
- Feed quantities: kilograms (kg)
- Milk yield: litres (L)
- Pasture size: acres (ac)

Display units are controlled by settings.display_units:
- "metric": kg, L, hectares
- "imperial": lb, US gallons, acres
"""

import pint

from goatherd.core.config import settings

# Create a unit registry (lazily initialized)
_ureg: pint.UnitRegistry | None = None


def get_ureg() -> pint.UnitRegistry:
    """Get the pint unit registry (lazily initialized)."""
    global _ureg
    if _ureg is None:
        _ureg = pint.UnitRegistry()
    return _ureg


def is_imperial() -> bool:
    """Check if display units are imperial."""
    return settings.display_units == "imperial"


# =============================================================================
# Feed (mass)
# =============================================================================


def feed_kg_to_display(kg: float) -> tuple[float, str]:
    """Convert kilograms to display units.

    Returns:
        Tuple of (value, unit_symbol) in display units
    """
    if is_imperial():
        ureg = get_ureg()
        return ((kg * ureg.kilogram).to(ureg.pound).magnitude, "lb")
    return (kg, "kg")


def format_feed(kg: float, decimals: int = 1) -> str:
    """Format a feed quantity, e.g. "2.5 kg" or "5.5 lb"."""
    value, unit = feed_kg_to_display(kg)
    return f"{value:.{decimals}f} {unit}"


# =============================================================================
# Milk (volume)
# =============================================================================


def milk_litres_to_display(litres: float) -> tuple[float, str]:
    """Convert litres to display units (US gallons when imperial)."""
    if is_imperial():
        ureg = get_ureg()
        return ((litres * ureg.liter).to(ureg.gallon).magnitude, "gal")
    return (litres, "L")


def format_milk(litres: float, decimals: int = 2) -> str:
    """Format a milk quantity, e.g. "1.75L" or "0.46gal"."""
    value, unit = milk_litres_to_display(litres)
    return f"{value:.{decimals}f}{unit}"


# =============================================================================
# Pasture area
# =============================================================================


def pasture_acres_to_display(acres: float) -> tuple[float, str]:
    """Convert acres to display units (hectares when metric)."""
    if is_imperial():
        return (acres, "ac")
    ureg = get_ureg()
    return ((acres * ureg.acre).to(ureg.hectare).magnitude, "ha")


def format_area(acres: float, decimals: int = 1) -> str:
    """Format a pasture size, e.g. "2.5 ac" or "1.0 ha"."""
    value, unit = pasture_acres_to_display(acres)
    return f"{value:.{decimals}f} {unit}"
