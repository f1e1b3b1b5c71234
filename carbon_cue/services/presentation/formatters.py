"""
Display formatting for emission values and category keys.
"""

import re
from decimal import Decimal

from carbon_cue.services.calculators.unit_converter import UnitConverter

THOUSAND = Decimal("1000")
MILLION = Decimal("1000000")


def format_number(value: int | float | Decimal) -> str:
    """
    Compact number label for charts.

    Example:
        >>> format_number(500), format_number(1500), format_number(2_500_000)
        ('500', '1.50k', '2.50M')
    """
    value = UnitConverter.normalize_number(value)
    if value >= MILLION:
        return f"{UnitConverter.round_half_up(value / MILLION, 2)}M"
    if value >= THOUSAND:
        return f"{UnitConverter.round_half_up(value / THOUSAND, 2)}k"
    return f"{UnitConverter.round_half_up(value, 0)}"


def format_emission(kg: int | float | Decimal) -> str:
    """Emission label in kg, switching to tonnes from 1000 kg."""
    kg = UnitConverter.normalize_number(kg)
    if kg >= THOUSAND:
        return f"{UnitConverter.round_half_up(UnitConverter.kg_to_tonnes(kg), 2)} t"
    return f"{UnitConverter.round_half_up(kg, 2)} kg"


def format_share(percent: Decimal) -> str:
    return f"{UnitConverter.round_half_up(percent, 1)}%"


def human_readable_category(key: str) -> str:
    """
    Turn a category key into a label.

    Example:
        >>> human_readable_category("transport_car")
        'Car'
        >>> human_readable_category("office_paper")
        'Office Paper'
    """
    label = key.removeprefix("transport_").replace("_", " ")
    return re.sub(r"\b\w", lambda match: match.group().upper(), label)
