"""
Application constants following kkb_fastapi pattern.
"""
from decimal import Decimal
from enum import Enum


class ConfigFile:
    """Configuration file paths."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class EmissionCategory(str, Enum):
    """Known activity categories, plus an explicit variant for everything else."""
    ELECTRICITY = "electricity"
    TRANSPORT_CAR = "transport_car"
    TRANSPORT_BUS = "transport_bus"
    TRANSPORT_TRAIN = "transport_train"
    TRANSPORT_FLIGHT = "transport_flight"
    WASTE = "waste"
    MEAT = "meat"
    UNKNOWN = "unknown"


class TransportModeEnum(str, Enum):
    """Transport modes accepted by the footprint calculator."""
    CAR = "car"
    BUS = "bus"
    TRAIN = "train"
    FLIGHT = "flight"


class MalformedRowReason(str, Enum):
    """Why a CSV row was dropped by the parser."""
    INVALID_DATE = "invalid_date"
    INVALID_AMOUNT = "invalid_amount"


# Columns every uploaded dataset must declare (header match is case-insensitive)
REQUIRED_COLUMNS = ("date", "department", "category", "unit", "amount")

COMMENT_PREFIX = "#"

DEFAULT_HISTORY_STORAGE_KEY = "carbon_history"

# Equivalences for user-facing comparisons
KG_CO2E_PER_TREE_YEAR = Decimal("21")
KG_CO2E_PER_SMARTPHONE_CHARGE = Decimal("0.005")

# Largest activity amount accepted; keeps emissions and their 2-place
# labels within the default 28-digit decimal precision
MAX_ACTIVITY_AMOUNT = Decimal("1e15")
