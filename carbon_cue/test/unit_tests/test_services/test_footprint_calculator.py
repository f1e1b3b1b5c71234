"""
Service tests for the single-session footprint calculator following kkb_fastapi pattern.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from carbon_cue.pydantic_models.calculation import FootprintCalculationRequest
from carbon_cue.services.calculators.footprint_calculator import (
    FootprintCalculator,
    epoch_millis,
    equivalences_for,
)
from carbon_cue.utils.constants import TransportModeEnum

FIXED_MOMENT = datetime(2024, 1, 5, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_MOMENT


def test_car_and_electricity():
    request = FootprintCalculationRequest(transport_km=50, electricity_kwh=100)

    entry = FootprintCalculator(clock=fixed_clock).calculate(request)

    assert entry.details.transport == Decimal("8.5335")
    assert entry.details.electricity == Decimal("82")
    assert entry.details.meat == Decimal("0")
    assert entry.total == Decimal("90.5335")
    assert entry.date == 1704412800000


def test_meat_meals():
    entry = FootprintCalculator().calculate(FootprintCalculationRequest(meat_meals=3))

    assert entry.details.meat == Decimal("45")
    assert entry.total == Decimal("45")


@pytest.mark.parametrize(
    "mode, expected",
    [
        (TransportModeEnum.CAR, Decimal("1.7067")),
        (TransportModeEnum.BUS, Decimal("1.1")),
        (TransportModeEnum.TRAIN, Decimal("0.4")),
        (TransportModeEnum.FLIGHT, Decimal("4.6")),
    ],
)
def test_transport_modes(mode, expected):
    request = FootprintCalculationRequest(transport_km=10, transport_mode=mode)

    entry = FootprintCalculator().calculate(request)

    assert entry.details.transport == expected


def test_total_is_sum_of_details():
    request = FootprintCalculationRequest(
        transport_km=Decimal("12.5"),
        transport_mode=TransportModeEnum.TRAIN,
        electricity_kwh=Decimal("7.25"),
        meat_meals=2,
    )

    entry = FootprintCalculator().calculate(request)

    details = entry.details
    assert entry.total == details.transport + details.electricity + details.meat


def test_all_zero_inputs():
    entry = FootprintCalculator().calculate(FootprintCalculationRequest())

    assert entry.total == Decimal("0")


def test_negative_inputs_are_rejected():
    with pytest.raises(ValidationError):
        FootprintCalculationRequest(electricity_kwh=-1)


def test_entries_are_immutable():
    entry = FootprintCalculator().calculate(FootprintCalculationRequest(meat_meals=1))

    with pytest.raises(ValidationError):
        entry.total = Decimal("0")


def test_epoch_millis():
    assert epoch_millis(FIXED_MOMENT) == 1704412800000


def test_equivalences():
    equivalences = equivalences_for(Decimal("210"))

    assert equivalences.trees_per_year == Decimal("10")
    assert equivalences.smartphone_charges == Decimal("42000")
