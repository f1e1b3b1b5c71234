"""
API tests for calculation history endpoints following kkb_fastapi pattern.
"""

import json
from decimal import Decimal

import pytest

from carbon_cue.pydantic_models.calculation import CalculationDetails
from carbon_cue.services.pipeline_state import ALREADY_SAVED_MESSAGE
from carbon_cue.test.factory.calculation import CalculationEntryFactory
from carbon_cue.test.factory.key_value import HistoryBlobFactory


@pytest.mark.asyncio
async def test_empty_history(test_async_client):
    response = await test_async_client.get("/api/v1/history/")

    assert response.status_code == 200
    assert response.json() == {"entries": [], "is_empty": True, "message": "No history yet."}


@pytest.mark.asyncio
async def test_save_without_calculation(test_async_client):
    response = await test_async_client.post("/api/v1/history/")

    assert response.status_code == 409
    assert response.json()["detail"] == "Please calculate your footprint before saving."

    history = await test_async_client.get("/api/v1/history/")
    assert history.json()["is_empty"] is True


@pytest.mark.asyncio
async def test_calculate_save_list_clear(test_async_client):
    calculation = await test_async_client.post(
        "/api/v1/calculations/calculate",
        json={"transport_km": 50, "electricity_kwh": 100},
    )
    entry = calculation.json()["entry"]

    saved = await test_async_client.post("/api/v1/history/")
    assert saved.status_code == 201
    assert saved.json()["date"] == entry["date"]

    history = await test_async_client.get("/api/v1/history/")
    data = history.json()
    assert data["is_empty"] is False
    assert data["message"] is None
    assert len(data["entries"]) == 1
    assert Decimal(data["entries"][0]["total"]) == Decimal("90.5335")

    cleared = await test_async_client.delete("/api/v1/history/")
    assert cleared.status_code == 204

    history = await test_async_client.get("/api/v1/history/")
    assert history.json()["entries"] == []
    assert history.json()["message"] == "No history yet."


@pytest.mark.asyncio
async def test_pending_calculation_is_saved_once(test_async_client):
    await test_async_client.post("/api/v1/calculations/calculate", json={"meat_meals": 1})

    first = await test_async_client.post("/api/v1/history/")
    second = await test_async_client.post("/api/v1/history/")

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json()["detail"] == ALREADY_SAVED_MESSAGE


@pytest.mark.asyncio
async def test_history_keeps_insertion_order(test_async_client):
    for meals in (1, 2, 3):
        await test_async_client.post("/api/v1/calculations/calculate", json={"meat_meals": meals})
        await test_async_client.post("/api/v1/history/")

    response = await test_async_client.get("/api/v1/history/")

    totals = [Decimal(entry["total"]) for entry in response.json()["entries"]]
    assert totals == [Decimal("15"), Decimal("30"), Decimal("45")]


@pytest.mark.asyncio
async def test_existing_history_is_listed(test_async_client):
    entry = CalculationEntryFactory(
        total=Decimal("12.34"),
        details=CalculationDetails(
            transport=Decimal("12.34"), electricity=Decimal("0"), meat=Decimal("0")
        ),
    )
    await HistoryBlobFactory(value=json.dumps([entry.to_storage()]))

    response = await test_async_client.get("/api/v1/history/")

    entries = response.json()["entries"]
    assert len(entries) == 1
    assert entries[0]["date"] == entry.date
    assert float(entries[0]["total"]) == 12.34


@pytest.mark.asyncio
async def test_corrupt_history_lists_as_empty(test_async_client):
    await HistoryBlobFactory(value="{oops")

    response = await test_async_client.get("/api/v1/history/")

    assert response.status_code == 200
    assert response.json()["is_empty"] is True
