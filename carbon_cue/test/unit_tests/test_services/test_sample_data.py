"""
Service tests for the sample dataset loader following kkb_fastapi pattern.
"""

import httpx
import pytest

from carbon_cue.services.sample_data import SampleDataLoader
from carbon_cue.utils.exceptions import SampleDataUnavailableError

SAMPLE_URL = "https://example.com/sample_data.csv"


@pytest.mark.asyncio
async def test_load_bundled_sample():
    text = await SampleDataLoader("data/sample_data.csv").load()

    assert text.splitlines()[0] == "Date,Department,Category,Unit,Amount"


@pytest.mark.asyncio
async def test_missing_file_raises():
    loader = SampleDataLoader("data/does_not_exist.csv")

    with pytest.raises(SampleDataUnavailableError) as exc_info:
        await loader.load()

    assert isinstance(exc_info.value.original_exception, FileNotFoundError)


@pytest.mark.asyncio
async def test_fetch_remote_sample():
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == SAMPLE_URL
        return httpx.Response(200, text="date,department,category,unit,amount\n")

    loader = SampleDataLoader(SAMPLE_URL, transport=httpx.MockTransport(handler))

    assert loader.is_remote
    assert await loader.load() == "date,department,category,unit,amount\n"


@pytest.mark.asyncio
async def test_remote_error_status_raises():
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    loader = SampleDataLoader(SAMPLE_URL, transport=transport)

    with pytest.raises(SampleDataUnavailableError) as exc_info:
        await loader.load()

    assert isinstance(exc_info.value.original_exception, httpx.HTTPStatusError)
