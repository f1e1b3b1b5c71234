"""
Sample dataset loader.

The source is either an http(s) URL, fetched with httpx, or a file path;
relative paths are resolved against the carbon_cue package directory.
"""

import asyncio
import logging
from pathlib import Path

import httpx

from carbon_cue.utils.exceptions import SampleDataUnavailableError

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class SampleDataLoader:
    """Loads the sample dataset text."""

    def __init__(self, source: str, transport: httpx.AsyncBaseTransport | None = None):
        """
        Args:
            source: URL or file path of the sample CSV
            transport: Optional httpx transport (used by tests)
        """
        self.source = source
        self.transport = transport

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))

    def resolve_path(self) -> Path:
        path = Path(self.source)
        return path if path.is_absolute() else PACKAGE_DIR / path

    async def load(self) -> str:
        """
        Read the sample dataset.

        Raises:
            SampleDataUnavailableError: If the file or URL cannot be read
        """
        if self.is_remote:
            return await self._fetch()
        return await self._read_file()

    async def _fetch(self) -> str:
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(self.source)
                response.raise_for_status()
                return response.text
        except httpx.HTTPError as e:
            logger.error(f"Error loading sample data from {self.source}: {e}")
            raise SampleDataUnavailableError(self.source, e) from e

    async def _read_file(self) -> str:
        path = self.resolve_path()
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading sample data from {path}: {e}")
            raise SampleDataUnavailableError(str(path), e) from e
