"""Cache/fallback coordinator: the entry point callers use to get pollen data.

Every call resolves to a cached value, a freshly scraped report, or the
synthetic dataset. Upstream failures never reach the caller; they are logged
and the synthetic result is cached under the same TTL so an outage does not
trigger a fetch on every request.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date
from typing import Any

from pollencast.cache.store import CacheState, CacheStore
from pollencast.config.schema import AppConfig
from pollencast.ingest.report_client import FetchError
from pollencast.ingest.report_parser import ParseError
from pollencast.ingest.report_scraper import ReportScraper
from pollencast.models.pollen import PollenData, ShareCard
from pollencast.transform.mock_data import generate_mock_pollen_data
from pollencast.transform.normalizer import normalize
from pollencast.transform.share_card import build_share_card

logger = logging.getLogger(__name__)

POLLEN_CACHE_KEY = "austin-pollen"
SHARE_CARD_CACHE_KEY = "austin-og"


class PollenService:
    def __init__(
        self,
        scraper: ReportScraper,
        store: CacheStore,
        config: AppConfig,
        today: Callable[[], date] = date.today,
    ):
        self.scraper = scraper
        self.store = store
        self.config = config
        self.today = today
        self._locks: dict[str, asyncio.Lock] = {}

    async def get(self, key: str = POLLEN_CACHE_KEY) -> PollenData:
        """Return pollen data for key. Never raises."""
        return await self._cached(key, self.config.cache.pollen_ttl_seconds, self._load)

    async def get_pollen_data(self) -> PollenData:
        return await self.get(POLLEN_CACHE_KEY)

    async def get_share_card(self) -> ShareCard:
        """Preview card payload, cached separately under the longer TTL.

        A miss builds the card from the cached pollen entry, loading it first
        if needed.
        """

        async def load() -> ShareCard:
            return build_share_card(await self.get(), self.config)

        return await self._cached(
            SHARE_CARD_CACHE_KEY, self.config.cache.share_card_ttl_seconds, load
        )

    def get_mock_pollen_data(self) -> PollenData:
        return generate_mock_pollen_data(self.today(), self.config)

    def status(self, key: str = POLLEN_CACHE_KEY) -> CacheState:
        if self.store.get(key) is not None:
            return CacheState.FRESH
        lock = self._locks.get(key)
        if lock is not None and lock.locked():
            return CacheState.FETCHING
        return CacheState.EMPTY

    async def _cached(
        self, key: str, ttl: float, loader: Callable[[], Awaitable[Any]]
    ) -> Any:
        entry = self.store.get(key)
        if entry is not None:
            return entry.value

        # Single flight: later callers wait here and read the winner's result.
        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            entry = self.store.get(key)
            if entry is not None:
                return entry.value
            value = await loader()
            self.store.put(key, value, ttl)
            logger.info("Cached %s for %ds", key, ttl)
            return value

    async def _load(self) -> PollenData:
        deadline = self.config.cache.fetch_deadline_seconds
        try:
            raw = await asyncio.wait_for(self.scraper.fetch(), timeout=deadline)
            return normalize(raw, config=self.config, today=self.today())
        except (FetchError, ParseError) as e:
            logger.warning("Report scrape failed, using synthetic data: %s", e)
        except TimeoutError:
            logger.warning(
                "Report scrape exceeded %.1fs deadline, using synthetic data", deadline
            )
        except Exception:
            logger.exception("Unexpected error building pollen data, using synthetic data")
        return self.get_mock_pollen_data()
