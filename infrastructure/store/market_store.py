import asyncio
import logging
from dataclasses import replace
from datetime import UTC, datetime

from domain.models.currency import PIVOT_CURRENCY, GoldQuote, MarketSnapshot, RateTable

logger = logging.getLogger(__name__)


class MarketDataStore:
    """Process-wide holder of the current rates and gold quote.

    Writers serialize on a lock and publish a new frozen snapshot with a
    single assignment; readers call ``snapshot()`` and never lock.
    """

    def __init__(self, pivot: str = PIVOT_CURRENCY):
        self._snapshot = MarketSnapshot(rates=RateTable.empty(base=pivot.upper()))
        self._write_lock = asyncio.Lock()

    def snapshot(self) -> MarketSnapshot:
        return self._snapshot

    async def publish_rates(self, rates: RateTable, updated_at: datetime | None = None) -> MarketSnapshot:
        async with self._write_lock:
            self._snapshot = replace(
                self._snapshot,
                rates=rates,
                last_updated=updated_at or rates.fetched_at or datetime.now(UTC),
            )
            logger.info(f"Published {len(rates)} exchange rates (base {rates.base})")
            return self._snapshot

    async def publish_quote(self, quote: GoldQuote) -> MarketSnapshot:
        async with self._write_lock:
            self._snapshot = replace(self._snapshot, gold_quote=quote)
            logger.info(f"Published gold quote {quote.price_per_gram} {quote.currency}/g")
            return self._snapshot
