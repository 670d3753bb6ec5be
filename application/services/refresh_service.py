import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from enum import Enum
from typing import TypeVar

from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from domain.exceptions.currency import ProviderConnectionError
from domain.models.currency import RefreshResult
from infrastructure.providers.base import ExchangeRateProvider, GoldPriceProvider
from infrastructure.store.market_store import MarketDataStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

RATES_FAILURE_NOTICE = "Failed to fetch exchange rates"
GOLD_FAILURE_NOTICE = "Failed to fetch gold prices"


class RefreshState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


class RefreshCoordinator:
    """Fetches rates and the gold quote concurrently and publishes each on success.

    A failed fetch leaves the previously published data in place. Calls made
    while a refresh is running wait for that refresh instead of starting
    another one.
    """

    def __init__(
        self,
        store: MarketDataStore,
        rate_provider: ExchangeRateProvider,
        gold_provider: GoldPriceProvider,
        timeout: float = 10.0,
        retry_attempts: int = 2,
        retry_backoff: float = 0.5,
    ):
        self.store = store
        self.rate_provider = rate_provider
        self.gold_provider = gold_provider
        self.timeout = timeout
        self.retry_attempts = max(1, retry_attempts)
        self.retry_backoff = retry_backoff
        self.last_result: RefreshResult | None = None
        self._inflight: asyncio.Task | None = None

    @property
    def state(self) -> RefreshState:
        if self._inflight is not None and not self._inflight.done():
            return RefreshState.LOADING
        return RefreshState.IDLE

    @property
    def notice(self) -> str | None:
        if self.state is RefreshState.LOADING or self.last_result is None:
            return None
        return self.last_result.notice

    async def refresh(self) -> RefreshResult:
        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.create_task(self._run())
        else:
            logger.info("Refresh already in progress, joining it")
        # shielded: a caller going away must not cancel the shared refresh
        return await asyncio.shield(self._inflight)

    async def _fetch_with_retry(self, fetch: Callable[[], Awaitable[T]]) -> T:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=self.retry_backoff, max=10),
            retry=retry_if_exception_type((ProviderConnectionError, TimeoutError)),
            reraise=True,
        )
        return await retrying(self._fetch_with_timeout, fetch)

    async def _fetch_with_timeout(self, fetch: Callable[[], Awaitable[T]]) -> T:
        return await asyncio.wait_for(fetch(), timeout=self.timeout)

    async def _run(self) -> RefreshResult:
        started_at = datetime.now(UTC)
        logger.info("Refreshing exchange rates and gold price...")

        rates_result, quote_result = await asyncio.gather(
            self._fetch_with_retry(self.rate_provider.fetch_rates),
            self._fetch_with_retry(self.gold_provider.fetch_quote),
            return_exceptions=True,
        )

        errors: list[str] = []

        rates_updated = False
        if isinstance(rates_result, BaseException):
            logger.error(f"Rate provider {self.rate_provider.name} failed: {rates_result!r}")
            errors.append(RATES_FAILURE_NOTICE)
        else:
            await self.store.publish_rates(rates_result, updated_at=datetime.now(UTC))
            rates_updated = True

        quote_updated = False
        if isinstance(quote_result, BaseException):
            logger.error(f"Gold price provider {self.gold_provider.name} failed: {quote_result!r}")
            errors.append(GOLD_FAILURE_NOTICE)
        else:
            await self.store.publish_quote(quote_result)
            quote_updated = True

        result = RefreshResult(
            rates_updated=rates_updated,
            quote_updated=quote_updated,
            errors=tuple(errors),
            started_at=started_at,
            finished_at=datetime.now(UTC),
        )
        self.last_result = result

        if result.succeeded:
            logger.info("Refresh complete")
        else:
            logger.warning(f"Refresh finished with errors: {result.notice}")
        return result
