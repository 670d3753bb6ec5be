import logging
from typing import Annotated

from fastapi import Depends

from application.services import ConversionService, CurrencyService, RefreshCoordinator
from config.settings import get_settings
from infrastructure.providers import (
	ExchangeRateAPIProvider,
	ExchangeRateProvider,
	GoldPriceProvider,
	HttpGoldPriceProvider,
	StaticGoldPriceProvider,
)
from infrastructure.store.market_store import MarketDataStore

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	store: MarketDataStore | None = None
	rate_provider: ExchangeRateProvider | None = None
	gold_provider: GoldPriceProvider | None = None
	coordinator: RefreshCoordinator | None = None


deps = AppDependencies()


def build_gold_provider() -> GoldPriceProvider:
	settings = get_settings()
	if settings.GOLD_PRICE_URL:
		logger.info(f'Using gold price feed at {settings.GOLD_PRICE_URL}')
		return HttpGoldPriceProvider(settings.GOLD_PRICE_URL, timeout=settings.FETCH_TIMEOUT_SECONDS)
	logger.info(f'Using static gold price of {settings.GOLD_PRICE_PER_GRAM} {settings.PIVOT_CURRENCY}/g')
	return StaticGoldPriceProvider(settings.GOLD_PRICE_PER_GRAM, currency=settings.PIVOT_CURRENCY)


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.store = MarketDataStore(pivot=settings.PIVOT_CURRENCY)
	deps.rate_provider = ExchangeRateAPIProvider(
		url=settings.RATES_API_URL or None,
		pivot=settings.PIVOT_CURRENCY,
		timeout=settings.FETCH_TIMEOUT_SECONDS,
	)
	deps.gold_provider = build_gold_provider()
	deps.coordinator = RefreshCoordinator(
		store=deps.store,
		rate_provider=deps.rate_provider,
		gold_provider=deps.gold_provider,
		timeout=settings.FETCH_TIMEOUT_SECONDS,
		retry_attempts=settings.FETCH_RETRY_ATTEMPTS,
		retry_backoff=settings.FETCH_RETRY_BACKOFF_SECONDS,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.rate_provider:
		await deps.rate_provider.close()
	if deps.gold_provider:
		await deps.gold_provider.close()

	logger.info('Cleanup complete')


async def bootstrap() -> None:
	"""Load the first rates and gold quote. Called after init_dependencies() at startup."""
	logger.info('Bootstrapping application...')

	if deps.coordinator is None:
		raise RuntimeError('Dependencies not initialized. Call init_dependencies() first.')

	result = await deps.coordinator.refresh()
	if result.succeeded:
		logger.info('Bootstrap complete')
	else:
		# stays up and serves whatever loaded; a later refresh can fill the gaps
		logger.warning(f'Bootstrap finished with errors: {result.notice}')


def get_store() -> MarketDataStore:
	if deps.store is None:
		raise RuntimeError('Market data store not initialized')
	return deps.store


def get_refresh_coordinator() -> RefreshCoordinator:
	if deps.coordinator is None:
		raise RuntimeError('Refresh coordinator not initialized')
	return deps.coordinator


def get_conversion_service(
	store: Annotated[MarketDataStore, Depends(get_store)],
) -> ConversionService:
	return ConversionService(store=store)


def get_currency_service(
	store: Annotated[MarketDataStore, Depends(get_store)],
) -> CurrencyService:
	return CurrencyService(store=store)
