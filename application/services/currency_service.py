import logging

from domain.models.catalog import CURRENCIES
from domain.models.currency import Currency
from domain.services.formatting import format_rate
from infrastructure.store.market_store import MarketDataStore

logger = logging.getLogger(__name__)


class CurrencyService:
	def __init__(self, store: MarketDataStore):
		self.store = store

	def get_supported_currencies(self) -> list[Currency]:
		return list(CURRENCIES)

	def get_rate_board(self, limit: int | None = None) -> dict:
		"""Value of one pivot unit in each catalog currency other than the pivot."""
		snapshot = self.store.snapshot()
		rates = snapshot.rates

		entries = []
		for currency in CURRENCIES:
			if currency.code == rates.base:
				continue
			rate = rates.rates.get(currency.code)
			if rate is None:
				logger.debug(f'No rate loaded for {currency.code}')
			entries.append(
				{
					'code': currency.code,
					'name': currency.name,
					'symbol': currency.symbol,
					'rate': rate,
					'formatted_rate': format_rate(rate, currency.code) if rate is not None else None,
				}
			)

		if limit is not None:
			entries = entries[:limit]

		return {
			'base': rates.base,
			'last_updated': snapshot.last_updated,
			'rates': entries,
		}
