import logging
import math
from datetime import UTC, datetime

import httpx

from domain.exceptions.currency import ProviderConnectionError, ProviderError
from domain.models.currency import PIVOT_CURRENCY, RateTable
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class ExchangeRateAPIProvider(ExchangeRateProvider):
	BASE_URL = 'https://api.exchangerate-api.com/v4/latest'

	def __init__(
		self,
		url: str | None = None,
		pivot: str = PIVOT_CURRENCY,
		client: httpx.AsyncClient | None = None,
		timeout: float = 10,
	):
		self.pivot = pivot.upper()
		self.url = url or f'{self.BASE_URL}/{self.pivot}'
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def _request(self) -> dict:
		try:
			response = await self._client.get(self.url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'ExchangeRate-API HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderConnectionError(
				f'ExchangeRate-API request failed: {e.__class__.__name__}'
			) from e
		except Exception as e:
			raise ProviderError(f'ExchangeRate-API response parsing error: {str(e)}') from e

		if not isinstance(data, dict):
			raise ProviderError('ExchangeRate-API response parsing error: body is not an object')
		return data

	async def fetch_rates(self) -> RateTable:
		data = await self._request()

		base = str(data.get('base', self.pivot)).upper()
		if base != self.pivot:
			raise ProviderError(f'ExchangeRate-API returned rates for {base}, expected {self.pivot}')

		raw_rates = data.get('rates')
		if not isinstance(raw_rates, dict):
			raise ProviderError('ExchangeRate-API response is missing the rates object')

		rates: dict[str, float] = {}
		for code, value in raw_rates.items():
			if isinstance(value, bool) or not isinstance(value, (int, float)):
				logger.warning(f'Dropping non-numeric rate for {code}: {value!r}')
				continue
			if not math.isfinite(value) or value <= 0:
				logger.warning(f'Dropping invalid rate for {code}: {value!r}')
				continue
			rates[str(code).upper()] = float(value)

		return RateTable(rates=rates, base=self.pivot, fetched_at=datetime.now(UTC))

	async def close(self) -> None:
		await self._client.aclose()
