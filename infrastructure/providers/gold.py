import logging
import math
from datetime import UTC, datetime

import httpx

from domain.exceptions.currency import ProviderConnectionError, ProviderError
from domain.models.currency import PIVOT_CURRENCY, GoldQuote
from infrastructure.providers.base import GoldPriceProvider

logger = logging.getLogger(__name__)


class StaticGoldPriceProvider(GoldPriceProvider):
    """Fixed price per gram, stamped with the time of each fetch."""

    def __init__(self, price_per_gram: float = 65.50, currency: str = PIVOT_CURRENCY):
        if not math.isfinite(price_per_gram) or price_per_gram <= 0:
            raise ValueError(f"Gold price must be positive, got {price_per_gram!r}")
        self.price_per_gram = price_per_gram
        self.currency = currency.upper()

    @property
    def name(self) -> str:
        return "static"

    async def fetch_quote(self) -> GoldQuote:
        return GoldQuote(
            price_per_gram=self.price_per_gram,
            currency=self.currency,
            observed_at=datetime.now(UTC),
            source=self.name,
        )


class HttpGoldPriceProvider(GoldPriceProvider):
    """Reads ``{"price": ..., "currency": ..., "timestamp": ...}`` from a feed URL.

    ``timestamp`` may be epoch milliseconds or an ISO 8601 string; when it is
    absent the fetch time is used.
    """

    def __init__(self, url: str, client: httpx.AsyncClient | None = None, timeout: float = 10):
        self.url = url
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def name(self) -> str:
        return "http"

    async def _request(self) -> dict:
        try:
            response = await self._client.get(self.url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"Gold feed HTTP error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderConnectionError(f"Gold feed request failed: {e.__class__.__name__}") from e
        except Exception as e:
            raise ProviderError(f"Gold feed response parsing error: {str(e)}") from e

        if not isinstance(data, dict):
            raise ProviderError("Gold feed response parsing error: body is not an object")
        return data

    async def fetch_quote(self) -> GoldQuote:
        data = await self._request()

        price = data.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ProviderError(f"Gold feed returned a non-numeric price: {price!r}")
        if not math.isfinite(price) or price <= 0:
            raise ProviderError(f"Gold feed returned an invalid price: {price!r}")

        return GoldQuote(
            price_per_gram=float(price),
            currency=str(data.get("currency", PIVOT_CURRENCY)).upper(),
            observed_at=self._parse_timestamp(data.get("timestamp")),
            source=self.name,
        )

    @staticmethod
    def _parse_timestamp(value) -> datetime:
        if value is None:
            return datetime.now(UTC)
        try:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return datetime.fromtimestamp(value / 1000, tz=UTC)
            parsed = datetime.fromisoformat(str(value))
        except (ValueError, OverflowError, OSError) as e:
            raise ProviderError(f"Gold feed returned an invalid timestamp: {value!r}") from e
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)

    async def close(self) -> None:
        await self._client.aclose()
