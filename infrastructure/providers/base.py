from abc import ABC, abstractmethod

from domain.models.currency import GoldQuote, RateTable


class ExchangeRateProvider(ABC):
    """Source of a complete rate table relative to the pivot currency."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def fetch_rates(self) -> RateTable:
        ...

    async def close(self) -> None:
        """Release any underlying HTTP client."""


class GoldPriceProvider(ABC):
    """Source of the current gold price per gram."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def fetch_quote(self) -> GoldQuote:
        ...

    async def close(self) -> None:
        """Release any underlying HTTP client."""
