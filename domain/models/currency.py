from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

PIVOT_CURRENCY = "USD"


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str


@dataclass(frozen=True)
class RateTable:
    """Units of each currency per one unit of ``base``.

    The base currency is implicitly 1.0 and does not need a key.
    """

    rates: Mapping[str, float] = field(default_factory=dict)
    base: str = PIVOT_CURRENCY
    fetched_at: datetime | None = None

    def __post_init__(self):
        # read-only view so a published table can never be mutated in place
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    @classmethod
    def empty(cls, base: str = PIVOT_CURRENCY) -> "RateTable":
        return cls(rates={}, base=base)

    def __len__(self) -> int:
        return len(self.rates)

    def __contains__(self, code: object) -> bool:
        return code == self.base or code in self.rates


@dataclass(frozen=True)
class GoldQuote:
    price_per_gram: float
    currency: str
    observed_at: datetime
    source: str = "static"


@dataclass(frozen=True)
class ConversionRequest:
    amount: float
    from_currency: str
    to_currency: str

    def swapped(self) -> "ConversionRequest":
        return ConversionRequest(
            amount=self.amount,
            from_currency=self.to_currency,
            to_currency=self.from_currency,
        )


@dataclass(frozen=True)
class MarketSnapshot:
    rates: RateTable
    gold_quote: GoldQuote | None = None
    last_updated: datetime | None = None  # set only by a successful rate fetch


@dataclass(frozen=True)
class RefreshResult:
    rates_updated: bool
    quote_updated: bool
    errors: tuple[str, ...]
    started_at: datetime
    finished_at: datetime

    @property
    def succeeded(self) -> bool:
        return not self.errors

    @property
    def notice(self) -> str | None:
        return " ".join(self.errors) if self.errors else None
