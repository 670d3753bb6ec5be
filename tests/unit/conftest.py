"""
Shared fixtures: sample rate tables, gold quotes and in-memory providers.
"""

import asyncio
from datetime import UTC, datetime

import pytest

from domain.exceptions.currency import ProviderError
from domain.models.currency import GoldQuote, RateTable
from infrastructure.providers.base import ExchangeRateProvider, GoldPriceProvider

SAMPLE_RATES = {
    'EUR': 0.9,
    'GBP': 0.79,
    'JPY': 151.3,
    'INR': 83.0,
    'CHF': 0.88,
}


class FakeRateProvider(ExchangeRateProvider):
    """Returns queued outcomes in order; an Exception instance is raised."""

    def __init__(self, *outcomes, delay: float = 0, gate: asyncio.Event | None = None):
        self.outcomes = list(outcomes)
        self.delay = delay
        self.gate = gate
        self.calls = 0
        self.closed = False

    @property
    def name(self) -> str:
        return 'fake-rates'

    async def fetch_rates(self) -> RateTable:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.delay:
            await asyncio.sleep(self.delay)
        outcome = self.outcomes[min(self.calls, len(self.outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


class FakeGoldProvider(GoldPriceProvider):
    def __init__(self, *outcomes, delay: float = 0, on_fetch=None):
        self.outcomes = list(outcomes)
        self.delay = delay
        self.on_fetch = on_fetch
        self.calls = 0

    @property
    def name(self) -> str:
        return 'fake-gold'

    async def fetch_quote(self) -> GoldQuote:
        self.calls += 1
        if self.on_fetch is not None:
            self.on_fetch()
        if self.delay:
            await asyncio.sleep(self.delay)
        outcome = self.outcomes[min(self.calls, len(self.outcomes)) - 1]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def rate_table():
    return RateTable(rates=SAMPLE_RATES, fetched_at=datetime(2025, 11, 5, 10, 0, tzinfo=UTC))


@pytest.fixture
def gold_quote():
    return GoldQuote(
        price_per_gram=65.50,
        currency='USD',
        observed_at=datetime(2025, 11, 5, 10, 0, tzinfo=UTC),
    )


@pytest.fixture
def failing_rate_provider():
    return FakeRateProvider(ProviderError('ExchangeRate-API HTTP error 500: boom'))


@pytest.fixture
def make_rate_provider():
    return FakeRateProvider


@pytest.fixture
def make_gold_provider():
    return FakeGoldProvider
