# nosec B101

import asyncio
from datetime import UTC, datetime

import pytest

from application.services.refresh_service import (
    GOLD_FAILURE_NOTICE,
    RATES_FAILURE_NOTICE,
    RefreshCoordinator,
    RefreshState,
)
from domain.exceptions.currency import ProviderConnectionError, ProviderError
from domain.models.currency import GoldQuote, RateTable
from infrastructure.store.market_store import MarketDataStore


def make_coordinator(store, rate_provider, gold_provider, **kwargs):
    kwargs.setdefault('timeout', 1.0)
    kwargs.setdefault('retry_attempts', 1)
    kwargs.setdefault('retry_backoff', 0)
    return RefreshCoordinator(
        store=store, rate_provider=rate_provider, gold_provider=gold_provider, **kwargs
    )


@pytest.mark.asyncio
async def test_refresh_publishes_rates_and_quote(rate_table, gold_quote, make_rate_provider, make_gold_provider):
    store = MarketDataStore()
    coordinator = make_coordinator(store, make_rate_provider(rate_table), make_gold_provider(gold_quote))

    result = await coordinator.refresh()

    assert result.rates_updated
    assert result.quote_updated
    assert result.errors == ()
    assert result.notice is None

    snapshot = store.snapshot()
    assert snapshot.rates is rate_table
    assert snapshot.gold_quote is gold_quote
    assert snapshot.last_updated is not None
    assert coordinator.state is RefreshState.IDLE
    assert coordinator.last_result is result


@pytest.mark.asyncio
async def test_rate_failure_keeps_previous_table_and_updates_quote(
    rate_table, gold_quote, make_rate_provider, make_gold_provider
):
    store = MarketDataStore()
    await store.publish_rates(rate_table, updated_at=datetime(2025, 11, 5, 9, 0, tzinfo=UTC))
    previous = store.snapshot()

    coordinator = make_coordinator(
        store,
        make_rate_provider(ProviderError('ExchangeRate-API HTTP error 500: boom')),
        make_gold_provider(gold_quote),
    )

    result = await coordinator.refresh()

    assert not result.rates_updated
    assert result.quote_updated
    assert result.errors == (RATES_FAILURE_NOTICE,)
    assert coordinator.notice == RATES_FAILURE_NOTICE

    snapshot = store.snapshot()
    assert snapshot.rates is previous.rates
    assert snapshot.last_updated == previous.last_updated
    assert snapshot.gold_quote is gold_quote


@pytest.mark.asyncio
async def test_gold_failure_keeps_previous_quote_and_updates_rates(
    rate_table, gold_quote, make_rate_provider, make_gold_provider
):
    store = MarketDataStore()
    await store.publish_quote(gold_quote)

    coordinator = make_coordinator(
        store,
        make_rate_provider(rate_table),
        make_gold_provider(ProviderError('Gold feed HTTP error 503: down')),
    )

    result = await coordinator.refresh()

    assert result.rates_updated
    assert not result.quote_updated
    assert result.errors == (GOLD_FAILURE_NOTICE,)
    assert store.snapshot().gold_quote is gold_quote
    assert store.snapshot().rates is rate_table


@pytest.mark.asyncio
async def test_both_failures_surface_both_notices(make_rate_provider, make_gold_provider):
    store = MarketDataStore()
    coordinator = make_coordinator(
        store,
        make_rate_provider(ProviderError('rates down')),
        make_gold_provider(ProviderError('gold down')),
    )

    result = await coordinator.refresh()

    assert result.errors == (RATES_FAILURE_NOTICE, GOLD_FAILURE_NOTICE)
    assert len(store.snapshot().rates) == 0
    assert store.snapshot().gold_quote is None
    assert store.snapshot().last_updated is None


@pytest.mark.asyncio
async def test_next_successful_refresh_clears_notice(
    rate_table, gold_quote, make_rate_provider, make_gold_provider
):
    store = MarketDataStore()
    coordinator = make_coordinator(
        store,
        make_rate_provider(ProviderError('rates down'), rate_table),
        make_gold_provider(gold_quote),
    )

    await coordinator.refresh()
    assert coordinator.notice == RATES_FAILURE_NOTICE

    await coordinator.refresh()
    assert coordinator.notice is None
    assert store.snapshot().rates is rate_table


@pytest.mark.asyncio
async def test_slow_rate_fetch_times_out(rate_table, gold_quote, make_rate_provider, make_gold_provider):
    store = MarketDataStore()
    coordinator = make_coordinator(
        store,
        make_rate_provider(rate_table, delay=5),
        make_gold_provider(gold_quote),
        timeout=0.05,
    )

    result = await coordinator.refresh()

    assert result.errors == (RATES_FAILURE_NOTICE,)
    assert result.quote_updated
    assert len(store.snapshot().rates) == 0


@pytest.mark.asyncio
async def test_connection_errors_are_retried(rate_table, gold_quote, make_rate_provider, make_gold_provider):
    rate_provider = make_rate_provider(ProviderConnectionError('request failed: ConnectError'), rate_table)
    coordinator = make_coordinator(
        MarketDataStore(), rate_provider, make_gold_provider(gold_quote), retry_attempts=3
    )

    result = await coordinator.refresh()

    assert result.rates_updated
    assert rate_provider.calls == 2


@pytest.mark.asyncio
async def test_provider_errors_are_not_retried(rate_table, gold_quote, make_rate_provider, make_gold_provider):
    rate_provider = make_rate_provider(ProviderError('HTTP error 401'), rate_table)
    coordinator = make_coordinator(
        MarketDataStore(), rate_provider, make_gold_provider(gold_quote), retry_attempts=3
    )

    result = await coordinator.refresh()

    assert not result.rates_updated
    assert rate_provider.calls == 1


@pytest.mark.asyncio
async def test_retries_give_up_after_configured_attempts(gold_quote, make_rate_provider, make_gold_provider):
    rate_provider = make_rate_provider(ProviderConnectionError('request failed: ConnectTimeout'))
    coordinator = make_coordinator(
        MarketDataStore(), rate_provider, make_gold_provider(gold_quote), retry_attempts=2
    )

    result = await coordinator.refresh()

    assert result.errors == (RATES_FAILURE_NOTICE,)
    assert rate_provider.calls == 2


@pytest.mark.asyncio
async def test_fetches_run_concurrently(rate_table, gold_quote, make_rate_provider, make_gold_provider):
    # the rate fetch only completes once the gold fetch has started
    gate = asyncio.Event()
    rate_provider = make_rate_provider(rate_table, gate=gate)
    gold_provider = make_gold_provider(gold_quote, on_fetch=gate.set)
    coordinator = make_coordinator(MarketDataStore(), rate_provider, gold_provider, timeout=1.0)

    result = await coordinator.refresh()

    assert result.succeeded


@pytest.mark.asyncio
async def test_concurrent_refreshes_share_one_run(rate_table, gold_quote, make_rate_provider, make_gold_provider):
    rate_provider = make_rate_provider(rate_table, delay=0.05)
    gold_provider = make_gold_provider(gold_quote)
    coordinator = make_coordinator(MarketDataStore(), rate_provider, gold_provider)

    first, second = await asyncio.gather(coordinator.refresh(), coordinator.refresh())

    assert first is second
    assert rate_provider.calls == 1
    assert gold_provider.calls == 1


@pytest.mark.asyncio
async def test_state_is_loading_while_refreshing(rate_table, gold_quote, make_rate_provider, make_gold_provider):
    gate = asyncio.Event()
    coordinator = make_coordinator(
        MarketDataStore(), make_rate_provider(rate_table, gate=gate), make_gold_provider(gold_quote)
    )

    task = asyncio.create_task(coordinator.refresh())
    await asyncio.sleep(0)
    await asyncio.sleep(0)

    assert coordinator.state is RefreshState.LOADING
    assert coordinator.notice is None

    gate.set()
    await task

    assert coordinator.state is RefreshState.IDLE


@pytest.mark.asyncio
async def test_quote_in_scenario_values(make_rate_provider, make_gold_provider):
    store = MarketDataStore()
    quote = GoldQuote(price_per_gram=65.50, currency='USD', observed_at=datetime.now(UTC))
    coordinator = make_coordinator(
        store, make_rate_provider(RateTable(rates={'EUR': 0.9, 'INR': 83})), make_gold_provider(quote)
    )

    await coordinator.refresh()

    snapshot = store.snapshot()
    assert snapshot.rates.rates['INR'] == 83
    assert snapshot.gold_quote.price_per_gram == 65.50
