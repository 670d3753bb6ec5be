from domain.exceptions.currency import ProviderError
from domain.models.currency import ConversionRequest
from domain.services.conversion import convert, value_of_gold
from domain.services.formatting import format_conversion, format_gold_breakdown, format_money
from infrastructure.store.market_store import MarketDataStore


class ConversionService:
	def __init__(self, store: MarketDataStore):
		self.store = store

	def convert(self, request: ConversionRequest) -> dict:
		snapshot = self.store.snapshot()
		rates = snapshot.rates
		from_currency = request.from_currency.upper()
		to_currency = request.to_currency.upper()

		if from_currency != to_currency and len(rates) == 0:
			raise ProviderError('Exchange rates are not available yet')

		converted_amount = convert(request.amount, from_currency, to_currency, rates)
		exchange_rate = convert(1.0, from_currency, to_currency, rates)

		return {
			'from_currency': from_currency,
			'to_currency': to_currency,
			'original_amount': request.amount,
			'converted_amount': converted_amount,
			'exchange_rate': exchange_rate,
			'formatted_amount': format_money(converted_amount, to_currency),
			'summary': format_conversion(request.amount, from_currency, converted_amount, to_currency),
			'rates_updated_at': snapshot.last_updated,
		}

	def value_gold(self, weight_grams: float, display_currency: str) -> dict:
		snapshot = self.store.snapshot()
		quote = snapshot.gold_quote
		if quote is None:
			raise ProviderError('Gold price is not available yet')

		display_currency = display_currency.upper()
		if display_currency != quote.currency and len(snapshot.rates) == 0:
			raise ProviderError('Exchange rates are not available yet')

		value = value_of_gold(weight_grams, quote, display_currency, snapshot.rates)

		return {
			'weight_grams': weight_grams,
			'price_per_gram': quote.price_per_gram,
			'quote_currency': quote.currency,
			'display_currency': display_currency,
			'value': value,
			'formatted_value': format_money(value, display_currency),
			'breakdown': format_gold_breakdown(weight_grams, quote.price_per_gram, quote.currency),
			'quote_observed_at': quote.observed_at,
		}
