from .base import ExchangeRateProvider, GoldPriceProvider
from .exchangerate_api import ExchangeRateAPIProvider
from .gold import HttpGoldPriceProvider, StaticGoldPriceProvider

__all__ = [
	'ExchangeRateProvider',
	'GoldPriceProvider',
	'ExchangeRateAPIProvider',
	'HttpGoldPriceProvider',
	'StaticGoldPriceProvider',
]
