from .requests import ConversionRequest
from .responses import (
	ConversionResponse,
	CurrencyResponse,
	GoldValueResponse,
	RateBoardEntry,
	RateBoardResponse,
	RefreshResponse,
	StatusResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionRequest',
	'ConversionResponse',
	'CurrencyResponse',
	'GoldValueResponse',
	'RateBoardEntry',
	'RateBoardResponse',
	'RefreshResponse',
	'StatusResponse',
	'SupportedCurrenciesResponse',
]
