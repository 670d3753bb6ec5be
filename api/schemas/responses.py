from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: float = Field(..., description='Original amount requested')
	converted_amount: float = Field(..., description='Converted amount, unrounded')
	exchange_rate: float = Field(..., description='Units of target currency per unit of source')
	formatted_amount: str = Field(..., description='Converted amount with symbol, two decimals')
	summary: str = Field(..., description='Human readable conversion line')
	rates_updated_at: datetime | None = Field(None, description='When the rates were last refreshed')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'original_amount': 100.00,
				'converted_amount': 90.00,
				'exchange_rate': 0.90,
				'formatted_amount': '€90.00',
				'summary': '$100.00 = €90.00',
				'rates_updated_at': '2025-09-27T10:30:00Z',
			}
		}
	)


class GoldValueResponse(BaseModel):
	weight_grams: float = Field(..., description='Weight of gold in grams')
	price_per_gram: float = Field(..., description='Quoted price per gram')
	quote_currency: str = Field(..., description='Currency of the quoted price')
	display_currency: str = Field(..., description='Currency of the computed value')
	value: float = Field(..., description='Value of the gold, unrounded')
	formatted_value: str = Field(..., description='Value with symbol, two decimals')
	breakdown: str = Field(..., description='Weight times price line')
	quote_observed_at: datetime = Field(..., description='When the gold price was observed')


class CurrencyResponse(BaseModel):
	code: str
	name: str
	symbol: str


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyResponse] = Field(description='Catalog of display currencies')


class RateBoardEntry(BaseModel):
	code: str
	name: str
	symbol: str
	rate: float | None = Field(None, description='Units per one base unit, null when not loaded')
	formatted_rate: str | None = None


class RateBoardResponse(BaseModel):
	base: str = Field(..., description='Pivot currency the rates are relative to')
	last_updated: datetime | None = None
	rates: list[RateBoardEntry]


class RefreshResponse(BaseModel):
	rates_updated: bool
	quote_updated: bool
	notice: str | None = Field(None, description='Single user-visible failure message')
	last_updated: datetime | None = None
	finished_at: datetime


class StatusResponse(BaseModel):
	state: str = Field(..., description='idle or loading')
	last_updated: datetime | None = None
	notice: str | None = None
	rates_loaded: int = Field(..., description='Number of currencies in the rate table')
	gold_quote_available: bool
