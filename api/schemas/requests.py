from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models.currency import ConversionRequest as ConversionRequestModel
from domain.services.validation import normalize_currency_code, parse_amount


class ConversionRequest(BaseModel):
	from_currency: str = Field(..., min_length=3, max_length=5)
	to_currency: str = Field(..., min_length=3, max_length=5)
	amount: float = Field(..., ge=0)
	swap: bool = Field(False, description='Exchange from_currency and to_currency before converting')

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return normalize_currency_code(v)

	@field_validator('amount', mode='before')
	@classmethod
	def amount_must_be_finite(cls, v):
		return parse_amount(v)

	def to_domain(self) -> ConversionRequestModel:
		request = ConversionRequestModel(
			amount=self.amount,
			from_currency=self.from_currency,
			to_currency=self.to_currency,
		)
		return request.swapped() if self.swap else request

	model_config = ConfigDict(
		json_schema_extra={
			'example': {'from_currency': 'USD', 'to_currency': 'EUR', 'amount': 100.00, 'swap': False}
		}
	)
