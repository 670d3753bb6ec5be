from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from api.dependencies import get_conversion_service, get_currency_service
from api.schemas import (
	ConversionRequest,
	ConversionResponse,
	CurrencyResponse,
	GoldValueResponse,
	RateBoardResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService, CurrencyService
from domain.models.currency import ConversionRequest as ConversionRequestModel
from domain.services.validation import normalize_currency_code, parse_amount, parse_weight

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
def convert_currency(
	from_currency: Annotated[str, Path(min_length=3, max_length=5)],
	to_currency: Annotated[str, Path(min_length=3, max_length=5)],
	amount: Annotated[str, Path(description='Amount to convert, a non-negative number')],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	request = ConversionRequestModel(
		amount=parse_amount(amount),
		from_currency=normalize_currency_code(from_currency),
		to_currency=normalize_currency_code(to_currency),
	)
	result = service.convert(request)
	return ConversionResponse(**result)


@router.post(
	'/convert',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount, optionally swapping the currencies',
)
def convert_currency_body(
	body: ConversionRequest,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	result = service.convert(body.to_domain())
	return ConversionResponse(**result)


@router.get(
	'/gold/{weight}',
	response_model=GoldValueResponse,
	status_code=status.HTTP_200_OK,
	summary='Value a weight of gold',
)
def get_gold_value(
	weight: Annotated[str, Path(description='Weight in grams, a non-negative number')],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	currency: Annotated[str, Query(min_length=3, max_length=5)] = 'USD',
) -> GoldValueResponse:
	result = service.value_gold(parse_weight(weight), normalize_currency_code(currency))
	return GoldValueResponse(**result)


@router.get(
	'/rates',
	response_model=RateBoardResponse,
	status_code=status.HTTP_200_OK,
	summary='Current rates of the catalog currencies against the pivot',
)
def get_rate_board(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
	limit: Annotated[int | None, Query(ge=1)] = None,
) -> RateBoardResponse:
	return RateBoardResponse(**service.get_rate_board(limit=limit))


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	currencies = [
		CurrencyResponse(code=c.code, name=c.name, symbol=c.symbol)
		for c in service.get_supported_currencies()
	]
	return SupportedCurrenciesResponse(currencies=currencies)
