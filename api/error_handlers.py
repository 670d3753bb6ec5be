import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import InvalidInputError, ProviderError, UnknownCurrencyError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(UnknownCurrencyError)
	async def unknown_currency_handler(request: Request, exc: UnknownCurrencyError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(InvalidInputError)
	async def invalid_input_handler(request: Request, exc: InvalidInputError):
		return JSONResponse(status_code=422, content={'detail': str(exc)})

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error: {exc}')
		return JSONResponse(
			status_code=503, content={'detail': f'Market data unavailable: {exc}'}
		)
