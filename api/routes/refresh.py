from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_refresh_coordinator, get_store
from api.schemas import RefreshResponse, StatusResponse
from application.services import RefreshCoordinator
from infrastructure.store.market_store import MarketDataStore

router = APIRouter(prefix='/api', tags=['refresh'])


@router.post(
	'/refresh',
	response_model=RefreshResponse,
	status_code=status.HTTP_200_OK,
	summary='Refresh exchange rates and gold price',
)
async def refresh_market_data(
	coordinator: Annotated[RefreshCoordinator, Depends(get_refresh_coordinator)],
	store: Annotated[MarketDataStore, Depends(get_store)],
) -> RefreshResponse:
	result = await coordinator.refresh()
	return RefreshResponse(
		rates_updated=result.rates_updated,
		quote_updated=result.quote_updated,
		notice=result.notice,
		last_updated=store.snapshot().last_updated,
		finished_at=result.finished_at,
	)


@router.get(
	'/status',
	response_model=StatusResponse,
	status_code=status.HTTP_200_OK,
	summary='Loading state, last update and current notice',
)
def get_status(
	coordinator: Annotated[RefreshCoordinator, Depends(get_refresh_coordinator)],
	store: Annotated[MarketDataStore, Depends(get_store)],
) -> StatusResponse:
	snapshot = store.snapshot()
	return StatusResponse(
		state=coordinator.state.value,
		last_updated=snapshot.last_updated,
		notice=coordinator.notice,
		rates_loaded=len(snapshot.rates),
		gold_quote_available=snapshot.gold_quote is not None,
	)
