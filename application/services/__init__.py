from .conversion_service import ConversionService
from .currency_service import CurrencyService
from .refresh_service import RefreshCoordinator, RefreshState

__all__ = ['ConversionService', 'CurrencyService', 'RefreshCoordinator', 'RefreshState']
