from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	PIVOT_CURRENCY: str = 'USD'

	# empty: built from PIVOT_CURRENCY, e.g. https://api.exchangerate-api.com/v4/latest/USD
	RATES_API_URL: str = ''

	# Gold price feed; the static quote below is used when no URL is set
	GOLD_PRICE_URL: str = ''
	GOLD_PRICE_PER_GRAM: float = 65.50

	FETCH_TIMEOUT_SECONDS: float = 10.0
	FETCH_RETRY_ATTEMPTS: int = 2
	FETCH_RETRY_BACKOFF_SECONDS: float = 0.5

	# Application
	APP_NAME: str = 'Currency & Gold Calculator API'
	LOG_LEVEL: str = 'INFO'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
