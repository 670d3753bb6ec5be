class CurrencyException(Exception):
    pass


class UnknownCurrencyError(CurrencyException):
    pass


class InvalidInputError(CurrencyException, ValueError):
    pass


class InvalidWeightError(InvalidInputError):
    pass


class ProviderError(CurrencyException):
    pass


class ProviderConnectionError(ProviderError):
    """Transport-level failure (timeout, refused connection). Safe to retry."""
