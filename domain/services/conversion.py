"""Currency conversion through the pivot currency of a rate table.

Every cross conversion is routed through ``rates.base``: the amount is first
expressed in the pivot, then multiplied by the target rate. Nothing here
rounds; rounding is a display concern.
"""

import math

from domain.exceptions.currency import InvalidInputError, InvalidWeightError, UnknownCurrencyError
from domain.models.currency import GoldQuote, RateTable


def rate_of(code: str, rates: RateTable) -> float:
    code = code.upper()
    if code == rates.base:
        return 1.0
    try:
        return rates.rates[code]
    except KeyError:
        raise UnknownCurrencyError(f"No exchange rate available for {code}") from None


def convert(amount: float, from_currency: str, to_currency: str, rates: RateTable) -> float:
    if not math.isfinite(amount):
        raise InvalidInputError(f"Amount must be a finite number, got {amount!r}")

    from_currency = from_currency.upper()
    to_currency = to_currency.upper()
    if from_currency == to_currency:
        return amount

    if from_currency == rates.base:
        pivot_amount = amount
    else:
        pivot_amount = amount / rate_of(from_currency, rates)

    if to_currency == rates.base:
        result = pivot_amount
    else:
        result = pivot_amount * rate_of(to_currency, rates)

    if not math.isfinite(result):
        raise InvalidInputError(
            f"Converting amount {amount!r} from {from_currency} to {to_currency}: result out of range"
        )
    return result


def value_of_gold(
    weight_grams: float, quote: GoldQuote, display_currency: str, rates: RateTable
) -> float:
    if isinstance(weight_grams, bool) or not isinstance(weight_grams, (int, float)):
        raise InvalidWeightError(f"Weight must be a number, got {weight_grams!r}")
    if not math.isfinite(weight_grams) or weight_grams < 0:
        raise InvalidWeightError(
            f"Weight must be a finite non-negative number of grams, got {weight_grams!r}"
        )

    value_in_quote_currency = weight_grams * quote.price_per_gram
    if not math.isfinite(value_in_quote_currency):
        raise InvalidWeightError(f"weight of {weight_grams!r} grams is too large to value")

    try:
        return convert(value_in_quote_currency, quote.currency, display_currency, rates)
    except InvalidInputError as e:
        raise InvalidWeightError(
            f"weight of {weight_grams!r} grams is too large to value in {display_currency.upper()}"
        ) from e
