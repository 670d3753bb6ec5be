from domain.models.catalog import currency_symbol


def format_money(value: float, currency_code: str) -> str:
    """``$1,234.50``: symbol prefix, thousands separators, two decimals."""
    symbol = currency_symbol(currency_code)
    if round(value, 2) == 0:
        # no "-$0.00" for -0.0 or tiny negatives
        value = 0.0
    if value < 0:
        return f"-{symbol}{-value:,.2f}"
    return f"{symbol}{value:,.2f}"


def format_rate(rate: float, currency_code: str) -> str:
    return f"{currency_symbol(currency_code)}{rate:,.4f}"


def format_weight(weight_grams: float) -> str:
    return f"{weight_grams:,.10g}g"


def format_conversion(amount: float, from_currency: str, converted: float, to_currency: str) -> str:
    return f"{format_money(amount, from_currency)} = {format_money(converted, to_currency)}"


def format_gold_breakdown(weight_grams: float, price_per_gram: float, quote_currency: str) -> str:
    price = format_money(price_per_gram, quote_currency)
    return f"{format_weight(weight_grams)} × {price} {quote_currency}/g"
