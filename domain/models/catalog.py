from domain.models.currency import Currency

CURRENCIES: tuple[Currency, ...] = (
    Currency(code="USD", name="US Dollar", symbol="$"),
    Currency(code="EUR", name="Euro", symbol="€"),
    Currency(code="GBP", name="British Pound", symbol="£"),
    Currency(code="JPY", name="Japanese Yen", symbol="¥"),
    Currency(code="CHF", name="Swiss Franc", symbol="CHF"),
    Currency(code="CAD", name="Canadian Dollar", symbol="C$"),
    Currency(code="AUD", name="Australian Dollar", symbol="A$"),
    Currency(code="CNY", name="Chinese Yuan", symbol="¥"),
    Currency(code="INR", name="Indian Rupee", symbol="₹"),
    Currency(code="KRW", name="South Korean Won", symbol="₩"),
    Currency(code="SGD", name="Singapore Dollar", symbol="S$"),
    Currency(code="HKD", name="Hong Kong Dollar", symbol="HK$"),
)

_BY_CODE = {currency.code: currency for currency in CURRENCIES}


def find_currency(code: str) -> Currency | None:
    return _BY_CODE.get(code.upper())


def currency_symbol(code: str) -> str:
    """Symbol for ``code``, or the code itself when it is not in the catalog."""
    currency = find_currency(code)
    return currency.symbol if currency else code
