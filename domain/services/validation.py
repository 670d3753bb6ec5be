import math
import re

from domain.exceptions.currency import InvalidInputError, InvalidWeightError

_CURRENCY_CODE = re.compile(r"^[A-Z]{3,5}$")
_GROUPED_NUMBER = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")


def parse_amount(raw: str | float | int, field_name: str = "amount") -> float:
    """Parse user input into a finite, non-negative float.

    Raises InvalidInputError instead of letting ``nan``/``inf`` or negative
    values reach the conversion functions.
    """
    if isinstance(raw, bool):
        raise InvalidInputError(f"{field_name} must be a number")
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise InvalidInputError(f"{field_name} is required")
        if "," in text:
            # commas are only accepted as thousands separators: 1,234.5
            if not _GROUPED_NUMBER.match(text):
                raise InvalidInputError(f"{field_name} must be a number, got {raw!r}")
            text = text.replace(",", "")
        try:
            value = float(text)
        except ValueError:
            raise InvalidInputError(f"{field_name} must be a number, got {raw!r}") from None
    elif isinstance(raw, (int, float)):
        value = float(raw)
    else:
        raise InvalidInputError(f"{field_name} must be a number, got {type(raw).__name__}")

    if not math.isfinite(value):
        raise InvalidInputError(f"{field_name} must be finite, got {raw!r}")
    if value < 0:
        raise InvalidInputError(f"{field_name} must not be negative, got {raw!r}")
    return value


def parse_weight(raw: str | float | int) -> float:
    try:
        return parse_amount(raw, field_name="weight")
    except InvalidInputError as e:
        raise InvalidWeightError(str(e)) from e


def normalize_currency_code(code: str) -> str:
    normalized = code.strip().upper()
    if not _CURRENCY_CODE.match(normalized):
        raise InvalidInputError(f"Invalid currency code: {code!r}")
    return normalized
