import re
from decimal import Decimal, getcontext, localcontext, ROUND_FLOOR, InvalidOperation
from typing import Union

# Set high precision for large token calculations
getcontext().prec = 100

DISPLAY_SEPARATORS = ".,"
_PLAIN_AMOUNT = re.compile(
    rf"(?P<whole>\d*)(?:[{DISPLAY_SEPARATORS}](?P<fraction>\d*))?", re.ASCII
)


def _check_decimals(decimals: int) -> None:
    if decimals < 0:
        raise ValueError(f"Invalid decimals: {decimals}")


def to_base_unit(amount: Union[str, int, float, Decimal], decimals: int) -> int:
    """
    Converts a token amount to base units (the smallest denomination).
    Accepts display strings using either "." or "," as the fractional separator.
    Plain decimal strings are converted with integer arithmetic, so no digit is lost
    however long the amount is; digits beyond ``decimals`` are floored away.
    Example: `to_base_unit("1,5", 8) => 150000000`
    """
    _check_decimals(decimals)
    if isinstance(amount, str):
        text = amount.strip()
        match = _PLAIN_AMOUNT.fullmatch(text)
        if match is not None:
            whole = match.group("whole") or "0"
            fraction = (match.group("fraction") or "")[:decimals].ljust(decimals, "0")
            return int(whole) * 10**decimals + int(fraction or "0")
        try:
            amount_dec = Decimal(text.replace(",", "."))
        except InvalidOperation as e:
            raise ValueError(f"Invalid display amount: {amount!r}") from e
    else:
        amount_dec = Decimal(amount)

    if not amount_dec.is_finite() or amount_dec < 0:
        raise ValueError(f"Invalid display amount: {amount!r}")

    # size the context so the shift is exact regardless of the global precision
    sign, digits, exponent = amount_dec.as_tuple()
    with localcontext() as ctx:
        ctx.prec = len(digits) + decimals + max(exponent, 0) + 2
        multiplier = Decimal(10) ** decimals
        return int((amount_dec * multiplier).to_integral_value(rounding=ROUND_FLOOR))


def to_display_unit(base_amount: Union[int, Decimal], decimals: int) -> Decimal:
    """
    Converts a base unit amount to a human-readable value.
    Example: `to_display_unit(150000000, 8) => Decimal('1.5')`
    """
    _check_decimals(decimals)
    base_amount_dec = Decimal(base_amount)
    divisor = Decimal(10) ** decimals
    return base_amount_dec / divisor


def to_display_string(base_amount: int, decimals: int) -> str:
    """
    Converts a base unit amount to a display string without rounding.
    Trailing fractional zeros are dropped, "." is the separator.
    Example: `to_display_string(150000000, 8) => '1.5'`
    """
    _check_decimals(decimals)
    base_amount = int(base_amount)
    if base_amount < 0:
        raise ValueError(f"Invalid base unit amount: {base_amount}")
    if decimals == 0:
        return str(base_amount)

    whole, fraction = divmod(base_amount, 10**decimals)
    fraction_digits = str(fraction).rjust(decimals, "0").rstrip("0")
    if not fraction_digits:
        return str(whole)
    return f"{whole}.{fraction_digits}"
