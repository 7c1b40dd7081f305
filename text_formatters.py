from decimal import ROUND_HALF_UP, Decimal
from typing import Union

METRIC_PREFIXES = ["k", "M", "G", "T", "P", "E", "Z", "Y"]
METRIC_POWERS = [1000 ** (i + 1) for i in range(len(METRIC_PREFIXES))]


def _round_half_up(value: float, places: int) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def metric(n: Union[int, float]) -> str:
    """
    Formats a number with a metric prefix, e.g. 1000 -> "1k", 1500 -> "1.5k".

    Numbers below 1000 are returned as they are. Scaled values under 10 keep
    one decimal digit unless that digit is 0, larger ones are rounded to an
    integer and roll over to the next prefix when they reach 1000.

    Args:
        n (int | float): The number to format.

    Returns:
        str: The formatted number.
    """
    sign = "-" if n < 0 else ""
    abs_n = abs(n)
    for i in reversed(range(len(METRIC_PREFIXES))):
        limit = METRIC_POWERS[i]
        if abs_n < limit:
            continue
        scaled = abs_n / limit
        if scaled < 10:
            one_decimal = _round_half_up(scaled, 1)
            if one_decimal != one_decimal.to_integral_value():
                return f"{sign}{one_decimal}{METRIC_PREFIXES[i]}"
        rounded = int(_round_half_up(scaled, 0))
        if rounded < 1000 or i + 1 == len(METRIC_PREFIXES):
            return f"{sign}{rounded}{METRIC_PREFIXES[i]}"
        return f"{sign}1{METRIC_PREFIXES[i + 1]}"
    return str(n)
