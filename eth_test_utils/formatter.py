from typing import Iterable, Optional, Union

from .config import BILLION, ETHER, GWEI, MILLION, THOUSAND, TRILLION
from .utils import BNLike, display_ratio, div_trunc, format_number, to_bn


def sum_bn(values: Iterable[BNLike]) -> int:
    return sum((to_bn(v) for v in values), 0)


def format_amount(amount: BNLike, divisor: Optional[BNLike] = None) -> Union[int, str]:
    """
    Людяне представлення великого числа: 123, 4.56k, 7.89m, 1.2b, 3t.

    Якщо divisor не заданий (або 0), береться ether для |amount| > gwei, інакше 1.
    Нуль повертається як int 0. Float з'являється лише на останньому кроці;
    якщо частка не влазить у float, друкується Decimal (1E+370t).
    """
    amt = to_bn(amount)
    if amt == 0:
        return 0
    neg = amt < 0
    amt = abs(amt)
    dm = to_bn(divisor) if divisor else 0
    if not dm:
        dm = ETHER if amt > GWEI else 1

    q = amt // dm
    if q < THOUSAND:
        value = q if dm < MILLION else display_ratio(amt // MILLION, dm // MILLION)
        result = format_number(value)
    elif q < MILLION:
        result = format_number(display_ratio(q, 1_000)) + "k"
    elif q < BILLION:
        result = format_number(display_ratio(q // THOUSAND, 1_000)) + "m"
    elif q < TRILLION:
        result = format_number(display_ratio(q // MILLION, 1_000)) + "b"
    else:
        result = format_number(display_ratio(q // BILLION, 1_000)) + "t"
    return "-" + result if neg else result


def to_percent(a: BNLike, b: BNLike) -> float:
    """(a / b) * 100 з двома знаками, відкидаючи решту. b == 0 -> ZeroDivisionError."""
    return div_trunc(to_bn(a) * 100_00, to_bn(b)) / 100


def format_percent(percent: float) -> str:
    return f"{percent:.2f}%"
