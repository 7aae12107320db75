"""
Proportional Renderer: малює набір BigInt як смугу фіксованої ширини.

Приклад draw_amounts:
    [..|.........|................|..........|...||...............|......]
Приклад draw_percent:
    [............................................................|.......] 60.00%
"""
import math
from collections.abc import Sequence as SequenceABC
from typing import Iterable, Optional, Sequence, Union

from .config import (
    DELIMITER,
    FILLER,
    RENDER_WIDTH,
    SYMBOL_HIGH,
    SYMBOL_LOW,
    SYMBOL_MAX,
    SYMBOL_MID,
    SYMBOL_OVERFLOW,
    SYMBOL_ZERO,
)
from .formatter import format_percent
from .utils import BNLike, InvalidArgument, div_trunc, to_bn


def draw_amounts(amounts: Iterable[BNLike]) -> str:
    """
    Розбиває RENDER_WIDTH колонок між значеннями пропорційно їх частці.

    Між сусідніми значеннями стоїть DELIMITER, решта (weight budget) заповнюється FILLER.
    Похибка округлення вниз переноситься на наступний сегмент, тому сума
    крапок завжди рівно RENDER_WIDTH - (len(amounts) - 1).
    """
    values = [to_bn(a) for a in amounts]
    if any(a < 0 for a in values):
        raise InvalidArgument("array contains negative number(s)")

    delimiters = len(values) - 1
    if delimiters >= RENDER_WIDTH:
        return f"[{DELIMITER * RENDER_WIDTH}]"

    total = sum(values)
    if delimiters <= 0 or total == 0:
        return f"[{FILLER * RENDER_WIDTH}]"

    weight = RENDER_WIDTH - delimiters

    parts = []
    # залишок тримаємо помноженим на weight, щоб не губити дробову частину
    remainder = 0
    for i, amount in enumerate(values):
        dots, remainder = divmod(amount * weight + remainder, total)
        parts.append(FILLER * dots)
        if i < delimiters:
            parts.append(DELIMITER)
    return f"[{''.join(parts)}]"


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def draw_percent(percent: float) -> str:
    if not math.isfinite(percent):
        raise InvalidArgument(f"percent must be finite, got {percent!r}")
    col = min(max(_round_half_up(percent), 1), RENDER_WIDTH)
    bar = FILLER * (col - 1) + DELIMITER + FILLER * (RENDER_WIDTH - col)
    return f"[{bar}] {format_percent(percent)}"


def draw_booleans(values: Iterable) -> str:
    return "".join(SYMBOL_MAX if v else SYMBOL_ZERO for v in values)


def print_symbol(amount: BNLike, max_: Optional[BNLike] = None) -> str:
    amt = to_bn(amount)
    top = amt if max_ is None else to_bn(max_)

    if amt == 0:
        return SYMBOL_ZERO
    if amt == top:
        return SYMBOL_MAX
    if amt > top:
        return SYMBOL_OVERFLOW
    if amt <= div_trunc(top, 10):
        return SYMBOL_LOW
    if amt <= div_trunc(top, 2):
        return SYMBOL_MID
    return SYMBOL_HIGH


def draw_symbols(
    values: Iterable[BNLike],
    maxima: Optional[Union[BNLike, Sequence[BNLike]]] = None,
) -> str:
    """
    Друкує значення по одному символу (див. print_symbol).

    maxima: None: максимум серед values (рахується на кожен виклик),
    скаляр: один максимум для всіх, послідовність: свій для кожного.
    """
    vals = [to_bn(v) for v in values]
    if maxima is None:
        tops = [max([0, *vals])] * len(vals)
    elif isinstance(maxima, SequenceABC) and not isinstance(maxima, (str, bytes, bytearray)):
        if len(maxima) != len(vals):
            raise InvalidArgument(f"expected {len(vals)} maxima, got {len(maxima)}")
        tops = [to_bn(m) for m in maxima]
    else:
        tops = [to_bn(maxima)] * len(vals)
    return "".join(print_symbol(v, t) for v, t in zip(vals, tops))
