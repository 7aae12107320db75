"""Старі імена з першої версії bn_utils; нове див. sampler/formatter/render."""
import warnings
from typing import Iterable, Optional

from .formatter import format_amount, format_percent
from .render import draw_booleans, draw_symbols
from .sampler import random_bit_length, random_full_width, random_half_width, random_range
from .utils import BNLike


def random_bn256() -> int:
    return random_full_width()


def random_bn255() -> int:
    return random_half_width()


def random_bits(bits: int) -> int:
    return random_bit_length(bits)


def random_bn(from_: BNLike, to: BNLike) -> int:
    return random_range(from_, to)


def print_amt(amt: BNLike, dm: Optional[BNLike] = None):
    return format_amount(amt, dm)


def _deprecated(old: str, new: str) -> None:
    warnings.warn(f"{old}() is deprecated, use {new}()", DeprecationWarning, stacklevel=3)


def print_percent(percent: float) -> str:
    _deprecated("print_percent", "format_percent")
    return format_percent(percent)


def print_booleans(values: Iterable) -> str:
    _deprecated("print_booleans", "draw_booleans")
    return draw_booleans(values)


def print_symbols(values, maxima=None) -> str:
    _deprecated("print_symbols", "draw_symbols")
    return draw_symbols(values, maxima)
