from decimal import Decimal
from fractions import Fraction
from typing import Union

from web3 import Web3

BNLike = Union[int, str, bytes, Decimal, Fraction, float]


class InvalidArgument(ValueError):
    """Порушення передумови: кривий діапазон, ширина не кратна 8, від'ємне значення тощо."""


def to_bn(x: BNLike) -> int:
    """
    Єдина точка приведення до BigInt (Python int).

    Приймає int, десятковий або 0x-hex рядок, bytes (big-endian),
    а також цілі Decimal/Fraction/float. Все інше дає InvalidArgument.
    """
    if isinstance(x, bool):
        raise InvalidArgument(f"not a number: {x!r}")
    if isinstance(x, int):
        return x
    if isinstance(x, (bytes, bytearray)):
        return int.from_bytes(x, "big")
    if isinstance(x, str):
        s = x.strip().lower().replace("_", "")
        neg = s.startswith("-")
        if neg:
            s = s[1:]
        try:
            v = int(s, 16) if s.startswith("0x") else int(s, 10)
        except ValueError:
            raise InvalidArgument(f"not a number: {x!r}") from None
        return -v if neg else v
    if isinstance(x, (Decimal, Fraction, float)):
        if isinstance(x, Decimal) and not x.is_finite():
            raise InvalidArgument(f"not a finite number: {x!r}")
        if isinstance(x, float) and (x != x or x in (float("inf"), float("-inf"))):
            raise InvalidArgument(f"not a finite number: {x!r}")
        if x != int(x):
            raise InvalidArgument(f"not an integer: {x!r}")
        return int(x)
    raise InvalidArgument(f"not a number: {x!r}")


def div_trunc(a: int, b: int) -> int:
    # ділення з округленням до нуля (як BN.div), а не floor як у //
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def format_number(x: Union[int, float, Decimal]) -> str:
    """Друкує число так, як його надрукував би JS: 4.0 -> "4", 4.56 -> "4.56"."""
    if isinstance(x, int):
        return str(x)
    if isinstance(x, Decimal):
        # сюди потрапляють лише значення поза діапазоном float
        return str(x.normalize())
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    return repr(x)


def display_ratio(n: int, d: int) -> Union[float, Decimal]:
    """n / d для виводу: float, а для чисел поза діапазоном float Decimal."""
    try:
        return n / d
    except OverflowError:
        return Decimal(n) / Decimal(d)


def to_wei(amount: Union[int, str, Decimal], unit: str = "ether") -> int:
    return Web3.to_wei(Decimal(str(amount)), unit)


def from_wei(value: BNLike, unit: str = "ether") -> Decimal:
    return Decimal(Web3.from_wei(to_bn(value), unit))


def short_addr(addr: str) -> str:
    """0x1234…abcd для логів; короткі рядки повертаються як є."""
    if len(addr) <= 12:
        return addr
    return addr[:6] + "…" + addr[-4:]
