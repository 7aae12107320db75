"""
Random Sampler: рівномірні BigInt для тестових фікстур.

Джерело ентропії: secrets (os.urandom). Не для ключів і не для
протидії атакам: random_range має зсув порядку 2^-256 біля верхньої межі.
"""
import secrets

from eth_account import Account
from web3 import Web3

from .config import TWO256
from .utils import BNLike, InvalidArgument, to_bn


def random_full_width() -> int:
    """Рівномірне ціле в [0, 2^256)."""
    return int.from_bytes(secrets.token_bytes(32), "big")


def random_half_width() -> int:
    """Рівномірне ціле в [0, 2^255): 256 біт без старшого."""
    return random_full_width() >> 1


def random_bit_length(bits: int) -> int:
    """Рівномірне ціле в [0, 2^bits), bits додатне і кратне 8."""
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0 or bits % 8:
        raise InvalidArgument(f"bits must be a positive multiple of 8, got {bits!r}")
    return int.from_bytes(secrets.token_bytes(bits >> 3), "big")


def random_range(from_: BNLike, to: BNLike) -> int:
    """
    Ціле в [from_, to) через лінійне відображення R ∈ [0, 2^256):

        r = from_ + (to - from_) * R // 2^256

    Без взяття за модулем, тільки цілочисельна арифметика.
    Якщо from_ == to, повертає from_.
    """
    lo = to_bn(from_)
    hi = to_bn(to)
    if lo > hi:
        raise InvalidArgument('"from" must not exceed "to"')
    return lo + (hi - lo) * random_full_width() // TWO256


def random_address() -> str:
    """Адреса щойно створеного акаунта (checksum)."""
    return Account.create().address


def random_hex(size: int = 32) -> str:
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidArgument(f"size must be a non-negative int, got {size!r}")
    return Web3.to_hex(secrets.token_bytes(size))
