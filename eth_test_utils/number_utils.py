import math
import random
from datetime import datetime, timezone
from typing import Any, Sequence, Tuple, Union

from .utils import InvalidArgument, format_number

Number = Union[int, float]


# ---------- дати / unix ----------
def unix_to_date(unix_timestamp: Union[int, str]) -> datetime:
    return datetime.fromtimestamp(int(unix_timestamp), tz=timezone.utc)


def date_to_unix(date: datetime) -> int:
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return int(date.timestamp())


def print_unix_ts(unix_timestamp: Union[int, str]) -> str:
    """Дата в стилі en-US (UTC), напр. 5/8/2027."""
    d = unix_to_date(unix_timestamp)
    return f"{d.month}/{d.day}/{d.year}"


def print_duration(seconds: int) -> str:
    """Тривалість у вигляді 2w 3d 11:24:05; без годин 24:05; лише секунди 5s."""
    seconds = int(seconds)
    weeks = seconds // 604_800
    days = seconds % 604_800 // 86_400
    hours = seconds % 86_400 // 3600
    minutes = seconds % 3600 // 60
    seconds %= 60

    parts = []
    if weeks:
        parts.append(f"{weeks}w")
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours:02d}:{minutes:02d}:{seconds:02d}")
    elif minutes:
        parts.append(f"{minutes:02d}:{seconds:02d}")
    elif seconds:
        parts.append(f"{seconds}s")
    return " ".join(parts) if parts else "0"


# ---------- звичайні числа ----------
def sum_n(values: Sequence[Number]) -> Number:
    return sum(values, 0)


def random_int(from_: int, to: int) -> int:
    """Випадкове ціле в [from_, to); не для криптографії."""
    if from_ > to:
        raise InvalidArgument('"from" must not exceed "to"')
    return math.floor(from_ + random.random() * (to - from_))


def random_element(values: Sequence[Any], flat: bool = True) -> Union[Any, Tuple[Any, int]]:
    if not values:
        raise InvalidArgument("empty array")
    i = random_int(0, len(values))
    return values[i] if flat else (values[i], i)


def print_f2(n: Number) -> float:
    return math.floor(n * 100 + 0.5) / 100


def print_n(n: Number) -> str:
    if n < 1_000:
        return format_number(n)
    if n < 1_000_000:
        return format_number(print_f2(n / 1_000)) + "k"
    if n < 1_000_000_000:
        return format_number(print_f2(n / 1_000_000)) + "M"
    return format_number(print_f2(n / 1_000_000_000)) + "G"
