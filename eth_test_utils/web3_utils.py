from collections.abc import Mapping
from typing import Any, Dict, Optional


def _is_index_key(key: Any) -> bool:
    if isinstance(key, int):
        return True
    return isinstance(key, str) and key.isascii() and key.isdigit()


def _as_mapping(raw: Any) -> Optional[Mapping]:
    if isinstance(raw, Mapping):
        return raw
    # namedtuple-результати (decode_tuples у web3.py)
    if hasattr(raw, "_asdict"):
        return raw._asdict()
    return None


def web3_tuple_to_object(raw: Any, decode_integers: bool = True) -> Optional[Dict[str, Any]]:
    """
    Результат виклику контракту -> звичайний dict лише з іменованими полями.

    Позиційні ключі ("0", "1", ...) пропускаються; рядки з цифр
    перетворюються на int, якщо decode_integers.
    """
    m = _as_mapping(raw)
    if m is None:
        return None

    out: Dict[str, Any] = {}
    for key, value in m.items():
        if _is_index_key(key):
            continue
        if decode_integers and isinstance(value, str) and value.isascii() and value.isdigit():
            out[key] = int(value)
        else:
            out[key] = value
    return out


def object_matches_expected(expected: Any, actual: Any) -> bool:
    """Перевіряє лише ключі з expected; зайві поля в actual ігноруються."""
    if not isinstance(expected, Mapping) or not isinstance(actual, Mapping):
        return False
    for key, value in expected.items():
        if key not in actual or actual[key] != value:
            return False
    return True


def print_obj(obj: Any, ignore_numeric_keys: bool = True) -> Dict[str, Any]:
    """Рекурсивна копія, де числа та інші об'єкти стають рядками (для логів)."""

    def convert(o: Mapping) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in o.items():
            if ignore_numeric_keys and _is_index_key(key):
                continue
            nested = _as_mapping(value)
            if value is None or isinstance(value, (str, bool)):
                result[key] = value
            elif nested is not None:
                result[key] = convert(nested)
            else:
                result[key] = str(value)
        return result

    m = _as_mapping(obj)
    return convert(m) if m is not None else {}
