"""Хелпери для тестових і деплой-скриптів смарт-контрактів."""
from .config import ETHER, GWEI, TWO256
from .deployment import print_contract_details, print_named_contract_details
from .formatter import format_amount, format_percent, sum_bn, to_percent
from .legacy import (
    print_amt,
    print_booleans,
    print_percent,
    print_symbols,
    random_bits,
    random_bn,
    random_bn255,
    random_bn256,
)
from .number_utils import (
    date_to_unix,
    print_duration,
    print_n,
    print_unix_ts,
    random_element,
    random_int,
    sum_n,
    unix_to_date,
)
from .render import draw_amounts, draw_booleans, draw_percent, draw_symbols, print_symbol
from .sampler import (
    random_address,
    random_bit_length,
    random_full_width,
    random_half_width,
    random_hex,
    random_range,
)
from .utils import InvalidArgument, from_wei, to_bn, to_wei
from .web3_utils import object_matches_expected, print_obj, web3_tuple_to_object

__all__ = [
    "ETHER",
    "GWEI",
    "TWO256",
    "InvalidArgument",
    "to_bn",
    "to_wei",
    "from_wei",
    # sampler
    "random_full_width",
    "random_half_width",
    "random_bit_length",
    "random_range",
    "random_address",
    "random_hex",
    # formatter
    "sum_bn",
    "format_amount",
    "to_percent",
    "format_percent",
    # render
    "draw_amounts",
    "draw_percent",
    "draw_booleans",
    "draw_symbols",
    "print_symbol",
    # number utils
    "unix_to_date",
    "date_to_unix",
    "print_unix_ts",
    "print_duration",
    "sum_n",
    "random_int",
    "random_element",
    "print_n",
    # web3 utils
    "web3_tuple_to_object",
    "object_matches_expected",
    "print_obj",
    # deployment
    "print_contract_details",
    "print_named_contract_details",
    # legacy
    "random_bn256",
    "random_bn255",
    "random_bits",
    "random_bn",
    "print_amt",
    "print_percent",
    "print_booleans",
    "print_symbols",
]
