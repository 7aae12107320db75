import os
from typing import Final, List

from dotenv import load_dotenv

# Одиниці
ETHER: Final[int] = 10 ** 18
GWEI: Final[int] = 10 ** 9
TWO256: Final[int] = 2 ** 256

# Пороги для k/m/b/t
THOUSAND: Final[int] = 1_000
MILLION: Final[int] = THOUSAND * THOUSAND
BILLION: Final[int] = MILLION * THOUSAND
TRILLION: Final[int] = BILLION * THOUSAND

# Рендер у консоль
RENDER_WIDTH: Final[int] = 100   # ширина смуги без дужок
FILLER: Final[str] = "."
DELIMITER: Final[str] = "|"

# Алфавіт print_symbol
SYMBOL_ZERO: Final[str] = " "
SYMBOL_MAX: Final[str] = "*"
SYMBOL_OVERFLOW: Final[str] = "!"
SYMBOL_LOW: Final[str] = "."      # <= 10% від max
SYMBOL_MID: Final[str] = "+"      # <= 50% від max
SYMBOL_HIGH: Final[str] = "^"

# Логування
LOGGER_NAME = "eth_test_utils"
LOG_LEVEL_ENV = "ETH_TEST_UTILS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# RPC
DEFAULT_CONTRACT_NAME = "web3 contract"
RPC_TIMEOUT_SEC = 30


def rpc_urls_from_env() -> List[str]:
    load_dotenv()
    urls_env = os.environ.get("RPC_URLS", "")
    if urls_env.strip():
        return [u.strip() for u in urls_env.split(",") if u.strip()]
    single = os.environ.get("RPC_URL", "")
    return [single] if single.strip() else []
