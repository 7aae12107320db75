from typing import Iterable, List, Optional, Tuple

from web3 import HTTPProvider, Web3

from .config import RPC_TIMEOUT_SEC, rpc_urls_from_env
from .logging_setup import setup_logger

log = setup_logger()


def normalize_rpc_urls(urls: Iterable[str]) -> List[str]:
    norm: List[str] = []
    for u in urls:
        u = (u or "").strip()
        if not u:
            continue
        if not u.startswith(("http://", "https://")):
            u = "https://" + u
        if u not in norm:
            norm.append(u)
    if not norm:
        raise ValueError("No RPC URLs provided")
    return norm


class RpcRotator:
    """Перебирає RPC по колу, поки якийсь не відповість."""

    def __init__(self, urls: Iterable[str]):
        self.urls = normalize_rpc_urls(urls)
        self.idx = 0

    @classmethod
    def from_env(cls) -> "RpcRotator":
        return cls(rpc_urls_from_env())

    def _make_web3(self, url: str) -> Web3:
        return Web3(HTTPProvider(url, request_kwargs={"timeout": RPC_TIMEOUT_SEC}))

    def connect(self, tries: Optional[int] = None) -> Tuple[Web3, str]:
        tries = tries or len(self.urls)
        for attempt in range(1, tries + 1):
            url = self.urls[self.idx % len(self.urls)]
            self.idx += 1
            w3 = self._make_web3(url)
            try:
                if w3.is_connected():
                    if attempt > 1:
                        log.info(f"Switched RPC → {url}")
                    return w3, url
            except Exception as e:
                log.warning(f"RPC {url} failed: {e}")
                continue
            log.warning(f"RPC {url} is not responding")
        raise RuntimeError("All RPC endpoints failed to respond")
