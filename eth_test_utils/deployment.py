# Друк стану контракту після деплою: ERC20, RBAC, initializable, proxy.
# Кожна група опційна: якщо контракт її не має, просто пропускаємо.
from typing import Any, Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from web3 import Web3

from .config import DEFAULT_CONTRACT_NAME
from .formatter import format_amount
from .logging_setup import contract_tag, setup_logger
from .rpc import RpcRotator
from .utils import short_addr

log = setup_logger()


def print_contract_details(
    a0: str,
    abi: Sequence[dict],
    address: str,
    operator_address: Optional[str] = None,
    **kwargs,
) -> Dict[str, Any]:
    return print_named_contract_details(a0, None, abi, address, operator_address, **kwargs)


def print_named_contract_details(
    a0: str,
    name: Optional[str],
    abi: Sequence[dict],
    address: str,
    operator_address: Optional[str] = None,
    *,
    w3: Optional[Web3] = None,
    console: Optional[Console] = None,
) -> Dict[str, Any]:
    """
    Підключається до контракту, читає те, що вдається, логує таблицею.

    Повертає сирі значення: name/symbol/totalSupply, features/r0/r1,
    version, implementation_address (лише ті, що прочиталися).
    """
    name = name or DEFAULT_CONTRACT_NAME
    tag = contract_tag(name)
    if w3 is None:
        w3, url = RpcRotator.from_env().connect()
        log.info(f"{tag}Using RPC: {url}")

    fns = w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi).functions

    rows: List[Tuple[str, str]] = []
    data: Dict[str, Any] = {}

    # ERC20 / ERC721
    try:
        token_name = fns.name().call()
        symbol = fns.symbol().call()
        total_supply = fns.totalSupply().call()
        data.update(name=token_name, symbol=symbol, totalSupply=total_supply)
        rows += [
            ("Name", str(token_name)),
            ("Symbol", str(symbol)),
            ("Total Supply", str(format_amount(total_supply))),
        ]
    except Exception as e:
        log.debug(f"{tag}no ERC20 views: {e}")

    # RBAC
    try:
        features = int(fns.features().call())
        r0 = int(fns.getRole(a0).call())
        data.update(features=features, r0=r0)
        rows += [
            ("Features", format(features, "b")),
            ("Deployer Role", format(r0, "x")),
        ]
        if operator_address:
            r1 = int(fns.getRole(operator_address).call())
            data.update(r1=r1)
            rows += [
                ("Operator", operator_address),
                ("Operator Role", format(r1, "b")),
            ]
    except Exception as e:
        log.debug(f"{tag}no RBAC views: {e}")

    # Initializable
    try:
        version = int(fns.getInitializedVersion().call())
        data.update(version=version)
        rows += [
            ("Initialized", "YES" if version else "NO"),
            ("Version", str(version)),
        ]
    except Exception as e:
        log.debug(f"{tag}no initializable views: {e}")

    # Proxy
    try:
        implementation_address = fns.getImplementation().call()
        data.update(implementation_address=implementation_address)
        rows.append(("Implementation Address", str(implementation_address)))
    except Exception as e:
        log.debug(f"{tag}no proxy views: {e}")

    log.info(f"{tag}successfully connected to {escape(name)} at {short_addr(address)}")

    if rows:
        table = Table(title=f"[bold]{escape(name)}[/bold]", show_lines=True)
        table.add_column("Key", justify="left")
        table.add_column("Value", justify="left", no_wrap=True)
        for k, v in rows:
            table.add_row(k, v)
        (console or Console()).print(table)

    return data
