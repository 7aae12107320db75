import io
import logging
from unittest.mock import MagicMock

from rich.console import Console

from eth_test_utils import deployment
from eth_test_utils.config import ETHER
from eth_test_utils.deployment import print_contract_details, print_named_contract_details

ADDRESS = "0x" + "11" * 20
A0 = "0x" + "22" * 20
OPERATOR = "0x" + "33" * 20


def _view(value=None, error=None):
    call = MagicMock()
    if error is not None:
        call.call.side_effect = error
    else:
        call.call.return_value = value
    return MagicMock(return_value=call)


def _fake_web3(views):
    w3 = MagicMock()
    fns = MagicMock()
    for name, view in views.items():
        setattr(fns, name, view)
    w3.eth.contract.return_value.functions = fns
    return w3


def _console():
    return Console(file=io.StringIO(), width=200)


REVERT = ValueError("execution reverted")


class TestContractDetails:
    def test_full_contract(self) -> None:
        roles = {A0: 255, OPERATOR: 6}
        role_view = MagicMock(side_effect=lambda who: MagicMock(call=MagicMock(return_value=roles[who])))
        w3 = _fake_web3({
            "name": _view("Token"),
            "symbol": _view("TKN"),
            "totalSupply": _view(1000 * ETHER),
            "features": _view(5),
            "getRole": role_view,
            "getInitializedVersion": _view(1),
            "getImplementation": _view(OPERATOR),
        })
        console = _console()

        data = print_named_contract_details(A0, "Token", [], ADDRESS, OPERATOR, w3=w3, console=console)

        assert data == {
            "name": "Token",
            "symbol": "TKN",
            "totalSupply": 1000 * ETHER,
            "features": 5,
            "r0": 255,
            "r1": 6,
            "version": 1,
            "implementation_address": OPERATOR,
        }
        out = console.file.getvalue()
        assert "Total Supply" in out
        assert "1k" in out
        assert "101" in out   # features у двійковому вигляді
        assert "ff" in out    # роль деплоєра в hex
        assert "YES" in out

    def test_missing_groups_are_skipped(self) -> None:
        w3 = _fake_web3({
            "name": _view(error=REVERT),
            "symbol": _view("X"),
            "totalSupply": _view(1),
            "features": _view(error=REVERT),
            "getRole": _view(0),
            "getInitializedVersion": _view(0),
            "getImplementation": _view(error=REVERT),
        })
        data = print_named_contract_details(A0, None, [], ADDRESS, w3=w3, console=_console())
        assert data == {"version": 0}

    def test_nothing_readable(self) -> None:
        views = {
            n: _view(error=REVERT)
            for n in ("name", "symbol", "totalSupply", "features", "getRole", "getInitializedVersion", "getImplementation")
        }
        console = _console()
        data = print_contract_details(A0, [], ADDRESS, w3=_fake_web3(views), console=console)
        assert data == {}
        assert console.file.getvalue() == ""

    def test_connects_from_env_when_no_web3(self, monkeypatch) -> None:
        w3 = _fake_web3({
            "name": _view("Token"),
            "symbol": _view("TKN"),
            "totalSupply": _view(0),
            "features": _view(error=REVERT),
            "getRole": _view(error=REVERT),
            "getInitializedVersion": _view(error=REVERT),
            "getImplementation": _view(error=REVERT),
        })
        rotator = MagicMock()
        rotator.from_env.return_value.connect.return_value = (w3, "http://localhost:8545")
        monkeypatch.setattr(deployment, "RpcRotator", rotator)

        data = print_contract_details(A0, [], ADDRESS, console=_console())

        assert data == {"name": "Token", "symbol": "TKN", "totalSupply": 0}
        w3.eth.contract.assert_called_once()
        assert w3.eth.contract.call_args.kwargs["address"] == ADDRESS

    def test_logs_short_address(self, caplog) -> None:
        views = {
            n: _view(error=REVERT)
            for n in ("name", "symbol", "totalSupply", "features", "getRole", "getInitializedVersion", "getImplementation")
        }
        with caplog.at_level(logging.INFO, logger="eth_test_utils"):
            print_named_contract_details(A0, "Vault", [], ADDRESS, w3=_fake_web3(views), console=_console())
        messages = [r.getMessage() for r in caplog.records]
        assert any("connected to Vault at 0x1111…1111" in m for m in messages)
