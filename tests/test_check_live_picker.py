import brownie
import pytest
from eth_utils import to_checksum_address

from scripts import check_live_picker
from scripts.check_live_picker import check_picker
from scripts.contracts import fulfill_mock_request
from scripts.exceptions import FulfillmentTimeout, NoWalletsError, PickerConfigError, PickMismatch
from scripts.networks import LOCAL_KEY_HASH
from scripts.request_tracking import request_pick
from scripts.settings import MOCK_WALLET_ADDRESSES


@pytest.fixture
def oracle(monkeypatch, coordinator, accounts):
    """Answer each pick through the mock as soon as the request is confirmed."""

    def answer(random_value):
        def pick_and_fulfil(picker, account):
            tx, request_id = request_pick(picker, account)
            fulfill_mock_request(coordinator, picker, request_id, random_value, accounts[0])
            return tx, request_id

        monkeypatch.setattr(check_live_picker, "request_pick", pick_and_fulfil)

    return answer


def test_check_picker_end_to_end(picker, accounts, oracle, capsys):
    oracle(2024)
    result = check_picker(picker, accounts[0], MOCK_WALLET_ADDRESSES, timeout=5, poll_interval=0.01)

    assert result["request_id"] == picker.s_requestId()
    assert result["random_word"] == 2024
    assert result["index"] == 4
    assert result["winner"] == to_checksum_address(MOCK_WALLET_ADDRESSES[4])
    assert "getPickedWallet() confirmed" in capsys.readouterr().out


def test_check_picker_requires_owner(picker, accounts):
    with pytest.raises(PickerConfigError, match="not the owner"):
        check_picker(picker, accounts[3], timeout=0)
    assert picker.s_requestId() == 0


def test_check_picker_compares_wallet_order(picker, accounts):
    with pytest.raises(PickMismatch):
        check_picker(picker, accounts[0], list(reversed(MOCK_WALLET_ADDRESSES)), timeout=0)
    assert picker.s_requestId() == 0


def test_check_picker_without_wallets(RandomWalletPicker, coordinator, subscription_id, accounts):
    empty = RandomWalletPicker.deploy([], coordinator, subscription_id, LOCAL_KEY_HASH, {"from": accounts[0]})
    with pytest.raises(NoWalletsError):
        check_picker(empty, accounts[0], timeout=0)


def test_check_picker_times_out_without_callback(picker, accounts):
    with pytest.raises(FulfillmentTimeout):
        check_picker(picker, accounts[0], timeout=0.05, poll_interval=0.01)


def test_check_picker_propagates_reverts(RandomWalletPicker, coordinator, subscription_id, accounts):
    # not registered as a consumer
    unregistered = RandomWalletPicker.deploy(
        MOCK_WALLET_ADDRESSES, coordinator, subscription_id, LOCAL_KEY_HASH, {"from": accounts[0]}
    )
    with brownie.reverts():
        check_picker(unregistered, accounts[0], timeout=0)


def test_main_without_known_address(monkeypatch, capsys):
    monkeypatch.setattr(check_live_picker, "CONTRACTS", {})
    with pytest.raises(SystemExit) as excinfo:
        check_live_picker.main()
    assert excinfo.value.code == 1
    assert "no RandomWalletPicker address" in capsys.readouterr().out


def test_main_reports_failure(picker, accounts, monkeypatch, capsys):
    monkeypatch.setattr(check_live_picker, "get_account", lambda: accounts[5])
    with pytest.raises(SystemExit) as excinfo:
        check_live_picker.main(picker.address)
    assert excinfo.value.code == 1
    assert "Live check failed" in capsys.readouterr().out


def test_main_passes(picker, oracle, capsys):
    oracle(7)
    check_live_picker.main(picker.address)
    assert "Live check passed" in capsys.readouterr().out
