"""
Opt-in diagnostic against a RandomWalletPicker deployed on a live network.

Requests a pick, waits (up to five minutes by default) for the Chainlink VRF
callback and checks the result. Spends gas and subscription LINK, so it is a
script rather than part of the test suite:

    brownie run scripts/check_live_picker.py main --network base-sepolia
"""
import sys

from brownie import network
from brownie.utils import color
from eth_utils import is_address, to_checksum_address

from .contract_addresses import CONTRACTS
from .contracts import PICKER_CONTRACT, get_account, project_container
from .exceptions import NoWalletsError, PickerConfigError, PickMismatch
from .picker import same_address
from .request_tracking import request_pick, verify_pick, wait_for_wallet_picked
from .settings import FULFILLMENT_TIMEOUT, POLL_INTERVAL


def check_wallets(picker, expected_wallets=None):
    wallets = list(picker.getAllWallets())
    if not wallets:
        raise NoWalletsError(f"{picker.address} has no wallets configured")
    invalid = [w for w in wallets if not is_address(w)]
    if invalid:
        raise PickMismatch(f"Invalid wallet addresses stored: {invalid}")
    if expected_wallets is not None:
        stored = [to_checksum_address(w) for w in wallets]
        expected = [to_checksum_address(w) for w in expected_wallets]
        if stored != expected:
            raise PickMismatch(f"Stored wallets {stored} do not match expected {expected}")
    print(f"Picker holds {len(wallets)} wallets")
    return wallets


def check_picker(picker, account, expected_wallets=None, timeout=FULFILLMENT_TIMEOUT, poll_interval=POLL_INTERVAL):
    print(f"Connected to RandomWalletPicker at: {picker.address}")
    print(f"Test signer: {account}")

    owner = picker.owner()
    if not same_address(owner, account):
        raise PickerConfigError(f"Signer {account} is not the owner of the picker ({owner})")

    wallets = check_wallets(picker, expected_wallets)

    print("\nAttempting to pick a random wallet...")
    tx, request_id = request_pick(picker, account)
    print(f"Randomness requested with requestId: {request_id}")
    print("Waiting for Chainlink VRF to fulfill the request and emit WalletPicked event...")

    args = wait_for_wallet_picked(picker, request_id, tx.block_number, timeout, poll_interval)
    winner = args["winner"]
    if not any(same_address(winner, w) for w in wallets):
        raise PickMismatch(f"Picked wallet {winner} is not one of the configured wallets")

    index = verify_pick(picker, winner)
    random_word = picker.s_randomWord()
    print(f"Stored s_randomWord (from Chainlink VRF): {random_word}")
    print(f"getPickedWallet() confirmed: {winner} (wallet #{index})")
    return {"request_id": request_id, "winner": winner, "index": index, "random_word": random_word}


def main(address=None):
    address = address or CONTRACTS.get(network.show_active(), {}).get("random_wallet_picker")
    if not address:
        print(f"{color('bright red')}ERROR{color}: no RandomWalletPicker address for {network.show_active()}")
        sys.exit(1)

    try:
        picker = project_container(PICKER_CONTRACT).at(address)
        check_picker(picker, get_account())
    except Exception as exc:
        print(f"{color('bright red')}Live check failed{color}: {exc}")
        sys.exit(1)
    print(f"{color('bright green')}Live check passed{color}")
