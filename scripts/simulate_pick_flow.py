#!/usr/bin/python3
import sys

from brownie import network
from brownie.utils import color

from .contracts import (
    MOCK_COORDINATOR_CONTRACT,
    PICKER_CONTRACT,
    fulfill_mock_request,
    get_account,
    project_container,
)
from .deploy_picker import deploy_for_network
from .networks import LOCAL_BLOCKCHAIN_ENVIRONMENTS, get_network_config
from .request_tracking import request_pick, verify_pick, wait_for_wallet_picked
from .settings import MOCK_WALLET_ADDRESSES


def simulate(random_value, wallets=MOCK_WALLET_ADDRESSES):
    """Deploy, request, fulfil through the mock coordinator and verify; return the winner."""
    deployer = get_account()
    coordinator_container = project_container(MOCK_COORDINATOR_CONTRACT)

    picker = deploy_for_network(
        get_network_config(network.show_active()),
        None,
        deployer,
        project_container(PICKER_CONTRACT),
        coordinator_container,
        wallets,
    )
    coordinator = coordinator_container[-1]

    tx, request_id = request_pick(picker, deployer)
    print(f"\nRandomness requested with requestId: {request_id}")

    fulfill_mock_request(coordinator, picker, request_id, random_value, deployer)
    args = wait_for_wallet_picked(picker, request_id, tx.block_number, timeout=0)
    verify_pick(picker, args["winner"])
    return args["winner"]


def main(random_value=777):
    if network.show_active() not in LOCAL_BLOCKCHAIN_ENVIRONMENTS:
        print(f"{color('bright red')}ERROR{color}: the pick simulation runs on a local network only")
        sys.exit(1)

    random_value = int(random_value)
    winner = simulate(random_value)
    print(
        f"\nRandom value {random_value} picked wallet #{random_value % len(MOCK_WALLET_ADDRESSES)}: {winner}\n"
    )
    return winner
