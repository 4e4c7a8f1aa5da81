"""
Correlation of VRF requests with their fulfilment.

A pick is a two step affair: ``pickRandomWallet`` emits ``RandomnessRequested``
with a request id minted by the coordinator, and some blocks later the
coordinator calls back into the picker which emits ``WalletPicked`` carrying
the same id and the winning address.
"""
import time

from brownie import web3
from eth_utils import to_bytes, to_hex
from web3.exceptions import LogTopicError, MismatchedABI

from .exceptions import (
    FulfillmentTimeout,
    PickMismatch,
    RequestIdMismatch,
    RequestNotFound,
)
from .picker import pick_index, same_address
from .settings import FULFILLMENT_TIMEOUT, POLL_INTERVAL, REQUIRED_CONFIRMATIONS

REQUEST_EVENT = "RandomnessRequested"
FULFILL_EVENT = "WalletPicked"


def _to_bytes(value):
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return to_bytes(hexstr=value)


def _hexstr(value):
    return to_hex(_to_bytes(value)).lower()


def _request_id_from_events(picker, tx):
    events = picker.events.get_sequence(
        tx.block_number, tx.block_number, event_type=REQUEST_EVENT
    )
    txid = _hexstr(tx.txid)
    for event in events:
        if _hexstr(event["transactionHash"]) == txid:
            return event["args"]["requestId"]
    return None


def request_event(picker):
    """web3 view of the picker's RandomnessRequested event, used to decode raw logs."""
    contract = web3.eth.contract(address=picker.address, abi=picker.abi)
    return getattr(contract.events, REQUEST_EVENT)()


def _request_id_from_logs(picker, tx):
    txid = _hexstr(tx.txid)
    event = request_event(picker)
    for log in tx.logs or []:
        if not same_address(log["address"], picker.address):
            continue
        if _hexstr(log["transactionHash"]) != txid:
            continue
        try:
            decoded = event.process_log(log)
        except (MismatchedABI, LogTopicError):
            continue
        return decoded["args"]["requestId"]
    return None


def find_request_id(picker, tx):
    """Return the request id minted by the pick transaction ``tx``.

    Event logs for the confirming block are queried first; when the node's
    event index does not return a match the receipt's raw logs are decoded.
    """
    request_id = _request_id_from_events(picker, tx)
    if request_id is None:
        request_id = _request_id_from_logs(picker, tx)
    if request_id is None:
        raise RequestNotFound(
            f"{REQUEST_EVENT} event for transaction {tx.txid} was not found in "
            f"block {tx.block_number} events or in the receipt logs"
        )
    return request_id


def request_pick(picker, account, confirmations=REQUIRED_CONFIRMATIONS):
    tx = picker.pickRandomWallet({"from": account})
    tx.wait(confirmations)
    return tx, find_request_id(picker, tx)


def wait_for_wallet_picked(
    picker, request_id, from_block, timeout=FULFILLMENT_TIMEOUT, poll_interval=POLL_INTERVAL
):
    """Block until the picker emits WalletPicked for ``request_id``.

    The first fulfilment seen from ``from_block`` onwards must belong to
    ``request_id``; one for any other request raises ``RequestIdMismatch``.
    """
    deadline = time.monotonic() + timeout
    while True:
        events = picker.events.get_sequence(from_block, event_type=FULFILL_EVENT)
        if events:
            args = events[0]["args"]
            if args["requestId"] != request_id:
                raise RequestIdMismatch(request_id, args["requestId"])
            return args

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise FulfillmentTimeout(
                f"Timeout: {FULFILL_EVENT} event not received within {timeout} seconds. "
                f"Check VRF callback."
            )
        time.sleep(min(poll_interval, remaining))


def verify_pick(picker, winner):
    wallets = list(picker.getAllWallets())
    random_word = picker.s_randomWord()
    index = pick_index(random_word, len(wallets))
    if not same_address(wallets[index], winner):
        raise PickMismatch(
            f"Winner {winner} is not wallet #{index} ({wallets[index]}) "
            f"for random word {random_word}"
        )
    stored = picker.getPickedWallet()
    if not same_address(stored, winner):
        raise PickMismatch(f"getPickedWallet() returned {stored}, event delivered {winner}")
    return index
