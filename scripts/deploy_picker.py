import sys

from brownie import network
from brownie.utils import color

from .contracts import (
    MOCK_COORDINATOR_CONTRACT,
    PICKER_CONTRACT,
    create_mock_subscription,
    get_account,
    get_coordinator,
    project_container,
)
from .exceptions import PickerConfigError
from .networks import get_network_config, resolve_subscription_id
from .settings import MOCK_WALLET_ADDRESSES, REQUIRED_CONFIRMATIONS


def _address(contract):
    return getattr(contract, "address", contract)


def deploy_picker(picker_container, net, account, subscription_id, coordinator, wallets=MOCK_WALLET_ADDRESSES):
    print(f"Deploying RandomWalletPicker contract to {net['name']}...")
    print("Deploying contract with:")
    print(f"  Initial Wallets: {len(wallets)} addresses")
    print(f"  VRF Coordinator: {_address(coordinator)}")
    print(f"  Subscription ID: {subscription_id}")
    print(f"  Key Hash: {net['key_hash']}")

    picker = picker_container.deploy(
        wallets,
        coordinator,
        subscription_id,
        net["key_hash"],
        {"from": account, "required_confs": REQUIRED_CONFIRMATIONS},
        publish_source=net["publish_source"],
    )

    print(f"\nRandomWalletPicker deployed to {net['name']} at: {picker.address}")
    return picker


def deploy_for_network(
    net, subscription_id, account, picker_container, coordinator_container=None, wallets=MOCK_WALLET_ADDRESSES
):
    """Deploy the picker using the VRF settings of ``net``.

    On local networks the mock coordinator is deployed if needed, a funded
    subscription is created when ``subscription_id`` is None and the picker is
    registered as its consumer. Live subscriptions are managed on
    vrf.chain.link, registering the consumer there stays a manual step.
    """
    coordinator = get_coordinator(net, coordinator_container, account)
    if subscription_id is None:
        subscription_id = create_mock_subscription(coordinator, account)
        print(f"Created and funded mock subscription #{subscription_id}")

    picker = deploy_picker(picker_container, net, account, subscription_id, coordinator, wallets)

    if net["local"]:
        coordinator.addConsumer(subscription_id, picker, {"from": account})
        print(f"Added {picker.address} as a consumer of mock subscription #{subscription_id}")
    else:
        print(
            f"\nIMPORTANT: After deployment, you MUST add this contract address as a consumer "
            f"to your VRF subscription on {net['name']}."
        )
        print("Go to: https://vrf.chain.link/, find your subscription, and add consumer.")
    return picker


def _fail(message):
    print(f"{color('bright red')}{message}{color}")
    sys.exit(1)


def connect_to(target):
    """Make ``target`` the active network.

    Connects when brownie is not connected yet. A connection to any other
    network is left alone and reported, so a deployment is never wired to
    one network's coordinator while being sent to another.
    """
    if not network.is_connected():
        print(f"Connecting to {target}...")
        try:
            network.connect(target)
        except Exception as exc:
            raise PickerConfigError(f"Could not connect to {target}: {exc}") from exc
    active = network.show_active()
    if active != target:
        raise PickerConfigError(
            f"Active network is '{active}' but the deployment targets '{target}'. "
            f"Run with `--network {target}`."
        )


def main(target=None):
    target = target or network.show_active()
    try:
        net = get_network_config(target)
        subscription_id = resolve_subscription_id(net)
        connect_to(target)
        picker_container = project_container(PICKER_CONTRACT)
        coordinator_container = project_container(MOCK_COORDINATOR_CONTRACT) if net["local"] else None
    except PickerConfigError as exc:
        _fail(f"ERROR: {exc}")

    if subscription_id is not None:
        print(f"Using Subscription ID for {target}: {subscription_id}")

    try:
        account = get_account()
        return deploy_for_network(net, subscription_id, account, picker_container, coordinator_container)
    except Exception as exc:
        _fail(f"Deployment failed: {exc}")
