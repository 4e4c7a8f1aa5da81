import brownie
from brownie import accounts, config, network

from .exceptions import PickerConfigError
from .networks import LOCAL_BLOCKCHAIN_ENVIRONMENTS
from .settings import (
    BASE_FEE,
    FULFILL_GAS_LIMIT,
    GAS_PRICE,
    REQUIRED_CONFIRMATIONS,
    SUBSCRIPTION_FUND_AMOUNT,
    WEI_PER_UNIT_LINK,
)

PICKER_CONTRACT = "RandomWalletPicker"
MOCK_COORDINATOR_CONTRACT = "VRFCoordinatorV2_5Mock"


def get_account(index=0):
    if network.show_active() in LOCAL_BLOCKCHAIN_ENVIRONMENTS:
        return accounts[index]
    # Note: set PRIVATE_KEY in .env, brownie-config.yaml reads it into wallets.from_key
    return accounts.add(config["wallets"]["from_key"])


def project_container(name):
    # compiled containers join the brownie namespace once the project loads
    try:
        return getattr(brownie, name)
    except AttributeError:
        raise PickerConfigError(
            f"'{name}' is not available. Run this from the brownie project "
            f"(`brownie compile` builds contracts/ and the Chainlink mock)."
        ) from None


def get_coordinator(net, coordinator_container, account):
    if not net["local"]:
        return net["vrf_coordinator"]
    if len(coordinator_container) <= 0:
        print("Deploying mock VRF coordinator...")
        coordinator_container.deploy(BASE_FEE, GAS_PRICE, WEI_PER_UNIT_LINK, {"from": account})
    return coordinator_container[-1]


def create_mock_subscription(coordinator, account, amount=SUBSCRIPTION_FUND_AMOUNT):
    tx = coordinator.createSubscription({"from": account})
    tx.wait(REQUIRED_CONFIRMATIONS)
    subscription_id = tx.events["SubscriptionCreated"]["subId"]
    coordinator.fundSubscription(subscription_id, amount, {"from": account})
    return subscription_id


def fulfill_mock_request(coordinator, picker, request_id, random_value, account):
    """Play the oracle: deliver ``random_value`` for ``request_id`` through the mock."""
    return coordinator.fulfillRandomWordsWithOverride(
        request_id, picker, [random_value], {"from": account, "gas_limit": FULFILL_GAS_LIMIT}
    )
