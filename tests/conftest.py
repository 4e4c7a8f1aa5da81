import pytest

from scripts.contracts import create_mock_subscription
from scripts.networks import LOCAL_KEY_HASH
from scripts.settings import BASE_FEE, GAS_PRICE, MOCK_WALLET_ADDRESSES, WEI_PER_UNIT_LINK


@pytest.fixture(scope="function", autouse=True)
def isolate(fn_isolation):
    # every test starts from the module fixtures' chain state
    pass


@pytest.fixture(scope="module")
def coordinator(VRFCoordinatorV2_5Mock, accounts):
    return VRFCoordinatorV2_5Mock.deploy(BASE_FEE, GAS_PRICE, WEI_PER_UNIT_LINK, {"from": accounts[0]})


@pytest.fixture(scope="module")
def subscription_id(coordinator, accounts):
    return create_mock_subscription(coordinator, accounts[0])


@pytest.fixture(scope="module")
def picker(RandomWalletPicker, coordinator, subscription_id, accounts):
    picker = RandomWalletPicker.deploy(
        MOCK_WALLET_ADDRESSES, coordinator, subscription_id, LOCAL_KEY_HASH, {"from": accounts[0]}
    )
    coordinator.addConsumer(subscription_id, picker, {"from": accounts[0]})
    return picker


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("BASE_SEPOLIA_SUBSCRIPTION_ID", "SEPOLIA_SUBSCRIPTION_ID", "LOCAL_SUBSCRIPTION_ID"):
        monkeypatch.delenv(name, raising=False)
