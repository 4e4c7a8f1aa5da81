import os

from .exceptions import PickerConfigError
from .settings import SUBSCRIPTION_PLACEHOLDER

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["development", "ganache-local"]

# gas lane used against the local mock; the mock ignores it but the consumer stores it
LOCAL_KEY_HASH = "0x787d74caea10b2b357790d5b5247c2f63d1d91572a9846f780606e4d953677ae"

# VRF v2.5 coordinators, subscription ids are uint256
MAX_SUBSCRIPTION_ID = 2 ** 256 - 1

NETWORKS = {
    "base-sepolia": {
        "vrf_coordinator": "0x5C210eF41CD1a72de73bF76eC39637bB0d3d7BEE",
        # 500 gwei lane on vrf.chain.link
        "key_hash": "0x9e1344a1247c8a1785d0a4681a27152bffdb43666ae5bf7d14d24a5efd44bf71",
        "subscription_env": "BASE_SEPOLIA_SUBSCRIPTION_ID",
        "strict_subscription": True,
        "local": False,
        "publish_source": False,
    },
    "sepolia": {
        "vrf_coordinator": "0x9DdfaCa8183c41ad55329BdeeD9F6A8d53168B1B",
        # VRF v2.5 gas lane listed on vrf.chain.link
        "key_hash": "0x787d74caea10b2b357790d5b5247c2f63d1d91572a9846f780606e4d953677ae",
        "subscription_env": "SEPOLIA_SUBSCRIPTION_ID",
        "strict_subscription": True,
        "local": False,
        "publish_source": False,
    },
}

for _name in LOCAL_BLOCKCHAIN_ENVIRONMENTS:
    NETWORKS[_name] = {
        "vrf_coordinator": None,
        "key_hash": LOCAL_KEY_HASH,
        "subscription_env": "LOCAL_SUBSCRIPTION_ID",
        "strict_subscription": False,
        "local": True,
        "publish_source": False,
    }


def get_network_config(target):
    if target not in NETWORKS:
        raise PickerConfigError(
            f"No VRF configuration for network '{target}'. "
            f"Known networks: {', '.join(sorted(NETWORKS))}"
        )
    net = dict(NETWORKS[target])
    net["name"] = target
    return net


def resolve_subscription_id(net, environ=None):
    """Read the VRF subscription id for ``net`` from the environment.

    Returns ``None`` when a non-strict network has no id set, meaning a
    subscription should be created on the mock coordinator instead.
    """
    if environ is None:
        environ = os.environ
    env_name = net["subscription_env"]
    value = environ.get(env_name, SUBSCRIPTION_PLACEHOLDER).strip()

    if value in ("", SUBSCRIPTION_PLACEHOLDER):
        if net["strict_subscription"]:
            raise PickerConfigError(
                f"You MUST set your actual VRF subscription ID for {net['name']}. "
                f"Create a subscription at https://vrf.chain.link/ and set the "
                f"{env_name} environment variable."
            )
        print(
            f"WARNING: {env_name} is not set, a subscription will be created "
            f"on the mock coordinator for {net['name']}."
        )
        return None

    try:
        subscription_id = int(value)
    except ValueError:
        raise PickerConfigError(
            f"{env_name} must be an integer subscription id, got '{value}'"
        ) from None
    if not 0 < subscription_id <= MAX_SUBSCRIPTION_ID:
        raise PickerConfigError(
            f"{env_name} must be a VRF v2.5 subscription id between 1 and 2**256 - 1, "
            f"got {subscription_id}"
        )
    return subscription_id
