TENPOW18 = 10 ** 18

# Sample wallets the picker is deployed with until real ones are configured
MOCK_WALLET_ADDRESSES = [
    "0x1111111111111111111111111111111111111111",
    "0x2222222222222222222222222222222222222222",
    "0x3333333333333333333333333333333333333333",
    "0x4444444444444444444444444444444444444444",
    "0x5555555555555555555555555555555555555555",
    "0x6666666666666666666666666666666666666666",
    "0x7777777777777777777777777777777777777777",
    "0x8888888888888888888888888888888888888888",
    "0x9999999999999999999999999999999999999999",
    "0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA",
]

SUBSCRIPTION_PLACEHOLDER = "YOUR_SUBSCRIPTION_ID"

REQUIRED_CONFIRMATIONS = 1

# seconds
FULFILLMENT_TIMEOUT = 300
POLL_INTERVAL = 5

# VRFCoordinatorV2_5Mock pricing
BASE_FEE = 10 ** 17
GAS_PRICE = 10 ** 9
# LINK/ETH price fed to the mock, in wei per LINK
WEI_PER_UNIT_LINK = 4 * 10 ** 15
SUBSCRIPTION_FUND_AMOUNT = 100 * TENPOW18

# explicit gas for mock fulfilments, an estimated limit can starve the
# consumer's 200k gas callback
FULFILL_GAS_LIMIT = 1000000
