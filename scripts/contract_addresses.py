# "" means not deployed on that network yet
CONTRACTS = {
    "base-sepolia": {
        "random_wallet_picker": "0x566Ba21d1c5F37153CF1FD9Ddeb5a0117084FF6B",
    },
    "sepolia": {
        "random_wallet_picker": "",
    },
    "development": {
        "random_wallet_picker": "",
    },
}
