from eth_utils import to_checksum_address

from .exceptions import NoWalletsError

UINT256_MAX = 2 ** 256 - 1


def pick_index(random_word, wallet_count):
    if wallet_count <= 0:
        raise NoWalletsError("No wallets configured to pick from")
    if not 0 <= random_word <= UINT256_MAX:
        raise ValueError(f"Random word {random_word} is not a uint256")
    return random_word % wallet_count


def select_wallet(wallets, random_word):
    return wallets[pick_index(random_word, len(wallets))]


def same_address(a, b):
    return _checksum(a) == _checksum(b)


def _checksum(value):
    # brownie Account objects carry the address as an attribute
    return to_checksum_address(str(getattr(value, "address", value)))
