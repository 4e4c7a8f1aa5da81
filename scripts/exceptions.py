class PickerError(Exception):
    pass


class PickerConfigError(PickerError):
    """Missing or invalid deployment configuration."""


class NoWalletsError(PickerError, ValueError):
    """A pick was attempted with an empty wallet list."""


class RequestNotFound(PickerError, AssertionError):
    """No RandomnessRequested event could be tied to the pick transaction."""


class FulfillmentTimeout(PickerError, TimeoutError):
    pass


class RequestIdMismatch(PickerError):
    """A WalletPicked event arrived for a request other than the outstanding one."""

    def __init__(self, expected, received):
        self.expected = expected
        self.received = received
        super().__init__(
            f"WalletPicked event received for unexpected requestId. "
            f"Expected: {expected}, Got: {received}"
        )


class PickMismatch(PickerError, AssertionError):
    """The picked wallet disagrees with the stored random word or accessor."""
