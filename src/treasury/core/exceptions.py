"""Treasury exception hierarchy.

This module defines the base exception class and specialized exceptions
for the failure categories of the sweep service. Routes map each of them
to an HTTP status; see ``treasury.api.routes.sweep``.
"""


class TreasuryError(Exception):
    """Base exception for all treasury errors.

    All custom exceptions should inherit from this class to enable
    consistent error handling and logging.
    """

    pass


class ConfigurationError(TreasuryError):
    """Raised when configuration is invalid.

    Use this for settings that are present but unusable, such as a
    malformed private key.

    Example:
        raise ConfigurationError("TREASURY_PRIVATE_KEY is not a valid key")
    """

    pass


class InvalidAddressError(TreasuryError):
    """Raised when a destination is not a well-formed Ethereum address.

    Attributes:
        address: The rejected value, if available. May be a non-string JSON value.
    """

    def __init__(self, message: str, address: object = None) -> None:
        super().__init__(message)
        self.address = address


class SweepNotConfiguredError(TreasuryError):
    """Raised when a sweep is requested but no signing key was configured."""

    pass


class ExecutionFailedError(TreasuryError):
    """Raised when a chain read, signing, or broadcast fails.

    Attributes:
        reason: Provider-supplied reason, or the underlying error message.

    Example:
        raise ExecutionFailedError(reason="insufficient funds for gas * price + value")
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Sweep execution failed: {reason}")
