class LedgerError(Exception):
    """Base class for business-rule failures reported back to the caller."""

    default_message = "Ledger operation failed."

    def __init__(self) -> None:
        super().__init__(self.default_message)


class CustomerNotFoundError(LedgerError):
    """Raised when no account is registered under the given cpf."""

    default_message = "Customer not found."


class CustomerAlreadyExistsError(LedgerError):
    """Raised when a cpf is registered a second time."""

    default_message = "Customer already exists!"


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal would drop balance below zero."""

    default_message = "Insufficient funds!"
