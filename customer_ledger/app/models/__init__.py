from .schemas import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    DepositRequest,
    ErrorResponse,
    TransactionResponse,
    WithdrawRequest,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AccountUpdate",
    "DepositRequest",
    "ErrorResponse",
    "TransactionResponse",
    "WithdrawRequest",
]
