from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

class AccountCreate(BaseModel):
    cpf: str = Field(..., description="Caller-supplied unique identifier of the customer")
    name: str = Field(..., description="Display name of the account holder")

class AccountUpdate(BaseModel):
    name: str

class DepositRequest(BaseModel):
    description: Optional[str] = Field(default=None, description="Reason for the deposit")
    amount: float = Field(..., allow_inf_nan=False)

class WithdrawRequest(BaseModel):
    amount: float = Field(..., allow_inf_nan=False)

class TransactionResponse(BaseModel):
    description: Optional[str] = None
    amount: float
    created_at: datetime
    type: Literal["credit", "debit"]

class AccountResponse(BaseModel):
    id: UUID
    cpf: str
    name: str
    statement: list[TransactionResponse]

class ErrorResponse(BaseModel):
    error: str
