from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ..core.dependencies import get_customer_cpf, get_ledger_service
from ..models import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    DepositRequest,
    ErrorResponse,
    TransactionResponse,
    WithdrawRequest,
)
from ..services import LedgerService

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def _created() -> Response:
    return Response(status_code=status.HTTP_201_CREATED)


account_router = APIRouter(prefix="/account", tags=["account"])

@account_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def create_account(
    payload: AccountCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    service.create_account(payload.cpf, payload.name)
    return _created()

@account_router.get(
    "",
    response_model=AccountResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_account(
    cpf: Optional[str] = Depends(get_customer_cpf),
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    return service.get_account(cpf)

@account_router.put(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=NOT_FOUND,
)
def update_account(
    payload: AccountUpdate,
    cpf: Optional[str] = Depends(get_customer_cpf),
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    service.update_account(cpf, payload.name)
    return _created()

@account_router.delete(
    "",
    response_model=list[AccountResponse],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def delete_account(
    cpf: Optional[str] = Depends(get_customer_cpf),
    service: LedgerService = Depends(get_ledger_service),
) -> list[AccountResponse]:
    return service.delete_account(cpf)


statement_router = APIRouter(prefix="/statement", tags=["statement"])

@statement_router.get(
    "",
    response_model=list[TransactionResponse],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_statement(
    cpf: Optional[str] = Depends(get_customer_cpf),
    service: LedgerService = Depends(get_ledger_service),
) -> list[TransactionResponse]:
    return service.get_statement(cpf)

@statement_router.get(
    "/date",
    response_model=list[TransactionResponse],
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def get_statement_by_date(
    day: date = Query(..., alias="date", description="Calendar day, YYYY-MM-DD"),
    cpf: Optional[str] = Depends(get_customer_cpf),
    service: LedgerService = Depends(get_ledger_service),
) -> list[TransactionResponse]:
    return service.get_statement_by_date(cpf, day)


operations_router = APIRouter(tags=["operations"])

@operations_router.post(
    "/deposit",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=NOT_FOUND,
)
def deposit(
    payload: DepositRequest,
    cpf: Optional[str] = Depends(get_customer_cpf),
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    service.deposit(cpf, payload.description, payload.amount)
    return _created()

@operations_router.post(
    "/withdraw",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        **NOT_FOUND,
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    },
)
def withdraw(
    payload: WithdrawRequest,
    cpf: Optional[str] = Depends(get_customer_cpf),
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    service.withdraw(cpf, payload.amount)
    return _created()

@operations_router.get("/balance", response_model=float, responses=NOT_FOUND)
def get_balance(
    cpf: Optional[str] = Depends(get_customer_cpf),
    service: LedgerService = Depends(get_ledger_service),
) -> float:
    return service.get_balance(cpf)

__all__ = ["account_router", "operations_router", "statement_router"]
