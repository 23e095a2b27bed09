from __future__ import annotations

import logging
import threading
from datetime import UTC, date, datetime
from typing import List, Optional

from ..core.errors import InsufficientFundsError
from ..models import AccountResponse, TransactionResponse
from . import statement
from .store import LedgerStore, _CustomerRecord, _TransactionRecord


logger = logging.getLogger(__name__)


class LedgerService:
    """Account use cases on top of a ``LedgerStore``.

    Every public method runs under one process-wide lock, so a request is
    applied completely or not at all before the next one sees the store.
    """

    def __init__(self, store: Optional[LedgerStore] = None) -> None:
        self.store = store or LedgerStore()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _append_entry(
        self,
        customer: _CustomerRecord,
        amount: float,
        entry_type: str,
        description: Optional[str] = None,
    ) -> _TransactionRecord:
        entry = _TransactionRecord(
            amount=amount,
            type=entry_type,
            created_at=datetime.now(UTC),
            description=description,
        )
        customer.statement.append(entry)
        self.store.update(customer)
        return entry

    def _entry_to_response(self, entry: _TransactionRecord) -> TransactionResponse:
        return TransactionResponse(
            description=entry.description,
            amount=entry.amount,
            created_at=entry.created_at,
            type=entry.type,
        )

    def _customer_to_response(self, customer: _CustomerRecord) -> AccountResponse:
        return AccountResponse(
            id=customer.id,
            cpf=customer.cpf,
            name=customer.name,
            statement=[self._entry_to_response(entry) for entry in customer.statement],
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(self, cpf: str, name: str) -> None:
        with self._lock:
            customer = self.store.create(cpf, name)
        logger.info(
            "account.created",
            extra={"account_id": str(customer.id), "cpf": cpf},
        )

    def get_account(self, cpf: Optional[str]) -> AccountResponse:
        with self._lock:
            return self._customer_to_response(self.store.find_by_cpf(cpf))

    def update_account(self, cpf: Optional[str], name: str) -> None:
        with self._lock:
            customer = self.store.find_by_cpf(cpf)
            customer.name = name
            self.store.update(customer)
        logger.info("account.updated", extra={"cpf": cpf})

    def delete_account(self, cpf: Optional[str]) -> List[AccountResponse]:
        with self._lock:
            self.store.delete(cpf)
            remaining = [self._customer_to_response(c) for c in self.store.list_all()]
        logger.info(
            "account.deleted",
            extra={"cpf": cpf, "remaining": len(remaining)},
        )
        return remaining

    def deposit(self, cpf: Optional[str], description: Optional[str], amount: float) -> None:
        with self._lock:
            customer = self.store.find_by_cpf(cpf)
            self._append_entry(customer, amount, statement.CREDIT, description)
            current = statement.balance(customer.statement)
        logger.info(
            "account.deposit",
            extra={"cpf": cpf, "amount": amount, "balance": current},
        )

    def withdraw(self, cpf: Optional[str], amount: float) -> None:
        with self._lock:
            customer = self.store.find_by_cpf(cpf)
            current = statement.balance(customer.statement)
            if current < amount:
                logger.warning(
                    "account.withdraw.rejected",
                    extra={"cpf": cpf, "amount": amount, "balance": current},
                )
                raise InsufficientFundsError()

            self._append_entry(customer, amount, statement.DEBIT)
        logger.info(
            "account.withdraw",
            extra={"cpf": cpf, "amount": amount, "balance": current - amount},
        )

    def get_balance(self, cpf: Optional[str]) -> float:
        with self._lock:
            return statement.balance(self.store.find_by_cpf(cpf).statement)

    def get_statement(self, cpf: Optional[str]) -> List[TransactionResponse]:
        with self._lock:
            customer = self.store.find_by_cpf(cpf)
            return [self._entry_to_response(entry) for entry in customer.statement]

    def get_statement_by_date(self, cpf: Optional[str], day: date) -> List[TransactionResponse]:
        with self._lock:
            customer = self.store.find_by_cpf(cpf)
            entries = statement.filter_by_date(customer.statement, day)
            return [self._entry_to_response(entry) for entry in entries]
