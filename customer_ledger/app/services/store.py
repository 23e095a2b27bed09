from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID, uuid4

from ..core.errors import CustomerAlreadyExistsError, CustomerNotFoundError


@dataclass(frozen=True)
class _TransactionRecord:
    amount: float
    type: str
    created_at: datetime
    description: Optional[str] = None


@dataclass
class _CustomerRecord:
    cpf: str
    name: str
    id: UUID = field(default_factory=uuid4)
    statement: List[_TransactionRecord] = field(default_factory=list)


class LedgerStore:
    """In-memory registry of customer accounts keyed by cpf.

    Records are handed out by reference; callers serialize access
    themselves (see ``LedgerService``).
    """

    def __init__(self) -> None:
        self._customers: Dict[str, _CustomerRecord] = {}

    def __len__(self) -> int:
        return len(self._customers)

    def __contains__(self, cpf: object) -> bool:
        return cpf in self._customers

    def create(self, cpf: str, name: str) -> _CustomerRecord:
        if cpf in self._customers:
            raise CustomerAlreadyExistsError()
        record = _CustomerRecord(cpf=cpf, name=name)
        self._customers[cpf] = record
        return record

    def find_by_cpf(self, cpf: Optional[str]) -> _CustomerRecord:
        try:
            return self._customers[cpf]
        except KeyError as exc:
            raise CustomerNotFoundError() from exc

    def update(self, record: _CustomerRecord) -> None:
        if record.cpf not in self._customers:
            raise CustomerNotFoundError()
        self._customers[record.cpf] = record

    def delete(self, cpf: Optional[str]) -> None:
        try:
            del self._customers[cpf]
        except KeyError as exc:
            raise CustomerNotFoundError() from exc

    def list_all(self) -> List[_CustomerRecord]:
        return list(self._customers.values())
