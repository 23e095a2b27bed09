from functools import lru_cache
from typing import Optional

from fastapi import Header

from ..services import LedgerService

@lru_cache()
def get_ledger_service() -> LedgerService:
    return LedgerService()

def get_customer_cpf(cpf: Optional[str] = Header(default=None)) -> Optional[str]:
    # a missing header resolves to no customer, reported as 404 by the service
    return cpf
