from .ledger import LedgerService
from .store import LedgerStore

__all__ = ["LedgerService", "LedgerStore"]
