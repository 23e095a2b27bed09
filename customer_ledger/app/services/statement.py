"""Balance and date views over an account's transaction history.

Functions here only read the sequence they are given.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, List

from .store import _TransactionRecord

CREDIT = "credit"
DEBIT = "debit"


def balance(transactions: Iterable[_TransactionRecord]) -> float:
    total = 0
    for entry in transactions:
        if entry.type == CREDIT:
            total += entry.amount
        else:
            total -= entry.amount
    return total


def filter_by_date(
    transactions: Iterable[_TransactionRecord], day: date
) -> List[_TransactionRecord]:
    # naive timestamps are taken as local time by astimezone()
    return [entry for entry in transactions if entry.created_at.astimezone().date() == day]
