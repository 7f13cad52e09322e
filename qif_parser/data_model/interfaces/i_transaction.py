# qif_parser/data_model/interfaces/i_transaction.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_split import ISplit
from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape of a banking transaction read from a QIF file."""

    date: str
    amount: float
    memo: str
    payee: str
    category: str
    cleared_status: str
    addresses: list[str]
    splits: list[ISplit]
    check_number: str

    def add_split(self, category: str) -> ISplit: ...
    def last_split(self) -> ISplit | None: ...
