from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..interfaces import IToDict, ITransaction, RecursiveDict
from .q_split import QSplit


@dataclass
class QTransaction:
    """
    Represents a single QIF banking transaction.

    ``date`` holds the canonical ``YYYY-MM-DD`` text once set. ``splits`` is
    owned by this transaction; new splits are only ever created through
    :meth:`add_split`.
    """

    # region Core Fields

    date: str = ""
    amount: float = 0.0
    memo: str = ""
    payee: str = ""
    category: str = ""
    cleared_status: str = ""
    addresses: list[str] = field(default_factory=list)
    splits: list[QSplit] = field(default_factory=list)
    check_number: str = ""

    # endregion Core Fields

    # region Splits

    def add_split(self, category: str) -> QSplit:
        """Open a new split with ``category`` and return it."""
        split = QSplit(category=category)
        self.splits.append(split)
        return split

    def last_split(self) -> QSplit | None:
        """Return the most recently opened split, or None if there is none."""
        return self.splits[-1] if self.splits else None

    # endregion Splits

    def __str__(self) -> str:
        return f"{self.date} {self.amount} {self.memo} {self.payee}"

    def to_dict(self) -> dict[str, RecursiveDict]:
        """
        Convert the QTransaction instance to a dictionary representation.
        """
        return {
            "date": self.date,
            "amount": self.amount,
            "memo": self.memo,
            "payee": self.payee,
            "category": self.category,
            "cleared_status": self.cleared_status,
            "addresses": list(self.addresses),
            "splits": [s.to_dict() for s in self.splits],
            "check_number": self.check_number,
        }


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = QTransaction
    _is_IToDict: type[IToDict] = QTransaction
