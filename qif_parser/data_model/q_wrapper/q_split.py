from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..interfaces import ISplit, IToDict, RecursiveDict


@dataclass
class QSplit:
    """
    Represents a single QIF split: a share of one transaction's amount.
    """

    category: str = ""
    memo: str = ""
    amount: float = 0.0
    check_number: str = ""

    def __str__(self) -> str:
        return f"{self.amount} {self.memo} {self.category}"

    def to_dict(self) -> dict[str, RecursiveDict]:
        """
        Convert the QSplit to a dictionary representation.
        """
        return {
            "category": self.category,
            "memo": self.memo,
            "amount": self.amount,
            "check_number": self.check_number,
        }


if TYPE_CHECKING:
    _is_i_split: type[ISplit] = QSplit
    _is_IToDict: type[IToDict] = QSplit
