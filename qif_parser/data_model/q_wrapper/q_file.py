from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..interfaces import IQuickenFile, IToDict, RecursiveDict
from .q_investment import QInvestment
from .q_transaction import QTransaction


@dataclass
class QuickenFile:
    """
    Represents a complete parsed QIF document.

    ``file_type`` is the text after ``!Type:`` on the last header line, kept
    verbatim (``Bank``, ``CCard``, ``Invst``, ``Oth A``...).
    """

    file_type: str = ""
    transactions: list[QTransaction] = field(default_factory=list)
    investments: list[QInvestment] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"{self.file_type}, {len(self.transactions)} transactions, "
            f"{len(self.investments)} investments"
        )

    def to_dict(self) -> dict[str, RecursiveDict]:
        return {
            "file_type": self.file_type,
            "transactions": [t.to_dict() for t in self.transactions],
            "investments": [i.to_dict() for i in self.investments],
        }


if TYPE_CHECKING:
    _is_i_quicken_file: type[IQuickenFile] = QuickenFile
    _is_IToDict: type[IToDict] = QuickenFile
