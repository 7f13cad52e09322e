from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..interfaces import IInvestment, IToDict, RecursiveDict


@dataclass
class QInvestment:
    """
    Represents a single entry of a ``!Type:Invst`` block.
    """

    date: str = ""
    amount: float = 0.0
    memo: str = ""
    cleared_status: str = ""
    action: str = ""
    security_name: str = ""
    price: float = 0.0
    quantity: float = 0.0
    commission_cost: float = 0.0
    amount_transferred: float = 0.0

    def __str__(self) -> str:
        return (
            f"{self.date} {self.amount} {self.action} "
            f"{self.security_name} {self.memo}"
        )

    def to_dict(self) -> dict[str, RecursiveDict]:
        return {
            "date": self.date,
            "amount": self.amount,
            "memo": self.memo,
            "cleared_status": self.cleared_status,
            "action": self.action,
            "security_name": self.security_name,
            "price": self.price,
            "quantity": self.quantity,
            "commission_cost": self.commission_cost,
            "amount_transferred": self.amount_transferred,
        }


if TYPE_CHECKING:
    _is_i_investment: type[IInvestment] = QInvestment
    _is_IToDict: type[IToDict] = QInvestment
