# qif_parser/data_model/interfaces/i_investment.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class IInvestment(IToDict, Protocol):
    """Structural shape of an investment entry read from a ``!Type:Invst`` block."""

    date: str
    amount: float
    memo: str
    cleared_status: str
    action: str
    security_name: str
    price: float
    quantity: float

    # region Reserved

    # No QIF tag populates these yet
    commission_cost: float
    amount_transferred: float

    # endregion Reserved
