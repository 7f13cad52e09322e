# qif_parser/data_model/interfaces/i_quicken_file.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_investment import IInvestment
from .i_to_dict import IToDict
from .i_transaction import ITransaction


@runtime_checkable
class IQuickenFile(IToDict, Protocol):
    # --- data ---
    file_type: str
    transactions: list[ITransaction]
    investments: list[IInvestment]
