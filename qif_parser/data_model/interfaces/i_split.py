from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class ISplit(IToDict, Protocol):
    """Structural shape of a split row (S/E/$/N)."""

    category: str
    memo: str
    amount: float
    check_number: str
