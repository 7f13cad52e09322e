# qif_parser/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing_extensions import Protocol, TypeAlias, runtime_checkable

RecursiveDict: TypeAlias = (
    str | float | list["RecursiveDict"] | dict[str, "RecursiveDict"]
)


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> dict[str, RecursiveDict]: ...
