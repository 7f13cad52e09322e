from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QifCode:
    """One leading tag of a QIF line, with where it applies and a sample line."""

    code: str
    description: str
    used_in: str
    example: str
