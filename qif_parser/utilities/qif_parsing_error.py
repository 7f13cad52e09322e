# qif_parser/utilities/qif_parsing_error.py
from __future__ import annotations


class QifParsingError(ValueError):
    """
    Raised when QIF content cannot be parsed.

    Derives from ``ValueError`` so callers that already guard parsing with
    ``except ValueError`` keep working.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
