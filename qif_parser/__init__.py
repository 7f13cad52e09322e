"""
Parse QIF (Quicken Interchange Format) text into plain Python objects.

    >>> from qif_parser import parse
    >>> qf = parse(text, "%m/%d'%Y")
    >>> qf.file_type, len(qf.transactions), len(qf.investments)
"""

from .controllers import parse_file
from .data_model import (
    EnumParseMode,
    QifCode,
    QInvestment,
    QSplit,
    QTransaction,
    QuickenFile,
    qif_codes,
)
from .data_model.qif_parsers import QifFileParser, parse
from .utilities import QifParsingError

__all__ = [
    "EnumParseMode",
    "QifCode",
    "QifFileParser",
    "QifParsingError",
    "QInvestment",
    "QSplit",
    "QTransaction",
    "QuickenFile",
    "parse",
    "parse_file",
    "qif_codes",
]
