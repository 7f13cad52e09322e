# qif_parser/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the QIF data model.
"""

from .enum_parse_mode import EnumParseMode
from .i_investment import IInvestment
from .i_parser import IParser
from .i_quicken_file import IQuickenFile
from .i_split import ISplit
from .i_to_dict import IToDict, RecursiveDict
from .i_transaction import ITransaction

__all__ = [
    "EnumParseMode",
    "IInvestment",
    "IParser",
    "IQuickenFile",
    "ISplit",
    "IToDict",
    "ITransaction",
    "RecursiveDict",
]
