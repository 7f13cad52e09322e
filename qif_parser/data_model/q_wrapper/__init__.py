# qif_parser/data_model/q_wrapper/__init__.py

from . import qif_codes
from .q_file import QuickenFile
from .q_investment import QInvestment
from .q_split import QSplit
from .q_transaction import QTransaction
from .qif_code import QifCode

__all__ = [
    "QifCode",
    "QInvestment",
    "QSplit",
    "QTransaction",
    "QuickenFile",
    "qif_codes",
]
