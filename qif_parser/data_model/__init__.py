# qif_parser/data_model/__init__.py
from .interfaces import (
    EnumParseMode, IInvestment, IParser, IQuickenFile,
    ISplit, IToDict, ITransaction, RecursiveDict)
from .q_wrapper import (
    QifCode, QInvestment, QSplit, QTransaction, QuickenFile, qif_codes)
__all__ = [
    "EnumParseMode", "IInvestment", "IParser", "IQuickenFile", "ISplit",
    "IToDict", "ITransaction", "RecursiveDict", "QifCode", "QInvestment",
    "QSplit", "QTransaction", "QuickenFile", "qif_codes"]
