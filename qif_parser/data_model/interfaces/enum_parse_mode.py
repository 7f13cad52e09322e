from enum import Enum


class EnumParseMode(Enum):
    """
    Which record type the lines of the current block describe.

    A parse starts in ``TRANSACTION`` and moves to ``INVESTMENT`` on the first
    ``!Type:Invst`` header. There is no transition back.
    """

    TRANSACTION = "transaction"
    INVESTMENT = "investment"
