# qif_parser/data_model/q_wrapper/qif_codes.py
"""
Catalogue of the QIF line codes this parser understands.

Each factory returns a ``QifCode`` describing one leading tag. The parser's
dispatch tables are keyed by ``factory().code`` so that this module is the
single place a tag letter is spelled out.
"""

from __future__ import annotations

from .qif_code import QifCode

# region Headers


def header_type() -> QifCode:
    return QifCode("!Type", "Account type header", "Headers", "!Type:Bank")


def header_investment() -> QifCode:
    return QifCode(
        "!Type:Invst", "Investment account header", "Headers", "!Type:Invst"
    )


def end_of_entry() -> QifCode:
    return QifCode("^", "End of entry", "All", "^")


# endregion Headers

# region Banking


def date() -> QifCode:
    return QifCode("D", "Date", "Banking, Investment", "D12/21'2007")


def amount_transaction1() -> QifCode:
    return QifCode("T", "Amount of the item", "Banking, Investment", "T-379.00")


def amount_transaction2() -> QifCode:
    return QifCode(
        "U", "Amount of the item (duplicate of T)", "Banking, Investment", "U-379.00"
    )


def cleared_status() -> QifCode:
    return QifCode("C", "Cleared status", "Banking, Investment", "C*")


def memo() -> QifCode:
    return QifCode("M", "Memo", "Banking, Investment", "MGas bill")


def payee() -> QifCode:
    return QifCode("P", "Payee", "Banking", "PCITY OF SPRINGFIELD")


def category() -> QifCode:
    return QifCode("L", "Category or transfer account", "Banking", "LUtilities:Gas")


def address() -> QifCode:
    return QifCode(
        "A", "Address line of the payee (repeatable)", "Banking", "A30 Main Street"
    )


def check_number() -> QifCode:
    return QifCode(
        "N", "Number of the check (applies to the open split if any)", "Banking, Splits", "N1005"
    )


# endregion Banking

# region Splits


def category_split() -> QifCode:
    return QifCode("S", "Category in split (opens a new split)", "Splits", "SFood:Groceries")


def memo_split() -> QifCode:
    return QifCode("E", "Memo in split", "Splits", "E50%")


def amount_split() -> QifCode:
    return QifCode("$", "Amount in split", "Splits", "$-50.00")


# endregion Splits

# region Investment


def investment_action() -> QifCode:
    return QifCode("N", "Investment action (Buy, Sell, ...)", "Investment", "NBuy")


def name_security() -> QifCode:
    return QifCode("Y", "Security name", "Investment", "YIBM")


def price_investment() -> QifCode:
    return QifCode("I", "Price per share", "Investment", "I110.10")


def quantity_shares() -> QifCode:
    return QifCode("Q", "Quantity of shares", "Investment", "Q100")


# endregion Investment
