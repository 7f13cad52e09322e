# tests/data_model/qif_parsers/test_qif_file_parser.py
from __future__ import annotations

import logging

import pytest

from qif_parser.data_model.interfaces import IParser
from qif_parser.data_model.q_wrapper import QInvestment, QSplit, QTransaction
from qif_parser.data_model.qif_parsers import QifFileParser, parse
from qif_parser.utilities.qif_parsing_error import QifParsingError

BANK_WITH_SPLITS = (
    "!Type:Bank\n"
    "D02/10/2020\n"
    "C*\n"
    "Mtest order 1\n"
    "T-100.00\n"
    "PAmazon.com\n"
    "LFood:Groceries\n"
    "SFood:Groceries\n"
    "E60%\n"
    "$-60.00\n"
    "STransportation:Automobile\n"
    "E40%\n"
    "$-40.00\n"
    "^\n"
)

INVESTMENT_BUY = (
    "!Type:Invst\n"
    "D12/21'2007\n"
    "NBuy\n"
    "YIBM\n"
    "I110.10\n"
    "Q100\n"
    "U11,010.00\n"
    "T11,010.00\n"
    "CX\n"
    "MPurchase of 100 shares of IBM stock on 21 December 2007 at $110.10 per share\n"
    "^\n"
)


# -------------------------
# Transactions and splits
# -------------------------


def test_bank_transaction_with_two_percentage_splits():
    # Act
    qf = parse(BANK_WITH_SPLITS, "%m/%d/%Y")

    # Assert
    assert qf.file_type == "Bank"
    assert qf.investments == []
    assert len(qf.transactions) == 1
    t = qf.transactions[0]
    assert t.date == "2020-02-10"
    assert t.amount == -100.0
    assert t.payee == "Amazon.com"
    assert t.category == "Food:Groceries"
    assert t.cleared_status == "*"
    assert t.memo == "test order 1"
    assert t.splits == [
        QSplit(category="Food:Groceries", memo="60%", amount=-60.0),
        QSplit(category="Transportation:Automobile", memo="40%", amount=-40.0),
    ]
    assert sum(s.amount for s in t.splits) == t.amount


def test_check_number_goes_to_newest_split_once_splits_exist():
    # Arrange
    text = (
        "!Type:Bank\n"
        "D27/08/2018\n"
        "T-30.00\n"
        "N1001\n"
        "SBills\n"
        "NCHQ101\n"
        "$-10.00\n"
        "SFood\n"
        "$-20.00\n"
        "NCHQ102\n"
        "^\n"
    )

    # Act
    t = parse(text, "%d/%m/%Y").transactions[0]

    # Assert
    assert t.check_number == "1001"
    assert [s.check_number for s in t.splits] == ["CHQ101", "CHQ102"]


def test_check_number_without_splits_sets_transaction_and_resets_per_record():
    # Arrange
    text = (
        "D27/08/2018\nT-1.00\nSFood\n$-1.00\n^\n"
        "D28/08/2018\nT-2.00\nNCHQ100\n^\n"
    )

    # Act
    qf = parse(text, "%d/%m/%Y")

    # Assert
    second = qf.transactions[1]
    assert second.check_number == "CHQ100"
    assert second.splits == []
    assert qf.transactions[0].splits[0].check_number == ""


@pytest.mark.parametrize("orphan", ["Emissing split", "$-5.00"])
def test_split_detail_without_open_split_raises_and_stops(orphan):
    """The later bad date would raise a different error if scanning went on."""
    # Arrange
    text = f"!Type:Bank\nD27/08/2018\nT-5.00\n{orphan}\nDnot-a-date\n^\n"

    # Act
    with pytest.raises(QifParsingError) as exc:
        parse(text, "%d/%m/%Y")

    # Assert
    assert f"'{orphan[0]}'" in str(exc.value)
    assert "not-a-date" not in str(exc.value)


def test_split_state_does_not_leak_into_next_record():
    text = "SFood\n$-1.00\n^\nE dangling\n^\n"
    with pytest.raises(QifParsingError):
        parse(text, "%d/%m/%Y")


def test_addresses_accumulate_in_order_and_remainders_are_not_trimmed():
    # Arrange
    text = (
        "!Type:Bank\n"
        "D27/08/2018\n"
        "T -10,000,000.00 \n"
        "PHuge Amount 😅 with UTF8 \n"
        "LShopping\n"
        "AAddress line 1\n"
        "AAddress line 2\n"
        "AAddress line 3\n"
        "^\n"
    )

    # Act
    t = parse(text, "%d/%m/%Y").transactions[0]

    # Assert
    assert t.amount == -10_000_000.0
    assert t.payee == "Huge Amount 😅 with UTF8 "
    assert t.addresses == ["Address line 1", "Address line 2", "Address line 3"]


@pytest.mark.parametrize(
    "line,expected",
    [("T+123", 123.0), ("U1,234.56", 1234.56), ("T0", 0.0), ("U-0.5", -0.5)],
)
def test_t_and_u_both_set_amount(line, expected):
    qf = parse(f"{line}\n^\n", "%d/%m/%Y")
    assert qf.transactions[0].amount == expected


def test_unknown_tags_and_blank_lines_are_ignored():
    # Arrange
    text = "!Type:Bank\n\nD27/08/2018\nXsomething\nO12.50\nT-1.00\n   \n^\n"

    # Act
    qf = parse(text, "%d/%m/%Y")

    # Assert
    assert qf.transactions == [QTransaction(date="2018-08-27", amount=-1.0)]


# -------------------------
# Investments and mode selection
# -------------------------


def test_investment_block_goes_to_investments():
    # Act
    qf = parse(INVESTMENT_BUY, "%m/%d'%Y")

    # Assert
    assert qf.file_type == "Invst"
    assert qf.transactions == []
    assert len(qf.investments) == 1
    inv = qf.investments[0]
    assert inv.date == "2007-12-21"
    assert inv.action == "Buy"
    assert inv.security_name == "IBM"
    assert inv.price == 110.10
    assert inv.quantity == 100.0
    assert inv.amount == 11010.0
    assert inv.cleared_status == "X"
    assert inv.memo.startswith("Purchase of 100 shares of IBM")


def test_investment_mode_ignores_banking_only_tags_and_reserved_fields_stay_zero():
    # Arrange
    text = "!Type:Invst\nD12/21'2007\nNSell\nPnot a payee\nLnot a category\n$250.00\nO9.99\nSnope\nEnope\n^\n"

    # Act
    inv = parse(text, "%m/%d'%Y").investments[0]

    # Assert
    assert inv == QInvestment(date="2007-12-21", action="Sell")
    assert inv.commission_cost == 0.0
    assert inv.amount_transferred == 0.0


def test_investment_mode_is_sticky_after_later_headers():
    # Arrange
    text = (
        "!Type:Bank\nD01/02/2020\nT-1.00\n^\n"
        "!Type:Invst\nD01/03/2020\nNBuy\n^\n"
        "!Type:Bank\nD01/04/2020\nT-2.00\nPShop\n^\n"
    )

    # Act
    qf = parse(text, "%d/%m/%Y")

    # Assert
    assert qf.file_type == "Bank"
    assert [t.date for t in qf.transactions] == ["2020-02-01"]
    assert [i.date for i in qf.investments] == ["2020-03-01", "2020-04-01"]
    assert qf.investments[1].amount == -2.0


def test_last_type_header_wins_and_is_kept_verbatim():
    qf = parse("!Type:Bank\n!Type:Oth A\n", "%d/%m/%Y")
    assert qf.file_type == "Oth A"


# -------------------------
# Record boundaries
# -------------------------


def test_unterminated_trailing_record_is_dropped_by_default():
    text = "D01/02/2020\nT-1.00\n^\nD02/02/2020\nT-2.00\n"
    qf = parse(text, "%d/%m/%Y")
    assert [t.amount for t in qf.transactions] == [-1.0]


def test_unterminated_trailing_record_can_be_kept():
    text = "D01/02/2020\nT-1.00\n^\nD02/02/2020\nT-2.00"
    qf = parse(text, "%d/%m/%Y", commit_unterminated=True)
    assert [t.amount for t in qf.transactions] == [-1.0, -2.0]


def test_commit_unterminated_keeps_trailing_investment():
    text = "!Type:Invst\nNBuy\n^\nNSell\n"
    qf = QifFileParser("%d/%m/%Y", commit_unterminated=True).parse(text)
    assert [i.action for i in qf.investments] == ["Buy", "Sell"]


def test_terminator_after_untouched_record_commits_nothing():
    qf = parse("^\nT-1.00\n^\n^\n\n^\n", "%d/%m/%Y")
    assert len(qf.transactions) == 1


def test_record_touched_with_default_values_is_still_committed():
    qf = parse("T0.00\n^\n", "%d/%m/%Y")
    assert qf.transactions == [QTransaction()]


def test_terminator_must_be_alone_on_its_line():
    qf = parse("T-1.00\n^ trailing\n", "%d/%m/%Y")
    assert qf.transactions == []


def test_crlf_and_cr_line_endings_are_equivalent():
    # Arrange
    lf = BANK_WITH_SPLITS
    crlf = lf.replace("\n", "\r\n")
    cr = lf.replace("\n", "\r")

    # Act / Assert
    assert parse(crlf, "%m/%d/%Y") == parse(lf, "%m/%d/%Y")
    assert parse(cr, "%m/%d/%Y") == parse(lf, "%m/%d/%Y")


# -------------------------
# Errors
# -------------------------


@pytest.mark.parametrize(
    "text",
    [
        "T12a\n^\n",
        "U\n^\n",
        "SFood\n$abc\n^\n",
        "!Type:Invst\nIten\n^\n",
        "!Type:Invst\nQ1..0\n^\n",
    ],
)
def test_malformed_numbers_raise(text):
    with pytest.raises(QifParsingError, match="Unable to parse number"):
        parse(text, "%d/%m/%Y")


def test_malformed_date_raises_with_input_text():
    with pytest.raises(QifParsingError, match="13/27/2020"):
        parse("!Type:Bank\nD13/27/2020\nT-1.00\n^\n", "%d/%m/%Y")


def test_date_pattern_for_wrong_field_order_raises():
    """Day-first data read month-first must fail, not wrap around."""
    with pytest.raises(QifParsingError):
        parse("D27/08/2018\n^\n", "%m/%d/%Y")


@pytest.mark.parametrize("pattern", ["", "   "])
def test_blank_date_pattern_is_rejected(pattern):
    with pytest.raises(ValueError, match="date_pattern"):
        QifFileParser(pattern)


# -------------------------
# Purity and protocol
# -------------------------


def test_parsing_twice_gives_equal_documents():
    # Arrange
    text = BANK_WITH_SPLITS + INVESTMENT_BUY.replace("'", "/")

    # Act
    first = parse(text, "%m/%d/%Y")
    second = parse(text, "%m/%d/%Y")

    # Assert
    assert first == second
    assert first is not second
    assert first.transactions[0].splits is not second.transactions[0].splits


def test_parser_instance_is_reusable():
    # Arrange
    parser = QifFileParser("%m/%d'%Y")

    # Act
    a = parser.parse(INVESTMENT_BUY)
    b = parser.parse("!Type:Bank\nD1/2'2020\nT-3.00\n^\n")

    # Assert
    assert len(a.investments) == 1
    assert b.investments == [] and len(b.transactions) == 1
    assert parser.date_pattern == "%m/%d'%Y"
    assert parser.commit_unterminated is False


def test_parser_conforms_to_iparser():
    assert isinstance(QifFileParser("%d/%m/%Y"), IParser)


def test_empty_input_gives_empty_document():
    qf = parse("", "%d/%m/%Y")
    assert qf.file_type == ""
    assert qf.transactions == [] and qf.investments == []


# -------------------------
# Logging
# -------------------------


def test_mode_switch_and_dropped_record_are_logged(caplog):
    # Arrange
    caplog.set_level(logging.DEBUG, logger="qif_parser")
    text = "T-1.00\n!Type:Invst\nNBuy\n^\nNSell\n"

    # Act
    parse(text, "%d/%m/%Y")

    # Assert
    messages = [r.getMessage() for r in caplog.records]
    assert any("Discarding unterminated transaction" in m for m in messages)
    assert any("Switched to investment mode" in m for m in messages)
    assert any("Dropping unterminated record" in m for m in messages)


def test_parse_failure_is_logged_before_propagating(caplog):
    caplog.set_level(logging.DEBUG, logger="qif_parser")
    with pytest.raises(QifParsingError):
        parse("Tbad\n^\n", "%d/%m/%Y")
    assert any("QIF parsing aborted" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("text,pattern", [("D02/2020\n^\n", "%m/%Y"), ("D12\n^\n", "%H")])
def test_incomplete_date_pattern_is_rejected_up_front(text, pattern):
    with pytest.raises(QifParsingError, match="must contain a day, a month and a year"):
        parse(text, pattern)


def test_non_ascii_digits_in_amount_raise():
    with pytest.raises(QifParsingError, match="Unable to parse number"):
        parse("T١٢\n^\n", "%d/%m/%Y")


def test_package_logger_relies_on_propagation_only():
    """Records reach the console once, through the root handler."""
    pkg_logger = logging.getLogger("qif_parser")
    assert pkg_logger.handlers == []
    assert pkg_logger.propagate is True
    assert pkg_logger.level == logging.DEBUG
