from __future__ import annotations

import logging
import logging.config
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from qif_parser.data_model.interfaces import EnumParseMode, IParser, IQuickenFile
from qif_parser.data_model.q_wrapper import (
    QInvestment,
    QSplit,
    QTransaction,
    QuickenFile,
)
from qif_parser.data_model.q_wrapper import qif_codes as emit_q
from qif_parser.utilities import LOGGING
from qif_parser.utilities.converters_scalar import (
    check_date_pattern,
    to_amount,
    to_iso_date,
)
from qif_parser.utilities.core_util import is_null_or_whitespace
from qif_parser.utilities.qif_parsing_error import QifParsingError

logging.config.dictConfig(LOGGING)

log = logging.getLogger(__name__)

R = TypeVar("R")

# (record, remainder, date_pattern) -> None
Handler = Callable[[Any, str, str], None]

_TYPE_HEADER = emit_q.header_type().code
_INVESTMENT_HEADER = emit_q.header_investment().code
_END_OF_ENTRY = emit_q.end_of_entry().code
# "!Type:" is dropped from the header; the account type follows it verbatim
_TYPE_PREFIX_LEN = len(_TYPE_HEADER) + 1


# region Field handlers


def _set_amount(record: QTransaction | QInvestment, value: str, _: str) -> None:
    record.amount = to_amount(value)


def _set_date(record: QTransaction | QInvestment, value: str, date_pattern: str) -> None:
    record.date = to_iso_date(value, date_pattern)


def _set_cleared_status(record: QTransaction | QInvestment, value: str, _: str) -> None:
    record.cleared_status = value


def _set_memo(record: QTransaction | QInvestment, value: str, _: str) -> None:
    record.memo = value


def _set_payee(txn: QTransaction, value: str, _: str) -> None:
    txn.payee = value


def _set_category(txn: QTransaction, value: str, _: str) -> None:
    txn.category = value


def _add_address(txn: QTransaction, value: str, _: str) -> None:
    txn.addresses.append(value)


def _set_check_number(txn: QTransaction, value: str, _: str) -> None:
    split = txn.last_split()
    if split is not None:
        split.check_number = value
    else:
        txn.check_number = value


def _open_split(txn: QTransaction, value: str, _: str) -> None:
    txn.add_split(value)


def _require_split(txn: QTransaction, code: str) -> QSplit:
    split = txn.last_split()
    if split is None:
        raise QifParsingError(
            f"Split detail '{code}' found with no open split; "
            f"a split must start with '{emit_q.category_split().code}'"
        )
    return split


def _set_split_memo(txn: QTransaction, value: str, _: str) -> None:
    _require_split(txn, emit_q.memo_split().code).memo = value


def _set_split_amount(txn: QTransaction, value: str, _: str) -> None:
    _require_split(txn, emit_q.amount_split().code).amount = to_amount(value)


def _set_action(inv: QInvestment, value: str, _: str) -> None:
    inv.action = value


def _set_security_name(inv: QInvestment, value: str, _: str) -> None:
    inv.security_name = value


def _set_price(inv: QInvestment, value: str, _: str) -> None:
    inv.price = to_amount(value)


def _set_quantity(inv: QInvestment, value: str, _: str) -> None:
    inv.quantity = to_amount(value)


# endregion Field handlers

_TRANSACTION_HANDLERS: Mapping[str, Handler] = {
    emit_q.amount_transaction1().code: _set_amount,
    emit_q.amount_transaction2().code: _set_amount,
    emit_q.payee().code: _set_payee,
    emit_q.category().code: _set_category,
    emit_q.date().code: _set_date,
    emit_q.cleared_status().code: _set_cleared_status,
    emit_q.memo().code: _set_memo,
    emit_q.address().code: _add_address,
    emit_q.check_number().code: _set_check_number,
    emit_q.category_split().code: _open_split,
    emit_q.memo_split().code: _set_split_memo,
    emit_q.amount_split().code: _set_split_amount,
}

_INVESTMENT_HANDLERS: Mapping[str, Handler] = {
    emit_q.amount_transaction1().code: _set_amount,
    emit_q.amount_transaction2().code: _set_amount,
    emit_q.date().code: _set_date,
    emit_q.cleared_status().code: _set_cleared_status,
    emit_q.memo().code: _set_memo,
    emit_q.investment_action().code: _set_action,
    emit_q.name_security().code: _set_security_name,
    emit_q.price_investment().code: _set_price,
    emit_q.quantity_shares().code: _set_quantity,
}


@dataclass
class _Accumulator(Generic[R]):
    """The record being built for one mode, and where it goes when committed."""

    factory: Callable[[], R]
    handlers: Mapping[str, Handler]
    committed: list[R]
    record: R = field(init=False)
    touched: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.record = self.factory()

    def apply(self, line: str, date_pattern: str) -> None:
        handler = self.handlers.get(line[:1])
        if handler is None:
            return
        handler(self.record, line[1:], date_pattern)
        self.touched = True

    def commit(self) -> None:
        if self.touched:
            self.committed.append(self.record)
            log.debug(f"Committed {type(self.record).__name__}: {self.record}")
        self.record = self.factory()
        self.touched = False


class QifFileParser(IParser[IQuickenFile]):
    """
    Parse QIF text into a ``QuickenFile``.

    Lines are classified by their leading character. Records end at a line
    holding only ``^``. Lines under a ``!Type:Invst`` header, and every line
    after it, are read as investment entries.

    Args:
        date_pattern: ``strptime`` pattern for ``D`` lines, e.g. ``"%d/%m/%Y"``
            or ``"%m/%d'%y"``. QIF has no fixed date layout, so the caller
            picks the one used by the exporting institution.
        commit_unterminated: keep a record left open at end of input instead
            of dropping it.
    """

    def __init__(self, date_pattern: str, *, commit_unterminated: bool = False):
        if is_null_or_whitespace(date_pattern):
            raise ValueError("date_pattern must be a non-empty strptime pattern")
        check_date_pattern(date_pattern)
        self._date_pattern = date_pattern
        self._commit_unterminated = commit_unterminated

    @property
    def date_pattern(self) -> str:
        return self._date_pattern

    @property
    def commit_unterminated(self) -> bool:
        return self._commit_unterminated

    def parse(self, unparsed_string: str) -> QuickenFile:
        """Parse ``unparsed_string``; raise ``QifParsingError`` on the first bad field."""
        try:
            return self._parse(unparsed_string)
        except QifParsingError as e:
            log.debug(f"QIF parsing aborted: {e}")
            raise

    def _parse(self, unparsed_string: str) -> QuickenFile:
        lines = unparsed_string.splitlines()
        log.debug(
            f"Parsing {len(lines)} QIF lines with date pattern {self._date_pattern!r}"
        )
        qf = QuickenFile()
        accumulators: dict[EnumParseMode, _Accumulator[Any]] = {
            EnumParseMode.TRANSACTION: _Accumulator(
                QTransaction, _TRANSACTION_HANDLERS, qf.transactions
            ),
            EnumParseMode.INVESTMENT: _Accumulator(
                QInvestment, _INVESTMENT_HANDLERS, qf.investments
            ),
        }
        mode = EnumParseMode.TRANSACTION

        for line in lines:
            if line.startswith(_INVESTMENT_HEADER) and mode is EnumParseMode.TRANSACTION:
                if accumulators[mode].touched:
                    log.debug("Discarding unterminated transaction at investment header")
                mode = EnumParseMode.INVESTMENT
                log.debug("Switched to investment mode")
            if line.startswith(_TYPE_HEADER):
                qf.file_type = line[_TYPE_PREFIX_LEN:]
                continue

            if line == _END_OF_ENTRY:
                accumulators[mode].commit()
            else:
                accumulators[mode].apply(line, self._date_pattern)

        pending = accumulators[mode]
        if pending.touched:
            if self._commit_unterminated:
                pending.commit()
            else:
                log.debug(f"Dropping unterminated record at end of input: {pending.record}")

        log.debug(f"Parsed {qf}")
        return qf


def parse(
    content: str, date_pattern: str, *, commit_unterminated: bool = False
) -> QuickenFile:
    """
    Parse the text of a QIF file.

    Example:
        >>> qf = parse("!Type:Bank\\nD13/01/2020\\nT-9.99\\n^\\n", "%d/%m/%Y")
        >>> qf.transactions[0].date
        '2020-01-13'
    """
    parser = QifFileParser(date_pattern, commit_unterminated=commit_unterminated)
    return parser.parse(content)
