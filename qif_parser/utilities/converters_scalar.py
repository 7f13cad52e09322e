# qif_parser/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import datetime
from typing import Final

from .qif_parsing_error import QifParsingError


def to_amount(value: str) -> float:
    """
    Convert a QIF amount field into a float.

    Surrounding whitespace is trimmed and every ``,`` thousands separator is
    removed before parsing. An explicit leading ``+`` or ``-`` is honored.

    Examples:
        to_amount("123.45")      -> 123.45
        to_amount(" -1,234.56")  -> -1234.56
        to_amount("+123")        -> 123.0

    Raises:
        QifParsingError: if the trimmed text is not a number. The message
            quotes the trimmed text exactly as it appeared in the file.
    """
    trimmed = value.strip()
    cleaned = trimmed.replace(",", "")
    if not _NUMBER_RE.fullmatch(cleaned):
        raise QifParsingError(f"Unable to parse number '{trimmed}'")
    return float(cleaned)


def check_date_pattern(date_pattern: str) -> None:
    """
    Raise ``QifParsingError`` unless ``date_pattern`` pins a full calendar date.

    ``strptime`` quietly fills absent fields (``"%m/%Y"`` yields the 1st of
    the month, ``"%H"`` yields 1900-01-01), so a pattern needs a year
    directive plus either a day-of-year or both a month and a day directive.
    ``%x`` and ``%c`` carry a whole locale date and are accepted as-is.
    """
    directives = set(_DIRECTIVE_RE.findall(date_pattern))
    if directives & _FULL_DATE:
        return
    has_year = bool(directives & _YEAR)
    has_month_day = bool(directives & _MONTH) and bool(directives & _DAY)
    if not (has_year and ("j" in directives or has_month_day)):
        raise QifParsingError(
            f"Date pattern {date_pattern!r} must contain a day, a month and a year"
        )


def to_iso_date(value: str, date_pattern: str) -> str:
    """
    Parse ``value`` with the ``strptime`` pattern ``date_pattern`` and return
    it as ``YYYY-MM-DD``.

    The pattern is the only source of truth for field order; nothing is
    guessed. ``"%d/%m/%Y"`` reads ``13/01/2020`` as 13 January, while
    ``"%m/%d/%Y"`` rejects it because 13 is not a month.

    Two-digit years (``%y``) follow Python's pivot: 69-99 are 19xx and 00-68
    are 20xx. ``69`` is therefore 1969, where chrono-based readers give 2069.

    Raises:
        QifParsingError: on an incomplete pattern, a shape mismatch or an
            out-of-range month/day.
    """
    check_date_pattern(date_pattern)
    try:
        parsed = datetime.strptime(value.strip(), date_pattern)
    except ValueError as e:
        raise QifParsingError(f"Error when parsing date: {e} {value}") from e
    return parsed.date().isoformat()


# sign, digits with optional fraction (or bare fraction), optional exponent
_NUMBER_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII
)
# "%%" is consumed first so a literal percent never reads as a directive
_DIRECTIVE_RE: Final[re.Pattern[str]] = re.compile(r"%(?:%|[-#]?([A-Za-z]))")
_YEAR: Final[frozenset[str]] = frozenset("Yy")
_MONTH: Final[frozenset[str]] = frozenset("mbBh")
_DAY: Final[frozenset[str]] = frozenset("d")
_FULL_DATE: Final[frozenset[str]] = frozenset("xc")
