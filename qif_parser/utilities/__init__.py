from .config_logging import LOGGING
from .converters_scalar import check_date_pattern, to_amount, to_iso_date
from .core_util import is_null_or_whitespace, open_for_read
from .qif_parsing_error import QifParsingError

__all__ = [
    "check_date_pattern",
    "is_null_or_whitespace",
    "to_amount",
    "to_iso_date",
    "open_for_read",
    "QifParsingError",
    "LOGGING",
]
