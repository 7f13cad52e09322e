# qif_parser/controllers/qif_loader.py
from __future__ import annotations

import logging
from pathlib import Path

from qif_parser.data_model.q_wrapper import QuickenFile
from qif_parser.data_model.qif_parsers import parse
from qif_parser.utilities.core_util import open_for_read

log = logging.getLogger(__name__)


def parse_file(
    path: Path | str,
    date_pattern: str,
    *,
    encoding: str = "utf-8",
    commit_unterminated: bool = False,
) -> QuickenFile:
    """
    Read a QIF file from disk and parse it.

    The file is decoded strictly with ``encoding``; undecodable bytes raise
    ``UnicodeDecodeError`` rather than being replaced.
    """
    path = Path(path)
    with open_for_read(path, binary=False, encoding=encoding) as f:
        content = f.read()
    log.debug(f"Read {len(content)} characters from {path}")
    return parse(content, date_pattern, commit_unterminated=commit_unterminated)
