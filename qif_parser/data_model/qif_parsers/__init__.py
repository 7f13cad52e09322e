from .qif_file_parser import QifFileParser, parse

__all__ = ["QifFileParser", "parse"]
