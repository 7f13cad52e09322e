from .qif_loader import parse_file

__all__ = ["parse_file"]
