# qif_parser/data_model/interfaces/i_parser.py
"""
Generic, runtime-checkable protocol for text → object parsers.

A parser converts the complete textual representation of a document into a
single domain object (for QIF, an ``IQuickenFile``).

### Expectations for implementers

- **Determinism:** Given the same input string and configuration, ``parse``
  must produce structurally equal results.
- **Order preservation:** Records appear in the result in the order they
  appear in the source.
- **Purity:** ``parse`` keeps all working state local to the call and does
  not mutate its arguments, so one instance can serve many calls.
- **Errors:** On unrecoverable format errors, raise ``ValueError`` (or a
  documented subclass) quoting the offending text. No partial result is
  returned.

Note: This is a **structural** type (``typing.Protocol``). Any class with a
matching ``parse`` method is considered compatible without explicit
inheritance.
"""

from __future__ import annotations

from typing import TypeVar

from typing_extensions import Protocol, runtime_checkable

T = TypeVar("T", covariant=True)


@runtime_checkable
class IParser(Protocol[T]):
    """
    Runtime-checkable protocol for single-format parsers.

    Typical specialization: ``IParser[IQuickenFile]``.
    """

    def parse(self, unparsed_string: str) -> T:
        """
        Parse a complete textual document.

        Parameters
        ----------
        unparsed_string : str
            The full contents of the source document. Line endings ``\\n``,
            ``\\r\\n`` and ``\\r`` are treated equivalently.

        Raises
        ------
        ValueError
            If the input cannot be parsed.
        """
        ...
