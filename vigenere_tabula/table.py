"""
Tabula recta
============
The 26x26 addition table behind the Vigenère substitution:

    table[row][col] = (row + col) mod 26

Row is the key residue, column the plaintext residue. Each row is a
Caesar shift of the alphabet and therefore a permutation of 0..25,
which is what lets decryption search a row for a ciphertext residue.

Tables are immutable once constructed. shared_table() hands out one
process-wide instance; building it twice under a race is harmless.
"""

import logging
from typing import Iterable, Iterator, Sequence, Tuple

from .alphabet import SIZE
from .errors import DecryptionLookupError, InvalidSymbolError

logger = logging.getLogger(__name__)

Row = Tuple[int, ...]


class TabulaRecta:
    """Immutable SIZE x SIZE grid of residues."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Sequence[int]]):
        frozen = tuple(tuple(row) for row in rows)
        if len(frozen) != SIZE or any(len(row) != SIZE for row in frozen):
            raise ValueError(f"Tabula recta must be {SIZE}x{SIZE}.")
        for row in frozen:
            for value in row:
                if isinstance(value, bool) or not isinstance(value, int) \
                        or not 0 <= value < SIZE:
                    raise InvalidSymbolError(value)
        self._rows = frozen

    @classmethod
    def build(cls) -> "TabulaRecta":
        """Generate the standard table. Deterministic and idempotent."""
        return cls(
            [(row + col) % SIZE for col in range(SIZE)]
            for row in range(SIZE)
        )

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    def entry(self, row: int, col: int) -> int:
        return self._rows[row][col]

    def column_of(self, row: int, value: int) -> int:
        """
        Linear scan of `row` for `value`.

        Returns the column index. Raises DecryptionLookupError when the
        row holds no such entry, which only a malformed table allows.
        """
        for col, entry in enumerate(self._rows[row]):
            if entry == value:
                return col
        raise DecryptionLookupError(row, value)

    def __getitem__(self, row: int) -> Row:
        return self._rows[row]

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other):
        if not isinstance(other, TabulaRecta):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f"TabulaRecta({SIZE}x{SIZE})"


def build_table() -> TabulaRecta:
    return TabulaRecta.build()


_shared = None


def shared_table() -> TabulaRecta:
    """Return the process-wide table, building it on first use."""
    global _shared
    if _shared is None:
        _shared = TabulaRecta.build()
        logger.info(f"Tabula recta built ({SIZE}x{SIZE})")
    return _shared
