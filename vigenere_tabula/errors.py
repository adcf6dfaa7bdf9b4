"""
Errors
======
Every failure in the package derives from VigenereError, and also from
the builtin a caller would reach for first: ValueError for bad input,
RuntimeError for a lookup that should never fail on a sound table.

All operations are pure, so none of these is retryable.
"""


class VigenereError(Exception):
    """Base class for all cipher errors."""


class InvalidKeyError(VigenereError, ValueError):
    """Keyword is empty (or otherwise unusable) when a key is requested."""


class LengthMismatchError(VigenereError, ValueError):
    """Key-stream and text lengths differ."""

    def __init__(self, key_length: int, text_length: int):
        self.key_length  = key_length
        self.text_length = text_length
        super().__init__(
            f"Key length {key_length} does not match text length {text_length}."
        )


class InvalidSymbolError(VigenereError, ValueError):
    """A character outside the alphabet, or a residue outside [0, 25]."""

    def __init__(self, symbol, position: int = None):
        self.symbol   = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid symbol {symbol!r}{where}.")


class DecryptionLookupError(VigenereError, RuntimeError):
    """Table search found no column holding the value in the given row."""

    def __init__(self, row: int, value: int):
        self.row   = row
        self.value = value
        super().__init__(f"No column in row {row} holds residue {value}.")
