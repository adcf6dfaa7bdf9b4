"""
Cipher engine
=============
Encryption and the two interchangeable decryption strategies, all
pure functions of (key-stream, text) over a shared tabula recta.

    encrypt                     cipher[i] = table[key[i]][plain[i]]
    decrypt_by_table_search     plain[i]  = column of cipher[i] in row key[i]
    decrypt_by_modular_inverse  plain[i]  = (cipher[i] - key[i] + 26) mod 26

The two decryptors must agree on every valid input; having both lets
each cross-check the other. Key-stream and text must be the same
length; build the key-stream with keys.generate_key().
"""

import logging
from typing import List, Tuple

from .alphabet import SIZE, to_residues, to_symbols
from .errors import LengthMismatchError
from .table import TabulaRecta, shared_table

logger = logging.getLogger(__name__)

METHODS = ("table", "modular")


class CipherEngine:
    """Stateless Vigenère operations bound to one read-only table."""

    def __init__(self, table: TabulaRecta = None):
        self._table = table if table is not None else shared_table()

    @property
    def table(self) -> TabulaRecta:
        return self._table

    def encrypt(self, key: str, plain_text: str) -> str:
        rows, cols = self._pair(key, plain_text)
        logger.debug(f"Encrypt: {len(cols)} symbols")
        return to_symbols(self._table[r][c] for r, c in zip(rows, cols))

    def decrypt_by_table_search(self, key: str, cipher_text: str) -> str:
        """
        Invert encrypt() by searching each key row for the ciphertext
        residue. Raises DecryptionLookupError if a row lacks it.
        """
        rows, values = self._pair(key, cipher_text)
        logger.debug(f"Decrypt (table search): {len(values)} symbols")
        return to_symbols(
            self._table.column_of(r, v) for r, v in zip(rows, values)
        )

    def decrypt_by_modular_inverse(self, key: str, cipher_text: str) -> str:
        """Invert encrypt() arithmetically, without touching the table."""
        rows, values = self._pair(key, cipher_text)
        logger.debug(f"Decrypt (modular inverse): {len(values)} symbols")
        return to_symbols((v - r + SIZE) % SIZE for r, v in zip(rows, values))

    def decrypt(self, key: str, cipher_text: str, method: str = "table") -> str:
        """Decrypt with the named strategy: "table" or "modular"."""
        if method == "table":
            return self.decrypt_by_table_search(key, cipher_text)
        if method == "modular":
            return self.decrypt_by_modular_inverse(key, cipher_text)
        raise ValueError(f"Unknown decryption method {method!r}. Use one of {METHODS}.")

    # ── helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def _pair(key: str, text: str) -> Tuple[List[int], List[int]]:
        if len(key) != len(text):
            raise LengthMismatchError(len(key), len(text))
        return to_residues(key), to_residues(text)

    def __repr__(self):
        return f"CipherEngine({self._table!r})"


_default = None


def _engine() -> CipherEngine:
    global _default
    if _default is None:
        _default = CipherEngine()
    return _default


def encrypt(key: str, plain_text: str) -> str:
    return _engine().encrypt(key, plain_text)


def decrypt_by_table_search(key: str, cipher_text: str) -> str:
    return _engine().decrypt_by_table_search(key, cipher_text)


def decrypt_by_modular_inverse(key: str, cipher_text: str) -> str:
    return _engine().decrypt_by_modular_inverse(key, cipher_text)


def decrypt(key: str, cipher_text: str, method: str = "table") -> str:
    return _engine().decrypt(key, cipher_text, method)
