"""
vigenere_tabula
===============
Classical Vigenère cipher over the 26 letters A..Z, driven by a
tabula recta.

Components:
    alphabet   : symbol <-> residue codec (A=0 .. Z=25)
    table      : the 26x26 tabula recta, table[row][col] = (row + col) mod 26
    keys       : keyword -> key-stream of a given length
    engine     : encrypt, plus two decryptors (table search, modular inverse)
    cipher     : VigenereCipher: all of the above bound to one keyword
    demo       : fixed demonstration run (python -m vigenere_tabula)

Educational only: the Vigenère cipher is broken by frequency analysis.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet import ALPHABET, SIZE, to_residue, to_symbol, to_residues, to_symbols
from .errors   import (VigenereError, InvalidKeyError, LengthMismatchError,
                       InvalidSymbolError, DecryptionLookupError)
from .table    import TabulaRecta, build_table, shared_table
from .keys     import generate_key
from .engine   import (CipherEngine, encrypt, decrypt, decrypt_by_table_search,
                       decrypt_by_modular_inverse)
from .cipher   import VigenereCipher

__all__ = [
    "ALPHABET",
    "SIZE",
    "to_residue",
    "to_symbol",
    "to_residues",
    "to_symbols",
    "VigenereError",
    "InvalidKeyError",
    "LengthMismatchError",
    "InvalidSymbolError",
    "DecryptionLookupError",
    "TabulaRecta",
    "build_table",
    "shared_table",
    "generate_key",
    "CipherEngine",
    "encrypt",
    "decrypt",
    "decrypt_by_table_search",
    "decrypt_by_modular_inverse",
    "VigenereCipher",
]
