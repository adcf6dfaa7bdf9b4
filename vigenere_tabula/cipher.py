"""
Keyword cipher
==============
A Vigenère cipher bound to one keyword.

Historical note: Giovan Battista Bellaso described the scheme in
1553; it was later misattributed to Blaise de Vigenère and called
"le chiffre indéchiffrable" for three hundred years. It falls to
Kasiski and Friedman analysis and is kept here for teaching only.

Text must already be upper-case A..Z; nothing is passed through or
case-folded.
"""

import logging

from .alphabet import to_residue
from .engine import METHODS, CipherEngine
from .errors import InvalidKeyError
from .keys import generate_key

logger = logging.getLogger(__name__)


class VigenereCipher:
    """
    Vigenère cipher with a repeating keyword.

    The key-stream for each message is the keyword cycled out to the
    message length. `method` picks the decryptor: "table" searches the
    tabula recta, "modular" subtracts residues directly.
    """

    def __init__(self, keyword: str, engine: CipherEngine = None,
                 method: str = "table"):
        if not isinstance(keyword, str) or not keyword:
            raise InvalidKeyError("Vigenère keyword must be a non-empty string.")
        for i, ch in enumerate(keyword):
            to_residue(ch, i)
        if method not in METHODS:
            raise ValueError(f"Unknown decryption method {method!r}. Use one of {METHODS}.")
        self._keyword = keyword
        self._engine  = engine if engine is not None else CipherEngine()
        self._method  = method
        logger.info(f"VigenereCipher | period={len(keyword)} method={method}")

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def method(self) -> str:
        return self._method

    def key_for(self, text: str) -> str:
        """Key-stream matching the length of `text`."""
        return generate_key(self._keyword, len(text))

    def encrypt(self, plain_text: str) -> str:
        return self._engine.encrypt(self.key_for(plain_text), plain_text)

    def decrypt(self, cipher_text: str) -> str:
        return self._engine.decrypt(self.key_for(cipher_text), cipher_text,
                                    self._method)

    def __repr__(self):
        return f"VigenereCipher(period={len(self._keyword)}, method={self._method!r})"
