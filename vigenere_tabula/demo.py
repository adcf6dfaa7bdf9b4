"""
Demonstration run
=================
Builds the tabula recta, derives a key from a fixed keyword, encrypts
a fixed message and decrypts it again, writing one item per line:

    the table (26 rows of 26 symbols, each padded to width two)
    the key-stream
    the message
    the ciphertext
    the decrypted text

Run:  python -m vigenere_tabula
"""

import logging
import sys
from typing import TextIO

from .alphabet import to_symbol
from .engine import CipherEngine
from .keys import generate_key
from .table import TabulaRecta

logger = logging.getLogger(__name__)

KEYWORD = "HOUGHTON"
MESSAGE = "MICHIGANTECHNOLOGICALUNIVERSITY"


def render_table(table: TabulaRecta) -> str:
    """Table as text: one line per row, symbols right-aligned in two columns."""
    lines = ["".join(f"{to_symbol(v):>2}" for v in row) for row in table]
    return "\n".join(lines) + "\n\n"


def run(stream: TextIO, keyword: str = KEYWORD, message: str = MESSAGE,
        method: str = "modular") -> str:
    """Write the demonstration to `stream` and return the decrypted text."""
    engine     = CipherEngine()
    key        = generate_key(keyword, len(message))
    ciphertext = engine.encrypt(key, message)
    decrypted  = engine.decrypt(key, ciphertext, method)

    stream.write(render_table(engine.table))
    for item in (key, message, ciphertext, decrypted):
        stream.write(item + "\n")

    logger.info(f"Round-trip via {method}: {'OK' if decrypted == message else 'MISMATCH'}")
    return decrypted


def main() -> int:
    logging.basicConfig(level=logging.INFO, format=' %(message)s')
    run(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
