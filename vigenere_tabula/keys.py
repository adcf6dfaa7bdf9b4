"""
Key scheduling
==============
Expands a short keyword into a key-stream as long as the text it
will encrypt: the keyword repeated symbol by symbol, with the last
repetition cut short rather than padded.

    generate_key("HOUGHTON", 11)  ->  "HOUGHTONHOU"
"""

import logging

from .alphabet import to_residue
from .errors import InvalidKeyError

logger = logging.getLogger(__name__)


def generate_key(keyword: str, target_length: int) -> str:
    """
    Return a key-stream of exactly `target_length` symbols.

    Raises InvalidKeyError for an empty or non-string keyword,
    InvalidSymbolError if the keyword strays outside the alphabet, and
    ValueError for a negative or non-integer length.
    """
    if not isinstance(keyword, str):
        raise InvalidKeyError("Keyword must be a string.")
    if not keyword:
        raise InvalidKeyError("Keyword must not be empty.")
    if isinstance(target_length, bool) or not isinstance(target_length, int):
        raise ValueError("Key length must be an integer.")
    if target_length < 0:
        raise ValueError(f"Key length must be non-negative, got {target_length}.")
    for i, ch in enumerate(keyword):
        to_residue(ch, i)

    period = len(keyword)
    stream = "".join(keyword[i % period] for i in range(target_length))
    logger.debug(f"Key-stream: period={period} length={target_length}")
    return stream
