"""
Alphabet codec
==============
Maps the 26 working symbols A..Z onto residues 0..25 and back.

The mapping is the symbol's position in ALPHABET. Both directions
check their input: a character outside the alphabet or an integer
outside [0, 25] raises InvalidSymbolError instead of wrapping.
"""

from typing import Iterable, List

from .errors import InvalidSymbolError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE     = len(ALPHABET)   # 26

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def to_residue(symbol: str, position: int = None) -> int:
    """Return the residue of a single alphabet symbol."""
    if not isinstance(symbol, str) or len(symbol) != 1 or symbol not in _INDEX:
        raise InvalidSymbolError(symbol, position)
    return _INDEX[symbol]


def to_symbol(residue: int, position: int = None) -> str:
    """Return the symbol for a residue in [0, 25]."""
    # bool is an int subclass; True is not a residue
    if isinstance(residue, bool) or not isinstance(residue, int):
        raise InvalidSymbolError(residue, position)
    if not 0 <= residue < SIZE:
        raise InvalidSymbolError(residue, position)
    return ALPHABET[residue]


def to_residues(text: str) -> List[int]:
    return [to_residue(ch, i) for i, ch in enumerate(text)]


def to_symbols(residues: Iterable[int]) -> str:
    return "".join(to_symbol(r, i) for i, r in enumerate(residues))
