from __future__ import annotations

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

from braillista.base import (
    BRAILLE_RANGE_END,
    BRAILLE_RANGE_START,
    DOTS_PER_CELL,
    InvalidDotCodeError,
)


def dot_code_to_matrix(code: str) -> bitarray:
    """Return the 6-slot dot matrix of a cell, with slot `n - 1` set for each raised dot `n`.

    The matrix is little-endian, so read as an integer it is the cell's offset in the Unicode
    Braille Patterns block. Anything that isn't a dot in the range 1-6 is ignored.
    """
    matrix = bitarray(DOTS_PER_CELL, endian="little")
    matrix.setall(0)
    for ch in code:
        if ch in "123456":
            matrix[int(ch) - 1] = 1
    return matrix


def cell_to_braille(code: str) -> str:
    """Return the Unicode Braille Pattern character for a single cell, e.g. "125" -> "⠓"."""
    return chr(BRAILLE_RANGE_START + ba2int(dot_code_to_matrix(code)))


def dot_codes_to_braille(dot_codes: str) -> str:
    """Encode a space separated dot-code string as Unicode Braille.

    Every token produces exactly one character, so an empty token (two consecutive spaces in
    the input) becomes the blank cell U+2800. The characters are joined with single spaces.

    Examples:
        >>> dot_codes_to_braille("46 125 135 123 1")
        '⠨ ⠓ ⠕ ⠇ ⠁'

        >>> dot_codes_to_braille("1  12")
        '⠁ ⠀ ⠃'
    """
    return " ".join(cell_to_braille(code) for code in dot_codes.split(" ")).strip()


def braille_to_dot_code(char: str) -> str:
    """Recover the canonical dot code of a six-dot Braille Pattern character, e.g. "⠓" -> "125"."""
    if len(char) != 1 or not BRAILLE_RANGE_START <= ord(char) <= BRAILLE_RANGE_END:
        raise InvalidDotCodeError(f"Not a six-dot braille character: {char!r}")
    matrix = int2ba(ord(char) - BRAILLE_RANGE_START, length=DOTS_PER_CELL, endian="little")
    return "".join(str(index + 1) for index, dot in enumerate(matrix) if dot)
