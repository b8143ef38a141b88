from __future__ import annotations

from typing import Final

BRAILLE_COLS: Final[int] = 2
BRAILLE_ROWS: Final[int] = 3
DOTS_PER_CELL: Final[int] = BRAILLE_COLS * BRAILLE_ROWS

BRAILLE_RANGE_START: Final[int] = 0x2800
BRAILLE_RANGE_END: Final[int] = BRAILLE_RANGE_START + (1 << DOTS_PER_CELL) - 1

# Mode indicators, written into the dot-code stream like ordinary cells
CAPITAL_LETTER_MARKER: Final[str] = "46"
CAPITAL_WORD_MARKER: Final[str] = "46 46"
NUMBER_PREFIX_MARKER: Final[str] = "3456"
NUMBER_TERMINATOR_MARKER: Final[str] = "5"

# Dot positions in a cell:
#  1 4
#  2 5
#  3 6
# Dot n is bit n - 1 of the offset from BRAILLE_RANGE_START.


class InvalidDotCodeError(ValueError):
    pass


def parse_dot_code(code: str) -> tuple[int, ...]:
    """Parse a single cell in canonical form ("1245") into its dot positions.

    The empty string is the blank cell. Raises InvalidDotCodeError for anything that isn't a
    run of distinct digits in the range 1-6.
    """
    dots = []
    for ch in code:
        if ch not in "123456":
            raise InvalidDotCodeError(f"Invalid dot {ch!r} in dot code {code!r}")
        dot = int(ch)
        if dot in dots:
            raise InvalidDotCodeError(f"Repeated dot {dot} in dot code {code!r}")
        dots.append(dot)
    return tuple(dots)
