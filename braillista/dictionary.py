from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from braillista.base import parse_dot_code

LETTERS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "a": "1",
        "b": "12",
        "c": "14",
        "d": "145",
        "e": "15",
        "f": "124",
        "g": "1245",
        "h": "125",
        "i": "24",
        "j": "245",
        "k": "13",
        "l": "123",
        "m": "134",
        "n": "1345",
        "o": "135",
        "p": "1234",
        "q": "12345",
        "r": "1235",
        "s": "234",
        "t": "2345",
        "u": "136",
        "v": "1236",
        "w": "2456",
        "x": "1346",
        "y": "13456",
        "z": "1356",
        "á": "12356",
        "é": "2346",
        "í": "34",
        "ó": "346",
        "ú": "23456",
        "ü": "1256",
        "ñ": "12456",
        "ç": "12346",
    }
)

# Digits reuse the cells of the letters a-j and rely on the numeric prefix
DIGITS: Final[Mapping[str, str]] = MappingProxyType(
    {digit: LETTERS[letter] for digit, letter in zip("1234567890", "abcdefghij")}
)

# Inside emails, URLs and tags there is no numeric prefix, so the digits carry dot 6 instead
COMPOSITE_DIGITS: Final[Mapping[str, str]] = MappingProxyType(
    {
        **{digit: LETTERS[letter] + "6" for digit, letter in zip("123456789", "abcdefghi")},
        "0": "3456",
    }
)

SIGNS: Final[Mapping[str, str]] = MappingProxyType(
    {
        ".": "3",
        ",": "2",
        ";": "23",
        ":": "25",
        "¿": "26",
        "?": "26",
        "¡": "235",
        "!": "235",
        '"': "236",
        "«": "236",
        "»": "236",
        "(": "126",
        ")": "345",
        "[": "12356",
        "]": "23456",
        "-": "36",
        "'": "3",
        "*": "35",
        "+": "235",
        "=": "2356",
        "×": "236",
        "÷": "256",
        "@": "5",
        "#": "3456",
        "/": "456",
        # Signs written with two cells
        "_": "46 36",
        "%": "456 356",
    }
)


def _build_table(
    defaults: Mapping[str, str],
    overrides: Mapping[str, str] | None,
    multi_cell: bool = False,
) -> Mapping[str, str]:
    if not overrides:
        return defaults
    table = {**defaults, **overrides}
    for code in table.values():
        for cell in code.split(" ") if multi_cell else (code,):
            parse_dot_code(cell)
    return MappingProxyType(table)


class BrailleDictionary:
    """Read-only lookup of Spanish grade 1 Braille cells.

    The default tables can be extended or overridden per instance. Every lookup returns the
    cell in canonical dot-code form ("1245"), or None when the character has no mapping. A few
    signs take two cells, returned space separated ("456 356" for "%").
    """

    __slots__ = ("_letters", "_digits", "_composite_digits", "_signs")

    def __init__(
        self,
        letters: Mapping[str, str] | None = None,
        digits: Mapping[str, str] | None = None,
        composite_digits: Mapping[str, str] | None = None,
        signs: Mapping[str, str] | None = None,
    ) -> None:
        self._letters = _build_table(LETTERS, letters)
        self._digits = _build_table(DIGITS, digits)
        self._composite_digits = _build_table(COMPOSITE_DIGITS, composite_digits)
        self._signs = _build_table(SIGNS, signs, multi_cell=True)

    def letter_code(self, letter: str) -> str | None:
        return self._letters.get(letter)

    def digit_code(self, digit: str, composite: bool = False) -> str | None:
        table = self._composite_digits if composite else self._digits
        return table.get(digit)

    def sign_code(self, sign: str) -> str | None:
        return self._signs.get(sign)

    def __repr__(self) -> str:
        return (
            f"BrailleDictionary({len(self._letters)} letters, {len(self._digits)} digits, "
            f"{len(self._signs)} signs)"
        )
