from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from braillista.base import (
    CAPITAL_LETTER_MARKER,
    CAPITAL_WORD_MARKER,
    NUMBER_PREFIX_MARKER,
    NUMBER_TERMINATOR_MARKER,
)
from braillista.dictionary import BrailleDictionary
from braillista.encoder import dot_codes_to_braille
from braillista.mirror import mirror_dot_codes
from braillista.validator import Validator

logger = logging.getLogger(__name__)

ASCII_DIGITS: Final[str] = "0123456789"

# ASCII and Latin-1 letters, leaving out the signs × (U+00D7) and ÷ (U+00F7)
LETTER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-zA-ZÀ-ÖØ-öø-ÿ]")


@dataclass(frozen=True)
class Transcription:
    """The result of transcribing a text, with one entry per input line where it applies.

    Attributes:
        text: The original text.
        dot_codes: The dot-code string of each line ("46 125 135 123 1").
        braille: The forward Unicode Braille reading, lines joined by newlines.
        mirrored: The reverse side reading (cells reversed and mirrored), lines joined by
            newlines.
        unresolved: Characters that had no braille mapping and were left out, in order of
            appearance.
    """

    text: str
    dot_codes: tuple[str, ...]
    braille: str
    mirrored: str
    unresolved: tuple[str, ...] = ()

    @property
    def lines(self) -> list[str]:
        return self.braille.split("\n")

    @property
    def mirrored_lines(self) -> list[str]:
        return self.mirrored.split("\n")

    def __str__(self) -> str:
        return self.braille


class Transcoder:
    """Spanish text to grade 1 six-dot Braille.

    The transcoder holds no state between calls; the dictionary and validator are read-only,
    so a single instance can be shared freely, including between threads.
    """

    __slots__ = ("dictionary", "validator")

    def __init__(
        self,
        dictionary: BrailleDictionary | None = None,
        validator: Validator | None = None,
    ) -> None:
        self.dictionary = dictionary if dictionary is not None else BrailleDictionary()
        self.validator = validator if validator is not None else Validator()

    def transcribe(self, text: str) -> Transcription:
        """Transcribe a (possibly multi-line) text to both forward and mirrored Braille."""
        unresolved: list[str] = []
        dot_codes = tuple(self._line_to_dot_codes(line, unresolved) for line in text.split("\n"))

        return Transcription(
            text=text,
            dot_codes=dot_codes,
            braille="\n".join(dot_codes_to_braille(line) for line in dot_codes),
            mirrored="\n".join(dot_codes_to_braille(mirror_dot_codes(line)) for line in dot_codes),
            unresolved=tuple(unresolved),
        )

    def line_to_dot_codes(self, line: str) -> str:
        """Return the dot-code string of a single line of text."""
        return self._line_to_dot_codes(line, [])

    def _line_to_dot_codes(self, line: str, unresolved: list[str]) -> str:
        cells: list[str] = []
        for word in line.split(" "):
            self._add_word_cells(word, cells, unresolved)
            # Word separator, an empty cell
            cells.append("")
        return " ".join(cells).strip()

    def _is_composite(self, word: str) -> bool:
        return (
            self.validator.is_email_like(word)
            or self.validator.is_url_like(word)
            or self.validator.is_tag_like(word)
        )

    def _add_word_cells(self, word: str, cells: list[str], unresolved: list[str]) -> None:
        is_upper_word = len(LETTER_PATTERN.findall(word)) > 1 and word == word.upper()
        if is_upper_word:
            cells.append(CAPITAL_WORD_MARKER)

        # Emails, URLs and tags write their digits without the numeric prefix
        composite = self._is_composite(word)
        within_number = False

        for i, ch in enumerate(word):
            next_is_digit = i + 1 < len(word) and word[i + 1] in ASCII_DIGITS

            if ch in ASCII_DIGITS:
                if not within_number and not composite:
                    cells.append(NUMBER_PREFIX_MARKER)
                    within_number = True
                code = self.dictionary.digit_code(ch, composite)
            else:
                if within_number:
                    within_number = False
                    # A letter would read as one more digit; a sign ending the word would not
                    closes_run = (i + 1 < len(word) and not next_is_digit) or bool(
                        LETTER_PATTERN.match(ch)
                    )
                    if closes_run and not ch.isspace():
                        cells.append(NUMBER_TERMINATOR_MARKER)

                if LETTER_PATTERN.match(ch):
                    if not is_upper_word and ch.isupper():
                        cells.append(CAPITAL_LETTER_MARKER)
                    code = self.dictionary.letter_code(ch.lower())
                elif ch.isspace():
                    cells.append("")
                    continue
                elif ch == "." and i > 0 and word[i - 1] in ASCII_DIGITS and next_is_digit:
                    # Thousands separator: "1.000" is written with the comma cell
                    code = self.dictionary.sign_code(",")
                else:
                    code = self.dictionary.sign_code(ch)

            if code is not None:
                cells.append(code)
            else:
                logger.debug("No braille mapping for %r in %r, skipping it", ch, word)
                unresolved.append(ch)


_default_transcoder = Transcoder()


def transcribe(text: str) -> Transcription:
    """Transcribe text with the default Spanish dictionary."""
    return _default_transcoder.transcribe(text)


def text_to_braille(text: str) -> str:
    """Return the forward Unicode Braille reading of the text.

    Examples:
        >>> text_to_braille("Hola")
        '⠨ ⠓ ⠕ ⠇ ⠁'
    """
    return transcribe(text).braille


__all__ = ("Transcoder", "Transcription", "transcribe", "text_to_braille")
