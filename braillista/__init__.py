from braillista.base import (
    BRAILLE_COLS,
    BRAILLE_RANGE_END,
    BRAILLE_RANGE_START,
    BRAILLE_ROWS,
    CAPITAL_LETTER_MARKER,
    CAPITAL_WORD_MARKER,
    DOTS_PER_CELL,
    InvalidDotCodeError,
    NUMBER_PREFIX_MARKER,
    NUMBER_TERMINATOR_MARKER,
    parse_dot_code,
)
from braillista.dictionary import BrailleDictionary
from braillista.encoder import (
    braille_to_dot_code,
    cell_to_braille,
    dot_code_to_matrix,
    dot_codes_to_braille,
)
from braillista.mirror import mirror_cell, mirror_dot, mirror_dot_codes
from braillista.transcoder import Transcoder, Transcription, text_to_braille, transcribe
from braillista.validator import Validator
