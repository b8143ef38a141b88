from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from braillista import BrailleDictionary, Transcoder, Validator, text_to_braille, transcribe


def dot_codes(line: str) -> str:
    return Transcoder().line_to_dot_codes(line)


def test_capital_letter():
    assert dot_codes("Hola") == "46 125 135 123 1"
    assert dot_codes("A") == "46 1"
    assert dot_codes("A").split(" ").count("46") == 1
    assert dot_codes("hOla") == "125 46 135 123 1"


def test_capital_word():
    assert dot_codes("HOLA") == "46 46 125 135 123 1"
    assert dot_codes("HOLA").split(" ").count("46") == 2
    assert dot_codes("Hola MUNDO") == "46 125 135 123 1  46 46 134 136 1345 145 135"
    assert dot_codes("ÑU") == "46 46 12456 136"
    # No letters, no capital marker
    assert dot_codes("123") == "3456 1 12 14"


def test_accented_letters():
    assert dot_codes("Ñandú") == "46 12456 1 1345 145 23456"
    assert dot_codes("¿Qué?") == "26 46 12345 136 2346 26"
    assert dot_codes("pingüino") == "1234 24 1345 1245 1256 24 1345 135"


def test_numbers():
    assert dot_codes("123") == "3456 1 12 14"
    assert dot_codes("7 0") == "3456 1245  3456 245"


def test_number_terminator():
    # A letter right after a number must not be read as one more digit
    assert dot_codes("123a") == "3456 1 12 14 5 1"
    assert dot_codes("12ab") == "3456 1 12 5 1 12"
    assert dot_codes("12 a") == "3456 1 12  1"
    assert dot_codes("10a") == "3456 1 245 5 1"
    assert dot_codes("12-a") == "3456 1 12 5 36 1"


def test_number_terminator_not_written_before_closing_sign():
    assert dot_codes("10.") == "3456 1 245 3"
    assert dot_codes("(10)") == "126 3456 1 245 345"
    assert dot_codes("50%") == "3456 15 245 456 356"
    assert dot_codes("12-3") == "3456 1 12 36 3456 14"


def test_thousands_separator():
    assert dot_codes("1.000") == "3456 1 2 3456 245 245 245"
    assert dot_codes("a.b") == "1 3 12"
    assert dot_codes("1.") == "3456 1 3"
    assert dot_codes(".5") == "3 3456 15"


def test_thousands_separator_multiple_groups():
    # Every group separator becomes the comma cell and each group restarts the number
    assert dot_codes("1.000.000") == "3456 1 2 3456 245 245 245 2 3456 245 245 245"


def test_composite_tokens():
    assert dot_codes("ana12@correo.es") == "1 1345 1 16 126 5 14 135 1235 1235 15 135 3 15 234"
    assert "3456" not in dot_codes("ana12@correo.es").split(" ")
    assert dot_codes("www.sitio2.com") == "2456 2456 2456 3 234 24 2345 24 135 126 3 14 135 134"


def test_composite_is_reset_for_each_word():
    assert dot_codes("ana1@correo.es 5").endswith("  3456 15")
    transcription = transcribe("ana1@correo.es\n5")
    assert transcription.dot_codes[1] == "3456 15"


def test_tag_and_url_signs():
    transcription = transcribe("#verano2024")
    assert transcription.dot_codes == ("3456 1236 15 1235 1 1345 135 126 3456 126 1456",)
    assert transcription.unresolved == ()

    transcription = transcribe("https://a.es/p_1")
    assert transcription.dot_codes == (
        "125 2345 2345 1234 234 25 456 456 1 3 15 234 456 1234 46 36 16",
    )
    assert transcription.unresolved == ()


def test_whitespace_inside_word():
    assert dot_codes("a\tb") == "1  12"
    assert dot_codes("1\ta") == "3456 1  1"
    assert dot_codes("a  b") == "1   12"
    assert dot_codes("") == ""


def test_unresolved_characters():
    transcription = transcribe("Hola~ ☃")
    assert transcription.dot_codes == ("46 125 135 123 1",)
    assert transcription.unresolved == ("~", "☃")
    assert transcribe("Hola").unresolved == ()


def test_blank_cell_mapping_is_resolved():
    transcoder = Transcoder(dictionary=BrailleDictionary(signs={"~": ""}))
    transcription = transcoder.transcribe("a~b")
    assert transcription.dot_codes == ("1  12",)
    assert transcription.braille == "⠁ ⠀ ⠃"
    assert transcription.unresolved == ()


def test_unresolved_characters_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="braillista.transcoder"):
        transcribe("a~")
    assert "'~'" in caplog.text


def test_transcribe():
    transcription = transcribe("Hola")
    assert transcription.text == "Hola"
    assert transcription.dot_codes == ("46 125 135 123 1",)
    assert transcription.braille == "⠨ ⠓ ⠕ ⠇ ⠁"
    assert transcription.mirrored == "⠈ ⠸ ⠪ ⠚ ⠅"
    assert len(transcription.braille.split(" ")) == 5
    assert str(transcription) == transcription.braille


def test_transcribe_multiple_lines():
    transcription = transcribe("Hola\n123")
    assert transcription.dot_codes == ("46 125 135 123 1", "3456 1 12 14")
    assert transcription.braille == "⠨ ⠓ ⠕ ⠇ ⠁\n⠼ ⠁ ⠃ ⠉"
    assert transcription.lines == ["⠨ ⠓ ⠕ ⠇ ⠁", "⠼ ⠁ ⠃ ⠉"]
    # Lines keep their order; the cells of each line are reversed
    assert transcription.mirrored_lines == ["⠈ ⠸ ⠪ ⠚ ⠅", "⠉ ⠘ ⠈ ⠧"]


def test_text_to_braille():
    assert text_to_braille("Hola") == "⠨ ⠓ ⠕ ⠇ ⠁"
    assert text_to_braille("a b") == "⠁ ⠀ ⠃"
    assert set(text_to_braille("¡Hola, mundo! Son las 10.")) <= {" "} | {
        chr(code) for code in range(0x2800, 0x2840)
    }


def test_custom_collaborators():
    class NoComposites(Validator):
        def is_email_like(self, token: str) -> bool:
            return False

    transcoder = Transcoder(
        dictionary=BrailleDictionary(signs={"~": "45"}),
        validator=NoComposites(),
    )
    assert transcoder.line_to_dot_codes("a~") == "1 45"
    assert transcoder.line_to_dot_codes("a1@b.es") == "1 3456 1 5 5 12 3 15 234"


def test_transcoder_holds_no_state_between_calls():
    transcoder = Transcoder()
    lines = ["Hola MUNDO", "ana12@correo.es 34", "123a", "1.000", "¿Qué?"] * 20
    expected = [transcoder.transcribe(line) for line in lines]
    with ThreadPoolExecutor(max_workers=4) as executor:
        assert list(executor.map(transcoder.transcribe, lines)) == expected
