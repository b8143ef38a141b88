import argparse
import sys
import textwrap
from functools import partial
from pathlib import Path

from braillista.mirror import mirror_dot_codes
from braillista.transcoder import Transcription, transcribe


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="braillista",
        description="Transcribe Spanish text to six-dot braille.",
        usage=textwrap.dedent(
            """
            Transcribe Spanish text to grade 1 braille, writing Unicode braille to the
            terminal or to a file. The text is taken from the command line, from a file,
            or from stdin.

              Examples:

                Transcribe a sentence and display it in the terminal:
                $ braillista "Hola, mundo"

                # Transcribe a file and save the result:
                $ braillista -i carta.txt -o carta.brl

                # Show the reverse side reading too, for embossing both sides of a page:
                $ braillista "Hola" --mirrored

                # Show the dot numbers of each cell instead of Unicode braille:
                $ echo "Tengo 25 años" | braillista --dots
            """.strip()
        ),
        add_help=True,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "text",
        type=str,
        nargs="?",
        default=None,
        help="The text to transcribe. If not given, the text is read from stdin.",
    )
    source.add_argument(
        "-i",
        "--input",
        type=Path,
        default=None,
        help="Read the text to transcribe from a file",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output text file. If not specified, output will be written to stdout.",
    )
    parser.add_argument(
        "-f",
        "--forward",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Output the forward reading",
    )
    parser.add_argument(
        "-m",
        "--mirrored",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output the mirrored reading, as read from the back of the page",
    )
    parser.add_argument(
        "-d",
        "--dots",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output dot numbers (e.g. '125 135') instead of Unicode braille",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output logs verbosely",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Exit with an error if any character could not be transcribed",
    )

    args = parser.parse_args(argv)

    log = partial(print, file=sys.stderr) if args.verbose else lambda message: None

    if args.input is not None:
        log(f"Reading text from {args.input}")
        try:
            text = args.input.read_text(encoding="utf-8")
        except OSError as e:
            print(f"Unable to read file '{args.input}': {e.strerror}", file=sys.stderr)
            sys.exit(1)
    elif args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read()

    transcription = transcribe(text.rstrip("\n"))
    log(f"Transcribed {len(transcription.dot_codes)} line(s)")
    if transcription.unresolved:
        missing = " ".join(repr(ch) for ch in dict.fromkeys(transcription.unresolved))
        log(f"No braille mapping for {missing}, left out of the transcription")

    result = render_transcription(
        transcription, forward=args.forward, mirrored=args.mirrored, dots=args.dots
    )
    if args.output is not None:
        args.output.write_text(result + "\n", encoding="utf-8")
        log(f"Wrote {args.output}")
    else:
        print(result)

    if args.strict and transcription.unresolved:
        sys.exit(1)


def render_transcription(
    transcription: Transcription,
    forward: bool = True,
    mirrored: bool = False,
    dots: bool = False,
) -> str:
    """Format the requested readings of a transcription, separated by a blank line."""
    sections = []
    if forward:
        if dots:
            sections.append("\n".join(transcription.dot_codes))
        else:
            sections.append(transcription.braille)
    if mirrored:
        if dots:
            sections.append("\n".join(mirror_dot_codes(line) for line in transcription.dot_codes))
        else:
            sections.append(transcription.mirrored)
    return "\n\n".join(sections)


if __name__ == "__main__":
    main()
