from pathlib import Path
from typing import List, Optional

import typer

from .codec import decode, encode
from .config import Settings
from .errors import InvalidWordError, OddLengthError, TooManyWordsError
from .generate import MAX_PASSPHRASE_WORDS, generate_passphrase
from .logging import get_logger

logger = get_logger(__name__)

app = typer.Typer(help="nicephrase – bytes to memorable passphrases and back", no_args_is_help=True)


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as exc:
        logger.error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=2) from exc


def split_phrase(parts: List[str], separator: str = " ", ignore_case: bool = True) -> List[str]:
    """
    Turn command line arguments into passphrase tokens.

    Arguments may hold several words each. Words are split on whitespace
    and on the configured separator, and optionally lowercased.
    """
    text = " ".join(parts)
    if separator.strip():
        text = text.replace(separator, " ")
    tokens = text.split()
    if ignore_case:
        tokens = [token.lower() for token in tokens]
    return tokens


@app.command("generate")
def generate_command(
    words: Optional[int] = typer.Option(None, "--words", "-w", min=0, help="Number of words in each passphrase"),
    count: int = typer.Option(1, "--count", "-c", min=1, help="Number of passphrases to generate"),
) -> None:
    """
    Generate random passphrases.

    Each word holds 16 bits from the OS random source; 8 words give 128 bits.
    """
    settings = _load_settings()
    num_words = settings.words if words is None else words

    logger.debug(f"Generating {count} passphrase(s) of {num_words} words")
    try:
        for _ in range(count):
            typer.echo(settings.separator.join(generate_passphrase(num_words)))
    except TooManyWordsError as exc:
        logger.error(f"{exc} (at most {MAX_PASSPHRASE_WORDS} words)")
        raise typer.Exit(code=1) from exc


@app.command("encode")
def encode_command(
    hex_data: Optional[str] = typer.Argument(None, help="Bytes to encode, as hexadecimal"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", exists=True, readable=True, dir_okay=False, help="Encode the raw bytes of a file"
    ),
) -> None:
    """Encode bytes as a passphrase."""
    settings = _load_settings()

    if (hex_data is None) == (file is None):
        raise typer.BadParameter("provide either HEX_DATA or --file")

    if file is not None:
        data = file.read_bytes()
        logger.debug(f"Read {len(data)} bytes from {file}")
    else:
        try:
            data = bytes.fromhex(hex_data)
        except ValueError as exc:
            raise typer.BadParameter(f"not valid hexadecimal: {hex_data!r}") from exc

    try:
        phrase = encode(data)
    except OddLengthError as exc:
        logger.error(f"Cannot encode {exc.size} bytes: input must have an even number of bytes")
        raise typer.Exit(code=1) from exc

    typer.echo(settings.separator.join(phrase))


@app.command("decode")
def decode_command(
    words: List[str] = typer.Argument(..., help="Passphrase words"),
    ignore_case: Optional[bool] = typer.Option(
        None, "--ignore-case/--exact", help="Lowercase words before decoding, or match them exactly"
    ),
) -> None:
    """Decode a passphrase back to bytes, printed as hexadecimal."""
    settings = _load_settings()

    if ignore_case is None:
        ignore_case = settings.ignore_case

    tokens = split_phrase(words, settings.separator, ignore_case=ignore_case)
    try:
        data = decode(tokens)
    except InvalidWordError as exc:
        logger.error(f"Unknown word {exc.word!r} at position {exc.position}")
        raise typer.Exit(code=1) from exc

    typer.echo(data.hex())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
