"""Convert bytes to human-readable passphrases and back, 16 bits per word."""

from .codec import decode, encode
from .errors import (
    InvalidWordError,
    MalformedWordlistError,
    OddLengthError,
    PassphraseError,
    TooManyWordsError,
    UnknownWordError,
)
from .generate import MAX_PASSPHRASE_WORDS, generate_passphrase
from .wordlist import WORDLIST_SIZE, Wordlist, get_wordlist

__version__ = "0.1.0"

__all__ = [
    "encode",
    "decode",
    "generate_passphrase",
    "get_wordlist",
    "Wordlist",
    "WORDLIST_SIZE",
    "MAX_PASSPHRASE_WORDS",
    "PassphraseError",
    "OddLengthError",
    "UnknownWordError",
    "InvalidWordError",
    "MalformedWordlistError",
    "TooManyWordsError",
]
