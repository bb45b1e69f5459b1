"""Exceptions raised by the passphrase codec."""


class PassphraseError(Exception):
    """Base class for all nicephrase errors."""


class OddLengthError(PassphraseError, ValueError):
    """Raised when encoding a byte sequence with an odd number of bytes."""

    def __init__(self, size: int) -> None:
        super().__init__(f"odd size not supported: {size}")
        self.size = size


class UnknownWordError(PassphraseError, LookupError):
    """Raised when a word is not found in the wordlist."""

    def __init__(self, word: str) -> None:
        super().__init__(f"unknown word: {word}")
        self.word = word


class InvalidWordError(PassphraseError, ValueError):
    """Raised when a passphrase contains a word outside the wordlist."""

    def __init__(self, position: int, word: str) -> None:
        super().__init__(f"invalid word at position {position}: {word}")
        self.position = position
        self.word = word


class MalformedWordlistError(PassphraseError):
    """Raised when the wordlist data fails its integrity check."""


class TooManyWordsError(PassphraseError, ValueError):
    """Raised when a generated passphrase would exceed the word limit."""

    def __init__(self, num_words: int, max_words: int) -> None:
        super().__init__(
            f"number of words {num_words} cannot be greater than {max_words}"
        )
        self.num_words = num_words
        self.max_words = max_words
