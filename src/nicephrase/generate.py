"""Random passphrase generation."""

import secrets
from typing import List

from .codec import encode
from .errors import TooManyWordsError

MAX_PASSPHRASE_WORDS = 512


def generate_passphrase(num_words: int) -> List[str]:
    """
    Generate a random passphrase of ``num_words`` words.

    Each word carries 16 bits from the OS random source, so 8 words
    make a 128-bit passphrase.

    Raises:
        TooManyWordsError: If num_words exceeds MAX_PASSPHRASE_WORDS
        ValueError: If num_words is negative
    """
    if num_words < 0:
        raise ValueError(f"number of words cannot be negative: {num_words}")
    if num_words > MAX_PASSPHRASE_WORDS:
        raise TooManyWordsError(num_words, MAX_PASSPHRASE_WORDS)

    return encode(secrets.token_bytes(2 * num_words))
