"""Big-endian base-65536 conversion between bytes and wordlist passphrases."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Union

from .errors import InvalidWordError, OddLengthError, UnknownWordError
from .wordlist import get_wordlist

BytesInput = Union[bytes, bytearray, memoryview, Iterable[int]]


def _as_bytes(data: BytesInput) -> bytes:
    # bytes(5) would silently build five zero bytes, bytes("ab") needs an encoding
    if data is None or isinstance(data, (int, str)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    try:
        return bytes(data)
    except TypeError as exc:
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}") from exc


def encode(data: BytesInput) -> List[str]:
    """
    Encode a byte sequence as a passphrase, one word per two bytes.

    Args:
        data: Bytes-like object or iterable of byte values (0..255)

    Returns:
        List of len(data) / 2 words, in input order

    Raises:
        OddLengthError: If data has an odd number of bytes
        TypeError: If data is not a byte sequence
        ValueError: If an integer value is outside 0..255
    """
    buf = _as_bytes(data)
    if len(buf) % 2:
        raise OddLengthError(len(buf))

    wordlist = get_wordlist()
    return [wordlist.word_at(hi << 8 | lo) for hi, lo in zip(buf[0::2], buf[1::2])]


def decode(words: Sequence[str]) -> bytes:
    """
    Decode a passphrase back to the bytes that produced it.

    Words must already be split and must match the wordlist exactly;
    case folding and whitespace handling are left to the caller.

    Args:
        words: Passphrase words in order

    Returns:
        2 * len(words) bytes

    Raises:
        InvalidWordError: For the first word not in the wordlist
        TypeError: If words is a single string
    """
    if isinstance(words, (str, bytes)):
        raise TypeError("expected a sequence of words, not a single string")

    wordlist = get_wordlist()
    out = bytearray()
    for position, word in enumerate(words):
        try:
            index = wordlist.index_of(word)
        except UnknownWordError as exc:
            raise InvalidWordError(position, word) from exc
        out += index.to_bytes(2, "big")
    return bytes(out)
