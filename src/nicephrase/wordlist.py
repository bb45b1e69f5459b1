"""The 2^16 word dictionary backing passphrase encoding.

The bundled list is the niceware English wordlist, derived from the SIL
English wordlist and originally compiled for the Yahoo End-to-End project.
Its order is part of the format: previously generated passphrases only
decode correctly as long as every word keeps its position.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple

from .errors import MalformedWordlistError, UnknownWordError
from .logging import get_logger

logger = get_logger(__name__)

WORDLIST_SIZE = 2 ** 16
_WORDLIST_FILE = "wordlist.txt"


class Wordlist:
    """Immutable ordered dictionary of words and its inverse mapping."""

    __slots__ = ("_words", "_index", "_max_word_length")

    def __init__(self, words: Iterable[str]) -> None:
        """
        Build a wordlist, checking it has exactly 2^16 unique entries.

        The reverse index is derived from ``words`` so both lookup
        directions always agree.

        Args:
            words: Words in index order

        Raises:
            MalformedWordlistError: If the count is wrong or a word repeats
        """
        ordered = tuple(words)
        if len(ordered) != WORDLIST_SIZE:
            raise MalformedWordlistError(
                f"wordlist must contain {WORDLIST_SIZE} words, got {len(ordered)}"
            )

        index = {}
        for position, word in enumerate(ordered):
            if word in index:
                raise MalformedWordlistError(
                    f"duplicate word {word!r} at positions {index[word]} and {position}"
                )
            index[word] = position

        self._words = ordered
        self._index = MappingProxyType(index)
        self._max_word_length = max(len(word) for word in ordered)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Wordlist:
        """Alias for the constructor, reading better at call sites."""
        return cls(words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def index(self) -> Mapping[str, int]:
        """Read-only mapping from word to its position."""
        return self._index

    @property
    def max_word_length(self) -> int:
        return self._max_word_length

    def word_at(self, index: int) -> str:
        """Return the word at ``index`` (0..65535)."""
        if not 0 <= index < WORDLIST_SIZE:
            raise IndexError(f"word index out of range: {index}")
        return self._words[index]

    def index_of(self, word: str) -> int:
        """
        Return the position of ``word``.

        Matching is exact: no trimming and no case folding.

        Raises:
            UnknownWordError: If the word is not in the list
        """
        try:
            return self._index[word]
        except (KeyError, TypeError) as exc:
            raise UnknownWordError(word) from exc

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        try:
            return word in self._index
        except TypeError:
            return False


@lru_cache(maxsize=None)
def get_wordlist() -> Wordlist:
    """Return the shared wordlist, loading the bundled data on first use."""
    path = resources.files(__package__) / "data" / _WORDLIST_FILE
    text = path.read_text(encoding="ascii")
    words = [line.strip() for line in text.splitlines() if line.strip()]
    wordlist = Wordlist.from_words(words)
    logger.debug(f"Loaded wordlist with {len(wordlist)} words")
    return wordlist
