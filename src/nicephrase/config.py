import os
from dataclasses import dataclass

from .generate import MAX_PASSPHRASE_WORDS

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Settings:
    words: int = 8
    separator: str = " "
    ignore_case: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.words <= MAX_PASSPHRASE_WORDS:
            raise ValueError(
                f"words must be between 0 and {MAX_PASSPHRASE_WORDS}, got {self.words}"
            )
        if not self.separator:
            raise ValueError("separator must not be empty")
        if any(c.isalpha() for c in self.separator):
            raise ValueError(
                f"separator must not contain letters, got {self.separator!r}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from NICEPHRASE_* environment variables."""
        kwargs = {}

        words = os.getenv("NICEPHRASE_WORDS")
        if words is not None:
            try:
                kwargs["words"] = int(words)
            except ValueError as exc:
                raise ValueError(f"NICEPHRASE_WORDS must be an integer, got {words!r}") from exc

        separator = os.getenv("NICEPHRASE_SEPARATOR")
        if separator is not None:
            kwargs["separator"] = separator

        ignore_case = os.getenv("NICEPHRASE_IGNORE_CASE")
        if ignore_case is not None:
            value = ignore_case.strip().lower()
            if value in _TRUE:
                kwargs["ignore_case"] = True
            elif value in _FALSE:
                kwargs["ignore_case"] = False
            else:
                raise ValueError(
                    f"NICEPHRASE_IGNORE_CASE must be a boolean, got {ignore_case!r}"
                )

        return cls(**kwargs)
