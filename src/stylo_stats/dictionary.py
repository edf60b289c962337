from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Literal

from .tokenization import is_letter

LOGGER = logging.getLogger(__name__)

CaseConvention = Literal["lower", "upper"]


class DictionaryLoadError(RuntimeError):
    """Raised when the reference word list cannot be read."""


@dataclass(slots=True, frozen=True)
class Dictionary:
    """
    Read-only set of known words.

    Lookups try the word verbatim first and then the word folded to the case
    convention the word list itself uses, so ``Quick`` is known when the list
    only carries ``quick``.
    """

    words: frozenset[str]
    convention: CaseConvention = "lower"

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Dictionary":
        cleaned = frozenset(word.strip() for word in words if word.strip())
        return cls(words=cleaned, convention=detect_case_convention(cleaned))

    def fold(self, word: str) -> str:
        """Map every letter of ``word`` to the dictionary's case convention."""
        if self.convention == "upper":
            return word.upper()
        return word.lower()

    def contains(self, word: str) -> bool:
        if word in self.words:
            return True
        return self.fold(word) in self.words

    def is_odd(self, word: str) -> bool:
        return not self.contains(word)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)


def detect_case_convention(words: Iterable[str]) -> CaseConvention:
    """Return 'upper' when most cased entries are fully uppercase."""
    upper = 0
    cased = 0
    for word in words:
        if not any(is_letter(ch) for ch in word):
            continue
        cased += 1
        if word.isupper():
            upper += 1
    if cased and upper * 2 > cased:
        return "upper"
    return "lower"


def load_dictionary(path: str | Path, encoding: str = "utf-8") -> Dictionary:
    """
    Load a one-word-per-line word list.

    Parameters
    ----------
    path:
        Location of the word list. Blank lines are ignored.
    encoding:
        Text encoding of the file.
    """
    dict_path = Path(path)
    try:
        with dict_path.open("r", encoding=encoding) as handle:
            dictionary = Dictionary.from_words(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(
            f"Unable to read dictionary {dict_path}: {exc}"
        ) from exc
    LOGGER.info(
        "Loaded %d dictionary words from %s (%s case).",
        len(dictionary),
        dict_path,
        dictionary.convention,
    )
    return dictionary
