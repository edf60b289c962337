from __future__ import annotations

import re
import string
from typing import Iterable, List

LETTERS = frozenset(string.ascii_letters)
SPACES = frozenset(string.whitespace)
SENTENCE_DELIMITERS = frozenset(".!?")
PHRASE_DELIMITERS = frozenset(",:;")
WORD_JOINERS = frozenset("-")


def _char_class(*groups: frozenset[str]) -> str:
    """Escape the members of ``groups`` for use inside a regex ``[...]``."""
    return "".join(re.escape(ch) for ch in sorted(set().union(*groups)))


_LETTER = _char_class(LETTERS)
_SENTENCE_STOP = _char_class(SENTENCE_DELIMITERS)

# A sentence starts at anything that is neither a delimiter nor ASCII
# whitespace and runs up to the next delimiter.
SENTENCE_RE = re.compile(
    f"[^{_char_class(SENTENCE_DELIMITERS, SPACES)}][^{_SENTENCE_STOP}]*"
)
# Phrases and words must start on a letter.
PHRASE_RE = re.compile(f"[{_LETTER}][^{_char_class(PHRASE_DELIMITERS)}]*")
WORD_RE = re.compile(f"[{_LETTER}][{_char_class(LETTERS, WORD_JOINERS)}]*")


def is_letter(ch: str) -> bool:
    return ch in LETTERS


def is_space(ch: str) -> bool:
    return ch in SPACES


def is_sentence_delimiter(ch: str) -> bool:
    return ch in SENTENCE_DELIMITERS


def is_phrase_delimiter(ch: str) -> bool:
    return ch in PHRASE_DELIMITERS


def is_word_char(ch: str) -> bool:
    return ch in LETTERS or ch in WORD_JOINERS


def split_paragraphs(lines: Iterable[str]) -> List[str]:
    """
    Group raw input lines into paragraphs.

    Blank lines delimit paragraphs; consecutive blank lines collapse. Every
    non-blank line is appended to the current paragraph followed by a single
    space, so paragraph text carries line-join spaces instead of newlines.
    """
    paragraphs: List[str] = []
    current: List[str] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            if current:
                paragraphs.append("".join(current))
                current = []
            continue
        current.append(line)
        current.append(" ")
    if current:
        paragraphs.append("".join(current))
    return paragraphs


def split_sentences(paragraph: str) -> List[str]:
    """Split a paragraph on ``. ! ?``; delimiters are dropped."""
    return SENTENCE_RE.findall(paragraph)


def split_phrases(sentence: str) -> List[str]:
    """Split a sentence on ``, : ;``; each phrase starts on a letter."""
    return PHRASE_RE.findall(sentence)


def split_words(phrase: str) -> List[str]:
    """Return runs of letters and hyphens that start with a letter."""
    return WORD_RE.findall(phrase)
