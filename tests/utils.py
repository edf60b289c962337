from __future__ import annotations

from itertools import groupby
from pathlib import Path
from typing import Iterable, Mapping

from stylo_stats.models import WordFrequencyEntry

SAMPLE_TEXT = (
    "The quick brown fox jumps over the lazy dog.\n"
    "It barked, then slept!\n"
    "\n"
    "A second paragraph: short; sweet?\n"
)

SAMPLE_DICTIONARY = [
    "a",
    "barked",
    "brown",
    "dog",
    "fox",
    "it",
    "lazy",
    "over",
    "paragraph",
    "quick",
    "second",
    "short",
    "slept",
    "sweet",
    "the",
    "then",
]


def write_dictionary(path: Path, words: Iterable[str]) -> Path:
    """Write a one-word-per-line dictionary file and return its path."""
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


def sort_by_runs(table: Mapping[str, int]) -> list[WordFrequencyEntry]:
    """Sort by count descending, then re-sort each equal-count run lexically."""
    by_count = sorted(table.items(), key=lambda item: item[1], reverse=True)
    ordered: list[WordFrequencyEntry] = []
    for count, run in groupby(by_count, key=lambda item: item[1]):
        for word in sorted(word for word, _ in run):
            ordered.append(WordFrequencyEntry(word=word, count=count))
    return ordered
