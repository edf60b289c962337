from __future__ import annotations

from typing import Iterable, List, Mapping

from .models import WordFrequencyEntry


def frequency_sort_key(entry: WordFrequencyEntry) -> tuple[int, str]:
    """Count descending, then word ascending by code point."""
    return (-entry.count, entry.word)


def sort_frequencies(table: Mapping[str, int]) -> List[WordFrequencyEntry]:
    """Return frequency entries ordered for the words report."""
    entries = [
        WordFrequencyEntry(word=word, count=count) for word, count in table.items()
    ]
    entries.sort(key=frequency_sort_key)
    return entries


def sort_odd_words(words: Iterable[str]) -> List[str]:
    """Case-sensitive ascending order with no locale collation."""
    return sorted(set(words))
