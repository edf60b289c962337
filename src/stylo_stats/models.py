from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(slots=True)
class WordFrequencyEntry:
    """A word and the number of times it occurs in the text."""

    word: str
    count: int


@dataclass(slots=True)
class Segment:
    """A text unit plus the units nested inside it."""

    level: str
    text: str
    children: list["Segment"] = field(default_factory=list)


@dataclass(slots=True)
class LevelStats:
    """Count and average lengths for one level of the hierarchy."""

    name: str
    count: int
    characters: int
    averages: List[Tuple[str, float]] = field(default_factory=list)

    def average(self, unit: str) -> float:
        """Return the average expressed in ``unit`` (e.g. 'words')."""
        for name, value in self.averages:
            if name == unit:
                return value
        raise KeyError(unit)


@dataclass(slots=True)
class TextStatistics:
    """Finalized statistics for every level, in report order."""

    paragraphs: LevelStats
    sentences: LevelStats
    phrases: LevelStats
    words: LevelStats
    oddwords: LevelStats

    def levels(self) -> list[LevelStats]:
        return [
            self.paragraphs,
            self.sentences,
            self.phrases,
            self.words,
            self.oddwords,
        ]


@dataclass(slots=True)
class AnalysisState:
    """Mutable accumulator threaded through a single traversal."""

    num_paragraphs: int = 0
    num_sentences: int = 0
    num_phrases: int = 0
    num_words: int = 0
    paragraph_chars: int = 0
    sentence_chars: int = 0
    phrase_chars: int = 0
    word_chars: int = 0
    frequencies: Counter[str] = field(default_factory=Counter)
    odd_words: set[str] = field(default_factory=set)


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    """Everything the report writer needs once analysis has finished."""

    statistics: TextStatistics
    frequencies: list[WordFrequencyEntry]
    odd_words: list[str]
