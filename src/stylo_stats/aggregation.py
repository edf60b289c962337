from __future__ import annotations

from typing import Iterable

from .dictionary import Dictionary
from .models import AnalysisState, LevelStats, TextStatistics
from .tokenization import split_phrases, split_sentences, split_words


def aggregate(
    paragraphs: Iterable[str],
    dictionary: Dictionary,
    state: AnalysisState | None = None,
) -> AnalysisState:
    """Walk paragraphs -> sentences -> phrases -> words and accumulate counts."""
    if state is None:
        state = AnalysisState()
    for paragraph in paragraphs:
        state.num_paragraphs += 1
        state.paragraph_chars += paragraph_length(paragraph)
        for sentence in split_sentences(paragraph):
            _visit_sentence(sentence, dictionary, state)
    return state


def _visit_sentence(
    sentence: str, dictionary: Dictionary, state: AnalysisState
) -> None:
    state.num_sentences += 1
    # The stripped terminator counts towards the sentence.
    state.sentence_chars += len(sentence) + 1
    for phrase in split_phrases(sentence):
        state.num_phrases += 1
        state.phrase_chars += len(phrase)
        for word in split_words(phrase):
            _visit_word(word, dictionary, state)


def _visit_word(word: str, dictionary: Dictionary, state: AnalysisState) -> None:
    state.num_words += 1
    state.word_chars += len(word)
    state.frequencies[word] += 1
    if dictionary.is_odd(word):
        state.odd_words.add(word)


def paragraph_length(paragraph: str) -> int:
    """Length of the joined lines, excluding the trailing join space."""
    if paragraph.endswith(" "):
        return len(paragraph) - 1
    return len(paragraph)


def safe_average(total: int, count: int) -> float:
    """Return total / count, or 0.0 when there is nothing to average over."""
    if count <= 0:
        return 0.0
    return total / count


def finalize(state: AnalysisState) -> TextStatistics:
    """Turn the raw accumulator into per-level counts and averages."""
    paragraphs = state.num_paragraphs
    sentences = state.num_sentences
    phrases = state.num_phrases
    words = state.num_words
    oddwords = len(state.odd_words)
    odd_chars = sum(len(word) for word in state.odd_words)

    return TextStatistics(
        paragraphs=LevelStats(
            name="paragraphs",
            count=paragraphs,
            characters=state.paragraph_chars,
            averages=[
                ("sentences", safe_average(sentences, paragraphs)),
                ("words", safe_average(words, paragraphs)),
                ("characters", safe_average(state.paragraph_chars, paragraphs)),
            ],
        ),
        sentences=LevelStats(
            name="sentences",
            count=sentences,
            characters=state.sentence_chars,
            averages=[
                ("phrases", safe_average(phrases, sentences)),
                ("words", safe_average(words, sentences)),
                ("characters", safe_average(state.sentence_chars, sentences)),
            ],
        ),
        phrases=LevelStats(
            name="phrases",
            count=phrases,
            characters=state.phrase_chars,
            averages=[
                ("words", safe_average(words, phrases)),
                ("characters", safe_average(state.phrase_chars, phrases)),
            ],
        ),
        words=LevelStats(
            name="words",
            count=words,
            characters=state.word_chars,
            averages=[("characters", safe_average(state.word_chars, words))],
        ),
        oddwords=LevelStats(
            name="oddwords",
            count=oddwords,
            characters=odd_chars,
            averages=[("characters", safe_average(odd_chars, oddwords))],
        ),
    )
