from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Callable, Iterable, List, TextIO

from .aggregation import aggregate, finalize
from .config import StyloStatsConfig
from .dictionary import Dictionary, load_dictionary
from .models import AnalysisResult, Segment
from .reports import ReportPaths, derive_base_name, derive_output_paths, write_reports
from .sorting import sort_frequencies, sort_odd_words
from .tokenization import split_paragraphs, split_phrases, split_sentences, split_words

LOGGER = logging.getLogger(__name__)


class ReportWriteError(RuntimeError):
    """Raised when an output report cannot be opened for writing."""


def analyze_lines(lines: Iterable[str], dictionary: Dictionary) -> AnalysisResult:
    """Segment and aggregate the whole input, then sort for reporting."""
    paragraphs = split_paragraphs(lines)
    state = aggregate(paragraphs, dictionary)
    if state.num_paragraphs == 0:
        LOGGER.warning("Input contained no paragraphs; reports will be empty.")
    LOGGER.info(
        "Analyzed %d paragraphs, %d sentences, %d phrases, %d words (%d odd).",
        state.num_paragraphs,
        state.num_sentences,
        state.num_phrases,
        state.num_words,
        len(state.odd_words),
    )
    return AnalysisResult(
        statistics=finalize(state),
        frequencies=sort_frequencies(state.frequencies),
        odd_words=sort_odd_words(state.odd_words),
    )


def analyze_text(text: str, dictionary: Dictionary) -> AnalysisResult:
    """Convenience wrapper around analyze_lines for an in-memory string."""
    return analyze_lines(text.splitlines(), dictionary)


def build_segment_tree(lines: Iterable[str]) -> List[Segment]:
    """Return the paragraph/sentence/phrase/word hierarchy for inspection."""
    tree: List[Segment] = []
    for paragraph in split_paragraphs(lines):
        para_node = Segment(level="paragraph", text=paragraph)
        for sentence in split_sentences(paragraph):
            sent_node = Segment(level="sentence", text=sentence)
            for phrase in split_phrases(sentence):
                phrase_node = Segment(level="phrase", text=phrase)
                phrase_node.children.extend(
                    Segment(level="word", text=word) for word in split_words(phrase)
                )
                sent_node.children.append(phrase_node)
            para_node.children.append(sent_node)
        tree.append(para_node)
    return tree


def run_reports(
    config: StyloStatsConfig,
    input_path: Path | None = None,
    input_stream: Iterable[str] | None = None,
    dictionary: Dictionary | None = None,
    before_read: Callable[[], None] | None = None,
) -> ReportPaths:
    """
    Load the dictionary, analyze the input and write the three report files.

    The dictionary, the input and all three sinks are acquired before any
    input line is read, so a missing resource fails before the text is
    consumed. ``before_read`` runs once everything is open (the CLI uses it
    to prompt on an interactive stdin). Every file opened here is closed
    before returning, including when a later sink fails to open.
    """
    if dictionary is None:
        dictionary = load_dictionary(config.dictionary_path, encoding=config.encoding)

    base = derive_base_name(
        input_path, config.default_base_name, config.strip_extensions
    )
    paths = derive_output_paths(base, config.report_extension, config.output_dir)

    with ExitStack() as stack:
        source: Iterable[str]
        if input_path is not None:
            source = stack.enter_context(input_path.open("r", encoding=config.encoding))
        else:
            source = input_stream if input_stream is not None else sys.stdin
        sinks = [_open_sink(stack, path, config.encoding) for path in paths]

        if before_read is not None:
            before_read()
        result = analyze_lines(source, dictionary)
        write_reports(result, *sinks)

    for path in paths:
        LOGGER.info("Wrote %s", path)
    return paths


def _open_sink(stack: ExitStack, path: Path, encoding: str) -> TextIO:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return stack.enter_context(path.open("w", encoding=encoding))
    except OSError as exc:
        raise ReportWriteError(f"Unable to open report {path}: {exc}") from exc
