from __future__ import annotations

from pathlib import Path, PurePath
from typing import Iterable, List, NamedTuple, TextIO

from .models import AnalysisResult, LevelStats, TextStatistics, WordFrequencyEntry


class ReportPaths(NamedTuple):
    stats: Path
    words: Path
    oddwords: Path


def format_level(level: LevelStats) -> str:
    """Render one stats line, e.g. ``words 4 average length 3.25 characters``."""
    parts = [level.name, str(level.count), "average length"]
    for unit, value in level.averages:
        parts.append(f"{value:.2f}")
        parts.append(unit)
    return " ".join(parts)


def format_stats(statistics: TextStatistics) -> List[str]:
    return [format_level(level) for level in statistics.levels()]


def format_words(entries: Iterable[WordFrequencyEntry]) -> List[str]:
    return [f"{entry.word} {entry.count}" for entry in entries]


def format_oddwords(words: Iterable[str]) -> List[str]:
    return list(words)


def write_lines(sink: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        sink.write(line)
        sink.write("\n")


def write_reports(
    result: AnalysisResult,
    stats_sink: TextIO,
    words_sink: TextIO,
    oddwords_sink: TextIO,
) -> None:
    """Write the three reports to already-open sinks."""
    write_lines(stats_sink, format_stats(result.statistics))
    write_lines(words_sink, format_words(result.frequencies))
    write_lines(oddwords_sink, format_oddwords(result.odd_words))


def derive_base_name(
    input_path: str | PurePath | None,
    default_base: str = "stdin",
    strip_extensions: Iterable[str] = (".txt",),
) -> str:
    """
    Derive the report base name from the input file name.

    The directory prefix is dropped and a single trailing extension listed in
    ``strip_extensions`` is removed (case-insensitively).
    """
    if input_path is None:
        return default_base
    name = PurePath(input_path).name
    lowered = name.lower()
    for extension in strip_extensions:
        ext = extension if extension.startswith(".") else f".{extension}"
        if lowered.endswith(ext.lower()) and len(name) > len(ext):
            return name[: -len(ext)]
    return name or default_base


def derive_output_paths(
    base: str, extension: str = "txt", output_dir: str | Path | None = None
) -> ReportPaths:
    """Return the stats/words/oddwords paths for a base name."""
    directory = Path(output_dir) if output_dir is not None else Path(".")
    ext = extension.lstrip(".")
    return ReportPaths(
        stats=directory / f"{base}-stats.{ext}",
        words=directory / f"{base}-words.{ext}",
        oddwords=directory / f"{base}-oddwords.{ext}",
    )
