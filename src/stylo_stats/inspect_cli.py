from __future__ import annotations

from pathlib import Path

import click

from .config import StyloStatsConfig, load_config
from .dictionary import DictionaryLoadError, load_dictionary
from .models import Segment
from .pipeline import build_segment_tree

CONFIG_OPTION = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML configuration shared with the analyze command.",
)


@click.group(name="inspect")
def inspect_group() -> None:
    """Debugging helpers for the segmenters and dictionary lookups."""


@inspect_group.command("segments")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@CONFIG_OPTION
def inspect_segments(input_file: str, config_path: str | None) -> None:
    """Print the paragraph/sentence/phrase/word tree of a text file."""
    cfg = _load(config_path)
    with Path(input_file).open("r", encoding=cfg.encoding) as handle:
        tree = build_segment_tree(handle)
    if not tree:
        click.echo("(no paragraphs)")
        return
    for node in tree:
        _echo_segment(node, depth=0)


@inspect_group.command("lookup")
@click.option(
    "--dictionary",
    "-d",
    "dictionary_path",
    type=click.Path(),
    default=None,
    help="Word list to check against (defaults to the configured dictionary_path).",
)
@CONFIG_OPTION
@click.argument("words", nargs=-1, required=True)
def inspect_lookup(
    dictionary_path: str | None, config_path: str | None, words: tuple[str, ...]
) -> None:
    """Report whether each WORD is known to the dictionary or odd."""
    cfg = _load(config_path)
    try:
        dictionary = load_dictionary(
            dictionary_path or cfg.dictionary_path, encoding=cfg.encoding
        )
    except DictionaryLoadError as exc:
        raise click.ClickException(str(exc)) from exc
    for word in words:
        status = "odd" if dictionary.is_odd(word) else "known"
        click.echo(f"{word} {status} (folded: {dictionary.fold(word)})")


def _load(config_path: str | None) -> StyloStatsConfig:
    try:
        return load_config(config_path)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc


def _echo_segment(node: Segment, depth: int) -> None:
    indent = "  " * depth
    click.echo(f"{indent}{node.level}: {node.text.strip()!r}")
    for child in node.children:
        _echo_segment(child, depth + 1)


def main() -> None:
    inspect_group()


if __name__ == "__main__":
    main()
