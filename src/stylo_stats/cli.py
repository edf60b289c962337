from __future__ import annotations

import logging
import sys
from dataclasses import replace as dc_replace
from pathlib import Path

import typer
import yaml

from .config import StyloStatsConfig, load_config
from .dictionary import Dictionary, DictionaryLoadError, load_dictionary
from .pipeline import ReportWriteError, analyze_lines, run_reports
from .reports import format_oddwords, format_stats, format_words

app = typer.Typer(help="Stylometric text statistics CLI.", no_args_is_help=True)


@app.command()
def analyze(
    input_path: Path | None = typer.Argument(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="Text file to analyze (reads standard input when omitted).",
    ),
    dictionary: Path | None = typer.Option(
        None, "--dictionary", "-d", help="Word list used to flag odd words."
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", file_okay=False, help="Directory for reports."
    ),
    extension: str | None = typer.Option(
        None, "--extension", help="Extension for the three report files."
    ),
    print_reports: bool = typer.Option(
        False, "--print", help="Echo the reports to stdout instead of writing files."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    """Analyze a text and write the stats, words and oddwords reports."""
    _configure_logging(log_level)
    if print_reports and output_dir is not None:
        raise typer.BadParameter("--print cannot be combined with --output-dir.")
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    cfg = _apply_overrides(cfg, dictionary, output_dir, extension)

    def prompt() -> None:
        if input_path is None and sys.stdin.isatty():
            typer.echo(cfg.prompt, err=True)

    try:
        loaded = load_dictionary(cfg.dictionary_path, encoding=cfg.encoding)
        if print_reports:
            prompt()
            _echo_reports(cfg, input_path, loaded)
            return
        paths = run_reports(
            cfg, input_path=input_path, dictionary=loaded, before_read=prompt
        )
    except (DictionaryLoadError, ReportWriteError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Wrote {paths.stats}, {paths.words} and {paths.oddwords}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = StyloStatsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")
    logging.basicConfig(
        level=numeric, format="%(levelname)s %(name)s: %(message)s", force=True
    )


def _apply_overrides(
    config: StyloStatsConfig,
    dictionary: Path | None,
    output_dir: Path | None,
    extension: str | None,
) -> StyloStatsConfig:
    """Return a copy of the config with CLI flags applied."""
    updates: dict[str, object] = {}
    if dictionary is not None:
        updates["dictionary_path"] = str(dictionary)
    if output_dir is not None:
        updates["output_dir"] = str(output_dir)
    if extension:
        updates["report_extension"] = extension.lstrip(".")
    return dc_replace(config, **updates)


def _echo_reports(
    config: StyloStatsConfig, input_path: Path | None, dictionary: Dictionary
) -> None:
    """Print all three reports to stdout under bracketed section headers."""
    if input_path is not None:
        with input_path.open("r", encoding=config.encoding) as handle:
            result = analyze_lines(handle, dictionary)
    else:
        result = analyze_lines(sys.stdin, dictionary)
    sections = (
        ("stats", format_stats(result.statistics)),
        ("words", format_words(result.frequencies)),
        ("oddwords", format_oddwords(result.odd_words)),
    )
    for title, lines in sections:
        typer.echo(f"[{title}]")
        for line in lines:
            typer.echo(line)


if __name__ == "__main__":
    main()
