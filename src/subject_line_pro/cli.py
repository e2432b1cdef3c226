"""CLI entry point for Subject Line Pro."""

from __future__ import annotations

import json
import logging
import random

import click
from rich.console import Console
from rich.logging import RichHandler

from .display import console, display_analysis, display_power_words, display_spam_triggers
from .errors import InvalidInputError
from .scorer import analyze, get_power_words, get_spam_triggers


def _setup_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("subject_line_pro").setLevel(level)


def _echo_json(data) -> None:  # noqa: ANN001
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.version_option(version="0.1.0", prog_name="subject-line-pro")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Subject Line Pro - score email subject lines for spam risk and impact."""
    _setup_logging(verbose)


@cli.command(name="analyze")
@click.argument("subjects", nargs=-1)
@click.option(
    "-f",
    "--file",
    "subject_file",
    type=click.File("r"),
    default=None,
    help="Read subject lines from a file, one per line.",
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.option("--seed", default=None, type=int, help="Seed for the suggested power words.")
def analyze_cmd(subjects: tuple[str, ...], subject_file, as_json: bool, seed: int | None) -> None:  # noqa: ANN001
    """Analyze one or more subject lines."""
    lines = list(subjects)
    if subject_file is not None:
        stripped = (line.rstrip("\r\n") for line in subject_file)
        lines.extend(line for line in stripped if line)

    if not lines:
        raise click.ClickException("No subject lines given. Pass them as arguments or use --file.")

    rng = random.Random(seed) if seed is not None else None

    try:
        results = [analyze(line, rng=rng) for line in lines]
    except InvalidInputError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        payload = [r.to_dict() for r in results]
        _echo_json(payload[0] if len(payload) == 1 else payload)
        return

    for idx, result in enumerate(results):
        if idx:
            console.print()
        display_analysis(result)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the table as JSON.")
def triggers(as_json: bool) -> None:
    """List the spam trigger phrases."""
    table = get_spam_triggers()
    if as_json:
        _echo_json([t.to_dict() for t in table])
        return
    display_spam_triggers(table)


@cli.command(name="power-words")
@click.option("--json", "as_json", is_flag=True, help="Print the table as JSON.")
def power_words(as_json: bool) -> None:
    """List the power words."""
    table = get_power_words()
    if as_json:
        _echo_json([pw.to_dict() for pw in table])
        return
    display_power_words(table)
