"""Rich-based display functions for Subject Line Pro."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import AnalysisResult, PowerWord, SpamTrigger

console = Console()

_IMPACT_COLORS = {"high": "red", "medium": "yellow", "low": "green"}


def _overall_color(score: int) -> str:
    """Return a Rich color name for an overall score (higher is better)."""
    if score >= 70:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _spam_color(score: int) -> str:
    """Return a Rich color name for a spam score (higher is worse)."""
    if score >= 50:
        return "red"
    if score >= 25:
        return "yellow"
    return "green"


def _impact(impact: str) -> str:
    color = _IMPACT_COLORS.get(impact, "white")
    return f"[{color}]{impact}[/{color}]"


def display_analysis(result: AnalysisResult) -> None:
    """Display the scores, issues and suggestions for one subject line."""
    overall = _overall_color(result.overall_score)
    spam = _spam_color(result.spam_score)

    lines = [
        f"[bold]Subject:[/bold] {escape(result.subject_line)}",
        f"[bold]Overall score:[/bold] [{overall}]{result.overall_score}/100[/{overall}]",
        f"[bold]Spam score:[/bold] [{spam}]{result.spam_score}/100[/{spam}]",
        f"[bold]Length:[/bold] {result.length} characters, {result.word_count} words",
        f"[bold]Punctuation:[/bold] {'yes' if result.has_punctuation else 'no'}",
        f"[bold]Power words:[/bold] {', '.join(result.power_words) or '-'}",
    ]
    console.print(Panel("\n".join(lines), title="Subject Line Analysis"))

    if result.issues:
        table = Table(title="Issues")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Issue")
        table.add_column("Impact")
        for idx, issue in enumerate(result.issues, start=1):
            table.add_row(str(idx), issue.text, _impact(issue.impact))
        console.print(table)

    if result.suggestions:
        console.print("[bold]Suggestions:[/bold]")
        for suggestion in result.suggestions:
            console.print(f"  - {suggestion}")


def display_spam_triggers(triggers: tuple[SpamTrigger, ...]) -> None:
    table = Table(title="Spam Triggers")
    table.add_column("Phrase")
    table.add_column("Impact")
    table.add_column("Reason")
    for trigger in triggers:
        table.add_row(trigger.word, _impact(trigger.impact), trigger.reason)
    console.print(table)


def display_power_words(power_words: tuple[PowerWord, ...]) -> None:
    table = Table(title="Power Words")
    table.add_column("Word")
    table.add_column("Category")
    table.add_column("Impact")
    for pw in power_words:
        table.add_row(pw.word, pw.category, _impact(pw.impact))
    console.print(table)
