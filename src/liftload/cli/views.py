"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of recovery and load data.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import (
    ChangeType,
    MuscleRecoveryStatus,
    RecoveryState,
    TrainingRecommendation,
    WeightSuggestion,
)
from ..core.recovery import format_recovery_time, readiness_label

console = Console()

_STATUS_STYLE = {
    RecoveryState.RECOVERED: "green",
    RecoveryState.RECOVERING: "yellow",
    RecoveryState.FATIGUED: "red",
}

_CHANGE_STYLE = {
    ChangeType.INCREASE: ("green", "↑"),
    ChangeType.MAINTAIN: ("cyan", "→"),
    ChangeType.DELOAD: ("yellow", "↓"),
}


def _num(value: float) -> str:
    return f"{value:g}"


def print_recovery_table(statuses: list[MuscleRecoveryStatus]) -> None:
    """
    Print per-muscle recovery status.

    Args:
        statuses: Statuses in display order
    """
    table = Table(title="Muscle Recovery")
    table.add_column("Muscle", style="bold")
    table.add_column("Recovery", justify="right")
    table.add_column("Status")
    table.add_column("Ready in", justify="right")
    table.add_column("Last sets", justify="right")
    table.add_column("Last worked")

    for s in statuses:
        style = _STATUS_STYLE[s.status]
        table.add_row(
            s.muscle.value,
            f"[{style}]{s.recovery_percent}%[/{style}]",
            f"[{style}]{s.status.value}[/{style}]",
            format_recovery_time(s.hours_until_recovered),
            str(s.volume_score) if s.volume_score else "-",
            s.last_worked.strftime("%Y-%m-%d %H:%M") if s.last_worked else "-",
        )

    console.print(table)


def print_readiness(score: int, rec: TrainingRecommendation) -> None:
    """
    Print the readiness score and training recommendation.

    Args:
        score: Readiness score (0-100)
        rec: Recommendation derived from the same statuses
    """
    console.print()
    console.print(f"[bold]Readiness:[/bold] {score}/100 ({readiness_label(score)})")
    console.print(f"[bold]Recommendation:[/bold] {rec.recommendation}")
    if rec.avoid_muscles:
        names = ", ".join(m.value for m in rec.avoid_muscles)
        console.print(f"[red]Avoid:[/red] {names}")
    console.print()


def print_weight_suggestion(exercise_name: str, suggestion: WeightSuggestion, unit: str) -> None:
    """
    Print a next-session weight suggestion.

    Args:
        exercise_name: Exercise the suggestion is for
        suggestion: WeightSuggestion to display
        unit: Load unit label
    """
    style, arrow = _CHANGE_STYLE[suggestion.change_type]
    change = ""
    if suggestion.change != 0:
        sign = "+" if suggestion.change > 0 else ""
        change = f" ({sign}{_num(suggestion.change)})"

    console.print()
    console.print(
        f"[bold]{escape(exercise_name)}[/bold]: [{style}]{arrow} {_num(suggestion.suggested_weight)} "
        f"{unit}{change}[/{style}]  [dim]{suggestion.change_type.value}, "
        f"{suggestion.confidence.value} confidence[/dim]"
    )
    console.print(f"  {suggestion.reason}")
    console.print()


def print_1rm_table(weight: float, reps: int, epley: float, formulas: dict[str, float]) -> None:
    """
    Print 1RM estimates from several formulas.

    Args:
        weight: Weight lifted
        reps: Reps completed
        epley: Rounded Epley estimate used by the load advisor
        formulas: Output of estimate_1rm_formulas()
    """
    table = Table(title=f"Estimated 1RM from {_num(weight)} x {reps}")
    table.add_column("Formula")
    table.add_column("1RM", justify="right")
    table.add_row("Epley (rounded)", _num(epley))
    for key in ("epley", "brzycki", "lander", "average"):
        table.add_row(key.capitalize(), f"{formulas[key]:.1f}")
    console.print(table)


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")
