"""Recovery command: per-muscle status, readiness and recommendation."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.recovery import (
    calculate_full_body_recovery,
    calculate_readiness_score,
    get_training_recommendation,
    readiness_label,
)
from ...io.history_loader import load_volume_history
from ...io.serializers import (
    ValidationError,
    recommendation_to_dict,
    recovery_status_to_dict,
    validate_timestamp,
)
from .. import views
from ..app import JsonOption, app


@app.command()
def recovery(
    history_path: Annotated[
        Path,
        typer.Option("--history", "-p", help="Path to volume history JSONL file"),
    ],
    now: Annotated[
        Optional[str],
        typer.Option("--now", help="Evaluate at this ISO time instead of the current time"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show muscle recovery status and today's readiness.

    Each muscle is scored from its most recent session: hours elapsed versus
    a base recovery window stretched by the number of sets performed.
    """
    try:
        history = load_volume_history(history_path)
        at = validate_timestamp(now, "--now") if now is not None else None
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if at is not None and history and (at.tzinfo is None) != (history[0].timestamp.tzinfo is None):
        kind = "timezone-aware" if at.tzinfo is not None else "naive"
        views.print_error(f"--now is {kind} but the timestamps in {history_path} are not")
        raise typer.Exit(1)

    statuses = calculate_full_body_recovery(history, now=at)
    score = calculate_readiness_score(statuses)
    rec = get_training_recommendation(statuses)

    if json_out:
        print(json.dumps({
            "readiness_score": score,
            "readiness_label": readiness_label(score),
            **recommendation_to_dict(rec),
            "muscles": [recovery_status_to_dict(s) for s in statuses],
        }, indent=2))
        return

    if not history:
        views.print_warning(f"No sessions in {history_path}; every muscle counts as recovered.")

    views.print_recovery_table(statuses)
    views.print_readiness(score, rec)
