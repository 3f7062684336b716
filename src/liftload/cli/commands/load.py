"""Load advisor commands: suggest, suggest-history, 1rm, rpe-weight."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.config import LOAD_UNIT
from ...core.models import SetPerformance, WeightSuggestion
from ...core.one_rep_max import (
    calculate_1rm,
    estimate_1rm_formulas,
    get_rpe_percentage,
    get_weight_for_rpe,
)
from ...core.periodization import calculate_weight_suggestion, get_weight_from_history
from ...io.history_loader import load_exercise_history
from ...io.serializers import ValidationError, weight_suggestion_to_dict
from .. import views
from ..app import ConfigOption, JsonOption, app, get_config

UpperIncrementOption = Annotated[
    Optional[float],
    typer.Option("--upper-increment", help="Override the upper-body increment"),
]
LowerIncrementOption = Annotated[
    Optional[float],
    typer.Option("--lower-increment", help="Override the lower-body increment"),
]
MaxRpeOption = Annotated[
    Optional[float],
    typer.Option("--max-rpe", help="Override the hardest RPE that still allows progression"),
]
DeloadOption = Annotated[
    Optional[float],
    typer.Option("--deload", help="Override the deload fraction (0.10 = 10%)"),
]
TargetRepsOption = Annotated[
    Optional[int],
    typer.Option("--target-reps", "-t", min=1, help="Rep target (default from config)"),
]
ExerciseNameOption = Annotated[
    str,
    typer.Option("--exercise", "-e", help="Exercise name, e.g. 'Bench Press'"),
]


def _print_or_dump(exercise: str, suggestion: WeightSuggestion, json_out: bool) -> None:
    if json_out:
        print(json.dumps({"exercise": exercise, **weight_suggestion_to_dict(suggestion)}, indent=2))
    else:
        views.print_weight_suggestion(exercise, suggestion, LOAD_UNIT)


@app.command()
def suggest(
    exercise: ExerciseNameOption,
    weight: Annotated[float, typer.Option("--weight", "-w", help="Weight of the last working set")],
    reps: Annotated[int, typer.Option("--reps", "-r", min=0, help="Reps completed")],
    rpe: Annotated[
        Optional[float],
        typer.Option("--rpe", min=1, max=10, help="RPE of the set (default 7)"),
    ] = None,
    target_reps: TargetRepsOption = None,
    config_path: ConfigOption = None,
    upper_increment: UpperIncrementOption = None,
    lower_increment: LowerIncrementOption = None,
    max_rpe: MaxRpeOption = None,
    deload: DeloadOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Suggest the next working weight from your last set.

    Hit the rep target at or below the max RPE to add weight; miss it by
    more than two reps (or grind at RPE 10) to deload; otherwise hold.
    """
    cfg = get_config(config_path, upper_increment, lower_increment, max_rpe, deload)
    last_set = SetPerformance(weight=weight, reps=reps, rpe=rpe)
    target = target_reps if target_reps is not None else cfg.target_reps
    suggestion = calculate_weight_suggestion(last_set, target, exercise, cfg)
    _print_or_dump(exercise, suggestion, json_out)


@app.command("suggest-history")
def suggest_history(
    history_path: Annotated[
        Path,
        typer.Option("--history", "-p", help="Path to exercise history JSONL file"),
    ],
    exercise: ExerciseNameOption,
    target_reps: TargetRepsOption = None,
    config_path: ConfigOption = None,
    upper_increment: UpperIncrementOption = None,
    lower_increment: LowerIncrementOption = None,
    max_rpe: MaxRpeOption = None,
    deload: DeloadOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Suggest the next working weight from the last logged session.

    Warm-up sets are ignored. The heaviest set that reached the rep target
    drives the suggestion; if none did, the first working set is used.
    """
    try:
        history = load_exercise_history(history_path)
    except (FileNotFoundError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    cfg = get_config(config_path, upper_increment, lower_increment, max_rpe, deload)
    target = target_reps if target_reps is not None else cfg.target_reps
    suggestion = get_weight_from_history(history, exercise, target, cfg)

    if suggestion is None:
        if json_out:
            print(json.dumps({"exercise": exercise, "suggestion": None}, indent=2))
        else:
            views.print_info(f"No working sets logged for {exercise!r} yet.")
        return

    _print_or_dump(exercise, suggestion, json_out)


@app.command("1rm")
def onerepmax(
    weight: Annotated[float, typer.Option("--weight", "-w", help="Weight lifted")],
    reps: Annotated[int, typer.Option("--reps", "-r", min=1, help="Reps completed")],
    json_out: JsonOption = False,
) -> None:
    """
    Estimate your one-rep max from a set.

    The rounded Epley value is the one the load advisor uses; the other
    formulas are shown for comparison.
    """
    epley = calculate_1rm(weight, reps)
    formulas = estimate_1rm_formulas(weight, reps)

    if json_out:
        print(json.dumps({"weight": weight, "reps": reps, "one_rm": epley, "formulas": formulas}, indent=2))
        return

    views.print_1rm_table(weight, reps, epley, formulas)


@app.command("rpe-weight")
def rpe_weight(
    one_rm: Annotated[float, typer.Option("--one-rm", help="Current one-rep max")],
    rpe: Annotated[float, typer.Option("--rpe", help="Target RPE (7-10 in 0.5 steps)")],
    reps: Annotated[int, typer.Option("--reps", "-r", min=1, help="Target reps")],
    json_out: JsonOption = False,
) -> None:
    """
    Weight that should feel like a given RPE for a given number of reps.
    """
    pct = get_rpe_percentage(rpe, reps)
    weight = get_weight_for_rpe(one_rm, rpe, reps)
    if pct is None or weight is None:
        views.print_error(f"No RPE chart row for RPE {rpe:g}. Use 7-10 in 0.5 steps.")
        raise typer.Exit(1)

    if json_out:
        print(json.dumps({"one_rm": one_rm, "rpe": rpe, "reps": reps, "percent": pct, "weight": weight}, indent=2))
        return

    views.console.print(
        f"{reps} reps @ RPE {rpe:g} ≈ [bold]{weight} {LOAD_UNIT}[/bold] ({pct:g}% of {one_rm:g})"
    )
