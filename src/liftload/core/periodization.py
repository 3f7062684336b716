"""
Load advisor: suggests the next working weight from the last set.

Linear progression with RPE gating and deload detection. The decision is an
ordered rule list; the first rule whose condition holds produces the
suggestion:

  1. increase  reps ≥ target and RPE ≤ max_rpe
  2. deload    reps < target − 2, or RPE ≥ 10
  3. maintain  everything else

There is no memory between calls: the caller supplies the last set each
time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .config import (
    DEFAULT_SET_RPE,
    HIGH_CONFIDENCE_RPE,
    LOAD_UNIT,
    LOWER_BODY_KEYWORDS,
    MAX_EFFORT_RPE,
    MISSED_REPS_TOLERANCE,
    round_half_up,
)
from .models import (
    ChangeType,
    Confidence,
    ExerciseHistory,
    PeriodizationConfig,
    SetPerformance,
    WeightSuggestion,
)


def is_lower_body_exercise(exercise_name: str) -> bool:
    """True if the name contains a lower-body keyword (case-insensitive)."""
    name = exercise_name.lower()
    return any(keyword in name for keyword in LOWER_BODY_KEYWORDS)


def weight_increment(exercise_name: str, config: PeriodizationConfig) -> float:
    """Progression step for the exercise: lower- or upper-body increment."""
    if is_lower_body_exercise(exercise_name):
        return config.lower_body_increment
    return config.upper_body_increment


def _fmt(value: float) -> str:
    """Format a number without a trailing .0 (7.0 -> '7', 9.5 -> '9.5')."""
    return f"{value:g}"


@dataclass(frozen=True)
class SetEvaluation:
    """Inputs one suggestion rule looks at."""

    weight: float
    reps: int
    rpe: float
    target_reps: int
    increment: float
    config: PeriodizationConfig


@dataclass(frozen=True)
class SuggestionRule:
    """One entry of the progression decision list."""

    change_type: ChangeType
    applies: Callable[[SetEvaluation], bool]
    suggest: Callable[[SetEvaluation], WeightSuggestion]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _ready_to_progress(ev: SetEvaluation) -> bool:
    return ev.reps >= ev.target_reps and ev.rpe <= ev.config.max_rpe


def _increase(ev: SetEvaluation) -> WeightSuggestion:
    return WeightSuggestion(
        suggested_weight=ev.weight + ev.increment,
        change=ev.increment,
        change_type=ChangeType.INCREASE,
        reason=(
            f"Completed {ev.reps} reps at RPE {_fmt(ev.rpe)}. "
            f"Ready for +{_fmt(ev.increment)} {LOAD_UNIT}"
        ),
        confidence=Confidence.HIGH if ev.rpe <= HIGH_CONFIDENCE_RPE else Confidence.MEDIUM,
    )


def _needs_deload(ev: SetEvaluation) -> bool:
    return ev.reps < ev.target_reps - MISSED_REPS_TOLERANCE or ev.rpe >= MAX_EFFORT_RPE


def _deload(ev: SetEvaluation) -> WeightSuggestion:
    amount = round_half_up(ev.weight * ev.config.deload_percentage)
    if ev.rpe >= MAX_EFFORT_RPE:
        reason = "Max effort reached. Deload for recovery."
    else:
        reason = f"Only {ev.reps}/{ev.target_reps} reps. Reduce weight for quality."
    return WeightSuggestion(
        suggested_weight=ev.weight - amount,
        change=-amount,
        change_type=ChangeType.DELOAD,
        reason=reason,
        confidence=Confidence.HIGH,
    )


def _always(ev: SetEvaluation) -> bool:
    return True


def _maintain(ev: SetEvaluation) -> WeightSuggestion:
    return WeightSuggestion(
        suggested_weight=ev.weight,
        change=0,
        change_type=ChangeType.MAINTAIN,
        reason=f"{ev.reps} reps at RPE {_fmt(ev.rpe)}. Maintain weight, aim for easier reps.",
        confidence=Confidence.MEDIUM,
    )


# First match wins; the last rule always applies
SUGGESTION_RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(ChangeType.INCREASE, _ready_to_progress, _increase),
    SuggestionRule(ChangeType.DELOAD, _needs_deload, _deload),
    SuggestionRule(ChangeType.MAINTAIN, _always, _maintain),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_weight_suggestion(
    last_set: SetPerformance,
    target_reps: int,
    exercise_name: str,
    config: PeriodizationConfig | None = None,
) -> WeightSuggestion:
    """
    Suggest the next working weight from the last completed set.

    Args:
        last_set: Most recent working set (missing RPE is taken as 7)
        target_reps: Reps the lifter is aiming for
        exercise_name: Used to pick the lower/upper-body increment
        config: Progression policy (defaults when None)

    Returns:
        WeightSuggestion from the first matching rule
    """
    cfg = config if config is not None else PeriodizationConfig()
    ev = SetEvaluation(
        weight=last_set.weight,
        reps=last_set.reps,
        rpe=last_set.rpe if last_set.rpe is not None else DEFAULT_SET_RPE,
        target_reps=target_reps,
        increment=weight_increment(exercise_name, cfg),
        config=cfg,
    )
    rule = next(r for r in SUGGESTION_RULES if r.applies(ev))
    return rule.suggest(ev)


def select_best_set(sets: Sequence[SetPerformance], target_reps: int) -> SetPerformance | None:
    """
    Pick the set to progress from.

    The heaviest set that reached ``target_reps`` (earliest on a tie). When
    no set reached it, the first set is used rather than the heaviest, so a
    failed heavy single does not drive progression.

    Args:
        sets: Working sets in the order performed
        target_reps: Rep target

    Returns:
        Selected set, or None if ``sets`` is empty
    """
    if not sets:
        return None
    qualifying = [s for s in sets if s.reps >= target_reps]
    if not qualifying:
        return sets[0]
    best = qualifying[0]
    for s in qualifying[1:]:
        if s.weight > best.weight:
            best = s
    return best


def get_weight_from_history(
    history: Sequence[ExerciseHistory],
    exercise_name: str,
    target_reps: int = 8,
    config: PeriodizationConfig | None = None,
) -> WeightSuggestion | None:
    """
    Suggest the next weight from logged sessions of one exercise.

    Uses the most recent session for ``exercise_name`` (name compared
    case-insensitively) and ignores its warm-up sets.

    Args:
        history: Logged sessions, any order, any exercises
        exercise_name: Exercise to suggest for
        target_reps: Rep target for set selection and progression
        config: Progression policy (defaults when None)

    Returns:
        WeightSuggestion, or None if there is no session or no working set
    """
    wanted = exercise_name.strip().lower()
    sessions = [h for h in history if h.exercise_name.strip().lower() == wanted]
    if not sessions:
        return None

    latest = max(sessions, key=lambda h: h.date)
    working = [s for s in latest.sets if not s.is_warmup]

    best = select_best_set(working, target_reps)
    if best is None:
        return None

    return calculate_weight_suggestion(best, target_reps, exercise_name, config)
