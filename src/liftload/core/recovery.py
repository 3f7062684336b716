"""
Muscle recovery estimator.

Estimates per-muscle fatigue from the most recent session that trained the
muscle, how long ago it was, and how many sets it received:

    total_hours  = base_hours[muscle] * (1 + volume_modifier(sets))
    recovery_pct = clamp(round(hours_since / total_hours * 100), 0, 100)

Statuses and the whole-body recommendation are derived from recovery_pct
with small ordered rule lists (first match wins) defined in config.py.

All functions are pure: the only clock access is the optional ``now``
argument, which defaults to the current time.
"""

import math
from datetime import datetime, timezone
from typing import Sequence

from .config import (
    BASE_RECOVERY_HOURS,
    MIN_READY_MUSCLES,
    READINESS_LABEL_FLOOR,
    READINESS_LABELS,
    RECOVERY_COLORS,
    STATUS_RULES,
    VOLUME_MODIFIER_RULES,
    clamp_percent,
    round_half_up,
)
from .models import (
    MuscleGroup,
    MuscleRecoveryStatus,
    RecoveryState,
    TrainingRecommendation,
    WorkoutVolumeRecord,
)


def volume_modifier(sets: int) -> float:
    """
    Fractional extension of the recovery window for a session's volume.

    Thresholds are checked highest first; the first one met wins.

    Args:
        sets: Working sets performed for the muscle in the session

    Returns:
        0.0, 0.25, 0.50 or 0.75
    """
    for min_sets, modifier in VOLUME_MODIFIER_RULES:
        if sets >= min_sets:
            return modifier
    return 0.0


def classify_recovery(recovery_percent: float) -> RecoveryState:
    """Map a recovery percentage to its status."""
    for min_percent, state in STATUS_RULES:
        if recovery_percent >= min_percent:
            return state
    return RecoveryState.FATIGUED


def recovery_color(recovery_percent: float) -> str:
    """Return the display color for a recovery percentage."""
    return RECOVERY_COLORS[classify_recovery(recovery_percent)]


def _hours_between(start: datetime, now: datetime | None) -> float:
    """Wall-clock hours from ``start`` to ``now`` (current time if None)."""
    if now is None:
        now = datetime.now(timezone.utc) if start.tzinfo is not None else datetime.now()
    return (now - start).total_seconds() / 3600.0


def calculate_muscle_recovery(
    muscle: MuscleGroup,
    history: Sequence[WorkoutVolumeRecord],
    now: datetime | None = None,
) -> MuscleRecoveryStatus:
    """
    Calculate recovery status for a single muscle group.

    Only the most recent session with sets for the muscle is considered.
    A muscle that was never trained is fully recovered.

    Args:
        muscle: Muscle group to evaluate
        history: Volume records in any order
        now: Evaluation time (defaults to the current time)

    Returns:
        MuscleRecoveryStatus for ``muscle``
    """
    relevant = sorted(
        (r for r in history if r.sets_for(muscle) > 0),
        key=lambda r: r.timestamp,
        reverse=True,
    )

    if not relevant:
        return MuscleRecoveryStatus(
            muscle=muscle,
            fatigue_score=0,
            recovery_percent=100,
            status=RecoveryState.RECOVERED,
            color=RECOVERY_COLORS[RecoveryState.RECOVERED],
            hours_until_recovered=0,
            last_worked=None,
            volume_score=0,
        )

    last = relevant[0]
    volume = last.sets_for(muscle)
    hours_since = _hours_between(last.timestamp, now)

    total_hours = BASE_RECOVERY_HOURS[muscle] * (1 + volume_modifier(volume))

    recovery_percent = clamp_percent(hours_since / total_hours * 100)
    status = classify_recovery(recovery_percent)

    return MuscleRecoveryStatus(
        muscle=muscle,
        fatigue_score=100 - recovery_percent,
        recovery_percent=recovery_percent,
        status=status,
        color=RECOVERY_COLORS[status],
        hours_until_recovered=max(0, round_half_up(total_hours - hours_since)),
        last_worked=last.timestamp,
        volume_score=volume,
    )


def calculate_full_body_recovery(
    history: Sequence[WorkoutVolumeRecord],
    now: datetime | None = None,
) -> list[MuscleRecoveryStatus]:
    """
    Calculate recovery for every muscle group.

    Args:
        history: Volume records in any order
        now: Evaluation time shared by all muscles

    Returns:
        One status per MuscleGroup, in enumeration order
    """
    if now is None and history:
        # Pin one evaluation time so all muscles see the same clock
        newest = max(r.timestamp for r in history)
        now = datetime.now(timezone.utc) if newest.tzinfo is not None else datetime.now()
    return [calculate_muscle_recovery(m, history, now) for m in MuscleGroup]


def calculate_readiness_score(statuses: Sequence[MuscleRecoveryStatus]) -> int:
    """
    Overall readiness: unweighted mean recovery percentage (0-100).

    An empty list means nothing is fatigued, so readiness is 100.
    """
    if not statuses:
        return 100
    mean = sum(s.recovery_percent for s in statuses) / len(statuses)
    return round_half_up(mean)


def readiness_label(score: float) -> str:
    """Short human-readable label for a readiness score."""
    for min_score, label in READINESS_LABELS:
        if score >= min_score:
            return label
    return READINESS_LABEL_FLOOR


def get_training_recommendation(
    statuses: Sequence[MuscleRecoveryStatus],
) -> TrainingRecommendation:
    """
    Suggest what to train from a list of muscle statuses.

    Three branches, in order:
    1. Nothing fatigued -> full body is fine.
    2. At least MIN_READY_MUSCLES recovered -> name the first three.
    3. Otherwise -> rest day or light cardio.

    Muscle order follows the input order (enumeration order for
    calculate_full_body_recovery output); there is no secondary sort.

    Args:
        statuses: Muscle recovery statuses

    Returns:
        TrainingRecommendation
    """
    ready = tuple(s.muscle for s in statuses if s.status is RecoveryState.RECOVERED)
    avoid = tuple(s.muscle for s in statuses if s.status is RecoveryState.FATIGUED)

    if not avoid:
        text = "All muscles recovered! Full body workout OK."
    elif len(ready) >= MIN_READY_MUSCLES:
        names = ", ".join(m.value for m in ready[:MIN_READY_MUSCLES])
        text = f"Train: {names}"
    else:
        text = "Consider a rest day or light cardio."

    return TrainingRecommendation(
        recommendation=text,
        ready_muscles=ready,
        avoid_muscles=avoid,
    )


def format_recovery_time(hours: float) -> str:
    """
    Format hours until recovered for display.

    Examples: 0 -> "Recovered", 0.5 -> "Almost ready", 5 -> "5h",
    48 -> "2d", 50 -> "2d 2h".
    """
    if hours <= 0:
        return "Recovered"
    if hours < 1:
        return "Almost ready"
    if hours < 24:
        return f"{round_half_up(hours)}h"
    days = math.floor(hours / 24)
    remaining = round_half_up(hours % 24)
    if remaining == 0:
        return f"{days}d"
    return f"{days}d {remaining}h"
