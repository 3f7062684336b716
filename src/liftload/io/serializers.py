"""
JSON serialization for model inputs and outputs.

Converts JSON-compatible dicts into the model's immutable value types
(validating on the way in) and results back into plain dicts for --json
output.
"""

import math
from datetime import datetime
from typing import Any

from ..core.models import (
    ExerciseHistory,
    MuscleGroup,
    MuscleRecoveryStatus,
    SetPerformance,
    TrainingRecommendation,
    WeightSuggestion,
    WorkoutVolumeRecord,
)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_timestamp(value: Any, name: str = "timestamp") -> datetime:
    """
    Parse an ISO-8601 date or datetime string.

    Args:
        value: String such as "2026-10-18" or "2026-10-18T18:30:00+02:00"
        name: Field name for error messages

    Returns:
        Parsed datetime

    Raises:
        ValidationError: If the value is not a valid ISO string
    """
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be an ISO date string, got {value!r}")
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {name}: {value!r}") from e


def validate_muscle(name: Any) -> MuscleGroup:
    """
    Resolve a muscle group by its name.

    Raises:
        ValidationError: If the name is not one of the tracked groups
    """
    try:
        return MuscleGroup(str(name).strip().lower())
    except ValueError as e:
        valid = ", ".join(m.value for m in MuscleGroup)
        raise ValidationError(f"Unknown muscle group {name!r}. Valid: {valid}") from e


def validate_set_count(value: Any, name: str) -> int:
    """
    Validate a non-negative whole set count.

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be a whole number of sets, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def validate_number(value: Any, name: str) -> float:
    """
    Validate a finite number.

    Raises:
        ValidationError: If value is not a finite int/float
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")
    return value


def dict_to_volume_record(data: dict[str, Any]) -> WorkoutVolumeRecord:
    """
    Convert a dict to a WorkoutVolumeRecord.

    Args:
        data: {"timestamp": ISO string, "muscle_volume": {muscle: sets}}

    Returns:
        WorkoutVolumeRecord

    Raises:
        ValidationError: If fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Volume record must be an object, got {type(data).__name__}")
    if "timestamp" not in data:
        raise ValidationError("Volume record missing 'timestamp'")

    raw_volume = data.get("muscle_volume", {})
    if not isinstance(raw_volume, dict):
        raise ValidationError("'muscle_volume' must be an object")

    volume = {
        validate_muscle(name): validate_set_count(sets, f"muscle_volume[{name!r}]")
        for name, sets in raw_volume.items()
    }

    return WorkoutVolumeRecord(
        timestamp=validate_timestamp(data["timestamp"]),
        muscle_volume=volume,
    )


def dict_to_set_performance(data: dict[str, Any]) -> SetPerformance:
    """
    Convert a dict to a SetPerformance.

    Raises:
        ValidationError: If weight/reps are missing or invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Set must be an object, got {type(data).__name__}")
    for key in ("weight", "reps"):
        if key not in data:
            raise ValidationError(f"Set missing '{key}'")

    reps = data["reps"]
    if isinstance(reps, bool) or not isinstance(reps, int) or reps < 0:
        raise ValidationError(f"reps must be a non-negative integer, got {reps!r}")

    rpe = data.get("rpe")
    if rpe is not None:
        rpe = validate_number(rpe, "rpe")

    return SetPerformance(
        weight=validate_number(data["weight"], "weight"),
        reps=reps,
        rpe=rpe,
        is_warmup=bool(data.get("is_warmup", False)),
    )


def dict_to_exercise_history(data: dict[str, Any]) -> ExerciseHistory:
    """
    Convert a dict to an ExerciseHistory.

    Raises:
        ValidationError: If fields are missing or invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Exercise record must be an object, got {type(data).__name__}")
    name = data.get("exercise_name")
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("'exercise_name' must be a non-empty string")
    if "date" not in data:
        raise ValidationError("Exercise record missing 'date'")

    raw_sets = data.get("sets", [])
    if not isinstance(raw_sets, list):
        raise ValidationError("'sets' must be a list")

    exercise_id = data.get("exercise_id")
    return ExerciseHistory(
        exercise_name=name,
        date=validate_timestamp(data["date"], "date"),
        sets=tuple(dict_to_set_performance(s) for s in raw_sets),
        exercise_id=str(exercise_id) if exercise_id is not None else None,
    )


def recovery_status_to_dict(status: MuscleRecoveryStatus) -> dict[str, Any]:
    """Convert a MuscleRecoveryStatus to a JSON-compatible dict."""
    return {
        "muscle": status.muscle.value,
        "fatigue_score": status.fatigue_score,
        "recovery_percent": status.recovery_percent,
        "status": status.status.value,
        "color": status.color,
        "hours_until_recovered": status.hours_until_recovered,
        "last_worked": status.last_worked.isoformat() if status.last_worked else None,
        "volume_score": status.volume_score,
    }


def recommendation_to_dict(rec: TrainingRecommendation) -> dict[str, Any]:
    """Convert a TrainingRecommendation to a JSON-compatible dict."""
    return {
        "recommendation": rec.recommendation,
        "ready_muscles": [m.value for m in rec.ready_muscles],
        "avoid_muscles": [m.value for m in rec.avoid_muscles],
    }


def weight_suggestion_to_dict(suggestion: WeightSuggestion) -> dict[str, Any]:
    """Convert a WeightSuggestion to a JSON-compatible dict."""
    return {
        "suggested_weight": suggestion.suggested_weight,
        "change": suggestion.change,
        "change_type": suggestion.change_type.value,
        "reason": suggestion.reason,
        "confidence": suggestion.confidence.value,
    }
