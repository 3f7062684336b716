"""
Data models for liftload.

Enumerations and dataclasses for volume history, recovery status, set
performance and weight suggestions. Output values are frozen; the
calculators build them fresh on every call and never mutate their inputs.
"""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping


class MuscleGroup(str, Enum):
    """The eleven tracked muscle groups, in display order."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    CORE = "core"


class RecoveryState(str, Enum):
    FATIGUED = "fatigued"
    RECOVERING = "recovering"
    RECOVERED = "recovered"


class ChangeType(str, Enum):
    INCREASE = "increase"
    MAINTAIN = "maintain"
    DELOAD = "deload"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class WorkoutVolumeRecord:
    """
    Working sets per muscle group for one completed session.

    Muscles missing from ``muscle_volume`` were not trained (0 sets).
    """

    timestamp: datetime
    muscle_volume: Mapping[MuscleGroup, int] = field(default_factory=dict)

    def sets_for(self, muscle: MuscleGroup) -> int:
        """Return the number of sets performed for ``muscle`` (0 if absent)."""
        return self.muscle_volume.get(muscle, 0)


@dataclass(frozen=True)
class MuscleRecoveryStatus:
    """
    Recovery state of one muscle group at evaluation time.

    fatigue_score and recovery_percent are complements in [0, 100].
    """

    muscle: MuscleGroup
    fatigue_score: int
    recovery_percent: int
    status: RecoveryState
    color: str                       # display color for ``status``
    hours_until_recovered: int
    last_worked: datetime | None     # None = never trained in the history
    volume_score: int                # sets in the most recent relevant session


@dataclass(frozen=True)
class TrainingRecommendation:
    """Readiness advice derived from a full-body status list."""

    recommendation: str
    ready_muscles: tuple[MuscleGroup, ...]
    avoid_muscles: tuple[MuscleGroup, ...]


@dataclass(frozen=True)
class SetPerformance:
    """
    One completed set.

    rpe is on the 1-10 scale; None means not reported.
    """

    weight: float
    reps: int
    rpe: float | None = None
    is_warmup: bool = False


@dataclass(frozen=True)
class ExerciseHistory:
    """All sets logged for one exercise in one session."""

    exercise_name: str
    date: datetime
    sets: tuple[SetPerformance, ...] = ()
    exercise_id: str | None = None


@dataclass(frozen=True)
class WeightSuggestion:
    """Suggested working weight for the next session."""

    suggested_weight: float
    change: float  # signed: +5, 0, -20, ...
    change_type: ChangeType
    reason: str
    confidence: Confidence


@dataclass(frozen=True)
class PeriodizationConfig:
    """
    Tunable progression policy.

    Increments are in the user's load unit (lbs by default). deload_percentage
    is a fraction of the working weight (0.10 = 10%).
    """

    upper_body_increment: float = 5
    lower_body_increment: float = 10
    target_reps: int = 8
    max_rpe: float = 8
    deload_percentage: float = 0.10

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Any] | None = None) -> "PeriodizationConfig":
        """
        Build a config from defaults plus a partial mapping of overrides.

        Unknown keys are ignored; values of None keep the default.

        Args:
            overrides: Field name -> value (any subset)

        Returns:
            PeriodizationConfig
        """
        return cls().merged(overrides)

    def merged(self, overrides: Mapping[str, Any] | None) -> "PeriodizationConfig":
        """Return a copy with the non-None entries of ``overrides`` applied."""
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if k in known and v is not None}
        return replace(self, **changes)
