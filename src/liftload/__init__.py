"""
liftload: muscle recovery estimates and next-session weight suggestions.

The calculators in ``liftload.core`` are pure functions over immutable
inputs; ``liftload.io`` reads history files and ``liftload.cli`` renders
results in the terminal.
"""

from .core.models import (
    ChangeType,
    Confidence,
    ExerciseHistory,
    MuscleGroup,
    MuscleRecoveryStatus,
    PeriodizationConfig,
    RecoveryState,
    SetPerformance,
    TrainingRecommendation,
    WeightSuggestion,
    WorkoutVolumeRecord,
)
from .core.one_rep_max import (
    calculate_1rm,
    calculate_weight_for_reps,
    get_rpe_percentage,
    get_weight_for_rpe,
)
from .core.periodization import calculate_weight_suggestion, get_weight_from_history
from .core.recovery import (
    calculate_full_body_recovery,
    calculate_muscle_recovery,
    calculate_readiness_score,
    get_training_recommendation,
)

__version__ = "0.1.0"

__all__ = [
    "ChangeType",
    "Confidence",
    "ExerciseHistory",
    "MuscleGroup",
    "MuscleRecoveryStatus",
    "PeriodizationConfig",
    "RecoveryState",
    "SetPerformance",
    "TrainingRecommendation",
    "WeightSuggestion",
    "WorkoutVolumeRecord",
    "calculate_1rm",
    "calculate_full_body_recovery",
    "calculate_muscle_recovery",
    "calculate_readiness_score",
    "calculate_weight_for_reps",
    "calculate_weight_suggestion",
    "get_rpe_percentage",
    "get_training_recommendation",
    "get_weight_for_rpe",
    "get_weight_from_history",
]
