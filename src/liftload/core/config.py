"""
Configuration constants for the training load and recovery model.

All tables are process-wide constants, centralized here for easy tuning.
Mappings are wrapped in MappingProxyType so they cannot be mutated at
runtime. User-tunable progression policy (increments, max RPE, deload) can
additionally be overridden from YAML, see core/engine/config_loader.py.
"""

import math
from types import MappingProxyType
from typing import Final, Mapping

from .models import MuscleGroup, RecoveryState

# =============================================================================
# RECOVERY TIMES
# =============================================================================

# Base recovery window after a normal-volume session, in hours
BASE_RECOVERY_HOURS: Final[Mapping[MuscleGroup, int]] = MappingProxyType({
    MuscleGroup.CHEST: 48,
    MuscleGroup.BACK: 72,
    MuscleGroup.SHOULDERS: 48,
    MuscleGroup.BICEPS: 48,
    MuscleGroup.TRICEPS: 48,
    MuscleGroup.FOREARMS: 36,
    MuscleGroup.QUADS: 72,
    MuscleGroup.HAMSTRINGS: 72,
    MuscleGroup.GLUTES: 72,
    MuscleGroup.CALVES: 48,
    MuscleGroup.CORE: 24,
})

# =============================================================================
# VOLUME MODIFIER
# =============================================================================

VOLUME_MODERATE_SETS: Final[int] = 6
VOLUME_HEAVY_SETS: Final[int] = 12
VOLUME_VERY_HEAVY_SETS: Final[int] = 18
VOLUME_EXTREME_SETS: Final[int] = 24

# (minimum sets, fractional extension of the recovery window), highest first.
# The extreme tier shares the very-heavy extension: recovery time stops
# growing past 18 sets.
VOLUME_MODIFIER_RULES: Final[tuple[tuple[int, float], ...]] = (
    (VOLUME_EXTREME_SETS, 0.75),
    (VOLUME_VERY_HEAVY_SETS, 0.75),
    (VOLUME_HEAVY_SETS, 0.50),
    (VOLUME_MODERATE_SETS, 0.25),
)

# =============================================================================
# RECOVERY STATUS
# =============================================================================

RECOVERED_THRESHOLD: Final[int] = 80  # recovery % at or above -> recovered
RECOVERING_THRESHOLD: Final[int] = 40  # recovery % at or above -> recovering

# (minimum recovery %, status), highest first; below all -> fatigued
STATUS_RULES: Final[tuple[tuple[int, RecoveryState], ...]] = (
    (RECOVERED_THRESHOLD, RecoveryState.RECOVERED),
    (RECOVERING_THRESHOLD, RecoveryState.RECOVERING),
)

RECOVERY_COLORS: Final[Mapping[RecoveryState, str]] = MappingProxyType({
    RecoveryState.FATIGUED: "#EF4444",    # red
    RecoveryState.RECOVERING: "#F59E0B",  # amber
    RecoveryState.RECOVERED: "#22C55E",   # green
})

# Minimum number of recovered muscles before naming them as trainable
MIN_READY_MUSCLES: Final[int] = 3

# (minimum readiness score, label), highest first
READINESS_LABELS: Final[tuple[tuple[int, str], ...]] = (
    (80, "Ready to train"),
    (60, "Mostly recovered"),
    (40, "Partially recovered"),
)
READINESS_LABEL_FLOOR: Final[str] = "Needs rest"

# =============================================================================
# PROGRESSION RULES (tunable policy lives on models.PeriodizationConfig)
# =============================================================================

DEFAULT_SET_RPE: Final[float] = 7      # assumed when a set has no RPE
HIGH_CONFIDENCE_RPE: Final[float] = 7  # increases at or below this are "high"
MAX_EFFORT_RPE: Final[float] = 10      # at or above -> deload
MISSED_REPS_TOLERANCE: Final[int] = 2  # reps below target tolerated before deload

LOAD_UNIT: Final[str] = "lbs"

# Substrings (lowercase) that mark an exercise as lower body
LOWER_BODY_KEYWORDS: Final[tuple[str, ...]] = (
    "squat",
    "deadlift",
    "leg press",
    "romanian",
    "lunge",
    "hip thrust",
    "leg curl",
    "leg extension",
    "calf",
)

# =============================================================================
# 1RM / RPE
# =============================================================================

EPLEY_DIVISOR: Final[float] = 30.0

# Percentage of 1RM by RPE and reps (Tuchscherer chart).
# Rep columns 7 and 9 are not part of the chart.
RPE_TABLE: Final[Mapping[float, Mapping[int, float]]] = MappingProxyType({
    10.0: MappingProxyType({1: 100.0, 2: 95.5, 3: 92.2, 4: 89.2, 5: 86.3, 6: 83.7, 8: 78.6, 10: 73.9}),
    9.5: MappingProxyType({1: 97.8, 2: 93.9, 3: 90.7, 4: 87.8, 5: 85.0, 6: 82.4, 8: 77.4, 10: 72.3}),
    9.0: MappingProxyType({1: 95.5, 2: 92.2, 3: 89.2, 4: 86.3, 5: 83.7, 6: 81.1, 8: 75.9, 10: 70.7}),
    8.5: MappingProxyType({1: 93.9, 2: 90.7, 3: 87.8, 4: 85.0, 5: 82.4, 6: 79.9, 8: 74.5, 10: 69.4}),
    8.0: MappingProxyType({1: 92.2, 2: 89.2, 3: 86.3, 4: 83.7, 5: 81.1, 6: 78.6, 8: 73.3, 10: 68.0}),
    7.5: MappingProxyType({1: 90.7, 2: 87.8, 3: 85.0, 4: 82.4, 5: 79.9, 6: 77.4, 8: 72.0, 10: 66.7}),
    7.0: MappingProxyType({1: 89.2, 2: 86.3, 3: 83.7, 4: 81.1, 5: 78.6, 6: 76.2, 8: 70.7, 10: 65.3}),
})

BRZYCKI_MAX_REPS: Final[int] = 36  # Brzycki denominator hits zero at 37


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves towards +infinity.

    Python's round() uses banker's rounding (round(20.5) == 20); every
    rounding in the model uses this instead so 20.5 -> 21 and -2.5 -> -2.

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    return math.floor(value + 0.5)


def clamp_percent(value: float) -> int:
    """Round and clamp a percentage to [0, 100]."""
    return max(0, min(100, round_half_up(value)))
