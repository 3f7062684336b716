"""
Unit tests for the muscle recovery estimator.

Expected values are hand-computed from

    total_hours  = base_hours * (1 + volume_modifier(sets))
    recovery_pct = clamp(round(hours_since / total_hours * 100), 0, 100)

with a fixed evaluation time so results do not depend on the clock.
"""

from datetime import datetime, timedelta, timezone

import pytest

from liftload.core.config import BASE_RECOVERY_HOURS, RECOVERY_COLORS
from liftload.core.models import (
    MuscleGroup,
    MuscleRecoveryStatus,
    RecoveryState,
    WorkoutVolumeRecord,
)
from liftload.core.recovery import (
    calculate_full_body_recovery,
    calculate_muscle_recovery,
    calculate_readiness_score,
    classify_recovery,
    format_recovery_time,
    get_training_recommendation,
    readiness_label,
    recovery_color,
    volume_modifier,
)

NOW = datetime(2026, 10, 19, 12, 0)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _record(hours_ago: float, **sets: int) -> WorkoutVolumeRecord:
    return WorkoutVolumeRecord(
        timestamp=NOW - timedelta(hours=hours_ago),
        muscle_volume={MuscleGroup(name): n for name, n in sets.items()},
    )


def _status(muscle: MuscleGroup, pct: int) -> MuscleRecoveryStatus:
    state = classify_recovery(pct)
    return MuscleRecoveryStatus(
        muscle=muscle,
        fatigue_score=100 - pct,
        recovery_percent=pct,
        status=state,
        color=RECOVERY_COLORS[state],
        hours_until_recovered=0,
        last_worked=None,
        volume_score=0,
    )


def _all_at(pct: int) -> list[MuscleRecoveryStatus]:
    return [_status(m, pct) for m in MuscleGroup]


# =============================================================================
# Volume modifier
# =============================================================================


class TestVolumeModifier:
    @pytest.mark.parametrize(
        "sets,expected",
        [
            (0, 0.0),
            (5, 0.0),
            (6, 0.25),
            (11, 0.25),
            (12, 0.50),
            (17, 0.50),
            (18, 0.75),
            (23, 0.75),
        ],
    )
    def test_tiers(self, sets, expected):
        assert volume_modifier(sets) == expected

    def test_extreme_tier_matches_very_heavy(self):
        """24+ sets extend recovery no further than 18 sets."""
        assert volume_modifier(24) == volume_modifier(18) == 0.75
        assert volume_modifier(100) == 0.75


# =============================================================================
# Single muscle
# =============================================================================


class TestCalculateMuscleRecovery:
    def test_never_trained_is_recovered(self):
        for muscle in MuscleGroup:
            s = calculate_muscle_recovery(muscle, [], now=NOW)
            assert s.recovery_percent == 100
            assert s.fatigue_score == 0
            assert s.status is RecoveryState.RECOVERED
            assert s.hours_until_recovered == 0
            assert s.last_worked is None
            assert s.volume_score == 0

    def test_other_muscles_do_not_count(self):
        s = calculate_muscle_recovery(MuscleGroup.CHEST, [_record(1, back=20)], now=NOW)
        assert s.recovery_percent == 100
        assert s.last_worked is None

    def test_zero_set_entries_are_ignored(self):
        history = [_record(1, chest=0), _record(48, chest=3)]
        s = calculate_muscle_recovery(MuscleGroup.CHEST, history, now=NOW)
        assert s.recovery_percent == 100
        assert s.last_worked == NOW - timedelta(hours=48)

    def test_heavy_chest_halfway(self):
        """12 sets → 48h × 1.5 = 72h window; 36h in → 50%."""
        s = calculate_muscle_recovery(MuscleGroup.CHEST, [_record(36, chest=12)], now=NOW)
        assert s.recovery_percent == 50
        assert s.fatigue_score == 50
        assert s.status is RecoveryState.RECOVERING
        assert s.color == "#F59E0B"
        assert s.hours_until_recovered == 36
        assert s.volume_score == 12

    def test_core_uses_short_window(self):
        """Core base is 24h; 3 sets 12h ago → 50%."""
        s = calculate_muscle_recovery(MuscleGroup.CORE, [_record(12, core=3)], now=NOW)
        assert s.recovery_percent == 50
        assert s.hours_until_recovered == 12

    def test_very_heavy_back(self):
        """18 sets → 72h × 1.75 = 126h; 63h in → 50%."""
        s = calculate_muscle_recovery(MuscleGroup.BACK, [_record(63, back=18)], now=NOW)
        assert s.recovery_percent == 50
        assert s.hours_until_recovered == 63

    def test_extreme_back_same_as_very_heavy(self):
        a = calculate_muscle_recovery(MuscleGroup.BACK, [_record(63, back=18)], now=NOW)
        b = calculate_muscle_recovery(MuscleGroup.BACK, [_record(63, back=30)], now=NOW)
        assert a.recovery_percent == b.recovery_percent
        assert a.hours_until_recovered == b.hours_until_recovered

    def test_fully_recovered_caps_at_100(self):
        s = calculate_muscle_recovery(MuscleGroup.CHEST, [_record(200, chest=3)], now=NOW)
        assert s.recovery_percent == 100
        assert s.fatigue_score == 0
        assert s.hours_until_recovered == 0
        assert s.status is RecoveryState.RECOVERED
        assert s.color == "#22C55E"

    def test_future_session_clamps_to_zero(self):
        s = calculate_muscle_recovery(MuscleGroup.CHEST, [_record(-10, chest=3)], now=NOW)
        assert s.recovery_percent == 0
        assert s.fatigue_score == 100
        assert s.status is RecoveryState.FATIGUED
        assert s.hours_until_recovered == 58

    def test_most_recent_session_wins(self):
        history = [_record(12, chest=3), _record(100, chest=20)]
        for ordered in (history, list(reversed(history))):
            s = calculate_muscle_recovery(MuscleGroup.CHEST, ordered, now=NOW)
            assert s.volume_score == 3
            assert s.last_worked == NOW - timedelta(hours=12)
            assert s.recovery_percent == 25
            assert s.status is RecoveryState.FATIGUED
            assert s.color == "#EF4444"

    def test_monotonic_in_time(self):
        pcts = [
            calculate_muscle_recovery(MuscleGroup.QUADS, [_record(h, quads=10)], now=NOW).recovery_percent
            for h in (0, 6, 24, 45, 60, 90, 200)
        ]
        assert pcts == sorted(pcts)

    def test_more_sets_recover_slower(self):
        pcts = [
            calculate_muscle_recovery(MuscleGroup.QUADS, [_record(60, quads=n)], now=NOW).recovery_percent
            for n in (1, 6, 12, 18, 24, 40)
        ]
        assert pcts == sorted(pcts, reverse=True)

    def test_timezone_aware_timestamps(self):
        now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        record = WorkoutVolumeRecord(now - timedelta(hours=24), {MuscleGroup.BICEPS: 4})
        s = calculate_muscle_recovery(MuscleGroup.BICEPS, [record], now=now)
        assert s.recovery_percent == 50

    def test_defaults_to_current_time(self):
        record = WorkoutVolumeRecord(datetime.now() - timedelta(days=30), {MuscleGroup.CHEST: 10})
        s = calculate_muscle_recovery(MuscleGroup.CHEST, [record])
        assert s.status is RecoveryState.RECOVERED

    def test_does_not_mutate_history(self):
        history = [_record(100, chest=20), _record(12, chest=3)]
        snapshot = list(history)
        calculate_muscle_recovery(MuscleGroup.CHEST, history, now=NOW)
        assert history == snapshot


class TestClassifyRecovery:
    @pytest.mark.parametrize(
        "pct,expected",
        [
            (100, RecoveryState.RECOVERED),
            (80, RecoveryState.RECOVERED),
            (79, RecoveryState.RECOVERING),
            (40, RecoveryState.RECOVERING),
            (39, RecoveryState.FATIGUED),
            (0, RecoveryState.FATIGUED),
        ],
    )
    def test_thresholds(self, pct, expected):
        assert classify_recovery(pct) is expected

    def test_colors(self):
        assert recovery_color(85) == "#22C55E"
        assert recovery_color(50) == "#F59E0B"
        assert recovery_color(10) == "#EF4444"


# =============================================================================
# Full body
# =============================================================================


class TestFullBodyRecovery:
    def test_one_status_per_muscle_in_enum_order(self):
        history = [_record(10, core=5, quads=12, chest=8)]
        statuses = calculate_full_body_recovery(history, now=NOW)
        assert [s.muscle for s in statuses] == list(MuscleGroup)
        assert len(statuses) == 11

    def test_empty_history_all_recovered(self):
        statuses = calculate_full_body_recovery([], now=NOW)
        assert all(s.status is RecoveryState.RECOVERED for s in statuses)

    def test_matches_single_muscle(self):
        history = [_record(30, chest=12, triceps=9), _record(50, back=15)]
        statuses = calculate_full_body_recovery(history, now=NOW)
        for s in statuses:
            assert s == calculate_muscle_recovery(s.muscle, history, now=NOW)

    def test_base_table_covers_every_muscle(self):
        assert set(BASE_RECOVERY_HOURS) == set(MuscleGroup)


# =============================================================================
# Readiness score
# =============================================================================


class TestReadinessScore:
    def test_empty_is_fully_ready(self):
        assert calculate_readiness_score([]) == 100

    def test_mean_of_recovery(self):
        statuses = [_status(MuscleGroup.CHEST, 20), _status(MuscleGroup.BACK, 60)]
        assert calculate_readiness_score(statuses) == 40

    def test_half_rounds_up(self):
        statuses = [_status(MuscleGroup.CHEST, 50), _status(MuscleGroup.BACK, 51)]
        assert calculate_readiness_score(statuses) == 51

    def test_all_recovered_is_high(self):
        assert calculate_readiness_score(_all_at(80)) >= 80
        assert calculate_readiness_score(calculate_full_body_recovery([], now=NOW)) == 100

    def test_all_fatigued_is_low(self):
        assert calculate_readiness_score(_all_at(39)) < 40
        everything = _record(0, **{m.value: 10 for m in MuscleGroup})
        statuses = calculate_full_body_recovery([everything], now=NOW)
        assert calculate_readiness_score(statuses) == 0

    @pytest.mark.parametrize(
        "score,label",
        [
            (100, "Ready to train"),
            (80, "Ready to train"),
            (79, "Mostly recovered"),
            (60, "Mostly recovered"),
            (40, "Partially recovered"),
            (39, "Needs rest"),
        ],
    )
    def test_labels(self, score, label):
        assert readiness_label(score) == label


# =============================================================================
# Recommendation
# =============================================================================


class TestTrainingRecommendation:
    def test_nothing_fatigued_full_body(self):
        statuses = [_status(m, 60) for m in MuscleGroup]  # all recovering
        rec = get_training_recommendation(statuses)
        assert "Full body" in rec.recommendation
        assert rec.avoid_muscles == ()
        assert rec.ready_muscles == ()

    def test_names_first_three_ready_in_order(self):
        history = [_record(1, quads=12, hamstrings=9)]
        statuses = calculate_full_body_recovery(history, now=NOW)
        rec = get_training_recommendation(statuses)
        assert rec.recommendation == "Train: chest, back, shoulders"
        assert rec.avoid_muscles == (MuscleGroup.QUADS, MuscleGroup.HAMSTRINGS)
        assert MuscleGroup.QUADS not in rec.ready_muscles
        assert len(rec.ready_muscles) == 9

    def test_ordering_follows_input_not_score(self):
        statuses = [
            _status(MuscleGroup.CALVES, 85),
            _status(MuscleGroup.CHEST, 100),
            _status(MuscleGroup.CORE, 90),
            _status(MuscleGroup.BACK, 95),
            _status(MuscleGroup.QUADS, 10),
        ]
        rec = get_training_recommendation(statuses)
        assert rec.recommendation == "Train: calves, chest, core"

    def test_rest_when_few_ready(self):
        statuses = [
            _status(MuscleGroup.CHEST, 90),
            _status(MuscleGroup.BACK, 90),
            _status(MuscleGroup.QUADS, 10),
            _status(MuscleGroup.GLUTES, 50),
        ]
        rec = get_training_recommendation(statuses)
        assert "rest day" in rec.recommendation
        assert rec.ready_muscles == (MuscleGroup.CHEST, MuscleGroup.BACK)
        assert rec.avoid_muscles == (MuscleGroup.QUADS,)

    def test_empty_list_full_body(self):
        rec = get_training_recommendation([])
        assert "Full body" in rec.recommendation


# =============================================================================
# Formatting
# =============================================================================


class TestFormatRecoveryTime:
    @pytest.mark.parametrize(
        "hours,expected",
        [
            (0, "Recovered"),
            (-3, "Recovered"),
            (0.5, "Almost ready"),
            (5, "5h"),
            (23.4, "23h"),
            (24, "1d"),
            (48, "2d"),
            (50, "2d 2h"),
            (75, "3d 3h"),
        ],
    )
    def test_format(self, hours, expected):
        assert format_recovery_time(hours) == expected
