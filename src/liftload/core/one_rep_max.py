"""
One-rep-max and RPE utilities.

  Epley (1985):
    1RM = w × (1 + r/30)
    The inverse gives the working weight for a target rep count.

  Tuchscherer RPE chart:
    %1RM by RPE (7.0–10.0, half steps) and reps (1–6, 8, 10).
    Lookups snap to the nearest charted rep count.

  Brzycki (1993) and Lander (1985):
    Alternative estimators reported next to Epley for comparison.
    Both diverge as reps approach 37, so Brzycki is capped there.
"""

from __future__ import annotations

from .config import BRZYCKI_MAX_REPS, EPLEY_DIVISOR, RPE_TABLE, round_half_up

# ---------------------------------------------------------------------------
# Epley
# ---------------------------------------------------------------------------


def calculate_1rm(weight: float, reps: int) -> float:
    """
    Estimate 1RM with the Epley formula.

    A single is its own 1RM; otherwise the estimate is rounded to a whole
    number.

    Args:
        weight: Weight lifted
        reps: Reps completed

    Returns:
        Estimated one-rep max
    """
    if reps == 1:
        return weight
    return round_half_up(weight * (1 + reps / EPLEY_DIVISOR))


def calculate_weight_for_reps(one_rm: float, target_reps: int) -> int:
    """Working weight for ``target_reps`` reps given a 1RM (inverse Epley)."""
    return round_half_up(one_rm / (1 + target_reps / EPLEY_DIVISOR))


# ---------------------------------------------------------------------------
# RPE chart
# ---------------------------------------------------------------------------


def _nearest_rep_column(row_reps: list[int], reps: float) -> int:
    """
    Charted rep count closest to ``reps``.

    Equidistant candidates resolve to the lower rep count (7 -> 6, 9 -> 8).
    """
    return min(sorted(row_reps), key=lambda r: abs(r - reps))


def get_rpe_percentage(rpe: float, reps: float) -> float | None:
    """
    Percentage of 1RM for a given RPE and rep count.

    Args:
        rpe: Rate of perceived exertion; must be a charted row (7.0–10.0 in
            0.5 steps)
        reps: Target reps; snapped to the nearest charted rep count

    Returns:
        Percentage (e.g. 81.1), or None if the RPE has no row in the chart
    """
    row = RPE_TABLE.get(rpe)
    if row is None:
        return None
    return row[_nearest_rep_column(list(row), reps)]


def get_weight_for_rpe(one_rm: float, target_rpe: float, target_reps: float) -> int | None:
    """
    Working weight that should feel like ``target_rpe`` for ``target_reps``.

    Returns:
        Rounded weight, or None if the RPE has no row in the chart
    """
    pct = get_rpe_percentage(target_rpe, target_reps)
    if pct is None:
        return None
    return round_half_up(one_rm * pct / 100)


# ---------------------------------------------------------------------------
# Multi-formula comparison
# ---------------------------------------------------------------------------


def estimate_1rm_formulas(weight: float, reps: int) -> dict[str, float]:
    """
    Estimate 1RM with several formulas.

    Args:
        weight: Weight lifted
        reps: Reps completed

    Returns:
        Dict with keys epley, brzycki, lander, average (each rounded to 0.1).
        For reps <= 1 every key equals ``weight``.
    """
    if reps <= 1:
        return {"epley": weight, "brzycki": weight, "lander": weight, "average": weight}

    epley = weight * (1 + reps / EPLEY_DIVISOR)
    if reps <= BRZYCKI_MAX_REPS:
        brzycki = weight * (36 / (37 - reps))
    else:
        brzycki = weight * 1.5
    lander = (100 * weight) / (101.3 - 2.67123 * reps)
    average = (epley + brzycki + lander) / 3

    return {
        "epley": round_half_up(epley * 10) / 10,
        "brzycki": round_half_up(brzycki * 10) / 10,
        "lander": round_half_up(lander * 10) / 10,
        "average": round_half_up(average * 10) / 10,
    }
