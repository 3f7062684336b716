"""
Read-only JSONL history files.

Two formats, one JSON object per line:

- volume history: {"timestamp": ..., "muscle_volume": {"chest": 12, ...}}
- exercise history: {"exercise_name": ..., "date": ..., "sets": [...]}

Blank lines are skipped.  Any bad line aborts the load with a
ValidationError naming the file and line number.
"""

import json
from pathlib import Path
from typing import Any, Callable, TypeVar

from ..core.models import ExerciseHistory, WorkoutVolumeRecord
from .serializers import ValidationError, dict_to_exercise_history, dict_to_volume_record

T = TypeVar("T")


def _load_jsonl(path: str | Path, convert: Callable[[Any], T]) -> list[T]:
    """
    Parse every non-blank line of a JSONL file with ``convert``.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If a line is not valid JSON or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"History file not found: {path}")

    records: list[T] = []
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(convert(json.loads(line)))
            except (json.JSONDecodeError, ValidationError) as e:
                raise ValidationError(
                    f"Error parsing line {line_num} in {path}: {e}"
                ) from e
    return records


def _sort_by(items: list[T], key: Callable[[T], Any], path: Path | str) -> None:
    """Sort in place by timestamp, rejecting files that mix naive and aware times."""
    try:
        items.sort(key=key)
    except TypeError as e:
        raise ValidationError(
            f"{path} mixes timestamps with and without a UTC offset"
        ) from e


def load_volume_history(path: str | Path) -> list[WorkoutVolumeRecord]:
    """
    Load per-session muscle volume records.

    Args:
        path: Path to the JSONL file

    Returns:
        Records sorted oldest first
    """
    records = _load_jsonl(path, dict_to_volume_record)
    _sort_by(records, lambda r: r.timestamp, path)
    return records


def load_exercise_history(path: str | Path) -> list[ExerciseHistory]:
    """
    Load per-exercise session logs.

    Args:
        path: Path to the JSONL file

    Returns:
        Entries sorted oldest first
    """
    entries = _load_jsonl(path, dict_to_exercise_history)
    _sort_by(entries, lambda e: e.date, path)
    return entries
