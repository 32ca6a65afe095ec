"""Key-independent analyzers over a motif's note sequence.

Each analyzer returns a 0-100 score. Notes are read in onset order. Inputs
too short to judge get a fixed neutral value instead of an error.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .models import Note

NEUTRAL = 50.0
UNIFORM_RHYTHM = 35.0


def ordered_notes(notes: Sequence[Note]) -> List[Note]:
    """Notes sorted by onset; ties keep their given order."""
    return sorted(notes, key=lambda n: n.time)


def pitch_array(notes: Sequence[Note]) -> np.ndarray:
    return np.array([n.pitch for n in ordered_notes(notes)], dtype=int)


def clamp_score(value: float) -> float:
    return float(round(min(100.0, max(0.0, float(value))), 1))


def analyze_interval_variety(notes: Sequence[Note]) -> float:
    """Share of distinct non-unison interval sizes between consecutive notes.

    Fewer than two notes is neutral (50). A line whose steps are all the
    same size, repeated notes included, has no variety (0).
    """
    pitches = pitch_array(notes)
    if len(pitches) < 2:
        return NEUTRAL

    intervals = np.abs(np.diff(pitches))
    if np.all(intervals == 0):
        return 0.0
    if len(intervals) > 1 and np.all(intervals == intervals[0]):
        return 0.0

    distinct = {int(i) for i in intervals if i != 0}
    max_unique = min(len(intervals), 7)
    return clamp_score(100.0 * len(distinct) / max_unique)


def analyze_rhythmic_interest(notes: Sequence[Note]) -> float:
    """Duration variety plus light syncopation and density checks.

    Duration variety dominates: a line of equal durations scores
    UNIFORM_RHYTHM whatever its onsets, below any line whose durations vary.
    """
    if not notes:
        return 0.0
    if len(notes) == 1:
        return 30.0

    ordered = ordered_notes(notes)
    durations = np.array([n.duration for n in ordered], dtype=float)

    if np.allclose(durations, durations[0]):
        return UNIFORM_RHYTHM

    # Coefficient of variation of durations
    dispersion = float(np.std(durations) / np.mean(durations))
    score = 40.0 + 40.0 * min(dispersion, 1.0)

    offbeat = sum(1 for n in ordered if n.time % 1 > 0.01)
    if 0.2 <= offbeat / len(ordered) <= 0.6:
        score += 10.0

    span = max(n.end for n in ordered) - ordered[0].time
    if span > 0 and 0.5 <= len(ordered) / span <= 4:
        score += 10.0

    return clamp_score(score)


def analyze_contour(notes: Sequence[Note]) -> float:
    """Score melodic shape: directional lines and arches beat zig-zags.

    Two notes or fewer cannot show a shape and return 50.
    """
    pitches = pitch_array(notes)
    if len(pitches) < 3:
        return NEUTRAL

    diffs = np.diff(pitches)
    ascending = int(np.sum(diffs > 0))
    descending = int(np.sum(diffs < 0))

    score = NEUTRAL

    moving = ascending + descending
    if moving and max(ascending, descending) / moving >= 0.6:
        score += 20.0

    direction_changes = int(np.sum(diffs[1:] * diffs[:-1] < 0))
    change_ratio = direction_changes / (len(pitches) - 2)
    if 0.2 <= change_ratio <= 0.5:
        score += 15.0
    elif change_ratio > 0.75:
        score -= 10.0

    midpoint = len(pitches) // 2
    first, second = pitches[:midpoint], pitches[midpoint:]
    first_trend = int(first[-1] - first[0]) if len(first) > 1 else 0
    second_trend = int(second[-1] - second[0]) if len(second) > 1 else 0
    if (first_trend > 2 and second_trend < -2) or (first_trend < -2 and second_trend > 2):
        score += 15.0

    return clamp_score(score)


def analyze_repetition_balance(notes: Sequence[Note]) -> float:
    """Reward some pitch repetition, penalize none and total repetition.

    Under four notes there is too little material and the result is 50.
    """
    pitches = pitch_array(notes)
    if len(pitches) < 4:
        return NEUTRAL

    unique = len(set(pitches.tolist()))
    if unique == 1:
        return 20.0

    repeated_ratio = (len(pitches) - unique) / len(pitches)
    if repeated_ratio == 0:
        score = 60.0
        # Repeated interval cells still give an all-new line a hook
        intervals = np.diff(pitches).tolist()
        interval_ratio = (len(intervals) - len(set(intervals))) / len(intervals)
        if 0.2 <= interval_ratio <= 0.6:
            score += 10.0
    elif repeated_ratio < 0.2:
        # Any returning pitch outranks an all-new line (at most 70)
        score = 75.0 + 75.0 * repeated_ratio
    elif repeated_ratio <= 0.6:
        score = 90.0
    else:
        score = max(30.0, 90.0 - 100.0 * (repeated_ratio - 0.6))

    return clamp_score(score)


__all__ = [
    "ordered_notes",
    "pitch_array",
    "clamp_score",
    "analyze_interval_variety",
    "analyze_rhythmic_interest",
    "analyze_contour",
    "analyze_repetition_balance",
]
