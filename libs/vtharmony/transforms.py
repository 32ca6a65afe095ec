"""Post-processing for generated progressions: looping, transposition, mood."""

from __future__ import annotations

import math
from typing import List, Sequence

from .chord_utils import Chord, ChordQuality, transpose_chord_symbol
from .models import ChordEvent, MoodAnalysis


def progression_span(progression: Sequence[ChordEvent]) -> float:
    """Total beats covered by the chord durations."""
    return sum(event.duration for event in progression)


def extend_progression(
    progression: Sequence[ChordEvent],
    target_bars: int,
    beats_per_bar: float = 4,
) -> List[ChordEvent]:
    """Loop ``progression`` in whole copies until it covers ``target_bars``.

    Copies are laid end to end starting at the first chord's start beat.
    The last copy may overshoot the target; chords are never cut short.
    A 16-beat, 4-chord loop extended to 8 bars of 4/4 yields 8 chords.
    """
    if target_bars <= 0:
        raise ValueError(f"target_bars must be positive, got {target_bars}")
    if beats_per_bar <= 0:
        raise ValueError(f"beats_per_bar must be positive, got {beats_per_bar}")
    if not progression:
        return []

    span = progression_span(progression)
    copies = max(1, math.ceil(target_bars * beats_per_bar / span))

    extended: List[ChordEvent] = []
    cursor = progression[0].start_beat
    for _ in range(copies):
        for event in progression:
            extended.append(event.model_copy(update={"start_beat": cursor}))
            cursor += event.duration
    return extended


def transpose_progression(
    progression: Sequence[ChordEvent],
    semitones: int,
) -> List[ChordEvent]:
    """Shift every chord root by ``semitones``; timing is left untouched."""
    return [
        event.model_copy(update={"chord": transpose_chord_symbol(event.chord, semitones)})
        for event in progression
    ]


def analyze_progression_mood(progression: Sequence[ChordEvent]) -> MoodAnalysis:
    """Classify a progression as dark, bright or neutral and rate its tension.

    Minor and diminished chords vote dark, major (and augmented) chords vote
    bright; a tie is neutral. Tension is the percentage of diminished chords.
    """
    if not progression:
        return MoodAnalysis(mood="neutral", tension=0.0)

    qualities = [Chord.parse(event.chord).quality for event in progression]
    diminished = sum(1 for q in qualities if q is ChordQuality.DIMINISHED)
    dark = diminished + sum(1 for q in qualities if q is ChordQuality.MINOR)
    bright = len(qualities) - dark

    if dark > bright:
        mood = "dark"
    elif bright > dark:
        mood = "bright"
    else:
        mood = "neutral"

    tension = 100.0 * diminished / len(qualities)
    return MoodAnalysis(mood=mood, tension=tension)


__all__ = [
    "progression_span",
    "extend_progression",
    "transpose_progression",
    "analyze_progression_mood",
]
