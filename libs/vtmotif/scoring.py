"""Motif scoring: memorability, singability, tension/relief, novelty, genre fit.

Every scorer returns a value clamped to [0, 100]. The weighted overall score
and the four analyzer readings are bundled in a :class:`MotifScoreReport`.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from vtcore.logging import get_logger, traced
from vtharmony.chord_utils import get_scale_pattern, scale_degree_of
from vtharmony.models import StylePrior

from .analyzers import (
    NEUTRAL,
    analyze_contour,
    analyze_interval_variety,
    analyze_repetition_balance,
    analyze_rhythmic_interest,
    clamp_score,
    ordered_notes,
    pitch_array,
)
from .models import MotifBreakdown, MotifScoreReport, MotifSeed, ScoreWeights

logger = get_logger(__name__)

SINGLE_NOTE_SINGABILITY = 70.0

DRUM_GENRES = ("techno", "house", "dnb")
MELODIC_GENRES = ("trance", "pop", "progressive")
MINIMAL_GENRES = ("minimal", "ambient", "techno")

# Interval classes heard as spicy: minor 2nd, tritone, minor/major 7th
UNUSUAL_INTERVALS = frozenset({1, 6, 10, 11})


def _pitch_range(pitches: np.ndarray) -> int:
    return int(pitches.max() - pitches.min())


def score_memorability(motif: MotifSeed) -> float:
    """Clear contour and balanced repetition, minus length and range penalties."""
    pitches = pitch_array(motif.notes)
    if len(pitches) == 0:
        return 0.0

    raw = 0.4 * analyze_contour(motif.notes) + 0.6 * analyze_repetition_balance(motif.notes)

    length_penalty = 2.0 * (len(pitches) - 16) if len(pitches) > 16 else 0.0
    span = _pitch_range(pitches)
    range_penalty = 1.5 * (span - 12) if span > 12 else 0.0

    return clamp_score(raw - length_penalty - range_penalty)


def score_singability(motif: MotifSeed) -> float:
    """Stepwise motion, a compact range and room to breathe.

    A single note is trivially singable but says nothing melodic: 70.
    """
    notes = ordered_notes(motif.notes)
    if not notes:
        return 0.0
    if len(notes) == 1:
        return SINGLE_NOTE_SINGABILITY

    pitches = np.array([n.pitch for n in notes], dtype=int)
    intervals = np.abs(np.diff(pitches))

    score = 70.0

    # Leaps beyond a fifth cost once, beyond an octave twice
    leaps = int(np.sum(intervals > 7) + np.sum(intervals > 12))
    score -= 40.0 * leaps / len(intervals)
    score += 10.0 * float(np.mean(intervals <= 2))

    span = _pitch_range(pitches)
    if span <= 12:
        score += 15.0
    elif span <= 19:
        score += 5.0
    else:
        score -= 15.0

    total_span = max(n.end for n in notes) - notes[0].time
    rest_per_note = (total_span - sum(n.duration for n in notes)) / len(notes)
    if rest_per_note >= 0.25:
        score += 10.0

    return clamp_score(score)


def score_tension_relief(motif: MotifSeed) -> float:
    """Reward a little chromatic colour and an ending on a stable tone.

    The last note counts most: tonic > fifth > third > other scale tones, and
    a leading tone left hanging is penalized. Chromatic colour is judged from
    three notes up. An empty motif is neutral (50).
    """
    notes = ordered_notes(motif.notes)
    if not notes:
        return NEUTRAL

    degrees = [scale_degree_of(n.pitch, motif.key, motif.scale) for n in notes]
    score = NEUTRAL

    if len(degrees) >= 3:
        chromatic_ratio = sum(1 for d in degrees if d is None) / len(degrees)
        if 0.1 <= chromatic_ratio <= 0.3:
            score += 25.0
        elif chromatic_ratio > 0.5:
            score -= 15.0

    final = degrees[-1]
    if final is not None:
        score += 15.0
        pattern = get_scale_pattern(motif.scale)
        if final == 1:
            score += 12.0
        elif final == 5:
            score += 8.0
        elif final == 3:
            score += 4.0
        elif final == 7 and pattern[6] == 11:
            score -= 10.0

    return clamp_score(score)


def score_novelty(motif: MotifSeed) -> float:
    """Joint variation in pitch, interval, duration and velocity."""
    notes = ordered_notes(motif.notes)
    if not notes:
        return 0.0

    score = 0.35 * analyze_interval_variety(notes) + 0.25 * analyze_rhythmic_interest(notes)

    if len(notes) > 1:
        pitches = [n.pitch for n in notes]
        score += 20.0 * (len(set(pitches)) - 1) / (len(notes) - 1)

        velocities = np.array([n.velocity for n in notes], dtype=float)
        if velocities.mean() > 0:
            score += 20.0 * min(1.0, 5.0 * float(velocities.std() / velocities.mean()))

        intervals = np.abs(np.diff(pitches)) % 12
        unusual = sum(1 for i in intervals if int(i) in UNUSUAL_INTERVALS)
        if 0.1 <= unusual / len(intervals) <= 0.4:
            score += 10.0

    return clamp_score(score)


def score_genre_fit(motif: MotifSeed, style_prior: StylePrior) -> float:
    """How well the motif's type and complexity suit the energy profile."""
    profile = style_prior.guardrails.energy_profile.lower()
    score = 60.0

    if motif.type == "rhythmic" and any(g in profile for g in DRUM_GENRES):
        score += 20.0
    if motif.type == "melodic" and any(g in profile for g in MELODIC_GENRES):
        score += 20.0

    complexity = (
        analyze_interval_variety(motif.notes) + analyze_rhythmic_interest(motif.notes)
    ) / 2
    if any(g in profile for g in MINIMAL_GENRES) and complexity < 50:
        score += 15.0

    return clamp_score(score)


def calculate_motif_breakdown(motif: MotifSeed) -> MotifBreakdown:
    return MotifBreakdown(
        interval_variety=analyze_interval_variety(motif.notes),
        rhythmic_interest=analyze_rhythmic_interest(motif.notes),
        contour=analyze_contour(motif.notes),
        repetition_balance=analyze_repetition_balance(motif.notes),
    )


def calculate_motif_score(
    motif: MotifSeed,
    style_prior: StylePrior,
    weights: Optional[ScoreWeights] = None,
) -> MotifScoreReport:
    """Score a motif on every axis and combine into a weighted overall.

    Args:
        motif: Motif to score
        style_prior: Style whose energy profile drives genre fit
        weights: Sub-score weights; normalized by their sum

    Returns:
        Report with the five sub-scores, overall and analyzer breakdown
    """
    weights = weights or ScoreWeights()

    with traced("vtmotif.calculate_motif_score", motif_id=motif.id):
        memorability = score_memorability(motif)
        singability = score_singability(motif)
        tension_relief = score_tension_relief(motif)
        novelty = score_novelty(motif)
        genre_fit = score_genre_fit(motif, style_prior)

        overall = clamp_score(
            (
                memorability * weights.memorability
                + singability * weights.singability
                + tension_relief * weights.tension_relief
                + novelty * weights.novelty
                + genre_fit * weights.genre_fit
            )
            / weights.total
        )
        logger.debug(
            f"Motif {motif.id} scored {overall}",
            extra={"motif_id": motif.id, "overall": overall},
        )

        return MotifScoreReport(
            motif_id=motif.id,
            memorability=memorability,
            singability=singability,
            tension_relief=tension_relief,
            novelty=novelty,
            genre_fit=genre_fit,
            overall=overall,
            breakdown=calculate_motif_breakdown(motif),
        )


def rank_motifs(
    motifs: Sequence[MotifSeed],
    style_prior: StylePrior,
    weights: Optional[ScoreWeights] = None,
) -> List[Tuple[MotifSeed, MotifScoreReport]]:
    """Score every motif and sort best first (stable on ties)."""
    scored = [(motif, calculate_motif_score(motif, style_prior, weights)) for motif in motifs]
    return sorted(scored, key=lambda pair: pair[1].overall, reverse=True)


__all__ = [
    "score_memorability",
    "score_singability",
    "score_tension_relief",
    "score_novelty",
    "score_genre_fit",
    "calculate_motif_breakdown",
    "calculate_motif_score",
    "rank_motifs",
]
