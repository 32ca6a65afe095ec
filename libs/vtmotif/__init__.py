"""Vibes Motif Scoring

Analyzers and scorers that rate short melodic ideas for ranking.
"""

__version__ = "0.1.0"

from .models import Note, MotifSeed, MotifBreakdown, MotifScoreReport, ScoreWeights
from .analyzers import (
    analyze_interval_variety,
    analyze_rhythmic_interest,
    analyze_contour,
    analyze_repetition_balance,
)
from .scoring import (
    score_memorability,
    score_singability,
    score_tension_relief,
    score_novelty,
    score_genre_fit,
    calculate_motif_breakdown,
    calculate_motif_score,
    rank_motifs,
)

__all__ = [
    # Models
    "Note",
    "MotifSeed",
    "MotifBreakdown",
    "MotifScoreReport",
    "ScoreWeights",
    # Analyzers
    "analyze_interval_variety",
    "analyze_rhythmic_interest",
    "analyze_contour",
    "analyze_repetition_balance",
    # Scorers
    "score_memorability",
    "score_singability",
    "score_tension_relief",
    "score_novelty",
    "score_genre_fit",
    "calculate_motif_breakdown",
    "calculate_motif_score",
    "rank_motifs",
]
