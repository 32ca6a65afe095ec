"""Vibes Harmony

Chord progression generation from templates, genre presets and weighted
random walks, plus transposition, looping and mood analysis.
"""

__version__ = "0.1.0"

from .errors import (
    TheoryError,
    InvalidNoteName,
    InvalidDegree,
    UnknownTemplate,
    UnknownScale,
)
from .chord_utils import (
    ChordQuality,
    Chord,
    NOTE_NAMES,
    SCALE_PATTERNS,
    DEGREE_QUALITIES,
    note_name_to_offset,
    offset_to_note_name,
    note_name_to_pitch,
    pitch_class,
    get_scale_pattern,
    get_scale_pitch_classes,
    is_in_scale,
    scale_degree_of,
    chord_for_degree,
    degree_to_chord,
    transpose_chord_symbol,
)
from .models import (
    ChordEvent,
    ProgressionCandidate,
    MoodAnalysis,
    BpmSignature,
    SwingProfile,
    ArrangementNorms,
    Guardrails,
    StylePrior,
)
from .templates import ProgressionTemplate, PROGRESSION_TEMPLATES, get_template
from .generator import (
    GENRE_VARIANTS,
    assemble_progression,
    generate_progression_from_template,
    generate_basic_progression,
    generate_pop_progression,
    generate_edm_progression,
    generate_trance_progression,
    generate_jazz_progression,
    generate_random_progression,
)
from .transforms import (
    progression_span,
    extend_progression,
    transpose_progression,
    analyze_progression_mood,
)
from .candidates import generate_progression_candidates

__all__ = [
    # Errors
    "TheoryError",
    "InvalidNoteName",
    "InvalidDegree",
    "UnknownTemplate",
    "UnknownScale",
    # Pitch/chord utilities
    "ChordQuality",
    "Chord",
    "NOTE_NAMES",
    "SCALE_PATTERNS",
    "DEGREE_QUALITIES",
    "note_name_to_offset",
    "offset_to_note_name",
    "note_name_to_pitch",
    "pitch_class",
    "get_scale_pattern",
    "get_scale_pitch_classes",
    "is_in_scale",
    "scale_degree_of",
    "chord_for_degree",
    "degree_to_chord",
    "transpose_chord_symbol",
    # Models
    "ChordEvent",
    "ProgressionCandidate",
    "MoodAnalysis",
    "BpmSignature",
    "SwingProfile",
    "ArrangementNorms",
    "Guardrails",
    "StylePrior",
    # Templates and generators
    "ProgressionTemplate",
    "PROGRESSION_TEMPLATES",
    "get_template",
    "GENRE_VARIANTS",
    "assemble_progression",
    "generate_progression_from_template",
    "generate_basic_progression",
    "generate_pop_progression",
    "generate_edm_progression",
    "generate_trance_progression",
    "generate_jazz_progression",
    "generate_random_progression",
    # Post-processing
    "progression_span",
    "extend_progression",
    "transpose_progression",
    "analyze_progression_mood",
    # Candidates
    "generate_progression_candidates",
]
