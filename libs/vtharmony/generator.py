"""Chord progression generators.

Template, genre and randomized generators all funnel into one assembly
routine so timing is laid out the same way everywhere: chords start at beat
0 and each one begins where the previous one ends.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from .chord_utils import degree_to_chord
from .errors import UnknownTemplate
from .models import ChordEvent
from .templates import get_template


@dataclass(frozen=True)
class GenreVariant:
    """Which template a genre variant plays, in which scale, at what pace."""

    template: str
    scale: str
    beats_per_chord: float = 4


GENRE_VARIANTS: Mapping[str, Mapping[str, GenreVariant]] = MappingProxyType(
    {
        "pop": MappingProxyType(
            {
                "standard": GenreVariant("I-V-vi-IV", "major"),
                "emotional": GenreVariant("vi-IV-I-V", "major"),
                "50s": GenreVariant("I-vi-IV-V", "major"),
            }
        ),
        "edm": MappingProxyType(
            {
                "dark": GenreVariant("i-VI-III-VII", "minor"),
                "driving": GenreVariant("i-VII-VI-VII", "minor"),
                "deep": GenreVariant("i-iv-VII-III", "minor"),
            }
        ),
        "trance": MappingProxyType(
            {
                "epic": GenreVariant("i-VI-VII-i", "minor", 8),
                "uplifting": GenreVariant("vi-IV-I-V", "major", 8),
            }
        ),
        "jazz": MappingProxyType(
            {
                "ii-V-I": GenreVariant("ii-V-I", "major"),
                "turnaround": GenreVariant("I-vi-ii-V", "major"),
            }
        ),
    }
)

# Relative pull of each degree in random progressions; IV, V and vi dominate
DEGREE_WEIGHTS: Dict[int, float] = {1: 1.0, 2: 0.8, 3: 0.5, 4: 1.5, 5: 1.5, 6: 1.2, 7: 0.3}


def _check_beats(beats_per_chord: float) -> None:
    if beats_per_chord <= 0:
        raise ValueError(f"beats_per_chord must be positive, got {beats_per_chord}")


def assemble_progression(
    degrees: Sequence[int],
    key: str,
    scale: str = "major",
    beats_per_chord: float = 4,
) -> List[ChordEvent]:
    """Realize ``degrees`` in ``key``/``scale`` as back-to-back chord events."""
    _check_beats(beats_per_chord)
    return [
        ChordEvent(
            start_beat=index * beats_per_chord,
            chord=degree_to_chord(degree, key, scale),
            duration=beats_per_chord,
        )
        for index, degree in enumerate(degrees)
    ]


def generate_progression_from_template(
    template_name: str,
    key: str,
    scale: str = "major",
    beats_per_chord: float = 4,
) -> List[ChordEvent]:
    """Generate a chord progression from a catalog template.

    Raises:
        UnknownTemplate: if ``template_name`` is not in the catalog.
    """
    template = get_template(template_name)
    return assemble_progression(template.degrees, key, scale, beats_per_chord)


def _generate_genre(
    genre: str,
    key: str,
    variant: str,
    beats_per_chord: Optional[float],
) -> List[ChordEvent]:
    variants = GENRE_VARIANTS[genre]
    preset = variants.get(variant)
    if preset is None:
        raise UnknownTemplate(variant, kind=f"{genre} variant")
    beats = preset.beats_per_chord if beats_per_chord is None else beats_per_chord
    return generate_progression_from_template(preset.template, key, preset.scale, beats)


def generate_basic_progression(
    key: str,
    scale: str = "major",
    beats_per_chord: float = 4,
) -> List[ChordEvent]:
    """I-IV-V-I."""
    return generate_progression_from_template("I-IV-V-I", key, scale, beats_per_chord)


def generate_pop_progression(
    key: str,
    variant: str = "standard",
    beats_per_chord: Optional[float] = None,
) -> List[ChordEvent]:
    return _generate_genre("pop", key, variant, beats_per_chord)


def generate_edm_progression(
    key: str,
    variant: str = "driving",
    beats_per_chord: Optional[float] = None,
) -> List[ChordEvent]:
    """House/EDM loops, always realized in the minor scale."""
    return _generate_genre("edm", key, variant, beats_per_chord)


def generate_trance_progression(
    key: str,
    variant: str = "epic",
    beats_per_chord: Optional[float] = None,
) -> List[ChordEvent]:
    """Trance loops; 8 beats per chord unless overridden."""
    return _generate_genre("trance", key, variant, beats_per_chord)


def generate_jazz_progression(
    key: str,
    variant: str = "ii-V-I",
    beats_per_chord: Optional[float] = None,
) -> List[ChordEvent]:
    return _generate_genre("jazz", key, variant, beats_per_chord)


def generate_random_progression(
    key: str,
    scale: str = "minor",
    chord_count: int = 4,
    beats_per_chord: float = 4,
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[ChordEvent]:
    """Generate a random progression that opens on the tonic.

    Following chords are drawn from :data:`DEGREE_WEIGHTS`, never repeating
    the chord just played. Randomness comes from ``rng`` when given,
    otherwise from a fresh generator seeded with ``seed``; module-level
    random state is never touched.

    Args:
        key: Tonic note name
        scale: Scale used to realize degrees
        chord_count: Exact number of chords to return
        beats_per_chord: Duration of every chord
        seed: Seed for a private generator (ignored when ``rng`` is given)
        rng: Explicit numpy random generator
    """
    if chord_count <= 0:
        raise ValueError(f"chord_count must be positive, got {chord_count}")
    _check_beats(beats_per_chord)
    if rng is None:
        rng = np.random.default_rng(seed)

    degrees = [1]
    while len(degrees) < chord_count:
        choices = [d for d in DEGREE_WEIGHTS if d != degrees[-1]]
        weights = np.array([DEGREE_WEIGHTS[d] for d in choices], dtype=float)
        degrees.append(int(rng.choice(choices, p=weights / weights.sum())))

    return assemble_progression(degrees, key, scale, beats_per_chord)


__all__ = [
    "GenreVariant",
    "GENRE_VARIANTS",
    "DEGREE_WEIGHTS",
    "assemble_progression",
    "generate_progression_from_template",
    "generate_basic_progression",
    "generate_pop_progression",
    "generate_edm_progression",
    "generate_trance_progression",
    "generate_jazz_progression",
    "generate_random_progression",
]
