"""Pitch and chord utilities for the harmony generators.

Provides note-name parsing, scale patterns, scale-degree to chord mapping and
chord-symbol transposition. Chord symbols are ``<Root><quality>`` strings such
as ``"Gmaj"`` or ``"F#min"``; roots are always spelled with sharps.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import InvalidDegree, InvalidNoteName, UnknownScale


class ChordQuality(str, Enum):
    """Triad qualities."""
    MAJOR = "maj"
    MINOR = "min"
    DIMINISHED = "dim"
    AUGMENTED = "aug"


# Canonical sharp spelling, index == pitch class
NOTE_NAMES: Tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

_NATURALS: Dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

_NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)?$")
_CHORD_RE = re.compile(r"^([A-G][#b]?)(.*)$")


# Scale patterns (semitones from root)
SCALE_PATTERNS: Dict[str, Tuple[int, ...]] = {
    "major": (0, 2, 4, 5, 7, 9, 11),
    "minor": (0, 2, 3, 5, 7, 8, 10),
    "dorian": (0, 2, 3, 5, 7, 9, 10),
    "phrygian": (0, 1, 3, 5, 7, 8, 10),
    "lydian": (0, 2, 4, 6, 7, 9, 11),
    "mixolydian": (0, 2, 4, 5, 7, 9, 10),
    "locrian": (0, 1, 3, 5, 6, 8, 10),
    "harmonic_minor": (0, 2, 3, 5, 7, 8, 11),
    "melodic_minor": (0, 2, 3, 5, 7, 9, 11),
    "pentatonic_major": (0, 2, 4, 7, 9),
    "pentatonic_minor": (0, 3, 5, 7, 10),
    "blues": (0, 3, 5, 6, 7, 10),
}

_M, _m, _d, _a = (
    ChordQuality.MAJOR,
    ChordQuality.MINOR,
    ChordQuality.DIMINISHED,
    ChordQuality.AUGMENTED,
)

# Triad quality per scale degree (index 0 == degree 1)
DEGREE_QUALITIES: Dict[str, Tuple[ChordQuality, ...]] = {
    "major": (_M, _m, _m, _M, _M, _m, _d),
    "minor": (_m, _d, _M, _m, _m, _M, _M),
    "dorian": (_m, _m, _M, _M, _m, _d, _M),
    "phrygian": (_m, _M, _M, _m, _d, _M, _m),
    "lydian": (_M, _M, _m, _d, _M, _m, _m),
    "mixolydian": (_M, _m, _d, _M, _m, _m, _M),
    "locrian": (_d, _M, _m, _m, _M, _M, _m),
    "harmonic_minor": (_m, _d, _a, _m, _M, _M, _d),
    "melodic_minor": (_m, _m, _a, _M, _M, _d, _d),
}


def _normalize_scale(scale: str) -> str:
    if not isinstance(scale, str):
        raise UnknownScale(scale)
    return scale.strip().lower().replace("-", "_").replace(" ", "_")


def note_name_to_offset(name: str) -> int:
    """Convert a pitch-class name to its offset from C (0-11).

    Accepts sharps and flats and is case-insensitive on the letter
    ('F#' -> 6, 'bb' -> 10). Octave numbers are rejected here; use
    :func:`note_name_to_pitch` for those.
    """
    if not isinstance(name, str):
        raise InvalidNoteName(name)
    match = _NOTE_RE.match(name.strip())
    if not match or match.group(3) is not None:
        raise InvalidNoteName(name)

    letter, accidental, _ = match.groups()
    offset = _NATURALS[letter.upper()]
    if accidental == "#":
        offset += 1
    elif accidental == "b":
        offset -= 1
    return offset % 12


def offset_to_note_name(offset: int) -> str:
    """Convert a pitch-class offset to its sharp spelling, wrapping mod 12."""
    return NOTE_NAMES[int(offset) % 12]


def note_name_to_pitch(name: str, default_octave: int = 4) -> int:
    """Convert a note name to a MIDI pitch (C4 = 60).

    The octave suffix is optional ('C#' -> 61, 'A3' -> 57).
    """
    if not isinstance(name, str):
        raise InvalidNoteName(name)
    match = _NOTE_RE.match(name.strip())
    if not match:
        raise InvalidNoteName(name)

    letter, accidental, octave_str = match.groups()
    octave = int(octave_str) if octave_str is not None else default_octave
    pitch = _NATURALS[letter.upper()] + (octave + 1) * 12
    if accidental == "#":
        pitch += 1
    elif accidental == "b":
        pitch -= 1
    return pitch


def pitch_class(pitch: int) -> int:
    """Pitch class (0-11) of a MIDI pitch."""
    return int(pitch) % 12


def get_scale_pattern(scale: str) -> Tuple[int, ...]:
    """Return the interval pattern for ``scale``."""
    pattern = SCALE_PATTERNS.get(_normalize_scale(scale))
    if pattern is None:
        raise UnknownScale(scale)
    return pattern


def get_scale_pitch_classes(key: str, scale: str = "major") -> Tuple[int, ...]:
    """Pitch classes of ``scale`` rooted on ``key``, in degree order."""
    root = note_name_to_offset(key)
    return tuple((root + interval) % 12 for interval in get_scale_pattern(scale))


def is_in_scale(pitch: int, key: str, scale: str = "major") -> bool:
    return pitch_class(pitch) in get_scale_pitch_classes(key, scale)


def scale_degree_of(pitch: int, key: str, scale: str = "major") -> Optional[int]:
    """1-based scale degree of ``pitch``, or None for a chromatic tone."""
    classes = get_scale_pitch_classes(key, scale)
    pc = pitch_class(pitch)
    if pc not in classes:
        return None
    return classes.index(pc) + 1


def _quality_table(scale: str) -> Tuple[ChordQuality, ...]:
    name = _normalize_scale(scale)
    if name in DEGREE_QUALITIES:
        return DEGREE_QUALITIES[name]
    if name in SCALE_PATTERNS and len(SCALE_PATTERNS[name]) == 7:
        return DEGREE_QUALITIES["minor" if "minor" in name else "major"]
    raise UnknownScale(scale)


@dataclass(frozen=True)
class Chord:
    """A triad as root pitch class plus quality.

    ``suffix`` keeps whatever followed the root in a parsed symbol so
    extended symbols ('G7', 'Cmaj7') survive a round trip.
    """

    root: int
    quality: ChordQuality
    suffix: Optional[str] = None

    @property
    def root_name(self) -> str:
        return offset_to_note_name(self.root)

    @property
    def symbol(self) -> str:
        suffix = self.quality.value if self.suffix is None else self.suffix
        return f"{self.root_name}{suffix}"

    def transpose(self, semitones: int) -> "Chord":
        return Chord((self.root + int(semitones)) % 12, self.quality, self.suffix)

    @classmethod
    def parse(cls, symbol: str) -> "Chord":
        """Parse a chord symbol such as 'Bdim', 'F#min', 'Am' or 'C'."""
        if not isinstance(symbol, str):
            raise InvalidNoteName(symbol)
        match = _CHORD_RE.match(symbol.strip())
        if not match:
            raise InvalidNoteName(symbol)
        root_name, suffix = match.groups()
        return cls(note_name_to_offset(root_name), _quality_from_suffix(suffix), suffix)


def _quality_from_suffix(suffix: str) -> ChordQuality:
    s = suffix.lower()
    if s.startswith("dim") or s.startswith("m7b5"):
        return ChordQuality.DIMINISHED
    if s.startswith("aug") or s.startswith("+"):
        return ChordQuality.AUGMENTED
    if s.startswith("maj") or s == "":
        return ChordQuality.MAJOR
    if s.startswith("min") or s.startswith("m"):
        return ChordQuality.MINOR
    # Dominant sevenths, sus chords and the like sound major-ish
    return ChordQuality.MAJOR


def _validate_degree(degree: int) -> int:
    if isinstance(degree, bool) or not isinstance(degree, int) or not 1 <= degree <= 7:
        raise InvalidDegree(degree)
    return degree


def chord_for_degree(degree: int, key: str, scale: str = "major") -> Chord:
    """Build the diatonic triad on ``degree`` of ``key``/``scale``."""
    _validate_degree(degree)
    qualities = _quality_table(scale)
    pattern = get_scale_pattern(scale)
    root = (note_name_to_offset(key) + pattern[degree - 1]) % 12
    return Chord(root, qualities[degree - 1])


def degree_to_chord(degree: int, key: str, scale: str = "major") -> str:
    """Convert a scale degree to a chord symbol.

    >>> degree_to_chord(5, "C", "major")
    'Gmaj'
    >>> degree_to_chord(7, "A", "minor")
    'Gmaj'
    """
    return chord_for_degree(degree, key, scale).symbol


def transpose_chord_symbol(symbol: str, semitones: int) -> str:
    """Shift the root of ``symbol`` by ``semitones``, keeping the suffix as-is."""
    return Chord.parse(symbol).transpose(semitones).symbol


__all__ = [
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
]
