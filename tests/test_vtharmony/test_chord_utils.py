"""Tests for vtharmony pitch and chord utilities."""

import pytest

from vtharmony import (
    Chord,
    ChordQuality,
    InvalidDegree,
    InvalidNoteName,
    TheoryError,
    UnknownScale,
    degree_to_chord,
    get_scale_pitch_classes,
    is_in_scale,
    note_name_to_offset,
    note_name_to_pitch,
    offset_to_note_name,
    scale_degree_of,
    transpose_chord_symbol,
)


class TestNoteNames:
    """Tests for note-name parsing and spelling."""

    def test_note_name_to_offset(self):
        """Naturals and sharps map to pitch classes from C."""
        assert note_name_to_offset("C") == 0
        assert note_name_to_offset("F#") == 6
        assert note_name_to_offset("B") == 11
        assert note_name_to_offset("A") == 9

    def test_flats_and_lowercase(self):
        """Flats and lowercase letters are accepted on input."""
        assert note_name_to_offset("Bb") == 10
        assert note_name_to_offset("eb") == 3
        assert note_name_to_offset("Cb") == 11  # wraps below C

    def test_invalid_note_name(self):
        """Unrecognized names raise InvalidNoteName (a ValueError)."""
        for bad in ["H", "", "C##", "X#", "C4", None]:
            with pytest.raises(InvalidNoteName):
                note_name_to_offset(bad)

        with pytest.raises(ValueError):
            note_name_to_offset("Q")

    def test_offset_to_note_name_wraps(self):
        """Offsets wrap both ways and always spell with sharps."""
        assert offset_to_note_name(0) == "C"
        assert offset_to_note_name(1) == "C#"
        assert offset_to_note_name(12) == "C"
        assert offset_to_note_name(-1) == "B"
        assert offset_to_note_name(-13) == "B"
        assert offset_to_note_name(10) == "A#"

    def test_note_name_to_pitch(self):
        """Octave suffix is optional and defaults to octave 4."""
        assert note_name_to_pitch("C4") == 60
        assert note_name_to_pitch("C") == 60
        assert note_name_to_pitch("A4") == 69
        assert note_name_to_pitch("C#3") == 49
        assert note_name_to_pitch("C-1") == 0


class TestScales:
    """Tests for scale lookups."""

    def test_scale_pitch_classes(self):
        assert get_scale_pitch_classes("C", "major") == (0, 2, 4, 5, 7, 9, 11)
        assert get_scale_pitch_classes("A", "minor") == (9, 11, 0, 2, 4, 5, 7)

    def test_membership_and_degree(self):
        assert is_in_scale(64, "C", "major")
        assert not is_in_scale(63, "C", "major")
        assert scale_degree_of(71, "C", "major") == 7
        assert scale_degree_of(67, "C") == 5
        assert scale_degree_of(61, "C") is None

    def test_unknown_scale(self):
        with pytest.raises(UnknownScale):
            get_scale_pitch_classes("C", "bebop-ultra")


class TestDegreeToChord:
    """Tests for scale-degree to chord-symbol mapping."""

    def test_major(self):
        assert degree_to_chord(1, "C", "major") == "Cmaj"
        assert degree_to_chord(2, "C", "major") == "Dmin"
        assert degree_to_chord(4, "C", "major") == "Fmaj"
        assert degree_to_chord(5, "C", "major") == "Gmaj"
        assert degree_to_chord(7, "C", "major") == "Bdim"

    def test_minor(self):
        assert degree_to_chord(1, "A", "minor") == "Amin"
        assert degree_to_chord(2, "A", "minor") == "Bdim"
        assert degree_to_chord(6, "A", "minor") == "Fmaj"
        assert degree_to_chord(7, "A", "minor") == "Gmaj"

    def test_different_keys(self):
        assert degree_to_chord(1, "G", "major") == "Gmaj"
        assert degree_to_chord(1, "F#", "minor") == "F#min"
        assert degree_to_chord(6, "G", "major") == "Emin"

    def test_modes(self):
        """Modal scales use their own quality tables."""
        assert degree_to_chord(4, "D", "dorian") == "Gmaj"
        assert degree_to_chord(2, "E", "phrygian") == "Fmaj"
        assert degree_to_chord(7, "G", "mixolydian") == "Fmaj"

    def test_default_scale_is_major(self):
        assert degree_to_chord(3, "C") == "Emin"

    def test_invalid_degree(self):
        for bad in [0, 8, -1, 2.5, True]:
            with pytest.raises(InvalidDegree):
                degree_to_chord(bad, "C", "major")

    def test_errors_share_base_class(self):
        with pytest.raises(TheoryError):
            degree_to_chord(1, "Z", "major")


class TestChordSymbols:
    """Tests for structured chords and transposition."""

    def test_parse(self):
        assert Chord.parse("F#min") == Chord(6, ChordQuality.MINOR, "min")
        assert Chord.parse("Bdim").quality is ChordQuality.DIMINISHED
        assert Chord.parse("C").quality is ChordQuality.MAJOR
        assert Chord.parse("Am").quality is ChordQuality.MINOR
        assert Chord.parse("Cmaj7").quality is ChordQuality.MAJOR

    def test_parse_invalid(self):
        with pytest.raises(InvalidNoteName):
            Chord.parse("maj")

    def test_transpose_up_and_wrap(self):
        assert transpose_chord_symbol("Cmaj", 1) == "C#maj"
        assert transpose_chord_symbol("Cmaj", -1) == "Bmaj"
        assert transpose_chord_symbol("C", -1) == "B"
        assert transpose_chord_symbol("Bdim", 1) == "Cdim"
        assert transpose_chord_symbol("G7", 14) == "A7"

    def test_transpose_respells_flats(self):
        assert transpose_chord_symbol("Bbmin", 0) == "A#min"
