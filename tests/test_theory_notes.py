"""
Tests for notation/theory/notes.py — parsing, values and enharmonic naming.

Validates:
    - note_parts / key_parts: accepted and rejected grammars
    - note_value, interval_value, canonical names
    - relative_note_value: modular shifts, direction contract
    - relative_note_name: sharps/flats, wrap-around, the double-accidental cap
"""

import pytest

from notation.theory.errors import (
    InvalidDirectionError,
    InvalidIntervalNameError,
    InvalidIntervalValueError,
    InvalidKeyError,
    InvalidNoteNameError,
    InvalidNoteValueError,
    MusicError,
    NotesNotRelatedError,
)
from notation.theory.notes import (
    canonical_interval_name,
    canonical_note_name,
    interval_value,
    key_parts,
    note_parts,
    note_value,
    relative_note_name,
    relative_note_value,
)
from notation.theory.tables import (
    ACCIDENTALS,
    DIATONIC_ACCIDENTALS,
    DIATONIC_INTERVALS,
    NOTE_VALUES,
    ROOTS,
)
from notation.theory.types import NoteAccidental

# Semitones above the tonic for each letter step of a major scale, plus octave.
_MAJOR_STEPS = (0, 2, 4, 5, 7, 9, 11, 12)

# ---------------------------------------------------------------------------
# note_parts
# ---------------------------------------------------------------------------


class TestNoteParts:
    def test_bare_letter(self):
        parts = note_parts("c")
        assert parts.root == "c"
        assert parts.accidental is None

    def test_uppercase_is_lowered(self):
        assert note_parts("C").root == "c"
        assert note_parts("Bb").accidental == "b"

    def test_all_accidentals_parse(self):
        for accidental in ACCIDENTALS:
            parts = note_parts("e" + accidental)
            assert parts.root == "e"
            assert parts.accidental == accidental

    def test_b_flat_is_letter_plus_flat(self):
        parts = note_parts("bb")
        assert parts.root == "b"
        assert parts.accidental == "b"

    @pytest.mark.parametrize("bad", ["r", "", "cbbb", "cx", "#", "c#b", "h"])
    def test_malformed_raises(self, bad):
        with pytest.raises(InvalidNoteNameError, match="Invalid note name"):
            note_parts(bad)

    def test_error_is_value_error_and_music_error(self):
        with pytest.raises(ValueError):
            note_parts("r")
        with pytest.raises(MusicError):
            note_parts("r")


# ---------------------------------------------------------------------------
# key_parts
# ---------------------------------------------------------------------------


class TestKeyParts:
    def test_plain_major(self):
        parts = key_parts("c")
        assert (parts.root, parts.accidental, parts.type) == ("c", None, "M")

    def test_sharp_major(self):
        parts = key_parts("d#")
        assert (parts.root, parts.accidental, parts.type) == ("d", "#", "M")

    def test_flat_minor(self):
        parts = key_parts("fbm")
        assert (parts.root, parts.accidental, parts.type) == ("f", "b", "m")

    def test_melodic_and_harmonic(self):
        assert key_parts("c#mel").type == "mel"
        assert key_parts("g#harm").type == "harm"

    def test_b_flat(self):
        parts = key_parts("bb")
        assert (parts.root, parts.accidental) == ("b", "b")

    def test_root_is_case_insensitive(self):
        assert key_parts("A") == key_parts("a")
        assert key_parts("Bb") == key_parts("bb")
        assert key_parts("BB") == key_parts("bb")
        assert key_parts("bB").accidental == "b"
        assert key_parts("EBm") == key_parts("ebm")
        assert key_parts("EBm").type == "m"

    def test_type_suffix_keeps_case(self):
        assert key_parts("CM").type == "M"
        assert key_parts("Cm").type == "m"

    @pytest.mark.parametrize("bad", ["r", "", "#m", "c##", "cmaj", "bbb"])
    def test_malformed_raises(self, bad):
        with pytest.raises(InvalidKeyError, match="Invalid key"):
            key_parts(bad)


# ---------------------------------------------------------------------------
# note_value / canonical_note_name
# ---------------------------------------------------------------------------


class TestNoteValues:
    def test_naturals(self):
        assert note_value("c") == 0
        assert note_value("cn") == 0
        assert note_value("b") == 11

    def test_accidentals(self):
        assert note_value("f#") == 6
        assert note_value("cb") == 11
        assert note_value("b#") == 0
        assert note_value("cbb") == 10
        assert note_value("b##") == 1

    def test_case_insensitive(self):
        assert note_value("F#") == 6

    def test_table_covers_every_letter_and_accidental(self):
        for root in ROOTS:
            assert root in NOTE_VALUES
            for accidental in ACCIDENTALS:
                assert root + accidental in NOTE_VALUES
        assert len(NOTE_VALUES) == 42

    def test_unknown_spelling_raises(self):
        with pytest.raises(InvalidNoteNameError):
            note_value("r")

    def test_canonical_names(self):
        assert canonical_note_name(0) == "c"
        assert canonical_note_name(2) == "d"
        assert canonical_note_name(10) == "a#"

    @pytest.mark.parametrize("bad", [-1, 12])
    def test_canonical_name_out_of_range(self, bad):
        with pytest.raises(InvalidNoteValueError, match="Invalid note value"):
            canonical_note_name(bad)

    def test_round_trip_preserves_pitch_class(self):
        for spelling, entry in NOTE_VALUES.items():
            canonical = canonical_note_name(note_value(spelling))
            assert note_value(canonical) == entry.int_val, spelling


# ---------------------------------------------------------------------------
# interval_value / canonical_interval_name
# ---------------------------------------------------------------------------


class TestIntervals:
    def test_aliases(self):
        assert interval_value("b2") == 1
        assert interval_value("m3") == 3
        assert interval_value("b3") == 3
        assert interval_value("min3") == 3
        assert interval_value("octave") == 12

    def test_case_sensitive(self):
        assert interval_value("m3") == 3
        assert interval_value("M3") == 4

    def test_unknown_alias_raises(self):
        with pytest.raises(InvalidIntervalNameError, match="Invalid interval name"):
            interval_value("7")

    def test_canonical_interval_names(self):
        assert canonical_interval_name(0) == "unison"
        assert canonical_interval_name(2) == "M2"
        assert canonical_interval_name(12) == "octave"

    @pytest.mark.parametrize("bad", [-1, 13])
    def test_canonical_interval_out_of_range(self, bad):
        with pytest.raises(InvalidIntervalValueError):
            canonical_interval_name(bad)

    def test_diatonic_accidentals_cover_every_canonical_name(self):
        assert tuple(DIATONIC_ACCIDENTALS) == DIATONIC_INTERVALS
        assert DIATONIC_ACCIDENTALS["m3"] == NoteAccidental(note=2, accidental=-1)

    @pytest.mark.parametrize("name", DIATONIC_INTERVALS)
    def test_diatonic_accidental_matches_semitones(self, name):
        entry = DIATONIC_ACCIDENTALS[name]
        assert _MAJOR_STEPS[entry.note] + entry.accidental == interval_value(name)


# ---------------------------------------------------------------------------
# relative_note_value
# ---------------------------------------------------------------------------


class TestRelativeNoteValue:
    def test_upward(self):
        assert relative_note_value(note_value("c"), interval_value("b5")) == 6
        assert relative_note_value(note_value("b"), interval_value("b5")) == 5
        assert relative_note_value(note_value("g"), interval_value("p5")) == 2

    def test_downward(self):
        assert relative_note_value(note_value("d"), interval_value("2"), direction=-1) == 0
        assert relative_note_value(note_value("c"), interval_value("b2"), direction=-1) == 11

    def test_result_never_negative(self):
        for value in range(12):
            for interval in range(13):
                assert 0 <= relative_note_value(value, interval, direction=-1) <= 11

    @pytest.mark.parametrize("direction", [0, 2, -2])
    def test_invalid_direction_raises(self, direction):
        with pytest.raises(InvalidDirectionError, match="Invalid direction"):
            relative_note_value(11, 5, direction=direction)


# ---------------------------------------------------------------------------
# relative_note_name
# ---------------------------------------------------------------------------


class TestRelativeNoteName:
    def test_same_pitch_is_bare_letter(self):
        assert relative_note_name("c", note_value("c")) == "c"
        assert relative_note_name("e", note_value("fb")) == "e"

    def test_sharps(self):
        assert relative_note_name("c", note_value("db")) == "c#"
        assert relative_note_name("e", note_value("f#")) == "e##"

    def test_flats(self):
        assert relative_note_name("e", note_value("d#")) == "eb"

    def test_only_root_letter_of_root_is_used(self):
        assert relative_note_name("c#", note_value("db")) == "c#"

    def test_wraps_round_the_circle(self):
        assert relative_note_name("c", note_value("b")) == "cb"
        assert relative_note_name("b", note_value("c")) == "b#"
        assert relative_note_name("b", note_value("c#")) == "b##"

    def test_wraparound_arithmetic_is_preserved_at_boundary(self):
        # interval 10 folds to zero under the reverse-interval formula
        assert relative_note_name("c", 10) == "c"

    def test_unrelated_notes_raise(self):
        with pytest.raises(NotesNotRelatedError, match="Notes not related"):
            relative_note_name("e", note_value("g#"))

    def test_triple_accidental_is_not_truncated(self):
        with pytest.raises(NotesNotRelatedError) as exc_info:
            relative_note_name("c", note_value("d#"))
        assert exc_info.value.root == "c"
        assert exc_info.value.note_value == 3

    def test_interval_nine_is_rejected(self):
        with pytest.raises(NotesNotRelatedError):
            relative_note_name("d", note_value("b"))

    def test_invalid_root_raises(self):
        with pytest.raises(InvalidNoteNameError):
            relative_note_name("x", 0)
