"""
notation/theory/tables.py — Immutable lookup tables shared by every context.

Built once at import time and exposed read-only (tuples, frozensets and
MappingProxyType), so any number of resolvers can share them without locking.

Exports:
    NUM_TONES             12 — size of the chromatic circle
    ROOTS                 the seven letters, c through b
    ROOT_VALUES           natural pitch class of each letter
    ROOT_INDICES          letter → position in ROOTS
    CANONICAL_NOTES       12 sharp-only note names, indexed by pitch class
    ACCIDENTALS           the five accidental tokens, flattest first
    NOTE_VALUES           spelling → NoteValue (bare letter and "n" both natural)
    DIATONIC_INTERVALS    13 canonical interval names, unison through octave
    DIATONIC_ACCIDENTALS  interval name → NoteAccidental
    INTERVALS             interval alias → semitones
    SCALES                scale name → 7-step semitone template
    SCALE_TYPES           key-type token → scale name (major and minor only)
"""

from __future__ import annotations

from types import MappingProxyType

from notation.theory.types import NoteAccidental, NoteValue

# ---------------------------------------------------------------------------
# Letters and chromatic pitch classes
# ---------------------------------------------------------------------------

ROOTS: tuple[str, ...] = ("c", "d", "e", "f", "g", "a", "b")

ROOT_VALUES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

ROOT_INDICES: MappingProxyType[str, int] = MappingProxyType(
    {root: index for index, root in enumerate(ROOTS)}
)

CANONICAL_NOTES: tuple[str, ...] = (
    "c",
    "c#",
    "d",
    "d#",
    "e",
    "f",
    "f#",
    "g",
    "g#",
    "a",
    "a#",
    "b",
)

NUM_TONES: int = len(CANONICAL_NOTES)

ACCIDENTALS: tuple[str, ...] = ("bb", "b", "n", "#", "##")

# ---------------------------------------------------------------------------
# Spelling → pitch class
# ---------------------------------------------------------------------------

# Semitone offset applied by each accidental token.
_ACCIDENTAL_OFFSETS: dict[str, int] = {"": 0, "bb": -2, "b": -1, "n": 0, "#": 1, "##": 2}

NOTE_VALUES: MappingProxyType[str, NoteValue] = MappingProxyType(
    {
        root + accidental: NoteValue(
            root_index=index, int_val=(ROOT_VALUES[index] + offset) % NUM_TONES
        )
        for index, root in enumerate(ROOTS)
        for accidental, offset in _ACCIDENTAL_OFFSETS.items()
    }
)

# ---------------------------------------------------------------------------
# Intervals
# ---------------------------------------------------------------------------

DIATONIC_INTERVALS: tuple[str, ...] = (
    "unison",
    "m2",
    "M2",
    "m3",
    "M3",
    "p4",
    "dim5",
    "p5",
    "m6",
    "M6",
    "b7",
    "M7",
    "octave",
)

DIATONIC_ACCIDENTALS: MappingProxyType[str, NoteAccidental] = MappingProxyType(
    {
        "unison": NoteAccidental(note=0, accidental=0),
        "m2": NoteAccidental(note=1, accidental=-1),
        "M2": NoteAccidental(note=1, accidental=0),
        "m3": NoteAccidental(note=2, accidental=-1),
        "M3": NoteAccidental(note=2, accidental=0),
        "p4": NoteAccidental(note=3, accidental=0),
        "dim5": NoteAccidental(note=4, accidental=-1),
        "p5": NoteAccidental(note=4, accidental=0),
        "m6": NoteAccidental(note=5, accidental=-1),
        "M6": NoteAccidental(note=5, accidental=0),
        "b7": NoteAccidental(note=6, accidental=-1),
        "M7": NoteAccidental(note=6, accidental=0),
        "octave": NoteAccidental(note=7, accidental=0),
    }
)

# Aliases are case-sensitive: "m3" is a minor third, "M3" a major third.
INTERVALS: MappingProxyType[str, int] = MappingProxyType(
    {
        "u": 0,
        "unison": 0,
        "m2": 1,
        "b2": 1,
        "min2": 1,
        "S": 1,
        "H": 1,
        "2": 2,
        "M2": 2,
        "maj2": 2,
        "T": 2,
        "W": 2,
        "m3": 3,
        "b3": 3,
        "min3": 3,
        "M3": 4,
        "3": 4,
        "maj3": 4,
        "4": 5,
        "p4": 5,
        "#4": 6,
        "b5": 6,
        "aug4": 6,
        "dim5": 6,
        "5": 7,
        "p5": 7,
        "#5": 8,
        "b6": 8,
        "aug5": 8,
        "6": 9,
        "M6": 9,
        "maj6": 9,
        "b7": 10,
        "m7": 10,
        "min7": 10,
        "dom7": 10,
        "M7": 11,
        "maj7": 11,
        "8": 12,
        "octave": 12,
    }
)

# ---------------------------------------------------------------------------
# Scale templates (semitone steps, one full octave)
# ---------------------------------------------------------------------------

SCALES: MappingProxyType[str, tuple[int, ...]] = MappingProxyType(
    {
        "major": (2, 2, 1, 2, 2, 2, 1),
        "minor": (2, 1, 2, 2, 1, 2, 2),
        "ionian": (2, 2, 1, 2, 2, 2, 1),
        "dorian": (2, 1, 2, 2, 2, 1, 2),
        "phrygian": (1, 2, 2, 2, 1, 2, 2),
        "lydian": (2, 2, 2, 1, 2, 2, 1),
        "mixolydian": (2, 2, 1, 2, 2, 1, 2),
        "aeolian": (2, 1, 2, 2, 1, 2, 2),
        "locrian": (1, 2, 2, 1, 2, 2, 2),
        "harmonic minor": (2, 1, 2, 2, 1, 3, 1),
        "melodic minor": (2, 1, 2, 2, 2, 2, 1),
    }
)

# Only major and minor are wired to key parsing; "mel" and "harm" are
# accepted by the key grammar but need an explicit KeyManagerConfig.
SCALE_TYPES: MappingProxyType[str, str] = MappingProxyType({"M": "major", "m": "minor"})

KEY_TYPES: frozenset[str] = frozenset({"M", "m", "mel", "harm"})
