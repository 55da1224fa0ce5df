"""
notation/theory/notes.py — Pure note, key and interval functions.

Exports:
    note_parts(note) → NoteParts
    key_parts(key) → KeyParts
    note_value(note) → int
    interval_value(name) → int
    canonical_note_name(value) → str
    canonical_interval_name(value) → str
    is_valid_note_value(value) → bool
    is_valid_interval_value(value) → bool
    relative_note_value(value, interval, direction) → int
    relative_note_name(root, value) → str
"""

from __future__ import annotations

import re

from notation.theory.errors import (
    InvalidDirectionError,
    InvalidIntervalNameError,
    InvalidIntervalValueError,
    InvalidKeyError,
    InvalidNoteNameError,
    InvalidNoteValueError,
    NotesNotRelatedError,
)
from notation.theory.tables import (
    CANONICAL_NOTES,
    DIATONIC_INTERVALS,
    INTERVALS,
    NOTE_VALUES,
    NUM_TONES,
)
from notation.theory.types import KeyParts, NoteParts

# ---------------------------------------------------------------------------
# Grammars
# ---------------------------------------------------------------------------

_NOTE_PATTERN = re.compile(r"^([cdefgab])(bb|b|n|##|#)?$")

# Root and accidental are case-insensitive; the type suffix is not, since
# "M" (major) and "m" (minor) differ only by case.
_KEY_PATTERN = re.compile(r"^([cdefgabCDEFGAB])([bB#]?)(mel|harm|m|M)?$")

# Largest interval measured directly before wrapping around the circle.
_MAX_DIRECT_INTERVAL = NUM_TONES - 3

# Double-flat / double-sharp is as far as a letter can be bent.
_MAX_ACCIDENTAL_STEPS = 2


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def note_parts(note: str) -> NoteParts:
    """Split a note spelling into root letter and accidental.

    Args:
        note: Note spelling, 1–3 characters, any case, e.g. "C", "bb", "f##"

    Returns:
        NoteParts with a lower-case root and the accidental token (or None)

    Raises:
        InvalidNoteNameError: If the string does not match letter + accidental

    Examples:
        >>> note_parts("C#")
        NoteParts(root='c', accidental='#')
        >>> note_parts("b")
        NoteParts(root='b', accidental=None)
    """
    lowered = note.lower()
    if not (1 <= len(lowered) <= 3):
        raise InvalidNoteNameError(note)
    match = _NOTE_PATTERN.match(lowered)
    if match is None:
        raise InvalidNoteNameError(note)
    return NoteParts(root=match.group(1), accidental=match.group(2))


def key_parts(key: str) -> KeyParts:
    """Split a key signature into root, accidental and scale type.

    Args:
        key: Key signature, e.g. "C", "bb", "f#m", "c#mel", "g#harm"

    Returns:
        KeyParts; type defaults to "M" (major) when no suffix is given

    Raises:
        InvalidKeyError: If the string is empty or malformed

    Examples:
        >>> key_parts("fbm")
        KeyParts(root='f', accidental='b', type='m')
    """
    if not key:
        raise InvalidKeyError(key)
    match = _KEY_PATTERN.match(key)
    if match is None:
        raise InvalidKeyError(key)
    return KeyParts(
        root=match.group(1).lower(),
        accidental=match.group(2).lower() or None,
        type=match.group(3) or "M",
    )


# ---------------------------------------------------------------------------
# Values and canonical names
# ---------------------------------------------------------------------------


def note_value(note: str) -> int:
    """Return the pitch class (0–11) sounded by a note spelling.

    Raises:
        InvalidNoteNameError: If the spelling is not in the note table
    """
    entry = NOTE_VALUES.get(note.lower())
    if entry is None:
        raise InvalidNoteNameError(note)
    return entry.int_val


def interval_value(name: str) -> int:
    """Return the semitone count of an interval alias, e.g. "b3" → 3.

    Raises:
        InvalidIntervalNameError: If the alias is unknown
    """
    if name not in INTERVALS:
        raise InvalidIntervalNameError(name)
    return INTERVALS[name]


def is_valid_note_value(value: int) -> bool:
    return 0 <= value < NUM_TONES


def is_valid_interval_value(value: int) -> bool:
    return 0 <= value < len(DIATONIC_INTERVALS)


def canonical_note_name(value: int) -> str:
    """Return the sharp-only name of a pitch class, e.g. 3 → "d#".

    Raises:
        InvalidNoteValueError: If value is outside [0, 11]
    """
    if not is_valid_note_value(value):
        raise InvalidNoteValueError(value)
    return CANONICAL_NOTES[value]


def canonical_interval_name(value: int) -> str:
    """Return the canonical diatonic interval name, e.g. 7 → "p5".

    Raises:
        InvalidIntervalValueError: If value is outside [0, 12]
    """
    if not is_valid_interval_value(value):
        raise InvalidIntervalValueError(value)
    return DIATONIC_INTERVALS[value]


# ---------------------------------------------------------------------------
# Relative notes
# ---------------------------------------------------------------------------


def relative_note_value(value: int, interval: int, direction: int = 1) -> int:
    """Shift a pitch class by an interval up (1) or down (-1), modulo 12.

    Raises:
        InvalidDirectionError: If direction is not 1 or -1

    Examples:
        >>> relative_note_value(0, 1, direction=-1)
        11
    """
    if direction not in (1, -1):
        raise InvalidDirectionError(direction)
    return (value + direction * interval) % NUM_TONES


def relative_note_name(root: str, value: int) -> str:
    """Spell a pitch class using the letter of ``root``.

    The distance from the root letter's natural value is turned into sharps
    or flats. Distances larger than NUM_TONES - 3 are measured the other way
    round the circle. Anything still more than two semitones away cannot be
    written with this letter.

    Args:
        root:  A note spelling; only its letter is used, e.g. "e" or "c#"
        value: Target pitch class

    Returns:
        The letter followed by up to two "#" or "b" symbols; a bare letter
        when the target is the letter's natural value

    Raises:
        InvalidNoteNameError: If root is not a valid note spelling
        NotesNotRelatedError: If the target needs more than a double accidental

    Examples:
        >>> relative_note_name("e", note_value("f#"))
        'e##'
        >>> relative_note_name("c", note_value("b"))
        'cb'
    """
    parts = note_parts(root)
    root_value = note_value(parts.root)
    interval = value - root_value

    if abs(interval) > _MAX_DIRECT_INTERVAL:
        multiplier = -1 if interval > 0 else 1
        reverse_interval = ((value + 1 + (root_value + 1)) % NUM_TONES) * multiplier
        if abs(reverse_interval) > _MAX_ACCIDENTAL_STEPS:
            raise NotesNotRelatedError(root, value)
        interval = reverse_interval

    if abs(interval) > _MAX_ACCIDENTAL_STEPS:
        raise NotesNotRelatedError(root, value)

    if interval > 0:
        return parts.root + "#" * interval
    return parts.root + "b" * -interval
