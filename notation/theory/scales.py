"""
notation/theory/scales.py — Pure scale construction and key scale maps.

Exports:
    scale_template(name) → tuple[int, ...]
    scale_tones(key_value, intervals) → tuple[int, ...]
    interval_between(note1, note2, direction) → int
    key_scale(parts, scale_types) → tuple[int, ...]
    create_scale_map(key, scale_types) → dict[str, str]
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from notation.theory.errors import (
    InvalidDirectionError,
    InvalidNoteValueError,
    UnsupportedKeyTypeError,
)
from notation.theory.notes import (
    is_valid_note_value,
    key_parts,
    note_value,
    relative_note_name,
    relative_note_value,
)
from notation.theory.tables import NUM_TONES, ROOT_INDICES, ROOTS, SCALE_TYPES, SCALES
from notation.theory.types import KeyParts


def scale_template(name: str) -> tuple[int, ...]:
    """Return the semitone steps of a named scale, e.g. "dorian".

    Raises:
        UnsupportedKeyTypeError: If no template has that name
    """
    if name not in SCALES:
        raise UnsupportedKeyTypeError(name)
    return SCALES[name]


def scale_tones(key_value: int, intervals: Sequence[int]) -> tuple[int, ...]:
    """Walk an interval template from ``key_value``.

    The step that lands back on the starting pitch class closes the octave
    and is not repeated, so a 7-step template yields 7 tones.

    Examples:
        >>> scale_tones(0, SCALES["major"])
        (0, 2, 4, 5, 7, 9, 11)
    """
    tones = [key_value]
    next_note = key_value
    for step in intervals:
        next_note = relative_note_value(next_note, step)
        if next_note != key_value:
            tones.append(next_note)
    return tuple(tones)


def interval_between(note1: int, note2: int, direction: int = 1) -> int:
    """Semitones from ``note1`` up to ``note2`` (direction 1) or down (-1).

    Raises:
        InvalidDirectionError: If direction is not 1 or -1
        InvalidNoteValueError: If either pitch class is outside [0, 11]

    Examples:
        >>> interval_between(2, 0)       # d up to c
        10
        >>> interval_between(2, 0, -1)   # d down to c
        2
    """
    if direction not in (1, -1):
        raise InvalidDirectionError(direction)
    for value in (note1, note2):
        if not is_valid_note_value(value):
            raise InvalidNoteValueError(value)
    difference = note2 - note1 if direction == 1 else note1 - note2
    return difference % NUM_TONES


def key_scale(
    parts: KeyParts,
    scale_types: Mapping[str, str] = SCALE_TYPES,
    *,
    key: str | None = None,
) -> tuple[int, ...]:
    """Return the 7 pitch classes of a parsed key.

    Args:
        parts:       Parsed key signature
        scale_types: Key-type token → scale name; tokens missing here are
                     unsupported
        key:         Original key string, used in the error message

    Raises:
        UnsupportedKeyTypeError: If the key type has no template
    """
    scale_name = scale_types.get(parts.type)
    if scale_name is None or scale_name not in SCALES:
        raise UnsupportedKeyTypeError(key if key is not None else parts.tonic + parts.type)
    return scale_tones(note_value(parts.tonic), SCALES[scale_name])


def create_scale_map(key: str, scale_types: Mapping[str, str] = SCALE_TYPES) -> dict[str, str]:
    """Map each letter to its spelling in the given key.

    Letters are visited from the key's own root, wrapping through c..b, and
    each is spelled against the matching scale tone. Letters that stay
    natural are written with an explicit "n".

    Args:
        key:         Key signature, e.g. "bb", "f#m"
        scale_types: Key-type token → scale name

    Returns:
        Dict of all 7 letters → spelling

    Raises:
        InvalidKeyError: If the key is malformed
        UnsupportedKeyTypeError: If the key type has no template
        NotesNotRelatedError: If a scale tone cannot be spelled on its letter

    Examples:
        >>> create_scale_map("bb")["e"]
        'eb'
        >>> create_scale_map("bb")["c"]
        'cn'
    """
    parts = key_parts(key)
    scale = key_scale(parts, scale_types, key=key)
    note_location = ROOT_INDICES[parts.root]

    scale_map: dict[str, str] = {}
    for i, tone in enumerate(scale):
        root_name = ROOTS[(note_location + i) % len(ROOTS)]
        note_name = relative_note_name(root_name, tone)
        if len(note_name) == 1:
            note_name += "n"
        scale_map[root_name] = note_name
    return scale_map
