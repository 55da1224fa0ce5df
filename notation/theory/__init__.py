"""
notation/theory/ — Pure theory engine: tables, parsing and enharmonic naming.

Exports:
    Types:   NoteParts, KeyParts, NoteValue, NoteAccidental, Resolution
    Errors:  MusicError and its subclasses
    Notes:   note_parts, key_parts, note_value, interval_value,
             canonical_note_name, canonical_interval_name,
             relative_note_value, relative_note_name
    Scales:  scale_template, scale_tones, interval_between, create_scale_map
"""

from notation.theory.errors import (
    InvalidDirectionError,
    InvalidIntervalNameError,
    InvalidIntervalValueError,
    InvalidKeyError,
    InvalidNoteNameError,
    InvalidNoteValueError,
    KeyMapInvariantError,
    MusicError,
    NotesNotRelatedError,
    UnsupportedKeyTypeError,
)
from notation.theory.notes import (
    canonical_interval_name,
    canonical_note_name,
    interval_value,
    is_valid_interval_value,
    is_valid_note_value,
    key_parts,
    note_parts,
    note_value,
    relative_note_name,
    relative_note_value,
)
from notation.theory.scales import (
    create_scale_map,
    interval_between,
    key_scale,
    scale_template,
    scale_tones,
)
from notation.theory.types import KeyParts, NoteAccidental, NoteParts, NoteValue, Resolution

__all__ = [
    # Types
    "KeyParts",
    "NoteAccidental",
    "NoteParts",
    "NoteValue",
    "Resolution",
    # Errors
    "MusicError",
    "InvalidDirectionError",
    "InvalidIntervalNameError",
    "InvalidIntervalValueError",
    "InvalidKeyError",
    "InvalidNoteNameError",
    "InvalidNoteValueError",
    "KeyMapInvariantError",
    "NotesNotRelatedError",
    "UnsupportedKeyTypeError",
    # Notes
    "canonical_interval_name",
    "canonical_note_name",
    "interval_value",
    "is_valid_interval_value",
    "is_valid_note_value",
    "key_parts",
    "note_parts",
    "note_value",
    "relative_note_name",
    "relative_note_value",
    # Scales
    "create_scale_map",
    "interval_between",
    "key_scale",
    "scale_template",
    "scale_tones",
]
