"""
notation/theory/errors.py — Typed errors raised by the theory engine and resolver.

Every error derives from MusicError so callers can catch the whole family in
one clause. Input errors additionally derive from ValueError (bad argument),
while KeyMapInvariantError derives from RuntimeError: it signals a bug in map
construction, never bad input.

Hierarchy::

    MusicError
    ├── InvalidNoteNameError        (ValueError)  malformed / unknown note
    ├── InvalidKeyError             (ValueError)  malformed key signature
    ├── InvalidIntervalNameError    (ValueError)  unknown interval alias
    ├── InvalidNoteValueError       (ValueError)  pitch class outside [0, 11]
    ├── InvalidIntervalValueError   (ValueError)  interval index out of range
    ├── InvalidDirectionError       (ValueError)  direction other than ±1
    ├── UnsupportedKeyTypeError     (ValueError)  key type without a template
    ├── NotesNotRelatedError        (ValueError)  more than a double accidental apart
    └── KeyMapInvariantError        (RuntimeError)
"""

from __future__ import annotations


class MusicError(Exception):
    """Base class for all notation errors."""


class InvalidNoteNameError(MusicError, ValueError):
    """Raised when a note string does not match the note grammar or table."""

    def __init__(self, note: str) -> None:
        self.note = note
        super().__init__(f"Invalid note name: {note!r}")


class InvalidKeyError(MusicError, ValueError):
    """Raised when a key signature string does not match the key grammar."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Invalid key: {key!r}")


class InvalidIntervalNameError(MusicError, ValueError):
    """Raised for an interval alias missing from the interval table."""

    def __init__(self, interval: str) -> None:
        self.interval = interval
        super().__init__(f"Invalid interval name: {interval!r}")


class InvalidNoteValueError(MusicError, ValueError):
    """Raised for a pitch class outside [0, 11]."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Invalid note value: {value}")


class InvalidIntervalValueError(MusicError, ValueError):
    """Raised for a diatonic interval index outside the interval name table."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Invalid interval value: {value}")


class InvalidDirectionError(MusicError, ValueError):
    """Raised when a direction other than +1 or -1 is supplied."""

    def __init__(self, direction: int) -> None:
        self.direction = direction
        super().__init__(f"Invalid direction: {direction} (must be 1 or -1)")


class UnsupportedKeyTypeError(MusicError, ValueError):
    """Raised when a key's scale type has no interval template."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unsupported key type: {key!r}")


class NotesNotRelatedError(MusicError, ValueError):
    """Raised when a pitch class cannot be spelled from a root letter.

    Spellings are capped at double-flat / double-sharp, so any target more
    than two semitones away from the root letter (after the wrap-around
    correction) is rejected.

    Args:
        root: The root note name the spelling was attempted from.
        note_value: The target pitch class.
    """

    def __init__(self, root: str, note_value: int) -> None:
        self.root = root
        self.note_value = note_value
        super().__init__(f"Notes not related: {root}, {note_value}")


class KeyMapInvariantError(MusicError, RuntimeError):
    """Raised when a fully built key map is missing an entry it must contain."""
