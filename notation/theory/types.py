"""
notation/theory/types.py — Frozen value objects for the spelling engine.

All types are immutable frozen dataclasses — safe to hash, cache, and use as
dict keys. No I/O, no side effects, no external dependencies beyond stdlib.

Types:
    NoteParts       — a parsed note spelling (root letter + accidental)
    KeyParts        — a parsed key signature (root, accidental, scale type)
    NoteValue       — a table entry: letter index + pitch class
    NoteAccidental  — a diatonic interval as (letter steps, accidental offset)
    Resolution      — the result of resolving a note against a key context
"""

from __future__ import annotations

from dataclasses import dataclass

_LETTERS = frozenset("cdefgab")
_ACCIDENTALS = frozenset({"bb", "b", "n", "#", "##"})
_KEY_ACCIDENTALS = frozenset({"b", "#"})
_KEY_TYPES = frozenset({"M", "m", "mel", "harm"})

# ---------------------------------------------------------------------------
# NoteParts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NoteParts:
    """A note spelling split into its letter and accidental.

    Examples:
        NoteParts(root="c")                  # bare letter
        NoteParts(root="b", accidental="b")  # b-flat
        NoteParts(root="f", accidental="##") # f double-sharp
    """

    root: str
    accidental: str | None = None

    @property
    def name(self) -> str:
        """The spelling as a string, e.g. 'bb', 'c#', 'g'."""
        return self.root + (self.accidental or "")

    def __post_init__(self) -> None:
        if self.root not in _LETTERS:
            raise ValueError(f"NoteParts.root must be one of c..b, got {self.root!r}")
        if self.accidental is not None and self.accidental not in _ACCIDENTALS:
            raise ValueError(
                f"NoteParts.accidental must be one of {sorted(_ACCIDENTALS)}, "
                f"got {self.accidental!r}"
            )


# ---------------------------------------------------------------------------
# KeyParts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyParts:
    """A key signature split into root, accidental and scale type.

    Attributes:
        root:       Root letter, lower-case, e.g. "b"
        accidental: "b", "#" or None
        type:       Scale type token: "M" (major), "m" (minor), "mel", "harm"
    """

    root: str
    accidental: str | None = None
    type: str = "M"

    @property
    def tonic(self) -> str:
        """Root letter plus accidental, e.g. 'bb' for B-flat major."""
        return self.root + (self.accidental or "")

    def __post_init__(self) -> None:
        if self.root not in _LETTERS:
            raise ValueError(f"KeyParts.root must be one of c..b, got {self.root!r}")
        if self.accidental is not None and self.accidental not in _KEY_ACCIDENTALS:
            raise ValueError(f"KeyParts.accidental must be 'b' or '#', got {self.accidental!r}")
        if self.type not in _KEY_TYPES:
            raise ValueError(f"KeyParts.type must be one of {sorted(_KEY_TYPES)}, got {self.type!r}")


# ---------------------------------------------------------------------------
# NoteValue / NoteAccidental — table entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NoteValue:
    """Spelling table entry.

    Attributes:
        root_index: Position of the letter in c, d, e, f, g, a, b (0–6)
        int_val:    Pitch class the spelling sounds (0–11)
    """

    root_index: int
    int_val: int

    def __post_init__(self) -> None:
        if not (0 <= self.root_index <= 6):
            raise ValueError(f"NoteValue.root_index must be in [0, 6], got {self.root_index}")
        if not (0 <= self.int_val <= 11):
            raise ValueError(f"NoteValue.int_val must be in [0, 11], got {self.int_val}")


@dataclass(frozen=True)
class NoteAccidental:
    """A diatonic interval expressed as letter steps plus accidental offset.

    Examples:
        NoteAccidental(note=2, accidental=-1)   # minor third
        NoteAccidental(note=4, accidental=0)    # perfect fifth
    """

    note: int
    accidental: int


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Resolution:
    """How a note should be written in the current key context.

    Attributes:
        note:       The spelling to write, e.g. "bb", "g#", "c"
        accidental: Accidental token of that spelling, or None for a bare letter
        change:     True when the renderer must draw an explicit accidental
                    (the spelling departs from what the context established)
    """

    note: str
    accidental: str | None = None
    change: bool = False

    def __post_init__(self) -> None:
        if not self.note:
            raise ValueError("Resolution.note must not be empty")
