"""
notation/sequence.py — Spell a whole run of notes (e.g. one measure) in order.

A renderer typically owns one context per measure: build a KeyManager for the
key, resolve every note in document order, and draw an accidental glyph where
the resolution reports a change. These helpers do exactly that.

Exports:
    spell_notes_indexed(key, notes, skip_invalid, config) → list[tuple[int, Resolution]]
    spell_notes(key, notes, skip_invalid, config) → list[Resolution]
    accidentals_to_draw(key, notes, config) → list[tuple[int, Resolution]]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from notation.config import DEFAULT_CONFIG, KeyManagerConfig
from notation.key_manager import KeyManager
from notation.theory.errors import InvalidNoteNameError
from notation.theory.types import Resolution

logger = logging.getLogger(__name__)


def spell_notes_indexed(
    key: str,
    notes: Iterable[str],
    *,
    skip_invalid: bool = False,
    config: KeyManagerConfig = DEFAULT_CONFIG,
) -> list[tuple[int, Resolution]]:
    """Like spell_notes, but pair each resolution with its position in ``notes``.

    Positions always refer to the input, so they stay correct when
    ``skip_invalid`` drops a note.

    Examples:
        >>> [i for i, _ in spell_notes_indexed("c", ["f#", "zz", "f"], skip_invalid=True)]
        [0, 2]
    """
    manager = KeyManager(key, config=config)
    resolutions: list[tuple[int, Resolution]] = []
    for index, note in enumerate(notes):
        try:
            resolutions.append((index, manager.select_note(note)))
        except InvalidNoteNameError as exc:
            if not skip_invalid:
                raise
            logger.warning("Skipping note %d in key %r: %s", index, key, exc)
    return resolutions


def spell_notes(
    key: str,
    notes: Iterable[str],
    *,
    skip_invalid: bool = False,
    config: KeyManagerConfig = DEFAULT_CONFIG,
) -> list[Resolution]:
    """Resolve ``notes`` against ``key`` in the order given.

    Args:
        key:          Key signature, e.g. "bb"
        notes:        Note spellings in document order
        skip_invalid: Log and skip malformed notes instead of raising. Skipped
                      notes leave the context untouched.
        config:       KeyManager configuration

    Returns:
        One Resolution per note that was resolved (skipped notes are omitted)

    Raises:
        InvalidKeyError / UnsupportedKeyTypeError: If the key is rejected
        InvalidNoteNameError: On a malformed note when skip_invalid is False

    Examples:
        >>> [r.change for r in spell_notes("c", ["g#", "g#", "g"])]
        [True, False, True]
    """
    return [r for _, r in spell_notes_indexed(key, notes, skip_invalid=skip_invalid, config=config)]


def accidentals_to_draw(
    key: str,
    notes: Iterable[str],
    *,
    config: KeyManagerConfig = DEFAULT_CONFIG,
) -> list[tuple[int, Resolution]]:
    """Return (index, resolution) for each note that needs an accidental glyph.

    Raises:
        The same errors as spell_notes with skip_invalid=False.
    """
    return [(index, r) for index, r in spell_notes_indexed(key, notes, config=config) if r.change]
