"""
notation/ — Enharmonic spelling engine for music-notation renderers.

Exports:
    Resolver: KeyManager, KeyManagerConfig, DEFAULT_CONFIG, EXTENDED_MINOR_CONFIG
    Sequence: spell_notes, spell_notes_indexed, accidentals_to_draw
    Types:    Resolution, NoteParts, KeyParts
    Errors:   MusicError
"""

from notation.config import DEFAULT_CONFIG, EXTENDED_MINOR_CONFIG, KeyManagerConfig
from notation.key_manager import KeyManager
from notation.sequence import accidentals_to_draw, spell_notes, spell_notes_indexed
from notation.theory import KeyParts, MusicError, NoteParts, Resolution

__all__ = [
    "DEFAULT_CONFIG",
    "EXTENDED_MINOR_CONFIG",
    "KeyManager",
    "KeyManagerConfig",
    "KeyParts",
    "MusicError",
    "NoteParts",
    "Resolution",
    "accidentals_to_draw",
    "spell_notes",
    "spell_notes_indexed",
]
