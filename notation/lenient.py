"""
notation/lenient.py — "None on failure" wrappers over the fail-explicit API.

For call sites that only care whether something parses. Each wrapper catches
MusicError and nothing else; the canonical functions in notation.theory and
notation.key_manager remain the source of truth.
"""

from __future__ import annotations

from notation.config import DEFAULT_CONFIG, KeyManagerConfig
from notation.key_manager import KeyManager
from notation.theory.errors import MusicError
from notation.theory.notes import interval_value, key_parts, note_parts, note_value, relative_note_name
from notation.theory.scales import create_scale_map
from notation.theory.types import KeyParts, NoteParts


def note_parts_or_none(note: str) -> NoteParts | None:
    try:
        return note_parts(note)
    except MusicError:
        return None


def key_parts_or_none(key: str) -> KeyParts | None:
    try:
        return key_parts(key)
    except MusicError:
        return None


def note_value_or_none(note: str) -> int | None:
    try:
        return note_value(note)
    except MusicError:
        return None


def interval_value_or_none(name: str) -> int | None:
    try:
        return interval_value(name)
    except MusicError:
        return None


def relative_note_name_or_none(root: str, value: int) -> str | None:
    try:
        return relative_note_name(root, value)
    except MusicError:
        return None


def create_scale_map_or_none(key: str) -> dict[str, str] | None:
    try:
        return create_scale_map(key)
    except MusicError:
        return None


def key_manager_or_none(key: str, config: KeyManagerConfig = DEFAULT_CONFIG) -> KeyManager | None:
    """Build a KeyManager, or return None if the key is rejected."""
    try:
        return KeyManager(key, config=config)
    except MusicError:
        return None
