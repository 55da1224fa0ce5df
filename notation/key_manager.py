"""Key context resolver: spells notes against a key signature.

A KeyManager owns one key signature and three co-evolving maps:

    scale_map                    letter      → current spelling
    scale_map_by_value           pitch class → current spelling
    original_scale_map_by_value  pitch class → diatonic spelling (frozen)

``select_note`` answers "how should this note be written right now" and
mutates the first two maps whenever a note departs from the established
spelling, so the departure sticks for the rest of the context (a measure,
typically). Resolution order matters: feed notes in document order.

State machine::

    set_key / reset ──→ diatonic maps ──(select_note, change=True)──→ maps with exceptions
          ↑                                                              │
          └──────────────────────────(set_key / reset)───────────────────┘

Usage::

    from notation.key_manager import KeyManager

    manager = KeyManager("bb")
    manager.select_note("bb")   # Resolution(note='bb', accidental='b', change=False)
    manager.select_note("bn")   # Resolution(note='bn', accidental='n', change=True)
    manager.select_note("bn")   # Resolution(note='bn', accidental='n', change=False)
    manager.select_note("bb")   # Resolution(note='bb', accidental='b', change=True)

Instances are not thread-safe; give every concurrently resolved context its
own KeyManager.
"""

from __future__ import annotations

import logging

from notation.config import DEFAULT_CONFIG, KeyManagerConfig
from notation.theory.errors import InvalidNoteNameError, KeyMapInvariantError
from notation.theory.notes import key_parts, note_parts, note_value, relative_note_name
from notation.theory.scales import key_scale
from notation.theory.tables import ROOT_INDICES, ROOTS
from notation.theory.types import KeyParts, Resolution

logger = logging.getLogger(__name__)


class KeyManager:
    """Resolves accidentals for notes in a key, tracking exceptions as they occur.

    Args:
        key: Key signature, e.g. "bb", "f#m". Defaults to
            ``config.default_key``.
        config: Scale-type wiring and defaults (default: DEFAULT_CONFIG).

    Raises:
        InvalidKeyError: If the key is malformed.
        UnsupportedKeyTypeError: If the key type has no template in config.

    Example::

        manager = KeyManager("g")
        manager.get_accidental("f").accidental   # '#'
    """

    def __init__(self, key: str | None = None, config: KeyManagerConfig = DEFAULT_CONFIG) -> None:
        """Parse the key and build its scale maps."""
        self._config = config
        self._key = config.default_key if key is None else key
        self._key_parts: KeyParts
        self._scale: tuple[int, ...]
        self._scale_map: dict[str, str]
        self._scale_map_by_value: dict[int, str]
        self._original_scale_map_by_value: dict[int, str]
        self._install(self._key)

    # ------------------------------------------------------------------
    # Key configuration
    # ------------------------------------------------------------------

    def set_key(self, key: str) -> KeyManager:
        """Switch to a new key, discarding all accidental exceptions.

        The previous state is kept if the new key fails validation.
        """
        self._install(key)
        return self

    def get_key(self) -> str:
        return self._key

    def reset(self) -> KeyManager:
        """Rebuild the maps for the current key, discarding all exceptions."""
        self._install(self._key)
        return self

    def _install(self, key: str) -> None:
        parts = key_parts(key)
        scale = key_scale(parts, self._config.scale_types, key=key)
        note_location = ROOT_INDICES[parts.root]

        scale_map: dict[str, str] = {}
        scale_map_by_value: dict[int, str] = {}
        for i, tone in enumerate(scale):
            root_name = ROOTS[(note_location + i) % len(ROOTS)]
            note_name = relative_note_name(root_name, tone)
            scale_map[root_name] = note_name
            scale_map_by_value[tone] = note_name

        self._key = key
        self._key_parts = parts
        self._scale = scale
        self._scale_map = scale_map
        self._scale_map_by_value = scale_map_by_value
        self._original_scale_map_by_value = dict(scale_map_by_value)
        logger.debug("Key set to %r: scale=%s map=%s", key, scale, scale_map)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def key_parts(self) -> KeyParts:
        return self._key_parts

    @property
    def scale(self) -> tuple[int, ...]:
        """Pitch classes of the key's diatonic scale, starting on the tonic."""
        return self._scale

    @property
    def scale_map(self) -> dict[str, str]:
        """Copy of the current letter → spelling map."""
        return dict(self._scale_map)

    @property
    def scale_map_by_value(self) -> dict[int, str]:
        """Copy of the current pitch class → spelling map."""
        return dict(self._scale_map_by_value)

    @property
    def original_scale_map_by_value(self) -> dict[int, str]:
        """Copy of the diatonic pitch class → spelling map taken at key-set time."""
        return dict(self._original_scale_map_by_value)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _spelling_for(self, root: str) -> str:
        spelling = self._scale_map.get(root)
        if spelling is None:
            raise KeyMapInvariantError(
                f"Key map for {self._key!r} has no spelling for letter {root!r}"
            )
        return spelling

    def get_accidental(self, key: str) -> Resolution:
        """Return the key's current spelling for the letter of ``key``.

        Args:
            key: Any note or key string; only its root letter is used,
                e.g. "f", "F#", "bbm".

        Raises:
            InvalidKeyError: If the string parses neither as a note nor a key.
            KeyMapInvariantError: If the letter is missing from the map.
        """
        try:
            root = note_parts(key).root
        except InvalidNoteNameError:
            root = key_parts(key).root
        spelling = self._spelling_for(root)
        return Resolution(note=spelling, accidental=note_parts(spelling).accidental)

    def select_note(self, note: str) -> Resolution:
        """Resolve how ``note`` should be written, updating the context.

        Checked in priority order:

        1. exact match with the letter's current spelling → no change
        2. pitch class already spelled by some letter → reuse it, no change
        3. pitch class belongs to the key's diatonic scale → restore the
           diatonic spelling (change)
        4. the bare letter → install it as a natural (change)
        5. anything else → install the spelling as a new exception (change)

        Every lookup runs before the maps are touched, so a failing call
        leaves the context as it was.

        Args:
            note: Note spelling, any case, e.g. "g#", "Bb", "cn".

        Returns:
            Resolution; ``change`` tells the renderer to draw the accidental.

        Raises:
            InvalidNoteNameError: If the note is malformed.
            KeyMapInvariantError: If the key map lacks the note's letter.
        """
        lowered = note.lower()
        parts = note_parts(lowered)
        scale_note = self._spelling_for(parts.root)
        mod_parts = note_parts(scale_note)

        if scale_note == lowered:
            return Resolution(note=scale_note, accidental=parts.accidental, change=False)

        value = note_value(lowered)
        value_note = self._scale_map_by_value.get(value)
        if value_note is not None:
            return Resolution(
                note=value_note, accidental=note_parts(value_note).accidental, change=False
            )

        scale_value = note_value(scale_note)
        original_note = self._original_scale_map_by_value.get(value)
        if original_note is not None:
            accidental = note_parts(original_note).accidental
            self._replace(mod_parts.root, scale_value, value, original_note, "restore")
            return Resolution(note=original_note, accidental=accidental, change=True)

        if mod_parts.root == lowered:
            self._replace(mod_parts.root, scale_value, value, mod_parts.root, "natural")
            return Resolution(note=mod_parts.root, accidental=None, change=True)

        self._replace(mod_parts.root, scale_value, value, lowered, "exception")
        return Resolution(note=lowered, accidental=parts.accidental, change=True)

    def _replace(self, letter: str, old_value: int, new_value: int, spelling: str, reason: str) -> None:
        previous = self._scale_map.get(letter)
        self._scale_map_by_value.pop(old_value, None)
        self._scale_map_by_value[new_value] = spelling
        self._scale_map[letter] = spelling
        logger.debug(
            "Key %r: %s for letter %r, %r -> %r", self._key, reason, letter, previous, spelling
        )

    def __repr__(self) -> str:
        return f"KeyManager(key={self._key!r}, scale_map={self._scale_map!r})"
