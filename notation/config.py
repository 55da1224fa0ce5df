"""
Configuration dataclasses for the key context resolver.

These immutable config objects decouple scale-type wiring from the
KeyManager signature, making it easy to define standard configurations and
reuse them across every context of a score.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from notation.theory.errors import MusicError
from notation.theory.notes import key_parts
from notation.theory.tables import KEY_TYPES, SCALE_TYPES, SCALES


@dataclass(frozen=True)
class KeyManagerConfig:
    """
    Configuration for KeyManager instances.

    Attributes:
        scale_types: Key-type token → scale template name. Defaults to major
            ("M") and minor ("m"); a key whose type is missing here fails with
            UnsupportedKeyTypeError.
        default_key: Key used when a KeyManager is built without one.
            Defaults to "c" (C major).

    Example:
        >>> config = KeyManagerConfig(default_key="g")
        >>> manager = KeyManager(config=config)
    """

    scale_types: Mapping[str, str] = field(default_factory=lambda: SCALE_TYPES)
    default_key: str = "c"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        unknown_types = set(self.scale_types) - KEY_TYPES
        if unknown_types:
            raise ValueError(
                f"Unknown key types {sorted(unknown_types)}, valid options: {sorted(KEY_TYPES)}"
            )
        for token, name in self.scale_types.items():
            if name not in SCALES:
                raise ValueError(
                    f"Unknown scale {name!r} for key type {token!r}, "
                    f"valid options: {sorted(SCALES)}"
                )
        try:
            default_parts = key_parts(self.default_key)
        except MusicError as exc:
            raise ValueError(f"default_key is not a valid key: {exc}") from exc
        if default_parts.type not in self.scale_types:
            raise ValueError(
                f"default_key {self.default_key!r} has key type {default_parts.type!r}, "
                f"which scale_types does not map"
            )
        # Store a read-only copy of the caller's mapping.
        object.__setattr__(self, "scale_types", MappingProxyType(dict(self.scale_types)))


# Pre-defined configurations for common use cases

DEFAULT_CONFIG = KeyManagerConfig()
"""Default configuration: major and minor keys, C major when no key is given."""

EXTENDED_MINOR_CONFIG = KeyManagerConfig(
    scale_types={
        "M": "major",
        "m": "minor",
        "harm": "harmonic minor",
        "mel": "melodic minor",
    }
)
"""Also resolves "harm" and "mel" keys (melodic minor in its ascending form)."""
