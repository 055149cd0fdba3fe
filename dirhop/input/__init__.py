"""Input-layer public API for key decoding and key-to-action dispatch."""

from .bindings import ACTIONS, DEFAULT_KEY_BINDINGS, merge_key_bindings
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "ACTIONS",
    "DEFAULT_KEY_BINDINGS",
    "merge_key_bindings",
    "KeyComboBinding",
    "KeyComboRegistry",
]
