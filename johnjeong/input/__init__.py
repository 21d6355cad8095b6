"""Input-layer public API for key decoding and key bindings.

``read_key`` is the low-level terminal decoder; ``KeyMap`` and
``apply_action`` turn decoded keys into navigation transitions.
"""

from .keys import (
    KeyAction,
    KeyBinding,
    KeyMap,
    apply_action,
    default_key_map,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyAction",
    "KeyBinding",
    "KeyMap",
    "apply_action",
    "default_key_map",
]
