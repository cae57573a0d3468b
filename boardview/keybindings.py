"""Named keyboard shortcuts and their storage in a key/value mapping."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, MutableMapping

from .config import parse_str
from .keys import Key, KeyBinding

log = logging.getLogger(__name__)

BINDING_SEPARATOR = "|"
MODIFIER_SEPARATOR = "~"
CONFIG_PREFIX = "KeyBinding"

# Key names that clash with the separators get an alternative stored name.
_SERIALIZE_NAME = {"|": "Pipe", "~": "Tilde", "=": "Equals"}
_DESERIALIZE_NAME = {stored: name for name, stored in _SERIALIZE_NAME.items()}

_NAME_TO_KEY = {key.value: key for key in Key if key is not Key.NONE}

DESCRIPTIONS: tuple[tuple[str, str], ...] = (
    ("Open", "Load file"),
    ("Quit", "Quit"),
    ("CloseDialog", "Close dialog/popup"),
    ("Accept", "Accept dialog"),
    ("Validate", "Validate dialog"),
    ("", ""),
    ("PanUp", "Pan up"),
    ("PanDown", "Pan down"),
    ("PanLeft", "Pan left"),
    ("PanRight", "Pan right"),
    ("", ""),
    ("ZoomIn", "Zoom in"),
    ("ZoomOut", "Zoom out"),
    ("", ""),
    ("RotateCW", "Rotate clockwise"),
    ("RotateCCW", "Rotate anticlockwise"),
    ("Mirror", "Mirror board"),
    ("Flip", "Flip board"),
    ("", ""),
    ("Search", "Search for component or net"),
    ("Clear", "Clear all highlighted items"),
    ("", ""),
    ("InfoPanel", "Show/hide information panel"),
    ("PartList", "Show/hide component list"),
    ("NetList", "Show/hide component list"),
    ("TogglePins", "Show/hide pins"),
)
"""Action names with their descriptions; empty pairs separate groups."""


def key_from_name(name: str) -> Key:
    """Return the key with the given display name.

    Raises KeyError when no key has that name.
    """
    try:
        return _NAME_TO_KEY[name]
    except KeyError:
        raise KeyError(f"Unknown key name: {name}") from None


def _stored_key(name: str) -> Key:
    name = _DESERIALIZE_NAME.get(name, name)
    try:
        return key_from_name(name)
    except KeyError:
        log.error("Unknown key name: %s", name)
        return Key.NONE


class KeyBindings:
    """Shortcuts for each named action; an action may have several."""

    descriptions = DESCRIPTIONS

    def __init__(self) -> None:
        self.bindings: dict[str, list[KeyBinding]] = {}
        self.reset()

    def is_pressed(self, name: str, down: Collection, pressed: Collection) -> bool:
        """Return True if any binding of the action name is being pressed."""
        return any(binding.is_pressed(down, pressed) for binding in self.bindings.get(name, ()))

    def reset(self) -> None:
        """Restore the default bindings."""
        b = KeyBinding
        ctrl = [Key.MOD_CTRL]
        self.bindings.update(
            {
                "Quit": [b(Key.Q, list(ctrl))],
                "Open": [b(Key.O, list(ctrl))],
                "Search": [b(Key.F, list(ctrl)), b(Key.SLASH)],
                "CloseDialog": [b(Key.ESCAPE)],
                "Validate": [b(Key.ENTER, [Key.MOD_SHIFT])],
                "Accept": [b(Key.ENTER)],
                "Flip": [b(Key.SPACE)],
                "Mirror": [b(Key.M)],
                "RotateCW": [b(Key.R), b(Key.PERIOD), b(Key.KEYPAD_DECIMAL)],
                "RotateCCW": [b(Key.COMMA), b(Key.KEYPAD_0)],
                "ZoomIn": [b(Key.KEYPAD_ADD), b(Key.EQUAL)],
                "ZoomOut": [b(Key.MINUS), b(Key.KEYPAD_SUBTRACT)],
                "PanDown": [b(Key.S), b(Key.KEYPAD_2)],
                "PanUp": [b(Key.W), b(Key.KEYPAD_8)],
                "PanLeft": [b(Key.A), b(Key.KEYPAD_4)],
                "PanRight": [b(Key.D), b(Key.KEYPAD_6)],
                "Center": [b(Key.X), b(Key.KEYPAD_5)],
                "InfoPanel": [b(Key.I)],
                "NetList": [b(Key.L)],
                "PartList": [b(Key.K)],
                "TogglePins": [b(Key.P)],
                "Clear": [b(Key.ESCAPE)],
            }
        )

    def read_from_config(self, values: MutableMapping[str, str]) -> None:
        """Load bindings stored as "Mod~Key|Key", then write them back normalised.

        Actions missing from values keep their current bindings; unknown key
        names are logged and read as no key.
        """
        for name in self.bindings:
            line = parse_str(values, CONFIG_PREFIX + name, None)
            if line is None:
                continue
            bindings = []
            for text in filter(None, line.split(BINDING_SEPARATOR)):
                names = [part for part in text.split(MODIFIER_SEPARATOR) if part]
                if not names:
                    continue
                keys = [_stored_key(key_name) for key_name in names]
                bindings.append(KeyBinding(keys[-1], keys[:-1]))
            self.bindings[name] = bindings
        self.write_to_config(values)

    def write_to_config(self, values: MutableMapping[str, str]) -> None:
        """Store every action's bindings into values."""
        for name, bindings in self.bindings.items():
            values[CONFIG_PREFIX + name] = BINDING_SEPARATOR.join(
                MODIFIER_SEPARATOR.join(
                    _SERIALIZE_NAME.get(key.value, key.value)
                    for key in [*binding.modifiers, binding.key]
                )
                for binding in bindings
            )

    def get_key_names(self, bindname: str) -> str:
        """Return the bindings of an action as "<Mod+Key> <Key>"."""
        return " ".join(f"<{binding.to_string()}>" for binding in self.bindings.get(bindname, ()))


def _read_only_view(values: Mapping[str, str]) -> dict[str, str]:
    return dict(values)