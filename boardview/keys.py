"""Keyboard keys, modifier handling and single key bindings."""

from __future__ import annotations

import re
import string
from collections.abc import Collection
from dataclasses import dataclass, field
from enum import Enum

_SIMPLE_NAMES = (
    "Tab", "LeftArrow", "RightArrow", "UpArrow", "DownArrow", "PageUp", "PageDown",
    "Home", "End", "Insert", "Delete", "Backspace", "Space", "Enter", "Escape",
    "LeftCtrl", "LeftShift", "LeftAlt", "LeftSuper",
    "RightCtrl", "RightShift", "RightAlt", "RightSuper", "Menu",
)

_PUNCTUATION = (
    ("APOSTROPHE", "'"),
    ("COMMA", ","),
    ("MINUS", "-"),
    ("PERIOD", "."),
    ("SLASH", "/"),
    ("SEMICOLON", ";"),
    ("EQUAL", "="),
    ("LEFT_BRACKET", "["),
    ("BACKSLASH", "\\"),
    ("RIGHT_BRACKET", "]"),
    ("GRAVE_ACCENT", "`"),
)

_LATER_NAMES = (
    "CapsLock", "ScrollLock", "NumLock", "PrintScreen", "Pause",
    *(f"Keypad{n}" for n in range(10)),
    "KeypadDecimal", "KeypadDivide", "KeypadMultiply", "KeypadSubtract",
    "KeypadAdd", "KeypadEnter", "KeypadEqual", "AppBack", "AppForward",
    "GamepadStart", "GamepadBack", "GamepadFaceLeft", "GamepadFaceRight",
    "GamepadFaceUp", "GamepadFaceDown", "GamepadDpadLeft", "GamepadDpadRight",
    "GamepadDpadUp", "GamepadDpadDown", "GamepadL1", "GamepadR1", "GamepadL2",
    "GamepadR2", "GamepadL3", "GamepadR3", "GamepadLStickLeft", "GamepadLStickRight",
    "GamepadLStickUp", "GamepadLStickDown", "GamepadRStickLeft", "GamepadRStickRight",
    "GamepadRStickUp", "GamepadRStickDown",
    "MouseLeft", "MouseRight", "MouseMiddle", "MouseX1", "MouseX2",
    "MouseWheelX", "MouseWheelY",
    "ModCtrl", "ModShift", "ModAlt", "ModSuper",
)

_WORD_BREAK = re.compile(r"(?<=[a-z])(?=[A-Z0-9])")


def _member(name: str) -> str:
    return _WORD_BREAK.sub("_", name).upper()


def _key_table() -> list[tuple[str, str]]:
    table = [("NONE", "None")]
    table += [(_member(name), name) for name in _SIMPLE_NAMES]
    table += [(f"DIGIT_{n}", str(n)) for n in range(10)]
    table += [(letter, letter) for letter in string.ascii_uppercase]
    table += [(f"F{n}", f"F{n}") for n in range(1, 25)]
    table += list(_PUNCTUATION)
    table += [(_member(name), name) for name in _LATER_NAMES]
    return table


Key = Enum("Key", _key_table(), module=__name__)
Key.__doc__ = "A keyboard, mouse or gamepad key; the value is its display name."

MODIFIERS: frozenset = frozenset(
    {
        Key.MOD_CTRL, Key.MOD_SHIFT, Key.MOD_ALT, Key.MOD_SUPER,
        Key.LEFT_CTRL, Key.LEFT_SHIFT, Key.LEFT_ALT, Key.LEFT_SUPER,
        Key.RIGHT_CTRL, Key.RIGHT_SHIFT, Key.RIGHT_ALT, Key.RIGHT_SUPER,
    }
)

# Only the side-neutral modifiers are reported, so left and right act alike.
HANDLED_MODIFIERS: tuple = (Key.MOD_CTRL, Key.MOD_SHIFT, Key.MOD_ALT, Key.MOD_SUPER)


def is_modifier(key) -> bool:
    """Return True if key is a modifier and cannot end a binding."""
    return key in MODIFIERS


def pressed_modifiers(down: Collection) -> list:
    """Return the handled modifiers among the keys held down, in fixed order."""
    return [modifier for modifier in HANDLED_MODIFIERS if modifier in down]


@dataclass
class KeyBinding:
    """A key to press while some modifier keys are held down."""

    key: Key = Key.NONE
    modifiers: list = field(default_factory=list)

    def is_pressed(self, down: Collection, pressed: Collection) -> bool:
        """Return True if every modifier is in down and the key is in pressed."""
        return (
            all(m is not Key.NONE and m in down for m in self.modifiers)
            and self.key is not Key.NONE
            and self.key in pressed
        )

    def to_string(self) -> str:
        """Return the binding as "Mod+...+Key"."""
        key_name = "" if self.key is Key.NONE else self.key.value
        return "".join(f"{m.value}+" for m in self.modifiers) + key_name