"""Resolve input events to human-readable trigger names.

Keyboard events carry up to three codes. ``keycode`` and
``physical_keycode`` are engine key constants (printable keys use their
ASCII value, special keys are offset by ``KEY_SPECIAL``), while ``unicode``
is the character the key produced. Mouse button events carry a
``button_index``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from gdconfig.models.events import InputEvent

KEY_SPECIAL = 1 << 22

EVENT_KEY = "InputEventKey"
EVENT_MOUSE_BUTTON = "InputEventMouseButton"

# Engine key constants by name. Special keys are offsets from KEY_SPECIAL.
_SPECIAL_KEYS: Dict[int, str] = {
    0x01: "ESCAPE",
    0x02: "TAB",
    0x03: "BACKTAB",
    0x04: "BACKSPACE",
    0x05: "ENTER",
    0x06: "KP_ENTER",
    0x07: "INSERT",
    0x08: "DELETE",
    0x09: "PAUSE",
    0x0A: "PRINT",
    0x0B: "SYSREQ",
    0x0C: "CLEAR",
    0x0D: "HOME",
    0x0E: "END",
    0x0F: "LEFT",
    0x10: "UP",
    0x11: "RIGHT",
    0x12: "DOWN",
    0x13: "PAGEUP",
    0x14: "PAGEDOWN",
    0x15: "SHIFT",
    0x16: "CTRL",
    0x17: "META",
    0x18: "ALT",
    0x19: "CAPSLOCK",
    0x1A: "NUMLOCK",
    0x1B: "SCROLLLOCK",
    0x42: "MENU",
    0x43: "HYPER",
    0x45: "HELP",
    0x48: "BACK",
    0x49: "FORWARD",
    0x4A: "STOP",
    0x4B: "REFRESH",
    0x4C: "VOLUMEDOWN",
    0x4D: "VOLUMEMUTE",
    0x4E: "VOLUMEUP",
    0x54: "MEDIAPLAY",
    0x55: "MEDIASTOP",
    0x56: "MEDIAPREVIOUS",
    0x57: "MEDIANEXT",
    0x58: "MEDIARECORD",
    0x59: "HOMEPAGE",
    0x5A: "FAVORITES",
    0x5B: "SEARCH",
    0x5C: "STANDBY",
    0x5D: "OPENURL",
    0x5E: "LAUNCHMAIL",
    0x5F: "LAUNCHMEDIA",
    0x70: "GLOBE",
    0x71: "KEYBOARD",
    0x72: "JIS_EISU",
    0x73: "JIS_KANA",
    0x81: "KP_MULTIPLY",
    0x82: "KP_DIVIDE",
    0x83: "KP_SUBTRACT",
    0x84: "KP_PERIOD",
    0x85: "KP_ADD",
    0x7FFFFF: "UNKNOWN",
}
_SPECIAL_KEYS.update({0x1C + n: f"F{n + 1}" for n in range(35)})
_SPECIAL_KEYS.update({0x86 + n: f"KP_{n}" for n in range(10)})
_SPECIAL_KEYS.update({0x60 + n: f"LAUNCH{n:X}" for n in range(16)})

_PRINTABLE_KEYS: Dict[int, str] = {
    32: "SPACE",
    33: "EXCLAM",
    34: "QUOTEDBL",
    35: "NUMBERSIGN",
    36: "DOLLAR",
    37: "PERCENT",
    38: "AMPERSAND",
    39: "APOSTROPHE",
    40: "PARENLEFT",
    41: "PARENRIGHT",
    42: "ASTERISK",
    43: "PLUS",
    44: "COMMA",
    45: "MINUS",
    46: "PERIOD",
    47: "SLASH",
    58: "COLON",
    59: "SEMICOLON",
    60: "LESS",
    61: "EQUAL",
    62: "GREATER",
    63: "QUESTION",
    64: "AT",
    91: "BRACKETLEFT",
    92: "BACKSLASH",
    93: "BRACKETRIGHT",
    94: "ASCIICIRCUM",
    95: "UNDERSCORE",
    96: "QUOTELEFT",
    123: "BRACELEFT",
    124: "BAR",
    125: "BRACERIGHT",
    126: "ASCIITILDE",
    165: "YEN",
    167: "SECTION",
}
_PRINTABLE_KEYS.update({48 + n: f"KEY_{n}" for n in range(10)})
_PRINTABLE_KEYS.update({code: chr(code) for code in range(ord("A"), ord("Z") + 1)})

KEY_NAMES: Dict[int, str] = dict(_PRINTABLE_KEYS)
KEY_NAMES.update({KEY_SPECIAL | offset: name for offset, name in _SPECIAL_KEYS.items()})

# Names for the character a key produced.
UNICODE_NAMES: Dict[int, str] = {
    8: "backspace",
    9: "tab",
    13: "enter",
    27: "escape",
    32: "space",
    127: "delete",
    256: "left",
    257: "right",
    258: "up",
    259: "down",
    260: "page_up",
    261: "page_down",
    262: "home",
    263: "end",
    264: "insert",
}
UNICODE_NAMES.update({265 + n: f"f{n + 1}" for n in range(12)})

MOUSE_BUTTON_NAMES: Dict[int, str] = {
    1: "left",
    2: "right",
    3: "middle",
    4: "wheel_up",
    5: "wheel_down",
    6: "wheel_left",
    7: "wheel_right",
}


def key_name(keycode: int) -> str:
    """Name of an engine key constant, or ``""`` for an unknown constant."""
    return KEY_NAMES.get(keycode, "")


def unicode_name(code: int) -> str:
    """Name of a produced character, or ``""`` outside the known ranges."""
    if code in UNICODE_NAMES:
        return UNICODE_NAMES[code]
    if 32 <= code <= 126:
        return chr(code)
    return ""


def key_from_codes(
    keycode: Optional[int],
    physical_keycode: Optional[int],
    unicode: Optional[int],
) -> Optional[str]:
    """Resolve the three keyboard codes to a name.

    The first present, non-zero code wins, in the order ``keycode``,
    ``physical_keycode``, ``unicode``.

    Examples:
        >>> key_from_codes(None, None, 97)
        'a'
        >>> key_from_codes(65, None, 97)
        'A'
        >>> key_from_codes(None, None, 300)
        ''
        >>> key_from_codes(None, None, None) is None
        True
    """
    if keycode:
        return key_name(keycode)
    if physical_keycode:
        return key_name(physical_keycode)
    if unicode:
        return unicode_name(unicode)
    return None


def mouse_button_name(button_index: int, double_click: bool = False) -> Optional[str]:
    """Resolve a mouse button index, or None for an unknown button.

    Examples:
        >>> mouse_button_name(1)
        'left_click'
        >>> mouse_button_name(5, double_click=True)
        'double_wheel_down'
        >>> mouse_button_name(8) is None
        True
    """
    name = MOUSE_BUTTON_NAMES.get(button_index)
    if name is None:
        return None
    prefix = "double_" if double_click else ""
    suffix = "_click" if button_index <= 3 else ""
    return f"{prefix}{name}{suffix}"


def _pressed(event: "InputEvent", modifier: str) -> bool:
    return event.int_props.get(modifier, 0) == 1


def trigger_string(event: "InputEvent") -> str:
    """Build the full trigger string for ``event``.

    Modifier prefixes (``ctrl+``, ``shift+``, ``alt+``) are included when the
    matching int property is exactly 1. They still apply when no key or
    button name resolves, in which case only the prefixes are returned.
    """
    name: Optional[str] = None
    if event.event_type == EVENT_KEY:
        name = key_from_codes(
            event.int_props.get("keycode"),
            event.int_props.get("physical_keycode"),
            event.int_props.get("unicode"),
        )
    elif event.event_type == EVENT_MOUSE_BUTTON:
        name = mouse_button_name(
            event.int_props.get("button_index", 0),
            event.bool_props.get("double_click", False),
        )

    prefix = ""
    if _pressed(event, "ctrl_pressed"):
        prefix += "ctrl+"
    if _pressed(event, "shift_pressed"):
        prefix += "shift+"
    if _pressed(event, "alt_pressed"):
        prefix += "alt+"
    return prefix + (name or "")


__all__ = [
    "EVENT_KEY",
    "EVENT_MOUSE_BUTTON",
    "KEY_NAMES",
    "KEY_SPECIAL",
    "MOUSE_BUTTON_NAMES",
    "UNICODE_NAMES",
    "key_from_codes",
    "key_name",
    "mouse_button_name",
    "trigger_string",
]
