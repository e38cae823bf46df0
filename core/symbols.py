"""Symbol tables for controller inputs and keyboard/mouse destinations

Both enumerations are closed and their values are the integers exchanged with
the native engine. Lookups in either direction never raise; a miss is None.
"""
from enum import IntEnum
from types import MappingProxyType
from typing import Optional


class ButtonCode(IntEnum):
    """XInput virtual pad codes (VK_PAD_* in Xinput.h)."""
    A = 0x5800
    B = 0x5801
    X = 0x5802
    Y = 0x5803
    RSHOULDER = 0x5804
    LSHOULDER = 0x5805
    LTRIGGER = 0x5806
    RTRIGGER = 0x5807

    DPAD_UP = 0x5810
    DPAD_DOWN = 0x5811
    DPAD_LEFT = 0x5812
    DPAD_RIGHT = 0x5813
    START = 0x5814
    BACK = 0x5815
    LTHUMB_PRESS = 0x5816
    RTHUMB_PRESS = 0x5817

    # synthetic thumbstick directions
    LTHUMB_UP = 0x5820
    LTHUMB_DOWN = 0x5821
    LTHUMB_RIGHT = 0x5822
    LTHUMB_LEFT = 0x5823
    LTHUMB_UPLEFT = 0x5824
    LTHUMB_UPRIGHT = 0x5825
    LTHUMB_DOWNRIGHT = 0x5826
    LTHUMB_DOWNLEFT = 0x5827

    RTHUMB_UP = 0x5830
    RTHUMB_DOWN = 0x5831
    RTHUMB_RIGHT = 0x5832
    RTHUMB_LEFT = 0x5833
    RTHUMB_UPLEFT = 0x5834
    RTHUMB_UPRIGHT = 0x5835
    RTHUMB_DOWNRIGHT = 0x5836
    RTHUMB_DOWNLEFT = 0x5837


class KeyCode(IntEnum):
    """Windows virtual-key codes.

    Where Windows has two names for one code the first one listed is the
    canonical name, later ones are enum aliases (usable for reverse lookup).
    """
    LBUTTON = 0x01
    RBUTTON = 0x02
    CANCEL = 0x03
    MBUTTON = 0x04
    XBUTTON1 = 0x05
    XBUTTON2 = 0x06
    BACK = 0x08
    TAB = 0x09
    LINE_FEED = 0x0A
    CLEAR = 0x0C
    RETURN = 0x0D
    ENTER = 0x0D
    SHIFT_KEY = 0x10
    CONTROL_KEY = 0x11
    MENU = 0x12
    PAUSE = 0x13
    CAPITAL = 0x14
    CAPS_LOCK = 0x14
    KANA_MODE = 0x15
    JUNJA_MODE = 0x17
    FINAL_MODE = 0x18
    HANJA_MODE = 0x19
    ESCAPE = 0x1B
    IME_CONVERT = 0x1C
    IME_NONCONVERT = 0x1D
    IME_ACCEPT = 0x1E
    IME_MODE_CHANGE = 0x1F
    SPACE = 0x20
    PRIOR = 0x21
    PAGE_UP = 0x21
    NEXT = 0x22
    PAGE_DOWN = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SELECT = 0x29
    PRINT = 0x2A
    EXECUTE = 0x2B
    SNAPSHOT = 0x2C
    PRINT_SCREEN = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F

    D0 = 0x30
    D1 = 0x31
    D2 = 0x32
    D3 = 0x33
    D4 = 0x34
    D5 = 0x35
    D6 = 0x36
    D7 = 0x37
    D8 = 0x38
    D9 = 0x39

    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A

    LWIN = 0x5B
    RWIN = 0x5C
    APPS = 0x5D
    SLEEP = 0x5F

    NUMPAD0 = 0x60
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F

    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87

    NUM_LOCK = 0x90
    SCROLL = 0x91
    LSHIFT_KEY = 0xA0
    RSHIFT_KEY = 0xA1
    LCONTROL_KEY = 0xA2
    RCONTROL_KEY = 0xA3
    LMENU = 0xA4
    RMENU = 0xA5

    BROWSER_BACK = 0xA6
    BROWSER_FORWARD = 0xA7
    BROWSER_REFRESH = 0xA8
    BROWSER_STOP = 0xA9
    BROWSER_SEARCH = 0xAA
    BROWSER_FAVORITES = 0xAB
    BROWSER_HOME = 0xAC
    VOLUME_MUTE = 0xAD
    VOLUME_DOWN = 0xAE
    VOLUME_UP = 0xAF
    MEDIA_NEXT_TRACK = 0xB0
    MEDIA_PREVIOUS_TRACK = 0xB1
    MEDIA_STOP = 0xB2
    MEDIA_PLAY_PAUSE = 0xB3
    LAUNCH_MAIL = 0xB4
    SELECT_MEDIA = 0xB5
    LAUNCH_APPLICATION1 = 0xB6
    LAUNCH_APPLICATION2 = 0xB7

    OEM_SEMICOLON = 0xBA
    OEM_PLUS = 0xBB
    OEM_COMMA = 0xBC
    OEM_MINUS = 0xBD
    OEM_PERIOD = 0xBE
    OEM_QUESTION = 0xBF
    OEM_TILDE = 0xC0
    OEM_OPEN_BRACKETS = 0xDB
    OEM_PIPE = 0xDC
    OEM_CLOSE_BRACKETS = 0xDD
    OEM_QUOTES = 0xDE
    OEM8 = 0xDF
    OEM_BACKSLASH = 0xE2
    PROCESS_KEY = 0xE5
    PACKET = 0xE7
    ATTN = 0xF6
    CRSEL = 0xF7
    EXSEL = 0xF8
    ERASE_EOF = 0xF9
    PLAY = 0xFA
    ZOOM = 0xFB
    NO_NAME = 0xFC
    PA1 = 0xFD
    OEM_CLEAR = 0xFE


BUTTON = "button"
KEY = "key"

# code -> canonical name (enum iteration skips aliases)
_BUTTON_NAMES_BY_CODE = MappingProxyType({int(m): m.name for m in ButtonCode})
_KEY_NAMES_BY_CODE = MappingProxyType({int(m): m.name for m in KeyCode})

# name -> member, aliases included
_BUTTONS_BY_NAME = MappingProxyType(dict(ButtonCode.__members__))
_KEYS_BY_NAME = MappingProxyType(dict(KeyCode.__members__))

# precomputed picker lists, in code order
BUTTON_NAMES = tuple(_BUTTON_NAMES_BY_CODE.values())
KEY_NAMES = tuple(_KEY_NAMES_BY_CODE.values())

_TABLES = {
    BUTTON: (_BUTTON_NAMES_BY_CODE, _BUTTONS_BY_NAME),
    KEY: (_KEY_NAMES_BY_CODE, _KEYS_BY_NAME),
}


def lookup_name(kind: str, code) -> Optional[str]:
    """Return the symbolic name of `code` in the `kind` table, or None."""
    tables = _TABLES.get(kind)
    if tables is None or isinstance(code, bool) or not isinstance(code, int):
        return None
    return tables[0].get(int(code))


def lookup_code(kind: str, name) -> Optional[IntEnum]:
    """Reverse lookup. Matches exact names first, then upper-cased names."""
    tables = _TABLES.get(kind)
    if tables is None or not isinstance(name, str):
        return None
    by_name = tables[1]
    name = name.strip()
    return by_name.get(name) or by_name.get(name.upper())


def button_name(code) -> Optional[str]:
    return lookup_name(BUTTON, code)


def key_name(code) -> Optional[str]:
    return lookup_name(KEY, code)


def button_code(name) -> Optional[ButtonCode]:
    return lookup_code(BUTTON, name)


def key_code(name) -> Optional[KeyCode]:
    return lookup_code(KEY, name)
