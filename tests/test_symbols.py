from core.symbols import (
    BUTTON_NAMES, KEY_NAMES, ButtonCode, KeyCode,
    button_code, button_name, key_code, key_name, lookup_code, lookup_name,
)


def test_button_name_known_and_unknown():
    assert button_name(0x5800) == "A"
    assert button_name(0x5837) == "RTHUMB_DOWNLEFT"
    assert button_name(0x5808) is None
    assert button_name(87) is None


def test_key_name_uses_canonical_name_for_aliases():
    assert key_name(0x57) == "W"
    assert key_name(0x0D) == "RETURN"
    assert key_name(0x21) == "PRIOR"
    assert key_name(0x5800) is None


def test_lookups_never_raise_on_garbage():
    assert button_name(None) is None
    assert key_name("W") is None
    assert key_name(True) is None
    assert lookup_name("axis", 1) is None
    assert lookup_code("axis", "A") is None
    assert button_code(None) is None


def test_reverse_lookup():
    assert button_code("DPAD_UP") is ButtonCode.DPAD_UP
    assert button_code("dpad_up") is ButtonCode.DPAD_UP
    assert key_code("ENTER") is KeyCode.RETURN
    assert key_code("Space") is KeyCode.SPACE
    assert key_code("NOT_A_KEY") is None
    assert button_code("SPACE") is None


def test_name_lists_are_static_and_ordered():
    assert isinstance(BUTTON_NAMES, tuple)
    assert len(BUTTON_NAMES) == 32
    assert BUTTON_NAMES[0] == "A"
    assert "ENTER" not in KEY_NAMES
    assert KEY_NAMES.index("A") < KEY_NAMES.index("Z")
    assert len(set(KEY_NAMES)) == len(KEY_NAMES)
