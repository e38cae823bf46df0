from core.state import KeyMap, Preset, StickSelection, next_stick
from core.symbols import ButtonCode, KeyCode


def test_aliases_computed_on_construction():
    km = KeyMap(ButtonCode.A, KeyCode.W, True)
    assert km.source == 0x5800
    assert km.source_alias == "A"
    assert km.destination_alias == "W"
    assert km.repeat is True


def test_unknown_codes_leave_alias_empty():
    km = KeyMap(1, 0x5800)
    assert km.source_alias == ""
    assert km.destination_alias == ""


def test_set_source_updates_alias_for_known_code():
    km = KeyMap(ButtonCode.A, KeyCode.W)
    km.set_source(ButtonCode.DPAD_LEFT)
    assert km.source == 0x5812
    assert km.source_alias == "DPAD_LEFT"


def test_set_source_unknown_code_keeps_previous_alias():
    km = KeyMap(ButtonCode.B, KeyCode.W)
    km.set_source(12345)
    assert km.source == 12345
    assert km.source_alias == "B"


def test_set_destination_unknown_code_keeps_previous_alias():
    km = KeyMap(ButtonCode.B, KeyCode.SPACE)
    km.set_destination(0x5801)
    assert km.destination == 0x5801
    assert km.destination_alias == "SPACE"


def test_set_by_name():
    km = KeyMap(ButtonCode.B, KeyCode.SPACE)
    assert km.set_source_by_name("Y")
    assert km.set_destination_by_name("escape")
    assert (km.source, km.source_alias) == (ButtonCode.Y, "Y")
    assert (km.destination, km.destination_alias) == (KeyCode.ESCAPE, "ESCAPE")
    assert not km.set_source_by_name("TURBO")
    assert km.source == ButtonCode.Y


def test_with_repeat_chains():
    km = KeyMap(ButtonCode.A, KeyCode.W).with_repeat(True)
    assert km.repeat is True


def test_equality_covers_all_fields():
    a = KeyMap(ButtonCode.A, KeyCode.W, True)
    assert a == KeyMap(0x5800, 0x57, True)
    assert a != KeyMap(0x5800, 0x57, False)
    b = KeyMap(ButtonCode.B, KeyCode.W, True)
    b.set_source(0x5800)
    # same codes, but the alias still says B
    b.source_alias = "B"
    assert a != b


def test_copy_is_independent():
    original = KeyMap(ButtonCode.A, KeyCode.W, True)
    dup = original.copy()
    dup.set_source(ButtonCode.X)
    dup.with_repeat(False)
    assert original.source == ButtonCode.A
    assert original.source_alias == "A"
    assert original.repeat is True


def test_describe():
    assert KeyMap(ButtonCode.A, KeyCode.SPACE).describe() == "[From]:A [To]:SPACE"


def test_preset_holds_private_copies():
    km = KeyMap(ButtonCode.A, KeyCode.SPACE)
    preset = Preset("One", (km,))
    km.set_destination(KeyCode.E)
    assert preset.entries[0].destination == KeyCode.SPACE
    edited = preset.keymaps()
    edited[0].set_destination(KeyCode.Q)
    assert preset.entries[0].destination == KeyCode.SPACE
    assert len(preset) == 1


def test_stick_cycle():
    assert next_stick(StickSelection.RIGHT) is StickSelection.LEFT
    assert next_stick(StickSelection.LEFT) is StickSelection.NEITHER
    assert next_stick(StickSelection.NEITHER) is StickSelection.RIGHT
    for start in StickSelection:
        assert start.next().next().next() is start


def test_stick_values_and_labels():
    assert [int(s) for s in (StickSelection.NEITHER, StickSelection.RIGHT, StickSelection.LEFT)] == [0, 1, 2]
    assert StickSelection.LEFT.label == "LEFT"
    assert next_stick(1) is StickSelection.LEFT


def test_preset_entries_are_copies():
    from presets import build_presets
    preset = build_presets()[0]
    before = hash(preset)
    preset.entries[0].set_destination(KeyCode.Q)
    assert preset.entries[0].destination == KeyCode.DOWN
    assert hash(preset) == before == hash(build_presets()[0])
    assert preset == build_presets()[0]
