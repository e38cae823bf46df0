"""State models: key maps, presets and the mouse stick selector"""
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Tuple

from core.symbols import button_code, button_name, key_code, key_name


@dataclass
class KeyMap:
    """One controller input -> keyboard/mouse action rule.

    Aliases are cached symbolic names for the codes. They are refreshed by
    the setters; an unknown code leaves the previous alias in place.
    """
    source: int
    destination: int
    repeat: bool = False  # re-fire while held instead of once per press
    source_alias: str = ""
    destination_alias: str = ""

    def __post_init__(self):
        self.set_source(self.source)
        self.set_destination(self.destination)
        self.repeat = bool(self.repeat)

    def set_source(self, code: int) -> "KeyMap":
        self.source = int(code)
        alias = button_name(self.source)
        if alias is not None:
            self.source_alias = alias
        return self

    def set_destination(self, code: int) -> "KeyMap":
        self.destination = int(code)
        alias = key_name(self.destination)
        if alias is not None:
            self.destination_alias = alias
        return self

    def with_repeat(self, repeat: bool) -> "KeyMap":
        self.repeat = bool(repeat)
        return self

    def set_source_by_name(self, name: str) -> bool:
        """Apply a button by symbolic name; unknown names change nothing."""
        code = button_code(name)
        if code is None:
            return False
        self.set_source(code)
        return True

    def set_destination_by_name(self, name: str) -> bool:
        code = key_code(name)
        if code is None:
            return False
        self.set_destination(code)
        return True

    def copy(self) -> "KeyMap":
        return replace(self)

    def describe(self) -> str:
        return f"[From]:{self.source_alias} [To]:{self.destination_alias}"


class Preset:
    """A named, read-only set of key maps.

    The maps are held privately; every read hands out fresh copies, so
    editing what comes back never changes the preset.
    """
    __slots__ = ("_name", "_entries")

    def __init__(self, name: str, entries=()):
        self._name = str(name)
        self._entries = tuple(e.copy() for e in entries)

    @property
    def name(self) -> str:
        return self._name

    @property
    def entries(self) -> Tuple[KeyMap, ...]:
        return tuple(e.copy() for e in self._entries)

    def keymaps(self):
        """Editable copies of this preset's entries."""
        return [e.copy() for e in self._entries]

    def _key(self):
        return (self._name, tuple(
            (e.source, e.destination, e.repeat, e.source_alias, e.destination_alias)
            for e in self._entries))

    def __eq__(self, other):
        if not isinstance(other, Preset):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f"Preset(name={self._name!r}, entries={len(self._entries)})"


class StickSelection(IntEnum):
    """Which thumbstick moves the mouse; values are the native stick ids."""
    NEITHER = 0
    RIGHT = 1
    LEFT = 2

    def next(self) -> "StickSelection":
        return next_stick(self)

    @property
    def label(self) -> str:
        return self.name


_STICK_CYCLE = {
    StickSelection.RIGHT: StickSelection.LEFT,
    StickSelection.LEFT: StickSelection.NEITHER,
    StickSelection.NEITHER: StickSelection.RIGHT,
}


def next_stick(state: StickSelection) -> StickSelection:
    return _STICK_CYCLE[StickSelection(state)]
