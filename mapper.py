"""Mapping session: the active key map set and the engine it is pushed to"""
import logging

from core import codec
from core.engine import SENSITIVITY_MAX, SENSITIVITY_MIN
from core.state import StickSelection, next_stick

LOG = logging.getLogger("xmapbridge.mapper")


class MappingSession:
    """Owns the local list of key maps and issues add/clear/query calls.

    The engine keeps its own copy of whatever was pushed; nothing here is
    shared with it. Engine errors are logged and turned into results.
    """

    def __init__(self, engine, stick: StickSelection = StickSelection.RIGHT):
        self.engine = engine
        self._entries = []
        self._stick = StickSelection(stick)
        self._sensitivity = None

    @property
    def entries(self):
        return [e.copy() for e in self._entries]

    def clear(self):
        self._entries = []
        try:
            self.engine.clear_maps()
        except Exception:
            LOG.exception("clear_maps failed")

    def add_all(self, entries) -> bool:
        """Push entries to the engine. Succeeds only if every add did.

        Adds that went through stay in effect even when a later one fails.
        """
        entries = [e.copy() for e in entries]
        results = codec.encode(self.engine, entries)
        self._entries.extend(entries)
        failures = results.count(False)
        if failures:
            LOG.warning("%d of %d key maps were rejected by the engine", failures, len(results))
        else:
            LOG.debug("pushed %d key maps", len(results))
        return failures == 0

    def current(self):
        """Return (decoded maps, raw engine text)."""
        try:
            raw = self.engine.get_maps()
        except Exception:
            LOG.exception("get_maps failed")
            raw = None
        raw = raw or ""
        return codec.decode(raw), raw

    def apply_preset(self, preset) -> bool:
        LOG.info("applying preset %s", preset.name)
        self.clear()
        return self.add_all(preset.keymaps())

    def edit(self, index, source=None, destination=None, repeat=None) -> bool:
        """Change one local entry. Names are looked up; unknown names are ignored.

        The engine is not touched until push(). A bad index changes nothing.
        """
        if not -len(self._entries) <= index < len(self._entries):
            LOG.warning("no key map at index %s", index)
            return False
        entry = self._entries[index].copy()
        changed = False
        if source is not None:
            if isinstance(source, str):
                changed |= entry.set_source_by_name(source)
            else:
                entry.set_source(source)
                changed = True
        if destination is not None:
            if isinstance(destination, str):
                changed |= entry.set_destination_by_name(destination)
            else:
                entry.set_destination(destination)
                changed = True
        if repeat is not None:
            entry.with_repeat(repeat)
            changed = True
        if changed:
            self._entries[index] = entry
        return changed

    def push(self) -> bool:
        """Replace the engine's maps with the local list."""
        entries = self._entries
        self.clear()
        return self.add_all(entries)

    def summary(self) -> str:
        maps, _ = self.current()
        lines = [f"Processing {len(maps)} key maps."]
        lines.extend(km.describe() for km in maps)
        return "\n".join(lines)

    # mouse stick / sensitivity

    @property
    def stick(self) -> StickSelection:
        return self._stick

    def set_stick(self, selection):
        self._stick = StickSelection(selection)
        try:
            self.engine.set_mouse_stick(int(self._stick))
        except Exception:
            LOG.exception("set_mouse_stick failed")
        LOG.info("mouse stick -> %s", self._stick.label)
        return self._stick

    def cycle_stick(self) -> StickSelection:
        return self.set_stick(next_stick(self._stick))

    def set_sensitivity(self, pct) -> bool:
        if not SENSITIVITY_MIN <= pct <= SENSITIVITY_MAX:
            LOG.warning("sensitivity %s outside %d-%d", pct, SENSITIVITY_MIN, SENSITIVITY_MAX)
            return False
        try:
            ok = bool(self.engine.set_mouse_sensitivity(int(pct)))
        except Exception:
            LOG.exception("set_mouse_sensitivity failed")
            return False
        if ok:
            self._sensitivity = int(pct)
        return ok

    def sensitivity(self):
        """Engine sensitivity, or the last known value if the engine fails."""
        try:
            self._sensitivity = int(self.engine.get_mouse_sensitivity())
        except Exception:
            LOG.exception("get_mouse_sensitivity failed")
        return self._sensitivity

    # status

    def _status(self, name) -> bool:
        try:
            return bool(getattr(self.engine, name)())
        except Exception:
            LOG.exception("%s failed", name)
            return False

    def is_controller_connected(self) -> bool:
        return self._status("is_controller_connected")

    def is_mouse_running(self) -> bool:
        return self._status("is_mouse_running")

    def is_keyboard_running(self) -> bool:
        return self._status("is_keyboard_running")

    def toggle_processing(self) -> bool:
        """Stop both halves if the mouse is running, else start both."""
        try:
            if self.is_mouse_running():
                self.engine.stop_both()
            else:
                self.engine.start_both()
        except Exception:
            LOG.exception("toggling engine processing failed")
        return self.is_mouse_running()
