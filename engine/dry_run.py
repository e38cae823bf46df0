"""In-process stand-in for the native engine

Used when XMapLibDLL cannot be loaded, and by the tests. Keeps the key map
table in memory and reports it in the same text format as the DLL. Nothing
is ever sent to the keyboard or mouse.
"""
import logging
import threading

from core.codec import format_records
from core.engine import SENSITIVITY_MAX, SENSITIVITY_MIN, MappingEngine
from core.state import KeyMap, StickSelection

LOG = logging.getLogger("xmapbridge.dry_run")

DEFAULT_SENSITIVITY = 35
_MAX_VK = 0xFFFF


class DryRunEngine(MappingEngine):
    def __init__(self):
        self._lock = threading.Lock()
        self._maps = []
        self._mouse_running = False
        self._keyboard_running = False
        self._stick = StickSelection.RIGHT
        self._sensitivity = DEFAULT_SENSITIVITY

    def init_both(self):
        self.init_keyboard()
        self.init_mouse()

    def stop_both(self):
        self.stop_keyboard()
        self.stop_mouse()

    def init_mouse(self):
        self._mouse_running = True
        LOG.debug("dry-run: mouse started")

    def stop_mouse(self):
        self._mouse_running = False
        LOG.debug("dry-run: mouse stopped")

    def init_keyboard(self):
        self._keyboard_running = True
        LOG.debug("dry-run: keyboard started")

    def stop_keyboard(self):
        self._keyboard_running = False
        LOG.debug("dry-run: keyboard stopped")

    def add_map(self, source: int, destination: int, repeat: bool) -> bool:
        if not (0 < source <= _MAX_VK and 0 < destination <= _MAX_VK):
            LOG.debug("dry-run: rejecting out of range map %s -> %s", source, destination)
            return False
        with self._lock:
            for m in self._maps:
                if m.source == source and m.destination == destination:
                    LOG.debug("dry-run: rejecting duplicate map %s -> %s", source, destination)
                    return False
            self._maps.append(KeyMap(source, destination, repeat))
        LOG.debug("dry-run: added map %s -> %s (repeat=%s)", source, destination, repeat)
        return True

    def clear_maps(self):
        with self._lock:
            self._maps.clear()
        LOG.debug("dry-run: maps cleared")

    def get_maps(self):
        with self._lock:
            return format_records(self._maps)

    def is_controller_connected(self) -> bool:
        return False

    def is_mouse_running(self) -> bool:
        return self._mouse_running

    def is_keyboard_running(self) -> bool:
        return self._keyboard_running

    def set_mouse_stick(self, code: int):
        try:
            self._stick = StickSelection(code)
        except ValueError:
            # the DLL ignores unknown stick ids
            return
        LOG.debug("dry-run: mouse stick -> %s", self._stick.label)

    def set_mouse_sensitivity(self, pct: int) -> bool:
        if not SENSITIVITY_MIN <= pct <= SENSITIVITY_MAX:
            return False
        self._sensitivity = pct
        return True

    def get_mouse_sensitivity(self) -> int:
        return self._sensitivity

    @property
    def stick(self) -> StickSelection:
        return self._stick
