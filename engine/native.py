"""XMapLibDLL wrapper using direct ctypes calls

`NativeEngine` forwards every engine call to the exported XMapLib* C
functions. `load_engine` falls back to the in-memory dry-run engine when the
DLL is missing, so the rest of the program runs either way.
"""
import ctypes
import logging
import os

from core.engine import MappingEngine
from engine.dry_run import DryRunEngine

LOG = logging.getLogger("xmapbridge.engine")

DLL_NAME = "XMapLibDLL.dll"
DLL_ENV_VAR = "XMAPLIB_DLL"

# export name -> (argtypes, restype)
EXPORTS = {
    "XMapLibInitBoth": ([], None),
    "XMapLibStopBoth": ([], None),
    "XMapLibInitMouse": ([], None),
    "XMapLibStopMouse": ([], None),
    "XMapLibInitKeyboard": ([], None),
    "XMapLibStopKeyboard": ([], None),
    "XMapLibAddMap": ([ctypes.c_int, ctypes.c_int, ctypes.c_bool], ctypes.c_bool),
    "XMapLibClearMaps": ([], None),
    "XMapLibGetMaps": ([], ctypes.c_char_p),
    "XMapLibIsControllerConnected": ([], ctypes.c_bool),
    "XMapLibIsMouseRunning": ([], ctypes.c_bool),
    "XMapLibIsKeyboardRunning": ([], ctypes.c_bool),
    "XMapLibSetMouseStick": ([ctypes.c_int], None),
    "XMapLibSetMouseSensitivity": ([ctypes.c_int], ctypes.c_bool),
    "XMapLibGetMouseSensitivity": ([], ctypes.c_int),
}


def declare_exports(dll):
    """Set argtypes/restype on every export the engine uses."""
    for name, (argtypes, restype) in EXPORTS.items():
        fn = getattr(dll, name)
        fn.argtypes = argtypes
        fn.restype = restype
    return dll


def load_library(path=None):
    path = path or os.environ.get(DLL_ENV_VAR) or DLL_NAME
    dll = ctypes.CDLL(path)
    LOG.info("XMapLib DLL loaded from %s", path)
    return declare_exports(dll)


class NativeEngine(MappingEngine):
    def __init__(self, dll):
        self._dll = dll

    @classmethod
    def from_path(cls, path=None):
        return cls(load_library(path))

    def init_both(self):
        self._dll.XMapLibInitBoth()

    def stop_both(self):
        self._dll.XMapLibStopBoth()

    def init_mouse(self):
        self._dll.XMapLibInitMouse()

    def stop_mouse(self):
        self._dll.XMapLibStopMouse()

    def init_keyboard(self):
        self._dll.XMapLibInitKeyboard()

    def stop_keyboard(self):
        self._dll.XMapLibStopKeyboard()

    def add_map(self, source: int, destination: int, repeat: bool) -> bool:
        return bool(self._dll.XMapLibAddMap(int(source), int(destination), bool(repeat)))

    def clear_maps(self):
        self._dll.XMapLibClearMaps()

    def get_maps(self):
        raw = self._dll.XMapLibGetMaps()
        if raw is None:
            return None
        # the DLL hands back an ANSI string
        return raw.decode("latin-1") if isinstance(raw, bytes) else str(raw)

    def is_controller_connected(self) -> bool:
        return bool(self._dll.XMapLibIsControllerConnected())

    def is_mouse_running(self) -> bool:
        return bool(self._dll.XMapLibIsMouseRunning())

    def is_keyboard_running(self) -> bool:
        return bool(self._dll.XMapLibIsKeyboardRunning())

    def set_mouse_stick(self, code: int):
        self._dll.XMapLibSetMouseStick(int(code))

    def set_mouse_sensitivity(self, pct: int) -> bool:
        return bool(self._dll.XMapLibSetMouseSensitivity(int(pct)))

    def get_mouse_sensitivity(self) -> int:
        return int(self._dll.XMapLibGetMouseSensitivity())


def load_engine(path=None) -> MappingEngine:
    """Return the native engine, or a dry-run engine if the DLL won't load."""
    try:
        return NativeEngine.from_path(path)
    except (OSError, AttributeError) as e:
        LOG.warning("Failed to load XMapLib DLL: %s, running in dry-run mode", e)
        return DryRunEngine()
