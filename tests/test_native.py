"""NativeEngine against a stand-in for the ctypes DLL object"""
import ctypes

from core.state import KeyMap, StickSelection
from engine import native
from engine.dry_run import DryRunEngine
from mapper import MappingSession


class FakeExport:
    def __init__(self, result=None):
        self.result = result
        self.calls = []
        self.argtypes = None
        self.restype = None

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


class FakeDll:
    def __init__(self):
        for name in native.EXPORTS:
            setattr(self, name, FakeExport())


def test_declare_exports_sets_signatures():
    dll = native.declare_exports(FakeDll())
    assert dll.XMapLibAddMap.argtypes == [ctypes.c_int, ctypes.c_int, ctypes.c_bool]
    assert dll.XMapLibAddMap.restype is ctypes.c_bool
    assert dll.XMapLibGetMaps.restype is ctypes.c_char_p
    assert dll.XMapLibClearMaps.restype is None


def test_calls_are_forwarded():
    dll = FakeDll()
    dll.XMapLibAddMap.result = True
    dll.XMapLibGetMouseSensitivity.result = 42
    engine = native.NativeEngine(dll)
    assert engine.add_map(0x5800, 0x57, True) is True
    assert dll.XMapLibAddMap.calls == [(0x5800, 0x57, True)]
    engine.set_mouse_stick(StickSelection.LEFT)
    assert dll.XMapLibSetMouseStick.calls == [(2,)]
    assert engine.get_mouse_sensitivity() == 42
    engine.start_both()
    assert dll.XMapLibInitBoth.calls == [()]


def test_get_maps_decodes_bytes_and_null():
    dll = FakeDll()
    engine = native.NativeEngine(dll)
    assert engine.get_maps() is None
    dll.XMapLibGetMaps.result = b"[KeyboardKeyMap] SendingVK:22528 MappedVK:87 AKA:W UsesRepeat:True"
    session = MappingSession(engine)
    maps, raw = session.current()
    assert raw.startswith("[KeyboardKeyMap]")
    assert maps[0].destination_alias == "W"


def test_failed_add_reported_by_session():
    dll = FakeDll()
    dll.XMapLibAddMap.result = False
    session = MappingSession(native.NativeEngine(dll))
    assert session.add_all([KeyMap(0x5800, 0x57), KeyMap(0x5801, 0x45)]) is False
    assert len(dll.XMapLibAddMap.calls) == 2


def test_load_engine_falls_back_to_dry_run(tmp_path):
    engine = native.load_engine(str(tmp_path / "missing.dll"))
    assert isinstance(engine, DryRunEngine)
