"""Base engine abstraction

The native mapping engine owns input polling and key/mouse injection. The
rest of the program talks to it only through these calls.
"""
import abc
from typing import Optional

# mouse sensitivity range accepted by the engine
SENSITIVITY_MIN = 1
SENSITIVITY_MAX = 100


class MappingEngine(abc.ABC):
    # lifecycle
    @abc.abstractmethod
    def init_both(self):
        raise NotImplementedError

    @abc.abstractmethod
    def stop_both(self):
        raise NotImplementedError

    @abc.abstractmethod
    def init_mouse(self):
        raise NotImplementedError

    @abc.abstractmethod
    def stop_mouse(self):
        raise NotImplementedError

    @abc.abstractmethod
    def init_keyboard(self):
        raise NotImplementedError

    @abc.abstractmethod
    def stop_keyboard(self):
        raise NotImplementedError

    def start_both(self):
        self.init_both()

    # key maps
    @abc.abstractmethod
    def add_map(self, source: int, destination: int, repeat: bool) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def clear_maps(self):
        raise NotImplementedError

    @abc.abstractmethod
    def get_maps(self) -> Optional[str]:
        raise NotImplementedError

    # status
    @abc.abstractmethod
    def is_controller_connected(self) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def is_mouse_running(self) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def is_keyboard_running(self) -> bool:
        raise NotImplementedError

    # mouse
    @abc.abstractmethod
    def set_mouse_stick(self, code: int):
        raise NotImplementedError

    @abc.abstractmethod
    def set_mouse_sensitivity(self, pct: int) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def get_mouse_sensitivity(self) -> int:
        raise NotImplementedError
