"""Preset catalog: built-in key map sets and YAML profile loading"""
import logging

import yaml

from core.state import KeyMap, Preset
from core.symbols import ButtonCode as Btn
from core.symbols import KeyCode as Key
from core.symbols import button_code, key_code

LOG = logging.getLogger("xmapbridge.presets")

PRESET_BROWSING = "Browsing"
PRESET_GAMING = "Gaming"
PRESET_MOVIE = "Movie"


class ProfileError(ValueError):
    """A YAML profile could not be turned into presets."""


def _left_stick_wasd():
    # diagonals press both keys, so each appears twice
    return [
        KeyMap(Btn.LTHUMB_UP, Key.W, True),
        KeyMap(Btn.LTHUMB_LEFT, Key.A, True),
        KeyMap(Btn.LTHUMB_DOWN, Key.S, True),
        KeyMap(Btn.LTHUMB_RIGHT, Key.D, True),
        KeyMap(Btn.LTHUMB_UPLEFT, Key.W, True),
        KeyMap(Btn.LTHUMB_UPLEFT, Key.A, True),
        KeyMap(Btn.LTHUMB_UPRIGHT, Key.W, True),
        KeyMap(Btn.LTHUMB_UPRIGHT, Key.D, True),
        KeyMap(Btn.LTHUMB_DOWNLEFT, Key.S, True),
        KeyMap(Btn.LTHUMB_DOWNLEFT, Key.A, True),
        KeyMap(Btn.LTHUMB_DOWNRIGHT, Key.S, True),
        KeyMap(Btn.LTHUMB_DOWNRIGHT, Key.D, True),
    ]


def _dpad_arrows_and_clicks():
    return [
        KeyMap(Btn.DPAD_DOWN, Key.DOWN, True),
        KeyMap(Btn.DPAD_UP, Key.UP, True),
        KeyMap(Btn.DPAD_LEFT, Key.LEFT, True),
        KeyMap(Btn.DPAD_RIGHT, Key.RIGHT, True),
        KeyMap(Btn.LTRIGGER, Key.RBUTTON, False),
        KeyMap(Btn.RTRIGGER, Key.LBUTTON, False),
    ]


def build_browsing():
    return _dpad_arrows_and_clicks() + _left_stick_wasd() + [
        KeyMap(Btn.LSHOULDER, Key.BROWSER_BACK, True),
        KeyMap(Btn.RSHOULDER, Key.BROWSER_FORWARD, True),
        KeyMap(Btn.A, Key.SPACE, True),
        KeyMap(Btn.B, Key.E, True),
        KeyMap(Btn.X, Key.R, True),
    ]


def build_gaming():
    return _dpad_arrows_and_clicks() + _left_stick_wasd() + [
        KeyMap(Btn.A, Key.SPACE, True),
        KeyMap(Btn.B, Key.F, True),
        KeyMap(Btn.Y, Key.G, False),
        KeyMap(Btn.RTHUMB_PRESS, Key.C, True),
        KeyMap(Btn.LTHUMB_PRESS, Key.LSHIFT_KEY, True),
        KeyMap(Btn.START, Key.ESCAPE, True),
        KeyMap(Btn.LSHOULDER, Key.Q, True),
        KeyMap(Btn.RSHOULDER, Key.E, True),
        KeyMap(Btn.X, Key.R, True),
    ]


def build_movie():
    return [
        KeyMap(Btn.DPAD_DOWN, Key.VOLUME_DOWN, True),
        KeyMap(Btn.DPAD_UP, Key.VOLUME_UP, True),
        KeyMap(Btn.DPAD_LEFT, Key.LEFT, True),
        KeyMap(Btn.DPAD_RIGHT, Key.RIGHT, True),
        KeyMap(Btn.LTRIGGER, Key.RBUTTON, False),
        KeyMap(Btn.RTRIGGER, Key.LBUTTON, False),
        KeyMap(Btn.LTHUMB_UP, Key.PAGE_UP, True),
        KeyMap(Btn.LTHUMB_LEFT, Key.BROWSER_BACK, True),
        KeyMap(Btn.LTHUMB_DOWN, Key.PAGE_DOWN, True),
        KeyMap(Btn.LTHUMB_RIGHT, Key.BROWSER_FORWARD, True),
        KeyMap(Btn.LSHOULDER, Key.MEDIA_PLAY_PAUSE, True),
        KeyMap(Btn.RSHOULDER, Key.VOLUME_MUTE, True),
        KeyMap(Btn.A, Key.SPACE, True),
        KeyMap(Btn.B, Key.E, True),
        KeyMap(Btn.X, Key.R, True),
    ]


def build_presets():
    """Built-in presets. The first one is the default active set."""
    return [
        Preset(PRESET_BROWSING, tuple(build_browsing())),
        Preset(PRESET_GAMING, tuple(build_gaming())),
        Preset(PRESET_MOVIE, tuple(build_movie())),
    ]


def find_preset(presets, name):
    wanted = name.strip().lower()
    for p in presets:
        if p.name.lower() == wanted:
            return p
    return None


def _resolve(value, lookup, what, where):
    if isinstance(value, bool):
        raise ProfileError(f"{where}: {what} must be a name or a code, got {value!r}")
    if isinstance(value, int):
        return value
    code = lookup(value)
    if code is None:
        raise ProfileError(f"{where}: unknown {what} {value!r}")
    return code


def _repeat_flag(value, where):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ProfileError(f"{where}: repeat must be true or false, got {value!r}")


def _entry_from_profile(item, where):
    if not isinstance(item, dict):
        raise ProfileError(f"{where}: expected a mapping, got {item!r}")
    missing = [k for k in ("source", "destination") if k not in item]
    if missing:
        raise ProfileError(f"{where}: missing {', '.join(missing)}")
    source = _resolve(item["source"], button_code, "button", where)
    destination = _resolve(item["destination"], key_code, "key", where)
    return KeyMap(source, destination, _repeat_flag(item.get("repeat", False), where))


def presets_from_profile(profile):
    """Build presets from an already parsed profile dict.

    Expected shape:
      presets:
        - name: Shooter
          entries:
            - {source: RTRIGGER, destination: LBUTTON}
            - {source: A, destination: SPACE, repeat: true}
    """
    if not isinstance(profile, dict):
        raise ProfileError("profile must be a mapping with a 'presets' list")
    items = profile.get("presets") or []
    if not isinstance(items, list) or not items:
        raise ProfileError("profile defines no presets")
    presets = []
    for pi, raw in enumerate(items):
        if not isinstance(raw, dict) or not raw.get("name"):
            raise ProfileError(f"preset #{pi}: a name is required")
        name = str(raw["name"])
        entries = raw.get("entries") or []
        if not isinstance(entries, list):
            raise ProfileError(f"preset {name!r}: entries must be a list")
        keymaps = tuple(_entry_from_profile(item, f"preset {name!r} entry #{ei}")
                        for ei, item in enumerate(entries))
        presets.append(Preset(name, keymaps))
        LOG.debug("loaded preset %s with %d maps", name, len(keymaps))
    return presets


def load_presets(path):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ProfileError(f"{path}: {e}") from e
    presets = presets_from_profile(data)
    LOG.info("loaded %d presets from %s", len(presets), path)
    return presets
