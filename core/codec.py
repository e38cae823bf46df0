"""Wire codec for the native engine's key map text

The engine reports its active maps as one text blob, one record per map:

    [KeyboardKeyMap] SendingVK:<int> MappedVK:<int> AKA:<str> UsesRepeat:<bool>

Records are separated by arbitrary whitespace. Going the other way there is
no text at all: each map is pushed with its own add_map() call.
"""
import logging
import re
from typing import Iterable, List, Optional

from core.state import KeyMap

LOG = logging.getLogger("xmapbridge.codec")

RECORD_MARKER = "[KeyboardKeyMap]"
VALUE_DELIMITER = ":"
RECORD_FIELDS = ("SendingVK", "MappedVK", "AKA", "UsesRepeat")
_WS = re.compile(r"\s+")
_INT = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -2 ** 31, 2 ** 31 - 1


class MalformedRecord(ValueError):
    pass


def encode(engine, entries: Iterable[KeyMap]) -> List[bool]:
    """Push each entry to the engine, returning one result per entry."""
    results = []
    for entry in entries:
        try:
            ok = bool(engine.add_map(entry.source, entry.destination, entry.repeat))
        except Exception:
            LOG.exception("add_map raised for %s", entry)
            ok = False
        if not ok:
            LOG.warning("engine rejected map %s -> %s (repeat=%s)",
                        entry.source_alias or entry.source,
                        entry.destination_alias or entry.destination,
                        entry.repeat)
        results.append(ok)
    return results


def tokenize(blob: str) -> List[str]:
    return [t for t in _WS.sub(" ", blob).split(" ") if t]


def _value(token: str) -> str:
    # "SendingVK:22528" -> "22528", "AKA:" -> "", "AKA" -> ""
    return token.partition(VALUE_DELIMITER)[2]


def _parse_int(token: str) -> int:
    # ASCII digits only, within the engine's 32-bit int
    value = _value(token)
    if not _INT.fullmatch(value):
        raise MalformedRecord(f"expected an integer in {token!r}")
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        raise MalformedRecord(f"integer out of range in {token!r}")
    return number


def _parse_repeat(token: str) -> bool:
    value = _value(token).lower()
    if value == "":
        return False
    if value == "true":
        return True
    if value == "false":
        return False
    raise MalformedRecord(f"expected true/false in {token!r}")


def _parse_record(tokens: List[str], start: int) -> KeyMap:
    fields = tokens[start + 1:start + 1 + len(RECORD_FIELDS)]
    if len(fields) < len(RECORD_FIELDS):
        raise MalformedRecord(f"record at token {start} is truncated")
    sending, mapped, aka, repeat = fields
    entry = KeyMap(_parse_int(sending), _parse_int(mapped), _parse_repeat(repeat))
    LOG.debug("decoded %s (engine AKA %r)", entry, _value(aka))
    return entry


def decode(blob: Optional[str]) -> List[KeyMap]:
    """Parse the engine's key map text.

    All or nothing: if any record is malformed the whole result is empty,
    which callers cannot tell apart from an engine with no maps.
    """
    if not blob:
        return []
    tokens = tokenize(blob)
    out = []
    try:
        for i, tok in enumerate(tokens):
            if tok == RECORD_MARKER:
                out.append(_parse_record(tokens, i))
    except MalformedRecord as e:
        LOG.warning("discarding engine key map text: %s", e)
        return []
    return out


def format_record(entry: KeyMap) -> str:
    return (f"{RECORD_MARKER} SendingVK{VALUE_DELIMITER}{entry.source} "
            f"MappedVK{VALUE_DELIMITER}{entry.destination} "
            f"AKA{VALUE_DELIMITER}{entry.destination_alias} "
            f"UsesRepeat{VALUE_DELIMITER}{entry.repeat}")


def format_records(entries: Iterable[KeyMap]) -> str:
    return "\n".join(format_record(e) for e in entries)
