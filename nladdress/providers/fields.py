"""Alias-table lookups into provider payloads."""
from typing import Any, Iterable, Mapping, Optional, Tuple

FieldAliases = Mapping[str, Tuple[str, ...]]

_MISSING = object()


def _walk(payload: Any, path: str) -> Any:
    node = payload
    for segment in path.split("."):
        if isinstance(node, Mapping):
            node = node.get(segment, _MISSING)
        elif isinstance(node, (list, tuple)) and segment.isdigit():
            index = int(segment)
            node = node[index] if index < len(node) else _MISSING
        else:
            return _MISSING
        if node is _MISSING:
            return _MISSING
    return node


def _is_empty(value: Any) -> bool:
    if value is _MISSING or value is None:
        return True
    return isinstance(value, str) and not value.strip()


def first_present(payload: Any, paths: Iterable[str]) -> Any:
    """
    Return the value of the first path that holds a non-empty value.

    Paths are dotted; numeric segments index into lists, so
    ``location.coordinates.1`` reads the second element of a GeoJSON point.
    Only ``None`` and blank strings count as empty: ``0`` and ``"0"`` win.
    """
    for path in paths:
        value = _walk(payload, path)
        if not _is_empty(value):
            return value
    return None


def text_field(payload: Any, aliases: FieldAliases, field: str) -> Optional[str]:
    value = first_present(payload, aliases.get(field, ()))
    if value is None:
        return None
    return str(value).strip()


def float_field(payload: Any, aliases: FieldAliases, field: str) -> Optional[float]:
    value = first_present(payload, aliases.get(field, ()))
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
