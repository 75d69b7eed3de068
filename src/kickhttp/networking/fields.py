"""Flatten mappings and plain objects into ordered name/value pairs.

Headers, form fields and multipart parameters all accept either a mapping or
an arbitrary object. Objects contribute their public instance attributes in
definition order, followed by public properties declared on their class.
Values are converted with ``str``; ``None`` values are skipped.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Iterator, Mapping

Fields = list[tuple[str, str]]


def _object_items(source: Any) -> Iterator[tuple[str, Any]]:
    if dataclasses.is_dataclass(source) and not isinstance(source, type):
        for item in dataclasses.fields(source):
            yield item.name, getattr(source, item.name)
        return

    as_dict = getattr(source, "_asdict", None)
    if callable(as_dict):  # namedtuple
        yield from as_dict().items()
        return

    seen: set[str] = set()
    for name, value in getattr(source, "__dict__", {}).items():
        if not name.startswith("_"):
            seen.add(name)
            yield name, value

    for klass in type(source).__mro__:
        for name, member in vars(klass).items():
            if (
                isinstance(member, property)
                and not name.startswith("_")
                and name not in seen
            ):
                seen.add(name)
                yield name, getattr(source, name)


def flatten_fields(source: Mapping[str, Any] | Any | None) -> Fields:
    """Return ``(name, value)`` string pairs for ``source``."""
    if source is None:
        return []
    items: Iterable[tuple[Any, Any]]
    if isinstance(source, Mapping):
        items = source.items()
    else:
        items = _object_items(source)
    return [(str(name), str(value)) for name, value in items if value is not None]
