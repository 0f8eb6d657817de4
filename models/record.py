"""Record providers - the data objects a field reads its value from"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Record(Protocol):
    """Anything that can hand out an attribute value by name."""

    def get_attribute(self, key: str) -> Any:
        ...


class DictRecord:
    """Record backed by a plain mapping, for virtual rows and previews."""

    def __init__(self, data: Mapping[str, Any] | None = None, **attributes: Any):
        self._data: dict[str, Any] = dict(data or {})
        self._data.update(attributes)

    def get_attribute(self, key: str) -> Any:
        if key in self._data:
            return self._data[key]
        return _walk(self._data, key)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def __getattr__(self, name: str) -> Any:
        # Templates address record values as attributes
        try:
            return self.__dict__["_data"][name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self):
        return f"<DictRecord({self._data!r})>"


def read_attribute(record: Any, key: str) -> Any:
    """
    Read attribute ``key`` from any supported record.

    Records exposing ``get_attribute`` are asked directly, mappings are looked
    up by key and anything else is read with ``getattr``. Missing values are None.
    """
    if record is None:
        return None
    if isinstance(record, Record):
        return record.get_attribute(key)
    if isinstance(record, Mapping) and key in record:
        return record[key]
    return _walk(record, key)


def _walk(value: Any, key: str) -> Any:
    for part in key.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value
