"""Custom value formatting for fields"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence


@dataclass(frozen=True)
class CustomFormat:
    """
    A formatter callback plus extra positional arguments.

    Called with the field's render data first, then the extra arguments:
    ``CustomFormat(fmt, "EUR")(value, record)`` -> ``fmt(value, record, "EUR")``
    """
    callback: Callable[..., Any]
    args: tuple = field(default_factory=tuple)

    def __call__(self, *data: Any) -> Any:
        return self.callback(*data, *self.args)


class AcceptsCustomFormat:
    """Lets a field bypass template rendering with its own formatter."""

    _format: Optional[CustomFormat] = None

    def format(self, callback: Callable[..., Any] | CustomFormat, *args: Any):
        if isinstance(callback, CustomFormat):
            self._format = callback
        else:
            self._format = CustomFormat(callback, tuple(args))
        return self

    # Readable alias in builder callbacks
    display_using = format

    def clear_format(self):
        self._format = None
        return self

    def has_custom_format(self) -> bool:
        return self._format is not None

    def call_formatter(self, data: Sequence[Any]) -> Any:
        return self._format(*data)
