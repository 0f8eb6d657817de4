"""Concrete field types shipped with the admin"""

from datetime import date, datetime
from collections.abc import Hashable
from typing import Any, Mapping, Sequence

from fields.base import Field, field_type
from fields.pages import PAGE_EDIT, PAGE_INDEX


@field_type("key")
class Key(Field):
    """Plain value output; its templates are the fallback for every other type"""


@field_type("id")
class Id(Field):
    """Primary key column, not editable"""
    hidden_on = (PAGE_EDIT,)


@field_type("text")
class Text(Field):
    declared_attributes = {
        "placeholder": None,
        "maxlength": None,
        "required": False,
        "readonly": False,
    }


@field_type("textarea")
class Textarea(Field):
    hidden_on = (PAGE_INDEX,)
    declared_attributes = {
        "rows": 5,
        "placeholder": None,
        "required": False,
    }


@field_type("email")
class Email(Field):
    declared_attributes = {
        "placeholder": None,
        "required": False,
    }

    def on_index(self) -> dict:
        value = self.value()
        return {"mailto": f"mailto:{value}" if value else None}


@field_type("number")
class Number(Field):
    declared_attributes = {
        "min": None,
        "max": None,
        "step": None,
        "required": False,
    }


@field_type("boolean")
class Boolean(Field):
    declared_attributes = {
        "true_label": "Yes",
        "false_label": "No",
    }

    def label(self) -> str:
        key = "true_label" if self.value() else "false_label"
        return self.get_attribute(key)

    def on_index(self) -> dict:
        return {"label": self.label()}

    def on_view(self) -> dict:
        return {"label": self.label()}


@field_type("enum")
class Enum(Field):
    """Select from a fixed set of options"""
    declared_attributes = {
        "options": {},
        "multiple": False,
    }

    def set_options(self, options: Mapping[Any, str] | Sequence[Any]):
        """Accepts a value -> label mapping or a list of values labelled by themselves"""
        if not isinstance(options, Mapping):
            options = {option: str(option) for option in options}
        return self.set_attribute("options", dict(options))

    def options(self) -> dict:
        return self.get_attribute("options") or {}

    def label(self) -> Any:
        value = self.value()
        options = self.options()
        if isinstance(value, (list, tuple, set, frozenset)):
            return ", ".join(str(options.get(item, item)) if isinstance(item, Hashable) else str(item) for item in value)
        if not isinstance(value, Hashable):
            return value
        return options.get(value, value)

    def on_edit(self) -> dict:
        return {"options": self.options()}

    def on_index(self) -> dict:
        return {"label": self.label()}

    def on_view(self) -> dict:
        return {"label": self.label()}


@field_type("date")
class Date(Field):
    declared_attributes = {
        "format": "%Y-%m-%d",
    }

    def formatted(self) -> str | None:
        value = self.value()
        if isinstance(value, (date, datetime)):
            return value.strftime(self.get_attribute("format"))
        return value

    def on_index(self) -> dict:
        return {"formatted": self.formatted()}

    def on_view(self) -> dict:
        return {"formatted": self.formatted()}


@field_type("datetime")
class DateTime(Date):
    declared_attributes = {
        "format": "%Y-%m-%d %H:%M",
    }
