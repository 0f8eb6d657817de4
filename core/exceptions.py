"""Errors raised by field descriptors and their collaborators"""

from typing import Sequence


class FieldError(Exception):
    """Base class for field configuration and rendering errors"""


class UnknownAttributeError(FieldError):
    """Raised when setting an attribute the field type never declared"""

    def __init__(self, key: str, field_type: str):
        self.key = key
        self.field_type = field_type
        super().__init__(f"Unknown attribute {key} for field type '{field_type}'")


class FieldTemplateNotFound(FieldError):
    """Raised when neither the type-specific nor the fallback template exists"""

    def __init__(self, templates: Sequence[str]):
        self.templates = list(templates)
        super().__init__(f"None of the templates could be found: {', '.join(self.templates)}")


class UnknownFieldTypeError(FieldError):
    """Raised when a field type name cannot be resolved to a Field subclass"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Field type '{name}' not found")
