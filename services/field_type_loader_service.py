"""Field Type Loader Service - runtime lookup of field types by name"""

from typing import Dict, Optional, Type
import importlib
import inspect

from core.exceptions import UnknownFieldTypeError
from core.logging_config import get_logger
from core.settings import settings
from fields.base import Field

logger = get_logger(__name__)


class FieldTypeLoader:
    """
    Loads field types from the configured field types module.

    Field types are:
    - Decorated with @field_type, which sets their handle
    - Collected from the module named by settings.FIELD_TYPES_MODULE
    - Looked up by handle ("number") or class name ("Number")
    """

    def __init__(self, module_name: Optional[str] = None):
        self.module_name = module_name or settings.FIELD_TYPES_MODULE
        self._field_types: Dict[str, Type[Field]] = {}
        self._loaded = False

    def load_field_types(self) -> None:
        """Load all field types from the field types module"""
        if self._loaded:
            logger.debug("Field types already loaded")
            return

        try:
            field_types_module = importlib.import_module(self.module_name)
        except ImportError as e:
            logger.error(f"Failed to load field types from {self.module_name}: {e}")
            raise

        for attr_name in dir(field_types_module):
            attr = getattr(field_types_module, attr_name)

            if (
                inspect.isclass(attr) and
                issubclass(attr, Field) and
                attr is not Field and
                getattr(attr, 'handle', None)
            ):
                self.register(attr)

        self._loaded = True
        logger.info_ctx("Field types loaded", module=self.module_name, count=len(self._field_types))

    def register(self, field_class: Type[Field]) -> None:
        """Register a field type under its handle"""
        if not (inspect.isclass(field_class) and issubclass(field_class, Field)):
            raise UnknownFieldTypeError(getattr(field_class, '__name__', repr(field_class)))

        self._field_types[field_class.handle] = field_class
        logger.debug_ctx("Registered field type", handle=field_class.handle, field_class=field_class.__name__)

    def get_field_type(self, name: str) -> Optional[Type[Field]]:
        """Get a field type class by handle or class name"""
        if not self._loaded:
            self.load_field_types()

        if name in self._field_types:
            return self._field_types[name]

        for field_class in self._field_types.values():
            if field_class.__name__ == name:
                return field_class
        return None

    def get_all_field_types(self) -> Dict[str, Type[Field]]:
        """Get all loaded field types"""
        if not self._loaded:
            self.load_field_types()
        return self._field_types.copy()

    def field_type_exists(self, name: str) -> bool:
        """Check if a field type with the given handle or class name exists"""
        return self.get_field_type(name) is not None


# Singleton instance
_field_type_loader: Optional[FieldTypeLoader] = None


def get_field_type_loader() -> FieldTypeLoader:
    """Get the singleton FieldTypeLoader instance"""
    global _field_type_loader
    if _field_type_loader is None:
        _field_type_loader = FieldTypeLoader()
        _field_type_loader.load_field_types()
    return _field_type_loader
