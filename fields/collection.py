"""Ordered set of fields describing one record type"""

from typing import Any, Iterator, Optional, Type, TYPE_CHECKING

from core.exceptions import FieldError
from core.logging_config import LogContext, get_logger
from fields.base import Field

if TYPE_CHECKING:
    from services.template_service import TemplateService

logger = get_logger(__name__)


class FieldCollection:
    """
    Fields of a listing or form, keyed by id in insertion order.

    Field ids are unique within a collection.
    """

    def __init__(self, fields: Optional[list[Field]] = None):
        self._fields: dict[str, Field] = {}
        for field in fields or []:
            self.add(field)

    def add(self, field: Field) -> "FieldCollection":
        if field.id() in self._fields:
            raise FieldError(f"Field with id '{field.id()}' already exists")
        self._fields[field.id()] = field
        return self

    def get(self, field_id: str) -> Optional[Field]:
        return self._fields.get(field_id)

    def has(self, field_id: str) -> bool:
        return field_id in self._fields

    def remove(self, field_id: str) -> "FieldCollection":
        self._fields.pop(field_id, None)
        return self

    def switch(self, field_id: str, target: str | Type[Field]) -> Field:
        """Replace a field by one of another type, keeping its position"""
        field = self._fields.get(field_id)
        if field is None:
            raise FieldError(f"Field with id '{field_id}' not found")

        switched = field.switch_to(target)
        self._fields[field_id] = switched
        return switched

    def visible_on(self, page: str) -> list[Field]:
        return [field for field in self._fields.values() if field.is_visible_on_page(page)]

    def bind(self, record: Any) -> "FieldCollection":
        for field in self._fields.values():
            field.set_model(record)
        return self

    def render(
        self,
        page: str,
        record: Any = None,
        templates: Optional["TemplateService"] = None,
    ) -> list[tuple[Field, Any]]:
        """Render every field visible on ``page``, binding ``record`` first when given"""
        if record is not None:
            self.bind(record)

        rendered = []
        for field in self.visible_on(page):
            with LogContext(page=page, field_id=field.id(), field_type=field.template_handle()):
                rendered.append((field, field.render(page, templates=templates)))

        logger.debug(f"Rendered {len(rendered)} fields for page '{page}'")
        return rendered

    def __iter__(self) -> Iterator[Field]:
        return iter(list(self._fields.values()))

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, field_id: str) -> bool:
        return field_id in self._fields
