"""Field - base descriptor for a single displayable/editable attribute of a record"""

from collections.abc import Mapping
from typing import Any, Callable, ClassVar, Iterable, Optional, Type, TYPE_CHECKING
import copy

from core.exceptions import FieldError, UnknownAttributeError, UnknownFieldTypeError
from core.logging_config import get_logger
from core.settings import settings
from fields.formatting import AcceptsCustomFormat
from fields.pages import PAGES, PAGE_INDEX, hook_name
from models.record import read_attribute
from utils.text import humanize, snake_case

if TYPE_CHECKING:
    from schemas.field import FieldRead
    from services.scaffold_module_service import ScaffoldModule
    from services.template_service import TemplateService

logger = get_logger(__name__)

_UNSET = object()


def field_type(handle: str):
    """Register a Field subclass under ``handle``, which is also its template directory"""
    def decorator(cls: Type["Field"]) -> Type["Field"]:
        cls.handle = handle
        return cls
    return decorator


class Field(AcceptsCustomFormat):
    """
    Base class of all field types.

    A field knows its id, label and per-page visibility, reads its value from
    the bound record and renders itself for a page ("index", "edit", "view"),
    either through a custom formatter or through a template partial:

        field = Text.make("first_name", callback=lambda f: f.set_attribute("maxlength", 50))
        field.set_model(user).render("edit")

    Subclasses declare the attributes they accept in ``declared_attributes``
    and may add per-page template context by defining ``on_<page>`` hooks.
    """

    handle: ClassVar[str] = ""

    # Attribute name -> default value; only declared names can be set
    declared_attributes: ClassVar[dict[str, Any]] = {}

    # Pages this type is hidden on unless shown explicitly
    hidden_on: ClassVar[tuple[str, ...]] = ()

    def __init__(self, title: str, id: Optional[str] = None):
        if type(self) is Field:
            raise TypeError("Field is abstract, use a concrete field type")

        self._title = humanize(title)
        self._id = self._normalize_id(id or self._title)

        self._description: Optional[str] = None
        self._model: Any = None
        self._value: Any = _UNSET
        self._show_label = True
        self._visibility = {page: page not in self.hidden_on for page in PAGES}
        self._attributes = copy.deepcopy(self.declared_attributes)

    @classmethod
    def make(cls, title: str, id: Optional[str] = None, callback: Optional[Callable[[Any], Any]] = None):
        """Create a field; ``callback`` receives the new instance for builder-style configuration"""
        instance = cls(title, id)

        if callback is not None:
            callback(instance)

        return instance

    @classmethod
    def make_from(cls, element: "Field"):
        """Create a field of this type carrying over the title and id of ``element``"""
        return cls.make(element.title(), element.id())

    def switch_to(self, target: str | Type["Field"]) -> "Field":
        """Return a new field of another type with the same title and id"""
        if isinstance(target, str):
            from services.field_type_loader_service import get_field_type_loader

            field_class = get_field_type_loader().get_field_type(target)
            if field_class is None:
                raise UnknownFieldTypeError(target)
        else:
            field_class = target

        if not (isinstance(field_class, type) and issubclass(field_class, Field)) or field_class is Field:
            raise UnknownFieldTypeError(getattr(field_class, "__name__", repr(field_class)))

        return field_class.make(self.title(), self.id())

    @classmethod
    def template_handle(cls) -> str:
        return cls.handle or snake_case(cls.__name__)

    @staticmethod
    def _normalize_id(id: str) -> str:
        normalized = snake_case(id or "")
        if not normalized:
            raise FieldError(f"Cannot derive a field id from {id!r}")
        return normalized

    # --- record binding -------------------------------------------------------

    def set_model(self, model: Any):
        self._model = model
        return self

    def get_model(self) -> Any:
        return self._model

    def set_value(self, value: Any):
        """Use ``value`` instead of reading it from the record"""
        self._value = value
        return self

    def value(self) -> Any:
        if self._value is not _UNSET:
            return self._value

        if self._model is None:
            return None

        return read_attribute(self._model, self._id)

    # --- rendering ------------------------------------------------------------

    def render_with(self) -> tuple:
        """Arguments handed to a custom formatter"""
        return self.value(), self._model

    # Per-page template context; subclasses override the pages they need

    def on_index(self) -> dict:
        return {}

    def on_edit(self) -> dict:
        return {}

    def on_view(self) -> dict:
        return {}

    def render(self, page: str = PAGE_INDEX, templates: Optional["TemplateService"] = None) -> Any:
        if self.has_custom_format():
            return self.call_formatter(self.render_with())

        data = {
            "field": self,
            "model": self._model,
            "record": self._model,
        }

        hook = getattr(self, hook_name(page), None)
        if callable(hook):
            data.update(hook() or {})

        if templates is None:
            from services.template_service import get_template_service

            templates = get_template_service()

        view = templates.resolve([
            self.template(page),
            self.template(page, settings.FALLBACK_FIELD_TYPE),
        ])
        return templates.render(view, data)

    def template(self, page: str, field: Optional[str] = None) -> str:
        return "/".join([
            settings.FIELD_TEMPLATE_NAMESPACE,
            snake_case(field or self.template_handle()),
            page,
        ])

    # --- identity -------------------------------------------------------------

    def id(self) -> str:
        return self._id

    def name(self) -> str:
        """Form input name: "address.city" -> "address[city]" """
        first, *other = self._id.split(".")
        return first + "".join(f"[{part}]" for part in other)

    def set_id(self, id: str):
        self._id = self._normalize_id(id)
        return self

    def title(self) -> str:
        return self._title

    def set_title(self, title: str):
        self._title = title
        return self

    def get_description(self) -> Optional[str]:
        return self._description

    def set_description(self, description: str):
        self._description = description
        return self

    def hide_label(self, hide_label: bool = True):
        self._show_label = not hide_label
        return self

    def is_hidden_label(self) -> bool:
        return not self._show_label

    # --- visibility -----------------------------------------------------------

    def is_visible_on_page(self, page: str) -> bool:
        return bool(self._visibility.get(page, False))

    def hide_on_pages(self, pages: str | Iterable[str]):
        return self._set_pages_visibility(pages, False)

    def show_on_pages(self, pages: str | Iterable[str]):
        return self._set_pages_visibility(pages, True)

    def _set_pages_visibility(self, pages: str | Iterable[str], visibility: bool):
        if isinstance(pages, str):
            pages = [pages]

        for page in pages:
            if page not in self._visibility:
                logger.debug(f"Ignoring unknown page '{page}' for field '{self._id}'")
                continue
            self._visibility[page] = visibility

        return self

    def visibility(self) -> dict[str, bool]:
        return dict(self._visibility)

    # --- sorting --------------------------------------------------------------

    def sortable(self, callback: Optional[Callable] = None, registry: Optional["ScaffoldModule"] = None):
        """Make the column sortable, optionally with a custom ordering callback"""
        self._scaffold_module(registry).add_sortable(self._id, callback)
        return self

    def disable_sorting(self, registry: Optional["ScaffoldModule"] = None):
        """Remove the column from the sortable columns"""
        self._scaffold_module(registry).remove_sortable(self._id)
        return self

    @staticmethod
    def _scaffold_module(registry: Optional["ScaffoldModule"]) -> "ScaffoldModule":
        if registry is not None:
            return registry

        from services.scaffold_module_service import get_scaffold_module

        return get_scaffold_module()

    # --- attributes -----------------------------------------------------------

    def set_attribute(self, attribute: str | Mapping[str, Any], value: Any = None):
        if isinstance(attribute, Mapping):
            for key, item in attribute.items():
                self.set_attribute(key, item)
            return self

        if attribute not in self._attributes:
            raise UnknownAttributeError(attribute, self.template_handle())

        self._attributes[attribute] = value
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    # --- serialization --------------------------------------------------------

    def to_schema(self, registry: Optional["ScaffoldModule"] = None) -> "FieldRead":
        from schemas.field import FieldRead

        return FieldRead(
            type=self.template_handle(),
            id=self._id,
            name=self.name(),
            title=self._title,
            description=self._description,
            show_label=self._show_label,
            visibility=self.visibility(),
            attributes=self.attributes(),
            sortable=registry.is_sortable(self._id) if registry is not None else None,
        )

    def __repr__(self):
        return f"<{type(self).__name__}(id='{self._id}', title='{self._title}')>"
