"""Template Service - locates and renders field partials with Jinja2"""

from pathlib import Path
from typing import Any, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from markupsafe import Markup

from core.exceptions import FieldTemplateNotFound
from core.logging_config import get_logger
from core.settings import settings

logger = get_logger(__name__)


class TemplateService:
    """
    Thin wrapper around a Jinja2 environment.

    Templates are addressed by logical path without extension,
    e.g. "fields/text/edit" -> "<templates_dir>/fields/text/edit.html".
    """

    def __init__(
        self,
        templates_dir: Optional[Path | str] = None,
        extension: Optional[str] = None,
        env: Optional[Environment] = None,
    ):
        self.extension = settings.TEMPLATE_EXTENSION if extension is None else extension
        if env is None:
            env = Environment(
                loader=FileSystemLoader(str(templates_dir or settings.TEMPLATES_DIR)),
                autoescape=select_autoescape(["html", "xml"]),
                trim_blocks=True,
                lstrip_blocks=True,
            )
        self.env = env

    def path(self, name: str) -> str:
        return f"{name}{self.extension}"

    def exists(self, name: str) -> bool:
        """Check whether a template exists without rendering it"""
        try:
            self.env.get_template(self.path(name))
        except TemplateNotFound:
            return False
        return True

    def resolve(self, names: Sequence[str]) -> str:
        """Return the first existing template out of ``names``"""
        for name in names:
            if self.exists(name):
                return name
            logger.debug(f"Template not found, trying next: {name}")

        logger.error(f"No template could be resolved from: {', '.join(names)}")
        raise FieldTemplateNotFound(names)

    def render(self, name: str, context: dict[str, Any]) -> Markup:
        template = self.env.get_template(self.path(name))
        return Markup(template.render(**context))


# Singleton instance
_template_service: Optional[TemplateService] = None


def get_template_service() -> TemplateService:
    """Get the singleton TemplateService instance"""
    global _template_service
    if _template_service is None:
        _template_service = TemplateService()
    return _template_service
