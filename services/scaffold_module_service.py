"""Scaffold Module Service - tracks which columns of a listing are sortable"""

from typing import Any, Callable, Optional

from sqlalchemy import Select, asc, desc

from core.logging_config import get_logger

logger = get_logger(__name__)

SortCallback = Callable[[Select, str], Select]

DIRECTIONS = {"asc": asc, "desc": desc}


class ScaffoldModule:
    """
    Registry of sortable columns keyed by field id.

    A column is either sorted by its own mapped attribute or by a callback
    receiving ``(stmt, direction)`` and returning the ordered statement.
    """

    def __init__(self):
        self._sortable: dict[str, Optional[SortCallback]] = {}

    def add_sortable(self, field_id: str, callback: Optional[SortCallback] = None) -> None:
        self._sortable[field_id] = callback
        logger.info_ctx("Column marked sortable", field_id=field_id, custom_order=callback is not None)

    def remove_sortable(self, field_id: str) -> None:
        if field_id in self._sortable:
            del self._sortable[field_id]
            logger.info_ctx("Column removed from sortable columns", field_id=field_id)

    def is_sortable(self, field_id: str) -> bool:
        return field_id in self._sortable

    def sortables(self) -> list[str]:
        return list(self._sortable)

    def sort_callback(self, field_id: str) -> Optional[SortCallback]:
        return self._sortable.get(field_id)

    def apply_sorting(self, stmt: Select, model: Any, column: str, direction: str = "asc") -> Select:
        """
        Order ``stmt`` by ``column`` if that column is sortable.

        Unknown columns leave the statement untouched.
        """
        direction = direction.lower()
        if direction not in DIRECTIONS:
            raise ValueError(f"Invalid sort direction '{direction}', expected 'asc' or 'desc'")

        if not self.is_sortable(column):
            logger.debug(f"Ignoring sort by non-sortable column '{column}'")
            return stmt

        callback = self.sort_callback(column)
        if callback is not None:
            return callback(stmt, direction)

        attribute = getattr(model, column, None)
        if attribute is None:
            logger.warning_ctx("Sortable column is not a model attribute", field_id=column, model=model.__name__)
            return stmt

        return stmt.order_by(DIRECTIONS[direction](attribute))

    def clear(self) -> None:
        self._sortable.clear()


# Singleton instance
_scaffold_module: Optional[ScaffoldModule] = None


def get_scaffold_module() -> ScaffoldModule:
    """Get the singleton ScaffoldModule instance"""
    global _scaffold_module
    if _scaffold_module is None:
        _scaffold_module = ScaffoldModule()
    return _scaffold_module
