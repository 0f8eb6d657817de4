"""Field schemas - serializable snapshot of a configured field"""

from typing import Any, Optional

from pydantic import BaseModel, Field as PydanticField


class FieldRead(BaseModel):
    """Schema for reading a field descriptor, e.g. to describe listing columns to a client"""
    type: str = PydanticField(..., max_length=100)
    id: str = PydanticField(..., min_length=1)
    name: str
    title: str
    description: Optional[str] = None
    show_label: bool = True
    visibility: dict[str, bool] = PydanticField(default_factory=dict)
    attributes: dict[str, Any] = PydanticField(default_factory=dict)

    # None when no sort registry was consulted
    sortable: Optional[bool] = None
