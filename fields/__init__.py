from fields.base import Field, field_type
from fields.collection import FieldCollection
from fields.formatting import CustomFormat
from fields.pages import PAGE_INDEX, PAGE_EDIT, PAGE_VIEW, PAGES
from fields.types import Key, Id, Text, Textarea, Email, Number, Boolean, Enum, Date, DateTime
