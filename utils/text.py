import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[_\-\s]+")
_TRAILING_ID = re.compile(r"(?<=\S) id$")


def humanize(value: str) -> str:
    """
    Turn an identifier into a label: "first_name" -> "First name", "userId" -> "User".
    A trailing "id" word is dropped unless it is the only word.
    """
    text = _CAMEL_BOUNDARY.sub(r"\1 \2", value)
    text = _SEPARATORS.sub(" ", text).strip().lower()
    text = _TRAILING_ID.sub("", text)
    return text[:1].upper() + text[1:]


def snake_case(value: str) -> str:
    """Normalize to snake case, keeping dots so nested ids survive: "Address.City" -> "address.city"."""
    text = _CAMEL_BOUNDARY.sub(r"\1_\2", value.strip())
    text = _SEPARATORS.sub("_", text)
    text = re.sub(r"_*\._*", ".", text)
    return text.strip("_").lower()
