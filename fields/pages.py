"""Admin pages a field can be rendered on"""

PAGE_INDEX = "index"
PAGE_EDIT = "edit"
PAGE_VIEW = "view"

PAGES = (PAGE_INDEX, PAGE_EDIT, PAGE_VIEW)


def hook_name(page: str) -> str:
    """Name of the optional per-page context hook, e.g. "edit" -> "on_edit"."""
    return f"on_{page.lower()}"
