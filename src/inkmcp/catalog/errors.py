"""Catalog errors"""


class CatalogLoadError(RuntimeError):
    """A catalog file is missing, unreadable or malformed"""


class InkNotFound(LookupError):
    def __init__(self, ink_id: str):
        self.ink_id = ink_id
        super().__init__(f"Ink not found: {ink_id}")
