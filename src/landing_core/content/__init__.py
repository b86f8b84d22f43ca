from landing_core.content.models import Section
from landing_core.content.store import ContentStore, StorageError
from landing_core.content.validation import MissingFieldError, require_fields

__all__ = [
    "ContentStore",
    "MissingFieldError",
    "Section",
    "StorageError",
    "require_fields",
]
