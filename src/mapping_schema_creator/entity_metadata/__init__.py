"""Entity metadata exports."""

from .entity_models import MappingError, PersistentEntity, PersistentProperty
from .mapping_context import ID_FIELD_NAME, MappingContext
from .mapping_markers import DocumentId, FieldName, Id, Nullable, Transient
from .type_information import TypeInformation

__all__ = [
    "DocumentId",
    "FieldName",
    "ID_FIELD_NAME",
    "Id",
    "MappingContext",
    "MappingError",
    "Nullable",
    "PersistentEntity",
    "PersistentProperty",
    "Transient",
    "TypeInformation",
]
