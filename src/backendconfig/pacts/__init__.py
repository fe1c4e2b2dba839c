"""Public contracts: data types and the error taxonomy."""

from backendconfig.pacts.types import BackendConfigNames
from backendconfig.pacts.errors import (
    BackendConfigError,
    AnnotationMissingError,
    AnnotationParseError,
    NoBackendConfigForPortError,
    BackendConfigLookupError,
    BackendConfigNotFoundError,
    is_annotation_missing,
)

__all__ = [
    "BackendConfigNames",
    "BackendConfigError",
    "AnnotationMissingError",
    "AnnotationParseError",
    "NoBackendConfigForPortError",
    "BackendConfigLookupError",
    "BackendConfigNotFoundError",
    "is_annotation_missing",
]
