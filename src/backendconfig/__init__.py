"""Resolve GKE BackendConfig references for Kubernetes Service ports."""

from backendconfig.pacts import (
    BackendConfigNames,
    BackendConfigError,
    AnnotationMissingError,
    AnnotationParseError,
    NoBackendConfigForPortError,
    BackendConfigLookupError,
    BackendConfigNotFoundError,
    is_annotation_missing,
)
from backendconfig.core.annotations import get_backend_configs
from backendconfig.resolver import (
    backend_config_name,
    get_backend_config_for_service_port,
    get_services_for_backend_config,
)
from backendconfig.store import Store, StoreError, index_manifests

__version__ = "0.1.0"

__all__ = [
    "BackendConfigNames",
    "BackendConfigError",
    "AnnotationMissingError",
    "AnnotationParseError",
    "NoBackendConfigForPortError",
    "BackendConfigLookupError",
    "BackendConfigNotFoundError",
    "is_annotation_missing",
    "get_backend_configs",
    "backend_config_name",
    "get_backend_config_for_service_port",
    "get_services_for_backend_config",
    "Store",
    "StoreError",
    "index_manifests",
]
