"""Service annotation reader — extracts BackendConfig references from a Service."""

import json

from backendconfig.core.constants import ANNOTATION_KEYS
from backendconfig.pacts.errors import AnnotationMissingError, AnnotationParseError
from backendconfig.pacts.types import BackendConfigNames


def _get_annotation(service: dict, keys) -> str | None:
    """Return the first annotation value found among *keys*, or None."""
    annotations = (service.get("metadata") or {}).get("annotations") or {}
    for key in keys:
        if key in annotations:
            return annotations[key]
    return None


def _parse_names(raw: str) -> BackendConfigNames:
    """Decode the JSON annotation payload into BackendConfigNames."""
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise AnnotationParseError(f"invalid BackendConfig annotation: {exc}") from exc
    if not isinstance(payload, dict):
        raise AnnotationParseError(
            f"BackendConfig annotation must be a JSON object, got {type(payload).__name__}")

    default = payload.get("default")
    if default is None:
        default = ""
    if not isinstance(default, str):
        raise AnnotationParseError("BackendConfig annotation 'default' must be a string")
    ports = payload.get("ports")
    if ports is None:
        ports = {}
    if not isinstance(ports, dict):
        raise AnnotationParseError("BackendConfig annotation 'ports' must be an object")
    for port, name in ports.items():
        if not isinstance(name, str):
            raise AnnotationParseError(
                f"BackendConfig annotation port '{port}' must map to a string")

    if not default and not ports:
        raise AnnotationParseError("no BackendConfigs found in annotation")
    return BackendConfigNames(default=default, ports=dict(ports))


def get_backend_configs(service: dict, keys=None) -> BackendConfigNames:
    """Read the BackendConfig references annotated on *service*.

    Raises AnnotationMissingError when none of *keys* (GA key first, then the
    legacy beta key by default) is present, AnnotationParseError when the
    value is malformed.
    """
    raw = _get_annotation(service, keys or ANNOTATION_KEYS)
    if raw is None:
        raise AnnotationMissingError()
    return _parse_names(raw)
