"""BackendConfig resolution — Service port → BackendConfig and back."""

from backendconfig.core.annotations import get_backend_configs
from backendconfig.core.manifests import emit_warnings
from backendconfig.pacts.errors import (
    BackendConfigError,
    BackendConfigLookupError,
    BackendConfigNotFoundError,
    NoBackendConfigForPortError,
    is_annotation_missing,
)
from backendconfig.pacts.types import BackendConfigNames
from backendconfig.store import StoreError


def _namespace(obj: dict) -> str:
    return (obj.get("metadata") or {}).get("namespace", "")


def _name(obj: dict) -> str:
    return (obj.get("metadata") or {}).get("name", "")


def backend_config_name(names: BackendConfigNames, svc_port: dict) -> str:
    """Return the BackendConfig name that applies to *svc_port*, or "".

    A per-port entry (by port name, then by port number) wins over the default.
    An unnamed port is looked up under the "" key first, like any other name.
    """
    port_name = svc_port.get("name") or ""
    if port_name in names.ports:
        return names.ports[port_name]
    port_number = svc_port.get("port")
    if port_number is not None and str(port_number) in names.ports:
        return names.ports[str(port_number)]
    return names.default or ""


def get_backend_config_for_service_port(backend_config_store, svc: dict, svc_port: dict,
                                        annotation_keys=None) -> dict | None:
    """Return the BackendConfig for the given ServicePort if specified.

    Returns None when the Service carries no backend-config annotation.
    """
    try:
        names = get_backend_configs(svc, annotation_keys)
    except BackendConfigError as exc:
        # No annotation at all means the Service opted out
        if is_annotation_missing(exc):
            return None
        raise

    config_name = backend_config_name(names, svc_port)
    if not config_name:
        raise NoBackendConfigForPortError()

    key = f"{_namespace(svc)}/{config_name}" if _namespace(svc) else config_name
    try:
        obj, exists = backend_config_store.get_by_key(key)
    except StoreError as exc:
        raise BackendConfigLookupError() from exc
    if not exists:
        raise BackendConfigNotFoundError()
    return obj


def get_services_for_backend_config(svc_store, backend_config: dict,
                                    warnings: list[str] | None = None,
                                    annotation_keys=None) -> list[dict]:
    """Return all Services that reference the given BackendConfig.

    Services with a malformed annotation are skipped and reported in
    *warnings*; when no list is passed they are printed to stderr instead.
    """
    collected: list[str] = [] if warnings is None else warnings
    target_ns = _namespace(backend_config)
    target_name = _name(backend_config)
    svcs = []
    for svc in svc_store.list():
        if _namespace(svc) != target_ns:
            continue
        try:
            names = get_backend_configs(svc, annotation_keys)
        except BackendConfigError as exc:
            if not is_annotation_missing(exc):
                collected.append(
                    f"Failed to get BackendConfig names from service "
                    f"{_namespace(svc)}/{_name(svc)}: {exc}")
            continue
        if names.references(target_name):
            svcs.append(svc)
    if warnings is None:
        emit_warnings(collected)
    return svcs
