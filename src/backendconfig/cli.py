"""backendconfig-resolve — query BackendConfig references in rendered manifests."""

import argparse
import sys

import yaml

from backendconfig.core.manifests import (
    apply_default_namespace, emit_warnings, load_config, parse_manifests,
)
from backendconfig.pacts.errors import BackendConfigError
from backendconfig.resolver import (
    get_backend_config_for_service_port, get_services_for_backend_config,
)
from backendconfig.store import index_manifests


def _split_ref(ref: str, default_ns: str) -> tuple[str, str]:
    """Split 'namespace/name' (or bare 'name') into (namespace, name)."""
    if "/" in ref:
        ns, name = ref.split("/", 1)
        return ns, name
    return default_ns, ref


def _find_port(svc: dict, port: str) -> dict | None:
    """Find a ServicePort by name, falling back to its number."""
    svc_ports = (svc.get("spec") or {}).get("ports") or []
    for sp in svc_ports:
        if sp.get("name") == port:
            return sp
    for sp in svc_ports:
        if str(sp.get("port")) == port:
            return sp
    return None


def _port_label(sp: dict) -> str:
    return sp.get("name") or str(sp.get("port", "?"))


def _dump(data) -> None:
    yaml.safe_dump(data, sys.stdout, default_flow_style=False, sort_keys=False)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_port(args, config, svc_store, bc_store) -> int:
    """Forward lookup for a single ServicePort."""
    ns, name = _split_ref(args.service, config["defaultNamespace"])
    svc, exists = svc_store.get_by_key(f"{ns}/{name}")
    if not exists:
        print(f"Error: Service {ns}/{name} not found", file=sys.stderr)
        return 1
    svc_port = _find_port(svc, args.port)
    if svc_port is None:
        print(f"Error: Service {ns}/{name} has no port '{args.port}'", file=sys.stderr)
        return 1
    try:
        backend_config = get_backend_config_for_service_port(
            bc_store, svc, svc_port, config["annotationKeys"])
    except BackendConfigError as exc:
        print(f"Error: {ns}/{name} port {args.port}: {exc}", file=sys.stderr)
        return 1
    if backend_config is None:
        print(f"Service {ns}/{name} has no BackendConfig annotation", file=sys.stderr)
        return 0
    _dump(backend_config)
    return 0


def cmd_services(args, config, svc_store, bc_store) -> int:
    """Reverse lookup: Services referencing a BackendConfig."""
    ns, name = _split_ref(args.backend_config, config["defaultNamespace"])
    backend_config, exists = bc_store.get_by_key(f"{ns}/{name}")
    if not exists:
        # Unknown BackendConfigs can still be referenced by Services
        backend_config = {"metadata": {"namespace": ns, "name": name}}
        print(f"⚠ BackendConfig {ns}/{name} not found in manifests", file=sys.stderr)
    warnings: list[str] = []
    svcs = get_services_for_backend_config(
        svc_store, backend_config, warnings, config["annotationKeys"])
    emit_warnings(warnings)
    _dump([f"{s['metadata'].get('namespace', '')}/{s['metadata']['name']}" for s in svcs])
    return 0


def cmd_audit(_args, config, svc_store, bc_store) -> int:
    """Forward lookup for every port of every Service."""
    report: dict[str, dict] = {}
    warnings: list[str] = []
    for svc in svc_store.list():
        meta = svc.get("metadata") or {}
        svc_ref = f"{meta.get('namespace', '')}/{meta.get('name', '')}"
        ports: dict[str, str | None] = {}
        for sp in (svc.get("spec") or {}).get("ports") or []:
            try:
                backend_config = get_backend_config_for_service_port(
                    bc_store, svc, sp, config["annotationKeys"])
            except BackendConfigError as exc:
                warnings.append(f"{svc_ref} port {_port_label(sp)}: {exc}")
                continue
            ports[_port_label(sp)] = (
                backend_config["metadata"]["name"] if backend_config else None)
        report[svc_ref] = ports
    emit_warnings(warnings)
    _dump(report)
    return 1 if warnings else 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve GKE BackendConfig references between Services and BackendConfigs"
    )
    parser.add_argument(
        "--from-dir", default=".",
        help="Directory of rendered manifests to read (default: .)",
    )
    parser.add_argument(
        "--config",
        help="Path to backendconfig.yaml (annotation keys, default namespace)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    port = sub.add_parser("port", help="Find the BackendConfig for a Service port")
    port.add_argument("service", help="NAMESPACE/SERVICE (namespace optional)")
    port.add_argument("port", help="Port name or number")
    port.set_defaults(func=cmd_port)

    services = sub.add_parser("services", help="List Services referencing a BackendConfig")
    services.add_argument("backend_config", help="NAMESPACE/BACKENDCONFIG (namespace optional)")
    services.set_defaults(func=cmd_services)

    audit = sub.add_parser("audit", help="Resolve every port of every Service")
    audit.set_defaults(func=cmd_audit)
    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    manifests = parse_manifests(args.from_dir)
    apply_default_namespace(manifests, config["defaultNamespace"])
    kinds = {k: len(v) for k, v in manifests.items()}
    print(f"Parsed manifests: {kinds}", file=sys.stderr)

    svc_store, bc_store = index_manifests(manifests)
    return args.func(args, config, svc_store, bc_store)


if __name__ == "__main__":
    sys.exit(main())
