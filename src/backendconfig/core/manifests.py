"""Manifest loading and config — rendered YAML in, manifests by kind out."""

import os
import sys
from pathlib import Path

import yaml

from backendconfig.core.constants import ANNOTATION_KEYS, API_VERSIONS, DEFAULT_NAMESPACE, KIND


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_manifests(rendered_dir: str) -> dict[str, list[dict]]:
    """Load all YAML files under rendered_dir, classify by kind."""
    manifests: dict[str, list[dict]] = {}
    rendered = Path(rendered_dir)
    files = sorted(p for p in rendered.rglob("*") if p.suffix in (".yaml", ".yml"))
    for yaml_file in files:
        try:
            with open(yaml_file, encoding="utf-8") as f:
                for doc in yaml.safe_load_all(f):
                    if not doc or not isinstance(doc, dict):
                        continue
                    # List kinds (e.g. `kubectl get -o yaml`) are flattened
                    if str(doc.get("kind") or "").endswith("List") and "items" in doc:
                        for item in doc.get("items") or []:
                            if isinstance(item, dict):
                                manifests.setdefault(item.get("kind", "Unknown"), []).append(item)
                        continue
                    manifests.setdefault(doc.get("kind", "Unknown"), []).append(doc)
        except yaml.YAMLError as exc:
            print(f"⚠ Skipping {yaml_file.name}: {exc.__class__.__name__}",
                  file=sys.stderr)
    return manifests


def apply_default_namespace(manifests: dict[str, list[dict]], namespace: str) -> None:
    """Fill missing ``metadata.namespace`` with *namespace*."""
    for kind_list in manifests.values():
        for m in kind_list:
            meta = m.get("metadata") or {}
            m["metadata"] = meta
            if not meta.get("namespace"):
                meta["namespace"] = namespace


def is_backend_config(manifest: dict) -> bool:
    """True for BackendConfig manifests of a known cloud.google.com version."""
    return manifest.get("kind") == KIND and manifest.get("apiVersion") in API_VERSIONS


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def load_config(path: str | None) -> dict:
    """Load backendconfig.yaml or return the default config."""
    if path and os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    else:
        cfg = {}
    cfg.setdefault("annotationKeys", list(ANNOTATION_KEYS))
    cfg.setdefault("defaultNamespace", DEFAULT_NAMESPACE)
    return cfg


def emit_warnings(warnings: list[str]) -> None:
    """Print all warnings to stderr."""
    for w in warnings:
        print(f"⚠ {w}", file=sys.stderr)
