"""In-memory keyed stores of Services and BackendConfigs.

Keys follow the Kubernetes ``namespace/name`` convention (just ``name`` for
cluster-scoped objects). Stores are populated from outside, by manifest
loading or a watcher; the resolver only reads them.
"""

from __future__ import annotations

import threading

from backendconfig.core.constants import KIND
from backendconfig.core.manifests import is_backend_config


class StoreError(Exception):
    """Raised when a store cannot serve a request."""


def object_key(obj: dict) -> str:
    """Return the ``namespace/name`` key of a manifest."""
    if not isinstance(obj, dict):
        raise StoreError(f"object has no metadata: {obj!r}")
    meta = obj.get("metadata") or {}
    name = meta.get("name", "")
    if not name:
        raise StoreError("object has no metadata.name")
    ns = meta.get("namespace", "")
    return f"{ns}/{name}" if ns else name


class Store:
    """Thread-safe keyed collection; enumeration follows insertion order."""

    def __init__(self, objs=None):
        self._items: dict[str, dict] = {}
        self._lock = threading.Lock()
        if objs:
            self.replace(objs)

    def add(self, obj: dict) -> None:
        key = object_key(obj)
        with self._lock:
            self._items[key] = obj

    update = add

    def delete(self, obj: dict) -> None:
        key = object_key(obj)
        with self._lock:
            self._items.pop(key, None)

    def get(self, obj: dict) -> tuple[dict | None, bool]:
        """Look up the stored object sharing *obj*'s key."""
        return self.get_by_key(object_key(obj))

    def get_by_key(self, key: str) -> tuple[dict | None, bool]:
        with self._lock:
            item = self._items.get(key)
        return item, item is not None

    def list(self) -> list[dict]:
        with self._lock:
            return list(self._items.values())

    def list_keys(self) -> list[str]:
        with self._lock:
            return list(self._items)

    def replace(self, objs) -> None:
        """Swap the whole content of the store for *objs*."""
        items = {object_key(o): o for o in objs}
        with self._lock:
            self._items = items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


def index_manifests(manifests: dict[str, list[dict]]) -> tuple[Store, Store]:
    """Build (service_store, backend_config_store) from manifests grouped by kind."""
    services = Store(manifests.get("Service", []))
    backend_configs = Store(m for m in manifests.get(KIND, []) if is_backend_config(m))
    return services, backend_configs
