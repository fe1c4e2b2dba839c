import json

import pytest

from backendconfig.store import Store


def make_service(name, namespace="ns", backend_configs=None, ports=None,
                 annotation_key="cloud.google.com/backend-config"):
    annotations = {}
    if backend_configs is not None:
        if not isinstance(backend_configs, str):
            backend_configs = json.dumps(backend_configs)
        annotations[annotation_key] = backend_configs
    return {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {"name": name, "namespace": namespace, "annotations": annotations},
        "spec": {"ports": ports if ports is not None else [
            {"name": "http", "port": 80}, {"name": "grpc", "port": 9000},
        ]},
    }


def make_backend_config(name, namespace="ns"):
    return {
        "apiVersion": "cloud.google.com/v1",
        "kind": "BackendConfig",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {"timeoutSec": 40},
    }


@pytest.fixture
def service():
    return make_service("web", backend_configs={"default": "cfg-a", "ports": {"http": "cfg-b"}})


@pytest.fixture
def backend_config_store():
    return Store([make_backend_config("cfg-a"), make_backend_config("cfg-b"),
                  make_backend_config("cfg-c")])
