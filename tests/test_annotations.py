import pytest

from backendconfig.core.annotations import get_backend_configs
from backendconfig.core.constants import BETA_BACKEND_CONFIG_KEY
from backendconfig.pacts.errors import (
    AnnotationMissingError, AnnotationParseError, is_annotation_missing,
)
from backendconfig.pacts.types import BackendConfigNames

from conftest import make_service


def test_default_and_ports():
    svc = make_service("web", backend_configs={"default": "cfg-a", "ports": {"http": "cfg-b"}})
    assert get_backend_configs(svc) == BackendConfigNames(default="cfg-a", ports={"http": "cfg-b"})


def test_ports_only():
    svc = make_service("web", backend_configs={"ports": {"8080": "cfg-b"}})
    names = get_backend_configs(svc)
    assert names.default == ""
    assert names.ports == {"8080": "cfg-b"}


def test_missing_annotation():
    svc = make_service("web")
    with pytest.raises(AnnotationMissingError) as excinfo:
        get_backend_configs(svc)
    assert is_annotation_missing(excinfo.value)


def test_no_metadata_is_missing():
    with pytest.raises(AnnotationMissingError):
        get_backend_configs({"kind": "Service"})


def test_beta_key():
    svc = make_service("web", backend_configs={"default": "cfg-beta"},
                       annotation_key=BETA_BACKEND_CONFIG_KEY)
    assert get_backend_configs(svc).default == "cfg-beta"


def test_ga_key_wins_over_beta():
    svc = make_service("web", backend_configs={"default": "cfg-ga"})
    svc["metadata"]["annotations"][BETA_BACKEND_CONFIG_KEY] = '{"default": "cfg-beta"}'
    assert get_backend_configs(svc).default == "cfg-ga"


def test_custom_keys():
    svc = make_service("web", backend_configs={"default": "cfg-x"}, annotation_key="example.com/bc")
    assert get_backend_configs(svc, ["example.com/bc"]).default == "cfg-x"
    with pytest.raises(AnnotationMissingError):
        get_backend_configs(svc)


@pytest.mark.parametrize("raw", [
    "not json",
    '["cfg-a"]',
    '{"default": 3}',
    '{"ports": ["http"]}',
    '{"ports": {"http": 1}}',
    "{}",
    '{"default": "", "ports": {}}',
    '{"default": false, "ports": {"http": "cfg-b"}}',
    '{"default": "cfg-a", "ports": []}',
    '{"default": "cfg-a", "ports": 0}',
])
def test_malformed(raw):
    svc = make_service("web", backend_configs=raw)
    with pytest.raises(AnnotationParseError) as excinfo:
        get_backend_configs(svc)
    assert not is_annotation_missing(excinfo.value)


def test_unknown_fields_ignored():
    svc = make_service("web", backend_configs={"default": "cfg-a", "extra": True})
    assert get_backend_configs(svc).default == "cfg-a"


def test_references():
    names = BackendConfigNames(default="cfg-a", ports={"http": "cfg-b"})
    assert names.references("cfg-a")
    assert names.references("cfg-b")
    assert not names.references("cfg-c")
    assert not BackendConfigNames(ports={"http": "cfg-b"}).references("")


def test_null_fields_default_to_empty():
    svc = make_service("web", backend_configs='{"default": null, "ports": {"http": "cfg-b"}}')
    assert get_backend_configs(svc) == BackendConfigNames(ports={"http": "cfg-b"})
