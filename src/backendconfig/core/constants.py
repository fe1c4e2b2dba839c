"""Constants used throughout the resolver: annotation keys and CRD identity."""

# Service annotation carrying the BackendConfig references (GA, then legacy beta)
BACKEND_CONFIG_KEY = "cloud.google.com/backend-config"
BETA_BACKEND_CONFIG_KEY = "beta.cloud.google.com/backend-config"
ANNOTATION_KEYS = (BACKEND_CONFIG_KEY, BETA_BACKEND_CONFIG_KEY)

# BackendConfig CRD identity
GROUP_NAME = "cloud.google.com"
VERSIONS = ("v1", "v1beta1")
KIND = "BackendConfig"
API_VERSIONS = tuple(f"{GROUP_NAME}/{v}" for v in VERSIONS)

# Namespace assumed for manifests rendered without metadata.namespace
DEFAULT_NAMESPACE = "default"
