"""Error taxonomy for BackendConfig resolution."""


class BackendConfigError(Exception):
    """Base class for every failure raised while resolving BackendConfigs."""


class AnnotationMissingError(BackendConfigError):
    """The Service carries no backend-config annotation at all."""

    def __init__(self, message: str = "BackendConfig annotation is missing from service."):
        super().__init__(message)


class AnnotationParseError(BackendConfigError):
    """The annotation is present but malformed or names nothing."""


class NoBackendConfigForPortError(BackendConfigError):
    def __init__(self, message: str = "no BackendConfig name found for service port."):
        super().__init__(message)


class BackendConfigLookupError(BackendConfigError):
    def __init__(self, message: str = "client had error getting BackendConfig for service port."):
        super().__init__(message)


class BackendConfigNotFoundError(BackendConfigError):
    def __init__(self, message: str = "no BackendConfig for service port exists."):
        super().__init__(message)


def is_annotation_missing(exc: BaseException) -> bool:
    """Return True if *exc* signals that the Service simply opted out."""
    return isinstance(exc, AnnotationMissingError)
