"""Public data types for the resolver."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BackendConfigNames:
    """Parsed backend-config annotation of a single Service.

    ``ports`` maps a port name (or its number as a decimal string) to the
    name of a BackendConfig in the Service's own namespace.
    """
    default: str = ""
    ports: dict[str, str] = field(default_factory=dict)

    def references(self, name: str) -> bool:
        """Return True if *name* is the default or any per-port BackendConfig."""
        if not name:
            return False
        return self.default == name or name in self.ports.values()
