"""Ports the use cases depend on. Implementations live in outer layers."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pattern_catalog.domain.registry import ExampleRegistry


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class CatalogLoaderProtocol(Protocol):
    """Populates a registry with the shipped demonstrations."""

    def register_all(self, registry: "ExampleRegistry") -> "ExampleRegistry":
        """Register every example into registry and return it."""
        ...
