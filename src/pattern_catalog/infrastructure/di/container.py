from typing import TYPE_CHECKING, Any, cast

from pattern_catalog.catalog.loader import CatalogLoader
from pattern_catalog.domain.config import ConfigurationLoader
from pattern_catalog.infrastructure.config_file_loader import ConfigFileLoader
from pattern_catalog.infrastructure.reporters import TerminalRunReporter
from pattern_catalog.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from pattern_catalog.domain.protocols import CatalogLoaderProtocol, TelemetryPort
    from pattern_catalog.interface.reporters import RunReporter


class CatalogContainer:
    """
    Dependency Injection Container for the catalog runner.

    Every shared object is built once here and handed out by reference;
    nothing else in the package keeps module- or class-level instances.
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_dict)

    def _register_defaults(self, config_dict: dict[str, object] | None) -> None:
        """Register default implementations for protocols."""
        if config_dict is None:
            config_dict = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry(
            "CATALOG", "cyan", "Pattern catalog ready")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("RunReporter", TerminalRunReporter())
        self.register_singleton("CatalogLoader", CatalogLoader())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the loaded configuration."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_reporter(self) -> "RunReporter":
        """Return the run reporter."""
        return cast("RunReporter", self.get("RunReporter"))

    def get_catalog_loader(self) -> "CatalogLoaderProtocol":
        """Return the loader that populates the registry."""
        return cast("CatalogLoaderProtocol", self.get("CatalogLoader"))
