"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging

from pattern_catalog.infrastructure.di.container import CatalogContainer
from pattern_catalog.interface.cli import CLIAppFactory, CLIDependencies
from pattern_catalog.interface.telemetry import ProjectTelemetry


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    # handler first so config warnings are rendered; then the configured level
    ProjectTelemetry.configure_logging(logging.WARNING)
    container = CatalogContainer()
    config_loader = container.get_config_loader()
    ProjectTelemetry.configure_logging(config_loader.log_level)

    deps = CLIDependencies(
        config_loader=config_loader,
        telemetry=container.get_telemetry_port(),
        reporter=container.get_reporter(),
        catalog_loader=container.get_catalog_loader(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
