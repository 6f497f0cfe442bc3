"""CLI entry points for the pattern catalog - Thin Controller using Typer."""

from dataclasses import dataclass
from typing import Optional

import typer

from pattern_catalog.domain.config import ConfigurationLoader
from pattern_catalog.domain.constants import ExitCode
from pattern_catalog.domain.entities import Category
from pattern_catalog.domain.exceptions import DuplicateNameError, NotFoundError
from pattern_catalog.domain.protocols import CatalogLoaderProtocol, TelemetryPort
from pattern_catalog.domain.registry import ExampleRegistry
from pattern_catalog.interface.reporters import RunReporter
from pattern_catalog.use_cases.run_catalog import RunCatalogUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    reporter: RunReporter
    catalog_loader: CatalogLoaderProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def load_registry(deps: CLIDependencies) -> ExampleRegistry:
        """Build a fresh registry; a duplicate name aborts startup with exit code 3."""
        try:
            return deps.catalog_loader.register_all(ExampleRegistry())
        except DuplicateNameError as exc:
            deps.telemetry.debug(f"Catalog construction failed: {exc}")
            typer.echo(f"Error: could not build the catalog. {exc}", err=True)
            raise typer.Exit(code=int(ExitCode.STARTUP)) from exc

    @staticmethod
    def exit_code_for(all_passed: bool) -> int:
        return int(ExitCode.OK if all_passed else ExitCode.FAILURES)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="pattern-catalog",
            help="Run the design pattern and SOLID demonstrations and report which pass.",
            add_completion=False,
        )

        @app.command()
        def run(
            category: Optional[Category] = typer.Option(
                None, "--category", "-c", case_sensitive=False,
                help="Only run examples in this category."),
            show_output: Optional[bool] = typer.Option(
                None, "--show-output/--hide-output",
                help="Include each example's captured output. Defaults to the show_output setting."),
            quiet: bool = typer.Option(
                False, "--quiet", "-q", help="Skip the banner and progress messages."),
        ) -> None:
            """Run every registered example (or one category) and report pass/fail."""
            registry = CLIAppFactory.load_registry(deps)
            config = deps.config_loader
            if not quiet:
                if config.banner:
                    deps.telemetry.handshake()
                scope = category.label if category else "all"
                deps.telemetry.step(f"Running {scope} examples...")

            use_case = RunCatalogUseCase(deps.telemetry, exclude=config.exclude)
            report = use_case.run_all(registry, category)
            deps.reporter.report_run(
                report,
                include_output=config.show_output if show_output is None else show_output)
            raise typer.Exit(code=CLIAppFactory.exit_code_for(report.all_passed))

        @app.command()
        def show(
            name: str = typer.Argument(..., help="Name of the example to run, e.g. 'Builder'."),
            show_output: bool = typer.Option(
                True, "--show-output/--hide-output", help="Include the captured output."),
        ) -> None:
            """Run a single example by name."""
            registry = CLIAppFactory.load_registry(deps)
            use_case = RunCatalogUseCase(deps.telemetry)
            try:
                report = use_case.run_named(registry, name)
            except NotFoundError as exc:
                typer.echo(f"Error: {exc}", err=True)
                raise typer.Exit(code=int(ExitCode.USAGE)) from exc
            deps.reporter.report_run(report, include_output=show_output)
            raise typer.Exit(code=CLIAppFactory.exit_code_for(report.all_passed))

        @app.command("list")
        def list_examples(
            category: Optional[Category] = typer.Option(
                None, "--category", "-c", case_sensitive=False,
                help="Only list examples in this category."),
        ) -> None:
            """List registered examples without running them."""
            registry = CLIAppFactory.load_registry(deps)
            deps.reporter.render_catalog(registry, category)

        return app
