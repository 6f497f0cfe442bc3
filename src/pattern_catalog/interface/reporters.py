"""Protocol for run reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import Category, RunReport
    from pattern_catalog.domain.registry import ExampleRegistry


class RunReporter(Protocol):
    """Protocol for rendering run reports and catalog listings."""

    def format(self, report: "RunReport", include_output: bool = False) -> list[str]:
        """Render report as plain lines. Pure: same report, same lines."""
        ...

    def report_run(self, report: "RunReport", include_output: bool = False) -> None:
        """Write the formatted report to stdout and a failure summary to stderr."""
        ...

    def render_catalog(
        self, registry: "ExampleRegistry", category: "Category | None" = None
    ) -> None:
        """Show registered examples without running them."""
        ...
