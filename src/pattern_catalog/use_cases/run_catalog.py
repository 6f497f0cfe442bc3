"""Use Case: Run Catalog - execute examples and collect a RunReport."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pattern_catalog.domain.entities import Category, Example, Result, RunReport
from pattern_catalog.domain.exceptions import ExecutionError
from pattern_catalog.domain.protocols import TelemetryPort

if TYPE_CHECKING:
    from pattern_catalog.domain.registry import ExampleRegistry


class RunCatalogUseCase:
    """
    Execute one or many examples, isolating failures.

    A broken demonstration never aborts a batch: whatever its action raises is
    turned into a failed Result. Examples run sequentially in registration
    order, once each, with no timeout.
    """

    def __init__(
        self,
        telemetry: TelemetryPort,
        exclude: Iterable[str] = (),
    ) -> None:
        self.telemetry = telemetry
        self.exclude = frozenset(exclude)

    def run_one(self, example: Example) -> Result:
        """
        Invoke example.action and return its Result.

        Never raises for failures inside the action. KeyboardInterrupt and
        SystemExit are not Exception subclasses and still propagate.
        """
        self.telemetry.debug(f"Running example: {example.name}")
        try:
            outcome = example.action()
        except Exception as exc:  # any action failure becomes report data
            message = str(exc) or type(exc).__name__
            self.telemetry.debug(f"{example.name} failed: {message}")
            return Result.failed(
                ExecutionError.KIND, message, cause=type(exc).__name__)

        if not isinstance(outcome, Result):
            message = (
                f"action returned {type(outcome).__name__} instead of Result")
            self.telemetry.debug(f"{example.name} failed: {message}")
            return Result.failed(ExecutionError.KIND, message)

        if not outcome.succeeded and outcome.failure is not None:
            self.telemetry.debug(
                f"{example.name} failed: {outcome.failure.message}")
        return outcome

    def run_all(
        self,
        registry: "ExampleRegistry",
        category: Category | None = None,
    ) -> RunReport:
        """Run every example (or one category's) in registration order."""
        examples = registry.all() if category is None else registry.list_by_category(category)
        results: list[tuple[str, Result]] = []
        for example in examples:
            if example.name in self.exclude:
                self.telemetry.debug(f"Skipping excluded example: {example.name}")
                continue
            results.append((example.name, self.run_one(example)))
        return RunReport(results=tuple(results))

    def run_named(self, registry: "ExampleRegistry", name: str) -> RunReport:
        """Run a single example by name. NotFoundError propagates to the caller."""
        example = registry.get(name)
        return RunReport(results=((example.name, self.run_one(example)),))
