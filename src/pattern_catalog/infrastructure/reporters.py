"""Run reporters - plain text formatting and rich terminal rendering."""

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pattern_catalog.domain.constants import STATUS_FAIL, STATUS_PASS

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import Category, Result, RunReport
    from pattern_catalog.domain.registry import ExampleRegistry

_INDENT = "    "


class PlainTextRunReporter:
    """
    Formats a RunReport into deterministic text lines.

    format() is a pure function of its arguments: it keeps no counters and
    never mutates the report, so calling it twice yields identical lines.
    """

    def format(self, report: "RunReport", include_output: bool = False) -> list[str]:
        """
        Render report as lines.

        Layout:
            Ran 3 example(s): 2 passed, 1 failed
            PASS Singleton
            FAIL Adapter
                ExecutionError: boom
        """
        lines = [self.format_header(report)]
        for name, result in report.results:
            lines.extend(self.format_result(name, result, include_output))
        return lines

    @staticmethod
    def format_header(report: "RunReport") -> str:
        return (
            f"Ran {report.total} example(s): "
            f"{report.pass_count} passed, {report.fail_count} failed"
        )

    @staticmethod
    def format_result(name: str, result: "Result", include_output: bool = False) -> list[str]:
        """Status line, optional captured output, then failure detail."""
        status = STATUS_PASS if result.succeeded else STATUS_FAIL
        block = [f"{status} {name}"]
        if include_output:
            block.extend(f"{_INDENT}{line}" for line in result.output_lines)
        if result.failure is not None:
            block.append(f"{_INDENT}{result.failure.kind}: {result.failure.message}")
        return block

    def summarize_failures(self, report: "RunReport") -> list[str]:
        """One line per failed example, for stderr."""
        summary = []
        for name, result in report.failures():
            message = result.failure.message if result.failure else ""
            summary.append(f"{STATUS_FAIL} {name}: {message}")
        return summary


class TerminalRunReporter(PlainTextRunReporter):
    """Renders formatted reports on the terminal using rich."""

    STYLES: dict[str, str] = {
        STATUS_PASS: "bold green",
        STATUS_FAIL: "bold red",
        "header": "bold cyan",
        "detail": "dim",
    }

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

    def _style_for(self, line: str) -> str:
        status = line.split(" ", 1)[0]
        if status in (STATUS_PASS, STATUS_FAIL):
            return self.STYLES[status]
        if line.startswith(_INDENT):
            return self.STYLES["detail"]
        return ""

    def report_run(self, report: "RunReport", include_output: bool = False) -> None:
        """Print the formatted report; summarize failures on stderr."""
        lines = self.format(report, include_output=include_output)
        header, body = lines[0], lines[1:]
        self.console.print(Text(header, style=self.STYLES["header"]), soft_wrap=True)
        for line in body:
            self.console.print(Text(line, style=self._style_for(line)), soft_wrap=True)

        failures = self.summarize_failures(report)
        if failures:
            self.error_console.print(
                Text(f"{len(failures)} example(s) failed:", style=self.STYLES[STATUS_FAIL]),
                soft_wrap=True,
            )
            for line in failures:
                self.error_console.print(Text(line), soft_wrap=True)

    def render_catalog(
        self, registry: "ExampleRegistry", category: "Category | None" = None
    ) -> None:
        """Print a table of registered examples."""
        examples = registry.all() if category is None else registry.list_by_category(category)
        table = Table(title="Pattern Catalog", header_style=self.STYLES["header"])
        table.add_column("Name", no_wrap=True)
        table.add_column("Category")
        table.add_column("Summary")
        count = 0
        for example in examples:
            table.add_row(example.name, example.category.label, example.summary)
            count += 1
        if count == 0:
            self.console.print("No examples registered.")
            return
        self.console.print(table)
