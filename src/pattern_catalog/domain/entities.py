from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum


class Category(Enum):
    """Catalog section an example belongs to. Values are the CLI spellings."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"
    SOLID = "solid"

    @property
    def label(self) -> str:
        """Display name (Creational, Structural, ...)."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Failure:
    """Error detail attached to a failed Result."""
    kind: str
    message: str
    cause: str | None = None


@dataclass(frozen=True)
class Result:
    """Outcome of a single example invocation."""
    output_lines: tuple[str, ...] = ()
    succeeded: bool = True
    failure: Failure | None = None

    def __post_init__(self) -> None:
        if self.succeeded and self.failure is not None:
            raise ValueError("A successful Result cannot carry a failure.")
        if not self.succeeded and self.failure is None:
            raise ValueError("A failed Result must carry a failure.")
        # Accept any iterable of lines but store a tuple
        if not isinstance(self.output_lines, tuple):
            object.__setattr__(self, "output_lines", tuple(self.output_lines))

    @classmethod
    def ok(cls, lines: Iterable[str] = ()) -> "Result":
        """Create a successful result."""
        return cls(output_lines=tuple(lines))

    @classmethod
    def failed(
        cls,
        kind: str,
        message: str,
        lines: Iterable[str] = (),
        cause: str | None = None,
    ) -> "Result":
        """Create a failed result. Used by actions that model expected failures as data."""
        return cls(
            output_lines=tuple(lines),
            succeeded=False,
            failure=Failure(kind=kind, message=message, cause=cause),
        )


@dataclass(frozen=True)
class Example:
    """A single runnable demonstration: a name, a category, and an action."""
    name: str
    category: Category
    action: Callable[[], Result] = field(compare=False)
    summary: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Example name must be a non-empty string.")
        if not isinstance(self.category, Category):
            raise ValueError(
                f"Example '{self.name}' has invalid category {self.category!r}.")
        if not callable(self.action):
            raise ValueError(f"Example '{self.name}' action is not callable.")


@dataclass(frozen=True)
class RunReport:
    """Ordered (name, Result) pairs produced by one runner invocation."""
    results: tuple[tuple[str, Result], ...] = ()

    @property
    def pass_count(self) -> int:
        return sum(1 for _, result in self.results if result.succeeded)

    @property
    def fail_count(self) -> int:
        return sum(1 for _, result in self.results if not result.succeeded)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def all_passed(self) -> bool:
        return self.fail_count == 0

    def failures(self) -> list[tuple[str, Result]]:
        """Return the failed (name, Result) pairs in invocation order."""
        return [(name, result) for name, result in self.results if not result.succeeded]


class Transcript:
    """
    Collects the lines a demonstration would otherwise print.

    Demonstration classes receive a Transcript through their constructor and
    call say(); the action then returns transcript.result().
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def say(self, line: str) -> None:
        """Record one line of narration."""
        self._lines.append(str(line))

    def extend(self, lines: Iterable[str]) -> None:
        """Record several lines, e.g. a multi-line rendering split on newlines."""
        for line in lines:
            self.say(line)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def result(self) -> Result:
        """Snapshot the narration as a successful Result."""
        return Result.ok(self._lines)

    def failed(self, kind: str, message: str) -> Result:
        """Snapshot the narration as a failed Result."""
        return Result.failed(kind, message, self._lines)
