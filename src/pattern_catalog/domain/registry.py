"""Ordered registry of catalog examples."""

from collections.abc import Iterable, Iterator

from pattern_catalog.domain.entities import Category, Example
from pattern_catalog.domain.exceptions import DuplicateNameError, NotFoundError


class ExampleView:
    """
    Lazy, restartable view over a registry's examples.

    Each iteration walks the registry afresh, so a view can be iterated any
    number of times. An optional category narrows it to matching examples.
    """

    def __init__(self, entries: dict[str, Example], category: Category | None = None) -> None:
        self._entries = entries
        self._category = category

    def __iter__(self) -> Iterator[Example]:
        for example in self._entries.values():
            if self._category is None or example.category is self._category:
                yield example

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __repr__(self) -> str:
        scope = self._category.value if self._category else "all"
        return f"ExampleView({scope}, {[e.name for e in self]!r})"


class ExampleRegistry:
    """
    Registry of examples keyed by unique name.

    Insertion order is preserved so enumeration and runs are deterministic.
    Registering a name twice fails instead of overwriting.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Example] = {}

    def register(self, example: Example) -> None:
        """Add an example. Raises DuplicateNameError if the name is taken."""
        if example.name in self._entries:
            raise DuplicateNameError(example.name)
        self._entries[example.name] = example

    def register_many(self, examples: Iterable[Example]) -> None:
        """Register examples in order, stopping at the first duplicate."""
        for example in examples:
            self.register(example)

    def get(self, name: str) -> Example:
        """Return the example registered under name. Raises NotFoundError."""
        try:
            return self._entries[name]
        except KeyError:
            raise NotFoundError(name) from None

    def list_by_category(self, category: Category) -> ExampleView:
        """Examples whose category matches, in registration order. Empty if none."""
        return ExampleView(self._entries, category)

    def all(self) -> ExampleView:
        """Every example in registration order."""
        return ExampleView(self._entries)

    def names(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries
