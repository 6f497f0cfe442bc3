"""Registers the shipped demonstrations, one module per category."""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from pattern_catalog.catalog import behavioral, creational, solid, structural

if TYPE_CHECKING:
    from pattern_catalog.domain.entities import Example
    from pattern_catalog.domain.registry import ExampleRegistry

ExampleSource = Callable[[], "list[Example]"]

DEFAULT_SOURCES: tuple[ExampleSource, ...] = (
    creational.examples,
    structural.examples,
    behavioral.examples,
    solid.examples,
)


class CatalogLoader:
    """Implements CatalogLoaderProtocol over a sequence of example sources."""

    def __init__(self, sources: Sequence[ExampleSource] = DEFAULT_SOURCES) -> None:
        self.sources = tuple(sources)

    def register_all(self, registry: "ExampleRegistry") -> "ExampleRegistry":
        """Register every source's examples in order. DuplicateNameError propagates."""
        for source in self.sources:
            registry.register_many(source())
        return registry
