"""Catalog error hierarchy. Pure domain, no I/O."""


class CatalogError(Exception):
    """Base class for every error raised by the catalog runtime."""


class DuplicateNameError(CatalogError):
    """An example with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Example '{name}' is already registered.")
        self.name = name


class NotFoundError(CatalogError, KeyError):
    """No example is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No example named '{name}' is registered.")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ExecutionError(CatalogError):
    """
    Failure kind recorded when an example's action raises.

    The runner never lets this escape; it only appears as Failure.kind.
    """

    KIND = "ExecutionError"
