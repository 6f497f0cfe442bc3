"""Creational pattern demonstrations: Singleton, Factory Method, Abstract Factory, Builder, Prototype."""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from pattern_catalog.domain.entities import Category, Example, Result, Transcript


# --- Singleton -------------------------------------------------------------
# One instance, built once by setup code and handed to every consumer.
# No class-level state: the "single" instance is whatever the caller shares.

@dataclass(frozen=True)
class AppSettings:
    environment: str
    max_connections: int


class ConnectionPool:
    def __init__(self, settings: AppSettings) -> None:
        self.settings = settings


class AuditService:
    def __init__(self, settings: AppSettings) -> None:
        self.settings = settings


def run_singleton() -> Result:
    out = Transcript()
    settings = AppSettings(environment="production", max_connections=10)
    out.say(f"Setup created settings for '{settings.environment}'.")

    pool = ConnectionPool(settings)
    audit = AuditService(settings)
    shared = pool.settings is audit.settings
    out.say(f"ConnectionPool and AuditService share one instance: {shared}")
    out.say(f"Max connections seen by AuditService: {audit.settings.max_connections}")
    if not shared:
        return out.failed("InvariantViolation", "consumers received different settings instances")
    return out.result()


# --- Factory Method ----------------------------------------------------------

class Document(ABC):
    @abstractmethod
    def print(self, out: Transcript) -> None: ...


class PdfDocument(Document):
    def print(self, out: Transcript) -> None:
        out.say("Printing PDF Document")


class WordDocument(Document):
    def print(self, out: Transcript) -> None:
        out.say("Printing Word Document")


class DocumentCreator(ABC):
    """Declares the factory method; subclasses decide which Document to build."""

    @abstractmethod
    def create_document(self) -> Document: ...

    def publish(self, out: Transcript) -> Document:
        document = self.create_document()
        document.print(out)
        return document


class PdfDocumentCreator(DocumentCreator):
    def create_document(self) -> Document:
        return PdfDocument()


class WordDocumentCreator(DocumentCreator):
    def create_document(self) -> Document:
        return WordDocument()


def run_factory_method() -> Result:
    out = Transcript()
    for creator in (PdfDocumentCreator(), WordDocumentCreator()):
        creator.publish(out)
    return out.result()


# --- Abstract Factory --------------------------------------------------------

class Header(ABC):
    @abstractmethod
    def render(self) -> str: ...


class Body(ABC):
    @abstractmethod
    def render(self) -> str: ...


class PdfHeader(Header):
    def render(self) -> str:
        return "PDF header"


class PdfBody(Body):
    def render(self) -> str:
        return "PDF body"


class WordHeader(Header):
    def render(self) -> str:
        return "Word header"


class WordBody(Body):
    def render(self) -> str:
        return "Word body"


class DocumentFactory(ABC):
    """Creates a family of parts that belong together."""

    @abstractmethod
    def create_header(self) -> Header: ...

    @abstractmethod
    def create_body(self) -> Body: ...


class PdfDocumentFactory(DocumentFactory):
    def create_header(self) -> Header:
        return PdfHeader()

    def create_body(self) -> Body:
        return PdfBody()


class WordDocumentFactory(DocumentFactory):
    def create_header(self) -> Header:
        return WordHeader()

    def create_body(self) -> Body:
        return WordBody()


def assemble(factory: DocumentFactory, out: Transcript) -> None:
    header, body = factory.create_header(), factory.create_body()
    out.say(f"Printing {header.render()} + {body.render()}")


def run_abstract_factory() -> Result:
    out = Transcript()
    assemble(PdfDocumentFactory(), out)
    assemble(WordDocumentFactory(), out)
    return out.result()


# --- Builder -----------------------------------------------------------------

@dataclass(frozen=True)
class Report:
    title: str = ""
    content: str = ""
    footer: str = ""

    def __str__(self) -> str:
        return f"Title: {self.title}\nContent: {self.content}\nFooter: {self.footer}"


class ReportBuilder:
    def __init__(self) -> None:
        self._report = Report()

    def set_title(self, title: str) -> "ReportBuilder":
        self._report = replace(self._report, title=title)
        return self

    def set_content(self, content: str) -> "ReportBuilder":
        self._report = replace(self._report, content=content)
        return self

    def set_footer(self, footer: str) -> "ReportBuilder":
        self._report = replace(self._report, footer=footer)
        return self

    def build(self) -> Report:
        return self._report


def run_builder() -> Result:
    out = Transcript()
    report = (
        ReportBuilder()
        .set_title("Annual Report")
        .set_content("This is the content of the annual report.")
        .set_footer("Confidential")
        .build()
    )
    out.extend(str(report).splitlines())
    return out.result()


# --- Prototype ---------------------------------------------------------------

class Configuration:
    def __init__(self, some_setting: str, another_setting: int, tags: list[str] | None = None) -> None:
        self.some_setting = some_setting
        self.another_setting = another_setting
        self.tags = tags if tags is not None else []

    def clone(self) -> "Configuration":
        # deep copy so the clone's tags list is its own
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f"SomeSetting: {self.some_setting}, AnotherSetting: {self.another_setting}"


def run_prototype() -> Result:
    out = Transcript()
    original = Configuration("Original", 42, tags=["base"])
    cloned = original.clone()
    cloned.some_setting = "Cloned"
    cloned.tags.append("copy")
    out.say(f"Original Config: {original}")
    out.say(f"Cloned Config: {cloned}")
    out.say(f"Original tags untouched: {original.tags}")
    return out.result()


def examples() -> list[Example]:
    return [
        Example("Singleton", Category.CREATIONAL, run_singleton,
                "One shared instance, created once and passed explicitly."),
        Example("Factory Method", Category.CREATIONAL, run_factory_method,
                "Subclasses decide which document to create."),
        Example("Abstract Factory", Category.CREATIONAL, run_abstract_factory,
                "Create families of related objects without naming concrete classes."),
        Example("Builder", Category.CREATIONAL, run_builder,
                "Assemble a report step by step with a fluent builder."),
        Example("Prototype", Category.CREATIONAL, run_prototype,
                "Clone a configuration instead of rebuilding it."),
    ]
