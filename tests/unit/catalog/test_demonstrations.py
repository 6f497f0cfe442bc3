"""Every shipped demonstration runs and tells the story it should."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from pattern_catalog.catalog import behavioral, creational, solid, structural
from pattern_catalog.catalog.loader import CatalogLoader
from pattern_catalog.domain.entities import Category, Transcript
from pattern_catalog.domain.registry import ExampleRegistry
from pattern_catalog.use_cases.run_catalog import RunCatalogUseCase


@pytest.fixture(scope="module")
def registry() -> ExampleRegistry:
    return CatalogLoader().register_all(ExampleRegistry())


class TestLoader:
    def test_every_category_is_populated(self, registry: ExampleRegistry) -> None:
        for category in Category:
            assert len(registry.list_by_category(category)) > 0

    def test_expected_names(self, registry: ExampleRegistry) -> None:
        assert registry.names() == [
            "Singleton", "Factory Method", "Abstract Factory", "Builder", "Prototype",
            "Adapter", "Decorator", "Facade", "Proxy",
            "Memento", "Observer", "State", "Strategy",
            "Single Responsibility", "Open/Closed", "Liskov Substitution",
            "Interface Segregation", "Dependency Inversion",
        ]

    def test_every_example_has_a_summary(self, registry: ExampleRegistry) -> None:
        assert all(example.summary for example in registry.all())

    def test_whole_catalog_passes(self, registry: ExampleRegistry) -> None:
        report = RunCatalogUseCase(MagicMock()).run_all(registry)
        assert report.failures() == []
        assert report.pass_count == len(registry)
        assert all(result.output_lines for _, result in report.results)

    def test_custom_sources(self) -> None:
        loader = CatalogLoader([solid.examples])
        assert len(loader.register_all(ExampleRegistry())) == 5


class TestCreational:
    def test_singleton_shares_one_instance(self) -> None:
        result = creational.run_singleton()
        assert result.succeeded
        assert "ConnectionPool and AuditService share one instance: True" in result.output_lines

    def test_factory_method(self) -> None:
        assert creational.run_factory_method().output_lines == (
            "Printing PDF Document", "Printing Word Document")

    def test_abstract_factory_keeps_families_together(self) -> None:
        assert creational.run_abstract_factory().output_lines == (
            "Printing PDF header + PDF body", "Printing Word header + Word body")

    def test_builder(self) -> None:
        assert creational.run_builder().output_lines == (
            "Title: Annual Report",
            "Content: This is the content of the annual report.",
            "Footer: Confidential",
        )

    def test_prototype_clone_is_independent(self) -> None:
        original = creational.Configuration("Original", 42, ["base"])
        cloned = original.clone()
        cloned.tags.append("copy")
        assert original.tags == ["base"]
        lines = creational.run_prototype().output_lines
        assert "Original Config: SomeSetting: Original, AnotherSetting: 42" in lines
        assert "Cloned Config: SomeSetting: Cloned, AnotherSetting: 42" in lines


class TestStructural:
    def test_adapter(self) -> None:
        assert structural.run_adapter().output_lines == (
            "Processing payment of 100.00 using PayPal.",)

    def test_decorator(self) -> None:
        assert structural.run_decorator().output_lines == (
            "Original Message: Hello World",
            "Encrypted Message: dlroW olleH",
            "Compressed & Encrypted Message: dlroWolleH",
        )

    def test_facade_order_of_steps(self) -> None:
        assert structural.run_facade().output_lines == (
            "Updating stock for product 101 by -1",
            "Processing payment of 99.99",
            "Sending notification: Order placed successfully.",
        )

    def test_proxy_hits_real_cache_once(self) -> None:
        out = Transcript()
        proxy = structural.CacheProxy(out)
        assert proxy.get_data("item1") == "Data for item1"
        assert proxy.get_data("item1") == "Data for item1"
        assert out.lines == (
            "Fetching data for item1 from the real cache.",
            "Fetching data for item1 from the proxy cache.",
        )


class TestBehavioral:
    def test_memento_restores_saved_states(self) -> None:
        lines = behavioral.run_memento().output_lines
        assert "Originator: State after restoring from Memento: State2" in lines
        assert "Originator: State after restoring from Memento: State3" in lines
        assert lines[-3:] == (
            "Current content: Hello, world!",
            "Restored content: Hello, world",
            "Restored content: Hello, ",
        )

    def test_observer_skips_detached_and_unchanged(self) -> None:
        assert behavioral.run_observer().output_lines == (
            "Notified John of AAPL's price change to 155.00",
            "Notified Jane of AAPL's price change to 155.00",
            "Notified John of AAPL's price change to 160.00",
            "Notified Jane of AAPL's price change to 160.00",
            "Notified Jane of AAPL's price change to 165.00",
        )

    def test_state_reaches_delivered(self) -> None:
        result = behavioral.run_state()
        assert result.succeeded
        assert result.output_lines[-1] == "Order is in Delivered state. No further transitions."

    def test_strategy_can_be_swapped(self) -> None:
        context = behavioral.CompressionContext(behavioral.ZipCompression())
        assert "ZIP" in context.create_archive("a.txt")
        context.strategy = behavioral.RarCompression()
        assert "RAR" in context.create_archive("a.txt")
        assert len(behavioral.run_strategy().output_lines) == 8


class TestSolid:
    def test_srp(self) -> None:
        lines = solid.run_srp().output_lines
        assert "Invoice ID:     1" in lines
        assert lines[-1] == "Processed: True"

    def test_ocp(self) -> None:
        assert solid.run_ocp().output_lines[0] == "Processing credit card payment of $100.00"

    def test_lsp_overdraft_is_a_value_not_an_exception(self) -> None:
        account = solid.SavingsAccount("S1")
        account.deposit(Decimal("10"))
        outcome = account.withdraw(Decimal("50"))
        assert not outcome.ok
        assert outcome.reason == "Insufficient balance."
        assert account.balance == Decimal("10")
        assert not hasattr(solid.FixedDepositAccount("F1"), "withdraw")
        lines = solid.run_lsp().output_lines
        assert "S123 Balance: 800" in lines
        assert "FD456 Balance: 5000" in lines

    def test_isp(self) -> None:
        assert solid.run_isp().output_lines == (
            "Printing: Hello, World!", "Printing: Document", "Scanning: Photo", "Faxing: Contract")

    def test_isp_simple_printer_only_prints(self) -> None:
        printer = solid.SimplePrinter()
        assert not hasattr(printer, "scan")
        assert not hasattr(printer, "fax")
        device = solid.MultiFunctionPrinter()
        assert device.scan("x") == "Scanning: x"
        assert device.fax("x") == "Faxing: x"

    def test_lsp_birds_share_only_move(self) -> None:
        watcher = solid.BirdWatcher()
        assert [watcher.observe(bird) for bird in (solid.Sparrow(), solid.Ostrich())] == [
            "Sparrow is flying.", "Ostrich is running."]
        assert not hasattr(solid.Ostrich(), "fly")

    def test_dip(self) -> None:
        assert solid.run_dip().output_lines == (
            "Email sent to user@example.com with message: Hello via Email!",
            "SMS sent to 123-456-7890 with message: Hello via SMS!",
        )

    def test_dip_requires_a_service(self) -> None:
        with pytest.raises(ValueError):
            solid.Notification(None)  # type: ignore[arg-type]
