"""Structural pattern demonstrations: Adapter, Decorator, Facade, Proxy."""

from decimal import Decimal
from typing import Protocol

from pattern_catalog.domain.entities import Category, Example, Result, Transcript


# --- Adapter -----------------------------------------------------------------

class PaymentProcessor(Protocol):
    def process_payment(self, amount: Decimal) -> None: ...


class PayPalLegacyPaymentService:
    """Third-party API with its own method name."""

    def __init__(self, out: Transcript) -> None:
        self.out = out

    def make_payment(self, amount: Decimal) -> None:
        self.out.say(f"Processing payment of {amount} using PayPal.")


class PayPalAdapter:
    """Exposes the legacy service through the PaymentProcessor interface."""

    def __init__(self, legacy: PayPalLegacyPaymentService) -> None:
        self._legacy = legacy

    def process_payment(self, amount: Decimal) -> None:
        self._legacy.make_payment(amount)


def checkout(processor: PaymentProcessor, amount: Decimal) -> None:
    processor.process_payment(amount)


def run_adapter() -> Result:
    out = Transcript()
    checkout(PayPalAdapter(PayPalLegacyPaymentService(out)), Decimal("100.00"))
    return out.result()


# --- Decorator ---------------------------------------------------------------

class Message(Protocol):
    def get_content(self) -> str: ...


class SimpleMessage:
    def __init__(self, content: str) -> None:
        self._content = content

    def get_content(self) -> str:
        return self._content


class MessageDecorator:
    def __init__(self, message: Message) -> None:
        self._message = message

    def get_content(self) -> str:
        return self._message.get_content()


class EncryptedMessage(MessageDecorator):
    """Toy encryption: reverse the text."""

    def get_content(self) -> str:
        return super().get_content()[::-1]


class CompressedMessage(MessageDecorator):
    """Toy compression: drop spaces."""

    def get_content(self) -> str:
        return super().get_content().replace(" ", "")


def run_decorator() -> Result:
    out = Transcript()
    message = SimpleMessage("Hello World")
    out.say(f"Original Message: {message.get_content()}")
    encrypted = EncryptedMessage(message)
    out.say(f"Encrypted Message: {encrypted.get_content()}")
    compressed = CompressedMessage(encrypted)
    out.say(f"Compressed & Encrypted Message: {compressed.get_content()}")
    return out.result()


# --- Facade ------------------------------------------------------------------

class PaymentGateway:
    def __init__(self, out: Transcript) -> None:
        self.out = out

    def pay(self, amount: Decimal) -> None:
        self.out.say(f"Processing payment of {amount}")


class NotificationService:
    def __init__(self, out: Transcript) -> None:
        self.out = out

    def notify(self, message: str) -> None:
        self.out.say(f"Sending notification: {message}")


class InventoryService:
    def __init__(self, out: Transcript) -> None:
        self.out = out
        self.stock: dict[int, int] = {}

    def update_stock(self, product_id: int, quantity: int) -> None:
        self.stock[product_id] = self.stock.get(product_id, 0) + quantity
        self.out.say(f"Updating stock for product {product_id} by {quantity}")


class OrderFacade:
    """One call hides inventory, payment and notification steps."""

    def __init__(self, out: Transcript) -> None:
        self._inventory = InventoryService(out)
        self._payments = PaymentGateway(out)
        self._notifications = NotificationService(out)

    def place_order(self, amount: Decimal, product_id: int, quantity: int = 1) -> None:
        self._inventory.update_stock(product_id, -quantity)
        self._payments.pay(amount)
        self._notifications.notify("Order placed successfully.")


def run_facade() -> Result:
    out = Transcript()
    OrderFacade(out).place_order(Decimal("99.99"), product_id=101)
    return out.result()


# --- Proxy -------------------------------------------------------------------

class RealCache:
    """Stands in for a slow data source."""

    def __init__(self, out: Transcript) -> None:
        self.out = out

    def get_data(self, key: str) -> str:
        self.out.say(f"Fetching data for {key} from the real cache.")
        return f"Data for {key}"


class CacheProxy:
    """Creates the real cache lazily and memoizes its answers."""

    def __init__(self, out: Transcript) -> None:
        self.out = out
        self._real: RealCache | None = None
        self._cache: dict[str, str] = {}

    def get_data(self, key: str) -> str:
        if key in self._cache:
            self.out.say(f"Fetching data for {key} from the proxy cache.")
            return self._cache[key]
        if self._real is None:
            self._real = RealCache(self.out)
        data = self._real.get_data(key)
        self._cache[key] = data
        return data


class RealImageService:
    def __init__(self, image_path: str, out: Transcript) -> None:
        self.image_path = image_path
        self.out = out

    def display_image(self) -> None:
        self.out.say(f"Displaying image from {self.image_path}")


class ImageServiceProxy:
    """Forwards to the real service; a place to add access checks or logging."""

    def __init__(self, real: RealImageService) -> None:
        self._real = real

    def display_image(self) -> None:
        self._real.out.say("Proxy: forwarding display request.")
        self._real.display_image()


def run_proxy() -> Result:
    out = Transcript()
    cache = CacheProxy(out)
    out.say(cache.get_data("item1"))
    out.say(cache.get_data("item1"))

    ImageServiceProxy(RealImageService("path/to/image.jpg", out)).display_image()
    return out.result()


def examples() -> list[Example]:
    return [
        Example("Adapter", Category.STRUCTURAL, run_adapter,
                "Wrap a legacy payment API behind the interface callers expect."),
        Example("Decorator", Category.STRUCTURAL, run_decorator,
                "Stack encryption and compression around a message."),
        Example("Facade", Category.STRUCTURAL, run_facade,
                "Place an order through one entry point over three services."),
        Example("Proxy", Category.STRUCTURAL, run_proxy,
                "Cache and lazily create an expensive object behind a stand-in."),
    ]
