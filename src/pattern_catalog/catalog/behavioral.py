"""Behavioral pattern demonstrations: Memento, Observer, State, Strategy."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from pattern_catalog.domain.entities import Category, Example, Result, Transcript


# --- Memento -----------------------------------------------------------------

@dataclass(frozen=True)
class Memento:
    state: str


class Originator:
    def __init__(self, out: Transcript) -> None:
        self.out = out
        self.state = ""

    def set_state(self, state: str) -> None:
        self.state = state
        self.out.say(f"Originator: Setting state to {state}")

    def save(self) -> Memento:
        self.out.say("Originator: Saving to Memento.")
        return Memento(self.state)

    def restore(self, memento: Memento) -> None:
        self.state = memento.state
        self.out.say(f"Originator: State after restoring from Memento: {self.state}")


class Caretaker:
    """Keeps mementos without looking inside them."""

    def __init__(self) -> None:
        self._mementos: list[Memento] = []

    def add(self, memento: Memento) -> None:
        self._mementos.append(memento)

    def get(self, index: int) -> Memento:
        return self._mementos[index]


class TextEditor:
    def __init__(self) -> None:
        self.content = ""

    def type(self, words: str) -> None:
        self.content += words

    def save(self) -> Memento:
        return Memento(self.content)

    def restore(self, memento: Memento) -> None:
        self.content = memento.state


class History:
    def __init__(self) -> None:
        self._stack: list[Memento] = []

    def push(self, memento: Memento) -> None:
        self._stack.append(memento)

    def pop(self) -> Memento:
        return self._stack.pop()


def run_memento() -> Result:
    out = Transcript()
    originator = Originator(out)
    caretaker = Caretaker()
    originator.set_state("State1")
    originator.set_state("State2")
    caretaker.add(originator.save())
    originator.set_state("State3")
    caretaker.add(originator.save())
    originator.set_state("State4")
    originator.restore(caretaker.get(0))
    originator.restore(caretaker.get(1))

    editor = TextEditor()
    history = History()
    for words in ("Hello, ", "world", "!"):
        history.push(editor.save())
        editor.type(words)
    out.say(f"Current content: {editor.content}")
    editor.restore(history.pop())
    out.say(f"Restored content: {editor.content}")
    editor.restore(history.pop())
    out.say(f"Restored content: {editor.content}")
    return out.result()


# --- Observer ----------------------------------------------------------------

class InvestorObserver(Protocol):
    def update(self, stock_name: str, price: float) -> None: ...


class Stock:
    def __init__(self, name: str, price: float) -> None:
        self.name = name
        self._price = price
        self._observers: list[InvestorObserver] = []

    def attach(self, observer: InvestorObserver) -> None:
        self._observers.append(observer)

    def detach(self, observer: InvestorObserver) -> None:
        self._observers.remove(observer)

    def set_price(self, price: float) -> None:
        # observers hear only about real changes
        if price != self._price:
            self._price = price
            self._notify()

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self.name, self._price)


class Investor:
    def __init__(self, name: str, out: Transcript) -> None:
        self.name = name
        self.out = out

    def update(self, stock_name: str, price: float) -> None:
        self.out.say(f"Notified {self.name} of {stock_name}'s price change to {price:.2f}")


def run_observer() -> Result:
    out = Transcript()
    apple = Stock("AAPL", 150.00)
    john, jane = Investor("John", out), Investor("Jane", out)
    apple.attach(john)
    apple.attach(jane)
    apple.set_price(155.00)
    apple.set_price(160.00)
    apple.set_price(160.00)
    apple.detach(john)
    apple.set_price(165.00)
    return out.result()


# --- State -------------------------------------------------------------------

class OrderState(ABC):
    name: str = ""

    @abstractmethod
    def handle(self, context: "OrderContext") -> None: ...


class PendingState(OrderState):
    name = "Pending"

    def handle(self, context: "OrderContext") -> None:
        context.out.say("Order is in Pending state. Moving to Processing state.")
        context.set_state(ProcessingState())


class ProcessingState(OrderState):
    name = "Processing"

    def handle(self, context: "OrderContext") -> None:
        context.out.say("Order is in Processing state. Moving to Shipped state.")
        context.set_state(ShippedState())


class ShippedState(OrderState):
    name = "Shipped"

    def handle(self, context: "OrderContext") -> None:
        context.out.say("Order is in Shipped state. Moving to Delivered state.")
        context.set_state(DeliveredState())


class DeliveredState(OrderState):
    name = "Delivered"

    def handle(self, context: "OrderContext") -> None:
        context.out.say("Order is in Delivered state. No further transitions.")


class OrderContext:
    def __init__(self, state: OrderState, out: Transcript) -> None:
        self.state = state
        self.out = out

    def set_state(self, state: OrderState) -> None:
        self.state = state

    def request(self) -> None:
        self.state.handle(self)


def run_state() -> Result:
    out = Transcript()
    order = OrderContext(PendingState(), out)
    for _ in range(4):
        order.request()
    if order.state.name != "Delivered":
        return out.failed("InvariantViolation", f"order stuck in {order.state.name}")
    return out.result()


# --- Strategy ----------------------------------------------------------------

class CompressionStrategy(Protocol):
    def compress(self, file_path: str) -> str: ...


class ZipCompression:
    def compress(self, file_path: str) -> str:
        return f"Compressing {file_path} using ZIP compression."


class RarCompression:
    def compress(self, file_path: str) -> str:
        return f"Compressing {file_path} using RAR compression."


class CompressionContext:
    def __init__(self, strategy: CompressionStrategy) -> None:
        self.strategy = strategy

    def create_archive(self, file_path: str) -> str:
        return self.strategy.compress(file_path)


class ShippingStrategy(Protocol):
    def ship(self, item: str) -> str: ...


class FedExShipping:
    def ship(self, item: str) -> str:
        return f"Shipping {item} via FedEx."


class UPSShipping:
    def ship(self, item: str) -> str:
        return f"Shipping {item} via UPS."


class MessagingStrategy(Protocol):
    def send(self, message: str) -> str: ...


class EmailMessaging:
    def send(self, message: str) -> str:
        return f"Sending Email: {message}"


class SMSMessaging:
    def send(self, message: str) -> str:
        return f"Sending SMS: {message}"


class PaymentStrategy(Protocol):
    def process(self, amount: Decimal) -> str: ...


class PayPalPayment:
    def process(self, amount: Decimal) -> str:
        return f"Processing payment of {amount} via PayPal."


class StripePayment:
    def process(self, amount: Decimal) -> str:
        return f"Processing payment of {amount} via Stripe."


def run_strategy() -> Result:
    out = Transcript()
    context = CompressionContext(ZipCompression())
    out.say(context.create_archive("file1.txt"))
    context.strategy = RarCompression()
    out.say(context.create_archive("file2.txt"))

    shipping: list[tuple[ShippingStrategy, str]] = [(FedExShipping(), "Laptop"), (UPSShipping(), "Phone")]
    for carrier, item in shipping:
        out.say(carrier.ship(item))

    messaging: list[tuple[MessagingStrategy, str]] = [
        (EmailMessaging(), "Hello via Email!"),
        (SMSMessaging(), "Hello via SMS!"),
    ]
    for channel, text in messaging:
        out.say(channel.send(text))

    payments: list[tuple[PaymentStrategy, Decimal]] = [
        (PayPalPayment(), Decimal("100.00")),
        (StripePayment(), Decimal("200.00")),
    ]
    for processor, amount in payments:
        out.say(processor.process(amount))
    return out.result()


def examples() -> list[Example]:
    return [
        Example("Memento", Category.BEHAVIORAL, run_memento,
                "Save and restore state without exposing internals."),
        Example("Observer", Category.BEHAVIORAL, run_observer,
                "Investors are notified when a stock price changes."),
        Example("State", Category.BEHAVIORAL, run_state,
                "An order changes behavior as it moves through its lifecycle."),
        Example("Strategy", Category.BEHAVIORAL, run_strategy,
                "Swap compression, shipping, messaging and payment algorithms."),
    ]
