"""SOLID principle demonstrations: SRP, OCP, LSP, ISP, DIP."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Protocol

from pattern_catalog.domain.entities import Category, Example, Result, Transcript


# --- Single Responsibility -----------------------------------------------------
# Storage, formatting and notification each live in their own class.

@dataclass(frozen=True)
class Invoice:
    id: int
    amount: Decimal
    issued_on: date

    def __str__(self) -> str:
        return f"Invoice #{self.id}: ${self.amount:.2f} on {self.issued_on.isoformat()}"


class InvoiceRepository:
    def __init__(self, out: Transcript) -> None:
        self.out = out
        self._rows: dict[int, Invoice] = {}

    def save(self, invoice: Invoice) -> None:
        self.out.say(f"Saving invoice {invoice.id} to database...")
        self._rows[invoice.id] = invoice
        self.out.say(f"Invoice {invoice.id} saved successfully")

    def get_by_id(self, invoice_id: int) -> Invoice | None:
        self.out.say(f"Retrieving invoice {invoice_id} from database...")
        return self._rows.get(invoice_id)


class InvoicePrinter:
    def format_invoice(self, invoice: Invoice) -> list[str]:
        rule = "=" * 32
        return [
            rule,
            "INVOICE DETAILS",
            rule,
            f"Invoice ID:     {invoice.id}",
            f"Amount:         ${invoice.amount:.2f}",
            f"Date:           {invoice.issued_on.isoformat()}",
            rule,
        ]


class InvoiceNotifier:
    def __init__(self, out: Transcript) -> None:
        self.out = out

    def invoice_processed(self, invoice: Invoice) -> None:
        self.out.say(f"Invoice #{invoice.id} for ${invoice.amount:.2f} has been processed successfully")


class InvoiceProcessor:
    def __init__(self, repository: InvoiceRepository, notifier: InvoiceNotifier) -> None:
        self.repository = repository
        self.notifier = notifier

    def process(self, invoice: Invoice) -> bool:
        self.repository.save(invoice)
        self.notifier.invoice_processed(invoice)
        return self.repository.get_by_id(invoice.id) is not None


def run_srp() -> Result:
    out = Transcript()
    invoice = Invoice(1, Decimal("150.75"), date(2024, 1, 15))
    out.extend(InvoicePrinter().format_invoice(invoice))
    processor = InvoiceProcessor(InvoiceRepository(out), InvoiceNotifier(out))
    stored = processor.process(invoice)
    out.say(f"Processed: {stored}")
    return out.result()


# --- Open/Closed ---------------------------------------------------------------
# New payment or image types are added as new classes; the callers never change.

class PaymentMethod(Protocol):
    def process_payment(self, amount: Decimal) -> str: ...


class CreditCardPayment:
    def process_payment(self, amount: Decimal) -> str:
        return f"Processing credit card payment of ${amount:.2f}"


class PayPalPayment:
    def process_payment(self, amount: Decimal) -> str:
        return f"Processing PayPal payment of ${amount:.2f}"


class PaymentProcessor:
    def __init__(self, method: PaymentMethod) -> None:
        if method is None:
            raise ValueError("method is required")
        self.method = method

    def process(self, amount: Decimal) -> str:
        return self.method.process_payment(amount)


class ImageService(ABC):
    @abstractmethod
    def display_image(self, image_path: str) -> str: ...


class JpegImageService(ImageService):
    def display_image(self, image_path: str) -> str:
        return f"Displaying JPEG image from {image_path}"


class PngImageService(ImageService):
    def display_image(self, image_path: str) -> str:
        return f"Displaying PNG image from {image_path}"


class ImageViewer:
    def __init__(self, service: ImageService) -> None:
        self.service = service

    def show(self, image_path: str) -> str:
        return self.service.display_image(image_path)


def run_ocp() -> Result:
    out = Transcript()
    out.say(PaymentProcessor(CreditCardPayment()).process(Decimal("100.00")))
    out.say(PaymentProcessor(PayPalPayment()).process(Decimal("200.00")))
    out.say(ImageViewer(JpegImageService()).show("photo.jpeg"))
    out.say(ImageViewer(PngImageService()).show("graphic.png"))
    return out.result()


# --- Liskov Substitution ---------------------------------------------------------
# Only accounts that can honor withdraw() expose it; insufficient balance is a
# returned outcome, not an exception.

@dataclass(frozen=True)
class WithdrawalOutcome:
    ok: bool
    reason: str = ""


class Account(ABC):
    def __init__(self, account_number: str) -> None:
        self.account_number = account_number
        self._balance = Decimal("0")

    def deposit(self, amount: Decimal) -> None:
        self._balance += amount

    @property
    def balance(self) -> Decimal:
        return self._balance


class WithdrawableAccount(Account):
    def withdraw(self, amount: Decimal) -> WithdrawalOutcome:
        if amount > self._balance:
            return WithdrawalOutcome(False, "Insufficient balance.")
        self._balance -= amount
        return WithdrawalOutcome(True)


class SavingsAccount(WithdrawableAccount):
    pass


class FixedDepositAccount(Account):
    pass


class Mover(Protocol):
    def move(self) -> str: ...


class Sparrow:
    def move(self) -> str:
        return "Sparrow is flying."


class Ostrich:
    def move(self) -> str:
        return "Ostrich is running."


class BirdWatcher:
    def observe(self, bird: Mover) -> str:
        return bird.move()


def run_lsp() -> Result:
    out = Transcript()
    savings = SavingsAccount("S123")
    savings.deposit(Decimal("1000"))
    savings.withdraw(Decimal("200"))
    fixed = FixedDepositAccount("FD456")
    fixed.deposit(Decimal("5000"))
    for account in (savings, fixed):
        out.say(f"{account.account_number} Balance: {account.balance}")

    overdraft = savings.withdraw(Decimal("5000"))
    out.say(f"Withdraw 5000 from {savings.account_number}: {overdraft.reason or 'ok'}")

    watcher = BirdWatcher()
    for bird in (Sparrow(), Ostrich()):
        out.say(watcher.observe(bird))
    return out.result()


# --- Interface Segregation ---------------------------------------------------------

class Printer(Protocol):
    def print(self, content: str) -> str: ...


class Scanner(Protocol):
    def scan(self, content: str) -> str: ...


class Fax(Protocol):
    def fax(self, content: str) -> str: ...


class SimplePrinter:
    def print(self, content: str) -> str:
        return f"Printing: {content}"


class MultiFunctionPrinter:
    def print(self, content: str) -> str:
        return f"Printing: {content}"

    def scan(self, content: str) -> str:
        return f"Scanning: {content}"

    def fax(self, content: str) -> str:
        return f"Faxing: {content}"


def run_isp() -> Result:
    out = Transcript()
    printer: Printer = SimplePrinter()
    out.say(printer.print("Hello, World!"))
    device = MultiFunctionPrinter()
    # each client sees only the capability it uses
    office_printer: Printer = device
    scanner: Scanner = device
    fax: Fax = device
    out.say(office_printer.print("Document"))
    out.say(scanner.scan("Photo"))
    out.say(fax.fax("Contract"))
    return out.result()


# --- Dependency Inversion ------------------------------------------------------------

class MessageService(Protocol):
    def send_message(self, message: str, recipient: str) -> str: ...


class EmailService:
    def send_message(self, message: str, recipient: str) -> str:
        return f"Email sent to {recipient} with message: {message}"


class SMSService:
    def send_message(self, message: str, recipient: str) -> str:
        return f"SMS sent to {recipient} with message: {message}"


class Notification:
    """High-level policy; depends only on the MessageService abstraction."""

    def __init__(self, service: MessageService) -> None:
        if service is None:
            raise ValueError("service is required")
        self.service = service

    def notify(self, message: str, recipient: str) -> str:
        return self.service.send_message(message, recipient)


def run_dip() -> Result:
    out = Transcript()
    out.say(Notification(EmailService()).notify("Hello via Email!", "user@example.com"))
    out.say(Notification(SMSService()).notify("Hello via SMS!", "123-456-7890"))
    return out.result()


def examples() -> list[Example]:
    return [
        Example("Single Responsibility", Category.SOLID, run_srp,
                "Split storage, printing and notification of invoices."),
        Example("Open/Closed", Category.SOLID, run_ocp,
                "Add payment and image types without editing their callers."),
        Example("Liskov Substitution", Category.SOLID, run_lsp,
                "Subtypes honor the contracts of the types they replace."),
        Example("Interface Segregation", Category.SOLID, run_isp,
                "Small interfaces so a simple printer need not fake a fax."),
        Example("Dependency Inversion", Category.SOLID, run_dip,
                "Notifications depend on a message-service abstraction."),
    ]
