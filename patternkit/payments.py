"""Interchangeable payment methods used through one strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class PaymentError(Exception):
    """A payment could not be made or its result could not be read."""


class PaymentMethod(ABC):
    """A way of paying an amount."""

    @abstractmethod
    def pay(self, amount: float) -> None:
        """Pay the amount, raising PaymentError on failure."""


@dataclass
class Card:
    card_number: str
    name: str
    cvv: str


@dataclass
class CreditCard(Card, PaymentMethod):
    limit: float = 0.0

    def pay(self, amount: float) -> None:
        print(f"Spent Rs. {amount:.2f} on credit card {self.card_number}")
        self.limit -= amount


@dataclass
class DebitCard(Card, PaymentMethod):
    balance: float = 0.0

    def pay(self, amount: float) -> None:
        print(f"Spent Rs. {amount:.2f} on debit card {self.card_number}")
        self.balance -= amount


@dataclass
class UPI(PaymentMethod):
    upi_id: str
    balance: float = 0.0

    def pay(self, amount: float) -> None:
        print(f"Spent Rs. {amount:.2f} by UPI {self.upi_id}", end="")
        self.balance -= amount


def make_payment(method: PaymentMethod, amount: float) -> float:
    """Pay with the method and return its remaining limit or balance."""
    try:
        method.pay(amount)
    except PaymentError as error:
        print("Payment failed:", error)
    if isinstance(method, CreditCard):
        return method.limit
    if isinstance(method, (DebitCard, UPI)):
        return method.balance
    raise PaymentError("unknown payment error")


def main(argv: list[str] | None = None) -> int:
    """Pay with a credit card and a debit card and report what remains."""
    credit = CreditCard(card_number="1234", name="Akshat", cvv="909", limit=1000)
    debit = DebitCard(card_number="9080", name="AkshatDC", cvv="323", balance=2000)
    try:
        limit = make_payment(credit, 200)
    except PaymentError:
        pass
    else:
        print(f"Remaining limit in credit card {credit.card_number}: {limit:.2f}")
    try:
        balance = make_payment(debit, 1000)
    except PaymentError:
        pass
    else:
        print(f"Remaining balance in debit card {credit.card_number}: {balance:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())