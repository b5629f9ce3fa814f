"""Customers who subscribe to be told when an item comes back in stock."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Customer:
    """A customer identified by an id."""

    name: str
    id: str

    def update(self, info: str) -> None:
        """Receive a notification."""
        print(info)


def _remove_first(items: list[Any], target: Any) -> bool:
    position = next((pos for pos, item in enumerate(items) if item is target), None)
    if position is None:
        return False
    del items[position]
    return True


@dataclass
class Item:
    """An item whose subscribers hear when it is in stock."""

    name: str
    in_stock: bool = False
    observers: list[Any] = field(default_factory=list)

    def register(self, *observers: Any) -> None:
        """Subscribe observers to this item."""
        for observer in observers:
            print(f"{self.name} subscribed by {observer.id}")
            self.observers.append(observer)

    def deregister(self, *observers: Any) -> None:
        """Unsubscribe observers; one entry is removed per argument."""
        for observer in observers:
            if _remove_first(self.observers, observer):
                print(f"{observer.id} unsubscribed from {self.name}")

    def notify_all(self) -> None:
        """Tell every subscriber that the item is in stock."""
        print("Notifying all users")
        for observer in self.observers:
            observer.update(f"Hey {observer.id}! {self.name} is in stock")

    def update_availability(self) -> None:
        """Mark the item in stock and notify subscribers."""
        self.in_stock = True
        self.notify_all()


def main(argv: list[str] | None = None) -> int:
    """Subscribe two customers to a shirt and restock it."""
    first = Customer("Shayan", "1233")
    second = Customer("Sharan", "98932")
    item = Item("Shirt", False)
    item.register(first, second)
    item.update_availability()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())