"""Pizza pricing with toppings added as decorators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Pizza(ABC):
    """Anything with a price."""

    @property
    @abstractmethod
    def price(self) -> float:
        """The price of the pizza."""


@dataclass
class BasicPizza(Pizza):
    """A plain pizza with a fixed price."""

    base_price: float

    @property
    def price(self) -> float:
        return self.base_price


@dataclass
class _Topping(Pizza):
    pizza: Pizza
    extra = 0.0

    @property
    def price(self) -> float:
        return self.pizza.price + self.extra


@dataclass
class TomatoTopping(_Topping):
    """Adds tomato to a pizza."""

    extra = 5.0


@dataclass
class ExtraCheese(_Topping):
    """Adds extra cheese to a pizza."""

    extra = 10.0


@dataclass
class JalapenoTopping(_Topping):
    """Adds jalapeños to a pizza."""

    extra = 8.0


def main(argv: list[str] | None = None) -> int:
    """Price a jalapeño and cheese pizza."""
    pizza = BasicPizza(10)
    cheese = ExtraCheese(pizza)
    jalapeno_cheese = JalapenoTopping(cheese)
    print("Price of Jalapeno Cheese Pizza: ", f"{jalapeno_cheese.price:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())