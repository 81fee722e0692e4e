"""
Builder: assemble a complex object step by step.

``CustomPizzaBuilder`` collects the parts of a ``Pizza``; ``Chef`` is the
director that knows the house recipes. Clients may also drive the builder
directly for a custom order.

Usage::

    builder = CustomPizzaBuilder()
    chef = Chef(builder)
    chef.make_margherita()
    pizza = builder.build()      # builder is reset and ready for the next one
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Pizza:
    """
    The product.

    Attributes:
        size:     e.g. ``"Medium"``.
        dough:    Crust type.
        sauce:    Base sauce.
        cheese:   Cheese blend.
        toppings: Extra ingredients, in the order they were added.
        baking:   Oven and temperature.
    """
    size: str = ""
    dough: str = ""
    sauce: str = ""
    cheese: str = ""
    toppings: list[str] = field(default_factory=list)
    baking: str = ""

    def describe(self) -> str:
        toppings = ", ".join(self.toppings) if self.toppings else "None"
        return "\n".join([
            "=== PIZZA READY ===",
            f"Size: {self.size}",
            f"Dough: {self.dough}",
            f"Sauce: {self.sauce}",
            f"Cheese: {self.cheese}",
            f"Toppings: {toppings}",
            f"Baking: {self.baking}",
            "===================",
        ])


class PizzaBuilder(ABC):
    """Steps every pizza builder must offer."""

    @abstractmethod
    def set_size(self, size: str) -> None: ...

    @abstractmethod
    def add_dough(self, dough: str) -> None: ...

    @abstractmethod
    def add_sauce(self, sauce: str) -> None: ...

    @abstractmethod
    def add_cheese(self, cheese: str) -> None: ...

    @abstractmethod
    def add_toppings(self, toppings: list[str]) -> None: ...

    @abstractmethod
    def set_baking(self, baking: str) -> None: ...


class CustomPizzaBuilder(PizzaBuilder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._pizza = Pizza()

    def set_size(self, size: str) -> None:
        self._pizza.size = size

    def add_dough(self, dough: str) -> None:
        self._pizza.dough = dough

    def add_sauce(self, sauce: str) -> None:
        self._pizza.sauce = sauce

    def add_cheese(self, cheese: str) -> None:
        self._pizza.cheese = cheese

    def add_toppings(self, toppings: list[str]) -> None:
        self._pizza.toppings.extend(toppings)

    def set_baking(self, baking: str) -> None:
        self._pizza.baking = baking

    def build(self) -> Pizza:
        """Return the finished pizza and start a fresh one."""
        pizza = self._pizza
        self.reset()
        logger.debug("Built %s pizza with %d topping(s)", pizza.size, len(pizza.toppings))
        return pizza


class Chef:
    """
    Director: runs the builder steps for each house recipe.

    Args:
        builder: Any ``PizzaBuilder``. Can be swapped later via ``builder``.
    """

    def __init__(self, builder: PizzaBuilder) -> None:
        self.builder = builder

    def make_margherita(self) -> None:
        self._make("Medium", "Thin", "Italian tomato sauce", "Fresh mozzarella",
                   ["Fresh basil", "Olive oil"], "Wood-fired oven at 450°C")

    def make_pepperoni(self) -> None:
        self._make("Large", "Traditional", "Tomato sauce", "Mozzarella",
                   ["Pepperoni", "Oregano"], "Conventional oven at 220°C")

    def make_vegetarian(self) -> None:
        self._make("Large", "Whole wheat", "Herbed tomato sauce", "Light mozzarella",
                   ["Peppers", "Mushrooms", "Onion", "Olives", "Cherry tomatoes"],
                   "Electric oven at 200°C")

    def make_hawaiian(self) -> None:
        self._make("Medium", "Traditional", "Tomato sauce", "Mozzarella",
                   ["Ham", "Pineapple"], "Conventional oven at 220°C")

    def _make(
        self,
        size: str,
        dough: str,
        sauce: str,
        cheese: str,
        toppings: list[str],
        baking: str,
    ) -> None:
        self.builder.set_size(size)
        self.builder.add_dough(dough)
        self.builder.add_sauce(sauce)
        self.builder.add_cheese(cheese)
        self.builder.add_toppings(toppings)
        self.builder.set_baking(baking)


def run_demo() -> list[str]:
    builder = CustomPizzaBuilder()
    chef = Chef(builder)
    lines = ["*** DON BUILDER PIZZERIA ***", ""]

    recipes = [
        ("1. Margherita pizza:", chef.make_margherita),
        ("2. Pepperoni pizza:", chef.make_pepperoni),
        ("3. Vegetarian pizza:", chef.make_vegetarian),
        ("4. Hawaiian pizza:", chef.make_hawaiian),
    ]
    for title, recipe in recipes:
        recipe()
        lines += [title, builder.build().describe(), ""]

    # Custom order, no director.
    builder.set_size("Family")
    builder.add_dough("Beer dough")
    builder.add_sauce("BBQ sauce")
    builder.add_cheese("Cheese blend")
    builder.add_toppings(["Chicken", "Bacon", "Red onion", "Jalapeños"])
    builder.set_baking("Stone oven at 300°C")
    lines += ["5. Customer's custom pizza:", builder.build().describe(), ""]

    lines.append("Thanks for your visit!")
    return lines
