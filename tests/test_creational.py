"""
Creational demos: test_creational.py

Covers:
  - Abstract Factory: each factory builds one matching family
  - Builder: director recipes, build() resets, custom orders
  - Factory Method: subclasses choose the transport, planning is shared
  - run_demo() output of each module
"""

from __future__ import annotations

import pytest

from src.creational.abstract_factory import (
    Button,
    Checkbox,
    GUIFactory,
    MacButton,
    MacCheckbox,
    MacFactory,
    WindowsButton,
    WindowsCheckbox,
    WindowsFactory,
    client_code as gui_client_code,
    run_demo as gui_run_demo,
)
from src.creational.builder import Chef, CustomPizzaBuilder, Pizza, run_demo as pizza_run_demo
from src.creational.factory_method import (
    Logistics,
    RoadLogistics,
    SeaLogistics,
    Ship,
    Truck,
    client_code as logistics_client_code,
    run_demo as logistics_run_demo,
)


# ============================================================================
# Abstract Factory
# ============================================================================

class TestAbstractFactory:
    @pytest.mark.parametrize("factory, button_cls, checkbox_cls", [
        (WindowsFactory(), WindowsButton, WindowsCheckbox),
        (MacFactory(), MacButton, MacCheckbox),
    ])
    def test_family_is_consistent(self, factory, button_cls, checkbox_cls):
        assert isinstance(factory.create_button(), button_cls)
        assert isinstance(factory.create_checkbox(), checkbox_cls)

    def test_products_use_abstract_types(self):
        factory = MacFactory()
        assert isinstance(factory.create_button(), Button)
        assert isinstance(factory.create_checkbox(), Checkbox)

    def test_collaboration(self):
        line = WindowsCheckbox().paint_with(WindowsButton())
        assert "Windows checkbox" in line
        assert "Windows button" in line

    def test_client_code_lines(self):
        lines = gui_client_code(MacFactory())
        assert lines == [
            "The result of product B2: a Mac checkbox.",
            "The result of B2 (a Mac checkbox) collaborating with "
            "(The result of product A2: a Mac button.)",
        ]

    def test_factory_is_abstract(self):
        with pytest.raises(TypeError):
            GUIFactory()

    def test_run_demo_covers_both_families(self):
        text = "\n".join(gui_run_demo())
        assert "Windows" in text
        assert "Mac" in text


# ============================================================================
# Builder
# ============================================================================

class TestBuilder:
    def test_build_resets(self):
        builder = CustomPizzaBuilder()
        builder.set_size("Small")
        first = builder.build()
        second = builder.build()
        assert first.size == "Small"
        assert second == Pizza()

    def test_toppings_accumulate(self):
        builder = CustomPizzaBuilder()
        builder.add_toppings(["Ham"])
        builder.add_toppings(["Pineapple"])
        assert builder.build().toppings == ["Ham", "Pineapple"]

    def test_chef_margherita(self):
        builder = CustomPizzaBuilder()
        Chef(builder).make_margherita()
        pizza = builder.build()
        assert pizza.size == "Medium"
        assert pizza.dough == "Thin"
        assert pizza.toppings == ["Fresh basil", "Olive oil"]

    def test_chef_builds_every_recipe(self):
        builder = CustomPizzaBuilder()
        chef = Chef(builder)
        for recipe in (chef.make_margherita, chef.make_pepperoni,
                       chef.make_vegetarian, chef.make_hawaiian):
            recipe()
            pizza = builder.build()
            assert pizza.size and pizza.dough and pizza.baking
            assert pizza.toppings

    def test_describe_without_toppings(self):
        assert "Toppings: None" in Pizza(size="Small").describe()

    def test_describe_lists_toppings(self):
        text = Pizza(toppings=["Ham", "Pineapple"]).describe()
        assert "Toppings: Ham, Pineapple" in text

    def test_run_demo(self):
        lines = pizza_run_demo()
        assert lines[0] == "*** DON BUILDER PIZZERIA ***"
        assert lines[-1] == "Thanks for your visit!"
        assert sum(1 for line in lines if line.startswith("=== PIZZA READY")) == 5


# ============================================================================
# Factory Method
# ============================================================================

class TestFactoryMethod:
    def test_road_creates_truck(self):
        assert isinstance(RoadLogistics().create_transport(), Truck)

    def test_sea_creates_ship(self):
        assert isinstance(SeaLogistics().create_transport(), Ship)

    def test_plan_delivery_uses_factory_method(self):
        assert RoadLogistics().plan_delivery().endswith("{Delivery by truck}")
        assert SeaLogistics().plan_delivery().endswith("{Delivery by ship}")

    def test_creator_is_abstract(self):
        with pytest.raises(TypeError):
            Logistics()

    def test_client_code(self):
        text = logistics_client_code(SeaLogistics())
        assert text.startswith("Client:")
        assert "{Delivery by ship}" in text

    def test_run_demo(self):
        lines = logistics_run_demo()
        assert lines[0] == "App: launched with RoadLogistics."
        assert "{Delivery by ship}" in lines[-1]
