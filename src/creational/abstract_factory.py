"""
Abstract Factory: produce families of related objects without naming their
concrete classes.

A ``GUIFactory`` builds one button and one checkbox. Products from the same
factory belong to one platform family and are meant to be used together;
``Checkbox.paint_with`` shows that collaboration.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Button(ABC):
    @abstractmethod
    def paint(self) -> str:
        ...


class Checkbox(ABC):
    label: str = "A checkbox"

    @abstractmethod
    def paint(self) -> str:
        ...

    def paint_with(self, collaborator: Button) -> str:
        """
        Render this checkbox together with ``collaborator``.

        Any ``Button`` is accepted, but only one from the same factory is
        guaranteed to match.
        """
        return f"{self.label} collaborating with ({collaborator.paint()})"


class WindowsButton(Button):
    def paint(self) -> str:
        return "The result of product A1: a Windows button."


class MacButton(Button):
    def paint(self) -> str:
        return "The result of product A2: a Mac button."


class WindowsCheckbox(Checkbox):
    label = "The result of B1 (a Windows checkbox)"

    def paint(self) -> str:
        return "The result of product B1: a Windows checkbox."


class MacCheckbox(Checkbox):
    label = "The result of B2 (a Mac checkbox)"

    def paint(self) -> str:
        return "The result of product B2: a Mac checkbox."


class GUIFactory(ABC):
    """Creates one product of each kind, all from the same family."""

    @abstractmethod
    def create_button(self) -> Button:
        ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        ...


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


def client_code(factory: GUIFactory) -> list[str]:
    """Use ``factory`` only through the abstract interfaces."""
    button = factory.create_button()
    checkbox = factory.create_checkbox()
    logger.debug("%s built %s and %s", type(factory).__name__,
                 type(button).__name__, type(checkbox).__name__)
    return [checkbox.paint(), checkbox.paint_with(button)]


def run_demo() -> list[str]:
    lines = ["Client: testing client code with the first factory type: Windows"]
    lines += client_code(WindowsFactory())
    lines.append("")
    lines.append("Client: testing the same client code with the second factory type: Mac")
    lines += client_code(MacFactory())
    return lines
