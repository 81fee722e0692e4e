"""
Factory Method: let subclasses decide which product class to instantiate.

``Logistics.plan_delivery`` holds the shared business logic and calls the
``create_transport`` factory method, which each concrete logistics type
overrides.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Transport(ABC):
    @abstractmethod
    def deliver(self) -> str:
        ...


class Truck(Transport):
    def deliver(self) -> str:
        return "{Delivery by truck}"


class Ship(Transport):
    def deliver(self) -> str:
        return "{Delivery by ship}"


class Logistics(ABC):
    """Creator. Subclasses pick the ``Transport``; the planning stays here."""

    @abstractmethod
    def create_transport(self) -> Transport:
        ...

    def plan_delivery(self) -> str:
        transport = self.create_transport()
        logger.debug("%s created %s", type(self).__name__, type(transport).__name__)
        return f"Creator: the same creator code just worked with {transport.deliver()}"


class RoadLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Truck()


class SeaLogistics(Logistics):
    def create_transport(self) -> Transport:
        return Ship()


def client_code(logistics: Logistics) -> str:
    return (
        "Client: I'm not aware of the creator's class, but it still works.\n"
        + logistics.plan_delivery()
    )


def run_demo() -> list[str]:
    return [
        "App: launched with RoadLogistics.",
        client_code(RoadLogistics()),
        "",
        "App: launched with SeaLogistics.",
        client_code(SeaLogistics()),
    ]
