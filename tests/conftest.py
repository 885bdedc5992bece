"""Shared pytest fixtures.

Provides a small order entity, used as the object choice generators receive,
and a freshly declared dependent choice field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pytest

from dependent_fields import DependentChoiceField

STATUS_CHOICES: dict[str, str] = {"Pending": "pending", "Paid": "paid", "Cancelled": "cancelled"}


class OrderStatus(Enum):
    """Status values stored on an order."""

    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


@dataclass
class Order:
    """Entity edited by the admin form."""

    category: str
    status: str | None = None

    def status_choices(self) -> dict[str, str]:
        """Statuses allowed for the order's category."""
        if self.category == "digital":
            return {"Pending": "pending", "Paid": "paid"}
        return dict(STATUS_CHOICES)


@pytest.fixture
def status_field() -> DependentChoiceField:
    """Provide a dependent choice field declared for ``status``."""
    return DependentChoiceField.new("status")


@pytest.fixture
def order() -> Order:
    """Provide an order in the ``digital`` category."""
    return Order(category="digital", status="paid")
