"""Shared row fixtures shaped like a Thundertix export."""

from __future__ import annotations

import pytest


def sale(category="Music", date="2024-01-01", amount="25", **extra):
    row = {
        "Sum of Total Paid/Refunded": category,
        "Date": date,
        "Payment Type": amount,
        "Classes": extra.pop("id", "T-1"),
        "Payment Details": extra.pop("details", "Box office"),
        "Card Type": extra.pop("card_type", "Visa"),
    }
    row.update(extra)
    return row


@pytest.fixture
def example_rows():
    return [
        sale("Music", "2024-01-01", "25", id="A1"),
        sale("Music", "2024-01-02", "-5", id="A2"),
        sale("", "2024-01-01", "10", id="A3"),
    ]
