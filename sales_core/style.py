"""
sales_core.style
Amount-cell highlighting: normal / refund / zero.
"""
from __future__ import annotations
from .models import Highlight
from .utils import ZERO_MONEY

def classify(formatted_amount: str, zero_form: str = ZERO_MONEY) -> Highlight:
    """Classify from the display string. Refund is checked before zero."""
    if "-" in formatted_amount:
        return Highlight.REFUND
    if formatted_amount == zero_form:
        return Highlight.ZERO
    return Highlight.NORMAL

def classify_amount(amount: float) -> Highlight:
    """Classify from the number itself (cent precision, like the display)."""
    cents = round(float(amount), 2)
    if cents < 0:
        return Highlight.REFUND
    if cents == 0:
        return Highlight.ZERO
    return Highlight.NORMAL
