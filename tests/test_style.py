from sales_core.models import Highlight
from sales_core.style import classify, classify_amount


def test_classify_display_strings():
    assert classify("-$5.00") is Highlight.REFUND
    assert classify("$0.00") is Highlight.ZERO
    assert classify("$25.00") is Highlight.NORMAL


def test_refund_checked_before_zero():
    assert classify("-$0.00", zero_form="-$0.00") is Highlight.REFUND


def test_classify_amount_uses_the_number():
    assert classify_amount(-5) is Highlight.REFUND
    assert classify_amount(0) is Highlight.ZERO
    assert classify_amount(-0.0) is Highlight.ZERO
    assert classify_amount(0.004) is Highlight.ZERO
    assert classify_amount(25) is Highlight.NORMAL
