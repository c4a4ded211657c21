import math
import re

_NON_NUMERIC = re.compile(r'[^0-9,.]')
# Leading decimal number, the rest of the string is ignored (e.g. "1.200.50" -> 1.2)
_LEADING_NUMBER = re.compile(r'\d+(?:\.\d*)?|\.\d+')


def parse_price(text) -> float:
    """
    Converts Turkish formatted price text into a number.

    "129,99 TL" -> 129.99. The comma is read as the decimal separator.
    Dots used as thousands separators are NOT handled: "1.200 TL" -> 1.2.
    Empty or unparseable text returns 0.
    """
    if not text:
        return 0.0

    cleaned = _NON_NUMERIC.sub('', text).replace(',', '.', 1)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


def calculate_discount_rate(price: float, original_price: float) -> int:
    """Discount percentage, rounded half-up. 0 when there is no real discount."""
    if original_price <= 0 or original_price <= price:
        return 0

    discount = ((original_price - price) / original_price) * 100
    return int(math.floor(discount + 0.5))
