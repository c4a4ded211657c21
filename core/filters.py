"""
Business rules deciding which normalized products are reportable deals.
"""

from typing import List
from models.deal import ProductDeal

MIN_DISCOUNT_RATE = 40  # percent, inclusive
MIN_TITLE_LENGTH = 5    # title must be strictly longer


def is_valid_deal(deal: ProductDeal,
                  min_discount_rate: int = MIN_DISCOUNT_RATE,
                  min_title_length: int = MIN_TITLE_LENGTH) -> bool:
    """
    A deal qualifies when the discount reaches the threshold, the price
    parsed to something positive and the title is long enough to be a
    real product name.
    """
    return (
        deal.discount_rate >= min_discount_rate
        and deal.price > 0
        and len(deal.title) > min_title_length
    )


def filter_deals(deals: List[ProductDeal],
                 min_discount_rate: int = MIN_DISCOUNT_RATE,
                 min_title_length: int = MIN_TITLE_LENGTH) -> List[ProductDeal]:
    return [d for d in deals if is_valid_deal(d, min_discount_rate, min_title_length)]
