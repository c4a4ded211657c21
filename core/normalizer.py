from typing import List, Tuple

from core.pricing import parse_price, calculate_discount_rate
from models.deal import RawItem, ProductDeal


def extract_external_id(link: str) -> str:
    """Product URL without the query string. Best effort: it only looks at the URL."""
    if not link:
        return ""
    return link.split("?", 1)[0]


def deal_key(deal: ProductDeal) -> Tuple[str, str]:
    return (deal.platform, deal.external_id)


def normalize_item(raw: RawItem, platform_key: str) -> ProductDeal:
    price = parse_price(raw.price_text)
    original_price = parse_price(raw.reference_price_text)
    # No reference price shown means "not discounted", not a zero price
    if original_price == 0:
        original_price = price

    return ProductDeal(
        title=raw.title.strip(),
        price=price,
        original_price=original_price,
        discount_rate=calculate_discount_rate(price, original_price),
        image_url=raw.image_url,
        product_url=raw.link,
        platform=platform_key,
        external_id=extract_external_id(raw.link)
    )


def normalize_items(raw_items: List[RawItem], platform_key: str) -> List[ProductDeal]:
    return [normalize_item(raw, platform_key) for raw in raw_items]
