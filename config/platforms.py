from dataclasses import dataclass
from typing import Dict, Tuple

@dataclass(frozen=True)
class PlatformConfig:
    key: str
    url: str
    card_selector: str
    # Joined with a space (brand + product name)
    title_selectors: Tuple[str, ...] = (".prdct-desc-cntnr-ttl", ".prdct-desc-cntnr-name")
    price_selector: str = ".prc-box-dscntd"
    reference_price_selector: str = ".prc-box-orgnl"
    link_selector: str = "a"
    image_selector: str = "img"


PLATFORMS: Dict[str, PlatformConfig] = {
    "trendyol": PlatformConfig(
        key="trendyol",
        # Women's clothing -> bestsellers
        url="https://www.trendyol.com/sr?wc=103328&fl=en-cok-one-cikanlar",
        card_selector=".p-card-wrppr",
    ),
    "temu": PlatformConfig(
        key="temu",
        url="https://www.temu.com/az/channel/lightning-deals.html",
        # Card selector needs verification, field selectors fall back to the Trendyol ones
        card_selector=".goods-item",
    ),
}
