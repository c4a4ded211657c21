"""Shared fixtures. Environment is set before the project modules are imported."""
import os
import tempfile

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="scraper-logs-"))
os.environ.setdefault("STORAGE_BACKEND", "sqlite")

import pytest

from core.database import Database
from models.deal import ProductDeal, RawItem


@pytest.fixture
def database(tmp_path):
    return Database(str(tmp_path / "deals.db"))


@pytest.fixture
def make_deal():
    def _make(external_id="https://x/p/1", platform="trendyol", **overrides):
        fields = dict(
            title="Brand ShirtX",
            price=59.99,
            original_price=129.99,
            discount_rate=54,
            image_url="https://cdn.x/1.jpg",
            product_url=external_id + "?a=1",
            platform=platform,
            external_id=external_id,
        )
        fields.update(overrides)
        return ProductDeal(**fields)
    return _make


@pytest.fixture
def scenario_items():
    return [
        RawItem(
            title="Brand ShirtX",
            price_text="59,99 TL",
            reference_price_text="129,99 TL",
            link="https://x/p/1?a=1",
            image_url="https://cdn.x/1.jpg",
        ),
        RawItem(
            title="Hi",
            price_text="10,00 TL",
            reference_price_text="10,00 TL",
            link="https://x/p/2",
            image_url=None,
        ),
    ]
