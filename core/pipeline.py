from typing import List

from config.logger import logger
from core.filters import MIN_DISCOUNT_RATE, MIN_TITLE_LENGTH, filter_deals
from core.normalizer import normalize_items
from core.reconciliation import ReconciliationStore
from models.deal import RawItem, RunSummary


class DealPipeline:
    """Normalize -> filter -> reconcile, for the raw items of one platform run."""

    def __init__(self, store: ReconciliationStore,
                 min_discount_rate: int = MIN_DISCOUNT_RATE,
                 min_title_length: int = MIN_TITLE_LENGTH,
                 sample_size: int = 50):
        self.store = store
        self.min_discount_rate = min_discount_rate
        self.min_title_length = min_title_length
        self.sample_size = sample_size

    def run(self, raw_items: List[RawItem], platform_key: str) -> RunSummary:
        candidates = normalize_items(raw_items, platform_key)
        valid_deals = filter_deals(candidates, self.min_discount_rate, self.min_title_length)

        logger.info(f"Found {len(raw_items)} items, {len(valid_deals)} matched >={self.min_discount_rate}% discount.")

        result = self.store.upsert_batch(valid_deals)
        if result.failed:
            logger.warning(f"⚠️ {len(result.failed)} deals could not be stored ({platform_key})")
        logger.info(f"💾 Saved {len(result.saved)} new deals ({platform_key})")

        return RunSummary(
            status="success",
            total_found=len(raw_items),
            filtered_count=len(valid_deals),
            saved_count=len(result.saved),
            data=valid_deals[:self.sample_size]
        )
