from typing import List

from config.logger import logger
from core.normalizer import deal_key
from models.deal import ProductDeal, ReconciliationResult


class ReconciliationStore:
    """
    Insert-if-absent persistence of deals.

    `database` is any backend exposing `insert_if_absent(deal) -> bool`
    (see core.database.Database and core.supabase_store.SupabaseDatabase).
    """

    def __init__(self, database):
        self.database = database

    def upsert_batch(self, deals: List[ProductDeal]) -> ReconciliationResult:
        result = ReconciliationResult()

        # One item at a time, a failure never stops the batch
        for deal in deals:
            try:
                inserted = self.database.insert_if_absent(deal)
            except Exception as e:
                logger.error(f"❌ Storage error for {deal_key(deal)}: {e}")
                result.failed.append(deal)
                continue

            if inserted:
                result.saved.append(deal)
            else:
                logger.debug(f"Already stored: {deal_key(deal)}")

        return result
