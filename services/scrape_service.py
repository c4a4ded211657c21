import asyncio

from config import settings
from config.logger import logger
from config.platforms import PLATFORMS
from core.pipeline import DealPipeline
from core.reconciliation import ReconciliationStore
from scrapers.category import CategoryScraper


class ScrapeService:
    """Runs one scrape per request: browser extraction, then the deal pipeline."""

    def __init__(self, database, platforms=None, scraper_factory=CategoryScraper):
        self.database = database
        self.platforms = platforms if platforms is not None else PLATFORMS
        self.scraper_factory = scraper_factory
        self.pipeline = DealPipeline(
            ReconciliationStore(database),
            min_discount_rate=settings.MIN_DISCOUNT_RATE,
            min_title_length=settings.MIN_TITLE_LENGTH,
            sample_size=settings.SAMPLE_SIZE
        )

    async def scrape(self, platform_key: str) -> dict:
        platform = self.platforms.get(platform_key)
        if platform is None:
            return {"error": "Platform not supported"}

        try:
            scraper = self.scraper_factory(platform)
            raw_items = await scraper.fetch_raw_items()
            # Storage calls block, keep them off the event loop
            summary = await asyncio.to_thread(self.pipeline.run, raw_items, platform_key)
            return summary.model_dump()
        except Exception as e:
            logger.error(f"❌ Scrape failed for {platform_key}: {e}", exc_info=True)
            return {"error": str(e)}

    async def status(self) -> dict:
        try:
            total_deals = await asyncio.to_thread(self.database.get_total_count)
        except Exception as e:
            logger.error(f"❌ Status check failed: {e}", exc_info=True)
            return {"error": str(e)}

        return {
            "status": "online",
            "platforms": list(self.platforms),
            "total_deals": total_deals
        }
