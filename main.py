import asyncio
import json
import sys

from aiohttp import web

from config import settings
from config.logger import logger
from core.database import Database
from core.supabase_store import SupabaseDatabase
from services.api import create_app
from services.scrape_service import ScrapeService


def build_database():
    if settings.STORAGE_BACKEND == "supabase":
        return SupabaseDatabase.from_credentials(
            settings.SUPABASE_URL,
            settings.SUPABASE_KEY,
            schema=settings.SUPABASE_SCHEMA,
            table=settings.SUPABASE_TABLE
        )
    if settings.STORAGE_BACKEND == "sqlite":
        return Database(settings.DB_PATH)
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")


def main():
    service = ScrapeService(build_database())

    # `python main.py trendyol` runs a single scrape and prints the result
    if len(sys.argv) > 1:
        result = asyncio.run(service.scrape(sys.argv[1].lower()))
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return

    logger.info(f"🔥 Server running on port {settings.PORT}")
    web.run_app(create_app(service), port=settings.PORT, print=None)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Stopped by user.")
