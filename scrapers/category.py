import asyncio
from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from playwright.async_api import async_playwright
from playwright_stealth import Stealth

from config import settings
from config.logger import logger
from config.platforms import PlatformConfig
from models.deal import RawItem


def _get_text(card, selector: str) -> str:
    el = card.select_one(selector)
    return el.get_text(" ", strip=True) if el else ""


def extract_raw_items(html: str, platform: PlatformConfig, base_url: Optional[str] = None) -> List[RawItem]:
    """Reads every product card of the rendered page into a RawItem. No parsing of values here."""
    base_url = base_url or platform.url
    soup = BeautifulSoup(html, 'html.parser')
    items = []

    for card in soup.select(platform.card_selector):
        title = " ".join(_get_text(card, sel) for sel in platform.title_selectors)

        link_el = card.select_one(platform.link_selector)
        link = ""
        if link_el and link_el.get('href'):
            link = urljoin(base_url, link_el['href'])

        img_el = card.select_one(platform.image_selector)
        image_url = None
        if img_el:
            src = img_el.get('src') or img_el.get('data-src')
            if src:
                image_url = urljoin(base_url, src)

        items.append(RawItem(
            title=title,
            price_text=_get_text(card, platform.price_selector),
            reference_price_text=_get_text(card, platform.reference_price_selector),
            link=link,
            image_url=image_url
        ))

    return items


class CategoryScraper:
    def __init__(self, platform: PlatformConfig):
        self.platform = platform

    async def fetch_raw_items(self) -> List[RawItem]:
        """Opens the category page, triggers lazy loading and extracts the product cards."""
        logger.info(f"Starting scrape for {self.platform.key}...")

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=settings.HEADLESS)
            try:
                context = await browser.new_context(
                    user_agent=settings.USER_AGENT,
                    viewport={'width': 1920, 'height': 1080}
                )
                page = await context.new_page()
                stealth = Stealth()
                await stealth.apply_stealth_async(page)

                logger.info(f"   Navigating to {self.platform.url}")
                await page.goto(self.platform.url, wait_until="domcontentloaded", timeout=settings.PAGE_TIMEOUT_MS)

                # Scroll one screen to trigger lazy loading
                await page.evaluate("window.scrollBy(0, window.innerHeight)")
                await asyncio.sleep(settings.SCROLL_WAIT_SECONDS)

                content = await page.content()
                items = extract_raw_items(content, self.platform, base_url=page.url)
                logger.info(f"   Found {len(items)} cards ({self.platform.key})")
                return items
            finally:
                await browser.close()
