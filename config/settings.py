import os
from dotenv import load_dotenv

from core.filters import MIN_DISCOUNT_RATE as DEFAULT_MIN_DISCOUNT_RATE
from core.filters import MIN_TITLE_LENGTH as DEFAULT_MIN_TITLE_LENGTH

load_dotenv()

# --- Server ---
PORT = int(os.getenv("PORT", "3000"))

# --- Storage ---
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sqlite").lower()  # "sqlite" or "supabase"
DB_PATH = os.getenv("DB_PATH", "data/deals.db")
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
SUPABASE_SCHEMA = os.getenv("SUPABASE_SCHEMA", "bot_scraper")
SUPABASE_TABLE = os.getenv("SUPABASE_TABLE", "products")

# --- Browser ---
HEADLESS = os.getenv("HEADLESS", "true").lower() == "true"
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36"
)
PAGE_TIMEOUT_MS = int(os.getenv("PAGE_TIMEOUT_MS", "60000"))
SCROLL_WAIT_SECONDS = float(os.getenv("SCROLL_WAIT_SECONDS", "3"))

# --- Deal rules ---
MIN_DISCOUNT_RATE = int(os.getenv("MIN_DISCOUNT_RATE", str(DEFAULT_MIN_DISCOUNT_RATE)))
MIN_TITLE_LENGTH = int(os.getenv("MIN_TITLE_LENGTH", str(DEFAULT_MIN_TITLE_LENGTH)))
SAMPLE_SIZE = int(os.getenv("SAMPLE_SIZE", "50"))
