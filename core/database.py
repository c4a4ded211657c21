import os
import sqlite3
from datetime import datetime
from typing import Optional
from models.deal import ProductDeal

class Database:
    """SQLite store for deals, unique on (platform, external_id)."""

    def __init__(self, db_path="data/deals.db"):
        self.db_path = db_path
        db_dir = os.path.dirname(self.db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        self._create_table()

    def _create_table(self):
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS products (
                    platform TEXT NOT NULL,
                    external_id TEXT NOT NULL,
                    title TEXT,
                    price REAL,
                    original_price REAL,
                    discount_rate INTEGER,
                    image_url TEXT,
                    product_url TEXT,
                    created_at DATETIME,
                    UNIQUE (platform, external_id)
                )
            """)
            conn.commit()

    def insert_if_absent(self, deal: ProductDeal) -> bool:
        """
        Inserts the deal unless its (platform, external_id) is already stored.
        An existing row is never touched.

        Returns:
            bool: True if a new row was written
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(
                """INSERT OR IGNORE INTO products
                   (platform, external_id, title, price, original_price, discount_rate, image_url, product_url, created_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (deal.platform, deal.external_id, deal.title, deal.price, deal.original_price,
                 deal.discount_rate, deal.image_url, deal.product_url, datetime.now())
            )
            conn.commit()
            return cursor.rowcount == 1

    def get_deal(self, platform: str, external_id: str) -> Optional[ProductDeal]:
        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            cursor = conn.cursor()
            cursor.execute(
                "SELECT * FROM products WHERE platform = ? AND external_id = ?",
                (platform, external_id)
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return ProductDeal(
                title=row["title"],
                price=row["price"],
                original_price=row["original_price"],
                discount_rate=row["discount_rate"],
                image_url=row["image_url"],
                product_url=row["product_url"],
                platform=row["platform"],
                external_id=row["external_id"]
            )

    def get_total_count(self) -> int:
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM products")
            return cursor.fetchone()[0]
