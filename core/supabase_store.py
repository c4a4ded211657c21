from supabase import create_client, Client

from models.deal import ProductDeal


class SupabaseDatabase:
    """
    Deals stored in a Supabase (PostgREST) table.

    The table needs a unique constraint on (platform, external_id). Upserts
    ignore duplicates, so an existing row is never overwritten and the
    response only carries rows that were actually inserted.
    """

    ON_CONFLICT = "platform,external_id"

    def __init__(self, client: Client, schema: str = "bot_scraper", table: str = "products"):
        self.client = client
        self.schema = schema
        self.table = table

    @classmethod
    def from_credentials(cls, url: str, key: str, schema: str = "bot_scraper", table: str = "products"):
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set for the supabase backend")
        return cls(create_client(url, key), schema=schema, table=table)

    def _table(self):
        return self.client.schema(self.schema).table(self.table)

    def insert_if_absent(self, deal: ProductDeal) -> bool:
        result = (
            self._table()
            .upsert(deal.model_dump(), on_conflict=self.ON_CONFLICT, ignore_duplicates=True)
            .execute()
        )
        return bool(result.data)

    def get_total_count(self) -> int:
        result = self._table().select("external_id", count="exact").limit(1).execute()
        return result.count or 0
