from unittest.mock import MagicMock

import pytest

from core.database import Database
from core.supabase_store import SupabaseDatabase


class TestSqliteDatabase:

    def test_creates_parent_directory(self, tmp_path):
        db = Database(str(tmp_path / "nested" / "deals.db"))
        assert (tmp_path / "nested" / "deals.db").exists()
        assert db.get_total_count() == 0

    def test_insert_if_absent(self, database, make_deal):
        assert database.insert_if_absent(make_deal()) is True
        assert database.insert_if_absent(make_deal()) is False
        assert database.get_total_count() == 1

    def test_existing_row_is_not_overwritten(self, database, make_deal):
        database.insert_if_absent(make_deal(price=59.99, title="Brand ShirtX"))
        database.insert_if_absent(make_deal(price=10.0, title="Changed title"))

        stored = database.get_deal("trendyol", "https://x/p/1")
        assert stored.price == 59.99
        assert stored.title == "Brand ShirtX"

    def test_key_is_platform_and_external_id(self, database, make_deal):
        assert database.insert_if_absent(make_deal("https://x/p/1", platform="trendyol"))
        assert database.insert_if_absent(make_deal("https://x/p/1", platform="temu"))
        assert database.get_total_count() == 2

    def test_missing_deal(self, database):
        assert database.get_deal("trendyol", "nope") is None


def _fake_client(returned_rows):
    client = MagicMock()
    table = client.schema.return_value.table.return_value
    table.upsert.return_value.execute.return_value.data = returned_rows
    return client, table


class TestSupabaseDatabase:

    def test_inserted_row_returns_true(self, make_deal):
        deal = make_deal()
        client, table = _fake_client([deal.model_dump()])
        store = SupabaseDatabase(client)

        assert store.insert_if_absent(deal) is True
        client.schema.assert_called_with("bot_scraper")
        client.schema.return_value.table.assert_called_with("products")
        table.upsert.assert_called_once_with(
            deal.model_dump(), on_conflict="platform,external_id", ignore_duplicates=True
        )

    def test_ignored_duplicate_returns_false(self, make_deal):
        client, _ = _fake_client([])
        assert SupabaseDatabase(client).insert_if_absent(make_deal()) is False

    def test_total_count(self):
        client = MagicMock()
        table = client.schema.return_value.table.return_value
        table.select.return_value.limit.return_value.execute.return_value.count = 7
        assert SupabaseDatabase(client).get_total_count() == 7

    def test_missing_credentials(self):
        with pytest.raises(ValueError):
            SupabaseDatabase.from_credentials("", "")
