from __future__ import annotations

import unittest

from pool_tags.infrastructure.mappers.pool_mapper import map_row_to_pool


class PoolMapperTests(unittest.TestCase):
    def test_map_row_to_pool_parses_timestamp_and_tokens(self):
        row = {
            "id": "0xpool",
            "createdAtTimestamp": "1589747086",
            "token0": {"id": "0xt0", "name": "Wrapped Ether", "symbol": "WETH"},
            "token1": {"id": "0xt1", "name": "USD Coin", "symbol": "USDC"},
        }

        pool = map_row_to_pool(row)

        self.assertEqual(pool.id, "0xpool")
        self.assertEqual(pool.created_at_timestamp, 1589747086)
        self.assertEqual(pool.token0.symbol, "WETH")
        self.assertEqual(pool.token1.name, "USD Coin")

    def test_map_row_to_pool_turns_null_fields_into_empty_strings(self):
        row = {
            "id": "0xpool",
            "createdAtTimestamp": 1,
            "token0": {"id": "0xt0", "name": None, "symbol": "WETH"},
            "token1": None,
        }

        pool = map_row_to_pool(row)

        self.assertEqual(pool.token0.name, "")
        self.assertEqual(pool.token1.name, "")
        self.assertEqual(pool.token1.symbol, "")

    def test_map_row_to_pool_rejects_missing_pair_id(self):
        for pair_id in (None, "", "  "):
            with self.subTest(pair_id=pair_id):
                with self.assertRaises(ValueError):
                    map_row_to_pool({"id": pair_id, "createdAtTimestamp": "1"})

    def test_map_row_to_pool_requires_timestamp(self):
        with self.assertRaises(KeyError):
            map_row_to_pool({"id": "0xpool"})


if __name__ == "__main__":
    unittest.main()
