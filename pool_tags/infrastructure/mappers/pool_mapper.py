from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pool_tags.domain.entities.pool import Pool, Token


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def map_row_to_token(row: Mapping[str, Any] | None) -> Token:
    row = row or {}
    return Token(
        id=_text(row.get("id")),
        name=_text(row.get("name")),
        symbol=_text(row.get("symbol")),
    )


def map_row_to_pool(row: Mapping[str, Any]) -> Pool:
    pool_id = _text(row["id"])
    if not pool_id.strip():
        raise ValueError("pair id must not be empty.")
    return Pool(
        id=pool_id,
        created_at_timestamp=int(row["createdAtTimestamp"]),
        token0=map_row_to_token(row.get("token0")),
        token1=map_row_to_token(row.get("token1")),
    )
