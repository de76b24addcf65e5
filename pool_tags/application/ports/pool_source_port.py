from __future__ import annotations

from typing import Protocol

from pool_tags.domain.entities.pool import Pool


class PoolSourcePort(Protocol):
    def resolve_endpoint(self, *, chain_id: str, api_key: str) -> str:
        ...

    def fetch_pools_page(
        self,
        *,
        endpoint: str,
        last_timestamp: int,
        page_size: int,
    ) -> list[Pool]:
        ...
