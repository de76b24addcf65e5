from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException

from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.domain.exceptions import UnsupportedChainError
from pool_tags.infrastructure.clients.chain_endpoints import supported_chain_ids
from pool_tags.infrastructure.clients.pool_subgraph_client import (
    PoolSubgraphClient,
    PoolSubgraphClientSettings,
)
from pool_tags.shared.config import Settings, get_settings


@lru_cache(maxsize=1)
def _get_settings() -> Settings:
    return get_settings()


@lru_cache(maxsize=1)
def _get_pool_subgraph_client() -> PoolSubgraphClient:
    settings = _get_settings()
    return PoolSubgraphClient(
        PoolSubgraphClientSettings(timeout_seconds=settings.graph_request_timeout_seconds)
    )


def get_supported_chain_id(chain_id: str) -> str:
    supported = supported_chain_ids()
    if chain_id not in supported:
        raise HTTPException(
            status_code=404,
            detail=str(UnsupportedChainError(chain_id, supported)),
        )
    return chain_id


def get_graph_api_key(_chain_id: str = Depends(get_supported_chain_id)) -> str:
    api_key = _get_settings().graph_api_key.strip()
    if not api_key:
        raise HTTPException(status_code=500, detail="GRAPH_API_KEY is required.")
    return api_key


def get_return_tags_use_case() -> ReturnTagsUseCase:
    return ReturnTagsUseCase(
        pool_source=_get_pool_subgraph_client(),
        page_size=_get_settings().pool_tags_page_size,
    )
