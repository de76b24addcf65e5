from __future__ import annotations

from pool_tags.application.dto.return_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import DEFAULT_PAGE_SIZE, ReturnTagsUseCase
from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.infrastructure.clients.pool_subgraph_client import (
    DEFAULT_TIMEOUT_SECONDS,
    PoolSubgraphClient,
    PoolSubgraphClientSettings,
)


def return_tags(chain_id: str, api_key: str) -> list[ContractTag]:
    """Fetches every pool of the chain's subgraph and returns one tag per valid pool.

    Raises UnsupportedChainError for unknown chain ids and PoolTagsFetchError when any page
    fails; no partial result is returned in that case.
    """
    use_case = ReturnTagsUseCase(
        pool_source=PoolSubgraphClient(
            PoolSubgraphClientSettings(timeout_seconds=DEFAULT_TIMEOUT_SECONDS)
        ),
        page_size=DEFAULT_PAGE_SIZE,
    )
    return use_case.execute(ReturnTagsInput(chain_id=chain_id, api_key=api_key)).tags
