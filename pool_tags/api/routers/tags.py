from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pool_tags.api.deps import get_graph_api_key, get_return_tags_use_case
from pool_tags.api.schemas.tags import ChainResponse, ContractTagResponse
from pool_tags.application.dto.return_tags import ReturnTagsInput
from pool_tags.application.use_cases.return_tags import ReturnTagsUseCase
from pool_tags.domain.exceptions import PoolTagsFetchError, UnsupportedChainError
from pool_tags.infrastructure.clients.chain_endpoints import supported_chain_ids

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/v1/chains", response_model=list[ChainResponse])
def list_chains():
    return [ChainResponse(chain_id=chain_id) for chain_id in supported_chain_ids()]


@router.get("/v1/chains/{chain_id}/tags", response_model=list[ContractTagResponse])
def list_chain_tags(
    chain_id: str,
    api_key: str = Depends(get_graph_api_key),
    use_case: ReturnTagsUseCase = Depends(get_return_tags_use_case),
):
    try:
        output = use_case.execute(ReturnTagsInput(chain_id=chain_id, api_key=api_key))
    except UnsupportedChainError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except PoolTagsFetchError as exc:
        logger.warning(
            "tags_router: fetch_failed chain_id=%s kind=%s",
            chain_id,
            exc.kind.value,
        )
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return [
        ContractTagResponse(
            contract_address=tag.contract_address,
            public_name_tag=tag.public_name_tag,
            project_name=tag.project_name,
            ui_website_link=tag.ui_website_link,
            public_note=tag.public_note,
        )
        for tag in output.tags
    ]
