from __future__ import annotations

from dataclasses import dataclass, field

from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool import PoolRejection


@dataclass(frozen=True)
class ReturnTagsInput:
    chain_id: str
    api_key: str = field(repr=False)


@dataclass(frozen=True)
class ReturnTagsOutput:
    tags: list[ContractTag]
    rejections: list[PoolRejection] = field(default_factory=list)
    pages: int = 0
