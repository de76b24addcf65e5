from __future__ import annotations

import re

from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool import Pool, PoolRejection, Token


PROJECT_NAME = "SushiSwap v2"
UI_WEBSITE_LINK = "https://www.sushi.com/"
NAME_TAG_MAX_LENGTH = 45
ELLIPSIS = "..."

_MARKUP_PATTERN = re.compile(r"<[^>]*>")


def truncate_text(text: str, max_length: int = NAME_TAG_MAX_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def contains_markup(value: str) -> bool:
    return _MARKUP_PATTERN.search(value) is not None


def is_valid_text(value: str | None) -> bool:
    if value is None:
        return False
    if not value.strip():
        return False
    return not contains_markup(value)


def is_valid_token(token: Token) -> bool:
    return is_valid_text(token.name) and is_valid_text(token.symbol)


def find_rejection(pool: Pool) -> PoolRejection | None:
    """Returns the first offending token slot of a pool, or None if both tokens are usable."""
    for slot, token in (("token0", pool.token0), ("token1", pool.token1)):
        if not is_valid_token(token):
            return PoolRejection(
                pool_id=pool.id,
                token_slot=slot,
                name=token.name,
                symbol=token.symbol,
            )
    return None


def build_contract_tag(*, chain_id: str, pool: Pool) -> ContractTag:
    token0 = pool.token0
    token1 = pool.token1
    pair = truncate_text(f"{token0.symbol}/{token1.symbol}")
    return ContractTag(
        contract_address=f"eip155:{chain_id}:{pool.id}",
        public_name_tag=f"{pair} Pool",
        project_name=PROJECT_NAME,
        ui_website_link=UI_WEBSITE_LINK,
        public_note=(
            f"The liquidity pool contract on {PROJECT_NAME} for the "
            f"{token0.name} ({token0.symbol}) / {token1.name} ({token1.symbol}) pair."
        ),
    )


def map_pools_to_tags(
    *,
    chain_id: str,
    pools: list[Pool],
) -> tuple[list[ContractTag], list[PoolRejection]]:
    tags: list[ContractTag] = []
    rejections: list[PoolRejection] = []
    for pool in pools:
        rejection = find_rejection(pool)
        if rejection is not None:
            rejections.append(rejection)
            continue
        tags.append(build_contract_tag(chain_id=chain_id, pool=pool))
    return tags, rejections


def describe_rejection(rejection: PoolRejection) -> str:
    return (
        f"Pool rejected: {rejection.pool_id} ({rejection.token_slot}) "
        f"name={rejection.name!r} symbol={rejection.symbol!r}"
    )
