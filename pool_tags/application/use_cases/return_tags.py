from __future__ import annotations

import logging

from pool_tags.application.dto.return_tags import ReturnTagsInput, ReturnTagsOutput
from pool_tags.application.ports.pool_source_port import PoolSourcePort
from pool_tags.domain.entities.contract_tag import ContractTag
from pool_tags.domain.entities.pool import Pool, PoolRejection
from pool_tags.domain.exceptions import (
    PoolFetchError,
    PoolTagsFetchError,
    UnknownFetchError,
    UnsupportedChainError,
)
from pool_tags.domain.services.pool_tags import describe_rejection, map_pools_to_tags


logger = logging.getLogger(__name__)


DEFAULT_PAGE_SIZE = 1000


class ReturnTagsUseCase:
    def __init__(self, *, pool_source: PoolSourcePort, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError("page_size must be a positive integer.")
        self._pool_source = pool_source
        self._page_size = page_size

    def execute(self, command: ReturnTagsInput) -> ReturnTagsOutput:
        try:
            endpoint = self._pool_source.resolve_endpoint(
                chain_id=command.chain_id,
                api_key=command.api_key,
            )
        except UnsupportedChainError:
            logger.warning("return_tags: unsupported_chain chain_id=%s", command.chain_id)
            raise

        tags: list[ContractTag] = []
        rejections: list[PoolRejection] = []
        last_timestamp = 0
        pages = 0

        try:
            while True:
                rows = self._pool_source.fetch_pools_page(
                    endpoint=endpoint,
                    last_timestamp=last_timestamp,
                    page_size=self._page_size,
                )
                pages += 1

                page_tags, page_rejections = map_pools_to_tags(chain_id=command.chain_id, pools=rows)
                for rejection in page_rejections:
                    logger.warning("return_tags: %s", describe_rejection(rejection))
                tags.extend(page_tags)
                rejections.extend(page_rejections)

                logger.info(
                    "return_tags: fetched_page chain_id=%s page=%s cursor=%s rows=%s tags=%s rejected=%s",
                    command.chain_id,
                    pages,
                    last_timestamp,
                    len(rows),
                    len(page_tags),
                    len(page_rejections),
                )

                if len(rows) < self._page_size:
                    break

                next_timestamp = rows[-1].created_at_timestamp
                if next_timestamp <= last_timestamp:
                    raise UnknownFetchError(
                        f"Cursor did not advance: last_timestamp={last_timestamp} next={next_timestamp}"
                    )
                self._warn_on_boundary_tie(
                    chain_id=command.chain_id,
                    rows=rows,
                    boundary_timestamp=next_timestamp,
                )
                last_timestamp = next_timestamp
        except PoolFetchError as exc:
            logger.error(
                "return_tags: fetch_failed chain_id=%s kind=%s pages_fetched=%s cursor=%s discarded_tags=%s error=%s",
                command.chain_id,
                exc.kind.value,
                pages,
                last_timestamp,
                len(tags),
                exc,
            )
            raise PoolTagsFetchError(
                f"Error fetching pools for chain {command.chain_id}: {exc}",
                chain_id=command.chain_id,
                kind=exc.kind,
            ) from exc

        logger.info(
            "return_tags: completed chain_id=%s pages=%s tags=%s rejected=%s",
            command.chain_id,
            pages,
            len(tags),
            len(rejections),
        )
        return ReturnTagsOutput(tags=tags, rejections=rejections, pages=pages)

    def _warn_on_boundary_tie(
        self,
        *,
        chain_id: str,
        rows: list[Pool],
        boundary_timestamp: int,
    ) -> None:
        # The next page asks for createdAtTimestamp > boundary, so pools sharing the boundary
        # timestamp that did not fit in this page are never returned.
        tie_size = sum(1 for row in rows if row.created_at_timestamp == boundary_timestamp)
        if tie_size < 2:
            return
        logger.warning(
            "return_tags: boundary_timestamp_tie chain_id=%s cursor=%s tie_size=%s page_size=%s",
            chain_id,
            boundary_timestamp,
            tie_size,
            self._page_size,
        )
