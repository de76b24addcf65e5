from __future__ import annotations

from dataclasses import dataclass
import logging

import httpx

from pool_tags.domain.entities.pool import Pool
from pool_tags.domain.exceptions import (
    GraphQLResponseError,
    MissingDataError,
    TransportError,
    UnknownFetchError,
)
from pool_tags.infrastructure.clients.chain_endpoints import resolve_endpoint
from pool_tags.infrastructure.mappers.pool_mapper import map_row_to_pool


logger = logging.getLogger(__name__)


PAIRS_QUERY_TEMPLATE = """
query GetPools($lastTimestamp: BigInt!) {
  pairs(
    first: __PAGE_SIZE__,
    orderBy: createdAtTimestamp,
    orderDirection: asc,
    where: { createdAtTimestamp_gt: $lastTimestamp }
  ) {
    id
    createdAtTimestamp
    token0 {
      id
      name
      symbol
    }
    token1 {
      id
      name
      symbol
    }
  }
}
"""


def build_pairs_query(page_size: int) -> str:
    return PAIRS_QUERY_TEMPLATE.replace("__PAGE_SIZE__", str(int(page_size)))


DEFAULT_TIMEOUT_SECONDS = 30.0

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class PoolSubgraphClientSettings:
    timeout_seconds: float


class PoolSubgraphClient:
    def __init__(
        self,
        settings: PoolSubgraphClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    def resolve_endpoint(self, *, chain_id: str, api_key: str) -> str:
        return resolve_endpoint(chain_id, api_key)

    def fetch_pools_page(
        self,
        *,
        endpoint: str,
        last_timestamp: int,
        page_size: int,
    ) -> list[Pool]:
        payload = self._post_graphql(
            url=endpoint,
            query=build_pairs_query(page_size),
            variables={"lastTimestamp": int(last_timestamp)},
        )
        data = payload.get("data")
        rows = data.get("pairs") if isinstance(data, dict) else None
        if not isinstance(rows, list):
            logger.error(
                "pool_subgraph_client: missing_data last_timestamp=%s keys=%s",
                last_timestamp,
                sorted(payload.keys()),
            )
            raise MissingDataError("No pairs data found in subgraph response.")

        pools: list[Pool] = []
        for row in rows:
            try:
                pools.append(map_row_to_pool(row))
            except (KeyError, TypeError, ValueError) as exc:
                logger.error(
                    "pool_subgraph_client: malformed_pair last_timestamp=%s row=%s error=%s",
                    last_timestamp,
                    row,
                    exc,
                )
                raise MissingDataError(f"Malformed pair in subgraph response: {exc}") from exc
        return pools

    def _post_graphql(self, *, url: str, query: str, variables: dict) -> dict:
        try:
            with httpx.Client(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.post(
                    url,
                    json={"query": query, "variables": variables},
                    headers=REQUEST_HEADERS,
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.error(
                "pool_subgraph_client: http_status_error status=%s variables=%s",
                status_code,
                variables,
            )
            raise TransportError(
                f"HTTP error! status: {status_code}",
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error(
                "pool_subgraph_client: transport_error variables=%s error=%s",
                variables,
                exc,
            )
            raise TransportError(f"Transport error: {exc}") from exc
        except ValueError as exc:
            logger.error(
                "pool_subgraph_client: invalid_json variables=%s error=%s",
                variables,
                exc,
            )
            raise UnknownFetchError(f"Invalid JSON in subgraph response: {exc}") from exc

        if not isinstance(payload, dict):
            logger.error("pool_subgraph_client: unexpected_payload type=%s", type(payload).__name__)
            raise UnknownFetchError("Unexpected subgraph response shape.")

        errors = payload.get("errors") or []
        if errors:
            if not isinstance(errors, list) or not all(
                isinstance(err, dict) and "message" in err for err in errors
            ):
                logger.error("pool_subgraph_client: unknown_error_shape errors=%s", errors)
                raise UnknownFetchError(f"An unknown error occurred: {errors}")
            messages = [str(err["message"]) for err in errors]
            logger.error(
                "pool_subgraph_client: graphql_errors variables=%s messages=%s",
                variables,
                " | ".join(messages),
            )
            raise GraphQLResponseError(messages)

        return payload
