from __future__ import annotations

from enum import Enum


class DomainError(Exception):
    """Base para erros de dominio."""


class FetchErrorKind(str, Enum):
    TRANSPORT = "transport"
    GRAPHQL = "graphql"
    MISSING_DATA = "missing_data"
    UNKNOWN = "unknown"


class UnsupportedChainError(DomainError):
    """Chain id sem endpoint configurado."""

    def __init__(self, chain_id: str, supported_chain_ids: tuple[str, ...]):
        self.chain_id = chain_id
        self.supported_chain_ids = supported_chain_ids
        super().__init__(
            f"Unsupported Chain ID: {chain_id}. "
            f"Supported Chain IDs are: {', '.join(supported_chain_ids)}"
        )


class PoolFetchError(DomainError):
    """Falha ao buscar uma pagina de pools no subgraph."""

    kind: FetchErrorKind = FetchErrorKind.UNKNOWN


class TransportError(PoolFetchError):
    """Status HTTP fora de 2xx ou falha de transporte."""

    kind = FetchErrorKind.TRANSPORT

    def __init__(self, message: str, *, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class GraphQLResponseError(PoolFetchError):
    """Resposta com array de erros GraphQL."""

    kind = FetchErrorKind.GRAPHQL

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__(" | ".join(messages))


class MissingDataError(PoolFetchError):
    """Resposta sem o campo data.pairs esperado."""

    kind = FetchErrorKind.MISSING_DATA


class UnknownFetchError(PoolFetchError):
    """Erro em formato nao reconhecido."""

    kind = FetchErrorKind.UNKNOWN


class PoolTagsFetchError(DomainError):
    """Busca de tags abortada; encapsula o PoolFetchError original."""

    def __init__(self, message: str, *, chain_id: str, kind: FetchErrorKind):
        self.chain_id = chain_id
        self.kind = kind
        super().__init__(message)
