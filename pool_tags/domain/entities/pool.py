from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    id: str
    name: str
    symbol: str


@dataclass(frozen=True)
class Pool:
    id: str
    created_at_timestamp: int
    token0: Token
    token1: Token


@dataclass(frozen=True)
class PoolRejection:
    pool_id: str
    token_slot: str
    name: str
    symbol: str
