from __future__ import annotations

import re
from types import MappingProxyType
from urllib.parse import quote

from pool_tags.domain.exceptions import UnsupportedChainError


API_KEY_PLACEHOLDER = "[api-key]"

_GATEWAY = "https://gateway.thegraph.com/api/" + API_KEY_PLACEHOLDER + "/subgraphs/id/"

# SushiSwap v2 subgraph deployments on The Graph gateway, keyed by EIP-155 chain id.
CHAIN_ENDPOINTS = MappingProxyType(
    {
        "1": _GATEWAY + "77jZ9KWeyi3CJ96zkkj5s1CojKPHt6XJKjLFzsDCd8Fd",
        "10": _GATEWAY + "4KvWjY5zXpUuEBaNjz1Mc6GHmWt5z9ebbRYNLJMsE3yc",
        "56": _GATEWAY + "GPRigpbNuPkxkwpSbDuYXbikodNJfurc1LCENLzboWer",
        "100": _GATEWAY + "8a4bqLckLDCk8gTkPGFEe5JTa4AaQU9w1jBrkMa1Ni2N",
        "137": _GATEWAY + "8NiXkxLRT3R22vpwLB4DXttpEf3X1LrKhe4T1tQ3jjbP",
        "250": _GATEWAY + "3nozHyFKUhxnEvekFg5G57bxPC5V63eiWbwDgA9JE1kQ",
        "1101": _GATEWAY + "8ChxG2Qq3gBaE6rM8ADEJtzxHdZGdYHG4JSTYGzFSk8D",
        "8453": _GATEWAY + "7pXNLCc12pRM3bBPBFGdSUBJWgpmKkjsdNYyqhmKpCrH",
        "42161": _GATEWAY + "8nFDCAhdnJQEhQF3ZRnfWkJ6FkRsfAiiVabVn4eGoAZH",
        "42170": _GATEWAY + "4Zy8dx6SKkVvpERZL5yFGJmnuA5ZVmL9Pb3mE9LwxGEj",
        "42220": _GATEWAY + "8roCSHjTVMdyqgXuu3aULbeMzoVfYbX3Hp2ngN2Y4rKV",
        "43114": _GATEWAY + "6VAhbtW5u2sPYkJKAcMsxgqTBu4a1rqmbiVQWgtNjrvT",
        "59144": _GATEWAY + "G4sRz1YAcEFYFewStHxgeSo3EGRHp5XRgDm3vhR7Fq6H",
        "534352": _GATEWAY + "CiW5nDh5C1cWb5yq3JxNnQeLLdPxG7qP8EmTPZG8T6QS",
    }
)

_NUMERIC_CHAIN_ID = re.compile(r"\d+")


def supported_chain_ids() -> tuple[str, ...]:
    return tuple(CHAIN_ENDPOINTS.keys())


def resolve_endpoint(chain_id: str, api_key: str) -> str:
    template = CHAIN_ENDPOINTS.get(chain_id) if _NUMERIC_CHAIN_ID.fullmatch(chain_id or "") else None
    if template is None:
        raise UnsupportedChainError(chain_id, supported_chain_ids())
    return template.replace(API_KEY_PLACEHOLDER, quote(api_key, safe=""), 1)
