from __future__ import annotations

import pytest

from pool_tags.domain.exceptions import UnsupportedChainError
from pool_tags.infrastructure.clients.chain_endpoints import (
    API_KEY_PLACEHOLDER,
    CHAIN_ENDPOINTS,
    resolve_endpoint,
    supported_chain_ids,
)


def test_table_has_a_placeholder_in_every_template():
    assert len(CHAIN_ENDPOINTS) == 14
    for template in CHAIN_ENDPOINTS.values():
        assert template.count(API_KEY_PLACEHOLDER) == 1


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CHAIN_ENDPOINTS["999"] = "https://example.com"  # type: ignore[index]


def test_resolve_endpoint_substitutes_api_key_once():
    url = resolve_endpoint("1", "my-key")

    assert url == CHAIN_ENDPOINTS["1"].replace(API_KEY_PLACEHOLDER, "my-key")
    assert API_KEY_PLACEHOLDER not in url
    assert url.count("my-key") == 1


def test_resolve_endpoint_url_encodes_api_key():
    url = resolve_endpoint("42161", "a/b c?&")

    assert "a%2Fb%20c%3F%26" in url
    assert "a/b c?&" not in url


@pytest.mark.parametrize("chain_id", ["999999", "abc", "", "1.0", " 1", "0x1"])
def test_resolve_endpoint_rejects_unknown_or_non_numeric_chain(chain_id: str):
    with pytest.raises(UnsupportedChainError) as exc_info:
        resolve_endpoint(chain_id, "key")

    error = exc_info.value
    assert error.chain_id == chain_id
    assert error.supported_chain_ids == supported_chain_ids()
    for supported in supported_chain_ids():
        assert supported in str(error)
