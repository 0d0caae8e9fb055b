"""
Unit tests for the endpoint table.

Tests cover:
- Exhaustive table
- Lookup by name
- Unknown endpoint handling
"""

import pytest

from playground.endpoints import (
    ENDPOINTS,
    EndpointName,
    FieldKind,
    get_endpoint,
    list_endpoints,
)
from playground.errors import UnknownEndpointError

EXPECTED_FIELDS = {
    "health": (),
    "creda-approve": ("spender", "amount"),
    "approve-xp": ("spender", "amount"),
    "lock-creda": ("amount",),
    "create-token": ("xp_amount", "name", "symbol", "decimals"),
    "burn-token": ("game_id", "amount"),
    "flow-create": ("factory_address", "creda_amount", "game_name", "game_symbol", "decimals"),
    "flow-burn": ("factory_address", "game_token_address", "game_id", "burn_amount"),
}

EXPECTED_ROUTES = {
    "health": ("GET", "/"),
    "creda-approve": ("POST", "/api/v1/calldata/creda-approve"),
    "approve-xp": ("POST", "/api/v1/calldata/approve-xp"),
    "lock-creda": ("POST", "/api/v1/calldata/lock-creda"),
    "create-token": ("POST", "/api/v1/calldata/create-token"),
    "burn-token": ("POST", "/api/v1/calldata/burn-token"),
    "flow-create": ("POST", "/api/v1/flow/create"),
    "flow-burn": ("POST", "/api/v1/flow/burn"),
}


class TestEndpointTable:
    """Tests for ENDPOINTS."""

    def test_table_is_exhaustive(self):
        """Every EndpointName has a definition."""
        assert set(ENDPOINTS) == set(EndpointName)

    def test_definitions_keyed_by_own_name(self):
        for name, endpoint in ENDPOINTS.items():
            assert endpoint.name == name

    @pytest.mark.parametrize("name,fields", EXPECTED_FIELDS.items())
    def test_field_set(self, name, fields):
        """Each endpoint has exactly its documented fields."""
        assert get_endpoint(name).field_names == fields

    @pytest.mark.parametrize("name,route", EXPECTED_ROUTES.items())
    def test_method_and_path(self, name, route):
        endpoint = get_endpoint(name)
        assert (endpoint.method, endpoint.path) == route

    def test_decimals_is_bounded_number(self):
        decimals = get_endpoint("create-token").fields[-1]
        assert decimals.kind == FieldKind.NUMBER
        assert decimals.min_value == 0
        assert decimals.max_value == 18

    def test_list_order_starts_with_health(self):
        names = [e.name.value for e in list_endpoints()]
        assert names[0] == "health"
        assert names == list(EXPECTED_FIELDS)

    def test_lookup_accepts_enum(self):
        assert get_endpoint(EndpointName.LOCK_CREDA).path == "/api/v1/calldata/lock-creda"

    def test_to_dict(self):
        data = get_endpoint("lock-creda").to_dict()

        assert data["name"] == "lock-creda"
        assert data["method"] == "POST"
        assert data["fields"][0]["name"] == "amount"
        assert data["fields"][0]["placeholder"] == "1000000000000000000000"


class TestUnknownEndpoint:
    """Tests for unknown endpoint lookups."""

    def test_unknown_raises(self):
        with pytest.raises(UnknownEndpointError, match="Unknown endpoint"):
            get_endpoint("mint-nft")

    def test_error_carries_name(self):
        with pytest.raises(UnknownEndpointError) as exc_info:
            get_endpoint("mint-nft")

        assert exc_info.value.name == "mint-nft"
        assert exc_info.value.code == "UNKNOWN_ENDPOINT"
