"""
Fabricated upstream responses for demo mode.

Responses are shaped like the real calldata API's but built from fixed
example words: amounts are always 1000 or 500 tokens (18 decimals)
regardless of input, and only addresses, game ids and token names/symbols
are spliced in. They are not valid ABI encodings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .endpoints import EndpointName

API_VERSION = "0.1.0"

UNKNOWN_ENDPOINT = {"error": "Unknown endpoint"}

# Function selectors
APPROVE_SELECTOR = "0x095ea7b3"
LOCK_CREDA_SELECTOR = "0xbec697db"
CREATE_TOKEN_SELECTOR = "0xfd44d274"
BURN_TOKEN_SELECTOR = "0x5ed6c1db"


def _word(value: int) -> str:
    """A 32-byte ABI word."""
    return format(value, "064x")


ADDRESS_PAD = "0" * 24
AMOUNT_1000 = _word(1000 * 10**18)
# One nibble longer than a word.
AMOUNT_500 = "0" + _word(500 * 10**18)

CREATE_TOKEN_HEAD = (
    CREATE_TOKEN_SELECTOR + AMOUNT_1000 + _word(0x80) + _word(0xC0) + _word(18) + _word(13)
)
CREATE_TOKEN_GAP = "0" * 63
CREATE_TOKEN_TAIL = "0" * 54
BURN_TOKEN_HEAD = BURN_TOKEN_SELECTOR + "0" * 63


def string_to_hex(value: str) -> str:
    """Hex of each UTF-16 code unit, unpadded."""
    raw = value.encode("utf-16-le", "surrogatepass")
    units = (int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2))
    return "".join(format(unit, "x") for unit in units)


def _strip_0x(address: Any) -> str:
    return str(address or "")[2:]


def _text(body: Mapping[str, Any], key: str) -> str:
    value = body.get(key)
    return "" if value is None else str(value)


def _approve(spender: Any, amount_word: str) -> str:
    return APPROVE_SELECTOR + ADDRESS_PAD + _strip_0x(spender) + amount_word


def _create_token(name: str, symbol: str) -> str:
    return (
        CREATE_TOKEN_HEAD
        + string_to_hex(name)
        + CREATE_TOKEN_GAP
        + string_to_hex(symbol)
        + CREATE_TOKEN_TAIL
    )


def _burn_token(game_id: str) -> str:
    return BURN_TOKEN_HEAD + game_id + AMOUNT_500


def simulate_response(name: str, body: Mapping[str, Any] | None) -> dict[str, Any]:
    """Fabricate the response the upstream API would return.

    Unknown endpoint names produce {"error": "Unknown endpoint"}.
    """
    try:
        endpoint = EndpointName(name)
    except ValueError:
        return dict(UNKNOWN_ENDPOINT)

    body = body or {}

    if endpoint == EndpointName.HEALTH:
        return {"status": "ok", "version": API_VERSION}

    if endpoint in (EndpointName.CREDA_APPROVE, EndpointName.APPROVE_XP):
        return {"calldata": _approve(body.get("spender"), AMOUNT_1000)}

    if endpoint == EndpointName.LOCK_CREDA:
        return {"calldata": LOCK_CREDA_SELECTOR + AMOUNT_1000}

    if endpoint == EndpointName.CREATE_TOKEN:
        return {"calldata": _create_token(_text(body, "name"), _text(body, "symbol"))}

    if endpoint == EndpointName.BURN_TOKEN:
        return {"calldata": _burn_token(_text(body, "game_id"))}

    if endpoint == EndpointName.FLOW_CREATE:
        factory = body.get("factory_address")
        return {
            "creda_approve": _approve(factory, AMOUNT_1000),
            "lock_creda": LOCK_CREDA_SELECTOR + AMOUNT_1000,
            "xp_amount": body.get("creda_amount"),
            "xp_approve": _approve(factory, AMOUNT_1000),
            "create_token": _create_token(_text(body, "game_name"), _text(body, "game_symbol")),
        }

    if endpoint == EndpointName.FLOW_BURN:
        return {
            "game_token_approve": _approve(body.get("factory_address"), AMOUNT_500),
            "burn_game_token": _burn_token(_text(body, "game_id")),
        }

    return dict(UNKNOWN_ENDPOINT)
