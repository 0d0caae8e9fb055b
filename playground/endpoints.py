"""
Endpoint table for the calldata playground.

Each upstream API endpoint the playground can call is described once here:
- EndpointName: The fixed set of selectable endpoints
- FormField: One input in an endpoint's form
- EndpointDef: Method, path and form fields of an endpoint

Invariants:
    - ENDPOINTS has exactly one entry per EndpointName
    - Definitions are frozen and never mutated at runtime

Example:
    >>> endpoint = get_endpoint("lock-creda")
    >>> endpoint.path
    '/api/v1/calldata/lock-creda'
    >>> endpoint.field_names
    ('amount',)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import UnknownEndpointError


class EndpointName(str, Enum):
    """Selectable playground endpoints."""

    HEALTH = "health"
    CREDA_APPROVE = "creda-approve"
    APPROVE_XP = "approve-xp"
    LOCK_CREDA = "lock-creda"
    CREATE_TOKEN = "create-token"
    BURN_TOKEN = "burn-token"
    FLOW_CREATE = "flow-create"
    FLOW_BURN = "flow-burn"


class FieldKind(Enum):
    """Form input types."""

    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True)
class FormField:
    """A single form input.

    Attributes:
        name: Body key and input id
        label: Label shown above the input
        placeholder: Example value
        help_text: Hint shown below the input
        kind: Input type; NUMBER values are sent as integers
        min_value: Lower bound for NUMBER inputs
        max_value: Upper bound for NUMBER inputs
    """

    name: str
    label: str
    placeholder: str = ""
    help_text: str = ""
    kind: FieldKind = FieldKind.TEXT
    min_value: int | None = None
    max_value: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "placeholder": self.placeholder,
            "kind": self.kind.value,
        }
        if self.help_text:
            result["help_text"] = self.help_text
        if self.min_value is not None:
            result["min"] = self.min_value
        if self.max_value is not None:
            result["max"] = self.max_value
        return result


@dataclass(frozen=True)
class EndpointDef:
    """Definition of one upstream API endpoint."""

    name: EndpointName
    label: str
    method: str
    path: str
    fields: tuple[FormField, ...] = ()

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name.value,
            "label": self.label,
            "method": self.method,
            "path": self.path,
            "fields": [f.to_dict() for f in self.fields],
        }


# --- Shared fields ---

_WEI_PLACEHOLDER = "1000000000000000000000"
_BURN_PLACEHOLDER = "500000000000000000000"

SPENDER = FormField(
    "spender", "Spender Address", "0x1234...", "Ethereum address of the spender"
)
APPROVE_AMOUNT = FormField(
    "amount", "Amount", _WEI_PLACEHOLDER, "Amount in wei (1 ETH = 10^18 wei)"
)
DECIMALS = FormField(
    "decimals",
    "Decimals",
    "18",
    "Number of decimal places (0-18)",
    kind=FieldKind.NUMBER,
    min_value=0,
    max_value=18,
)
GAME_ID = FormField("game_id", "Game ID", "1")
FACTORY_ADDRESS = FormField(
    "factory_address",
    "Factory Address",
    "0x1234...",
    "Ethereum address of the GameTokenFactory contract",
)


# --- Endpoint table ---

ENDPOINTS: dict[EndpointName, EndpointDef] = {
    EndpointName.HEALTH: EndpointDef(
        name=EndpointName.HEALTH,
        label="Health Check",
        method="GET",
        path="/",
    ),
    EndpointName.CREDA_APPROVE: EndpointDef(
        name=EndpointName.CREDA_APPROVE,
        label="Approve CRIDA",
        method="POST",
        path="/api/v1/calldata/creda-approve",
        fields=(SPENDER, APPROVE_AMOUNT),
    ),
    EndpointName.APPROVE_XP: EndpointDef(
        name=EndpointName.APPROVE_XP,
        label="Approve XP",
        method="POST",
        path="/api/v1/calldata/approve-xp",
        fields=(SPENDER, APPROVE_AMOUNT),
    ),
    EndpointName.LOCK_CREDA: EndpointDef(
        name=EndpointName.LOCK_CREDA,
        label="Lock CRIDA",
        method="POST",
        path="/api/v1/calldata/lock-creda",
        fields=(
            FormField(
                "amount", "Amount", _WEI_PLACEHOLDER, "Amount of CRIDA tokens to lock (in wei)"
            ),
        ),
    ),
    EndpointName.CREATE_TOKEN: EndpointDef(
        name=EndpointName.CREATE_TOKEN,
        label="Create Game Token",
        method="POST",
        path="/api/v1/calldata/create-token",
        fields=(
            FormField(
                "xp_amount", "XP Amount", _WEI_PLACEHOLDER, "Amount of XP tokens to use (in wei)"
            ),
            FormField("name", "Token Name", "My Game Token"),
            FormField("symbol", "Token Symbol", "MGT"),
            DECIMALS,
        ),
    ),
    EndpointName.BURN_TOKEN: EndpointDef(
        name=EndpointName.BURN_TOKEN,
        label="Burn Game Token",
        method="POST",
        path="/api/v1/calldata/burn-token",
        fields=(
            GAME_ID,
            FormField(
                "amount", "Amount", _BURN_PLACEHOLDER, "Amount of game tokens to burn (in wei)"
            ),
        ),
    ),
    EndpointName.FLOW_CREATE: EndpointDef(
        name=EndpointName.FLOW_CREATE,
        label="Create Token Flow",
        method="POST",
        path="/api/v1/flow/create",
        fields=(
            FACTORY_ADDRESS,
            FormField(
                "creda_amount",
                "CRIDA Amount",
                _WEI_PLACEHOLDER,
                "Amount of CRIDA tokens to lock (in wei)",
            ),
            FormField("game_name", "Game Token Name", "My Game Token"),
            FormField("game_symbol", "Game Token Symbol", "MGT"),
            DECIMALS,
        ),
    ),
    EndpointName.FLOW_BURN: EndpointDef(
        name=EndpointName.FLOW_BURN,
        label="Burn Token Flow",
        method="POST",
        path="/api/v1/flow/burn",
        fields=(
            FACTORY_ADDRESS,
            FormField(
                "game_token_address",
                "Game Token Address",
                "0xabcd...",
                "Ethereum address of the game token contract",
            ),
            GAME_ID,
            FormField(
                "burn_amount",
                "Burn Amount",
                _BURN_PLACEHOLDER,
                "Amount of game tokens to burn (in wei)",
            ),
        ),
    ),
}

_missing = set(EndpointName) - set(ENDPOINTS)
if _missing:
    raise RuntimeError(f"Endpoint table incomplete: {sorted(n.value for n in _missing)}")


def get_endpoint(name: str | EndpointName) -> EndpointDef:
    """Look up an endpoint by name.

    Raises:
        UnknownEndpointError: If name is not a known endpoint
    """
    try:
        key = EndpointName(name)
    except ValueError:
        raise UnknownEndpointError(str(name)) from None
    return ENDPOINTS[key]


def list_endpoints() -> list[EndpointDef]:
    """All endpoints in selector order."""
    return [ENDPOINTS[name] for name in EndpointName]
