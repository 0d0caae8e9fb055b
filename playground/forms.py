"""
Form rendering and request building.

Turns an endpoint name into the inputs the user has to fill in, and a
filled-in form into a request descriptor for the upstream API.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from html import escape
from typing import Any

from .endpoints import EndpointDef, FieldKind, FormField, get_endpoint

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class RequestDescriptor:
    """Request to send to the upstream API.

    Attributes:
        url: Path relative to the API base URL
        method: HTTP method
        body: JSON body, None for GET
    """

    url: str
    method: str
    body: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "method": self.method, "body": self.body}


def parse_int(value: Any) -> int | None:
    """Parse the leading integer of a form value.

    "18" -> 18, " 7px" -> 7, "" -> None, "abc" -> None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def render_form(name: str) -> tuple[FormField, ...]:
    """Fields to show for an endpoint.

    Raises:
        UnknownEndpointError: If name is not a known endpoint
    """
    return get_endpoint(name).fields


def _render_field(field: FormField) -> str:
    attrs = [
        f'type="{field.kind.value}"',
        'class="form-control"',
        f'id="{escape(field.name)}"',
        f'name="{escape(field.name)}"',
        f'placeholder="{escape(field.placeholder)}"',
    ]
    if field.min_value is not None:
        attrs.append(f'min="{field.min_value}"')
    if field.max_value is not None:
        attrs.append(f'max="{field.max_value}"')

    lines = [
        '<div class="mb-3">',
        f'    <label for="{escape(field.name)}" class="form-label">{escape(field.label)}</label>',
        f"    <input {' '.join(attrs)}>",
    ]
    if field.help_text:
        lines.append(f'    <div class="form-text">{escape(field.help_text)}</div>')
    lines.append("</div>")
    return "\n".join(lines)


def render_form_html(name: str) -> str:
    """HTML fragment for an endpoint's form. Empty for endpoints without fields."""
    return "\n".join(_render_field(f) for f in render_form(name))


def build_body(endpoint: EndpointDef, values: Mapping[str, Any]) -> dict[str, Any] | None:
    """Assemble the JSON body from submitted form values.

    Keys are exactly the endpoint's field names; anything else in values
    is ignored.
    """
    if endpoint.method == "GET":
        return None

    body: dict[str, Any] = {}
    for field in endpoint.fields:
        raw = values.get(field.name)
        if field.kind == FieldKind.NUMBER:
            body[field.name] = parse_int(raw)
        else:
            body[field.name] = "" if raw is None else str(raw)
    return body


def build_request(name: str, values: Mapping[str, Any] | None = None) -> RequestDescriptor:
    """Build the request descriptor for a submitted form.

    Raises:
        UnknownEndpointError: If name is not a known endpoint
    """
    endpoint = get_endpoint(name)
    return RequestDescriptor(
        url=endpoint.path,
        method=endpoint.method,
        body=build_body(endpoint, values or {}),
    )
