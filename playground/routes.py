"""
Playground API routes.

Backs the browser playground: lists endpoints, renders their forms,
builds request descriptors and dispatches them (demo or live).

Mounted under /playground so it never collides with the proxied /api
namespace.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from .dispatch import RequestDispatcher
from .endpoints import get_endpoint, list_endpoints
from .forms import build_request, render_form_html

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Playground"])


# =============================================================================
# Request/Response Models
# =============================================================================


class FormSubmission(BaseModel):
    """A filled-in playground form."""
    endpoint: str = Field(..., description="Endpoint name, e.g. 'lock-creda'")
    values: dict[str, Any] = Field(default_factory=dict, description="Form values by field name")


class RequestDescriptorResponse(BaseModel):
    """Request the playground would send upstream."""
    url: str
    method: str
    body: dict[str, Any] | None = None


class SendResponse(BaseModel):
    """Outcome of a submission, ready for display."""
    request: RequestDescriptorResponse | None = None
    response: Any = None
    text: str = Field(..., description="Pretty-printed response")


# =============================================================================
# Dependencies
# =============================================================================


def get_dispatcher(request: Request) -> RequestDispatcher:
    """Get dispatcher from app state."""
    return request.app.state.dispatcher


def get_settings(request: Request):
    """Get settings from app state."""
    return request.app.state.settings


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/health")
async def health(settings=Depends(get_settings)):
    return {
        "status": "healthy",
        "service": "calldata-playground",
        "mode": settings.mode,
        "api_url": settings.upstream_base,
    }


@router.get("/endpoints")
async def endpoints():
    """List selectable endpoints with their form fields."""
    return {"endpoints": [e.to_dict() for e in list_endpoints()]}


@router.get("/endpoints/{name}")
async def endpoint_form(name: str):
    """
    Get one endpoint with its rendered form.

    The `html` fragment replaces the form container contents when the
    endpoint is selected. Unknown names return 404.
    """
    endpoint = get_endpoint(name)
    return {**endpoint.to_dict(), "html": render_form_html(name)}


@router.post("/request", response_model=RequestDescriptorResponse)
async def preview_request(submission: FormSubmission):
    """Build the request descriptor without sending it."""
    return build_request(submission.endpoint, submission.values).to_dict()


@router.post("/send", response_model=SendResponse)
async def send(
    submission: FormSubmission,
    dispatcher: RequestDispatcher = Depends(get_dispatcher),
):
    """
    Build and dispatch a request.

    Always answers 200; failures are reported in `response` as
    {"error": true, "message": ...} and unknown endpoints as
    {"error": "Unknown endpoint"}.
    """
    result = await dispatcher.submit(submission.endpoint, submission.values)
    return result.to_dict()
