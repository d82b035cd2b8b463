"""
FastAPI routes for the FormValidator demo.

Endpoints:
- POST /forms/signup/validate - validate one sign-up submission
- GET  /forms/signup          - describe the sign-up form's fields and rules
- GET  /flows                 - list the available flows
- GET  /health                - health check
"""

import logging
from enum import Enum

from fastapi import APIRouter
from pydantic import BaseModel, Field

from formvalidator.api.signup_form import build_signup_form
from formvalidator.core.form import Flow

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Settings ---


class BannerSettings(BaseModel):
    """How the transient error banner is presented to the client."""

    title: str = "Validation Error"
    visible_duration_ms: int = Field(default=3000, ge=0)


# Injected by the app factory
_banner_settings = BannerSettings()


def configure_routes(banner_settings: BannerSettings | None = None):
    """Inject the banner settings into the routes module.

    Called by the app factory during startup.
    """
    global _banner_settings
    _banner_settings = banner_settings or BannerSettings()


# --- Request / Response Models ---


class DisplayMode(str, Enum):
    """How the client shows validation errors."""

    INLINE = "inline"
    BANNER = "banner"


class SignupRequest(BaseModel):
    """Request body for the sign-up validation endpoint."""

    name: str = ""
    age: str = ""
    email: str = ""
    flow: Flow = Flow.DOWN
    display: DisplayMode = DisplayMode.INLINE


class Banner(BaseModel):
    """Transient error banner shown when the form fails in banner mode."""

    title: str
    message: str | None
    visible_duration_ms: int


class SignupResponse(BaseModel):
    """Response body for the sign-up validation endpoint."""

    valid: bool
    error_message: str | None = None
    field_errors: dict[str, str | None] = Field(default_factory=dict)
    banner: Banner | None = None


# --- Endpoints ---


@router.post("/forms/signup/validate", response_model=SignupResponse)
async def validate_signup(request: SignupRequest):
    """Validate a sign-up submission under the requested flow.

    In inline mode every field's displayed error is returned. In banner
    mode only the form-level message is shown, via the banner.
    """
    displayed: dict[str, str | None] = {}

    def show_field_error(field_name: str, message: str | None) -> None:
        displayed[field_name] = message

    inline = request.display is DisplayMode.INLINE
    form = build_signup_form(
        name=request.name,
        age=request.age,
        email=request.email,
        flow=request.flow,
        on_error=show_field_error if inline else None,
    )

    banner: Banner | None = None

    def show_banner(valid: bool) -> None:
        nonlocal banner
        if not valid and not inline:
            banner = Banner(
                title=_banner_settings.title,
                message=form.overall_error_message,
                visible_duration_ms=_banner_settings.visible_duration_ms,
            )

    form.on_validate = show_banner
    valid = form.validate()

    logger.info(
        "Sign-up validated (flow=%s, display=%s): valid=%s",
        request.flow.value,
        request.display.value,
        valid,
    )

    return SignupResponse(
        valid=valid,
        error_message=form.overall_error_message,
        field_errors=displayed,
        banner=banner,
    )


@router.get("/forms/signup")
async def describe_signup():
    """List the sign-up form's fields in order with their rule kinds."""
    form = build_signup_form(name="", age="", email="")
    return {
        "fields": [
            {"name": field.name, "rule": field.rule.kind.value}
            for field in form.fields
        ]
    }


@router.get("/flows")
async def list_flows():
    """List the available flows and their fallback messages."""
    return {
        "flows": [
            {"flow": flow.value, "fallback_error_message": flow.fallback_error_message}
            for flow in Flow
        ]
    }


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
