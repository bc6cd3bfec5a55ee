"""
FastAPI API routes:
- GET  /v1/form
- POST /v1/fields/{field_id}
- POST /v1/review

Validation failures are part of the response body, never HTTP errors.
"""
from fastapi import APIRouter, HTTPException

from intake.config import UnknownFieldError, initialize_form, load_config
from intake.models import (
    FieldChange, FieldChangeRequest, FieldRuleOut, FormBootstrapResponse, FormInput, ReviewOutcome,
)
from intake.pipeline import apply_change, request_review
from intake.settings import get_settings
from intake.logging_config import get_logger

logger = get_logger("api")
router = APIRouter()


@router.get("/v1/form", response_model=FormBootstrapResponse)
def get_form():
    """Initialization data for the form: DOB bounds, today's date, jurisdictions, rules."""
    config = load_config(get_settings().form_type)
    boot = initialize_form(config)
    return FormBootstrapResponse(
        form_type=config.form_type,
        dob_min=boot.dob_bounds.min.isoformat(),
        dob_max=boot.dob_bounds.max.isoformat(),
        today_display=boot.today_display,
        jurisdictions=list(boot.jurisdictions),
        fields=[FieldRuleOut(id=r.id, label=r.label, required=r.required) for r in config.fields.values()],
    )


@router.post("/v1/fields/{field_id}", response_model=FieldChange)
def change_field(field_id: str, body: FieldChangeRequest):
    """Normalize and validate one changed field."""
    try:
        return apply_change(body.form, field_id, body.value)
    except UnknownFieldError:
        logger.warning("unknown_field", field=field_id)
        raise HTTPException(status_code=404, detail=f"Field {field_id} not found")


@router.post("/v1/review", response_model=ReviewOutcome)
def review_form(form: FormInput):
    return request_review(form)
