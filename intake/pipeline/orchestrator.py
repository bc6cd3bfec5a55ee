"""
Form event orchestrator.
Ties together: normalization -> field validation -> password policy -> review.

Two entry points, one per form event:
- apply_change: a single field changed (keystroke / blur).
- request_review: the user asked to review. All fields are validated first,
  then the password policy, and only then is the review composed.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from intake.config import FormConfig, load_config
from intake.models import FieldChange, FormInput, ReviewOutcome
from intake.review import compose_review
from intake.settings import get_settings
from intake.validators import (
    ValidationContext, check_password, format_alert, normalize_value, validate_field, validate_form,
)
from intake.logging_config import get_logger

logger = get_logger("pipeline")


def _config(config: Optional[FormConfig]) -> FormConfig:
    return config or load_config(get_settings().form_type)


def apply_change(
    form: FormInput,
    field_id: str,
    value: str,
    config: Optional[FormConfig] = None,
    today: Optional[date] = None,
) -> FieldChange:
    """
    Normalize the new value, store it in a fresh snapshot and validate it
    against that snapshot. The input snapshot is left untouched.
    """
    config = _config(config)
    rule = config.rule(field_id)

    normalized = normalize_value(value, rule)
    updated = form.with_value(field_id, normalized)
    result = validate_field(normalized, rule, ValidationContext.for_form(updated, today))

    logger.debug("field_validated", field=field_id, valid=result.valid)
    return FieldChange(field_id=field_id, value=normalized, result=result, form=updated)


def request_review(
    form: FormInput,
    config: Optional[FormConfig] = None,
    today: Optional[date] = None,
) -> ReviewOutcome:
    config = _config(config)
    log = logger.bind(form_type=config.form_type)

    # ── 1. Batch field validation ───────────────────────────────────────────
    results = validate_form(form, config, today)
    outcome = ReviewOutcome(field_results=results)
    if outcome.invalid_fields:
        log.info("review_blocked", reason="invalid_fields", fields=outcome.invalid_fields)
        return outcome

    # ── 2. Password policy ──────────────────────────────────────────────────
    errors = check_password(
        form.value("password"),
        form.value("confirmPassword"),
        form.value("userID"),
        form.value("fname"),
        form.value("lname"),
    )
    if errors:
        outcome.password_errors = errors
        outcome.alert = format_alert(errors)
        log.info("review_blocked", reason="password_policy", violations=len(errors))
        return outcome

    # ── 3. Review ───────────────────────────────────────────────────────────
    outcome.review = compose_review(form, config)
    log.info("review_composed", lines=len(outcome.review.lines))
    return outcome
