"""
Field validators.
Each field is checked against its declarative rule (required, pattern), then
against any hook registered for its id. Hooks only run once the pattern passes.
"""
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from dateutil import parser as dateutil_parser

from intake.config.bootstrap import DateBounds, dob_bounds
from intake.config.loader import FieldRule, FormConfig
from intake.models import ErrorKind, FormInput, ValidationResult
from intake.logging_config import get_logger

logger = get_logger("validators")


@dataclass(frozen=True)
class ValidationContext:
    """Sibling state a field hook may read. Never mutated."""
    form: FormInput
    today: date
    dob_bounds: DateBounds

    @classmethod
    def for_form(cls, form: FormInput, today: Optional[date] = None) -> "ValidationContext":
        today = today or date.today()
        return cls(form=form, today=today, dob_bounds=dob_bounds(today))


FieldHook = Callable[[str, FieldRule, ValidationContext], Optional[ValidationResult]]

FIELD_HOOKS: dict[str, FieldHook] = {}


def register_hook(field_id: str) -> Callable[[FieldHook], FieldHook]:
    def decorator(fn: FieldHook) -> FieldHook:
        FIELD_HOOKS[field_id] = fn
        return fn
    return decorator


def validate_field(value: Optional[str], rule: FieldRule, context: ValidationContext) -> ValidationResult:
    """
    Validate one field value against its rule.
    Missing beats format, format beats any field-specific hook.
    """
    value = (value or "").strip()

    if not value:
        if rule.required:
            return ValidationResult.invalid(rule.id, f"{rule.label} is required.", ErrorKind.MISSING)
        return ValidationResult.ok(rule.id)

    if rule.pattern and not rule.compiled_pattern.search(value):
        return _format_error(rule)

    hook = FIELD_HOOKS.get(rule.id)
    if hook is not None:
        result = hook(value, rule, context)
        if result is not None:
            return result

    return ValidationResult.ok(rule.id)


def validate_form(
    form: FormInput,
    config: FormConfig,
    today: Optional[date] = None,
) -> dict[str, ValidationResult]:
    """Validate every declared field. No short-circuit: all errors are reported."""
    context = ValidationContext.for_form(form, today)
    results = {}
    for fid, rule in config.fields.items():
        results[fid] = validate_field(form.value(fid), rule, context)
        if not results[fid].valid:
            logger.debug("field_invalid", field=fid, kind=results[fid].kind.value)
    return results


def _format_error(rule: FieldRule) -> ValidationResult:
    return ValidationResult.invalid(rule.id, f"Invalid {rule.label} format.", ErrorKind.FORMAT)


# ─── Field hooks ─────────────────────────────────────────────────────────────

@register_hook("DOB")
def _check_birth_date(value: str, rule: FieldRule, context: ValidationContext) -> Optional[ValidationResult]:
    try:
        born = dateutil_parser.isoparse(value).date()
    except (ValueError, OverflowError):
        # Shaped like a date but not one, e.g. 2024-02-30.
        return _format_error(rule)

    if born > context.dob_bounds.max:
        return ValidationResult.invalid(rule.id, "Date cannot be in the future.", ErrorKind.SEMANTIC)
    return None


@register_hook("confirmPassword")
def _check_confirmation(value: str, rule: FieldRule, context: ValidationContext) -> Optional[ValidationResult]:
    if value != context.form.value("password"):
        return ValidationResult.invalid(rule.id, "Passwords do not match.", ErrorKind.SEMANTIC)
    return None
