"""
Unit tests for per-field validation.
"""
from datetime import timedelta

import pytest

from intake.models import ErrorKind, FormInput
from intake.validators import validate_field, validate_form


def make_rule(field_id="test", label="Test", pattern=r"^\d{3}$", required=True):
    from intake.config.loader import FieldRule
    return FieldRule(id=field_id, label=label, pattern=pattern, required=required)


# ── Required / format ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["", "   ", None, "\t\n"])
def test_required_empty_is_missing(value, context_for):
    result = validate_field(value, make_rule(), context_for())
    assert not result.valid
    assert result.kind == ErrorKind.MISSING
    assert result.message == "Test is required."


def test_required_fields_report_only_required_message(intake_config, context_for):
    for rule in intake_config.fields.values():
        if not rule.required:
            continue
        result = validate_field("  ", rule, context_for())
        assert result.message == f"{rule.label} is required."


def test_optional_empty_is_valid(context_for):
    result = validate_field("", make_rule(required=False), context_for())
    assert result.valid
    assert result.message is None


def test_pattern_mismatch_is_format_error(context_for):
    result = validate_field("12a", make_rule(), context_for())
    assert not result.valid
    assert result.kind == ErrorKind.FORMAT
    assert result.message == "Invalid Test format."


def test_value_is_trimmed_before_pattern(context_for):
    assert validate_field("  123 ", make_rule(), context_for()).valid


def test_optional_field_still_checks_pattern(intake_config, context_for):
    result = validate_field("AB", intake_config.rule("minitial"), context_for())
    assert result.message == "Invalid Middle Initial format."


@pytest.mark.parametrize("field_id,value", [
    ("fname", "O'Brien-Smith"),
    ("lname", "Doe2"),
    ("ssn", "123-45-6789"),
    ("ZipCode", "12345"),
    ("ZipCode", "12345-6789"),
    ("EmailAddress", "a.b@c.org"),
    ("phone", "555-123-4567"),
    ("userID", "jdoe_01"),
    ("PainScale", "10"),
    ("PainScale", "1"),
])
def test_declared_patterns_accept(field_id, value, intake_config, context_for):
    assert validate_field(value, intake_config.rule(field_id), context_for()).valid


@pytest.mark.parametrize("field_id,value", [
    ("fname", "Jane1"),
    ("ssn", "123456789"),
    ("ZipCode", "1234"),
    ("ZipCode", "12345-67"),
    ("EmailAddress", "jane@example"),
    ("phone", "5551234567"),
    ("userID", "1jdoe"),
    ("userID", "jdo"),
    ("PainScale", "0"),
    ("PainScale", "11"),
    ("PainScale", "1abc"),
    ("City", "X"),
])
def test_declared_patterns_reject(field_id, value, intake_config, context_for):
    result = validate_field(value, intake_config.rule(field_id), context_for())
    assert result.kind == ErrorKind.FORMAT


@pytest.mark.parametrize("field_id,value", [
    ("ssn", "١٢٣-٤٥-٦٧٨٩"),
    ("phone", "٢١٧-٥٥٥-٠١٠٠"),
    ("ZipCode", "١٢٣٤٥"),
    ("DOB", "١٩٩٠-٠٥-١٧"),
    ("PainScale", "٣"),
])
def test_non_ascii_digits_rejected(field_id, value, intake_config, context_for):
    result = validate_field(value, intake_config.rule(field_id), context_for())
    assert result.kind == ErrorKind.FORMAT


def test_reason_for_visit_allows_multiple_lines(intake_config, context_for):
    result = validate_field("Headache\nsince Monday", intake_config.rule("textbox"), context_for())
    assert result.valid


# ── Date of birth ─────────────────────────────────────────────────────────────

def test_dob_today_is_valid(intake_config, context_for, today):
    result = validate_field(today.isoformat(), intake_config.rule("DOB"), context_for())
    assert result.valid


def test_dob_tomorrow_is_future(intake_config, context_for, today):
    tomorrow = (today + timedelta(days=1)).isoformat()
    result = validate_field(tomorrow, intake_config.rule("DOB"), context_for())
    assert result.kind == ErrorKind.SEMANTIC
    assert result.message == "Date cannot be in the future."


def test_dob_far_past_is_valid(intake_config, context_for):
    assert validate_field("1900-01-01", intake_config.rule("DOB"), context_for()).valid


def test_dob_impossible_calendar_date(intake_config, context_for):
    result = validate_field("2024-02-30", intake_config.rule("DOB"), context_for())
    assert result.message == "Invalid Date of Birth format."


def test_dob_format_checked_before_future(intake_config, context_for):
    result = validate_field("10/19/2030", intake_config.rule("DOB"), context_for())
    assert result.kind == ErrorKind.FORMAT


# ── Confirm password ───────────────────────────────────────────────────────────

def test_confirm_matches_password(intake_config, context_for):
    ctx = context_for(FormInput(values={"password": "Abcdef1!"}))
    assert validate_field("Abcdef1!", intake_config.rule("confirmPassword"), ctx).valid


def test_confirm_one_char_off(intake_config, context_for):
    ctx = context_for(FormInput(values={"password": "Abcdef1!"}))
    result = validate_field("Abcdef1?", intake_config.rule("confirmPassword"), ctx)
    assert result.kind == ErrorKind.SEMANTIC
    assert result.message == "Passwords do not match."


def test_confirm_format_error_wins_over_mismatch(intake_config, context_for):
    ctx = context_for(FormInput(values={"password": "Abcdef1!"}))
    result = validate_field("short", intake_config.rule("confirmPassword"), ctx)
    assert result.message == "Invalid Re-enter Password format."


# ── Batch sweep ────────────────────────────────────────────────────────────────

def test_validate_form_all_valid(valid_form, intake_config, today):
    results = validate_form(valid_form, intake_config, today)
    assert set(results) == set(intake_config.fields)
    assert all(r.valid for r in results.values())


def test_validate_form_reports_every_error(intake_config, today):
    results = validate_form(FormInput(values={"ssn": "bad"}), intake_config, today)
    invalid = {fid for fid, r in results.items() if not r.valid}
    required = {fid for fid, rule in intake_config.fields.items() if rule.required}
    assert invalid == required
    assert results["ssn"].kind == ErrorKind.FORMAT
    assert results["fname"].kind == ErrorKind.MISSING


def test_custom_hook_runs_after_pattern(context_for):
    from intake.validators.rules import FIELD_HOOKS, register_hook
    from intake.models import ValidationResult

    calls = []

    @register_hook("hooked")
    def _hook(value, rule, context):
        calls.append(value)
        return ValidationResult.invalid(rule.id, "nope", ErrorKind.SEMANTIC)

    try:
        rule = make_rule(field_id="hooked")
        assert validate_field("abc", rule, context_for()).kind == ErrorKind.FORMAT
        assert calls == []
        assert validate_field("123", rule, context_for()).message == "nope"
        assert calls == ["123"]
    finally:
        FIELD_HOOKS.pop("hooked", None)
