"""
Canonical data models for the intake validation engine.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# ─── Enums ──────────────────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    MISSING = "missing"
    FORMAT = "format"
    SEMANTIC = "semantic"


# ─── Form snapshot ───────────────────────────────────────────────────────────

class FormInput(BaseModel):
    """Everything the form currently holds, addressed by field / group id."""
    values: dict[str, str] = Field(default_factory=dict)
    choices: dict[str, Optional[str]] = Field(default_factory=dict)
    checked: list[str] = Field(default_factory=list)

    def value(self, field_id: str) -> str:
        return self.values.get(field_id) or ""

    def with_value(self, field_id: str, value: str) -> "FormInput":
        return self.model_copy(update={"values": {**self.values, field_id: value}})


# ─── Validation models ───────────────────────────────────────────────────────

class ValidationResult(BaseModel):
    field_id: str
    valid: bool = True
    message: Optional[str] = None
    kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, field_id: str) -> "ValidationResult":
        return cls(field_id=field_id)

    @classmethod
    def invalid(cls, field_id: str, message: str, kind: ErrorKind) -> "ValidationResult":
        return cls(field_id=field_id, valid=False, message=message, kind=kind)


class FieldChange(BaseModel):
    field_id: str
    value: str
    result: ValidationResult
    form: FormInput


# ─── Review models ───────────────────────────────────────────────────────────

class ReviewLine(BaseModel):
    label: str
    value: str


class ReviewModel(BaseModel):
    lines: list[ReviewLine] = Field(default_factory=list)

    def as_pairs(self) -> list[tuple[str, str]]:
        return [(line.label, line.value) for line in self.lines]

    def get(self, label: str) -> Optional[str]:
        for line in self.lines:
            if line.label == label:
                return line.value
        return None


class ReviewOutcome(BaseModel):
    field_results: dict[str, ValidationResult] = Field(default_factory=dict)
    password_errors: list[str] = Field(default_factory=list)
    alert: Optional[str] = None
    review: Optional[ReviewModel] = None

    @property
    def invalid_fields(self) -> list[str]:
        return [fid for fid, r in self.field_results.items() if not r.valid]

    @property
    def accepted(self) -> bool:
        return self.review is not None


# ─── API models ──────────────────────────────────────────────────────────────

class FieldChangeRequest(BaseModel):
    value: str = ""
    form: FormInput = Field(default_factory=FormInput)


class FieldRuleOut(BaseModel):
    id: str
    label: str
    required: bool


class FormBootstrapResponse(BaseModel):
    form_type: str
    dob_min: str
    dob_max: str
    today_display: str
    jurisdictions: list[str]
    fields: list[FieldRuleOut]
