from intake.validators.normalizers import normalize_value, display_value, NormalizationError
from intake.validators.rules import validate_field, validate_form, register_hook, ValidationContext
from intake.validators.password import check_password, format_alert

__all__ = [
    "normalize_value", "display_value", "NormalizationError",
    "validate_field", "validate_form", "register_hook", "ValidationContext",
    "check_password", "format_alert",
]
