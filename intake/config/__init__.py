from intake.config.loader import (
    CheckboxGroup, ChoiceGroup, FieldRule, FormConfig, UnknownFieldError, load_config,
)
from intake.config.bootstrap import DateBounds, FormBootstrap, dob_bounds, initialize_form, long_date

__all__ = [
    "CheckboxGroup", "ChoiceGroup", "FieldRule", "FormConfig", "UnknownFieldError", "load_config",
    "DateBounds", "FormBootstrap", "dob_bounds", "initialize_form", "long_date",
]
