"""
pytest conftest: shared fixtures for unit tests.
"""
import os
import sys
from datetime import date

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

TODAY = date(2026, 10, 19)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def intake_config():
    from intake.config import load_config
    return load_config("patient_intake")


@pytest.fixture
def valid_form():
    """A snapshot that passes every field rule and the password policy."""
    from intake.models import FormInput
    return FormInput(
        values={
            "fname": "Jane",
            "minitial": "Q",
            "lname": "Doe",
            "DOB": "1990-05-17",
            "ssn": "123-45-6789",
            "AddressLine1": "12 Main St",
            "AddressLine2": "",
            "City": "Springfield",
            "State": "IL",
            "ZipCode": "62704-1234",
            "EmailAddress": "jane@example.com",
            "phone": "217-555-0100",
            "textbox": "Annual checkup",
            "PainScale": "3",
            "userID": "jdoe1",
            "password": "Abcdef1!",
            "confirmPassword": "Abcdef1!",
        },
        choices={"Gender": "Female", "vaccinated": "Yes", "insurance": "No"},
        checked=[],
    )


@pytest.fixture
def context_for(today):
    """Build a ValidationContext around a form snapshot."""
    from intake.validators import ValidationContext

    def _make(form=None):
        from intake.models import FormInput
        return ValidationContext.for_form(form or FormInput(), today)
    return _make
