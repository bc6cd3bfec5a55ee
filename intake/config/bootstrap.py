"""
One-time form initialization: date-of-birth bounds, today's display string
and the jurisdiction list. Everything returned here is immutable.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from intake.config.loader import FormConfig
from intake.settings import get_settings


@dataclass(frozen=True)
class DateBounds:
    min: date
    max: date

    def contains(self, d: date) -> bool:
        return self.min <= d <= self.max


@dataclass(frozen=True)
class FormBootstrap:
    dob_bounds: DateBounds
    today_display: str
    jurisdictions: tuple[str, ...]


def dob_bounds(today: date, max_age_years: Optional[int] = None) -> DateBounds:
    """Oldest accepted birth date is max_age_years before today; newest is today."""
    if max_age_years is None:
        max_age_years = get_settings().dob_max_age_years
    return DateBounds(min=today - relativedelta(years=max_age_years), max=today)


def long_date(d: date) -> str:
    """e.g. 'Monday, October 19, 2026'"""
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def initialize_form(config: FormConfig, today: Optional[date] = None) -> FormBootstrap:
    today = today or date.today()
    return FormBootstrap(
        dob_bounds=dob_bounds(today),
        today_display=long_date(today),
        jurisdictions=config.jurisdictions,
    )
