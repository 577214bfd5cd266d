import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional
from models.salary import FIELD_PATHS, HOURS_PATHS, AMOUNT_PATHS, SalaryInput, DerivedResult
from processors.salary_calculator import derive
from utils.validators import normalize_numeric_text, validate, collect_error_messages
from utils.formatters import (
    format_amount_input,
    format_hours,
    format_hours_input,
    format_range,
    to_japanese_reading,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormSnapshot:
    """Everything the page needs to render the form once"""
    values: SalaryInput
    display: Dict[str, str]
    readings: Dict[str, str]
    result: DerivedResult
    errors: List[str]

    def formatted_result(self) -> Dict[str, str]:
        return {
            'monthly': format_range(self.result.monthly_min, self.result.monthly_max),
            'hourly': format_range(self.result.hourly_min, self.result.hourly_max),
            'annual': format_range(self.result.annual_min, self.result.annual_max),
            'total_hours': format_hours(self.result.total_hours),
        }

    def to_dict(self) -> Dict:
        return {
            'values': self.values.to_dict(),
            'display': self.display,
            'readings': self.readings,
            'result': self.result.to_dict(),
            'formatted': self.formatted_result(),
            'errors': self.errors,
        }


class SalaryForm:
    """One salary estimation form session

    Every field change normalizes the raw text, stores it and recomputes
    the derived figures and validation messages.
    """

    def __init__(self, salary_input: Optional[SalaryInput] = None):
        self.salary_input = salary_input if salary_input is not None else SalaryInput.defaults()

    def update_field(self, path: str, raw_text: Optional[str]) -> FormSnapshot:
        """Apply one keystroke's worth of field text and recompute"""
        value = normalize_numeric_text(raw_text)
        self.salary_input.set_field(path, value)
        logger.debug("Field %s set to %s", path, value)
        return self.snapshot()

    def update_fields(self, raw_fields: Mapping[str, Optional[str]]) -> FormSnapshot:
        """Apply several raw field texts at once and recompute"""
        unknown = [path for path in raw_fields if path not in FIELD_PATHS]
        if unknown:
            raise KeyError(f"Unknown field(s): {', '.join(sorted(unknown))}")
        for path, raw_text in raw_fields.items():
            self.salary_input.set_field(path, normalize_numeric_text(raw_text))
        logger.debug("Updated %d field(s)", len(raw_fields))
        return self.snapshot()

    def snapshot(self) -> FormSnapshot:
        values = self.salary_input.copy()
        display = {}
        for path in FIELD_PATHS:
            value = values.get_field(path)
            display[path] = format_hours_input(value) if path in HOURS_PATHS else format_amount_input(value)
        readings = {path: to_japanese_reading(values.get_field(path)) for path in AMOUNT_PATHS}
        return FormSnapshot(
            values=values,
            display=display,
            readings=readings,
            result=derive(values),
            errors=collect_error_messages(validate(values)),
        )
