import logging
from models.salary import SalaryInput, DerivedResult
from config.settings import BASE_WORK_DAYS_PER_MONTH, WORK_HOURS_PER_DAY, MONTHS_PER_YEAR, MAX_AMOUNT

logger = logging.getLogger(__name__)

BASE_WORK_HOURS = BASE_WORK_DAYS_PER_MONTH * WORK_HOURS_PER_DAY


def _bounded(value: int) -> int:
    """Clamp a field value into [-MAX_AMOUNT, MAX_AMOUNT]"""
    return max(-MAX_AMOUNT, min(value, MAX_AMOUNT))


def total_work_hours(salary_input: SalaryInput) -> float:
    """Assumed monthly working hours

    Average overtime hours take precedence over fixed overtime hours.
    """
    overtime_hours = salary_input.overtime_average.hours or salary_input.overtime_fixed.hours or 0
    return BASE_WORK_HOURS + _bounded(overtime_hours)


def derive(salary_input: SalaryInput) -> DerivedResult:
    """Compute monthly, hourly and annual salary ranges

    Only the fixed overtime amounts are added to the monthly salary; the
    average overtime only changes the assumed working hours. Range
    violations in the input are not corrected here, but values outside the
    field limit are clamped to it (the validator flags them).
    """
    total_hours = total_work_hours(salary_input)

    # Monthly salary (base + fixed overtime)
    monthly_min = _bounded(salary_input.base_salary_min) + _bounded(salary_input.overtime_fixed.amount_min)
    monthly_max = _bounded(salary_input.base_salary_max) + _bounded(salary_input.overtime_fixed.amount_max)

    # Hourly rate
    hourly_min = monthly_min / total_hours if total_hours > 0 else 0.0
    hourly_max = monthly_max / total_hours if total_hours > 0 else 0.0

    # Annual salary (bonus included)
    bonus = _bounded(salary_input.bonus)
    annual_min = monthly_min * MONTHS_PER_YEAR + bonus
    annual_max = monthly_max * MONTHS_PER_YEAR + bonus

    result = DerivedResult(
        total_hours=total_hours,
        monthly_min=monthly_min,
        monthly_max=monthly_max,
        hourly_min=hourly_min,
        hourly_max=hourly_max,
        annual_min=annual_min,
        annual_max=annual_max,
    )
    logger.debug("Derived %s", result)
    return result
