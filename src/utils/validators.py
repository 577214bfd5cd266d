import re
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union
from models.salary import FIELD_PATHS, HOURS_PATHS, SalaryInput
from config.settings import MAX_OVERTIME_HOURS, MAX_AMOUNT

logger = logging.getLogger(__name__)

NON_DIGITS = re.compile(r'[^0-9]')

BASE_SALARY_RANGE_MESSAGE = "Minimum base salary must be less than or equal to maximum base salary."
FIXED_OVERTIME_RANGE_MESSAGE = "Minimum fixed overtime pay must be less than or equal to maximum fixed overtime pay."
AVERAGE_OVERTIME_RANGE_MESSAGE = "Minimum average overtime pay must be less than or equal to maximum average overtime pay."
NEGATIVE_AMOUNT_MESSAGE = "Amount must be 0 or greater."
HOURS_OUT_OF_RANGE_MESSAGE = f"Overtime hours must be between 0 and {MAX_OVERTIME_HOURS}."
AMOUNT_TOO_LARGE_MESSAGE = f"Amount must be less than {MAX_AMOUNT:,}."

# (min path, max path, message); the message is attached to the min field
RANGE_RULES: Tuple[Tuple[str, str, str], ...] = (
    ("base_salary_min", "base_salary_max", BASE_SALARY_RANGE_MESSAGE),
    ("overtime_fixed.amount_min", "overtime_fixed.amount_max", FIXED_OVERTIME_RANGE_MESSAGE),
    ("overtime_average.amount_min", "overtime_average.amount_max", AVERAGE_OVERTIME_RANGE_MESSAGE),
)


@dataclass(frozen=True)
class FieldError:
    """Validation message attached to a single field"""
    message: str


ErrorTree = Dict[str, Union[FieldError, "ErrorTree"]]


def normalize_numeric_text(raw: Optional[str]) -> int:
    """Strip everything but digits from field text; empty text means 0

    Values saturate at MAX_AMOUNT, so overlong text is flagged rather than
    parsed.
    """
    digits = NON_DIGITS.sub('', str(raw)).lstrip('0') if raw is not None else ''
    if not digits:
        return 0
    if len(digits) > len(str(MAX_AMOUNT)):
        return MAX_AMOUNT
    return min(int(digits), MAX_AMOUNT)


def validate_amount(amount: int) -> bool:
    """Validate an amount is non-negative and below the field limit"""
    return 0 <= amount < MAX_AMOUNT


def validate_overtime_hours(hours: int) -> bool:
    """Validate overtime hours are within the monthly limit"""
    return 0 <= hours <= MAX_OVERTIME_HOURS


def _field_violations(salary_input: SalaryInput) -> List[Tuple[str, str]]:
    violations = []
    for path in FIELD_PATHS:
        value = salary_input.get_field(path)
        if path in HOURS_PATHS:
            if not validate_overtime_hours(value):
                violations.append((path, HOURS_OUT_OF_RANGE_MESSAGE))
        elif not validate_amount(value):
            violations.append((path, NEGATIVE_AMOUNT_MESSAGE if value < 0 else AMOUNT_TOO_LARGE_MESSAGE))
    return violations


def _range_violations(salary_input: SalaryInput) -> List[Tuple[str, str]]:
    violations = []
    for min_path, max_path, message in RANGE_RULES:
        if salary_input.get_field(min_path) > salary_input.get_field(max_path):
            violations.append((min_path, message))
    return violations


def build_error_tree(violations: List[Tuple[str, str]]) -> ErrorTree:
    """Nest (dotted path, message) pairs; the first message per field wins"""
    order = {path: index for index, path in enumerate(FIELD_PATHS)}
    tree: ErrorTree = {}
    for path, message in sorted(violations, key=lambda v: order.get(v[0], len(order))):
        *parents, name = path.split(".")
        node = tree
        for parent in parents:
            node = node.setdefault(parent, {})
        node.setdefault(name, FieldError(message))
    return tree


def validate(salary_input: SalaryInput) -> ErrorTree:
    """Check field bounds and min/max ranges; never blocks calculation"""
    violations = _field_violations(salary_input) + _range_violations(salary_input)
    if violations:
        logger.debug("Validation warnings: %s", violations)
    return build_error_tree(violations)


def collect_error_messages(tree: ErrorTree) -> List[str]:
    """Flatten a nested error tree into its messages, in field order"""
    messages = []
    for node in tree.values():
        if isinstance(node, FieldError):
            messages.append(node.message)
        else:
            messages.extend(collect_error_messages(node))
    return messages
