from .salary import (
    FIELD_PATHS,
    HOURS_PATHS,
    AMOUNT_PATHS,
    OvertimeInput,
    SalaryInput,
    DerivedResult,
)

__all__ = [
    'FIELD_PATHS',
    'HOURS_PATHS',
    'AMOUNT_PATHS',
    'OvertimeInput',
    'SalaryInput',
    'DerivedResult'
]
