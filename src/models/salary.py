from dataclasses import dataclass, field, asdict, replace
from typing import Any, Dict, Tuple, Union

Number = Union[int, float]

# Editable fields in declaration order
FIELD_PATHS: Tuple[str, ...] = (
    "base_salary_min",
    "base_salary_max",
    "overtime_fixed.hours",
    "overtime_fixed.amount_min",
    "overtime_fixed.amount_max",
    "overtime_average.hours",
    "overtime_average.amount_min",
    "overtime_average.amount_max",
    "bonus",
)

HOURS_PATHS: Tuple[str, ...] = ("overtime_fixed.hours", "overtime_average.hours")

AMOUNT_PATHS: Tuple[str, ...] = tuple(p for p in FIELD_PATHS if p not in HOURS_PATHS)


@dataclass
class OvertimeInput:
    """Overtime hours and the paid amount range for them"""
    hours: int = 0
    amount_min: int = 0
    amount_max: int = 0


@dataclass
class SalaryInput:
    """Raw values of one salary estimation form"""
    base_salary_min: int = 0
    base_salary_max: int = 0
    overtime_fixed: OvertimeInput = field(default_factory=OvertimeInput)
    overtime_average: OvertimeInput = field(default_factory=OvertimeInput)
    bonus: int = 0

    @classmethod
    def defaults(cls) -> "SalaryInput":
        """Initial values shown when the form is opened"""
        return cls(
            base_salary_min=300000,
            base_salary_max=500000,
            overtime_fixed=OvertimeInput(hours=20, amount_min=60000, amount_max=120000),
            overtime_average=OvertimeInput(hours=10, amount_min=45000, amount_max=75000),
            bonus=500000,
        )

    def get_field(self, path: str) -> int:
        if path not in FIELD_PATHS:
            raise KeyError(f"Unknown field: {path}")
        target = self
        for name in path.split("."):
            target = getattr(target, name)
        return target

    def set_field(self, path: str, value: int) -> None:
        if path not in FIELD_PATHS:
            raise KeyError(f"Unknown field: {path}")
        *parents, name = path.split(".")
        target = self
        for parent in parents:
            target = getattr(target, parent)
        setattr(target, name, value)

    def copy(self) -> "SalaryInput":
        return replace(
            self,
            overtime_fixed=replace(self.overtime_fixed),
            overtime_average=replace(self.overtime_average),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DerivedResult:
    """Monthly, hourly and annual salary ranges computed from a SalaryInput"""
    total_hours: float
    monthly_min: Number
    monthly_max: Number
    hourly_min: float
    hourly_max: float
    annual_min: Number
    annual_max: Number

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
