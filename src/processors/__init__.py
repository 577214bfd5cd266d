from .salary_calculator import derive, total_work_hours, BASE_WORK_HOURS
from .estimate_report_generator import EstimateReportGenerator


__all__ = [
    'derive',
    'total_work_hours',
    'BASE_WORK_HOURS',
    'EstimateReportGenerator'
]
