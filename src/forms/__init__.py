from .salary_form import SalaryForm, FormSnapshot

__all__ = [
    'SalaryForm',
    'FormSnapshot'
]
