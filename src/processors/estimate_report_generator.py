import openpyxl
from openpyxl.styles import Font, Alignment, Border, Side
from io import BytesIO
from typing import List, Optional
from models.salary import SalaryInput, DerivedResult
from utils.formatters import format_hours

YEN_FORMAT = '"￥"#,##0'


class EstimateReportGenerator:
    """Generate a salary estimate Excel workbook in memory"""

    def generate(self, salary_input: SalaryInput, result: DerivedResult,
                 errors: Optional[List[str]] = None) -> BytesIO:
        """Build the estimate workbook and return it as a stream"""

        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "Salary Estimate"

        # Set column widths
        ws.column_dimensions['A'].width = 40
        ws.column_dimensions['B'].width = 18
        ws.column_dimensions['C'].width = 18
        ws.column_dimensions['D'].width = 12

        # Define styles
        header_font = Font(bold=True, size=12)
        bold_font = Font(bold=True)
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        row = 1
        ws[f'A{row}'] = "SALARY ESTIMATE"
        ws[f'A{row}'].font = header_font

        # Input table
        row = 3
        ws[f'A{row}'] = "Input"
        ws[f'B{row}'] = "Minimum"
        ws[f'C{row}'] = "Maximum"
        ws[f'D{row}'] = "Hours"
        for cell in [f'A{row}', f'B{row}', f'C{row}', f'D{row}']:
            ws[cell].font = bold_font
            ws[cell].border = thin_border

        input_rows = [
            ("Base salary", salary_input.base_salary_min, salary_input.base_salary_max, None),
            ("Fixed overtime", salary_input.overtime_fixed.amount_min,
             salary_input.overtime_fixed.amount_max, salary_input.overtime_fixed.hours),
            ("Average overtime", salary_input.overtime_average.amount_min,
             salary_input.overtime_average.amount_max, salary_input.overtime_average.hours),
            ("Bonus (annual)", salary_input.bonus, salary_input.bonus, None),
        ]

        row = 4
        for label, minimum, maximum, hours in input_rows:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = minimum
            ws[f'C{row}'] = maximum
            ws[f'D{row}'] = hours if hours is not None else ""
            ws[f'B{row}'].number_format = YEN_FORMAT
            ws[f'C{row}'].number_format = YEN_FORMAT
            row += 1

        # Result table
        row += 1
        ws[f'A{row}'] = "Item"
        ws[f'B{row}'] = "Minimum"
        ws[f'C{row}'] = "Maximum"
        for cell in [f'A{row}', f'B{row}', f'C{row}']:
            ws[cell].font = bold_font
            ws[cell].border = thin_border
        row += 1

        result_rows = [
            ("Monthly salary (base + overtime)", result.monthly_min, result.monthly_max),
            (f"Hourly rate (assumed {format_hours(result.total_hours)} hours/month)",
             result.hourly_min, result.hourly_max),
            ("Annual salary (bonus included)", result.annual_min, result.annual_max),
        ]

        for label, minimum, maximum in result_rows:
            ws[f'A{row}'] = label
            ws[f'B{row}'] = float(minimum)
            ws[f'C{row}'] = float(maximum)
            for cell in [f'B{row}', f'C{row}']:
                ws[cell].number_format = YEN_FORMAT
                ws[cell].alignment = Alignment(horizontal='right')
            row += 1

        # Validation warnings
        if errors:
            row += 1
            ws[f'A{row}'] = "Warnings"
            ws[f'A{row}'].font = bold_font
            row += 1
            for message in errors:
                ws[f'A{row}'] = message
                row += 1

        stream = BytesIO()
        wb.save(stream)
        stream.seek(0)
        return stream
