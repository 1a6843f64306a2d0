from datetime import datetime
from io import BytesIO

import pandas as pd
from openpyxl.styles import PatternFill
from openpyxl.utils import get_column_letter

SHEET_NAME = "BMI Series"

category_fills = {
    "Underweight": PatternFill(start_color="BDD7EE", end_color="BDD7EE", fill_type="solid"),
    "Normal": PatternFill(start_color="D8E4BC", end_color="D8E4BC", fill_type="solid"),
    "Overweight": PatternFill(start_color="FFFF99", end_color="FFFF99", fill_type="solid"),
    "Obese": PatternFill(start_color="E6B8B7", end_color="E6B8B7", fill_type="solid"),
}


def export_to_excel(output_df: pd.DataFrame) -> BytesIO:
    output = BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        output_df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        worksheet = writer.sheets[SHEET_NAME]

        for col_idx, column_cells in enumerate(worksheet.columns, 1):
            max_length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column_cells)
            worksheet.column_dimensions[get_column_letter(col_idx)].width = max_length + 2

        if 'category' in output_df.columns:
            category_col = list(output_df.columns).index('category')
            for row in worksheet.iter_rows(min_row=2, min_col=1, max_col=worksheet.max_column):
                fill = category_fills.get(row[category_col].value)
                if fill is not None:
                    for cell in row:
                        cell.fill = fill

    output.seek(0)
    return output


def export_to_csv(output_df: pd.DataFrame) -> bytes:
    return output_df.to_csv(index=False).encode("utf-8")


def export_filename(height_cm, ext, now=None):
    now = now or datetime.now()
    timestamp = now.strftime("%d %b - %H%M")
    return f"bmi_series_{height_cm:g}cm_{timestamp}.{ext}"
