from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .calculator import calculate
from .models import ProductRow
from .settings import Settings, load_settings
from .validation import INCOMPLETE_DATA, is_complete

logger = logging.getLogger(__name__)

ERROR_COLUMN = "Error"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


RAW_COLUMNS: Tuple[Tuple[str, Callable[[ProductRow], object]], ...] = (
    ("Product Name", lambda r: r.product_name),
    ("Weight (kg)", lambda r: r.weight),
    ("Temperature (°C)", lambda r: r.temperature),
    ("Density (kg/m³)", lambda r: r.density),
    ("Category", lambda r: r.category),
)

RESULT_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("Shelf Life (Chilled)", "shelf_life_chilled"),
    ("Shelf Life (Frozen)", "shelf_life_frozen"),
    ("Required Humidity (%)", "humidity"),
    ("Required Moisture (%)", "moisture"),
    ("Pre-chilling Needed", "pre_chilling"),
    ("Dry Condition Needed", "dry_condition"),
    ("AC Required (TR)", "ac_required_tons"),
    ("Storage Volume (m³)", "volume_cubic_meters"),
    ("Power Consumption (24hrs) kWh", "power_per_24h_kwh"),
    ("Power per Hour (kW)", "power_per_hour_kw"),
    ("Units per 24hrs", "units_per_24h"),
)

# etiquetas en orden de columna (crudas + calculadas)
EXPORT_COLUMNS: List[str] = [label for label, _ in RAW_COLUMNS + RESULT_COLUMNS]


# ----------------------------- helpers de estilo -----------------------------
_THIN = Side(style="thin", color="000000")
_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)

F_HEADER = PatternFill("solid", fgColor="E9EDF3")
F_ERROR = PatternFill("solid", fgColor="FDECEA")

FONT_HEADER = Font(name="Calibri", bold=True, size=11, color="000000")
FONT_CELL = Font(name="Calibri", size=11, color="000000")


def _autosize(ws) -> None:
    """Autoajuste simple por ancho de texto."""
    for col in ws.columns:
        max_len = 0
        col_letter = get_column_letter(col[0].column)
        for cell in col:
            v = "" if cell.value is None else str(cell.value)
            if len(v) > max_len:
                max_len = len(v)
        ws.column_dimensions[col_letter].width = max(10, min(60, max_len + 2))


def _style_sheet(ws) -> None:
    error_col = None
    for cell in ws[1]:
        cell.font = FONT_HEADER
        cell.fill = F_HEADER
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
        cell.border = _BORDER
        if cell.value == ERROR_COLUMN:
            error_col = cell.column
    for row in ws.iter_rows(min_row=2):
        flagged = error_col is not None and row[error_col - 1].value
        for cell in row:
            cell.font = FONT_CELL
            cell.border = _BORDER
            cell.alignment = Alignment(vertical="center")
            if flagged:
                cell.fill = F_ERROR
    ws.freeze_panes = "A2"
    _autosize(ws)


# ----------------------------- registros -----------------------------
def build_export_record(row: ProductRow) -> Dict[str, object]:
    record = {label: getter(row) for label, getter in RAW_COLUMNS}
    if not is_complete(row):
        record[ERROR_COLUMN] = INCOMPLETE_DATA
        return record
    values = calculate(row.category, row.weight, row.temperature, row.density).as_dict()
    for label, key in RESULT_COLUMNS:
        val = values[key]
        record[label] = _yes_no(val) if isinstance(val, bool) else val
    return record


def build_export_records(rows: Iterable[ProductRow]) -> List[Dict[str, object]]:
    return [build_export_record(r) for r in rows]


def records_to_dataframe(records: List[Dict[str, object]]) -> pd.DataFrame:
    columns = list(EXPORT_COLUMNS)
    if any(ERROR_COLUMN in r for r in records):
        columns.append(ERROR_COLUMN)
    return pd.DataFrame.from_records(records, columns=columns)


def export_filename(prefix: str, today: Optional[date] = None) -> str:
    return f"{prefix}_{(today or date.today()).isoformat()}.xlsx"


def export_to_excel(
    rows: Iterable[ProductRow],
    out_dir: Optional[Path | str] = None,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> Path:
    """
    Escribe el libro ``<prefijo>_AAAA-MM-DD.xlsx`` con una fila por producto.
    Las filas incompletas se listan con sus datos crudos y la columna Error.
    """
    rows = list(rows)
    if not rows:
        raise ValueError("No data to export")
    settings = settings or load_settings()

    records = build_export_records(rows)
    df = records_to_dataframe(records)
    sheet = settings.sheet_name[:31]  # límite de Excel

    folder = Path(out_dir) if out_dir is not None else settings.output_dir
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / export_filename(settings.file_prefix, today)

    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet, index=False)
        _style_sheet(writer.sheets[sheet])

    incomplete = sum(1 for r in records if ERROR_COLUMN in r)
    logger.info("Exportado %s (%d filas, %d incompletas)", path, len(records), incomplete)
    return path
