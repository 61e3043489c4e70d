import math
from datetime import date

import pytest
from openpyxl import load_workbook

from logic.cold_storage import ProductRow, RowStore, Settings, calculate
from logic.cold_storage.export import (
    ERROR_COLUMN,
    EXPORT_COLUMNS,
    build_export_records,
    export_filename,
    export_to_excel,
    records_to_dataframe,
)


def _rows():
    return [
        ProductRow(id="1", product_name="Beef", weight=100, temperature=-20, density=500, category="meat"),
        ProductRow(id="2", product_name="Rice", weight=50, temperature=10, density=400, category="grains"),
        ProductRow(id="3", product_name="", weight=0, temperature=4, density=500, category="default"),
    ]


def test_registros_completos_e_incompletos():
    recs = build_export_records(_rows())
    beef, rice, empty = recs
    assert beef["Product Name"] == "Beef"
    assert beef["AC Required (TR)"] == 3.92
    assert beef["Power Consumption (24hrs) kWh"] == 143.76
    assert beef["Units per 24hrs"] == 143.76
    assert beef["Pre-chilling Needed"] == "Yes"
    assert rice["Dry Condition Needed"] == "Yes"
    assert rice["Storage Volume (m³)"] == 0.13
    assert ERROR_COLUMN not in beef
    assert empty[ERROR_COLUMN] == "Incomplete data"
    assert set(empty) == {"Product Name", "Weight (kg)", "Temperature (°C)", "Density (kg/m³)", "Category", ERROR_COLUMN}


def test_mismos_numeros_en_tabla_y_exportacion():
    store = RowStore(Settings())
    rid = store.rows[0].id
    for field, value in (("product_name", "Cod"), ("category", "fish"), ("weight", "80"), ("temperature", "-25"), ("density", "650")):
        store.update_row(rid, field, value)
    (_, shown), = store.results()
    (rec,) = build_export_records(store.rows)
    assert rec["AC Required (TR)"] == shown.ac_required_tons
    assert rec["Power per Hour (kW)"] == shown.power_per_hour_kw
    assert rec["Storage Volume (m³)"] == shown.volume_cubic_meters


def test_dataframe_orden_de_columnas():
    df = records_to_dataframe(build_export_records(_rows()))
    assert list(df.columns) == EXPORT_COLUMNS + [ERROR_COLUMN]
    assert len(df) == 3
    assert math.isnan(df.loc[2, "AC Required (TR)"])

    df_ok = records_to_dataframe(build_export_records(_rows()[:2]))
    assert list(df_ok.columns) == EXPORT_COLUMNS


def test_nombre_de_archivo():
    assert export_filename("cold_storage_calculator", date(2024, 3, 9)) == "cold_storage_calculator_2024-03-09.xlsx"


def test_exportar_excel(tmp_path):
    path = export_to_excel(_rows(), out_dir=tmp_path, today=date(2024, 1, 2), settings=Settings())
    assert path == tmp_path / "cold_storage_calculator_2024-01-02.xlsx"
    assert path.exists()

    wb = load_workbook(path)
    assert wb.sheetnames == ["Cold Storage Data"]
    ws = wb["Cold Storage Data"]
    header = [c.value for c in ws[1]]
    assert header == EXPORT_COLUMNS + [ERROR_COLUMN]
    assert ws.max_row == 4
    assert ws.cell(row=2, column=header.index("AC Required (TR)") + 1).value == 3.92
    assert ws.cell(row=4, column=header.index(ERROR_COLUMN) + 1).value == "Incomplete data"
    assert ws.cell(row=1, column=1).font.bold


def test_exportar_sin_filas(tmp_path):
    with pytest.raises(ValueError, match="No data to export"):
        export_to_excel([], out_dir=tmp_path, settings=Settings())


def test_registro_coincide_con_motor():
    row = _rows()[0]
    (rec,) = build_export_records([row])
    res = calculate(row.category, row.weight, row.temperature, row.density)
    assert rec["Shelf Life (Frozen)"] == res.shelf_life_frozen
    assert rec["Required Humidity (%)"] == res.humidity
    assert rec["Pre-chilling Needed"] == ("Yes" if res.pre_chilling else "No")
    assert rec["Units per 24hrs"] == res.as_dict()["units_per_24h"]
