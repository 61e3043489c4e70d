# gui/pages/cold_storage_page.py
# ——————————————————————————————————————————————————————————
# Tabla de productos para almacenamiento en frío.
# • Las columnas de entrada son editables; las calculadas son solo lectura.
# • Cada edición recalcula únicamente la fila tocada.
# • Agregar / eliminar / limpiar reconstruye la tabla completa.
# ——————————————————————————————————————————————————————————
import logging
import math

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QComboBox,
    QTableWidget, QTableWidgetItem, QHeaderView, QMessageBox
)
from PySide6.QtGui import QColor, QDoubleValidator
from PySide6.QtCore import Qt

from gui.widgets import ActionButton, Card
from logic.cold_storage import CATEGORIES, CATEGORY_LABELS, RowStore, calculate
from logic.cold_storage.export import export_to_excel

logger = logging.getLogger(__name__)

INPUT_HEADERS = ["Product Name", "Weight (kg)", "Temperature (°C)", "Density (kg/m³)", "Category"]
RESULT_HEADERS = [
    "Shelf Life (Chilled)", "Shelf Life (Frozen)", "Humidity (%)", "Moisture (%)",
    "Pre-chilling", "Dry Condition", "AC Required (TR)", "Volume (m³)",
    "Power (24hrs) kWh", "Power/Hour kW",
]
HEADERS = INPUT_HEADERS + RESULT_HEADERS + ["Action"]
FIRST_RESULT_COL = len(INPUT_HEADERS)
ACTION_COL = len(HEADERS) - 1

# fondo de las columnas destacadas (TR, volumen, kWh, kW)
_HIGHLIGHT = {
    "AC Required (TR)": "#ecfdf3",
    "Volume (m³)": "#eff6ff",
    "Power (24hrs) kWh": "#fff7ed",
    "Power/Hour kW": "#f5f3ff",
}

INSTRUCTIONS = [
    "Enter Product Name, Weight (kg), Temperature (°C), Density (kg/m³), and Category",
    "All other values are calculated automatically",
    "AC tonnage uses a heat load per kg with safety and infiltration factors",
    "Power consumption uses TR × 3.517 / COP",
    'Click "Export to Excel" to save the table',
]


def _fmt(value) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float) and not math.isfinite(value):
        return "—"
    return f"{value:g}" if isinstance(value, (int, float)) else str(value)


class ColdStoragePage(QWidget):
    def __init__(self, store: RowStore | None = None):
        super().__init__()
        self.store = store or RowStore()
        self._building = False
        self._build_ui()
        self._rebuild_table()

    # ———————————— UI ————————————
    def _build_ui(self):
        root = QVBoxLayout(self); root.setContentsMargins(16, 16, 16, 16); root.setSpacing(14)

        info = Card("📋 Instructions", "Enter product details to calculate cold storage requirements")
        for line in INSTRUCTIONS:
            lab = QLabel(f"• {line}"); lab.setObjectName("Muted")
            info.body.addWidget(lab)
        root.addWidget(info)

        controls = Card()
        bar = QHBoxLayout(); bar.setSpacing(12); bar.addStretch(1)
        self.btn_export = ActionButton("Export to Excel")
        self.btn_add = ActionButton("Add New Row", variant="outline")
        self.btn_clear = ActionButton("Clear All Data", variant="destructive")
        for b in (self.btn_export, self.btn_add, self.btn_clear):
            bar.addWidget(b)
        bar.addStretch(1)
        controls.body.addLayout(bar)
        root.addWidget(controls)

        self.btn_export.clicked.connect(self._export)
        self.btn_add.clicked.connect(self._add_row)
        self.btn_clear.clicked.connect(self._clear)

        table_card = Card()
        self.table = QTableWidget(0, len(HEADERS))
        self.table.setHorizontalHeaderLabels(HEADERS)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeToContents)
        self.table.setAlternatingRowColors(True)
        table_card.body.addWidget(self.table)
        root.addWidget(table_card, 1)

    # ————————— celdas de entrada —————————
    def _line_edit(self, row_id: str, field: str, value, numeric: bool) -> QLineEdit:
        ed = QLineEdit()
        if numeric:
            ed.setValidator(QDoubleValidator(ed))
            ed.setText("" if not value else _fmt(value))
        else:
            ed.setText(value or "")
            ed.setPlaceholderText("Enter product name")
        ed.textEdited.connect(lambda txt, rid=row_id, f=field: self._on_edit(rid, f, txt))
        return ed

    def _category_combo(self, row_id: str, current: str) -> QComboBox:
        cb = QComboBox()
        for key in CATEGORIES:
            cb.addItem(CATEGORY_LABELS[key], key)
        ix = cb.findData(current)
        cb.setCurrentIndex(ix if ix >= 0 else cb.findData("default"))
        cb.currentIndexChanged.connect(
            lambda _ix, rid=row_id, w=cb: self._on_edit(rid, "category", w.currentData()))
        return cb

    # ————————— render —————————
    def _rebuild_table(self):
        self._building = True
        rows = self.store.rows
        self.table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            self.table.setCellWidget(r, 0, self._line_edit(row.id, "product_name", row.product_name, False))
            self.table.setCellWidget(r, 1, self._line_edit(row.id, "weight", row.weight, True))
            self.table.setCellWidget(r, 2, self._line_edit(row.id, "temperature", row.temperature, True))
            self.table.setCellWidget(r, 3, self._line_edit(row.id, "density", row.density, True))
            self.table.setCellWidget(r, 4, self._category_combo(row.id, row.category))

            btn = ActionButton("Delete", variant="destructive", small=True)
            btn.setEnabled(len(rows) > 1)
            btn.clicked.connect(lambda _=False, rid=row.id: self._delete_row(rid))
            self.table.setCellWidget(r, ACTION_COL, btn)
            self._render_results(r)
        self._building = False

    def _render_results(self, r: int):
        row = self.store.rows[r]
        res = calculate(row.category, row.weight, row.temperature, row.density)
        values = [
            res.shelf_life_chilled, res.shelf_life_frozen,
            f"{_fmt(res.humidity)}%", f"{_fmt(res.moisture)}%",
            res.pre_chilling, res.dry_condition,
            res.ac_required_tons, res.volume_cubic_meters,
            res.power_per_24h_kwh, res.power_per_hour_kw,
        ]
        for offset, (header, val) in enumerate(zip(RESULT_HEADERS, values)):
            it = QTableWidgetItem(_fmt(val))
            it.setFlags(Qt.ItemIsEnabled)
            if header in _HIGHLIGHT:
                it.setBackground(QColor(_HIGHLIGHT[header]))
                f = it.font(); f.setBold(True); it.setFont(f)
            self.table.setItem(r, FIRST_RESULT_COL + offset, it)

    # ————————— eventos —————————
    def _on_edit(self, row_id: str, field: str, value):
        if self._building:
            return
        self.store.update_row(row_id, field, value)
        ids = [row.id for row in self.store.rows]
        self._render_results(ids.index(row_id))

    def _add_row(self):
        self.store.add_row()
        self._rebuild_table()

    def _delete_row(self, row_id: str):
        if self.store.delete_row(row_id):
            self._rebuild_table()

    def _clear(self):
        ans = QMessageBox.question(self, "Clear All Data", "Are you sure you want to clear all data?")
        if ans == QMessageBox.Yes:
            self.store.clear()
            self._rebuild_table()

    def _export(self):
        try:
            path = export_to_excel(self.store.rows, settings=self.store.settings)
        except ValueError as exc:
            QMessageBox.warning(self, "Export", str(exc))
            return
        except OSError as exc:
            logger.error("Export failed: %s", exc)
            QMessageBox.critical(self, "Export", f"Could not write the file:\n{exc}")
            return
        QMessageBox.information(self, "Export", f"Saved to:\n{path}")
