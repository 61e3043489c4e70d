from __future__ import annotations

import itertools
import logging
from typing import Any, Iterator, List, Optional, Tuple

from .calculator import calculate
from .models import CalculationResult, ProductRow
from .settings import Settings, load_settings
from .validation import parse_number

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = ("weight", "temperature", "density")
TEXT_FIELDS = ("product_name", "category")


class RowStore:
    """
    Lista ordenada de productos. Siempre queda al menos una fila.
    Los resultados se recalculan en cada llamada a :meth:`results`.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()
        self._ids = itertools.count(1)
        self._rows: List[ProductRow] = []
        self.add_row()

    # ---------------- acceso ----------------
    @property
    def rows(self) -> List[ProductRow]:
        return list(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[ProductRow]:
        return iter(list(self._rows))

    def get(self, row_id: str) -> ProductRow:
        for row in self._rows:
            if row.id == row_id:
                return row
        raise KeyError(row_id)

    # ---------------- edición ----------------
    def _new_row(self) -> ProductRow:
        d = self.settings.default_row
        return ProductRow(
            id=str(next(self._ids)),
            product_name=str(d.get("product_name") or ""),
            weight=parse_number(d.get("weight")),
            temperature=parse_number(d.get("temperature"), 4.0),
            density=parse_number(d.get("density"), 500.0),
            category=str(d.get("category") or "default"),
        )

    def add_row(self) -> ProductRow:
        row = self._new_row()
        self._rows.append(row)
        logger.debug("Fila %s agregada (%d filas)", row.id, len(self._rows))
        return row

    def delete_row(self, row_id: str) -> bool:
        row = self.get(row_id)
        if len(self._rows) == 1:
            return False
        self._rows.remove(row)
        logger.debug("Fila %s eliminada (%d filas)", row_id, len(self._rows))
        return True

    def update_row(self, row_id: str, field: str, value: Any) -> ProductRow:
        row = self.get(row_id)
        if field in NUMERIC_FIELDS:
            setattr(row, field, parse_number(value))
        elif field in TEXT_FIELDS:
            setattr(row, field, "" if value is None else str(value))
        else:
            raise ValueError(f"Campo no editable: {field}")
        return row

    def clear(self) -> None:
        self._rows.clear()
        self.add_row()

    # ---------------- cálculo ----------------
    def results(self) -> List[Tuple[ProductRow, CalculationResult]]:
        return [
            (row, calculate(row.category, row.weight, row.temperature, row.density))
            for row in self._rows
        ]
