from __future__ import annotations

import math
from typing import Any, List

from .models import ProductRow, ValidationIssue

# rango razonable de set-point; fuera de él solo se advierte
TEMP_MIN_C = -40.0
TEMP_MAX_C = 30.0

INCOMPLETE_DATA = "Incomplete data"


def parse_number(text: Any, default: float = 0.0) -> float:
    """
    Convierte texto libre de un campo a float. Vacío, inválido o no finito
    -> ``default``. Acepta coma decimal ("12,5").
    """
    if isinstance(text, bool):
        return default
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        raw = str(text or "").strip()
        # coma decimal solo si no hay punto; con punto, la coma es de miles
        raw = raw.replace(",", "") if "." in raw else raw.replace(",", ".")
        if not raw:
            return default
        try:
            value = float(raw)
        except ValueError:
            return default
    return value if math.isfinite(value) else default


def validate_row(row: ProductRow) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    def add(field: str, msg: str, level: str = "error"):
        issues.append(ValidationIssue(level=level, message=msg, field=field))

    if not (row.product_name or "").strip():
        add("product_name", "Product name is required")
    if not (row.category or "").strip():
        add("category", "Category is required")
    if not row.weight > 0:
        add("weight", "Weight must be greater than 0 kg")
    if not row.density > 0:
        add("density", "Density must be greater than 0 kg/m³")
    if row.temperature < TEMP_MIN_C or row.temperature > TEMP_MAX_C:
        add(
            "temperature",
            f"Temperature {row.temperature} °C is outside {TEMP_MIN_C:g}..{TEMP_MAX_C:g} °C",
            level="warning",
        )
    return issues


def is_complete(row: ProductRow) -> bool:
    return not any(i.level == "error" for i in validate_row(row))
