"""
Motor de cálculo para almacenamiento en frío.

El cálculo principal está en :func:`calculate`; el resto del paquete
(filas, validación, exportación a Excel) lo usa sin modificarlo.
"""

from .models import (
    CATEGORIES,
    CATEGORY_LABELS,
    CalculationResult,
    CategoryProfile,
    ProductRow,
    ValidationIssue,
)
from .profiles import PRODUCT_PROFILES, lookup_profile
from .calculator import ac_tons_required, calculate, power_consumption_kw, round2, storage_volume
from .row_store import RowStore
from .settings import Settings, load_settings
from .validation import is_complete, parse_number, validate_row
