from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Tuple

CATEGORIES: Tuple[str, ...] = ("fruits", "vegetables", "meat", "fish", "dairy", "grains", "default")

# etiquetas para combos y reportes
CATEGORY_LABELS: Dict[str, str] = {
    "fruits": "Fruits",
    "vegetables": "Vegetables",
    "meat": "Meat",
    "fish": "Fish",
    "dairy": "Dairy",
    "grains": "Grains",
    "default": "Other",
}


# ---------------------------- MODELOS ---------------------------- #


@dataclass(frozen=True)
class CategoryProfile:
    humidity: float  # %
    moisture: float  # %
    pre_chilling: bool
    dry_condition: bool
    shelf_life_chilled: str
    shelf_life_frozen: str


@dataclass(frozen=True)
class CalculationResult:
    humidity: float
    moisture: float
    pre_chilling: bool
    dry_condition: bool
    shelf_life_chilled: str
    shelf_life_frozen: str
    ac_required_tons: float
    volume_cubic_meters: float
    power_per_hour_kw: float
    power_per_24h_kwh: float
    units_per_24h: float

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass
class ProductRow:
    id: str
    product_name: str = ""
    weight: float = 0.0  # kg
    temperature: float = 4.0  # °C
    density: float = 500.0  # kg/m³
    category: str = "default"


@dataclass
class ValidationIssue:
    level: str  # warning | error
    message: str
    field: str = ""
