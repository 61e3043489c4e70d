from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from .models import CategoryProfile

DEFAULT_CATEGORY = "default"

# Perfil por categoría: humedad relativa y humedad del producto (%), pre-enfriado,
# condición seca y vida útil refrigerado / congelado.
PRODUCT_PROFILES: Mapping[str, CategoryProfile] = MappingProxyType({
    "fruits": CategoryProfile(85, 12, True, False, "7-14 days", "6-12 months"),
    "vegetables": CategoryProfile(90, 15, True, False, "5-10 days", "8-10 months"),
    "meat": CategoryProfile(75, 8, True, False, "3-5 days", "6-9 months"),
    "fish": CategoryProfile(95, 10, True, False, "2-3 days", "3-6 months"),
    "dairy": CategoryProfile(80, 5, False, False, "7-14 days", "3-4 months"),
    "grains": CategoryProfile(60, 3, False, True, "30-60 days", "12-24 months"),
    DEFAULT_CATEGORY: CategoryProfile(80, 10, True, False, "7-10 days", "6-8 months"),
})


def lookup_profile(category: Optional[str]) -> CategoryProfile:
    """
    Devuelve el perfil de la categoría (coincidencia exacta, sensible a
    mayúsculas). Cualquier otra cosa cae en el perfil ``default``.
    """
    if isinstance(category, str) and category in PRODUCT_PROFILES:
        return PRODUCT_PROFILES[category]
    return PRODUCT_PROFILES[DEFAULT_CATEGORY]
