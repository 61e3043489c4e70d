from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Sequence, Tuple

import numpy as np

from .models import CalculationResult
from .profiles import lookup_profile

# Bandas de temperatura (umbral °C inclusivo, valor), de mayor a menor frío.
# Se recorren en orden: gana la primera con temperatura <= umbral.
Band = Tuple[float, float]

LOAD_FACTOR_BANDS: Tuple[Band, ...] = (
    (-25, 120),  # congelado profundo
    (-18, 100),  # congelado
    (0, 80),     # cerca de congelación
    (4, 60),     # refrigerado
)
BASE_LOAD_FACTOR = 50  # BTU/hr por kg, refrigerado estándar

COP_BANDS: Tuple[Band, ...] = (
    (-30, 1.8),
    (-25, 2.0),
    (-20, 2.3),
    (-15, 2.6),
    (-10, 2.9),
    (-5, 3.2),
    (0, 3.5),
    (2, 3.8),
    (4, 4.0),
    (8, 4.2),
    (12, 4.4),
    (16, 4.6),
)
BASE_COP = 4.8

SAFETY_FACTOR = 1.20
INFILTRATION_FACTOR = 1.15
BTUH_PER_TON = 3517.0
KW_PER_TON = 3.517
HOURS_PER_DAY = 24

_CENT = Decimal("0.01")


# ---------------------------- UTILIDADES ---------------------------- #


def round2(value: float) -> float:
    """Redondeo a 2 decimales, mitades lejos de cero. inf/nan pasan tal cual."""
    value = float(value)
    if not math.isfinite(value):
        return value
    # precisión suficiente para cualquier float (hasta ~1.8e308)
    with localcontext() as ctx:
        ctx.prec = 400
        return float(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def temperature_band(temperature_c: float, bands: Sequence[Band], otherwise: float) -> float:
    for threshold, value in bands:
        if temperature_c <= threshold:
            return value
    return otherwise


def _divide(numerator: float, denominator: float) -> float:
    # división IEEE: x/0 -> ±inf, 0/0 -> nan (sin ZeroDivisionError)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


# ---------------------------- CÁLCULOS ---------------------------- #


def ac_tons_required(weight_kg: float, temperature_c: float) -> float:
    """
    Toneladas de refrigeración (TR) para la masa almacenada.
    TR = peso * factor_carga * seguridad * infiltración / 3517
    """
    load_factor = temperature_band(temperature_c, LOAD_FACTOR_BANDS, BASE_LOAD_FACTOR)
    total_btuh = weight_kg * load_factor * SAFETY_FACTOR * INFILTRATION_FACTOR
    return round2(total_btuh / BTUH_PER_TON)


def power_consumption_kw(tons: float, temperature_c: float) -> float:
    """Potencia eléctrica (kW) = TR * 3.517 / COP."""
    cop = temperature_band(temperature_c, COP_BANDS, BASE_COP)
    return round2(tons * KW_PER_TON / cop)


def storage_volume(weight_kg: float, density_kg_m3: float) -> float:
    return round2(_divide(weight_kg, density_kg_m3))


def calculate(category: str, weight_kg: float, temperature_c: float, density_kg_m3: float) -> CalculationResult:
    """
    Calcula los requerimientos de una fila de producto.

    No valida entradas: peso <= 0 da toneladas <= 0 y densidad 0 da un
    volumen no finito. La validación le corresponde a quien llama
    (ver :mod:`logic.cold_storage.validation`).
    """
    profile = lookup_profile(category)
    tons = ac_tons_required(weight_kg, temperature_c)
    volume = storage_volume(weight_kg, density_kg_m3)
    power_hour = power_consumption_kw(tons, temperature_c)
    power_24h = round2(power_hour * HOURS_PER_DAY)
    return CalculationResult(
        humidity=profile.humidity,
        moisture=profile.moisture,
        pre_chilling=profile.pre_chilling,
        dry_condition=profile.dry_condition,
        shelf_life_chilled=profile.shelf_life_chilled,
        shelf_life_frozen=profile.shelf_life_frozen,
        ac_required_tons=tons,
        volume_cubic_meters=volume,
        power_per_hour_kw=power_hour,
        power_per_24h_kwh=power_24h,
        units_per_24h=power_24h,
    )
