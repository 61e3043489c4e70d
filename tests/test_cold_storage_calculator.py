import math

from logic.cold_storage import (
    CATEGORIES,
    PRODUCT_PROFILES,
    ac_tons_required,
    calculate,
    lookup_profile,
    power_consumption_kw,
    round2,
    storage_volume,
)
from logic.cold_storage.calculator import COP_BANDS, LOAD_FACTOR_BANDS, temperature_band


def _decimals(x: float) -> int:
    txt = repr(x)
    return len(txt.split(".")[1]) if "." in txt else 0


def test_escenario_carne_congelada():
    res = calculate("meat", 100, -20, 500)
    assert res.ac_required_tons == 3.92
    assert res.power_per_hour_kw == 5.99
    assert res.power_per_24h_kwh == 143.76
    assert res.units_per_24h == res.power_per_24h_kwh
    assert res.volume_cubic_meters == 0.2
    assert (res.humidity, res.moisture) == (75, 8)
    assert res.shelf_life_chilled == "3-5 days"
    assert res.shelf_life_frozen == "6-9 months"


def test_escenario_granos_refrigerados():
    res = calculate("grains", 50, 10, 400)
    assert res.ac_required_tons == 0.98
    assert res.power_per_hour_kw == 0.78
    # se usa la potencia por hora ya redondeada
    assert res.power_per_24h_kwh == 18.72
    assert res.volume_cubic_meters == 0.13
    assert res.humidity == 60
    assert res.moisture == 3
    assert res.pre_chilling is False
    assert res.dry_condition is True


def test_categoria_desconocida_usa_default():
    res = calculate("unknown-xyz", 100, 4, 500)
    assert res.humidity == 80
    assert res.moisture == 10
    assert res.pre_chilling is True
    assert res.dry_condition is False
    assert res.shelf_life_chilled == "7-10 days"


def test_lookup_exacto_y_sensible_a_mayusculas():
    assert lookup_profile("fish") is PRODUCT_PROFILES["fish"]
    assert lookup_profile("Fish") is PRODUCT_PROFILES["default"]
    assert lookup_profile("fis") is PRODUCT_PROFILES["default"]
    assert lookup_profile("") is PRODUCT_PROFILES["default"]
    assert lookup_profile(None) is PRODUCT_PROFILES["default"]


def test_tabla_de_perfiles_completa():
    assert set(PRODUCT_PROFILES) == set(CATEGORIES)
    dairy = PRODUCT_PROFILES["dairy"]
    assert (dairy.humidity, dairy.moisture, dairy.pre_chilling, dairy.dry_condition) == (80, 5, False, False)
    assert dairy.shelf_life_frozen == "3-4 months"
    veg = PRODUCT_PROFILES["vegetables"]
    assert (veg.humidity, veg.moisture, veg.shelf_life_chilled) == (90, 15, "5-10 days")


def test_determinismo():
    a = calculate("fruits", 1234.5, -3.3, 612)
    b = calculate("fruits", 1234.5, -3.3, 612)
    assert a == b
    assert a is not b


def test_bandas_de_carga_inclusivas():
    assert temperature_band(-25, LOAD_FACTOR_BANDS, 50) == 120
    assert temperature_band(-24.9, LOAD_FACTOR_BANDS, 50) == 100
    assert temperature_band(-18, LOAD_FACTOR_BANDS, 50) == 100
    assert temperature_band(0, LOAD_FACTOR_BANDS, 50) == 80
    assert temperature_band(4, LOAD_FACTOR_BANDS, 50) == 60
    assert temperature_band(4.01, LOAD_FACTOR_BANDS, 50) == 50


def test_bandas_cop():
    expected = {-35: 1.8, -30: 1.8, -25: 2.0, -20: 2.3, -15: 2.6, -10: 2.9, -5: 3.2,
                0: 3.5, 2: 3.8, 4: 4.0, 8: 4.2, 12: 4.4, 16: 4.6, 16.5: 4.8, 40: 4.8}
    for temp, cop in expected.items():
        assert temperature_band(temp, COP_BANDS, 4.8) == cop, temp


def test_toneladas_no_decrecen_al_bajar_temperatura():
    temps = [10, 4.5, 4, 0.5, 0, -17, -18, -24, -25, -40]
    tons = [ac_tons_required(1000, t) for t in temps]
    assert tons == sorted(tons)
    assert len(set(tons)) == 5


def test_potencia_usa_cop():
    assert power_consumption_kw(10, -20) == round2(10 * 3.517 / 2.3)
    assert power_consumption_kw(0, 5) == 0


def test_redondeo_dos_decimales():
    for cat in CATEGORIES:
        for w, t, d in [(333.3, -27, 731), (17.77, 3.3, 91), (1, 20, 3)]:
            res = calculate(cat, w, t, d)
            for v in (res.ac_required_tons, res.volume_cubic_meters,
                      res.power_per_hour_kw, res.power_per_24h_kwh):
                assert _decimals(v) <= 2, v


def test_redondeo_mitades_lejos_de_cero():
    assert round2(0.125) == 0.13
    assert round2(-0.125) == -0.13
    assert round2(2.675) == 2.68
    assert round2(1.0) == 1.0


def test_peso_cero_o_negativo_no_falla():
    assert ac_tons_required(0, 4) == 0
    assert ac_tons_required(-100, -20) == -3.92
    res = calculate("meat", -100, -20, 500)
    assert res.volume_cubic_meters == -0.2


def test_densidad_cero_da_volumen_no_finito():
    assert math.isinf(storage_volume(100, 0))
    assert storage_volume(100, 0) > 0
    assert math.isnan(storage_volume(0, 0))
    res = calculate("fish", 100, 2, 0)
    assert math.isinf(res.volume_cubic_meters)
    # el resto del cálculo no depende de la densidad
    assert res.ac_required_tons == calculate("fish", 100, 2, 500).ac_required_tons


def test_as_dict_plano():
    res = calculate("dairy", 10, 4, 1030)
    d = res.as_dict()
    assert d["units_per_24h"] == d["power_per_24h_kwh"]
    assert d["shelf_life_frozen"] == PRODUCT_PROFILES["dairy"].shelf_life_frozen
    assert d["pre_chilling"] is False


def test_valores_enormes_no_fallan():
    res = calculate("meat", 1e30, -20, 500)
    assert math.isfinite(res.ac_required_tons)
    assert math.isfinite(res.power_per_24h_kwh)
    assert math.isclose(res.volume_cubic_meters, 2e27)
    vol = storage_volume(1, 1e-300)
    assert math.isfinite(vol)
    assert math.isclose(vol, 1e300)
    assert round2(1.7e308) == 1.7e308
    assert round2(-1e26) == -1e26
