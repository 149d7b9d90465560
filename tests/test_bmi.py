# py
import math

import pytest

from app.utils.bmi import (
    CategoryTag,
    CATEGORY_TABLE,
    bmi_category,
    calculate_bmi,
    normalize_units,
    round_half_up,
    tag_for_category,
)


def test_calculate_bmi_metric():
    # 55 / 1.59^2 = 21.755...
    assert calculate_bmi(55, 159) == 21.8


def test_calculate_bmi_rejects_non_positive():
    with pytest.raises(ValueError):
        calculate_bmi(0, 170)
    with pytest.raises(ValueError):
        calculate_bmi(70, -1)


def test_bmi_monotonic_in_weight_and_height():
    by_weight = [calculate_bmi(w, 175) for w in range(40, 140, 5)]
    assert by_weight == sorted(by_weight)
    by_height = [calculate_bmi(70, h) for h in range(140, 210, 5)]
    assert by_height == sorted(by_height, reverse=True)


def test_round_half_up_differs_from_bankers_rounding():
    assert round_half_up(0.25) == 0.3
    assert round_half_up(21.75) == 21.8
    assert round_half_up(21.74) == 21.7


@pytest.mark.parametrize("bmi,category,tag", [
    (10.0, "Under Weight", CategoryTag.GAIN),
    (18.4, "Under Weight", CategoryTag.GAIN),
    (18.5, "Normal", CategoryTag.MAINTAIN),
    (24.9, "Normal", CategoryTag.MAINTAIN),
    (25.0, "Over Weight", CategoryTag.LOSS),
    (29.9, "Over Weight", CategoryTag.LOSS),
    (30.0, "Obese", CategoryTag.LOSS),
    (55.2, "Obese", CategoryTag.LOSS),
])
def test_bmi_category_boundaries(bmi, category, tag):
    meta = bmi_category(bmi)
    assert meta.category == category
    assert meta.tag == tag


def test_category_metadata():
    meta = bmi_category(27.0)
    assert meta.color == "#F57C00"
    assert meta.background == "rgba(245, 124, 0, 0.15)"
    assert "gradual fat loss" in meta.description


def test_category_table_is_ordered_and_total():
    bounds = [upper for upper, _ in CATEGORY_TABLE]
    assert bounds == sorted(bounds)
    assert bounds[-1] == math.inf


def test_bmi_category_rejects_nan():
    with pytest.raises(ValueError):
        bmi_category(float("nan"))


def test_tag_for_category():
    assert tag_for_category("Under Weight") == CategoryTag.GAIN
    assert tag_for_category("Normal") == CategoryTag.MAINTAIN
    assert tag_for_category("Obese") == CategoryTag.LOSS
    with pytest.raises(ValueError):
        tag_for_category("Skinny")


def test_normalize_units_us_is_case_insensitive():
    for unit in ("US", "us", "Us"):
        height_cm, weight_kg = normalize_units(60, 150, unit)
        assert height_cm == pytest.approx(152.4)
        assert weight_kg == pytest.approx(68.0388555)


@pytest.mark.parametrize("unit", ["Metric", "metric", "Imperial", "", "uk"])
def test_normalize_units_other_labels_are_metric(unit):
    assert normalize_units(170, 65, unit) == (170, 65)


def test_calculate_bmi_us_scenario():
    height_cm, weight_kg = normalize_units(70, 180, "US")
    assert height_cm == pytest.approx(177.8)
    assert weight_kg == pytest.approx(81.6466266)
    assert calculate_bmi(weight_kg, height_cm) == 25.8


def test_calculate_bmi_rejects_underflowing_height():
    with pytest.raises(ValueError):
        calculate_bmi(70, 1e-200)


def test_calculate_bmi_rejects_overflowing_quotient():
    with pytest.raises(ValueError):
        calculate_bmi(1e308, 1e-140)
