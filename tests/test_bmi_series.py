import math

import pytest

from bmi_series import (
    PRESETS,
    axis_bounds,
    bmi_category,
    bmi_for_weight,
    clamp,
    generate_series,
    height_summary,
    preset_weight_range,
    series_frame,
    weight_for_bmi,
    weight_range_for_bmi_range,
)


def test_first_point_matches_reference_height(default_series):
    assert default_series[0] == (40, 13.06)


def test_point_at_70_kg(default_series):
    assert dict(default_series)[70] == 22.86


def test_series_covers_range_inclusively(default_series):
    weights = [w for w, _ in default_series]
    assert len(default_series) == 201
    assert weights[0] == 40
    assert weights[-1] == 140


@pytest.mark.parametrize("lo,hi,step", [
    (40, 140, 0.5),
    (50.3, 61.7, 0.3),
    (60, 60.95, 0.1),
    (45, 90, 7),
])
def test_weights_increase_by_step_and_stay_in_range(lo, hi, step):
    series = generate_series(180, lo, hi, step)
    weights = [w for w, _ in series]

    assert series
    assert weights[0] == pytest.approx(lo)
    assert hi - step - 1e-6 <= weights[-1] <= hi + 1e-9
    for prev, cur in zip(weights, weights[1:]):
        assert cur > prev
        assert cur - prev == pytest.approx(step, abs=0.011)


def test_bounds_given_in_reverse_are_normalised():
    assert generate_series(170, 90, 60, 1) == generate_series(170, 60, 90, 1)


def test_equal_bounds_yield_single_point():
    assert generate_series(160, 55, 55, 0.5) == [(55, 21.48)]


@pytest.mark.parametrize("step", [0, -3, 0.01])
def test_degenerate_step_is_floored(step):
    series = generate_series(175, 60, 61, step)
    assert len(series) == 11
    assert series[1][0] == 60.1


def test_generation_is_idempotent(height_cm):
    assert generate_series(height_cm, 40, 140, 0.5) == generate_series(height_cm, 40, 140, 0.5)


def test_non_positive_weights_are_computed():
    assert generate_series(200, -2, 0, 1) == [(-2, -0.5), (-1, -0.25), (0, 0.0)]


def test_weight_range_for_normal_bmi(height_cm):
    assert weight_range_for_bmi_range(height_cm, 18.5, 24.9) == (56, 77)


def test_weight_range_keeps_argument_order(height_cm):
    lo, hi = weight_range_for_bmi_range(height_cm, 30, 20)
    assert lo == math.floor(30 * 3.0625)
    assert hi == math.ceil(20 * 3.0625)


@pytest.mark.parametrize("name", list(PRESETS))
@pytest.mark.parametrize("height", [150, 175, 198])
def test_preset_window_brackets_bmi_interval(name, height):
    bmi_lo, bmi_hi = PRESETS[name]
    weight_lo, weight_hi = preset_weight_range(height, name)
    bmis = [bmi for _, bmi in generate_series(height, weight_lo, weight_hi, 0.5)]

    assert min(bmis) <= bmi_lo
    assert max(bmis) >= bmi_hi


def test_unknown_preset_raises():
    with pytest.raises(KeyError):
        preset_weight_range(175, "Athletic")


def test_preset_names_and_intervals():
    assert PRESETS["Lean"] == (15, 20)
    assert PRESETS["20–25 BMI"] == (20, 25)
    assert PRESETS["Overweight"] == (25, 30)
    assert PRESETS["Obesity"] == (30, 40)
    assert PRESETS["Normal BMI range"] == (18.5, 24.9)


def test_axis_bounds_keep_reference_window():
    series = [(40, 13.0), (55, 17.5), (70, 22.0)]
    assert axis_bounds(series) == (10, 40)


def test_axis_bounds_expand_to_data():
    series = [(20, 6.2), (150, 48.98)]
    assert axis_bounds(series) == (6, 49)


def test_axis_bounds_of_default_series(default_series):
    assert axis_bounds(default_series) == (10, 46)


def test_axis_bounds_of_empty_series():
    assert axis_bounds([]) == (10, 40)


def test_height_summary():
    height_m, height_m2 = height_summary(175)
    assert height_m == 1.75
    assert height_m2 == 3.0625


def test_quick_converters(height_cm):
    assert bmi_for_weight(height_cm, 75) == 24.49
    assert weight_for_bmi(height_cm, 22) == 67.4
    assert weight_for_bmi(height_cm, 25) == 76.6


@pytest.mark.parametrize("bmi,label", [
    (12.0, "Underweight"),
    (18.49, "Underweight"),
    (18.5, "Normal"),
    (24.89, "Normal"),
    (24.9, "Overweight"),
    (29.9, "Obese"),
    (55.0, "Obese"),
])
def test_bmi_category(bmi, label):
    assert bmi_category(bmi) == label


def test_clamp():
    assert clamp(90, 100, 230) == 100
    assert clamp(250, 100, 230) == 230
    assert clamp(0.5, 0.1, 10) == 0.5


def test_series_frame_columns(height_cm):
    df = series_frame(generate_series(height_cm, 50, 60, 5))
    assert list(df.columns) == ["weight", "bmi", "category"]
    assert df["weight"].tolist() == [50, 55, 60]
    assert df["category"].tolist() == ["Underweight", "Underweight", "Normal"]


def test_height_underflowing_to_zero_gives_infinite_bmi():
    series = generate_series(1e-160, 40, 41, 1)
    assert [w for w, _ in series] == [40, 41]
    assert all(bmi == math.inf for _, bmi in series)
    assert bmi_for_weight(1e-160, 75) == math.inf


def test_axis_bounds_skip_infinite_bmi():
    series = generate_series(1e-155, 40, 41, 1)
    assert all(math.isinf(bmi) for _, bmi in series)
    assert axis_bounds(series) == (10, 40)


def test_weight_range_for_huge_height_is_unbounded():
    assert weight_range_for_bmi_range(1e160, 18.5, 24.9) == (math.inf, math.inf)


def test_ties_round_half_even():
    # 40.125 is exact in binary, so the tie goes to the even digit.
    assert generate_series(175, 40.125, 40.125, 1)[0][0] == 40.12
