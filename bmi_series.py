import logging
import math

import pandas as pd

logger = logging.getLogger(__name__)

# ------------------------ CONSTANTS ------------------------

MIN_STEP = 0.1
EPSILON = 1e-9

# Classic reference bands. The Obese band has no fixed ceiling; charts cap it at y_max.
BMI_BANDS = [
    ("Underweight", 0.0, 18.5),
    ("Normal", 18.5, 24.9),
    ("Overweight", 24.9, 29.9),
    ("Obese", 29.9, None),
]

PRESETS = {
    "Normal BMI range": (18.5, 24.9),
    "Lean": (15, 20),
    "20–25 BMI": (20, 25),
    "Overweight": (25, 30),
    "Obesity": (30, 40),
}

# ------------------------ HELPER FUNCTIONS ------------------------


def clamp(value, lo, hi):
    return min(max(value, lo), hi)


def height_summary(height_cm: float) -> tuple:
    """Return (height in metres, height in metres squared)."""
    height_m = height_cm / 100
    return height_m, height_m * height_m


def _bmi(weight, height_m2):
    # Heights small enough to underflow h² to zero give an unbounded BMI.
    if height_m2 == 0:
        return math.copysign(math.inf, weight) if weight else math.nan
    return weight / height_m2


def bmi_category(bmi: float) -> str:
    for label, _, upper in BMI_BANDS:
        if upper is None or bmi < upper:
            return label
    return BMI_BANDS[-1][0]


# ------------------------ SERIES GENERATION ------------------------


def generate_series(height_cm, min_weight, max_weight, step):
    """
    Sample BMI over a weight range for a fixed height.

    The bounds may be given in either order. The step is floored at 0.1 so
    the loop always terminates, and the upper bound is included within a
    1e-9 tolerance. Each weight is re-rounded to 4 places after stepping to
    keep accumulated float error out of the sequence.

    Returns a list of (weight, bmi) tuples, both rounded to 2 places.
    """
    _, height_m2 = height_summary(height_cm)
    lo = min(min_weight, max_weight)
    hi = max(min_weight, max_weight)
    effective_step = max(MIN_STEP, step)
    if effective_step != step:
        logger.warning("Step %s is below the %s kg floor, using %s", step, MIN_STEP, effective_step)

    rows = []
    w = lo
    while w <= hi + EPSILON:
        rows.append((round(w, 2), round(_bmi(w, height_m2), 2)))
        w = round(w + effective_step, 4)

    logger.debug("Generated %d points for %s cm over [%s, %s] kg", len(rows), height_cm, lo, hi)
    return rows


def weight_range_for_bmi_range(height_cm, bmi_lo, bmi_hi):
    """Map a BMI interval to whole-kilogram weight bounds, rounded outward."""
    _, height_m2 = height_summary(height_cm)
    weight_lo = bmi_lo * height_m2
    weight_hi = bmi_hi * height_m2
    if math.isfinite(weight_lo):
        weight_lo = math.floor(weight_lo)
    if math.isfinite(weight_hi):
        weight_hi = math.ceil(weight_hi)
    return weight_lo, weight_hi


def preset_weight_range(height_cm, name):
    bmi_lo, bmi_hi = PRESETS[name]
    weight_range = weight_range_for_bmi_range(height_cm, bmi_lo, bmi_hi)
    logger.debug("Preset %r at %s cm -> %s kg", name, height_cm, weight_range)
    return weight_range


def axis_bounds(series):
    """
    Y axis bounds for a series, always wide enough to show BMI 10 to 40 so
    every reference band stays visible. Non-finite BMIs are left out.
    """
    bmis = [bmi for _, bmi in series if math.isfinite(bmi)]
    y_min = math.floor(min([10] + bmis))
    y_max = math.ceil(max([40] + bmis))
    return y_min, y_max


# ------------------------ QUICK CONVERTERS ------------------------


def bmi_for_weight(height_cm: float, weight: float) -> float:
    _, height_m2 = height_summary(height_cm)
    return round(_bmi(weight, height_m2), 2)


def weight_for_bmi(height_cm: float, bmi: float) -> float:
    _, height_m2 = height_summary(height_cm)
    return round(bmi * height_m2, 1)


# ------------------------ TABULAR VIEW ------------------------


def series_frame(series) -> pd.DataFrame:
    df = pd.DataFrame(series, columns=["weight", "bmi"])
    df["category"] = df["bmi"].apply(bmi_category)
    return df
