import logging

import streamlit as st

from bmi_series import (
    PRESETS,
    bmi_for_weight,
    clamp,
    generate_series,
    height_summary,
    preset_weight_range,
    series_frame,
    weight_for_bmi,
)
from charts import build_bmi_figure
from export import export_filename, export_to_csv, export_to_excel
from settings import SETTINGS

logger = logging.getLogger(__name__)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# ------------------------ SESSION STATE ------------------------


def init_state(settings=SETTINGS):
    height = float(clamp(settings.default_height_cm, settings.height_min_cm, settings.height_max_cm))
    defaults = {
        "height_cm": height,
        "height_input": height,
        "height_slider": height,
        "min_weight": float(settings.default_min_weight),
        "max_weight": float(settings.default_max_weight),
        "step": float(clamp(settings.default_step, settings.step_min, settings.step_max)),
        "converter_weight": float(settings.default_converter_weight),
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def on_height_input():
    raw = st.session_state["height_input"]
    height = float(clamp(raw, SETTINGS.height_min_cm, SETTINGS.height_max_cm))
    if height != raw:
        logger.warning("Height %s cm clamped to %s cm", raw, height)
    st.session_state["height_cm"] = height
    st.session_state["height_input"] = height
    st.session_state["height_slider"] = height


def on_height_slider():
    height = st.session_state["height_slider"]
    st.session_state["height_cm"] = height
    st.session_state["height_input"] = height


def on_step_input():
    raw = st.session_state["step"]
    step = float(clamp(raw, SETTINGS.step_min, SETTINGS.step_max))
    if step != raw:
        logger.warning("Step %s kg clamped to %s kg", raw, step)
    st.session_state["step"] = step


def apply_preset(name):
    weight_lo, weight_hi = preset_weight_range(st.session_state["height_cm"], name)
    st.session_state["min_weight"] = float(weight_lo)
    st.session_state["max_weight"] = float(weight_hi)
    logger.info("Applied preset %r: %s–%s kg", name, weight_lo, weight_hi)


# ------------------------ PAGE SECTIONS ------------------------


def render_parameters():
    st.subheader("Parameters")

    st.number_input(
        "Height (cm)",
        step=1.0,
        key="height_input",
        on_change=on_height_input,
    )
    st.slider(
        "Height slider",
        min_value=float(SETTINGS.height_min_cm),
        max_value=float(SETTINGS.height_max_cm),
        step=1.0,
        key="height_slider",
        on_change=on_height_slider,
        label_visibility="collapsed",
    )
    height_m, height_m2 = height_summary(st.session_state["height_cm"])
    st.caption(f"h = {height_m:.2f} m • h² = {height_m2:.3f} m²")

    col_min, col_max = st.columns(2)
    with col_min:
        st.number_input("Min weight (kg)", step=0.5, key="min_weight")
    with col_max:
        st.number_input("Max weight (kg)", step=0.5, key="max_weight")

    col_step, col_normal = st.columns(2)
    with col_step:
        st.number_input("Weight step (kg)", step=0.1, key="step", on_change=on_step_input)
    with col_normal:
        st.button(
            "Normal BMI range",
            on_click=apply_preset,
            args=("Normal BMI range",),
            width="stretch",
        )

    other_presets = [name for name in PRESETS if name != "Normal BMI range"]
    for col, name in zip(st.columns(len(other_presets)), other_presets):
        with col:
            st.button(name, on_click=apply_preset, args=(name,), width="stretch")


def render_plot(series):
    st.subheader("Interactive Plot")
    fig = build_bmi_figure(
        series,
        st.session_state["height_cm"],
        st.session_state["min_weight"],
        st.session_state["max_weight"],
    )
    st.plotly_chart(fig, width="stretch")
    st.caption("BMI = weight / (height²), with weight in kg and height in meters.")


def render_converters():
    height_cm = st.session_state["height_cm"]
    st.subheader("Quick Converters")
    col_convert, *col_targets = st.columns(1 + len(SETTINGS.target_bmis))

    with col_convert:
        weight = st.number_input("Weight → BMI", step=0.1, key="converter_weight")
        st.markdown(f"at height {height_cm:g} cm → **BMI {bmi_for_weight(height_cm, weight)}**")

    for col, (target, label) in zip(col_targets, SETTINGS.target_bmis):
        with col:
            st.markdown(label)
            st.markdown(f"Weight ≈ **{weight_for_bmi(height_cm, target)} kg** (for {height_cm:g} cm)")


def render_series_table(series):
    height_cm = st.session_state["height_cm"]
    output_df = series_frame(series)

    with st.expander(f"Series data ({len(output_df)} points)"):
        st.dataframe(output_df, width="stretch")

        col_xlsx, col_csv = st.columns(2)
        with col_xlsx:
            st.download_button(
                label="Download Excel",
                data=export_to_excel(output_df),
                file_name=export_filename(height_cm, "xlsx"),
                mime=XLSX_MIME,
            )
        with col_csv:
            st.download_button(
                label="Download CSV",
                data=export_to_csv(output_df),
                file_name=export_filename(height_cm, "csv"),
                mime="text/csv",
            )


# ------------------------ MAIN LOGIC ------------------------


def main():
    st.set_page_config(page_title="BMI as a Function of Weight", page_icon="⚖️", layout="wide")
    logging.basicConfig(level=SETTINGS.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    st.title("⚖️ BMI as a Function of Weight")
    st.write(
        "Adjust your height and weight range to see how BMI changes. "
        "Metric only: height in centimeters, weight in kilograms."
    )

    init_state()

    try:
        col_params, col_plot = st.columns([1, 2])
        with col_params:
            render_parameters()

        series = generate_series(
            st.session_state["height_cm"],
            st.session_state["min_weight"],
            st.session_state["max_weight"],
            st.session_state["step"],
        )

        with col_plot:
            render_plot(series)

        st.markdown("---")
        render_converters()
        render_series_table(series)

    except Exception as e:
        logger.exception("Failed to render BMI page")
        st.error(f"❌ Error while building the plot: {e}")


if __name__ == "__main__":
    main()
