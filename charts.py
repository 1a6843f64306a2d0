import plotly.express as px

from bmi_series import BMI_BANDS, axis_bounds, series_frame

# ---------- COLOR PALETTE ----------
band_colors = {
    "Underweight": "#42a5f5",
    "Normal": "#66bb6a",
    "Overweight": "#ffca28",
    "Obese": "#ef5350",
}

band_opacity = {
    "Underweight": 0.08,
    "Normal": 0.12,
    "Overweight": 0.08,
    "Obese": 0.06,
}

LINE_COLOR = "#1f77b4"


def build_bmi_figure(series, height_cm, min_weight, max_weight):
    """Line chart of BMI against weight with the reference bands shaded behind it."""
    y_min, y_max = axis_bounds(series)
    df = series_frame(series)

    fig = px.line(df, x="weight", y="bmi", hover_data=["category"])
    fig.update_traces(
        name=f"BMI @ {height_cm:g} cm",
        showlegend=True,
        mode="lines",
        line=dict(width=2, color=LINE_COLOR),
    )

    for label, lower, upper in BMI_BANDS:
        fig.add_hrect(
            y0=lower,
            y1=y_max if upper is None else upper,
            fillcolor=band_colors[label],
            opacity=band_opacity[label],
            line_width=0,
            layer="below",
            annotation_text=label,
            annotation_position="top left",
        )

    fig.update_layout(
        plot_bgcolor="white",
        paper_bgcolor="white",
        font=dict(color="#333333"),
        margin=dict(t=10, r=20, b=10, l=0),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title="Weight (kg)",
        yaxis_title="BMI",
        height=420,
    )
    fig.update_xaxes(range=[min(min_weight, max_weight), max(min_weight, max_weight)], showgrid=True, griddash="dash")
    fig.update_yaxes(range=[y_min, y_max], tickformat=".0f", showgrid=True, griddash="dash")
    return fig
