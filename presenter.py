# presenter.py
# Rendering only: everything here is a pure function of a PredictionResult.
import math
from typing import Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from config import APP
from scoring import PredictionResult

RISK_TIERS = {
    "low": "success",
    "moderate": "warning",
    "high": "destructive",
}

# Streamlit markdown colour per tier
TIER_COLORS = {
    "success": "green",
    "warning": "orange",
    "destructive": "red",
    "muted": "gray",
}

MODEL_LABELS = {
    "naive_bayes_prob": "Naïve Bayes",
    "logistic_regression_prob": "Logistic Regression",
}


def risk_tier(level: str) -> str:
    return RISK_TIERS.get(level, "muted")


def as_percent(p: float) -> int:
    # Half rounds up, same as Math.round in the browser
    return int(math.floor(p * 100 + 0.5))


def result_banner(result: PredictionResult) -> Tuple[str, str]:
    if result.is_diabetic:
        return (
            "⚠️ Diabetic - High Risk",
            "Based on the provided medical data, our models indicate a higher likelihood of diabetes. "
            "Please consult with a healthcare professional for proper diagnosis and treatment.",
        )
    return (
        "✅ Non-Diabetic",
        "The analysis suggests a lower risk of diabetes based on the provided data. "
        "Continue maintaining a healthy lifestyle.",
    )


def model_table(result: PredictionResult) -> pd.DataFrame:
    rows = [
        {"Model": label, "Probability (%)": as_percent(getattr(result, attr))}
        for attr, label in MODEL_LABELS.items()
    ]
    return pd.DataFrame(rows, columns=["Model", "Probability (%)"])


def probability_chart(result: PredictionResult):
    labels = ["Overall Confidence"] + list(MODEL_LABELS.values())
    values = [as_percent(result.confidence)] + [
        as_percent(getattr(result, attr)) for attr in MODEL_LABELS
    ]

    fig = plt.figure(figsize=(6, 2.4))
    ax = fig.add_subplot(111)
    ax.barh(labels, values, color=TIER_COLORS[risk_tier(result.risk_level)])
    ax.set_xlim(0, 100)
    ax.set_xlabel("Probability (%)")
    ax.invert_yaxis()
    for i, v in enumerate(values):
        ax.text(min(v + 1, 92), i, f"{v}%", va="center")
    fig.tight_layout()
    return fig


def _probability_bar(label: str, p: float) -> None:
    pct = as_percent(p)
    c1, c2 = st.columns([4, 1])
    with c1:
        st.write(label)
    with c2:
        st.write(f"**{pct}%**")
    st.progress(min(max(pct, 0), 100))


def render_results(result: PredictionResult) -> None:
    title, description = result_banner(result)
    if result.is_diabetic:
        st.error(f"**{title}**\n\n{description}")
    else:
        st.success(f"**{title}**\n\n{description}")

    with st.container(border=True):
        head, badge = st.columns([3, 1])
        with head:
            st.subheader("Prediction Confidence")
        with badge:
            color = TIER_COLORS[risk_tier(result.risk_level)]
            st.markdown(f"### :{color}[{result.risk_level.upper()} RISK]")

        _probability_bar("Overall Confidence", result.confidence)

        col_nb, col_lr = st.columns(2)
        with col_nb:
            _probability_bar("📈 Naïve Bayes Model", result.naive_bayes_prob)
        with col_lr:
            _probability_bar("📈 Logistic Regression", result.logistic_regression_prob)

        st.dataframe(model_table(result), width="stretch", hide_index=True)

        fig = probability_chart(result)
        st.pyplot(fig)
        plt.close(fig)

        st.divider()
        st.markdown("**Model Information**")
        st.caption(APP["model_info"])
