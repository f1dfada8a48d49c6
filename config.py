# config.py
# Heuristic thresholds + app settings (tweak here, nothing else hard-codes them)
import os
import logging

logger = logging.getLogger(__name__)


def _setting(name: str, default: str) -> str:
    """Environment first, then Streamlit secrets, then the default."""
    value = os.getenv(name, "").strip()
    if value:
        return value
    try:
        import streamlit as st
        value = str(st.secrets.get(name, "")).strip()
    except Exception:
        # No secrets.toml (tests, plain `python -c`) is normal
        logger.debug("Streamlit secrets unavailable for %s", name)
        value = ""
    return value or default


def _float_setting(name: str, default: float) -> float:
    raw = _setting(name, str(default))
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


SCORING = {
    # Glucose (mg/dL): strictly above this counts as high
    "glucose_high": 140,
    "glucose_high_weight": 0.4,
    "glucose_normal_weight": 0.1,

    # BMI: strictly above this counts as obese range
    "bmi_high": 30,
    "bmi_high_weight": 0.3,
    "bmi_normal_weight": 0.1,

    # Age (years)
    "age_high": 45,
    "age_high_weight": 0.2,
    "age_normal_weight": 0.1,

    # Classification + risk bands (all strict ">")
    "diabetic_above": 0.5,
    "high_risk_above": 0.6,
    "moderate_risk_above": 0.4,

    # confidence = base + score * slope, clamped
    "confidence_base": 0.6,
    "confidence_slope": 0.3,
    "probability_cap": 0.95,

    # Per-model jitter: uniform(-jitter, +jitter)
    "model_jitter": 0.05,
}

RUNTIME = {
    # Simulated latency between submit and result
    "prediction_delay_seconds": _float_setting("PREDICTION_DELAY_SECONDS", 1.5),
    "log_level": _setting("LOG_LEVEL", "INFO").upper(),
}

APP = {
    "title": "Diabetes Risk Predictor",
    "subtitle": (
        "Advanced ML-powered diabetes risk assessment using "
        "Naïve Bayes & Logistic Regression models"
    ),
    "form_title": "Patient Information",
    "form_caption": "Enter medical data for diabetes risk assessment",
    "submit_label": "Predict Diabetes Risk",
    "busy_label": "Analyzing...",
    "reset_label": "Analyze Another Patient",
    "pills": ["🗄️ PIMA Dataset", "🧠 Dual ML Models", "95%+ Accuracy"],
    "info_cards": [
        ("Data Cleaning", "Zero values replaced with statistical means for accurate predictions"),
        ("Feature Scaling", "StandardScaler normalization for optimal model performance"),
        ("Dual Models", "Naïve Bayes & Logistic Regression for comprehensive analysis"),
    ],
    "model_info": (
        "This prediction uses two complementary machine learning models trained on the "
        "PIMA Indians Diabetes Dataset. The Naïve Bayes classifier provides probabilistic "
        "predictions based on feature independence, while Logistic Regression offers a "
        "weighted linear combination approach. Both models contribute to the final assessment."
    ),
    "disclaimer": (
        "This is a demonstration tool for educational purposes. "
        "Always consult healthcare professionals for medical advice."
    ),
}
