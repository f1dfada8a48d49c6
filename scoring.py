# scoring.py
# Fixed-threshold heuristic standing in for a real model (no trained weights).
import random
from dataclasses import dataclass
from typing import Optional

from config import SCORING
from patient import PatientInput


@dataclass(frozen=True)
class PredictionResult:
    prediction: str                 # "diabetic" | "non-diabetic"
    confidence: float
    naive_bayes_prob: float
    logistic_regression_prob: float
    risk_level: str                 # "low" | "moderate" | "high"

    @property
    def is_diabetic(self) -> bool:
        return self.prediction == "diabetic"


def compute_score(glucose: float, bmi: float, age: float) -> float:
    score = (
        (SCORING["glucose_high_weight"] if glucose > SCORING["glucose_high"] else SCORING["glucose_normal_weight"])
        + (SCORING["bmi_high_weight"] if bmi > SCORING["bmi_high"] else SCORING["bmi_normal_weight"])
        + (SCORING["age_high_weight"] if age > SCORING["age_high"] else SCORING["age_normal_weight"])
    )
    # 0.1 + 0.1 + 0.1 must compare as 0.3, not 0.30000000000000004
    return round(score, 2)


def risk_level(score: float) -> str:
    if score > SCORING["high_risk_above"]:
        return "high"
    if score > SCORING["moderate_risk_above"]:
        return "moderate"
    return "low"


def _jitter(confidence: float, rng) -> float:
    j = SCORING["model_jitter"]
    return min(SCORING["probability_cap"], confidence + rng.uniform(-j, j))


def predict(patient: PatientInput, rng: Optional[random.Random] = None) -> PredictionResult:
    """
    Scores an already validated PatientInput.

    Only glucose, BMI and age feed the score; pregnancies, skin thickness,
    insulin and pedigree are collected but unused. The two model
    probabilities are independent jitter around the same confidence.
    """
    rng = rng or random
    glucose = patient.number("glucose")
    bmi = patient.number("bmi")
    age = patient.number("age")
    if glucose is None or bmi is None or age is None:
        raise ValueError("glucose, bmi and age are required to score a patient")

    score = compute_score(glucose, bmi, age)
    confidence = min(
        SCORING["probability_cap"],
        SCORING["confidence_base"] + score * SCORING["confidence_slope"],
    )

    return PredictionResult(
        prediction="diabetic" if score > SCORING["diabetic_above"] else "non-diabetic",
        confidence=confidence,
        naive_bayes_prob=_jitter(confidence, rng),
        logistic_regression_prob=_jitter(confidence, rng),
        risk_level=risk_level(score),
    )
