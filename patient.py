# patient.py
import math
from dataclasses import dataclass, fields
from typing import Dict, List, Mapping, NamedTuple, Optional


class FieldSpec(NamedTuple):
    name: str
    label: str
    placeholder: str
    required: bool = False


# Display order (two columns in the form)
FIELDS: List[FieldSpec] = [
    FieldSpec("pregnancies", "Pregnancies", "Number of pregnancies"),
    FieldSpec("glucose", "Glucose Level", "mg/dL", required=True),
    FieldSpec("blood_pressure", "Blood Pressure", "mm Hg", required=True),
    FieldSpec("skin_thickness", "Skin Thickness", "mm"),
    FieldSpec("insulin", "Insulin", "mu U/ml"),
    FieldSpec("bmi", "BMI", "Body Mass Index", required=True),
    FieldSpec("diabetes_pedigree", "Diabetes Pedigree", "Function value"),
    FieldSpec("age", "Age", "Years", required=True),
]

REQUIRED_FIELDS = [f.name for f in FIELDS if f.required]

# Names used in validation messages ("Please enter a valid blood pressure")
_MESSAGE_NAMES: Dict[str, str] = {
    "glucose": "glucose",
    "blood_pressure": "blood pressure",
    "bmi": "bmi",
    "age": "age",
}


@dataclass(frozen=True)
class PatientInput:
    """Raw form values, kept as text exactly like the inputs hold them."""

    pregnancies: str = ""
    glucose: str = ""
    blood_pressure: str = ""
    skin_thickness: str = ""
    insulin: str = ""
    bmi: str = ""
    diabetes_pedigree: str = ""
    age: str = ""

    @classmethod
    def from_form(cls, values: Mapping[str, object]) -> "PatientInput":
        kwargs = {}
        for f in fields(cls):
            raw = values.get(f.name)
            kwargs[f.name] = "" if raw is None else str(raw).strip()
        return cls(**kwargs)

    def number(self, name: str) -> Optional[float]:
        return parse_number(getattr(self, name))


class FieldError(NamedTuple):
    field: str
    message: str


def parse_number(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    raw = str(raw).strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def validate_patient_input(patient: PatientInput) -> List[FieldError]:
    """
    Returns one FieldError per required field that is missing,
    unparsable or not strictly positive. Empty list means valid.
    Optional fields are never checked.
    """
    errors: List[FieldError] = []
    for name in REQUIRED_FIELDS:
        value = patient.number(name)
        if value is None or value <= 0:
            errors.append(FieldError(name, f"Please enter a valid {_MESSAGE_NAMES[name]}"))
    return errors
