# controller.py
import logging
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from config import RUNTIME
from patient import PatientInput, validate_patient_input
from scoring import PredictionResult, predict

logger = logging.getLogger(__name__)

# notify(title, description, severity) with severity "info" | "destructive"
Notifier = Callable[[str, str, str], None]


@dataclass
class PageState:
    """The one result slot for the page, plus the in-flight flag."""

    result: Optional[PredictionResult] = None
    busy: bool = False

    @property
    def has_result(self) -> bool:
        return self.result is not None

    def reset(self) -> None:
        self.result = None
        logger.info("Page reset to input form")


def submit_prediction(
    state: PageState,
    values: Mapping[str, object],
    notify: Notifier,
    sleep: Callable[[float], None] = time.sleep,
    delay: Optional[float] = None,
    rng=None,
) -> Optional[PredictionResult]:
    """
    Validates the form values, waits out the simulated latency and stores
    the scored result on `state`.

    Returns the new result, or None when the submission was ignored
    (already busy), rejected (validation) or failed (computation).
    State is only written on success.
    """
    if state.busy:
        logger.info("Submission ignored: a prediction is already in progress")
        return None

    patient = PatientInput.from_form(values)
    errors = validate_patient_input(patient)
    if errors:
        logger.info("Submission rejected: invalid %s", ", ".join(e.field for e in errors))
        # One notice, for the first failing field in display order
        notify("Validation Error", errors[0].message, "destructive")
        return None

    if delay is None:
        delay = RUNTIME["prediction_delay_seconds"]

    state.busy = True
    try:
        sleep(delay)
        result = predict(patient, rng=rng)
    except Exception:
        logger.exception("Prediction failed")
        notify("Error", "Failed to process prediction. Please try again.", "destructive")
        return None
    finally:
        state.busy = False

    state.result = result
    logger.info("Prediction produced: %s (%s risk)", result.prediction, result.risk_level)
    notify("Analysis Complete", "Your diabetes risk assessment is ready.", "info")
    return result
