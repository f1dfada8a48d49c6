import pytest

import controller
from controller import PageState, submit_prediction

VALID = {"glucose": "150", "blood_pressure": "80", "bmi": "32", "age": "50"}


class Recorder:
    """Collects notify() calls."""

    def __init__(self):
        self.calls = []

    def __call__(self, title, description, severity):
        self.calls.append((title, description, severity))


def _no_sleep(seconds):
    pass


def test_successful_submission_stores_result():
    state, notify = PageState(), Recorder()
    slept = []

    result = submit_prediction(state, VALID, notify, sleep=slept.append, delay=1.5)

    assert result is not None
    assert state.result is result
    assert state.has_result
    assert not state.busy
    assert slept == [1.5]                      # simulated latency went through sleep
    assert result.risk_level == "high"
    assert notify.calls == [
        ("Analysis Complete", "Your diabetes risk assessment is ready.", "info")
    ]


def test_default_delay_comes_from_config(monkeypatch):
    monkeypatch.setitem(controller.RUNTIME, "prediction_delay_seconds", 0.25)
    slept = []

    submit_prediction(PageState(), VALID, Recorder(), sleep=slept.append)

    assert slept == [0.25]


def test_rejected_submission_leaves_state_untouched():
    previous = submit_prediction(PageState(), VALID, Recorder(), sleep=_no_sleep)
    state, notify = PageState(result=previous), Recorder()
    slept = []

    result = submit_prediction(state, dict(VALID, age="0"), notify, sleep=slept.append)

    assert result is None
    assert state.result is previous
    assert slept == []                          # no delay, no computation
    assert notify.calls == [("Validation Error", "Please enter a valid age", "destructive")]


def test_resubmitting_while_busy_has_no_effect():
    state, notify = PageState(busy=True), Recorder()

    result = submit_prediction(state, VALID, notify, sleep=_no_sleep)

    assert result is None
    assert state.result is None
    assert state.busy                           # still owned by the first submission
    assert notify.calls == []


def test_busy_is_set_during_the_delay():
    state = PageState()
    seen = []

    submit_prediction(state, VALID, Recorder(), sleep=lambda s: seen.append(state.busy))

    assert seen == [True]
    assert state.busy is False


def test_nested_submission_during_delay_is_ignored():
    state, notify = PageState(), Recorder()
    inner = []

    def sleep(seconds):
        inner.append(submit_prediction(state, VALID, notify, sleep=_no_sleep))

    submit_prediction(state, VALID, notify, sleep=sleep)

    assert inner == [None]
    assert len(notify.calls) == 1               # only the outer submission completed


def test_computation_failure_reports_generic_notice(monkeypatch):
    def boom(patient, rng=None):
        raise RuntimeError("model exploded")

    monkeypatch.setattr(controller, "predict", boom)
    state, notify = PageState(), Recorder()

    result = submit_prediction(state, VALID, notify, sleep=_no_sleep)

    assert result is None
    assert state.result is None
    assert not state.busy
    assert notify.calls == [
        ("Error", "Failed to process prediction. Please try again.", "destructive")
    ]


def test_interrupted_delay_clears_busy():
    class Interrupted(BaseException):
        pass

    def sleep(seconds):
        raise Interrupted()

    state = PageState()
    with pytest.raises(Interrupted):
        submit_prediction(state, VALID, Recorder(), sleep=sleep)

    assert not state.busy
    assert state.result is None


def test_reset_clears_result():
    state = PageState()
    submit_prediction(state, VALID, Recorder(), sleep=_no_sleep)

    state.reset()

    assert state.result is None
    assert not state.has_result


def test_only_first_invalid_field_is_reported():
    notify = Recorder()

    result = submit_prediction(PageState(), {"glucose": "150"}, notify, sleep=_no_sleep)

    assert result is None
    assert notify.calls == [                    # blood pressure, bmi and age are also bad
        ("Validation Error", "Please enter a valid blood pressure", "destructive")
    ]
