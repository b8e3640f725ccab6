import logging

import pytest

from bmr_calculator.form import CalculatorForm
from bmr_calculator.models import InputFields, MetabolicResult


class RecordingNotifier:
    def __init__(self) -> None:
        self.errors: list[str] = []
        self.results: list[MetabolicResult] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def success(self, result: MetabolicResult) -> None:
        self.results.append(result)


def _form() -> tuple[CalculatorForm, RecordingNotifier]:
    notifier = RecordingNotifier()
    return CalculatorForm(notifier=notifier), notifier


def test_new_form_defaults() -> None:
    form, _ = _form()
    assert form.fields == InputFields(weight_kg="", height_cm="", age_years="", sex="male", activity_level="moderate")
    assert form.result is None


def test_submit_success_stores_and_notifies() -> None:
    form, notifier = _form()
    form.update(weight_kg="70", height_cm="175", age_years="30")
    outcome = form.submit()

    assert outcome.ok
    assert form.result is not None
    assert (form.result.bmr, form.result.tdee) == (1649, 2556)
    assert notifier.results == [form.result]
    assert notifier.errors == []


def test_update_does_not_recompute() -> None:
    form, _ = _form()
    form.update(weight_kg="70", height_cm="175", age_years="30")
    form.submit()
    first = form.result

    form.update(weight_kg="90", activity_level="extreme")
    assert form.result is first


def test_failed_submit_keeps_previous_result() -> None:
    form, notifier = _form()
    form.update(weight_kg="60", height_cm="165", age_years="25", sex="female", activity_level="sedentary")
    form.submit()
    previous = form.result

    form.update(weight_kg="")
    outcome = form.submit()
    assert not outcome.ok
    assert form.result is previous
    assert notifier.errors == ["Please fill in all fields."]

    form.update(weight_kg="-5")
    form.submit()
    assert form.result is previous
    assert notifier.errors[-1] == "Please enter valid values."


def test_new_result_replaces_old() -> None:
    form, notifier = _form()
    form.update(weight_kg="70", height_cm="175", age_years="30")
    form.submit()
    form.update(sex="female", activity_level="sedentary", weight_kg="60", height_cm="165", age_years="25")
    form.submit()

    assert form.result == MetabolicResult(bmr=1345, tdee=1614, activity_label="little/no exercise")
    assert len(notifier.results) == 2


def test_update_rejects_unknown_field() -> None:
    form, _ = _form()
    with pytest.raises(TypeError):
        form.update(bodyfat="20")


def test_submit_logs_rejection(caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    form, _ = _form()
    monkeypatch.setattr(logging.getLogger("bmr_calculator"), "propagate", True)
    with caplog.at_level(logging.INFO, logger="bmr_calculator.form"):
        form.submit()
    assert "missing_field" in caplog.text
