from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Protocol

from .energy import compute
from .models import InputFields, MetabolicResult
from .validation import ValidationOutcome, validate

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Display side of the calculator: toasts, banners, stderr."""

    def error(self, message: str) -> None: ...

    def success(self, result: MetabolicResult) -> None: ...


@dataclass
class CalculatorForm:
    """Latest form fields and latest result for one form session.

    Editing fields never recomputes; only submit() replaces the result, and a
    rejected submit keeps whatever result was shown before.
    """

    notifier: Notifier
    fields: InputFields = field(default_factory=InputFields)
    result: MetabolicResult | None = None

    def update(self, **changes: str) -> None:
        self.fields = replace(self.fields, **changes)

    def submit(self) -> ValidationOutcome:
        outcome = validate(self.fields)
        if outcome.error is not None:
            logger.info("rejected input: %s %s", outcome.error.kind, ",".join(outcome.error.fields))
            self.notifier.error(outcome.error.message)
            return outcome

        m = outcome.unwrap()
        self.result = compute(m.weight_kg, m.height_cm, m.age_years, self.fields.sex, self.fields.activity_level)
        logger.info(
            "calculated bmr=%d tdee=%d activity=%s",
            self.result.bmr,
            self.result.tdee,
            self.fields.activity_level,
        )
        self.notifier.success(self.result)
        return outcome
