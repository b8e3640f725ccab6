from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, cast

from .models import InputFields, Measurements

ErrorKind = Literal["missing_field", "out_of_range"]


class ValidationError(ValueError):
    kind: ErrorKind
    message: str

    def __init__(self, fields: tuple[str, ...] = ()) -> None:
        super().__init__(self.message)
        self.fields = fields


class MissingFieldError(ValidationError):
    kind = "missing_field"
    message = "Please fill in all fields."


class OutOfRangeError(ValidationError):
    kind = "out_of_range"
    message = "Please enter valid values."


@dataclass(frozen=True)
class ValidationOutcome:
    measurements: Measurements | None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Measurements:
        if self.error is not None:
            raise self.error
        return cast(Measurements, self.measurements)


NUMERIC_FIELDS = ("weight_kg", "height_cm", "age_years")


def _to_float(value: str | None) -> float | None:
    if value is None:
        return None
    text = str(value).strip()
    # float() would read "7_0" as 70
    if "_" in text:
        return None
    try:
        number = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def validate(fields: InputFields) -> ValidationOutcome:
    """Parse the numeric form fields and check they are usable.

    Unparseable fields are reported before non-positive ones.
    """
    parsed = {name: _to_float(getattr(fields, name)) for name in NUMERIC_FIELDS}

    missing = tuple(name for name, value in parsed.items() if value is None)
    if missing:
        return ValidationOutcome(None, MissingFieldError(missing))

    out_of_range = tuple(name for name, value in parsed.items() if value <= 0)
    if out_of_range:
        return ValidationOutcome(None, OutOfRangeError(out_of_range))

    return ValidationOutcome(Measurements(**parsed))
