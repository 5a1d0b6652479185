"""Field validation for incoming submissions.

Two independent passes run over a submission:

* ``validate_submission`` enforces presence of the required fields and
  normalises values. It is all-or-nothing and reports every missing field
  at once.
* ``check_formats`` looks at fields whose shape is advisory only (the SSN).
  It never rejects anything; callers log what it returns.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rentassist.core.fields import ALL_FIELDS, FieldSpec, required_fields

SSN_PATTERN = re.compile(r"^\d{3}-\d{2}-\d{4}$")

SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_DECIMAL = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class SubmissionValidationError(ValueError):
    def __init__(self, missing_fields: list[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


@dataclass(frozen=True)
class FormatWarning:
    field: str
    message: str


def parse_leading_int(raw: str) -> int | None:
    """Parse the integer prefix of ``raw``; ``"42 years"`` gives 42, ``"n/a"`` gives None.

    Values outside the signed 64-bit column range are treated as unparseable.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    value = int(match.group(1))
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        return None
    return value


def parse_leading_decimal(raw: str) -> float | None:
    match = _LEADING_DECIMAL.match(raw.replace(",", ""))
    if not match:
        return None
    value = float(match.group(1))
    if math.isinf(value) or math.isnan(value):
        return None
    return value


def _raw_value(form: Mapping[str, Any], spec: FieldSpec) -> str | None:
    for key in (spec.name, *spec.aliases):
        value = form.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def _normalise(spec: FieldSpec, text: str) -> Any:
    if spec.kind == "email":
        return text.lower()
    if spec.kind == "integer":
        return parse_leading_int(text)
    if spec.kind == "decimal":
        return parse_leading_decimal(text)
    return text


def validate_submission(
    form: Mapping[str, Any],
    *,
    require_biography: bool = False,
) -> dict[str, Any]:
    """Return insert-ready values for ``form`` or raise ``SubmissionValidationError``.

    Every field of the schema is present in the result; optional fields that
    were not supplied are None.
    """
    required = {spec.name for spec in required_fields(require_biography=require_biography)}
    missing: list[str] = []
    values: dict[str, Any] = {}

    for spec in ALL_FIELDS:
        text = _raw_value(form, spec)
        if text is None:
            if spec.name in required:
                missing.append(spec.name)
            values[spec.name] = None
            continue
        values[spec.name] = _normalise(spec, text)

    if missing:
        raise SubmissionValidationError(missing)
    return values


def check_formats(values: Mapping[str, Any]) -> list[FormatWarning]:
    warnings: list[FormatWarning] = []
    ssn = values.get("ssn")
    if ssn and not SSN_PATTERN.match(str(ssn)):
        warnings.append(FormatWarning(field="ssn", message="expected NNN-NN-NNNN"))
    return warnings


def mask_ssn(value: str) -> str:
    digits = re.sub(r"\D", "", value)
    if len(digits) < 4:
        return "***"
    return f"***-**-{digits[-4:]}"
