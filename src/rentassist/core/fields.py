from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FieldKind = Literal["text", "email", "integer", "decimal"]
FieldGroup = Literal["core", "biography"]


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: FieldKind = "text"
    group: FieldGroup = "core"
    aliases: tuple[str, ...] = ()


CORE_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("full_name"),
    FieldSpec("phone"),
    FieldSpec("email", kind="email"),
    FieldSpec("dob"),
    FieldSpec("gender"),
    FieldSpec("age", kind="integer"),
    FieldSpec("city"),
    FieldSpec("ssn"),
    FieldSpec("past_due_rent", kind="decimal"),
    FieldSpec("applied_before"),
    FieldSpec("receiving_ss"),
    FieldSpec("verified_idme"),
)

BIOGRAPHY_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("mothers_maiden_name", group="biography"),
    FieldSpec("mothers_full_name", group="biography"),
    FieldSpec("fathers_full_name", group="biography", aliases=("fathers_name",)),
    FieldSpec("place_of_birth", group="biography"),
    FieldSpec("city_of_birth", group="biography"),
)

ALL_FIELDS: tuple[FieldSpec, ...] = CORE_FIELDS + BIOGRAPHY_FIELDS

UPLOAD_SLOTS: tuple[str, ...] = ("dl_front", "dl_back")

SEARCHABLE_COLUMNS: tuple[str, ...] = (
    "full_name",
    "email",
    "phone",
    "ssn",
    "city",
    "mothers_maiden_name",
    "mothers_full_name",
    "fathers_full_name",
    "place_of_birth",
    "city_of_birth",
)


def required_fields(*, require_biography: bool = False) -> tuple[FieldSpec, ...]:
    if require_biography:
        return ALL_FIELDS
    return CORE_FIELDS
