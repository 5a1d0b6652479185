import pytest

from rentassist.core.validation import (
    SubmissionValidationError,
    check_formats,
    mask_ssn,
    parse_leading_decimal,
    parse_leading_int,
    validate_submission,
)


def test_valid_submission_is_trimmed_and_normalised(application_form) -> None:
    values = validate_submission(application_form)

    assert values["full_name"] == "Jane Doe"
    assert values["email"] == "jane.doe@example.com"
    assert values["age"] == 44
    assert values["past_due_rent"] == 1250.5
    assert values["receiving_ss"] == "Yes"
    assert values["mothers_maiden_name"] is None
    assert values["city_of_birth"] is None


def test_missing_fields_are_reported_together(application_form) -> None:
    del application_form["phone"]
    application_form["city"] = "   "

    with pytest.raises(SubmissionValidationError) as excinfo:
        validate_submission(application_form)

    assert excinfo.value.missing_fields == ["phone", "city"]
    assert str(excinfo.value) == "Missing required fields: phone, city"


def test_empty_form_lists_every_core_field() -> None:
    with pytest.raises(SubmissionValidationError) as excinfo:
        validate_submission({})

    assert len(excinfo.value.missing_fields) == 12
    assert "mothers_maiden_name" not in excinfo.value.missing_fields


def test_biography_fields_required_when_configured(application_form) -> None:
    with pytest.raises(SubmissionValidationError) as excinfo:
        validate_submission(application_form, require_biography=True)

    assert excinfo.value.missing_fields == [
        "mothers_maiden_name",
        "mothers_full_name",
        "fathers_full_name",
        "place_of_birth",
        "city_of_birth",
    ]


def test_fathers_name_alias_fills_fathers_full_name(application_form) -> None:
    application_form["fathers_name"] = " John Doe "

    values = validate_submission(application_form)

    assert values["fathers_full_name"] == "John Doe"


def test_unparseable_numbers_are_stored_as_none(application_form) -> None:
    application_form["age"] = "unknown"
    application_form["past_due_rent"] = "lots"

    values = validate_submission(application_form)

    assert values["age"] is None
    assert values["past_due_rent"] is None


def test_leading_number_parsing() -> None:
    assert parse_leading_int("25 years") == 25
    assert parse_leading_int("-3") == -3
    assert parse_leading_int("n/a") is None
    assert parse_leading_int("9223372036854775807") == 2**63 - 1
    assert parse_leading_int("9223372036854775808") is None
    assert parse_leading_int("-9223372036854775809") is None
    assert parse_leading_decimal("$100") is None
    assert parse_leading_decimal("1,250.75") == 1250.75
    assert parse_leading_decimal(".5") == 0.5
    assert parse_leading_decimal("300 dollars") == 300.0


def test_ssn_format_is_advisory(application_form) -> None:
    application_form["ssn"] = "123456789"

    values = validate_submission(application_form)
    warnings = check_formats(values)

    assert values["ssn"] == "123456789"
    assert [warning.field for warning in warnings] == ["ssn"]


def test_canonical_ssn_has_no_warnings(application_form) -> None:
    assert check_formats(validate_submission(application_form)) == []


def test_mask_ssn_keeps_last_four_digits() -> None:
    assert mask_ssn("123-45-6789") == "***-**-6789"
    assert mask_ssn("12") == "***"
