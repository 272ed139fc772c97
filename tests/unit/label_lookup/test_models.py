"""Tests for label models."""

import pytest
from pydantic import ValidationError

from label_lookup.exceptions import ErrorCode
from label_lookup.models.label import ApiError, LabelInformation


class TestLabelInformation:
    def test_serializes_camel_case(self, basic_science_label):
        assert basic_science_label.model_dump(by_alias=True) == {
            "prettyUrlName": "basic-science",
            "idString": "basic_science",
            "label": "Basic Science",
        }

    def test_accepts_camel_case_input(self, basic_science_label):
        parsed = LabelInformation.model_validate(
            {"prettyUrlName": "basic-science", "idString": "basic_science", "label": "Basic Science"}
        )

        assert parsed == basic_science_label

    def test_equality_is_by_value(self, basic_science_label):
        other = LabelInformation(pretty_url_name="basic-science", id_string="basic_science", label="Basic Science")

        assert other == basic_science_label
        assert other != basic_science_label.model_copy(update={"label": "Other"})

    def test_is_immutable(self, basic_science_label):
        with pytest.raises(ValidationError):
            basic_science_label.label = "Changed"

    def test_requires_all_fields(self):
        with pytest.raises(ValidationError):
            LabelInformation(pretty_url_name="basic-science", id_string="basic_science")


class TestApiError:
    def test_invalid_input(self):
        error = ApiError.invalid_input()

        assert error.message == "You must specify the name parameter."
        assert error.http_status_code == 400
        assert error.code == ErrorCode.INVALID_INPUT

    def test_internal_failure(self):
        error = ApiError.internal_failure()

        assert error.message == "Errors occured."
        assert error.http_status_code == 500
        assert error.code == ErrorCode.INTERNAL_FAILURE

    def test_is_immutable(self):
        error = ApiError.internal_failure()

        with pytest.raises(ValidationError):
            error.message = "Kaboom!"
