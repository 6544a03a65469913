from __future__ import annotations

import pytest

from wallabag_to_karakeep.accessors import as_int, as_string, as_string_list, get_field
from wallabag_to_karakeep.results import MISSING, WRONG_TYPE, FieldFailure


class TestGetField:
    def test_present_key(self):
        assert get_field({"title": "T"}, "title") == "T"

    def test_null_value_is_returned(self):
        assert get_field({"title": None}, "title") is None

    def test_absent_key(self):
        failure = get_field({}, "title")
        assert isinstance(failure, FieldFailure)
        assert failure.kind == MISSING
        assert str(failure) == "title does not exist"

    @pytest.mark.parametrize("record", [None, 3, "text", ["title"]])
    def test_non_object_record_has_no_fields(self, record):
        assert isinstance(get_field(record, "title"), FieldFailure)


class TestTypedAccessors:
    def test_as_string(self):
        assert as_string("x", "title") == "x"
        failure = as_string(1, "title")
        assert failure.kind == WRONG_TYPE
        assert str(failure) == "title is not a string"

    def test_as_string_rejects_null(self):
        assert isinstance(as_string(None, "title"), FieldFailure)

    def test_failure_passes_through(self):
        missing = FieldFailure("url", MISSING, "does not exist")
        assert as_string(missing, "url") is missing
        assert as_int(missing, "url") is missing
        assert as_string_list(missing, "url") is missing

    @pytest.mark.parametrize("value", [0, 1, -3, 2 ** 63 - 1])
    def test_as_int_accepts_integers(self, value):
        assert as_int(value, "is_archived") == value

    @pytest.mark.parametrize("value", [True, False, 1.0, "1", None, 2 ** 63])
    def test_as_int_rejects_non_integers(self, value):
        failure = as_int(value, "is_archived")
        assert isinstance(failure, FieldFailure)
        assert str(failure) == "is_archived is not an int"

    def test_as_string_list(self):
        assert as_string_list(["a", "b"], "tags") == ["a", "b"]
        assert as_string_list([], "tags") == []

    def test_as_string_list_rejects_non_array(self):
        assert str(as_string_list("a,b", "tags")) == "tags is not an array"

    def test_as_string_list_names_bad_element(self):
        failure = as_string_list(["a", {"label": "b"}], "tags")
        assert isinstance(failure, FieldFailure)
        assert failure.field == "tags[1]"
        assert str(failure) == "tags[1] is not a string"
