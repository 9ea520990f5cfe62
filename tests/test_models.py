"""Decoding case objects and the status helpers."""

import pytest

from model.models import EDITABLE_FIELDS, Case, status_from_label, status_label, status_tone


class TestCaseFromDict:
    def test_maps_wire_keys(self, case_dicts):
        case = Case.from_dict(case_dicts[0])
        assert case.id == 1
        assert case.case_heading == "Unpaid wages"
        assert case.applicable_article == "Article 23"
        assert case.status == "assigned"
        assert case.tags == "labour, wages"

    def test_null_and_missing_text_fields_become_empty(self):
        case = Case.from_dict({"id": "c-9", "applicableArticle": None})
        assert case.applicable_article == ""
        assert case.description == ""
        assert case.tags == ""

    def test_id_is_kept_as_received(self):
        assert Case.from_dict({"id": "abc"}).id == "abc"
        assert Case.from_dict({"id": 7}).id == 7

    def test_requires_id(self):
        with pytest.raises(ValueError, match="id"):
            Case.from_dict({"caseHeading": "no id"})

    def test_requires_mapping(self):
        with pytest.raises(ValueError, match="JSON object"):
            Case.from_dict(["not", "a", "case"])


def test_editable_values_exclude_id_and_tags(case_dicts):
    values = Case.from_dict(case_dicts[0]).editable_values()
    assert tuple(values) == EDITABLE_FIELDS
    assert "id" not in values
    assert "tags" not in values


def test_tags_text_joins_lists(case_dicts):
    assert Case.from_dict(case_dicts[1]).tags_text == "property, civil"
    assert Case.from_dict(case_dicts[0]).tags_text == "labour, wages"


@pytest.mark.parametrize(
    "status, tone",
    [
        ("assigned", "affirmative"),
        ("closed", "negative"),
        ("under-investigation", "caution"),
        ("pending", "neutral"),
        ("", "neutral"),
    ],
)
def test_status_tone(status, tone):
    assert status_tone(status) == tone


def test_status_label():
    assert status_label("under-investigation") == "Under Investigation"
    assert status_label("archived") == "archived"
    assert status_label("") == "unknown"


def test_status_from_label():
    assert status_from_label("Under Investigation") == "under-investigation"
    assert status_from_label("Closed") == "closed"
    assert status_from_label("archived") == "archived"
