"""Load and save flows: logging, degradation to empty, error propagation."""

import logging

import httpx
import pytest

from logic.backend import load_cases, save_case
from logic.errors import CaseApiError
from logic.state import SaveRequest


def test_load_returns_cases(make_api, case_dicts):
    api, backend = make_api(lambda r: httpx.Response(200, json={"cases": case_dicts}))
    result = load_cases(api)
    assert result.ok
    assert [c.case_heading for c in result.cases] == ["Unpaid wages", "Land dispute", "Police inaction"]
    assert len(backend.requests) == 1


@pytest.mark.parametrize("status", [404, 500])
def test_load_failure_is_empty_and_logged(make_api, caplog, status):
    api, _ = make_api(lambda r: httpx.Response(status))
    with caplog.at_level(logging.ERROR, logger="casedb"):
        result = load_cases(api)
    assert result.cases == []
    assert not result.ok
    assert "Error fetching cases" in caplog.text


def test_load_transport_failure_does_not_raise(make_api):
    def boom(request):
        raise httpx.ReadTimeout("timed out", request=request)

    api, _ = make_api(boom)
    result = load_cases(api)
    assert result.cases == []
    assert "timed out" in result.error


def test_save_returns_updated_case(make_api, case_dicts):
    api, backend = make_api(lambda r: httpx.Response(200, json=dict(case_dicts[1], query="new")))
    updated = save_case(api, SaveRequest(case_id=2, changes={"query": "new"}))
    assert updated.query == "new"
    assert backend.json_bodies() == [{"query": "new"}]


def test_save_failure_logs_and_raises(make_api, caplog):
    api, _ = make_api(lambda r: httpx.Response(422, json={"message": "Heading too long"}))
    with caplog.at_level(logging.ERROR, logger="casedb"):
        with pytest.raises(CaseApiError, match="Heading too long"):
            save_case(api, SaveRequest(case_id=2, changes={"caseHeading": "x" * 500}))
    assert "Error updating case 2" in caplog.text
