"""Shared fixtures: sample cases and a CaseApi wired to an in-process fake backend."""

import json

import httpx
import pytest

from logic.case_api import CaseApi
from logic.config import Settings

BASE_URL = "http://cases.test"


@pytest.fixture
def case_dicts() -> list[dict]:
    """Three cases as the backend serializes them."""
    return [
        {
            "id": 1,
            "caseHeading": "Unpaid wages",
            "query": "Employer withheld two months of salary.",
            "applicableArticle": "Article 23",
            "description": "Worker at a textile unit, no written contract.",
            "status": "assigned",
            "tags": "labour, wages",
        },
        {
            "id": 2,
            "caseHeading": "Land dispute",
            "query": "Neighbour encroached on ancestral plot.",
            "applicableArticle": "Article 300A",
            "description": "",
            "status": "under-investigation",
            "tags": ["property", "civil"],
        },
        {
            "id": 3,
            "caseHeading": "Police inaction",
            "query": "FIR not registered after theft.",
            "applicableArticle": None,
            "description": "Complaint filed at local station.",
            "status": "closed",
            "tags": "criminal",
        },
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url=BASE_URL, timeout=5.0, log_level="DEBUG")


class FakeBackend:
    """Records requests and answers them with a handler function."""

    def __init__(self, handler):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def json_bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests if r.content]


@pytest.fixture
def make_api(settings):
    """Build a CaseApi whose requests go to `handler` instead of the network."""
    apis = []

    def factory(handler):
        backend = FakeBackend(handler)
        api = CaseApi(settings, transport=httpx.MockTransport(backend))
        apis.append(api)
        return api, backend

    yield factory
    for api in apis:
        api.close()
