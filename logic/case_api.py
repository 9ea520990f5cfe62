from typing import Any, Dict, List, Optional

import httpx

from logic.config import Settings
from logic.errors import CaseApiError
from model.models import Case

UPDATE_FAILED = "Failed to update the case"


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return fallback


class CaseApi:
    """Thin client for the case backend: list all cases, update one."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or Settings.from_env()
        self.base_url = self.settings.api_url
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self.settings.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "CaseApi":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    def list_cases(self) -> List[Case]:
        """
        GET /case_list/ and decode the `cases` array.

        A body without `cases` is an empty list; anything else that does not
        look like a list of case objects is an error.
        """
        response = self._send("GET", "/case_list/")
        if not response.is_success:
            raise CaseApiError(
                f"Failed to fetch data (HTTP {response.status_code})",
                status_code=response.status_code,
            )
        body = self._json(response)
        if not isinstance(body, dict):
            raise CaseApiError("Case list response is not a JSON object")
        raw_cases = body.get("cases") or []
        if not isinstance(raw_cases, list):
            raise CaseApiError("'cases' in case list response is not a list")
        try:
            return [Case.from_dict(item) for item in raw_cases]
        except ValueError as e:
            raise CaseApiError(f"Malformed case in list: {e}") from e

    def update_case(self, case_id: Any, changes: Dict[str, Any]) -> Case:
        """POST the changed fields and return the backend's updated case."""
        response = self._send("POST", f"/case_update/{case_id}/", json=changes)
        if not response.is_success:
            raise CaseApiError(
                _error_message(response, UPDATE_FAILED),
                status_code=response.status_code,
            )
        try:
            return Case.from_dict(self._json(response))
        except ValueError as e:
            raise CaseApiError(f"{UPDATE_FAILED}: malformed response ({e})") from e

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _send(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> httpx.Response:
        try:
            return self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise CaseApiError(f"{method} {self.base_url}{path} failed: {e}") from e

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise CaseApiError("Response body is not valid JSON", status_code=response.status_code) from e
