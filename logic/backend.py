from model.models import Case
from logic.case_api import CaseApi
from logic.errors import CaseApiError
from logic.logger import get_logger
from logic.state import LoadResult, SaveRequest

log = get_logger(__name__)


def load_cases(api: CaseApi) -> LoadResult:
    """Fetch the full case list once. Failures come back as an empty result with an error."""
    try:
        cases = api.list_cases()
    except CaseApiError as e:
        log.error("Error fetching cases: %s", e)
        return LoadResult(cases=[], error=str(e))
    log.info("Loaded %d case(s)", len(cases))
    return LoadResult(cases=cases)


def save_case(api: CaseApi, request: SaveRequest) -> Case:
    log.debug("Request body for case %s: %s", request.case_id, request.changes)
    try:
        updated = api.update_case(request.case_id, request.changes)
    except CaseApiError as e:
        log.error("Error updating case %s: %s", request.case_id, e)
        raise
    log.info("Updated case %s (%s)", updated.id, ", ".join(sorted(request.changes)))
    return updated
