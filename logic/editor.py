from typing import Any, Protocol

from logic.backend import save_case
from logic.case_api import CaseApi
from logic.errors import CaseApiError, InvalidTransition, SaveRejected
from logic.logger import get_logger
from logic.state import CaseBoard
from logic.tasks import BackgroundTask, TaskResult

log = get_logger(__name__)

SAVED = "Case updated successfully!"
RETRY = "Please try again."


class EditorView(Protocol):
    def saving_changed(self, saving: bool) -> None: ...
    def session_closed(self) -> None: ...
    def cases_changed(self) -> None: ...
    def show_warning(self, message: str) -> None: ...
    def show_info(self, message: str) -> None: ...
    def show_error(self, message: str) -> None: ...


class CaseEditor:
    """
    Save round-trip for the board's open case.

    Validation and diffing happen on the board; this sends the update in the
    background and tells the view what changed once the backend answers.
    """

    def __init__(self, board: CaseBoard, api: CaseApi, tasks: BackgroundTask, view: EditorView):
        self.board = board
        self.api = api
        self.tasks = tasks
        self.view = view

    def save(self) -> Any:
        try:
            request = self.board.prepare_save()
        except SaveRejected as e:
            self.view.show_warning(str(e))
            return None
        except InvalidTransition as e:
            log.debug("Save ignored: %s", e)
            return None
        self.view.saving_changed(True)
        return self.tasks.submit(lambda: save_case(self.api, request), self._on_saved, name="save")

    def _on_saved(self, result: TaskResult) -> None:
        if result.ok:
            self.board.finish_save(result.value)
            if self.board.session is None:
                self.view.session_closed()
            else:
                self.view.saving_changed(False)
            self.view.cases_changed()
            self.view.show_info(SAVED)
            return

        self.board.fail_save()
        self.view.saving_changed(False)
        if isinstance(result.error, CaseApiError):
            reason = result.error.message
        else:
            log.exception("Case save crashed", exc_info=result.error)
            reason = "Failed to update the case"
        self.view.show_error(f"{reason}\n\n{RETRY}")
