"""
View state for the case database page.

`CaseBoard` holds everything the page shows: the case collection, how the
initial load went, and the (at most one) open edit session. Every user action
and every completed backend call maps to one method here, so the editor state
machine can be driven without any widgets:

    closed --open_details--> viewing <--toggle_editing--> editing
    closed --open_editor---> editing --prepare_save/finish_save--> closed
    viewing|editing --close--> closed
"""
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from logic.errors import DraftValidationError, InvalidTransition, NoChangesError
from model.models import EDITABLE_FIELDS, REQUIRED_FIELDS, Case


class LoadStatus(enum.Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class EditorMode(enum.Enum):
    CLOSED = "closed"
    VIEWING = "viewing"
    EDITING = "editing"


@dataclass
class LoadResult:
    cases: List[Case]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class EditSession:
    case_id: Any
    original: Case
    draft: Dict[str, str]
    editing: bool = False
    saving: bool = False


@dataclass
class SaveRequest:
    case_id: Any
    changes: Dict[str, str]


def compute_changes(draft: Dict[str, str], original: Case) -> Dict[str, str]:
    """Editable fields whose draft value differs from the case as opened."""
    before = original.editable_values()
    return {name: draft[name] for name in EDITABLE_FIELDS if name in draft and draft[name] != before[name]}


def missing_required(draft: Dict[str, str]) -> List[str]:
    return [name for name in REQUIRED_FIELDS if not draft.get(name)]


@dataclass
class CaseBoard:
    cases: List[Case] = field(default_factory=list)
    load_status: LoadStatus = LoadStatus.LOADING
    load_error: Optional[str] = None
    session: Optional[EditSession] = None
    # the session whose update is on the wire; may outlive a close()
    pending_save: Optional[EditSession] = None

    # ---------- loading ----------
    def finish_load(self, result: LoadResult) -> None:
        if result.ok:
            self.cases = list(result.cases)
            self.load_status = LoadStatus.LOADED
            self.load_error = None
        else:
            self.cases = []
            self.load_status = LoadStatus.FAILED
            self.load_error = result.error

    # ---------- queries ----------
    @property
    def mode(self) -> EditorMode:
        if self.session is None:
            return EditorMode.CLOSED
        return EditorMode.EDITING if self.session.editing else EditorMode.VIEWING

    @property
    def is_saving(self) -> bool:
        return self.pending_save is not None

    @property
    def active_case(self) -> Optional[Case]:
        return self.session.original if self.session else None

    def find(self, case_id: Any) -> Case:
        for case in self.cases:
            if case.id == case_id:
                return case
        raise KeyError(f"Case {case_id!r} is not in the collection")

    # ---------- editor ----------
    def open_details(self, case_id: Any) -> EditSession:
        return self._open(case_id, editing=False)

    def open_editor(self, case_id: Any) -> EditSession:
        return self._open(case_id, editing=True)

    def _open(self, case_id: Any, editing: bool) -> EditSession:
        case = self.find(case_id)
        self.session = EditSession(
            case_id=case.id,
            original=case,
            draft=case.editable_values(),
            editing=editing,
        )
        return self.session

    def toggle_editing(self) -> bool:
        session = self._require_session("toggle editing")
        session.editing = not session.editing
        return session.editing

    def update_field(self, name: str, value: str) -> None:
        session = self._require_session("edit a field")
        if name not in EDITABLE_FIELDS:
            raise KeyError(f"{name!r} is not an editable case field")
        session.draft[name] = value

    def close(self) -> None:
        self.session = None

    # ---------- saving ----------
    def prepare_save(self) -> SaveRequest:
        """Validate the draft and return the update to send; marks the session saving."""
        session = self._require_session("save")
        if not session.editing:
            raise InvalidTransition("Cannot save while viewing; switch to edit mode first")
        if self.pending_save is not None:
            raise InvalidTransition("A save is already in progress")
        if missing_required(session.draft):
            raise DraftValidationError("Please fill in all required fields.")
        changes = compute_changes(session.draft, session.original)
        if not changes:
            raise NoChangesError("No changes to update.")
        session.saving = True
        self.pending_save = session
        return SaveRequest(case_id=session.case_id, changes=changes)

    def finish_save(self, updated: Case) -> bool:
        """Merge the backend's copy of the case and close the session.

        Returns False when no entry carries the returned id.
        """
        replaced = False
        merged = []
        for case in self.cases:
            if case.id == updated.id:
                merged.append(updated)
                replaced = True
            else:
                merged.append(case)
        self.cases = merged
        # a session opened after this save was sent stays open
        if self.session is not None and self.session is self.pending_save:
            self.session = None
        self._settle_save()
        return replaced

    def fail_save(self) -> None:
        # keep the draft so the user can retry
        self._settle_save()

    def _settle_save(self) -> None:
        if self.pending_save is not None:
            self.pending_save.saving = False
        self.pending_save = None

    def _require_session(self, action: str) -> EditSession:
        if self.session is None:
            raise InvalidTransition(f"Cannot {action}: no case is open")
        return self.session
