from typing import Optional


class CaseDatabaseError(Exception):
    """Base class for errors raised by the case database client."""


class CaseApiError(CaseDatabaseError):
    """The backend could not be reached, refused the request, or sent junk."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidTransition(CaseDatabaseError):
    pass


class SaveRejected(CaseDatabaseError):
    """Save was refused before anything was sent to the backend."""


class DraftValidationError(SaveRejected):
    pass


class NoChangesError(SaveRejected):
    pass
