"""
Error taxonomy shared by the core services and the API layer.
"""


class BookstoreError(Exception):
    """Base class for every error the core reports to its callers."""

    default_message = "Bookstore operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(BookstoreError):
    default_message = "Requested record does not exist"


class ValidationError(BookstoreError):
    """
    Raised before any mutation happens, so no partial state is left behind.
    `field` names the offending input when there is one.
    """
    default_message = "Invalid input"

    def __init__(self, message=None, field=None):
        super().__init__(message)
        self.field = field


class InvalidTransition(ValidationError):
    default_message = "Cannot change status to the requested value"


class ConcurrencyConflict(BookstoreError):
    default_message = "Record was modified or removed by another request"


class PersistenceError(BookstoreError):
    default_message = "Unable to persist changes"


class DeletionError(BookstoreError):
    default_message = "Unable to delete record"
