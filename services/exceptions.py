"""Typed failures raised by the records services.

Every create validates before writing, so a raised error means nothing was
stored. ``status_code`` is what the HTTP layer answers with.
"""


class RecordsError(Exception):
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {
            "status": "error",
            "error": type(self).__name__,
            "message": self.message,
        }


class DuplicateKey(RecordsError):
    """Primary key already taken on an explicit-id insert."""
    status_code = 409


class UnknownReference(RecordsError):
    """A foreign key points at a row that does not exist."""
    status_code = 422


class InvalidArgument(RecordsError):
    status_code = 422


class DuplicateEnrollment(RecordsError):
    status_code = 409


class NotFound(RecordsError):
    status_code = 404
