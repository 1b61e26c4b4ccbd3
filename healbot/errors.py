# healbot/errors.py


class HealbotError(Exception):
    """Base class for errors rendered as a JSON envelope."""

    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(HealbotError):
    status_code = 400
    default_message = "Invalid input"


class NotFoundError(HealbotError):
    # Missing and not-owned collapse into the same signal.
    status_code = 404
    default_message = "Not found"


class StorageError(HealbotError):
    status_code = 500
    default_message = "Could not save changes"
